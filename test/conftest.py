"""Shared fixtures for the CKD XGBoost classifier tests"""

import os
import sys

import numpy as np
import pandas as pd
import pytest

# Add the project root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))


@pytest.fixture
def toy_ckd_df():
    """Ten raw patient rows, six 'ckd' and four 'notckd', with text in pcv/wc/rc."""
    return pd.DataFrame({
        "id": list(range(1, 11)),
        "age": [48, 7, 62, 48, 51, 60, 68, 24, 52, 53],
        "bp": [80, 50, 80, 70, 80, 90, 70, np.nan, 100, 90],
        "rbc": [np.nan, "normal", "normal", "normal", "normal", np.nan, np.nan, "normal", "normal", "abnormal"],
        "htn": ["yes", "no", "no", "yes", "no", "yes", "no", "no", "yes", "yes"],
        "pcv": ["44", "38", "31", "32", "35", "39", "36", "\t43", "33", "?"],
        "wc": ["7800", "6000", "7500", "6700", "7300", "7800", "", "6900", "9600", "12100"],
        "rc": ["5.2", "4.4", "3.9", "3.8", "4.6", "4.4", "\t?", "5.0", "4.0", "3.7"],
        "classification": ["ckd", "ckd", "notckd", "ckd", "notckd", "ckd", "notckd", "ckd", "ckd", "notckd"],
    })


@pytest.fixture
def toy_ckd_csv(tmp_path, toy_ckd_df):
    """The toy rows written to a CSV file with a header row."""
    path = tmp_path / "kidney_disease.csv"
    toy_ckd_df.to_csv(path, index=False)
    return path


@pytest.fixture
def synthetic_features():
    """Numeric feature matrix with a learnable boolean label, including missing values."""
    rng = np.random.RandomState(0)
    n = 200
    hemo = rng.normal(12.5, 2.5, n)
    sc = rng.gamma(2.0, 1.0, n)
    X = pd.DataFrame({
        "hemo": hemo,
        "sc": sc,
        "htn_yes": rng.binomial(1, 0.4, n).astype(float),
        "noise": rng.normal(size=n),
    })
    y = pd.Series((hemo < 12.0) | (sc > 3.5), name="classification")
    X.loc[::17, "hemo"] = np.nan
    return X, y


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep experiment overrides from the calling shell out of the tests."""
    for name in ["CKD_DATA_PATH", "RANDOM_SEED", "TRAIN_FRACTION", "NUM_BOOST_ROUND", "OUTPUT_PATH"]:
        monkeypatch.delenv(name, raising=False)
