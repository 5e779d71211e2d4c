"""Shuffling, label separation and train/test splitting for the CKD XGBoost classifier

The feature frame and the label vector leave this module with a fresh RangeIndex after
the shuffle, so row i of one always belongs to row i of the other."""

import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass
class DataSplit:
    """Positional train/test split of a feature matrix and its labels"""
    X_train: pd.DataFrame
    y_train: pd.Series
    X_test: pd.DataFrame
    y_test: pd.Series

    @property
    def n_train(self) -> int:
        return len(self.X_train)

    @property
    def n_test(self) -> int:
        return len(self.X_test)


def shuffle_rows(df: pd.DataFrame, random_seed: int = 42) -> pd.DataFrame:
    """
    Permute the rows of a DataFrame deterministically.

    Args:
        df: Input DataFrame
        random_seed: Seed for the permutation; the same seed always gives the same order

    Returns:
        New DataFrame with rows permuted and the index reset
    """
    permutation = np.random.RandomState(random_seed).permutation(len(df))
    return df.iloc[permutation].reset_index(drop=True)


def separate_label(df: pd.DataFrame, label_column: str = "classification",
                   positive_label: str = "ckd",
                   negative_label: str = "notckd") -> Tuple[pd.DataFrame, pd.Series]:
    """
    Split the label column off the dataset and turn it into a boolean vector.

    Args:
        df: Dataset including the label column
        label_column: Name of the label column
        positive_label: Label value meaning disease present
        negative_label: Label value meaning disease absent

    Returns:
        Tuple of (feature DataFrame, boolean label Series aligned by position)

    Raises:
        KeyError: if the label column is missing
        ValueError: if a label is missing or outside {positive_label, negative_label}
    """
    if label_column not in df.columns:
        raise KeyError(f"Label column '{label_column}' not found in dataset")

    labels_text = df[label_column].map(lambda v: v.strip() if isinstance(v, str) else v)
    invalid = labels_text[~labels_text.isin([positive_label, negative_label])]
    if not invalid.empty:
        bad_values = sorted({str(v) for v in invalid})
        raise ValueError(
            f"Unexpected values in label column '{label_column}': {bad_values}. "
            f"Expected '{positive_label}' or '{negative_label}'."
        )

    labels = (labels_text == positive_label).astype(bool).rename(label_column)
    features = df.drop(columns=[label_column])

    logger.info(f"Separated {int(labels.sum())} '{positive_label}' and "
                f"{int((~labels).sum())} '{negative_label}' labels")

    return features, labels


def split_train_test(X: pd.DataFrame, y: pd.Series, train_fraction: float = 0.7) -> DataSplit:
    """
    Split rows positionally: the first round(n * train_fraction) rows train, the rest test.

    No stratification; shuffle beforehand.

    Args:
        X: Feature matrix
        y: Label vector aligned with X
        train_fraction: Fraction of rows used for training, strictly between 0 and 1

    Returns:
        DataSplit with train and test parts
    """
    if not 0 < train_fraction < 1:
        raise ValueError(f"train_fraction must be between 0 and 1, got {train_fraction}")
    if len(X) != len(y):
        raise ValueError(f"Feature matrix has {len(X)} rows but label vector has {len(y)}")

    n_train = int(round(len(X) * train_fraction))

    split = DataSplit(
        X_train=X.iloc[:n_train],
        y_train=y.iloc[:n_train],
        X_test=X.iloc[n_train:],
        y_test=y.iloc[n_train:],
    )
    logger.info(f"Split {len(X)} rows into {split.n_train} training and {split.n_test} test rows")

    return split
