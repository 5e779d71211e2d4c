"""Model training module for the CKD XGBoost classifier
Thin wrapper around xgboost.train with the binary logistic objective, and JSON export of the result"""

import logging
import numpy as np
import pandas as pd
import xgboost as xgb
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional, Union

from src.util import ensure_output_dir, save_json_file

logger = logging.getLogger(__name__)

OBJECTIVE = "binary:logistic"


def build_dmatrix(X: pd.DataFrame, y: Optional[pd.Series] = None) -> xgb.DMatrix:
    """
    Wrap a feature matrix (and optional labels) in an xgboost DMatrix.

    NaN entries are treated as missing and routed down each split's default branch.
    """
    label = None if y is None else np.asarray(y, dtype=float)
    return xgb.DMatrix(
        X.to_numpy(dtype=float),
        label=label,
        missing=np.nan,
        feature_names=[str(col) for col in X.columns],
    )


def train_booster(X: pd.DataFrame, y: pd.Series, num_boost_round: int = 10,
                  params: Optional[Dict[str, Any]] = None) -> xgb.Booster:
    """
    Train a gradient-boosted tree classifier.

    Args:
        X: Training feature matrix
        y: Boolean training labels (True = disease present)
        num_boost_round: Number of boosting iterations
        params: Extra booster parameters (eta, max_depth, seed, ...)

    Returns:
        Fitted xgboost Booster
    """
    if num_boost_round < 1:
        raise ValueError(f"num_boost_round must be at least 1, got {num_boost_round}")
    if len(X) != len(y):
        raise ValueError(f"Feature matrix has {len(X)} rows but label vector has {len(y)}")

    booster_params = dict(params or {})
    objective = booster_params.setdefault("objective", OBJECTIVE)
    if objective != OBJECTIVE:
        raise ValueError(f"Only the '{OBJECTIVE}' objective is supported, got '{objective}'")

    dtrain = build_dmatrix(X, y)
    evals_result: Dict[str, Dict[str, list]] = {}
    booster = xgb.train(
        booster_params,
        dtrain,
        num_boost_round=num_boost_round,
        evals=[(dtrain, "train")],
        evals_result=evals_result,
        verbose_eval=False,
    )

    for metric, values in evals_result.get("train", {}).items():
        logger.info(f"Final train-{metric}: {values[-1]:.6f} after {num_boost_round} rounds")

    return booster


def predict_proba(booster: xgb.Booster, X: pd.DataFrame) -> np.ndarray:
    """Per-row probability of disease, each in [0, 1]."""
    return booster.predict(build_dmatrix(X))


def export_booster(booster: xgb.Booster, metrics: Dict[str, Any],
                   model_dir: Union[str, Path], timestamp: Optional[str] = None) -> Dict[str, str]:
    """
    Save a booster in xgboost's JSON format with its feature names and test metrics.

    Args:
        booster: Fitted booster
        metrics: Test metrics from evaluate_booster
        model_dir: Directory that receives the three files
        timestamp: Suffix of the file names (default: current time)

    Returns:
        Dictionary containing paths to exported files
    """
    model_dir = ensure_output_dir(model_dir)
    timestamp = timestamp or datetime.now().strftime("%Y%m%d_%H%M%S")

    model_path = model_dir / f"ckd_xgboost_{timestamp}.json"
    booster.save_model(str(model_path))

    features_path = save_json_file(model_dir / f"feature_names_{timestamp}.json",
                                   list(booster.feature_names or []))
    metrics_path = save_json_file(model_dir / f"metrics_{timestamp}.json", {
        "created_at": datetime.now().isoformat(),
        "xgboost_version": xgb.__version__,
        "num_boosted_rounds": booster.num_boosted_rounds(),
        **metrics,
    })
    logger.info(f"Exported booster to {model_path}")

    return {
        "model_path": str(model_path),
        "feature_names_path": str(features_path),
        "metrics_path": str(metrics_path),
    }
