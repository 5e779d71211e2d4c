"""Model evaluation module for the CKD XGBoost classifier
Held-out misclassification rate plus confusion counts and ROC AUC"""

import logging
import numpy as np
import pandas as pd
import xgboost as xgb
from typing import Any, Dict
from sklearn.metrics import confusion_matrix, roc_auc_score

from src.model_trainer import predict_proba

logger = logging.getLogger(__name__)


def misclassification_error(y_true, scores, threshold: float = 0.5) -> float:
    """
    Fraction of rows where (score > threshold) disagrees with the true label.

    Args:
        y_true: Boolean labels
        scores: Predicted probabilities
        threshold: Decision threshold (default: 0.5)

    Returns:
        Error rate in [0, 1]
    """
    y_true = np.asarray(y_true, dtype=bool)
    predicted = np.asarray(scores) > threshold
    if len(y_true) != len(predicted):
        raise ValueError(f"Got {len(y_true)} labels but {len(predicted)} predictions")
    if len(y_true) == 0:
        raise ValueError("Cannot compute an error rate on an empty test set")
    return float(np.mean(predicted != y_true))


def evaluate_booster(booster: xgb.Booster, X_test: pd.DataFrame, y_test: pd.Series,
                     threshold: float = 0.5) -> Dict[str, Any]:
    """
    Score the booster on held-out data.

    Args:
        booster: Fitted booster
        X_test: Test feature matrix
        y_test: Boolean test labels
        threshold: Decision threshold (default: 0.5)

    Returns:
        Dictionary with test_error, accuracy, n_test, tp, fp, tn, fn and auc
        (auc is None when the test set holds a single class)
    """
    scores = predict_proba(booster, X_test)
    y_true = np.asarray(y_test, dtype=bool)
    predicted = scores > threshold

    error = misclassification_error(y_true, scores, threshold)
    tn, fp, fn, tp = confusion_matrix(y_true, predicted, labels=[False, True]).ravel()

    if len(np.unique(y_true)) == 2:
        auc = float(roc_auc_score(y_true, scores))
    else:
        logger.warning("Test set holds a single class, ROC AUC is undefined")
        auc = None

    return {
        "test_error": error,
        "accuracy": 1.0 - error,
        "threshold": threshold,
        "n_test": int(len(y_true)),
        "tp": int(tp),
        "fp": int(fp),
        "tn": int(tn),
        "fn": int(fn),
        "auc": auc,
    }
