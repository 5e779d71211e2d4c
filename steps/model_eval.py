"""
Model Evaluation Step for the CKD XGBoost Classifier

This module contains the ZenML step for measuring the held-out misclassification rate.
"""

import mlflow
import pandas as pd
import xgboost as xgb
from zenml.steps import step
from typing import Any, Dict

from src.model_evaluator import evaluate_booster


@step
def eval_model(
    booster: xgb.Booster,
    X_test: pd.DataFrame,
    y_test: pd.Series,
    threshold: float = 0.5
) -> Dict[str, Any]:
    """
    Evaluate the booster on the test set.

    Args:
        booster: Fitted booster
        X_test: Test feature matrix
        y_test: Boolean test labels
        threshold: Probability above which a row is predicted as disease present

    Returns:
        Dictionary of test metrics (test_error, accuracy, confusion counts, auc)
    """
    try:
        print(f"\n=== Evaluating model on {len(X_test)} test rows ===\n")

        metrics = evaluate_booster(booster, X_test, y_test, threshold)

        print(f"test-error= {metrics['test_error']}")
        print(f"Accuracy: {metrics['accuracy']:.4f}")
        print(f"Confusion matrix: TP={metrics['tp']} FP={metrics['fp']} TN={metrics['tn']} FN={metrics['fn']}")
        if metrics["auc"] is not None:
            print(f"ROC AUC: {metrics['auc']:.4f}")

        # Check if there's an active MLflow run (managed by ZenML)
        active_run = mlflow.active_run()
        if active_run:
            print(f"Using existing MLflow run: {active_run.info.run_id}")
            for metric_name, value in metrics.items():
                if value is not None:
                    mlflow.log_metric(metric_name, float(value))
        else:
            print("No active MLflow run found. Skipping MLflow logging for test metrics.")

        return metrics

    except Exception as e:
        print(f"Error evaluating model: {e}")
        raise
