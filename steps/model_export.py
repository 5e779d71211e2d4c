"""
Model Export Step for the CKD XGBoost Classifier

This module contains the ZenML step for saving the trained booster, its feature names and
the test metrics for later use.
"""

import os
import mlflow
import xgboost as xgb
from zenml.steps import step
from typing import Any, Dict

from src.model_trainer import export_booster


@step
def model_export(
    booster: xgb.Booster,
    metrics: Dict[str, Any],
    output_dir: str = "results"
) -> Dict[str, str]:
    """
    Export a trained booster in xgboost's JSON format alongside its metadata.

    Args:
        booster: Fitted booster
        metrics: Test metrics from eval_model
        output_dir: Directory under which a "model" folder is created

    Returns:
        Dictionary containing paths to exported files
    """
    try:
        print("\n=== Exporting XGBoost Model ===\n")

        paths = export_booster(booster, metrics, os.path.join(output_dir, "model"))
        print(f"Saved booster to {paths['model_path']}")
        print(f"Saved feature names to {paths['feature_names_path']}")
        print(f"Saved metrics to {paths['metrics_path']}")

        # Check if there's an active MLflow run (managed by ZenML)
        if mlflow.active_run():
            for path in paths.values():
                mlflow.log_artifact(path)

        return paths

    except Exception as e:
        print(f"Error exporting model: {e}")
        raise
