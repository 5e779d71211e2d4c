"""
Model Training Step for the CKD XGBoost Classifier

This module contains the ZenML step for training the gradient-boosted tree classifier.
"""

import mlflow
import pandas as pd
import xgboost as xgb
from zenml.steps import step
from typing import Any, Dict, Optional

from src.model_trainer import train_booster


@step
def train_model(
    X_train: pd.DataFrame,
    y_train: pd.Series,
    num_boost_round: int = 10,
    xgb_params: Optional[Dict[str, Any]] = None,
    random_seed: int = 42
) -> xgb.Booster:
    """
    Train an XGBoost booster with the binary logistic objective.

    Args:
        X_train: Training feature matrix
        y_train: Boolean training labels
        num_boost_round: Number of boosting iterations
        xgb_params: Booster parameters from the experiment config
        random_seed: Seed passed to xgboost unless xgb_params sets one

    Returns:
        Fitted booster
    """
    try:
        print(f"\n=== Training XGBoost on {len(X_train)} rows, {len(X_train.columns)} features ===\n")

        params = dict(xgb_params or {})
        params.setdefault("seed", random_seed)
        print(f"Booster parameters: {params}")
        print(f"Boosting rounds: {num_boost_round}")

        booster = train_booster(X_train, y_train, num_boost_round=num_boost_round, params=params)

        # Check if there's an active MLflow run (managed by ZenML)
        active_run = mlflow.active_run()
        if active_run:
            print(f"Using existing MLflow run: {active_run.info.run_id}")
            mlflow.log_params({f"xgb_{key}": value for key, value in params.items()})
            mlflow.log_param("num_boost_round", num_boost_round)
            mlflow.log_param("n_train", len(X_train))
        else:
            print("No active MLflow run found. Skipping MLflow logging for training parameters.")

        return booster

    except Exception as e:
        print(f"Error training model: {e}")
        raise
