"""
Model Plotting Step for the CKD XGBoost Classifier

This module contains the ZenML step for the multi-tree diagram and the feature importance chart.
"""

import os
import xgboost as xgb
from zenml.steps import step
from typing import Dict

from src.util import ensure_output_dir
from src.model_visualization import (
    feature_importance_table,
    plot_feature_importance,
    plot_multi_trees
)


@step
def plot_model(
    booster: xgb.Booster,
    output_path: str = "results",
    importance_top_n: int = 20,
    dpi: int = 300
) -> Dict[str, str]:
    """
    Render the trees and the feature importance of the booster.

    Args:
        booster: Fitted booster
        output_path: Directory for the figures and the importance table
        importance_top_n: Number of features shown in the importance chart
        dpi: Resolution of the saved figures

    Returns:
        Dictionary with paths to the multi-tree plot, importance plot and importance CSV
    """
    try:
        print("\n=== Plotting trees and feature importance ===\n")

        plot_dir = ensure_output_dir(os.path.join(output_path, "plots"))

        importance = feature_importance_table(booster)
        importance_csv = plot_dir / "feature_importance.csv"
        importance.to_csv(importance_csv, index=False)
        print("Top features by gain:")
        print(importance.head(10).to_string(index=False))

        importance_png = plot_feature_importance(importance, plot_dir / "feature_importance.png",
                                                 top_n=importance_top_n, dpi=dpi)
        trees_png = plot_multi_trees(booster, plot_dir / "multi_trees.png", dpi=dpi)

        print(f"Saved plots to {plot_dir}")

        return {
            "multi_trees_plot": str(trees_png),
            "feature_importance_plot": str(importance_png),
            "feature_importance_csv": str(importance_csv),
        }

    except Exception as e:
        print(f"Error plotting model: {e}")
        raise
