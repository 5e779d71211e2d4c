"""
Feature Encoding Step for the CKD XGBoost Classifier

This module contains the ZenML step for separating the label and one-hot encoding the features.
"""

import pandas as pd
from zenml.steps import step
from typing import Annotated, Tuple

from src.data_splitter import separate_label
from src.feature_encoder import FullRankEncoder


@step
def encode_features(
    shuffled_df: pd.DataFrame,
    label_column: str = "classification",
    positive_label: str = "ckd",
    negative_label: str = "notckd"
) -> Tuple[Annotated[pd.DataFrame, "features"], Annotated[pd.Series, "labels"]]:
    """
    Turn the shuffled dataset into a numeric feature matrix and a boolean label vector.

    Args:
        shuffled_df: Shuffled, cleaned DataFrame including the label column
        label_column: Name of the label column
        positive_label: Label value meaning disease present
        negative_label: Label value meaning disease absent

    Returns:
        Tuple containing:
        - features: float DataFrame, categorical columns full-rank one-hot encoded
        - labels: boolean Series aligned by position with features
    """
    try:
        print("\n=== Encoding features ===\n")

        features_df, labels = separate_label(shuffled_df, label_column, positive_label, negative_label)
        print(f"Label vector: {int(labels.sum())} {positive_label}, {int((~labels).sum())} {negative_label}")

        encoder = FullRankEncoder()
        features = encoder.fit_transform(features_df)

        print(f"Categorical columns: {list(encoder.categorical_levels_)}")
        print(f"Encoded {len(features_df.columns)} columns into {len(features.columns)} features")

        return features, labels

    except Exception as e:
        print(f"Error encoding features: {e}")
        raise
