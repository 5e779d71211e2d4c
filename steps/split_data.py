"""
Data Splitting Step for the CKD XGBoost Classifier

This module contains the ZenML step for splitting data into training and test sets.
"""

import pandas as pd
from zenml.steps import step
from typing import Annotated, Tuple

from src.data_splitter import split_train_test


@step
def split_data(
    features: pd.DataFrame,
    labels: pd.Series,
    train_fraction: float = 0.7
) -> Tuple[
    Annotated[pd.DataFrame, "X_train"],
    Annotated[pd.Series, "y_train"],
    Annotated[pd.DataFrame, "X_test"],
    Annotated[pd.Series, "y_test"],
]:
    """
    Split the shuffled feature matrix and labels positionally.

    The first round(n * train_fraction) rows form the training set, the rest the test set.

    Args:
        features: Encoded feature matrix
        labels: Boolean labels aligned with features
        train_fraction: Fraction of rows used for training

    Returns:
        Tuple of (X_train, y_train, X_test, y_test)
    """
    try:
        print("\n=== Splitting data into training and test sets ===\n")

        split = split_train_test(features, labels, train_fraction)

        total_rows = len(features)
        print(f"Training set: {split.n_train} rows ({split.n_train / total_rows * 100:.2f}%)")
        print(f"Test set: {split.n_test} rows ({split.n_test / total_rows * 100:.2f}%)")
        print(f"Positive rate in training set: {split.y_train.mean():.3f}")
        print(f"Positive rate in test set: {split.y_test.mean():.3f}")

        return split.X_train, split.y_train, split.X_test, split.y_test

    except Exception as e:
        print(f"Error splitting data: {e}")
        raise
