"""
Data Shuffling Step for the CKD XGBoost Classifier

This module contains the ZenML step for permuting rows with a fixed seed.
"""

import pandas as pd
from zenml.steps import step

from src.data_splitter import shuffle_rows


@step
def shuffle_data(clean_df: pd.DataFrame, random_seed: int = 42) -> pd.DataFrame:
    """
    Shuffle the rows of the cleaned dataset deterministically.

    Args:
        clean_df: Cleaned DataFrame
        random_seed: Seed for the permutation

    Returns:
        Shuffled DataFrame with a fresh index
    """
    try:
        print(f"\n=== Shuffling {len(clean_df)} rows with seed {random_seed} ===\n")
        return shuffle_rows(clean_df, random_seed)

    except Exception as e:
        print(f"Error shuffling data: {e}")
        raise
