"""
Data Cleaning Step for the CKD XGBoost Classifier

This module contains the ZenML step for fixing mis-typed columns and removing the identifier.
"""

import pandas as pd
from zenml.steps import step
from typing import List, Optional

from src.data_cleaning import CKDDataCleaner


@step
def clean_data(
    raw_df: pd.DataFrame,
    numeric_text_columns: Optional[List[str]] = None,
    id_column: str = "id",
    strip_whitespace: bool = True
) -> pd.DataFrame:
    """
    Clean the raw CKD data.

    Args:
        raw_df: DataFrame as loaded from CSV
        numeric_text_columns: Columns holding numbers stored as text (default: pcv, wc, rc)
        id_column: Identifier column to drop
        strip_whitespace: Whether to strip whitespace from text cells

    Returns:
        Cleaned DataFrame; values that could not be coerced are left missing
    """
    try:
        print(f"\n=== Cleaning data with {len(raw_df)} rows and {len(raw_df.columns)} columns ===\n")

        cleaner = CKDDataCleaner(
            numeric_text_columns=numeric_text_columns,
            id_column=id_column,
            strip_whitespace=strip_whitespace
        )
        clean_df = cleaner.clean(raw_df)

        for col, count in cleaner.coercion_report.items():
            print(f"{col}: {count} value(s) coerced to missing")
        print(f"Missing values after cleaning: {int(clean_df.isna().sum().sum())}")
        print(f"Cleaned data shape: {clean_df.shape}")

        return clean_df

    except Exception as e:
        print(f"Error cleaning data: {e}")
        raise
