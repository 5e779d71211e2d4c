"""
Data Ingestion Step for the CKD XGBoost Classifier

This module contains the ZenML step for loading the chronic kidney disease CSV file.
"""

import pandas as pd
from zenml.steps import step

from src.data_ingester import CSVDataIngester


@step
def ingest_data(data_path: str) -> pd.DataFrame:
    """
    Load the CKD dataset from a CSV file with a header row.

    Args:
        data_path: Path to the CSV file

    Returns:
        Raw DataFrame, one row per patient
    """
    try:
        print(f"\n=== Loading CKD data from {data_path} ===\n")

        raw_df = CSVDataIngester(data_path).ingest()

        print(f"Loaded {len(raw_df)} rows and {len(raw_df.columns)} columns")
        print(f"Columns: {raw_df.columns.tolist()}")

        return raw_df

    except Exception as e:
        print(f"Error ingesting data: {e}")
        raise
