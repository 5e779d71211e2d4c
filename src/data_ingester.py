"""Data ingestion module for the CKD XGBoost classifier
This module handles the ingestion of the chronic kidney disease CSV file
"""

import os
import logging
import pandas as pd
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class DataIngester(ABC):
    """Base class for data ingesters"""

    @abstractmethod
    def ingest(self) -> pd.DataFrame:
        """Method to ingest data"""
        pass


class CSVDataIngester(DataIngester):
    """Ingests a single CSV file with a header row, output a raw dataframe"""

    def __init__(self, file_path: str, header_row: int = 0):
        """
        Initialize the CSV data ingester.

        Args:
            file_path: Path to the CSV file
            header_row: Row to use as the header (default: 0)
        """
        self.file_path = file_path
        self.header_row = header_row

    def ingest(self) -> pd.DataFrame:
        """
        Read the CSV file into a DataFrame.

        Parser errors from pandas (empty or malformed files) are not caught.

        Returns:
            DataFrame with one row per record
        """
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"CSV file not found: {self.file_path}")

        df = pd.read_csv(self.file_path, header=self.header_row, low_memory=False)
        logger.info(f"Loaded {self.file_path} with {len(df)} rows and {len(df.columns)} columns")

        return df
