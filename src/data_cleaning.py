"""Data cleaning module for the CKD XGBoost classifier
Fixes numeric columns stored as text, strips stray whitespace and removes the identifier column.
Missing values are passed through, nothing is imputed here."""

import logging
import numpy as np
import pandas as pd
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


def strip_text(df: pd.DataFrame) -> pd.DataFrame:
    """
    Strip surrounding whitespace from every text cell.

    The public CKD file contains values such as "\\tno" and "ckd\\t". Cells that are
    empty after stripping become missing.

    Args:
        df: Input DataFrame

    Returns:
        New DataFrame with stripped text cells
    """
    result = df.copy()
    for col in result.columns:
        if pd.api.types.is_object_dtype(result[col]) or pd.api.types.is_string_dtype(result[col]):
            stripped = result[col].map(lambda v: v.strip() if isinstance(v, str) else v)
            result[col] = stripped.replace("", np.nan)
    return result


def coerce_numeric_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Convert columns holding numbers stored as text to a numeric dtype.

    Unparseable entries become NaN rather than raising.

    Args:
        df: Input DataFrame
        columns: Names of the columns to coerce

    Returns:
        New DataFrame with the listed columns numeric

    Raises:
        KeyError: if a listed column is not in the DataFrame
    """
    result = df.copy()
    for col in columns:
        if col not in result.columns:
            raise KeyError(f"Column '{col}' not found in dataset")
        result[col] = pd.to_numeric(result[col], errors='coerce')
    return result


def drop_identifier(df: pd.DataFrame, id_column: str = "id") -> pd.DataFrame:
    """Remove the identifier column if present."""
    if id_column not in df.columns:
        logger.warning(f"Identifier column '{id_column}' not found, nothing dropped")
        return df.copy()
    return df.drop(columns=[id_column])


class CKDDataCleaner:
    """Cleans the raw CKD dataset before shuffling and encoding"""

    def __init__(self, numeric_text_columns: Optional[Iterable[str]] = None,
                 id_column: str = "id", strip_whitespace: bool = True):
        """
        Args:
            numeric_text_columns: Columns holding numbers stored as text (default: pcv, wc, rc)
            id_column: Identifier column to drop (default: "id")
            strip_whitespace: Whether to strip whitespace from text cells first
        """
        if numeric_text_columns is None:
            numeric_text_columns = ["pcv", "wc", "rc"]
        self.numeric_text_columns = list(numeric_text_columns)
        self.id_column = id_column
        self.strip_whitespace = strip_whitespace
        # Number of values each coercion turned into NaN, filled by clean()
        self.coercion_report: Dict[str, int] = {}

    def clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Apply whitespace stripping, numeric coercion and identifier removal in that order.

        Args:
            df: Raw DataFrame as loaded from CSV

        Returns:
            Cleaned DataFrame
        """
        cleaned = strip_text(df) if self.strip_whitespace else df.copy()

        missing_before = {col: int(cleaned[col].isna().sum())
                          for col in self.numeric_text_columns if col in cleaned.columns}
        cleaned = coerce_numeric_columns(cleaned, self.numeric_text_columns)

        self.coercion_report = {}
        for col in self.numeric_text_columns:
            coerced = int(cleaned[col].isna().sum()) - missing_before[col]
            self.coercion_report[col] = coerced
            if coerced:
                logger.info(f"Coerced {coerced} non-numeric value(s) in '{col}' to missing")

        cleaned = drop_identifier(cleaned, self.id_column)
        logger.info(f"Cleaned dataset has {len(cleaned)} rows and {len(cleaned.columns)} columns")

        return cleaned
