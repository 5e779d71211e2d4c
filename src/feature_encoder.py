"""
Full-rank one-hot encoder for the CKD XGBoost classifier

Turns the cleaned feature frame into a numeric matrix. Every categorical column is
expanded in place into one indicator column per level, except the first (reference)
level, so the indicators of a field are never linearly dependent.
"""

import re
import logging
import numpy as np
import pandas as pd
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# xgboost refuses feature names containing these characters
INVALID_FEATURE_CHARS = re.compile(r"[\[\]<]")


def sanitize_feature_name(name: str) -> str:
    """Replace characters xgboost does not accept in feature names."""
    return INVALID_FEATURE_CHARS.sub("_", str(name))


def is_categorical(series: pd.Series) -> bool:
    """Text, category and boolean columns are encoded; all other numeric columns pass through."""
    return pd.api.types.is_bool_dtype(series) or not pd.api.types.is_numeric_dtype(series)


def category_levels(series: pd.Series) -> List[Any]:
    """Levels of a categorical column, in the order used for encoding."""
    if isinstance(series.dtype, pd.CategoricalDtype):
        return list(series.cat.categories)
    return sorted(series.dropna().unique().tolist(), key=str)


class FullRankEncoder:
    """
    One-hot encoder dropping the reference level of each categorical field.

    Levels are learned at fit() and reused at transform(). A missing value, or a level
    not seen at fit(), yields NaN in every indicator column of that field.
    """

    def __init__(self, prefix_sep: str = "_"):
        self.prefix_sep = prefix_sep
        self.columns_: Optional[List[str]] = None
        self.categorical_levels_: Dict[str, List[Any]] = {}
        self.feature_names_: List[str] = []

    @property
    def is_fitted(self) -> bool:
        return self.columns_ is not None

    def fit(self, df: pd.DataFrame) -> "FullRankEncoder":
        """
        Learn the column layout and the levels of every categorical column.

        Args:
            df: Feature frame without the label column

        Returns:
            self
        """
        self.columns_ = df.columns.tolist()
        self.categorical_levels_ = {}
        self.feature_names_ = []

        for col in self.columns_:
            if is_categorical(df[col]):
                levels = category_levels(df[col])
                self.categorical_levels_[col] = levels
                self.feature_names_.extend(
                    sanitize_feature_name(f"{col}{self.prefix_sep}{level}") for level in levels[1:]
                )
            else:
                self.feature_names_.append(sanitize_feature_name(col))

        self._check_unique_names()

        logger.info(f"Encoder fitted: {len(self.columns_)} input columns "
                    f"({len(self.categorical_levels_)} categorical) -> {len(self.feature_names_)} features")
        return self

    def _check_unique_names(self):
        """xgboost needs unique feature names; report which input columns collide."""
        sources: Dict[str, List[str]] = {}
        for col in self.columns_:
            if col in self.categorical_levels_:
                names = [sanitize_feature_name(f"{col}{self.prefix_sep}{level}")
                         for level in self.categorical_levels_[col][1:]]
            else:
                names = [sanitize_feature_name(col)]
            for name in names:
                sources.setdefault(name, []).append(str(col))

        collisions = {name: cols for name, cols in sources.items() if len(cols) > 1}
        if collisions:
            details = ", ".join(f"'{name}' from columns {cols}" for name, cols in collisions.items())
            raise ValueError(f"Encoded feature names are not unique: {details}")

    def _encode_column(self, series: pd.Series, levels: List[Any]) -> pd.DataFrame:
        # Unseen levels are masked first; pd.Categorical no longer accepts them
        values = series.astype(object)
        values = values.where(values.isin(levels) | values.isna())
        categorical = pd.Categorical(values, categories=levels)
        dummies = pd.get_dummies(categorical, prefix=series.name, prefix_sep=self.prefix_sep,
                                 drop_first=True, dtype=float)
        dummies.index = series.index
        dummies.columns = [sanitize_feature_name(name) for name in dummies.columns]
        if len(dummies.columns):
            missing = np.asarray(pd.isna(categorical))
            dummies.loc[missing, :] = np.nan
        return dummies

    def transform(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Encode a feature frame with the layout learned at fit().

        Args:
            df: Feature frame holding every column seen at fit()

        Returns:
            float64 DataFrame with columns feature_names_, same index as df
        """
        if not self.is_fitted:
            raise RuntimeError("FullRankEncoder must be fitted before calling transform()")

        missing_columns = [col for col in self.columns_ if col not in df.columns]
        if missing_columns:
            raise KeyError(f"Columns missing from input: {missing_columns}")

        parts = []
        for col in self.columns_:
            if col in self.categorical_levels_:
                parts.append(self._encode_column(df[col], self.categorical_levels_[col]))
            else:
                numeric = pd.to_numeric(df[col], errors='coerce').astype(float)
                parts.append(numeric.rename(sanitize_feature_name(col)).to_frame())

        if parts:
            encoded = pd.concat(parts, axis=1)
        else:
            encoded = pd.DataFrame(index=df.index)

        return encoded.reindex(columns=self.feature_names_).astype(float)

    def fit_transform(self, df: pd.DataFrame) -> pd.DataFrame:
        return self.fit(df).transform(df)
