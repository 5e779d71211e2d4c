"""Tests for CSV ingestion and data cleaning"""

import numpy as np
import pandas as pd
import pytest

from src.data_ingester import CSVDataIngester
from src.data_cleaning import CKDDataCleaner, coerce_numeric_columns, drop_identifier, strip_text


class TestCSVDataIngester:

    def test_reads_header_and_rows(self, toy_ckd_csv):
        df = CSVDataIngester(str(toy_ckd_csv)).ingest()
        assert len(df) == 10
        assert "classification" in df.columns
        assert "id" in df.columns

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CSVDataIngester(str(tmp_path / "absent.csv")).ingest()


class TestCoercion:

    def test_numeric_text_columns_become_numeric(self, toy_ckd_df):
        df = coerce_numeric_columns(strip_text(toy_ckd_df), ["pcv", "wc", "rc"])
        for col in ["pcv", "wc", "rc"]:
            assert pd.api.types.is_numeric_dtype(df[col])

    def test_unparseable_values_become_missing(self):
        df = pd.DataFrame({"pcv": ["44", "?", "abc", "38"]})
        result = coerce_numeric_columns(df, ["pcv"])
        assert result["pcv"].isna().tolist() == [False, True, True, False]
        assert result["pcv"].iloc[0] == 44

    def test_input_is_not_modified(self, toy_ckd_df):
        coerce_numeric_columns(toy_ckd_df, ["pcv"])
        assert toy_ckd_df["pcv"].iloc[9] == "?"

    def test_missing_column_raises(self, toy_ckd_df):
        with pytest.raises(KeyError, match="hemo"):
            coerce_numeric_columns(toy_ckd_df, ["hemo"])


class TestStripText:

    def test_strips_and_blanks_become_missing(self):
        df = pd.DataFrame({"dm": ["\tno", " yes", "", "no"], "age": [1, 2, 3, 4]})
        result = strip_text(df)
        assert result["dm"].iloc[0] == "no"
        assert result["dm"].iloc[1] == "yes"
        assert pd.isna(result["dm"].iloc[2])
        assert result["age"].tolist() == [1, 2, 3, 4]


class TestDropIdentifier:

    def test_drops_id(self, toy_ckd_df):
        assert "id" not in drop_identifier(toy_ckd_df).columns

    def test_absent_id_is_ignored(self, toy_ckd_df):
        df = toy_ckd_df.drop(columns=["id"])
        assert drop_identifier(df).columns.tolist() == df.columns.tolist()


class TestCKDDataCleaner:

    def test_clean_pipeline(self, toy_ckd_df):
        cleaner = CKDDataCleaner()
        clean_df = cleaner.clean(toy_ckd_df)

        assert "id" not in clean_df.columns
        assert len(clean_df) == len(toy_ckd_df)
        assert pd.api.types.is_numeric_dtype(clean_df["pcv"])
        assert clean_df["pcv"].iloc[7] == 43
        assert np.isnan(clean_df["pcv"].iloc[9])
        assert np.isnan(clean_df["rc"].iloc[6])

    def test_coercion_report_counts_only_new_missing_values(self, toy_ckd_df):
        cleaner = CKDDataCleaner()
        cleaner.clean(toy_ckd_df)
        # the blank wc cell was already missing before coercion
        assert cleaner.coercion_report == {"pcv": 1, "wc": 0, "rc": 1}

    def test_custom_columns(self, toy_ckd_df):
        cleaner = CKDDataCleaner(numeric_text_columns=["pcv"], id_column="id")
        clean_df = cleaner.clean(toy_ckd_df)
        assert pd.api.types.is_numeric_dtype(clean_df["pcv"])
        assert not pd.api.types.is_numeric_dtype(clean_df["wc"])

    def test_missing_values_are_not_imputed(self, toy_ckd_df):
        clean_df = CKDDataCleaner().clean(toy_ckd_df)
        assert clean_df["bp"].isna().sum() == 1
        assert clean_df["rbc"].isna().sum() == 3
