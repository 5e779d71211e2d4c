"""Tests for training, evaluation and plotting of the booster"""

import json
import numpy as np
import pandas as pd
import pytest
import xgboost as xgb

from src.model_trainer import build_dmatrix, export_booster, predict_proba, train_booster
from src.model_evaluator import evaluate_booster, misclassification_error
from src.model_visualization import (
    IMPORTANCE_COLUMNS,
    feature_importance_table,
    plot_feature_importance,
    plot_multi_trees,
    tree_feature_depths,
)


@pytest.fixture
def booster(synthetic_features):
    X, y = synthetic_features
    return train_booster(X, y, num_boost_round=10, params={"max_depth": 3, "seed": 42})


@pytest.fixture
def stump_booster(synthetic_features):
    """A booster whose trees never split."""
    X, y = synthetic_features
    return train_booster(X, y, num_boost_round=2, params={"min_child_weight": 1e6})


class TestTrainBooster:

    def test_predictions_are_probabilities(self, booster, synthetic_features):
        X, _ = synthetic_features
        scores = predict_proba(booster, X)
        assert scores.shape == (len(X),)
        assert np.all((scores >= 0) & (scores <= 1))

    def test_learns_the_signal(self, booster, synthetic_features):
        X, y = synthetic_features
        assert misclassification_error(y, predict_proba(booster, X)) < 0.2

    def test_number_of_rounds(self, booster):
        assert booster.num_boosted_rounds() == 10

    def test_feature_names_are_kept(self, booster, synthetic_features):
        X, _ = synthetic_features
        assert booster.feature_names == X.columns.tolist()

    def test_other_objective_is_rejected(self, synthetic_features):
        X, y = synthetic_features
        with pytest.raises(ValueError, match="binary:logistic"):
            train_booster(X, y, params={"objective": "reg:squarederror"})

    def test_zero_rounds_is_rejected(self, synthetic_features):
        X, y = synthetic_features
        with pytest.raises(ValueError):
            train_booster(X, y, num_boost_round=0)

    def test_missing_values_reach_the_dmatrix(self, synthetic_features):
        X, y = synthetic_features
        dmatrix = build_dmatrix(X, y)
        assert dmatrix.num_row() == len(X)
        assert dmatrix.num_col() == len(X.columns)
        # missing entries are not stored
        assert dmatrix.num_nonmissing() == int(X.notna().sum().sum())


class TestMisclassificationError:

    def test_basic(self):
        error = misclassification_error([True, False, True], [0.9, 0.6, 0.4])
        assert error == pytest.approx(2 / 3)

    def test_threshold_is_strict(self):
        assert misclassification_error([False], [0.5]) == 0.0
        assert misclassification_error([True], [0.5]) == 1.0

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            misclassification_error([], [])

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            misclassification_error([True, False], [0.3])


class TestEvaluateBooster:

    def test_metrics(self, booster, synthetic_features):
        X, y = synthetic_features
        metrics = evaluate_booster(booster, X.iloc[150:], y.iloc[150:])

        assert metrics["n_test"] == 50
        assert metrics["tp"] + metrics["fp"] + metrics["tn"] + metrics["fn"] == 50
        assert metrics["accuracy"] == pytest.approx(1 - metrics["test_error"])
        assert metrics["test_error"] == pytest.approx((metrics["fp"] + metrics["fn"]) / 50)
        assert 0.0 <= metrics["auc"] <= 1.0

    def test_single_class_has_no_auc(self, booster, synthetic_features):
        X, y = synthetic_features
        positives = y[y].index[:5]
        metrics = evaluate_booster(booster, X.loc[positives], y.loc[positives])
        assert metrics["auc"] is None
        assert metrics["fp"] == 0
        assert metrics["tn"] == 0


class TestExportBooster:

    def test_round_trip(self, booster, synthetic_features, tmp_path):
        X, y = synthetic_features
        metrics = evaluate_booster(booster, X.iloc[150:], y.iloc[150:])
        paths = export_booster(booster, metrics, tmp_path / "model", timestamp="20240101_000000")

        assert paths["model_path"].endswith("ckd_xgboost_20240101_000000.json")
        reloaded = xgb.Booster(model_file=paths["model_path"])
        assert reloaded.num_boosted_rounds() == 10
        np.testing.assert_allclose(predict_proba(reloaded, X), predict_proba(booster, X), rtol=1e-6)

    def test_metadata_files(self, booster, synthetic_features, tmp_path):
        X, y = synthetic_features
        metrics = evaluate_booster(booster, X.iloc[150:], y.iloc[150:])
        paths = export_booster(booster, metrics, tmp_path / "model")

        with open(paths["feature_names_path"]) as file:
            assert json.load(file) == X.columns.tolist()
        with open(paths["metrics_path"]) as file:
            saved = json.load(file)
        assert saved["test_error"] == pytest.approx(metrics["test_error"])
        assert saved["num_boosted_rounds"] == 10


class TestFeatureImportance:

    def test_table_layout(self, booster):
        table = feature_importance_table(booster)
        assert table.columns.tolist() == IMPORTANCE_COLUMNS
        assert set(table["Feature"]) <= {"hemo", "sc", "htn_yes", "noise"}
        assert "hemo" in set(table["Feature"])

    def test_columns_sum_to_one(self, booster):
        table = feature_importance_table(booster)
        for col in ["Gain", "Cover", "Frequency"]:
            assert table[col].sum() == pytest.approx(1.0)

    def test_sorted_by_gain(self, booster):
        gains = feature_importance_table(booster)["Gain"].tolist()
        assert gains == sorted(gains, reverse=True)

    def test_no_splits_gives_empty_table(self, stump_booster):
        table = feature_importance_table(stump_booster)
        assert table.empty
        assert table.columns.tolist() == IMPORTANCE_COLUMNS


class TestTreeFeatureDepths:

    def test_depths(self, booster):
        depths = tree_feature_depths(booster)
        assert not depths.empty
        assert depths["Depth"].min() == 0
        assert depths["Depth"].max() < 3
        assert set(depths["Feature"]) <= set(booster.feature_names)

    def test_one_root_per_tree(self, booster):
        depths = tree_feature_depths(booster)
        roots = depths[depths["Depth"] == 0]
        assert roots["Tree"].is_unique
        assert roots["ID"].str.endswith("-0").all()

    def test_split_count_matches_frequency(self, booster):
        depths = tree_feature_depths(booster)
        weight = booster.get_score(importance_type="weight")
        counts = depths["Feature"].value_counts().to_dict()
        assert counts == {feature: int(value) for feature, value in weight.items()}

    def test_no_splits(self, stump_booster):
        assert tree_feature_depths(stump_booster).empty


class TestPlots:

    def test_plots_are_written(self, booster, tmp_path):
        importance_png = plot_feature_importance(feature_importance_table(booster),
                                                 tmp_path / "importance.png", dpi=50)
        trees_png = plot_multi_trees(booster, tmp_path / "trees.png", dpi=50)
        assert importance_png.exists() and importance_png.stat().st_size > 0
        assert trees_png.exists() and trees_png.stat().st_size > 0

    def test_plots_without_splits(self, stump_booster, tmp_path):
        plot_feature_importance(feature_importance_table(stump_booster), tmp_path / "importance.png", dpi=50)
        plot_multi_trees(stump_booster, tmp_path / "trees.png", dpi=50)
        assert (tmp_path / "importance.png").exists()
        assert (tmp_path / "trees.png").exists()
