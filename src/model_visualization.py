"""Visualization module for the CKD XGBoost classifier
Feature importance table and bar chart, and a multi-tree diagram that projects every
tree of the ensemble onto one view of split features by depth"""

import logging
import pandas as pd
import xgboost as xgb
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import seaborn as sns  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import Union  # noqa: E402

logger = logging.getLogger(__name__)

IMPORTANCE_COLUMNS = ["Feature", "Gain", "Cover", "Frequency"]


def feature_importance_table(booster: xgb.Booster) -> pd.DataFrame:
    """
    Importance of every feature used in at least one split.

    Gain, Cover and Frequency are each normalized to sum to 1 over the used features.

    Returns:
        DataFrame with columns Feature, Gain, Cover, Frequency sorted by Gain descending
    """
    gain = booster.get_score(importance_type="total_gain")
    if not gain:
        return pd.DataFrame(columns=IMPORTANCE_COLUMNS)

    cover = booster.get_score(importance_type="total_cover")
    weight = booster.get_score(importance_type="weight")

    features = list(gain)
    table = pd.DataFrame({
        "Feature": features,
        "Gain": [gain[f] for f in features],
        "Cover": [cover.get(f, 0.0) for f in features],
        "Frequency": [weight.get(f, 0.0) for f in features],
    })
    for col in ["Gain", "Cover", "Frequency"]:
        total = table[col].sum()
        table[col] = table[col] / total if total else 0.0

    return table.sort_values("Gain", ascending=False, kind="mergesort").reset_index(drop=True)


def tree_feature_depths(booster: xgb.Booster) -> pd.DataFrame:
    """
    Depth of every split node across all trees (root = 0).

    Returns:
        DataFrame with columns Tree, ID, Feature, Depth, Gain; leaves are excluded
    """
    trees = booster.trees_to_dataframe()
    records = []

    for tree_id, tree in trees.groupby("Tree", sort=True):
        nodes = tree.set_index("ID")
        root_id = tree.loc[tree["Node"] == 0, "ID"].iloc[0]
        depths = {root_id: 0}
        stack = [root_id]

        while stack:
            node_id = stack.pop()
            node = nodes.loc[node_id]
            if node["Feature"] == "Leaf":
                continue
            records.append({
                "Tree": int(tree_id),
                "ID": node_id,
                "Feature": node["Feature"],
                "Depth": depths[node_id],
                "Gain": float(node["Gain"]),
            })
            for child_id in (node["Yes"], node["No"]):
                depths[child_id] = depths[node_id] + 1
                stack.append(child_id)

    if not records:
        return pd.DataFrame(columns=["Tree", "ID", "Feature", "Depth", "Gain"])

    return pd.DataFrame(records).sort_values(["Tree", "Depth", "ID"]).reset_index(drop=True)


def plot_feature_importance(table: pd.DataFrame, output_path: Union[str, Path],
                            top_n: int = 20, dpi: int = 300) -> Path:
    """
    Horizontal bar chart of the Gain column of a feature importance table.

    Args:
        table: Output of feature_importance_table
        output_path: PNG file to write
        top_n: Number of most important features shown
        dpi: Resolution of the saved figure

    Returns:
        Path of the saved figure
    """
    output_path = Path(output_path)
    top = table.head(top_n).iloc[::-1]

    sns.set(style="whitegrid")
    fig, ax = plt.subplots(figsize=(10, max(4, 0.4 * len(top) + 1)))

    if top.empty:
        ax.text(0.5, 0.5, "No feature was used in any split", ha="center", va="center")
        ax.axis("off")
    else:
        ax.barh(top["Feature"], top["Gain"], color=sns.color_palette()[0])
        ax.set_xlabel("Relative gain")
        ax.set_ylabel("Feature")

    ax.set_title("Feature Importance")
    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Saved feature importance plot to {output_path}")
    return output_path


def plot_multi_trees(booster: xgb.Booster, output_path: Union[str, Path], dpi: int = 300) -> Path:
    """
    Project all trees of the ensemble onto one diagram.

    Each cell counts how often a feature is used for a split at a given depth,
    summed over every tree.

    Returns:
        Path of the saved figure
    """
    output_path = Path(output_path)
    depths = tree_feature_depths(booster)
    n_trees = booster.num_boosted_rounds()

    sns.set(style="whitegrid")

    if depths.empty:
        fig, ax = plt.subplots(figsize=(8, 4))
        ax.text(0.5, 0.5, f"All {n_trees} trees are single leaves", ha="center", va="center")
        ax.axis("off")
    else:
        counts = depths.pivot_table(index="Feature", columns="Depth", values="ID",
                                    aggfunc="count", fill_value=0).astype(int)
        # Features first used near the root come first
        first_depth = depths.groupby("Feature")["Depth"].min()
        total = counts.sum(axis=1)
        order = sorted(counts.index, key=lambda f: (first_depth[f], -total[f], f))
        counts = counts.loc[order]

        fig, ax = plt.subplots(figsize=(max(6, 1.2 * counts.shape[1] + 4), max(4, 0.4 * len(counts) + 1)))
        sns.heatmap(counts, annot=True, fmt="d", cmap="Blues", ax=ax,
                    cbar_kws={"label": "Split count"})
        ax.set_xlabel("Depth")
        ax.set_ylabel("Feature")

    ax.set_title(f"Split features by depth across {n_trees} trees")
    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Saved multi-tree plot to {output_path}")
    return output_path
