"""Per-feature Gain / Cover / Frequency aggregation for tree ensembles."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from xgbimportance.parsing.flattener import FlatNode
from xgbimportance.parsing.tree_builder import LEAF_MARKER

TREE_IMPORTANCE_COLUMNS = ["Feature", "Gain", "Cover", "Frequency"]
METRIC_COLUMNS = ["Gain", "Cover", "Frequency"]


def empty_tree_importance() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Feature": pd.Series(dtype=object),
            "Gain": pd.Series(dtype=float),
            "Cover": pd.Series(dtype=float),
            "Frequency": pd.Series(dtype=float),
        }
    )


def aggregate_importance(flat_nodes: Iterable[FlatNode]) -> pd.DataFrame:
    """
    Group split nodes by feature and normalize each metric by its total.

    Returns a DataFrame with columns ``Feature, Gain, Cover, Frequency`` where
    every numeric column sums to 1.0, sorted by ``Gain`` descending. Ties keep
    the order in which features first appear in the dump.
    """
    # drain the stream first: a parse error must surface before any row exists
    rows = [
        (node.feature, node.gain, node.cover)
        for node in flat_nodes
        if node.feature != LEAF_MARKER
    ]
    if not rows:
        return empty_tree_importance()

    nodes = pd.DataFrame(rows, columns=["Feature", "Gain", "Cover"])
    grouped = (
        nodes.groupby("Feature", sort=False)
        .agg(Gain=("Gain", "sum"), Cover=("Cover", "sum"), Frequency=("Gain", "size"))
        .reset_index()
    )

    for col in METRIC_COLUMNS:
        grouped[col] = grouped[col].astype(float) / float(grouped[col].sum())

    result = grouped.sort_values("Gain", ascending=False, kind="mergesort")
    return result.reset_index(drop=True)[TREE_IMPORTANCE_COLUMNS]
