"""Entry points: dump lines (or a validated request) in, importance table out."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from xgbimportance.data.dump_loader import normalize_lines
from xgbimportance.data.sources import ImportanceRequest, build_request, validate_feature_names
from xgbimportance.errors import FormatError
from xgbimportance.parsing.flattener import flatten_nodes
from xgbimportance.parsing.format_detector import DumpFormat, get_detector
from xgbimportance.parsing.tokenizer import tokenize_tree_dump
from xgbimportance.parsing.tree_builder import build_trees
from xgbimportance.pipelines.aggregator import aggregate_importance
from xgbimportance.pipelines.linear_extractor import extract_linear_weights

TREE_TABLE_COLUMNS = [
    "Tree", "Node", "ID", "Feature", "Split", "Yes", "No", "Missing",
    "Gain", "Cover", "Depth", "Parent",
]

# may hold None; kept as object so None survives string dtypes
NODE_REF_COLUMNS = ["Split", "Yes", "No", "Missing", "Parent"]


def tree_importance(lines: Sequence[str], feature_names: Optional[Sequence[str]] = None) -> pd.DataFrame:
    trees = build_trees(tokenize_tree_dump(lines), feature_names)
    return aggregate_importance(flatten_nodes(trees))


def compute_importance(
    lines: Sequence[str],
    feature_names: Optional[Sequence[str]] = None,
    detector: str = "position",
) -> pd.DataFrame:
    """
    Feature importance for one model dump.

    Tree dumps give ``Feature, Gain, Cover, Frequency`` (fractions of the
    totals, sorted by Gain); linear dumps give ``Feature, Weight``.
    """
    lines = normalize_lines(lines)
    names = validate_feature_names(feature_names)
    mode = get_detector(detector)(lines)
    if mode is DumpFormat.LINEAR:
        return extract_linear_weights(lines, names)
    return tree_importance(lines, names)


def importance_from_request(request: ImportanceRequest, detector: str = "position") -> pd.DataFrame:
    return compute_importance(request.source.read_lines(), request.feature_names, detector=detector)


def xgb_importance(feature_names=None, filename_dump=None, model=None, detector: str = "position") -> pd.DataFrame:
    """Validate the arguments, read the dump and compute its importance table."""
    request = build_request(feature_names=feature_names, filename_dump=filename_dump, model=model)
    return importance_from_request(request, detector=detector)


def _node_ref(tree: int, node_id: Optional[int]):
    return None if node_id is None else f"{tree}-{node_id}"


def tree_table(lines: Sequence[str], feature_names: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    One row per node of every tree, in dump order.

    Node references (``ID``, ``Yes``, ``No``, ``Missing``, ``Parent``) are
    rendered ``"<tree>-<node>"``.
    """
    lines = normalize_lines(lines)
    names = validate_feature_names(feature_names)
    if get_detector("scan")(lines) is DumpFormat.LINEAR:
        raise FormatError("Linear dumps have no tree structure")

    records = []
    for tree in build_trees(tokenize_tree_dump(lines), names):
        for node in tree.nodes.values():
            yes, no = node.children if node.children else (None, None)
            records.append(
                {
                    "Tree": tree.index,
                    "Node": node.node_id,
                    "ID": node.key,
                    "Feature": node.feature,
                    "Split": node.condition,
                    "Yes": _node_ref(tree.index, yes),
                    "No": _node_ref(tree.index, no),
                    "Missing": _node_ref(tree.index, node.missing),
                    "Gain": np.nan if node.gain is None else node.gain,
                    "Cover": np.nan if node.cover is None else node.cover,
                    "Depth": node.depth,
                    "Parent": _node_ref(tree.index, node.parent),
                }
            )
    table = pd.DataFrame(records, columns=TREE_TABLE_COLUMNS)
    for col in NODE_REF_COLUMNS:
        table[col] = pd.Series([r[col] for r in records], index=table.index, dtype=object)
    return table
