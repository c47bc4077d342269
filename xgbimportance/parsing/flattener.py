"""Flatten rebuilt trees into a stream of (tree, feature, gain, cover) records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from xgbimportance.parsing.tree_builder import Tree


@dataclass(frozen=True)
class FlatNode:
    tree: int
    feature: str
    gain: Optional[float]
    cover: Optional[float]


def flatten_nodes(trees: Iterable[Tree]) -> Iterator[FlatNode]:
    """Single pass over ``trees``; parent/child structure is dropped."""
    for tree in trees:
        for node in tree.nodes.values():
            yield FlatNode(tree=tree.index, feature=node.feature, gain=node.gain, cover=node.cover)
