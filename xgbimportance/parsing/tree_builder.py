"""Rebuild per-tree node structures from a token stream."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from xgbimportance.errors import StructuralError, UnknownFeatureError
from xgbimportance.parsing.tokenizer import DumpToken

LEAF_MARKER = "Leaf"

# raw positional identifiers: "f12" (default fmap) or a bare "12"
FEATURE_INDEX_RE = re.compile(r"^f?(\d+)$")


@dataclass
class Node:
    tree: int
    node_id: int
    depth: int
    feature: str
    condition: Optional[str] = None
    gain: Optional[float] = None
    cover: Optional[float] = None
    parent: Optional[int] = None
    children: Tuple[int, ...] = ()
    missing: Optional[int] = None
    leaf_value: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return self.feature == LEAF_MARKER

    @property
    def key(self) -> str:
        return f"{self.tree}-{self.node_id}"


@dataclass
class Tree:
    index: int
    nodes: Dict[int, Node] = field(default_factory=dict)

    @property
    def root(self) -> Optional[Node]:
        return next(iter(self.nodes.values()), None)


def resolve_feature(raw: str, feature_names: Optional[Sequence[str]]) -> str:
    """Map a raw ``f<N>`` identifier to its name; names pass through unchanged."""
    if feature_names is None:
        return raw
    match = FEATURE_INDEX_RE.match(raw)
    if not match:
        return raw
    index = int(match.group(1))
    if index >= len(feature_names):
        raise UnknownFeatureError(
            f"Feature index {index} ({raw!r}) not covered by {len(feature_names)} feature names"
        )
    return feature_names[index]


class _TreeAssembler:
    """Accumulates the nodes of the tree currently being parsed."""

    def __init__(self, index: int):
        self.tree = Tree(index=index)
        self._path: List[Node] = []

    @property
    def is_empty(self) -> bool:
        return not self.tree.nodes

    def add(self, token: DumpToken, feature_names: Optional[Sequence[str]]) -> None:
        if token.node_id in self.tree.nodes:
            raise StructuralError(
                f"Line {token.line_no}: duplicate node id {token.node_id} in tree {self.tree.index}"
            )

        parent = None
        if token.depth > 0:
            if len(self._path) < token.depth:
                raise StructuralError(
                    f"Line {token.line_no}: node at depth {token.depth} has no parent at depth {token.depth - 1}"
                )
            parent = self._path[token.depth - 1]
            if parent.is_leaf:
                raise StructuralError(
                    f"Line {token.line_no}: node {token.node_id} indented under leaf {parent.node_id}"
                )
            if token.node_id not in parent.children:
                raise StructuralError(
                    f"Line {token.line_no}: node {token.node_id} is not a child of node {parent.node_id}"
                )

        if token.is_leaf:
            node = Node(
                tree=self.tree.index,
                node_id=token.node_id,
                depth=token.depth,
                feature=LEAF_MARKER,
                gain=token.gain,
                cover=token.cover,
                leaf_value=token.leaf_value,
            )
        else:
            node = Node(
                tree=self.tree.index,
                node_id=token.node_id,
                depth=token.depth,
                feature=resolve_feature(token.feature, feature_names),
                condition=token.condition,
                gain=token.gain,
                cover=token.cover,
                children=(token.yes, token.no),
                missing=token.missing,
            )
        if parent is not None:
            node.parent = parent.node_id

        self.tree.nodes[node.node_id] = node
        self._path = self._path[: token.depth] + [node]

    def finish(self) -> Tree:
        for node in self.tree.nodes.values():
            for child_id in node.children:
                child = self.tree.nodes.get(child_id)
                if child is None or child.parent != node.node_id:
                    raise StructuralError(
                        f"Tree {self.tree.index}: child {child_id} of node {node.node_id} is missing"
                    )
        return self.tree


def build_trees(
    tokens: Iterable[DumpToken], feature_names: Optional[Sequence[str]] = None
) -> Iterator[Tree]:
    """
    Yield one ``Tree`` per booster in the dump.

    A new tree starts at a ``booster[...]`` header, or at a depth-0 node when
    the current tree already has a root.
    """
    current: Optional[_TreeAssembler] = None
    count = 0

    for token in tokens:
        starts_tree = token.kind == "booster" or token.depth == 0
        if starts_tree:
            # an empty assembler (header just seen) takes the root
            if current is None or not current.is_empty:
                if current is not None:
                    yield current.finish()
                current = _TreeAssembler(count)
                count += 1
        elif current is None or current.is_empty:
            raise StructuralError(
                f"Line {token.line_no}: node at depth {token.depth} before any tree root"
            )

        if token.kind != "booster":
            current.add(token, feature_names)

    if current is not None and not current.is_empty:
        yield current.finish()
