"""
Split raw XGBoost text-dump lines into structural fields.

Tree dumps look like::

    booster[0]:
    0:[f2<2.45] yes=1,no=2,missing=1,gain=63.8,cover=150
    	1:leaf=0.43,cover=50
    	2:[f3<1.75] yes=3,no=4,missing=3,gain=21.1,cover=100
    		3:leaf=0.21,cover=54
    		4:leaf=-0.4,cover=46

Each tab of indentation is one level of depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from xgbimportance.errors import FormatError, MissingStatsError

HEADER_RE = re.compile(r"^booster\[(?P<tree>\d+)\]:?$")
SPLIT_RE = re.compile(r"^(?P<node>\d+):\[(?P<split>[^\]]+)\]\s*(?P<attrs>.*)$")
LEAF_RE = re.compile(r"^(?P<node>\d+):leaf=(?P<attrs>.+)$")
# ``f2<2.45``, categorical ``f0:{0,1,3}`` or indicator ``f7``
SPLIT_TOKEN_RE = re.compile(r"^(?P<feature>.+?)(?:<(?P<threshold>.+)|:(?P<categories>\{.*\}))?$")

REQUIRED_STATS = ("gain", "cover")


@dataclass(frozen=True)
class DumpToken:
    """One tokenized dump line."""

    kind: str  # "booster", "split" or "leaf"
    line_no: int
    depth: int = 0
    node_id: Optional[int] = None
    feature: Optional[str] = None
    condition: Optional[str] = None
    yes: Optional[int] = None
    no: Optional[int] = None
    missing: Optional[int] = None
    gain: Optional[float] = None
    cover: Optional[float] = None
    leaf_value: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind == "leaf"


def _to_number(raw: str, line_no: int, what: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise FormatError(f"Line {line_no}: {what} is not numeric: {raw!r}") from None


def _to_node_id(raw: str, line_no: int, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise FormatError(f"Line {line_no}: {what} is not a node id: {raw!r}") from None


def parse_attributes(raw: str, line_no: int) -> Dict[str, str]:
    """Parse ``key=value`` pairs separated by commas."""
    attrs: Dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise FormatError(f"Line {line_no}: malformed attribute {item!r}")
        attrs[key.strip()] = value.strip()
    return attrs


def _split_token(split: str):
    match = SPLIT_TOKEN_RE.match(split)
    return match.group("feature"), match.group("threshold") or match.group("categories")


def tokenize_line(line: str, line_no: int) -> Optional[DumpToken]:
    """Tokenize one tree-dump line; blank lines give ``None``."""
    body = line.lstrip()
    indent = line[: len(line) - len(body)]
    body = body.strip()
    if not body:
        return None
    if indent.strip("\t"):
        raise FormatError(f"Line {line_no}: indentation must be tabs only, got {indent!r}")
    depth = len(indent)

    if HEADER_RE.match(body):
        return DumpToken(kind="booster", line_no=line_no)

    match = SPLIT_RE.match(body)
    if match:
        attrs = parse_attributes(match.group("attrs"), line_no)
        missing_stats = [k for k in REQUIRED_STATS if k not in attrs]
        if missing_stats:
            raise MissingStatsError(
                f"Line {line_no}: split node without {', '.join(missing_stats)}; "
                "dump the model with statistics enabled"
            )
        for key in ("yes", "no"):
            if key not in attrs:
                raise FormatError(f"Line {line_no}: split node without '{key}' child")
        feature, condition = _split_token(match.group("split"))
        return DumpToken(
            kind="split",
            line_no=line_no,
            depth=depth,
            node_id=_to_node_id(match.group("node"), line_no, "node"),
            feature=feature,
            condition=condition,
            yes=_to_node_id(attrs["yes"], line_no, "yes"),
            no=_to_node_id(attrs["no"], line_no, "no"),
            missing=_to_node_id(attrs["missing"], line_no, "missing") if "missing" in attrs else None,
            gain=_to_number(attrs["gain"], line_no, "gain"),
            cover=_to_number(attrs["cover"], line_no, "cover"),
        )

    match = LEAF_RE.match(body)
    if match:
        value, _, rest = match.group("attrs").partition(",")
        attrs = parse_attributes(rest, line_no)
        return DumpToken(
            kind="leaf",
            line_no=line_no,
            depth=depth,
            node_id=_to_node_id(match.group("node"), line_no, "node"),
            leaf_value=_to_number(value, line_no, "leaf value"),
            gain=_to_number(attrs["gain"], line_no, "gain") if "gain" in attrs else None,
            cover=_to_number(attrs["cover"], line_no, "cover") if "cover" in attrs else None,
        )

    raise FormatError(f"Line {line_no}: unrecognized tree dump line {body!r}")


def tokenize_tree_dump(lines: Iterable[str]) -> Iterator[DumpToken]:
    for line_no, line in enumerate(lines, start=1):
        token = tokenize_line(line, line_no)
        if token is not None:
            yield token


def tokenize_weight(line: str, line_no: int) -> float:
    """A linear-dump line after ``weight:`` holds one numeric literal."""
    return _to_number(line.strip(), line_no, "weight")
