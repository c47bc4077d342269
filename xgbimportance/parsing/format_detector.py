"""Decide whether a dump holds a tree ensemble or a linear booster."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Sequence

from xgbimportance.errors import FormatError, InvalidArgumentError

BIAS_MARKER = "bias:"
WEIGHT_MARKER = "weight:"


class DumpFormat(str, Enum):
    TREE = "tree"
    LINEAR = "linear"


def detect_dump_format(lines: Sequence[str]) -> DumpFormat:
    """
    Position-based detection: a linear dump has ``bias:`` as its second line
    (the first one is the ``booster[0]:`` header).
    """
    if len(lines) < 2:
        raise FormatError(f"Dump too short to detect its format: {len(lines)} line(s)")
    if lines[1] == BIAS_MARKER:
        return DumpFormat.LINEAR
    return DumpFormat.TREE


def scan_dump_format(lines: Sequence[str]) -> DumpFormat:
    """Content-based detection, independent of header lines."""
    if not lines:
        raise FormatError("Empty dump")
    for line in lines:
        stripped = line.strip()
        if stripped == BIAS_MARKER:
            return DumpFormat.LINEAR
        # first node line (``0:[...`` or ``0:leaf=``) settles it
        if stripped[:1].isdigit() and ":" in stripped:
            return DumpFormat.TREE
    return DumpFormat.TREE


DETECTORS: Dict[str, Callable[[Sequence[str]], DumpFormat]] = {
    "position": detect_dump_format,
    "scan": scan_dump_format,
}


def get_detector(name: str) -> Callable[[Sequence[str]], DumpFormat]:
    if name not in DETECTORS:
        raise InvalidArgumentError(f"Unsupported detector '{name}'. Use one of: {list(DETECTORS.keys())}")
    return DETECTORS[name]
