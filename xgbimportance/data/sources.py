"""Tagged inputs for the importance computation and their single validation step."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

import numpy as np
import pandas as pd

from xgbimportance.data.dump_loader import DumpLoader, normalize_lines
from xgbimportance.errors import InvalidArgumentError


@runtime_checkable
class DumpProducer(Protocol):
    """Anything able to render a trained model as text-dump lines."""

    def dump_lines(self, with_stats: bool = True) -> Sequence[str]:
        ...


@dataclass(frozen=True)
class FilePathSource:
    path: Path

    def read_lines(self) -> List[str]:
        return DumpLoader(str(self.path)).load_lines()


@dataclass(frozen=True)
class InMemoryModelSource:
    model: DumpProducer

    def read_lines(self) -> List[str]:
        # gain/cover annotations are required downstream
        return normalize_lines(self.model.dump_lines(with_stats=True))


DumpSource = Union[FilePathSource, InMemoryModelSource]


@dataclass(frozen=True)
class ImportanceRequest:
    source: DumpSource
    feature_names: Optional[Tuple[str, ...]] = None


def validate_feature_names(feature_names) -> Optional[Tuple[str, ...]]:
    """``None`` or an ordered sequence of strings (list, tuple, pandas Index, numpy array); returns a tuple."""
    if feature_names is None:
        return None
    # positional order matters: sets and mappings are rejected
    if isinstance(feature_names, (str, bytes)) or not isinstance(feature_names, (Sequence, pd.Index, np.ndarray)):
        raise InvalidArgumentError(
            "feature_names: has to be a sequence of str, or None if the dump already contains feature names"
        )
    names = tuple(feature_names)
    bad = [name for name in names if not isinstance(name, str)]
    if bad:
        raise InvalidArgumentError(f"feature_names: non-string entries {bad[:5]}")
    return names


def build_request(feature_names=None, filename_dump=None, model=None) -> ImportanceRequest:
    """
    Validate the caller's arguments once and return a tagged request.

    Exactly one of ``filename_dump`` (path to a text dump) and ``model``
    (a ``DumpProducer``) must be given.
    """
    names = validate_feature_names(feature_names)

    if filename_dump is not None and model is not None:
        raise InvalidArgumentError("Pass either filename_dump or model, not both.")
    if filename_dump is None and model is None:
        raise InvalidArgumentError("Pass filename_dump (path to a model dump) or model.")

    if filename_dump is not None:
        if not isinstance(filename_dump, (str, os.PathLike)):
            raise InvalidArgumentError("filename_dump: has to be a path to the model dump file.")
        return ImportanceRequest(source=FilePathSource(Path(filename_dump)), feature_names=names)

    if not isinstance(model, DumpProducer):
        raise InvalidArgumentError(
            f"model: {type(model).__name__} cannot produce dump lines; "
            "wrap it in an adapter exposing dump_lines(with_stats=True)."
        )
    return ImportanceRequest(source=InMemoryModelSource(model), feature_names=names)
