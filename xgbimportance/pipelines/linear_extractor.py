"""Weight table for linear boosters (``bias:`` / ``weight:`` dumps)."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from xgbimportance.errors import CountMismatchError, FormatError
from xgbimportance.parsing.format_detector import WEIGHT_MARKER
from xgbimportance.parsing.tokenizer import tokenize_weight

LINEAR_IMPORTANCE_COLUMNS = ["Feature", "Weight"]


def extract_linear_weights(
    lines: Sequence[str], feature_names: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """
    Read every line after ``weight:`` as one weight, in feature order.

    Without ``feature_names`` the features are labelled ``f0, f1, ...`` like
    the raw identifiers of tree dumps. Weights are returned as-is.
    """
    lines = list(lines)
    try:
        marker = lines.index(WEIGHT_MARKER)
    except ValueError:
        raise FormatError(f"Linear dump has no '{WEIGHT_MARKER}' marker") from None

    weights = [
        tokenize_weight(line, line_no)
        for line_no, line in enumerate(lines[marker + 1:], start=marker + 2)
        if line.strip()
    ]

    if feature_names is None:
        features = [f"f{i}" for i in range(len(weights))]
    elif len(feature_names) != len(weights):
        raise CountMismatchError(
            f"{len(feature_names)} feature names supplied for {len(weights)} weights"
        )
    else:
        features = list(feature_names)

    return pd.DataFrame({"Feature": features, "Weight": weights}, columns=LINEAR_IMPORTANCE_COLUMNS)
