"""Feature importance tables from XGBoost text dumps (tree ensembles or linear boosters)."""

from xgbimportance.errors import (
    CountMismatchError,
    FormatError,
    ImportanceError,
    InvalidArgumentError,
    MissingStatsError,
    StructuralError,
    UnknownFeatureError,
)
from xgbimportance.data.sources import (
    FilePathSource,
    ImportanceRequest,
    InMemoryModelSource,
    build_request,
)
from xgbimportance.pipelines.importance import (
    compute_importance,
    importance_from_request,
    tree_table,
    xgb_importance,
)

__version__ = "0.1.0"
