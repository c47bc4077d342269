from .aggregator import TREE_IMPORTANCE_COLUMNS, aggregate_importance
from .linear_extractor import LINEAR_IMPORTANCE_COLUMNS, extract_linear_weights
from .importance import compute_importance, importance_from_request, tree_table, xgb_importance
