from .format_detector import DumpFormat, detect_dump_format, scan_dump_format, get_detector
from .tokenizer import DumpToken, tokenize_line, tokenize_tree_dump, tokenize_weight
from .tree_builder import LEAF_MARKER, Node, Tree, build_trees
from .flattener import FlatNode, flatten_nodes
