from pathtrie.config.models import SegmentationConfig
from pathtrie.path_utils import split_path
from pathtrie.trie import PathTrie, PrefixExactMatch, build_path_trie

__version__ = "0.1.0"

__all__ = [
    "PathTrie",
    "PrefixExactMatch",
    "SegmentationConfig",
    "build_path_trie",
    "split_path",
]
