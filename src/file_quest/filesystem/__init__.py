"""Virtual namespace: path resolution and shell-like navigation."""

from file_quest.filesystem.namespace import (
    ListResult,
    Namespace,
    NavigationResult,
    TreeNode,
    sample_layout,
    sample_namespace,
)
from file_quest.filesystem.resolver import PathResolver

__all__ = [
    "ListResult",
    "Namespace",
    "NavigationResult",
    "PathResolver",
    "TreeNode",
    "sample_layout",
    "sample_namespace",
]
