"""Domain models for the explorable namespace."""

from file_quest.models.layout import (
    NamespaceLayout,
    NodeLayout,
    SpecialItems,
    build_node,
    build_root,
    layout_from_node,
    namespace_layout_from_root,
)
from file_quest.models.node import (
    FileType,
    Node,
    NodeError,
    NodeType,
    NodeValidationError,
    classify_file_type,
)
from file_quest.models.state import SavedWorld, WorldState

__all__ = [
    "FileType",
    "NamespaceLayout",
    "Node",
    "NodeError",
    "NodeLayout",
    "NodeType",
    "NodeValidationError",
    "SpecialItems",
    "SavedWorld",
    "WorldState",
    "build_node",
    "build_root",
    "classify_file_type",
    "layout_from_node",
    "namespace_layout_from_root",
]
