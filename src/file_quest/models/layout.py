"""
layout.py

PURPOSE: Plain configuration trees (name/type/children) and the builders
that turn them into live Node trees and back.
DEPENDENCIES: pydantic, node.py

ARCHITECTURE NOTES:
Node trees are never serialized by reference. A hand-built world is stored
as a NamespaceLayout (JSON) and rebuilt with build_root(); a generated
world is stored as WorldState and regenerated from (domain, level, seed).

Layout files are validated against these models when loaded, the same way
game files are validated before play.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from file_quest.models.node import INVALID_NAME_CHARS, Node, NodeType


class NodeLayout(BaseModel):
    """One file or directory in a configuration tree."""

    name: str = Field(..., min_length=1)
    type: Literal["file", "directory"] = Field(default="file")
    children: list["NodeLayout"] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be blank")
        if any(char in v for char in INVALID_NAME_CHARS):
            raise ValueError(f"name contains a path separator: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_children(self) -> "NodeLayout":
        """Files are leaves."""
        if self.type == "file" and self.children:
            raise ValueError(f"File '{self.name}' cannot have children")
        return self


class SpecialItems(BaseModel):
    """Fixed key/boss placement for a hand-built world."""

    boss_location: str | None = Field(default=None)
    key_location: str | None = Field(default=None)


class NamespaceLayout(BaseModel):
    """
    A complete hand-built namespace.

    The root is always a directory named root_name; structure lists its
    children.
    """

    root_name: str = Field(..., min_length=1)
    structure: list[NodeLayout] = Field(default_factory=list)
    special_items: SpecialItems | None = Field(default=None)
    description: str = Field(default="")

    @field_validator("root_name")
    @classmethod
    def validate_root_name(cls, v: str) -> str:
        if any(char in v for char in INVALID_NAME_CHARS):
            raise ValueError(f"root_name contains a path separator: {v!r}")
        return v


def build_node(layout: NodeLayout) -> Node:
    """Recursively build a Node tree from a layout."""
    node = Node(layout.name, NodeType(layout.type))
    for child_layout in layout.children:
        node.add_child(build_node(child_layout))
    return node


def build_root(layout: NamespaceLayout) -> Node:
    """Build the root directory of a namespace layout with all its children."""
    root = Node(layout.root_name, NodeType.DIRECTORY)
    for child_layout in layout.structure:
        root.add_child(build_node(child_layout))
    return root


def layout_from_node(node: Node) -> NodeLayout:
    """Inverse of build_node: capture a live tree as plain data."""
    return NodeLayout(
        name=node.name,
        type=node.node_type.value,
        children=[layout_from_node(child) for child in node.children],
    )


def namespace_layout_from_root(
    root: Node,
    special_items: SpecialItems | None = None,
    description: str = "",
) -> NamespaceLayout:
    """Capture a whole tree, root included, as a NamespaceLayout."""
    return NamespaceLayout(
        root_name=root.name,
        structure=[layout_from_node(child) for child in root.children],
        special_items=special_items,
        description=description,
    )
