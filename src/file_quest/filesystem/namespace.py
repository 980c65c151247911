"""
namespace.py

PURPOSE: Shell-like navigation and queries over a Node tree.
DEPENDENCIES: pydantic, node model, resolver

ARCHITECTURE NOTES:
A Namespace owns a fixed root and a mutable cursor (current_node), the
equivalent of a shell's working directory. Command handlers call
pwd/cd/ls/find/tree/get_node_by_path and branch on the returned result
objects: navigation failures are values, never exceptions, and a failed
operation never moves the cursor.

Two ".." semantics coexist on purpose:
- cd("..") as the whole argument is strict and fails at the root.
- ".." inside a longer path (e.g. "a/../..") is clamped by the resolver and
  silently stays at the root.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from file_quest.filesystem.resolver import HOME, PARENT, PathResolver
from file_quest.models.layout import NamespaceLayout, build_root
from file_quest.models.node import FileType, Node, NodeError, NodeType

logger = logging.getLogger(__name__)

ABOVE_ROOT = "cannot change directory above root"


@dataclass
class NavigationResult:
    """Result of a cursor move - either the new node or an error message."""

    success: bool
    error: str | None = None
    node: Node | None = None

    @classmethod
    def ok(cls, node: Node) -> "NavigationResult":
        return cls(success=True, node=node)

    @classmethod
    def fail(cls, message: str) -> "NavigationResult":
        return cls(success=False, error=message)


@dataclass
class ListResult:
    """Result of a directory listing."""

    success: bool
    files: list[Node] = field(default_factory=list)
    error: str | None = None
    detailed: bool = False  # presentation hint for the caller only

    @classmethod
    def ok(cls, files: list[Node], detailed: bool = False) -> "ListResult":
        return cls(success=True, files=files, detailed=detailed)

    @classmethod
    def fail(cls, message: str) -> "ListResult":
        return cls(success=False, error=message)


class TreeNode(BaseModel):
    """
    Read-only projection of a node for tree display.

    Directories always carry a children list. At the depth limit that list
    is empty even if the directory has content. Files carry None.
    """

    name: str
    node_type: NodeType
    file_type: FileType
    children: list["TreeNode"] | None = Field(default=None)

    def count(self) -> int:
        """Number of nodes in this projection, itself included."""
        return 1 + sum(child.count() for child in self.children or [])


def sort_key(node: Node) -> tuple[bool, str, str]:
    """Directories first, then by name ignoring case."""
    return (not node.is_directory, node.name.casefold(), node.name)


def visible_sorted(children: Iterable[Node], show_hidden: bool) -> list[Node]:
    """Filter dotfiles unless requested and apply the listing order."""
    nodes = [child for child in children if show_hidden or not child.is_hidden]
    return sorted(nodes, key=sort_key)


class Namespace:
    """
    A navigable tree with a working-directory cursor.

    The root is fixed for the lifetime of the namespace; the cursor always
    points at some node reachable from it.
    """

    def __init__(self, root: Node):
        """
        Initialize the namespace at its root.

        Args:
            root: Root directory of the tree

        Raises:
            NodeError: If root is a file
        """
        if not root.is_directory:
            raise NodeError("Root node must be a directory")
        self.root = root
        self.current_node = root
        self.resolver = PathResolver(root)

    @classmethod
    def from_layout(cls, layout: NamespaceLayout) -> "Namespace":
        """Build a namespace from a validated configuration tree."""
        return cls(build_root(layout))

    def pwd(self) -> str:
        """Absolute path of the cursor."""
        return self.current_node.get_path()

    def get_node_by_path(self, path: str) -> Node | None:
        """Resolve a path relative to the cursor; None if it does not exist."""
        return self.resolver.resolve(path, self.current_node)

    def cd(self, path: str | None = None) -> NavigationResult:
        """
        Change the cursor.

        Args:
            path: Target path. None, "" or "~" go to the root. ".." alone
                goes to the parent and fails at the root.

        Returns:
            NavigationResult; on failure the cursor is unchanged
        """
        if not path or path == HOME:
            return self._move(self.root)

        if path == PARENT:
            parent = self.current_node.parent
            if self.current_node is self.root or parent is None:
                return NavigationResult.fail(ABOVE_ROOT)
            return self._move(parent)

        target = self.get_node_by_path(path)
        if target is None:
            return NavigationResult.fail(f"no such directory: {path}")
        if not target.is_directory:
            return NavigationResult.fail(f"not a directory: {path}")
        return self._move(target)

    def _move(self, node: Node) -> NavigationResult:
        self.current_node = node
        logger.debug(f"cd -> {node.get_path()}")
        return NavigationResult.ok(node)

    def ls(
        self,
        path: str | None = None,
        show_hidden: bool = False,
        detailed: bool = False,
    ) -> ListResult:
        """
        List the children of the cursor or of the directory at path.

        Args:
            path: Optional directory to list instead of the cursor
            show_hidden: Include entries whose name starts with "."
            detailed: Presentation hint, does not change which nodes are returned

        Returns:
            ListResult with directories first, then files, each by name
        """
        target = self.current_node
        if path:
            node = self.get_node_by_path(path)
            if node is None:
                return ListResult.fail(f"no such path: {path}")
            if not node.is_directory:
                return ListResult.fail(f"not a directory: {path}")
            target = node

        return ListResult.ok(visible_sorted(target.children, show_hidden), detailed=detailed)

    def find(self, term: str) -> list[Node]:
        """
        Case-insensitive substring search over every node name.

        Traversal is pre-order from the root (not the cursor). An empty term
        matches everything.
        """
        needle = term.lower()
        return [node for node in self.root.iter_tree() if needle in node.name.lower()]

    def walk(self) -> Iterator[Node]:
        """Every node in the tree, pre-order from the root."""
        return self.root.iter_tree()

    def tree(self, max_depth: int | None = None, show_hidden: bool = False) -> TreeNode:
        """
        Project the subtree under the cursor.

        Args:
            max_depth: Generations below the cursor to include. Directories
                at the limit are emitted with an empty children list.
                None means unlimited; 0 is a real limit and yields the
                cursor alone with children=[] (it is not treated as unset).
            show_hidden: Include dotfiles

        Returns:
            TreeNode rooted at the cursor
        """
        return self._project(self.current_node, 0, max_depth, show_hidden)

    def _project(
        self,
        node: Node,
        depth: int,
        max_depth: int | None,
        show_hidden: bool,
    ) -> TreeNode:
        projection = TreeNode(name=node.name, node_type=node.node_type, file_type=node.file_type)
        if not node.is_directory:
            return projection

        if max_depth is not None and depth >= max_depth:
            projection.children = []
            return projection

        projection.children = [
            self._project(child, depth + 1, max_depth, show_hidden)
            for child in visible_sorted(node.children, show_hidden)
        ]
        return projection

    def __repr__(self) -> str:
        return f"<Namespace root={self.root.name!r} cwd={self.pwd()!r}>"


SAMPLE_LAYOUT = {
    "root_name": "projects",
    "description": "Fixed demo tree with two project directories",
    "structure": [
        {
            "name": "game-studio",
            "type": "directory",
            "children": [
                {
                    "name": "src",
                    "type": "directory",
                    "children": [
                        {"name": "main.js"},
                        {"name": "utils.ts"},
                        {"name": ".hidden.py"},
                    ],
                },
                {
                    "name": "config",
                    "type": "directory",
                    "children": [{"name": "config.json"}, {"name": "settings.yaml"}],
                },
                {"name": "docs", "type": "directory"},
                {"name": "README.md"},
                {"name": "build.exe"},
            ],
        },
        {
            "name": "tech-startup",
            "type": "directory",
            "children": [
                {
                    "name": "api",
                    "type": "directory",
                    "children": [{"name": "server.js"}, {"name": "routes.ts"}],
                },
                {"name": "tests", "type": "directory", "children": [{"name": "test.js"}]},
                {"name": "package.json"},
            ],
        },
    ],
    "special_items": {
        "boss_location": "/projects/game-studio",
        "key_location": "/projects/tech-startup/package.json",
    },
}


def sample_layout() -> NamespaceLayout:
    """The fixed demo layout (validated copy)."""
    return NamespaceLayout.model_validate(SAMPLE_LAYOUT)


def sample_namespace() -> Namespace:
    """A fresh namespace over the fixed demo tree."""
    return Namespace.from_layout(sample_layout())
