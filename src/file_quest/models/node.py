"""
node.py

PURPOSE: Tree elements (files and directories) of the virtual namespace.
DEPENDENCIES: none (stdlib only)

ARCHITECTURE NOTES:
A Node is the single building block of an explorable world. Directories own
their children; each child keeps a weak back-reference to its parent so the
tree has exactly one strong owner (the root) and no ownership cycles.

Identity fields (name, node type, hidden flag, file type) are fixed at
construction. Only the parent/children links and the `interacted` flag
change afterwards. Reclassifying a node means building a new one.
"""

import weakref
from collections.abc import Iterator
from enum import Enum


class NodeError(Exception):
    """Invalid structural operation on a node (e.g. adding a child to a file)."""

    pass


class NodeValidationError(NodeError, ValueError):
    """Invalid node name."""

    pass


class NodeType(str, Enum):
    """Kind of tree element."""

    FILE = "file"
    DIRECTORY = "directory"


class FileType(str, Enum):
    """Gameplay classification of a file, derived from its extension."""

    MONSTER = "monster"  # program source: battle
    TREASURE = "treasure"  # structured config: open
    SAVE_POINT = "save_point"  # markdown: save / rest
    EVENT = "event"  # executables and scripts: execute
    EMPTY = "empty"  # anything else
    NONE = "none"  # directories


MONSTER_EXTENSIONS = frozenset(
    {".js", ".ts", ".py", ".java", ".cpp", ".c", ".h", ".cs", ".php", ".rb", ".go", ".rs"}
)
TREASURE_EXTENSIONS = frozenset({".json", ".yaml", ".yml", ".toml", ".ini", ".conf", ".cfg"})
SAVE_POINT_EXTENSIONS = frozenset({".md", ".markdown"})
EVENT_EXTENSIONS = frozenset(
    {".exe", ".bin", ".app", ".dmg", ".deb", ".rpm", ".msi", ".sh", ".bat"}
)

EXTENSION_TABLE: tuple[tuple[frozenset[str], FileType], ...] = (
    (MONSTER_EXTENSIONS, FileType.MONSTER),
    (TREASURE_EXTENSIONS, FileType.TREASURE),
    (SAVE_POINT_EXTENSIONS, FileType.SAVE_POINT),
    (EVENT_EXTENSIONS, FileType.EVENT),
)

INVALID_NAME_CHARS = ("/", "\\")


def get_extension(name: str) -> str:
    """
    Return the lowercase extension of a file name, including the dot.

    The extension starts at the last dot. A name ending in a dot, or with
    no dot at all, has no extension.
    """
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:].lower()


def classify_file_type(name: str, node_type: NodeType) -> FileType:
    """
    Classify a node by its name.

    Args:
        name: The node name (e.g. "config.JSON")
        node_type: FILE or DIRECTORY

    Returns:
        NONE for directories, otherwise the category whose extension table
        contains the name's extension, or EMPTY.
    """
    if node_type == NodeType.DIRECTORY:
        return FileType.NONE

    extension = get_extension(name)
    for extensions, file_type in EXTENSION_TABLE:
        if extension in extensions:
            return file_type
    return FileType.EMPTY


def validate_name(name: str) -> None:
    """Raise NodeValidationError unless name is a legal single path segment."""
    if not name or not name.strip():
        raise NodeValidationError("Node name cannot be empty")
    if any(char in name for char in INVALID_NAME_CHARS):
        raise NodeValidationError(f"Node name contains a path separator: {name!r}")


class Node:
    """
    A file or directory in the virtual namespace.

    Directories hold an ordered list of children. Files never have any.
    """

    def __init__(self, name: str, node_type: NodeType):
        """
        Create a detached node.

        Args:
            name: Non-empty name without path separators
            node_type: FILE or DIRECTORY

        Raises:
            NodeValidationError: If the name is empty or contains "/" or "\\"
        """
        validate_name(name)
        self._name = name
        self._node_type = NodeType(node_type)
        self._hidden = name.startswith(".")
        self._file_type = classify_file_type(name, self._node_type)
        self._parent: weakref.ReferenceType[Node] | None = None
        self._children: list[Node] = []
        self._interacted = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def node_type(self) -> NodeType:
        return self._node_type

    @property
    def file_type(self) -> FileType:
        return self._file_type

    @property
    def is_hidden(self) -> bool:
        return self._hidden

    @property
    def is_file(self) -> bool:
        return self._node_type == NodeType.FILE

    @property
    def is_directory(self) -> bool:
        return self._node_type == NodeType.DIRECTORY

    @property
    def parent(self) -> "Node | None":
        """The owning directory, or None for a root or detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def children(self) -> tuple["Node", ...]:
        """Direct children in insertion order (read-only view)."""
        return tuple(self._children)

    def add_child(self, child: "Node") -> None:
        """
        Append a child, detaching it from its previous parent first.

        Args:
            child: The node to adopt

        Raises:
            NodeError: If this node is a file, or child is this node or
                one of its ancestors
        """
        if self.is_file:
            raise NodeError(f"Cannot add a child to file '{self._name}'")
        if child is self or child.is_ancestor_of(self):
            raise NodeError(f"Cannot add '{child.name}' below itself")

        previous = child.parent
        if previous is not None:
            previous.remove_child(child)

        self._children.append(child)
        child._parent = weakref.ref(self)

    def remove_child(self, child: "Node") -> None:
        """Unlink a direct child. Does nothing if child is not present."""
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child._parent = None
                return

    def find_child(self, name: str) -> "Node | None":
        """Return the direct child with exactly this name, or None."""
        for child in self._children:
            if child.name == name:
                return child
        return None

    def get_path(self) -> str:
        """
        Absolute path from the root, e.g. "/projects/src/main.js".

        The root itself renders as "/" followed by its own name.
        """
        parts: list[str] = []
        node: Node | None = self
        while node is not None:
            parts.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(parts))

    def depth(self) -> int:
        """Number of generations between this node and its root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def is_ancestor_of(self, other: "Node") -> bool:
        """True if other lies strictly below this node."""
        node = other.parent
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def iter_tree(self) -> Iterator["Node"]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self._children:
            yield from child.iter_tree()

    def is_interacted(self) -> bool:
        """Whether gameplay already resolved this node (e.g. an opened chest)."""
        return self._interacted

    def set_interacted(self, value: bool = True) -> None:
        self._interacted = value

    def __repr__(self) -> str:
        return f"<Node {self._node_type.name} {self.get_path()!r}>"
