"""
resolver.py

PURPOSE: Resolve path strings to nodes in a tree.
DEPENDENCIES: node model

ARCHITECTURE NOTES:
This is the single path-resolution algorithm shared by cd, ls, tree callers
and Namespace.get_node_by_path. The grammar:

    PATH     := "~" | "~/" REST | "/" REST | REST
    REST     := SEGMENT ("/" SEGMENT)*
    SEGMENT  := "." | ".." | NAME

- "~" alone is the root; "~/" resolves REST from the root.
- A leading "/" is absolute. If the first segment repeats the root's own
  name it is skipped, so "/projects/src" and "/src" both reach src.
- Anything else is relative to the cursor.
- Empty segments are dropped, so repeated slashes collapse.
- ".." moves to the parent but is clamped at the root: it never fails here.
  Only the bare `cd ..` command treats "above root" as an error; that check
  lives in Namespace.cd, not in the resolver.
- A NAME must match a child exactly. One bad segment fails the whole lookup.
"""

from file_quest.models.node import Node

HOME = "~"
HOME_PREFIX = "~/"
SEPARATOR = "/"
CURRENT = "."
PARENT = ".."


def split_segments(path: str) -> list[str]:
    """Split on "/" and drop empty segments."""
    return [part for part in path.split(SEPARATOR) if part]


class PathResolver:
    """Resolves path strings against a fixed root and a movable cursor."""

    def __init__(self, root: Node):
        self.root = root

    def resolve(self, path: str, current: Node) -> Node | None:
        """
        Resolve a path to a node.

        Args:
            path: Path string (absolute, relative, or ~-prefixed)
            current: Node that relative paths start from

        Returns:
            The resolved node, or None if any segment does not exist
        """
        if not path:
            return None

        if path == HOME:
            return self.root

        if path.startswith(HOME_PREFIX):
            return self.walk(self.root, split_segments(path[len(HOME_PREFIX) :]))

        segments = split_segments(path)
        if path.startswith(SEPARATOR):
            if segments and segments[0] == self.root.name:
                segments = segments[1:]
            return self.walk(self.root, segments)

        return self.walk(current, segments)

    def walk(self, start: Node, segments: list[str]) -> Node | None:
        """Follow segments from start, failing on the first missing name."""
        node = start
        for segment in segments:
            next_node = self.step(node, segment)
            if next_node is None:
                return None
            node = next_node
        return node

    def step(self, node: Node, segment: str) -> Node | None:
        """Apply a single segment."""
        if segment == CURRENT:
            return node
        if segment == PARENT:
            # Clamped: the root is its own parent here
            if node is self.root:
                return node
            return node.parent or node
        return node.find_child(segment)
