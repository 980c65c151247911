"""
world.py

PURPOSE: Session wrapper around a generated or hand-built namespace.
DEPENDENCIES: namespace, domains, state model

ARCHITECTURE NOTES:
The World holds everything a play session needs besides the tree itself:
the domain and level, the key and boss locations (as path strings), the
key-held flag and the set of explored paths. The namespace does not track
exploration; command handlers call mark_explored() as the player moves.

Only primitive state is persisted (see WorldState). Restoring a session
means rebuilding the tree first and then calling World.from_state().
"""

import logging

from file_quest.domains import Domain, DomainType, get_domain
from file_quest.filesystem.namespace import Namespace
from file_quest.models.layout import SpecialItems, namespace_layout_from_root
from file_quest.models.node import Node
from file_quest.models.state import SavedWorld, WorldState

logger = logging.getLogger(__name__)

MAX_WORLD_DEPTH = 10
BASE_WORLD_DEPTH = 3


class WorldError(ValueError):
    """Invalid world setup (bad level, unknown domain, missing path)."""

    pass


def max_depth_for_level(level: int) -> int:
    """Deepest generation allowed for a level: 3 + level, capped at 10."""
    return min(BASE_WORLD_DEPTH + level, MAX_WORLD_DEPTH)


class World:
    """
    State of one exploration session.

    The cursor lives in the namespace; current_path is a view of it.
    """

    def __init__(self, domain: Domain, level: int, namespace: Namespace):
        """
        Create a session over an existing namespace.

        Args:
            domain: Theme the namespace was built from
            level: World level (>= 1)
            namespace: The tree to explore

        Raises:
            WorldError: If level is below 1
        """
        if level < 1:
            raise WorldError(f"World level must be at least 1, got {level}")

        self.domain = domain
        self.level = level
        self.namespace = namespace
        self.key_location: str | None = None
        self.boss_location: str | None = None
        self.has_key = False
        self.seed: int | None = None
        self._explored: set[str] = {namespace.root.get_path()}

    @property
    def current_path(self) -> str:
        return self.namespace.pwd()

    def set_current_path(self, path: str) -> None:
        """
        Move the cursor to an existing directory.

        Raises:
            WorldError: If the path does not resolve to a directory
        """
        result = self.namespace.cd(path)
        if not result.success:
            raise WorldError(f"Cannot move to {path}: {result.error}")

    def current_node(self) -> Node:
        return self.namespace.current_node

    def mark_explored(self, path: str) -> None:
        self._explored.add(path)

    def is_explored(self, path: str) -> bool:
        return path in self._explored

    @property
    def explored_paths(self) -> list[str]:
        """Explored paths in sorted order."""
        return sorted(self._explored)

    def _require_node(self, path: str) -> Node:
        node = self.namespace.get_node_by_path(path)
        if node is None:
            raise WorldError(f"Path does not exist: {path}")
        return node

    def set_key_location(self, path: str) -> None:
        """Record the key file; the path must exist."""
        self.key_location = self._require_node(path).get_path()

    def set_boss_location(self, path: str) -> None:
        """Record the boss directory; the path must exist."""
        self.boss_location = self._require_node(path).get_path()

    def is_key_location(self, node: Node) -> bool:
        return self.key_location is not None and node.get_path() == self.key_location

    def is_boss_location(self, node: Node) -> bool:
        return self.boss_location is not None and node.get_path() == self.boss_location

    def obtain_key(self) -> None:
        self.has_key = True

    def use_key(self) -> None:
        self.has_key = False

    @property
    def max_depth(self) -> int:
        return max_depth_for_level(self.level)

    @property
    def domain_name(self) -> str:
        return self.domain.name

    @property
    def domain_type(self) -> DomainType:
        return self.domain.type

    def to_state(self) -> WorldState:
        """Snapshot the primitive session state for saving."""
        return WorldState(
            domain_type=self.domain.type.value,
            level=self.level,
            current_path=self.current_path,
            explored_paths=self.explored_paths,
            key_location=self.key_location,
            boss_location=self.boss_location,
            has_key=self.has_key,
            seed=self.seed,
        )

    @classmethod
    def from_state(cls, state: WorldState, namespace: Namespace) -> "World":
        """
        Re-attach saved state to a rebuilt namespace.

        Args:
            state: Saved primitive state
            namespace: Tree rebuilt from the same seed or layout

        Returns:
            The restored World with its cursor at the saved path

        Raises:
            WorldError: If the domain is unknown or a saved path no longer resolves
        """
        domain = get_domain(state.domain_type)
        if domain is None:
            raise WorldError(f"Unknown domain type: {state.domain_type}")

        world = cls(domain, state.level, namespace)
        world.seed = state.seed
        world.set_current_path(state.current_path)
        world._explored = set(state.explored_paths) | {namespace.root.get_path()}
        if state.key_location:
            world.set_key_location(state.key_location)
        if state.boss_location:
            world.set_boss_location(state.boss_location)
        world.has_key = state.has_key

        logger.info(f"Restored world '{domain.name}' level {state.level} at {world.current_path}")
        return world

    def to_saved(self) -> SavedWorld:
        """Bundle the tree (as a layout) with the session state."""
        layout = namespace_layout_from_root(
            self.namespace.root,
            special_items=SpecialItems(
                boss_location=self.boss_location,
                key_location=self.key_location,
            ),
            description=self.domain.description,
        )
        return SavedWorld(layout=layout, state=self.to_state())

    @classmethod
    def from_saved(cls, saved: SavedWorld) -> "World":
        """Rebuild the tree from the saved layout and restore the session."""
        return cls.from_state(saved.state, Namespace.from_layout(saved.layout))

    def __repr__(self) -> str:
        return f"<World domain={self.domain.type.value!r} level={self.level} cwd={self.current_path!r}>"
