"""
generator.py

PURPOSE: Procedural generation of explorable namespaces and worlds.
DEPENDENCIES: domains, namespace, world, observability

ARCHITECTURE NOTES:
Generation runs in two passes:

1. Tree: a root named after the domain, then directories built recursively
   from depth 1. The branching factor shrinks with depth and every
   directory receives 1-3 files of each of the four playable categories.
2. Special items: one non-root directory hosts the boss, one TREASURE file
   (outside the boss subtree when possible) hosts the key.

All randomness comes from an injected RandomSource so a seed reproduces a
world exactly. Invalid inputs are rejected before any node is created;
with valid inputs generation cannot fail.
"""

import logging
import math
import random

from file_quest.domains import (
    GENERATED_CATEGORIES,
    Domain,
    DomainType,
    RandomSource,
    choose_index,
    get_domain,
    random_directory_name,
    random_domain,
    random_file_name,
)
from file_quest.engine.world import World, max_depth_for_level
from file_quest.filesystem.namespace import Namespace, sample_layout
from file_quest.models.node import FileType, Node, NodeType
from file_quest.models.state import WorldState
from file_quest.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

FIRST_DEPTH = 1
BRANCH_BASE = 4
RECURSE_CHANCE = 0.7
MAX_FILES_PER_CATEGORY = 3


class GenerationError(Exception):
    """Invalid generation request (unknown domain, level below 1)."""

    pass


class NamespaceGenerator:
    """
    Builds randomized namespaces from a domain and a level.

    Usage:
        generator = NamespaceGenerator(random.Random(42))
        namespace = generator.generate(domain, level=2)
    """

    def __init__(self, rng: RandomSource | None = None):
        """
        Initialize the generator.

        Args:
            rng: Random source; a fresh random.Random() if omitted
        """
        self._rng = rng if rng is not None else random.Random()

    def generate(self, domain: Domain | None, level: int) -> Namespace:
        """
        Generate a namespace.

        Args:
            domain: Vocabulary for names; the root is named after it
            level: World level; deeper trees at higher levels

        Returns:
            A namespace whose cursor is at the root

        Raises:
            GenerationError: If domain is missing or level < 1
        """
        if level < 1:
            raise GenerationError(f"World level must be at least 1, got {level}")
        if not isinstance(domain, Domain):
            raise GenerationError("A domain is required to generate a namespace")

        max_depth = max_depth_for_level(level)

        with tracer.start_as_current_span("namespace.generate") as span:
            span.set_attribute("namespace.domain", domain.type.value)
            span.set_attribute("namespace.level", level)
            span.set_attribute("namespace.max_depth", max_depth)

            root = Node(domain.name, NodeType.DIRECTORY)
            self._build_directories(root, domain, FIRST_DEPTH, max_depth)

            node_count = sum(1 for _ in root.iter_tree())
            span.set_attribute("namespace.node_count", node_count)
            span.add_event("namespace_generated")

        logger.info(
            f"Generated namespace '{domain.name}' level {level}: "
            f"{node_count} nodes, max depth {max_depth}"
        )
        return Namespace(root)

    def _build_directories(self, parent: Node, domain: Domain, depth: int, max_depth: int) -> None:
        """Add sibling directories at depth, fill them, and maybe recurse."""
        if depth >= max_depth:
            return

        count = max(1, math.ceil(self._rng.random() * (BRANCH_BASE - depth)))
        for _ in range(count):
            directory = Node(random_directory_name(domain, depth, self._rng), NodeType.DIRECTORY)
            parent.add_child(directory)
            self._populate(directory, domain, depth)

            if depth + 1 < max_depth and self._rng.random() < RECURSE_CHANCE:
                self._build_directories(directory, domain, depth + 1, max_depth)

    def _populate(self, directory: Node, domain: Domain, depth: int) -> None:
        """Add 1-3 files of every playable category."""
        for category in GENERATED_CATEGORIES:
            count = max(1, math.ceil(self._rng.random() * MAX_FILES_PER_CATEGORY))
            for _ in range(count):
                name = random_file_name(domain, category, depth, self._rng)
                directory.add_child(Node(name, NodeType.FILE))


def generate_namespace(
    domain: Domain | None,
    level: int,
    rng: RandomSource | None = None,
) -> Namespace:
    """Convenience wrapper around NamespaceGenerator.generate()."""
    return NamespaceGenerator(rng).generate(domain, level)


class WorldGenerator:
    """
    Generates complete worlds: a namespace plus key and boss placement.

    Pass a seed to make worlds reproducible: a seeded generator restarts its
    random.Random from the seed for every world, so each world depends only
    on (seed, domain, level) and restore_world() can rebuild it. An injected
    rng is used as-is and the resulting worlds carry no seed.
    """

    def __init__(self, rng: RandomSource | None = None, seed: int | None = None):
        self._seed = seed if rng is None else None
        self._rng = rng if rng is not None else random.Random(seed)
        self._namespaces = NamespaceGenerator(self._rng)

    def generate_world(self, domain_type: DomainType | str, level: int) -> World:
        """
        Generate a world for a domain type.

        Raises:
            GenerationError: If level < 1 or the domain type is unknown
        """
        if level < 1:
            raise GenerationError(f"World level must be at least 1, got {level}")

        domain = get_domain(domain_type)
        if domain is None:
            raise GenerationError(f"Unknown domain type: {domain_type}")

        self._reseed()
        namespace = self._namespaces.generate(domain, level)
        world = World(domain, level, namespace)
        world.seed = self._seed
        self.place_special_items(world)
        return world

    def generate_random_world(self, level: int) -> World:
        """Generate a world in a randomly chosen domain."""
        if level < 1:
            raise GenerationError(f"World level must be at least 1, got {level}")
        self._reseed()
        domain = random_domain(self._rng)
        return self.generate_world(domain.type, level)

    def _reseed(self) -> None:
        if self._seed is not None:
            self._rng.seed(self._seed)

    def generate_test_world(self) -> World:
        """A world over the fixed demo tree with fixed key and boss."""
        layout = sample_layout()
        domain = get_domain(DomainType.TECH_STARTUP)
        if domain is None:
            raise GenerationError("Test world domain is missing from the domain table")

        world = World(domain, 1, Namespace.from_layout(layout))
        if layout.special_items:
            if layout.special_items.boss_location:
                world.set_boss_location(layout.special_items.boss_location)
            if layout.special_items.key_location:
                world.set_key_location(layout.special_items.key_location)
        return world

    def place_special_items(self, world: World) -> None:
        """
        Place the boss on a directory and the key on a TREASURE file.

        The root never hosts the boss. The key avoids the boss subtree unless
        every TREASURE file lives inside it. Sibling names may repeat, so only
        nodes whose path resolves back to themselves are eligible; saved
        locations must round-trip through path lookup.

        Raises:
            GenerationError: If the tree has no non-root directory or no
                TREASURE file (only possible for hand-built trees)
        """
        namespace = world.namespace
        root = namespace.root
        nodes = [
            node
            for node in root.iter_tree()
            if namespace.resolver.resolve(node.get_path(), root) is node
        ]

        directories = [node for node in nodes if node.is_directory and node is not root]
        if not directories:
            raise GenerationError("No directories available for boss placement")
        boss = directories[choose_index(len(directories), self._rng)]

        treasures = [node for node in nodes if node.is_file and node.file_type == FileType.TREASURE]
        candidates = [node for node in treasures if not boss.is_ancestor_of(node)]
        if not candidates:
            candidates = treasures
        if not candidates:
            raise GenerationError("No treasure files available for key placement")
        key = candidates[choose_index(len(candidates), self._rng)]

        world.boss_location = boss.get_path()
        world.key_location = key.get_path()
        logger.debug(f"Boss at {world.boss_location}, key at {world.key_location}")


def generate_world(domain_type: DomainType | str, level: int, seed: int | None = None) -> World:
    """Convenience wrapper around WorldGenerator.generate_world()."""
    return WorldGenerator(seed=seed).generate_world(domain_type, level)


def restore_world(state: WorldState) -> World:
    """
    Regenerate a saved world from its seed and re-apply its state.

    Raises:
        GenerationError: If the state carries no seed
    """
    if state.seed is None:
        raise GenerationError("Saved world has no seed; rebuild it from a layout instead")

    world = generate_world(state.domain_type, state.level, seed=state.seed)
    return World.from_state(state, world.namespace)
