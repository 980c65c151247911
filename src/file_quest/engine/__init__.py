"""Session layer over the namespace."""

from file_quest.engine.world import World, WorldError, max_depth_for_level

__all__ = [
    "World",
    "WorldError",
    "max_depth_for_level",
]
