"""Procedural world generation."""

from file_quest.domains import (
    DOMAINS,
    Domain,
    DomainType,
    RandomSource,
    get_domain,
    random_directory_name,
    random_domain,
    random_file_name,
)
from file_quest.generator.generator import (
    GenerationError,
    NamespaceGenerator,
    WorldGenerator,
    generate_namespace,
    generate_world,
    restore_world,
)

__all__ = [
    "DOMAINS",
    "Domain",
    "DomainType",
    "GenerationError",
    "NamespaceGenerator",
    "RandomSource",
    "WorldGenerator",
    "generate_namespace",
    "generate_world",
    "get_domain",
    "random_directory_name",
    "random_domain",
    "random_file_name",
    "restore_world",
]
