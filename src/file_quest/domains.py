"""
domains.py

PURPOSE: Static thematic vocabulary used to flavor generated namespaces.
DEPENDENCIES: pydantic, node model

ARCHITECTURE NOTES:
The DOMAINS table is a process-lifetime constant of frozen models. It is
only read by the generator. The lookup helpers are pure apart from the
random source they are handed; nothing here keeps mutable state, so the
table can be shared across sessions.
"""

import math
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from file_quest.models.node import FileType


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


class DomainType(str, Enum):
    """Available world themes."""

    TECH_STARTUP = "tech-startup"
    GAME_STUDIO = "game-studio"
    WEB_AGENCY = "web-agency"


# Categories a generated directory must always contain
GENERATED_CATEGORIES: tuple[FileType, ...] = (
    FileType.MONSTER,
    FileType.TREASURE,
    FileType.EVENT,
    FileType.SAVE_POINT,
)

GENERIC_EXTENSIONS: dict[FileType, tuple[str, ...]] = {
    FileType.MONSTER: (".js", ".ts", ".py"),
    FileType.TREASURE: (".json", ".yaml", ".yml"),
    FileType.EVENT: (".exe", ".bin", ".sh"),
    FileType.SAVE_POINT: (".md",),
}

DIRECTORY_SUFFIXES = ("-core", "-impl", "-utils", "-helpers", "-internal", "-legacy", "-v2")

DIRECTORY_SUFFIX_MIN_DEPTH = 3
DIRECTORY_SUFFIX_CHANCE = 0.3
FILE_NUMBER_MIN_DEPTH = 2
FILE_NUMBER_CHANCE = 0.4
DOTFILE_CHANCE = 0.1
DOTFILE_CATEGORIES = frozenset({FileType.MONSTER, FileType.TREASURE})


class FileNamePools(BaseModel):
    """Base names for each generated file category."""

    model_config = ConfigDict(frozen=True)

    monster: tuple[str, ...] = Field(..., min_length=1)
    treasure: tuple[str, ...] = Field(..., min_length=1)
    event: tuple[str, ...] = Field(..., min_length=1)
    save_point: tuple[str, ...] = Field(..., min_length=1)

    def for_category(self, category: FileType) -> tuple[str, ...]:
        return getattr(self, category.value)


class Domain(BaseModel):
    """One themed vocabulary pack."""

    model_config = ConfigDict(frozen=True)

    type: DomainType
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    directory_names: tuple[str, ...] = Field(..., min_length=1)
    file_names: FileNamePools
    extensions: dict[FileType, tuple[str, ...]] = Field(
        default_factory=dict,
        description="Per-category extension overrides; missing categories use the generic list",
    )


DOMAINS: tuple[Domain, ...] = (
    Domain(
        type=DomainType.TECH_STARTUP,
        name="Tech Startup",
        description="A fast-paced technology startup environment",
        directory_names=(
            "src",
            "lib",
            "api",
            "config",
            "tests",
            "utils",
            "services",
            "components",
            "models",
            "controllers",
        ),
        file_names=FileNamePools(
            monster=(
                "app",
                "index",
                "main",
                "server",
                "client",
                "router",
                "controller",
                "service",
                "model",
                "helper",
            ),
            treasure=(
                "config",
                "settings",
                "package",
                "tsconfig",
                "env",
                "credentials",
                "secrets",
                "options",
            ),
            event=("build", "deploy", "setup", "install", "migrate", "seed", "compile", "test-runner"),
            save_point=("README", "CHANGELOG", "TODO", "NOTES", "DOCUMENTATION", "GUIDE", "TUTORIAL"),
        ),
        extensions={
            FileType.MONSTER: (".js", ".ts", ".py", ".go"),
            FileType.TREASURE: (".json", ".yaml", ".toml"),
        },
    ),
    Domain(
        type=DomainType.GAME_STUDIO,
        name="Game Studio",
        description="A creative game development studio",
        directory_names=(
            "assets",
            "scripts",
            "levels",
            "builds",
            "shaders",
            "sounds",
            "prefabs",
            "materials",
            "scenes",
            "plugins",
        ),
        file_names=FileNamePools(
            monster=(
                "player",
                "enemy",
                "gameManager",
                "levelLoader",
                "physics",
                "input",
                "camera",
                "ai",
                "animator",
                "spawner",
            ),
            treasure=(
                "level",
                "save",
                "items",
                "characters",
                "dialogue",
                "quests",
                "achievements",
                "stats",
            ),
            event=("build-game", "pack-assets", "optimize", "export", "run-tests", "profile", "debug"),
            save_point=("GDD", "DESIGN", "ROADMAP", "CREDITS", "PATCH_NOTES", "FEATURES", "BUGS"),
        ),
        extensions={
            FileType.MONSTER: (".cs", ".cpp", ".h"),
            FileType.EVENT: (".exe", ".bin", ".app"),
        },
    ),
    Domain(
        type=DomainType.WEB_AGENCY,
        name="Web Agency",
        description="A bustling web development agency",
        directory_names=(
            "client",
            "server",
            "public",
            "deploy",
            "docs",
            "design",
            "database",
            "migrations",
            "static",
            "templates",
        ),
        file_names=FileNamePools(
            monster=(
                "homepage",
                "contact",
                "about",
                "portfolio",
                "blog",
                "admin",
                "dashboard",
                "analytics",
                "forms",
                "auth",
            ),
            treasure=(
                "sitemap",
                "robots",
                "manifest",
                "htaccess",
                "nginx",
                "apache",
                "docker-compose",
                "database",
            ),
            event=("backup", "restore", "sync", "publish", "optimize-images", "minify", "cache-clear"),
            save_point=(
                "BRIEF",
                "REQUIREMENTS",
                "WIREFRAMES",
                "STYLEGUIDE",
                "CONTENT",
                "SEO",
                "MAINTENANCE",
            ),
        ),
        extensions={
            FileType.MONSTER: (".js", ".ts", ".php"),
            FileType.TREASURE: (".json", ".yml", ".conf"),
            FileType.EVENT: (".sh", ".bin"),
        },
    ),
)


def get_domain(domain_type: DomainType | str) -> Domain | None:
    """Look up a domain by type; None if unknown."""
    for domain in DOMAINS:
        if domain.type == domain_type:
            return domain
    return None


def choose_index(count: int, rng: RandomSource) -> int:
    """Uniform index in range(count) from a single rng.random() draw."""
    return min(int(rng.random() * count), count - 1)


def pick(items: tuple[str, ...], rng: RandomSource) -> str:
    """Uniform choice driven only by rng.random()."""
    return items[choose_index(len(items), rng)]


def random_domain(rng: RandomSource) -> Domain:
    """Pick any domain."""
    return DOMAINS[choose_index(len(DOMAINS), rng)]


def random_directory_name(domain: Domain, depth: int, rng: RandomSource) -> str:
    """
    Pick a themed directory name.

    Deep directories (depth >= 3) are occasionally suffixed, e.g. "api-core".
    """
    name = pick(domain.directory_names, rng)
    if depth >= DIRECTORY_SUFFIX_MIN_DEPTH and rng.random() < DIRECTORY_SUFFIX_CHANCE:
        name += pick(DIRECTORY_SUFFIXES, rng)
    return name


def extensions_for(domain: Domain, category: FileType) -> tuple[str, ...]:
    """The domain's extension override for a category, or the generic list."""
    return domain.extensions.get(category) or GENERIC_EXTENSIONS[category]


def random_file_name(domain: Domain, category: FileType, depth: int, rng: RandomSource) -> str:
    """
    Pick a themed file name with an extension for the category.

    Args:
        domain: Vocabulary to draw from
        category: One of GENERATED_CATEGORIES
        depth: Depth of the directory the file goes into
        rng: Random source

    Returns:
        A name such as "router.ts", "settings3.yaml" or ".env.json"
    """
    if category not in GENERIC_EXTENSIONS:
        raise ValueError(f"Cannot generate files of type {category.value}")

    name = pick(domain.file_names.for_category(category), rng)
    extension = pick(extensions_for(domain, category), rng)

    if depth >= FILE_NUMBER_MIN_DEPTH and rng.random() < FILE_NUMBER_CHANCE:
        name = f"{name}{math.floor(rng.random() * 10)}"

    if category in DOTFILE_CATEGORIES and rng.random() < DOTFILE_CHANCE:
        name = "." + name

    return name + extension
