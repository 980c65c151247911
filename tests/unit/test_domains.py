"""
TEST DOC: Domain Vocabulary

WHAT: Tests for the DOMAINS table and the random name helpers.
WHY: Generated file names must always classify as the category they were
     generated for, or gameplay would place monsters where chests belong.
HOW: Drive the helpers with scripted and seeded random sources.

CASES:
- Domain lookup by enum and by string
- Directory names with and without depth suffixes
- File names: extension overrides, numbering, dotfiles
- Generated names classify back to their category

EDGE CASES:
- Categories that cannot be generated
- Random values at the top of the range
- Frozen domain entries
"""

import random

import pytest
from pydantic import ValidationError

from file_quest.domains import (
    DOMAINS,
    GENERATED_CATEGORIES,
    GENERIC_EXTENSIONS,
    Domain,
    DomainType,
    choose_index,
    extensions_for,
    get_domain,
    pick,
    random_directory_name,
    random_domain,
    random_file_name,
)
from file_quest.models.node import FileType, NodeType, classify_file_type


class TestDomainTable:
    """Tests for the static domain entries."""

    def test_one_entry_per_type(self):
        assert sorted(domain.type.value for domain in DOMAINS) == [
            "game-studio",
            "tech-startup",
            "web-agency",
        ]

    @pytest.mark.parametrize(
        ("key", "name"),
        [
            (DomainType.TECH_STARTUP, "Tech Startup"),
            ("game-studio", "Game Studio"),
            ("web-agency", "Web Agency"),
        ],
    )
    def test_get_domain(self, key, name: str):
        domain = get_domain(key)
        assert domain is not None
        assert domain.name == name

    def test_unknown_domain(self):
        assert get_domain("bakery") is None

    def test_entries_are_frozen(self, tech_startup: Domain):
        with pytest.raises(ValidationError):
            tech_startup.name = "Other"

    def test_every_pool_populated(self):
        for domain in DOMAINS:
            assert domain.directory_names
            for category in GENERATED_CATEGORIES:
                assert domain.file_names.for_category(category)

    def test_extension_overrides_match_category(self):
        """Every extension a domain can emit classifies as its category."""
        for domain in DOMAINS:
            for category in GENERATED_CATEGORIES:
                for extension in extensions_for(domain, category):
                    assert classify_file_type("x" + extension, NodeType.FILE) == category

    def test_generic_fallback(self, tech_startup: Domain):
        assert extensions_for(tech_startup, FileType.EVENT) == GENERIC_EXTENSIONS[FileType.EVENT]
        assert ".go" in extensions_for(tech_startup, FileType.MONSTER)


class TestPick:
    def test_choose_index(self, scripted_random):
        assert choose_index(4, scripted_random([0.0])) == 0
        assert choose_index(4, scripted_random([0.74])) == 2
        assert choose_index(4, scripted_random([1.0])) == 3
        assert choose_index(1, scripted_random([0.99])) == 0

    def test_bounds(self, scripted_random):
        items = ("a", "b", "c")
        assert pick(items, scripted_random([0.0])) == "a"
        assert pick(items, scripted_random([0.5])) == "b"
        assert pick(items, scripted_random([0.999999])) == "c"
        assert pick(items, scripted_random([1.0])) == "c"

    def test_random_domain(self, scripted_random):
        assert random_domain(scripted_random([0.0])) is DOMAINS[0]
        assert random_domain(scripted_random([0.99])) is DOMAINS[-1]


class TestDirectoryNames:
    """Tests for random_directory_name."""

    def test_shallow_never_suffixed(self, tech_startup: Domain, scripted_random):
        rng = scripted_random([0.0])
        assert random_directory_name(tech_startup, 2, rng) == "src"
        assert rng.calls == 1

    def test_deep_suffix(self, tech_startup: Domain, scripted_random):
        assert random_directory_name(tech_startup, 3, scripted_random([0.0])) == "src-core"

    def test_deep_without_suffix(self, tech_startup: Domain, scripted_random):
        assert random_directory_name(tech_startup, 3, scripted_random([0.0, 0.5])) == "src"

    def test_names_come_from_pool(self, tech_startup: Domain):
        rng = random.Random(3)
        for _ in range(200):
            name = random_directory_name(tech_startup, 5, rng)
            assert any(name.startswith(base) for base in tech_startup.directory_names)


class TestFileNames:
    """Tests for random_file_name."""

    def test_dotfile_at_low_roll(self, tech_startup: Domain, scripted_random):
        assert random_file_name(tech_startup, FileType.MONSTER, 0, scripted_random([0.0])) == ".app.js"

    def test_plain_name(self, tech_startup: Domain, scripted_random):
        name = random_file_name(tech_startup, FileType.MONSTER, 0, scripted_random([0.5]))
        assert name == "router.py"

    def test_numbered_at_depth(self, tech_startup: Domain, scripted_random):
        rng = scripted_random([0.0, 0.0, 0.0, 0.3, 0.5])
        assert random_file_name(tech_startup, FileType.TREASURE, 2, rng) == "config3.json"
        assert rng.calls == 5

    def test_events_never_hidden(self, tech_startup: Domain, scripted_random):
        rng = scripted_random([0.0])
        assert random_file_name(tech_startup, FileType.EVENT, 0, rng) == "build.exe"
        assert rng.calls == 2

    def test_domain_extensions(self, scripted_random):
        game = get_domain(DomainType.GAME_STUDIO)
        assert random_file_name(game, FileType.SAVE_POINT, 0, scripted_random([0.0])) == "GDD.md"
        assert random_file_name(game, FileType.MONSTER, 0, scripted_random([0.5])).endswith(".cpp")

    @pytest.mark.parametrize("category", [FileType.EMPTY, FileType.NONE])
    def test_ungenerated_category(self, tech_startup: Domain, scripted_random, category):
        with pytest.raises(ValueError):
            random_file_name(tech_startup, category, 0, scripted_random([0.0]))

    @pytest.mark.parametrize("domain", DOMAINS, ids=lambda domain: domain.type.value)
    def test_names_classify_as_category(self, domain: Domain):
        rng = random.Random(11)
        for depth in range(1, 6):
            for category in GENERATED_CATEGORIES:
                for _ in range(30):
                    name = random_file_name(domain, category, depth, rng)
                    assert classify_file_type(name, NodeType.FILE) == category
                    if category not in (FileType.MONSTER, FileType.TREASURE):
                        assert not name.startswith(".")
