"""
conftest.py

Shared pytest fixtures for file_quest tests.
"""

import json
from collections.abc import Iterable
from pathlib import Path

import pytest

from file_quest.domains import Domain, DomainType, get_domain
from file_quest.filesystem.namespace import Namespace
from file_quest.models.layout import NamespaceLayout
from file_quest.models.node import Node, NodeType

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class ScriptedRandom:
    """Random source that replays a fixed sequence of values, cycling."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sample_layout_path() -> Path:
    """Path to the sample layout JSON file."""
    return FIXTURES_DIR / "sample_layout.json"


@pytest.fixture
def invalid_layout_path() -> Path:
    """Path to a layout that fails validation."""
    return FIXTURES_DIR / "invalid_layout.json"


@pytest.fixture
def sample_layout_dict(sample_layout_path: Path) -> dict:
    """Load the sample layout as a dictionary."""
    with open(sample_layout_path) as f:
        return json.load(f)


@pytest.fixture
def sample_layout(sample_layout_dict: dict) -> NamespaceLayout:
    """Load and validate the sample layout."""
    return NamespaceLayout.model_validate(sample_layout_dict)


@pytest.fixture
def sample_namespace(sample_layout: NamespaceLayout) -> Namespace:
    """A namespace over the sample tree, cursor at the root."""
    return Namespace.from_layout(sample_layout)


@pytest.fixture
def scenario_tree() -> dict[str, Node]:
    """
    projects/
      src/
        main.js
    """
    root = Node("projects", NodeType.DIRECTORY)
    src = Node("src", NodeType.DIRECTORY)
    main = Node("main.js", NodeType.FILE)
    root.add_child(src)
    src.add_child(main)
    return {"root": root, "src": src, "main": main}


@pytest.fixture
def tech_startup() -> Domain:
    """The tech-startup domain entry."""
    domain = get_domain(DomainType.TECH_STARTUP)
    assert domain is not None
    return domain


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    """Factory for deterministic random sources: scripted_random([0.0, 0.5])."""
    return ScriptedRandom
