"""
state.py

PURPOSE: Persisted, primitive-only state of an exploration session.
DEPENDENCIES: pydantic, layout.py

ARCHITECTURE NOTES:
WorldState is what gets saved/loaded. It holds only strings, numbers and
booleans: the cursor path, explored paths, key/boss paths and the key flag.
The node tree itself is rebuilt separately (regenerated from the seed or
loaded from a NamespaceLayout) and the World is re-attached to it.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from file_quest.models.layout import NamespaceLayout


class WorldState(BaseModel):
    """Snapshot of a World that can be written to JSON."""

    domain_type: str = Field(..., description="Domain key, e.g. 'tech-startup'")
    level: int = Field(..., ge=1)
    current_path: str = Field(..., min_length=1)
    explored_paths: list[str] = Field(default_factory=list)
    key_location: str | None = Field(default=None)
    boss_location: str | None = Field(default=None)
    has_key: bool = Field(default=False)
    seed: int | None = Field(
        default=None,
        description="Generation seed, if the tree can be regenerated",
    )

    @field_validator("explored_paths")
    @classmethod
    def normalize_explored(cls, v: list[str]) -> list[str]:
        """Drop duplicates and keep a stable order."""
        return sorted(set(v))

    def to_save_dict(self) -> dict[str, Any]:
        """Convert state to a dictionary for saving."""
        return self.model_dump()

    @classmethod
    def from_save_dict(cls, data: dict[str, Any]) -> "WorldState":
        """Load state from a saved dictionary."""
        return cls.model_validate(data)


class SavedWorld(BaseModel):
    """
    A self-contained save file: the tree as a layout plus the session state.

    Hand-built or modified trees cannot be regenerated from a seed, so they
    are stored as plain configuration trees next to the state.
    """

    layout: NamespaceLayout
    state: WorldState
