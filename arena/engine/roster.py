"""Closed set of playable archetypes."""

from enum import Enum
from typing import Any

from arena.engine.character import Character
from arena.engine.sorcerer import Sorcerer
from arena.engine.warrior import Warrior


class Archetype(str, Enum):
    """Playable archetypes."""

    WARRIOR = "warrior"
    SORCERER = "sorcerer"


ARCHETYPES: dict[Archetype, type[Character]] = {
    Archetype.WARRIOR: Warrior,
    Archetype.SORCERER: Sorcerer,
}


def create_character(archetype: Archetype, **stats: Any) -> Character:
    """
    Build a character of the given archetype.

    Args:
        archetype: Archetype to instantiate
        **stats: Constructor fields (level, name, health, ...)

    Returns:
        New character; pydantic ValidationError if the stats break a constraint
    """
    return ARCHETYPES[Archetype(archetype)](**stats)


def archetype_defaults(archetype: Archetype) -> dict[str, Any]:
    """Default stats of an archetype (fields that have a default)."""
    model = ARCHETYPES[Archetype(archetype)]
    return {
        field_name: field.default
        for field_name, field in model.model_fields.items()
        if not field.is_required()
    }
