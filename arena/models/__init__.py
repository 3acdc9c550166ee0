"""Data models module for Arena."""

# Levels
from arena.models.levels import CharacterLevel

# Events
from arena.models.events import CombatEvent, EventType, SkipReason

# Results
from arena.models.results import MatchOutcome, MatchResult

__all__ = [
    # Levels
    "CharacterLevel",
    # Events
    "CombatEvent",
    "EventType",
    "SkipReason",
    # Results
    "MatchOutcome",
    "MatchResult",
]
