"""Combat event models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Kinds of state change reported by the engine."""

    ROUND_STARTED = "round_started"
    ATTACK = "attack"
    ATTACK_SKIPPED = "attack_skipped"
    DAMAGE_TAKEN = "damage_taken"
    DEFEATED = "defeated"
    DEFENDED = "defended"
    DEFENSE_FAILED = "defense_failed"
    HEALED = "healed"
    HEAL_SKIPPED = "heal_skipped"
    REGENERATED = "regenerated"
    MATCH_ENDED = "match_ended"


class SkipReason(str, Enum):
    """Why an action turned into a no-op."""

    DEFEATED = "defeated"
    EXHAUSTED = "exhausted"
    OUT_OF_MANA = "out_of_mana"
    FULL_HEALTH = "full_health"


class CombatEvent(BaseModel):
    """Single structured narration entry."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    sequence: int = Field(ge=0, description="Order of the event within its log")
    round_number: int = Field(ge=0, description="1-based round, 0 when recorded outside a match round")
    event_type: EventType = Field(description="What happened")
    actor: str = Field(description="Name of the acting character (or 'match')")
    target: Optional[str] = Field(default=None, description="Name of the affected character, if any")
    amount: Optional[int] = Field(default=None, description="Damage, mitigation, healing or regeneration amount")
    reason: Optional[SkipReason] = Field(default=None, description="Set on skipped actions")
    resources: dict[str, int] = Field(
        default_factory=dict, description="Actor health/stamina/mana right after the event"
    )
