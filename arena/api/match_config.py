"""Match request payloads."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arena.config import DEFAULT_MATCH_ROUNDS, DEFAULT_REGENERATION_ENABLED, MAX_MATCH_ROUNDS
from arena.engine.character import Character
from arena.engine.roster import Archetype, create_character
from arena.models.levels import CharacterLevel


class CombatantConfig(BaseModel):
    """Character description submitted by a client."""

    model_config = ConfigDict(extra="forbid")

    archetype: Archetype = Field(description="Archetype to build")
    level: CharacterLevel = Field(description="Level tier (1-10)")
    name: str = Field(min_length=1, description="Character name")
    health: Optional[int] = Field(default=None, description="Starting health (archetype default if omitted)")
    attack_power: Optional[int] = Field(default=None, description="Attack power")
    stamina: Optional[int] = Field(default=None, description="Warrior stamina")
    defense_power: Optional[int] = Field(default=None, description="Warrior defense power")
    mana: Optional[int] = Field(default=None, description="Sorcerer mana")
    healing_power: Optional[int] = Field(default=None, description="Sorcerer healing power")

    def build(self) -> Character:
        """Create the character; stats left out fall back to archetype defaults."""
        stats = self.model_dump(exclude_none=True, exclude={"archetype"})
        return create_character(self.archetype, **stats)


class MatchConfig(BaseModel):
    """Match request."""

    rounds: int = Field(default=DEFAULT_MATCH_ROUNDS, ge=1, le=MAX_MATCH_ROUNDS, description="Round budget")
    regenerate: bool = Field(
        default=DEFAULT_REGENERATION_ENABLED, description="Recover stamina/mana before rounds after the first"
    )
    challenger: CombatantConfig = Field(description="Character acting first each round")
    opponent: CombatantConfig = Field(description="Character acting second each round")
