"""Warrior archetype: stamina-gated attacks and damage mitigation."""

from pydantic import Field

from arena.config import (
    DEFAULT_WARRIOR_ATTACK_POWER,
    DEFAULT_WARRIOR_DEFENSE_POWER,
    DEFAULT_WARRIOR_HEALTH,
    DEFAULT_WARRIOR_STAMINA,
    HEALTH_CAP,
    REGENERATION_AMOUNT,
)
from arena.engine.character import Character
from arena.models.events import EventType, SkipReason


class Warrior(Character):
    """Fighter that spends stamina both to swing and to block."""

    health: int = Field(default=DEFAULT_WARRIOR_HEALTH, ge=0, le=HEALTH_CAP, description="Current health points")
    attack_power: int = Field(
        default=DEFAULT_WARRIOR_ATTACK_POWER, gt=0, frozen=True, description="Damage dealt by one attack"
    )
    stamina: int = Field(default=DEFAULT_WARRIOR_STAMINA, ge=0, description="Spent on every attack and block")
    defense_power: int = Field(
        default=DEFAULT_WARRIOR_DEFENSE_POWER, ge=0, frozen=True, description="Damage absorbed by one block"
    )

    def budget_resource(self) -> int:
        return self.stamina

    def resources(self) -> dict[str, int]:
        return {"health": self.health, "stamina": self.stamina}

    def _prepare_attack(self) -> bool:
        if self.stamina <= 0:
            self._record(EventType.ATTACK_SKIPPED, reason=SkipReason.EXHAUSTED)
            return False
        self.stamina -= 1
        return True

    def defend(self, incoming_power: int) -> int:
        """
        Block part of an incoming hit.

        Args:
            incoming_power: Raw attack power aimed at this warrior

        Returns:
            Damage left after the block; the full amount once stamina is gone
        """
        if self.stamina <= 0:
            self._record(EventType.DEFENSE_FAILED, amount=incoming_power, reason=SkipReason.EXHAUSTED)
            return incoming_power

        reduced = max(0, incoming_power - self.defense_power)
        self.stamina -= 1
        self._record(EventType.DEFENDED, amount=reduced)
        return reduced

    def take_damage(self, amount: int) -> int:
        # Mitigation happens before clamping.
        return super().take_damage(self.defend(amount))

    def before_round(self) -> None:
        self.stamina += REGENERATION_AMOUNT
        self._record(EventType.REGENERATED, amount=REGENERATION_AMOUNT)
