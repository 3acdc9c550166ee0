"""Sorcerer archetype: mana-fuelled attacks that heal the caster first."""

from pydantic import Field

from arena.config import (
    DEFAULT_SORCERER_ATTACK_POWER,
    DEFAULT_SORCERER_HEALING_POWER,
    DEFAULT_SORCERER_HEALTH,
    DEFAULT_SORCERER_MANA,
    HEALTH_CAP,
    REGENERATION_AMOUNT,
)
from arena.engine.character import Character
from arena.models.events import EventType, SkipReason


class Sorcerer(Character):
    """Caster whose every attack starts with a self-heal.

    An attack below the health cap costs two mana: one for the embedded heal
    and one for the spell itself. Mana never drops below zero, so when the
    heal spends the last point the spell still lands for free.
    """

    health: int = Field(default=DEFAULT_SORCERER_HEALTH, ge=0, le=HEALTH_CAP, description="Current health points")
    attack_power: int = Field(
        default=DEFAULT_SORCERER_ATTACK_POWER, gt=0, frozen=True, description="Damage dealt by one attack"
    )
    mana: int = Field(default=DEFAULT_SORCERER_MANA, ge=0, description="Spent on every attack and heal")
    healing_power: int = Field(
        default=DEFAULT_SORCERER_HEALING_POWER, ge=0, frozen=True, description="Health restored by one heal"
    )

    def budget_resource(self) -> int:
        return self.mana

    def resources(self) -> dict[str, int]:
        return {"health": self.health, "mana": self.mana}

    def _prepare_attack(self) -> bool:
        if self.mana <= 0:
            self._record(EventType.ATTACK_SKIPPED, reason=SkipReason.OUT_OF_MANA)
            return False
        self.heal()
        self.mana = max(0, self.mana - 1)
        return True

    def heal(self) -> int:
        """
        Restore health by up to healing_power, never past the cap.

        Returns:
            Health actually restored (0 when out of mana or already at the cap)
        """
        if self.mana <= 0:
            self._record(EventType.HEAL_SKIPPED, reason=SkipReason.OUT_OF_MANA)
            return 0
        if self.health >= HEALTH_CAP:
            self._record(EventType.HEAL_SKIPPED, reason=SkipReason.FULL_HEALTH)
            return 0

        self.mana -= 1
        old_health = self.health
        self.health = min(HEALTH_CAP, self.health + self.healing_power)
        healed = self.health - old_health
        self._record(EventType.HEALED, target=self.name, amount=healed)
        return healed

    def before_round(self) -> None:
        self.mana += REGENERATION_AMOUNT
        self._record(EventType.REGENERATED, amount=REGENERATION_AMOUNT)
