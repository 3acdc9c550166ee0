"""Shared character behavior."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from arena.config import HEALTH_CAP
from arena.engine.combat_log import CombatLog
from arena.engine.traits import Damageable
from arena.models.events import CombatEvent, EventType, SkipReason
from arena.models.levels import CharacterLevel


class Character(BaseModel, ABC):
    """Base for every archetype: health bookkeeping, defeat and the default attack.

    Archetypes customise attacking through ``_prepare_attack`` and declare the
    resource counted against the level budget through ``budget_resource``.
    """

    model_config = ConfigDict(extra="forbid")

    level: CharacterLevel = Field(frozen=True, description="Level tier bounding the creation points")
    name: str = Field(min_length=1, frozen=True, description="Character name")
    health: int = Field(ge=0, le=HEALTH_CAP, description="Current health points")
    attack_power: int = Field(gt=0, frozen=True, description="Damage dealt by one attack")

    _combat_log: CombatLog = PrivateAttr(default_factory=CombatLog)

    @abstractmethod
    def budget_resource(self) -> int:
        """Resource amount spent from the level budget at creation (stamina, mana, ...)."""

    @model_validator(mode="after")
    def check_level_budget(self) -> "Character":
        """Reject characters spending more points than their level allows."""
        spent = self.health + self.attack_power + self.budget_resource()
        if spent > self.level.points:
            raise ValueError(
                f"{type(self).__name__} {self.name} exceeds allowed level points: {self.level.points}"
            )
        return self

    @property
    def combat_log(self) -> CombatLog:
        """Get the log this character reports to."""
        return self._combat_log

    def attach_log(self, log: CombatLog) -> None:
        """Report subsequent events to another log (e.g. the match's)."""
        self._combat_log = log

    @property
    def is_defeated(self) -> bool:
        """Defeat is derived from health alone."""
        return self.health <= 0

    def resources(self) -> dict[str, int]:
        """Snapshot of the mutable resources, attached to every event."""
        return {"health": self.health}

    def _record(self, event_type: EventType, **kwargs) -> CombatEvent:
        return self._combat_log.record(event_type, self.name, resources=self.resources(), **kwargs)

    def take_damage(self, amount: int) -> int:
        """
        Apply incoming damage, clamping health at zero.

        Args:
            amount: Damage reaching this character

        Returns:
            Health actually lost
        """
        old_health = self.health
        self.health = max(0, self.health - max(0, amount))
        damage_taken = old_health - self.health

        self._record(EventType.DAMAGE_TAKEN, amount=damage_taken)
        if self.health == 0 and old_health > 0:
            self._record(EventType.DEFEATED)
        return damage_taken

    def attack(self, target: Damageable) -> int:
        """
        Attack a target with full attack power.

        A defeated character does not attack and the target is left untouched.

        Returns:
            Health the target lost (0 when the attack did not happen)
        """
        if self.health <= 0:
            self._record(EventType.ATTACK_SKIPPED, reason=SkipReason.DEFEATED)
            return 0
        if not self._prepare_attack():
            return 0

        self._record(EventType.ATTACK, target=_name_of(target), amount=self.attack_power)
        return target.take_damage(self.attack_power)

    def _prepare_attack(self) -> bool:
        """Pay for an attack; returning False turns it into a no-op."""
        return True

    def before_round(self) -> None:
        pass

    def after_round(self) -> None:
        pass


def _name_of(target: Damageable) -> Optional[str]:
    return getattr(target, "name", None)
