"""Capability contracts shared by every combat participant."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Damageable(Protocol):
    """Anything that holds health and can be hit."""

    health: int

    def take_damage(self, amount: int) -> int: ...


@runtime_checkable
class Combatant(Damageable, Protocol):
    """An actor that can attack a Damageable."""

    name: str
    attack_power: int

    def attack(self, target: Damageable) -> int: ...


@runtime_checkable
class Defender(Protocol):
    """Mitigates incoming damage at a stamina cost."""

    stamina: int
    defense_power: int

    def defend(self, incoming_power: int) -> int: ...


@runtime_checkable
class Healer(Protocol):
    """Restores its own health at a mana cost."""

    mana: int
    healing_power: int

    def heal(self) -> int: ...


@runtime_checkable
class Recoverable(Protocol):
    """Hooks run by the match around each round."""

    def before_round(self) -> None: ...

    def after_round(self) -> None: ...
