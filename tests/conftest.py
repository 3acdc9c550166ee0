"""Pytest configuration and fixtures."""

import pytest

from arena.engine.combat_log import CombatLog
from arena.engine.sorcerer import Sorcerer
from arena.engine.warrior import Warrior
from arena.models.levels import CharacterLevel


@pytest.fixture
def leon():
    """Small level-2 warrior from the demo."""
    return Warrior(level=CharacterLevel.LEVEL_2, name="Leon", health=5, attack_power=3, stamina=2)


@pytest.fixture
def merlin():
    """Small level-2 sorcerer from the demo."""
    return Sorcerer(level=CharacterLevel.LEVEL_2, name="Merlin", health=4, attack_power=4, mana=2)


@pytest.fixture
def tired_warrior():
    """Warrior without stamina: takes every hit unmitigated."""
    return Warrior(level=CharacterLevel.LEVEL_5, name="Brute", health=30, attack_power=5, stamina=0)


@pytest.fixture
def combat_log():
    """Empty combat log."""
    return CombatLog()
