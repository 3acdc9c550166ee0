"""Tests for the Warrior archetype."""

import pytest

from arena.engine.warrior import Warrior
from arena.models.events import EventType, SkipReason
from arena.models.levels import CharacterLevel


@pytest.fixture
def guard():
    """Warrior with two blocks left."""
    return Warrior(
        level=CharacterLevel.LEVEL_10, name="Guard", health=50, attack_power=10, stamina=2, defense_power=10
    )


class TestWarriorAttack:
    """Test suite for stamina-gated attacks."""

    def test_attack_spends_stamina_and_deals_full_power(self, leon, tired_warrior):
        """Test that attacks cost one stamina and are never mitigated on the way out."""
        dealt = leon.attack(tired_warrior)
        assert dealt == 3
        assert leon.stamina == 1
        assert tired_warrior.health == 27

    def test_exhausted_warrior_skips_attack(self, tired_warrior, merlin):
        """Test that no stamina means no attack and no stamina change."""
        dealt = tired_warrior.attack(merlin)
        assert dealt == 0
        assert merlin.health == 4
        assert tired_warrior.stamina == 0
        event = tired_warrior.combat_log.last()
        assert event.event_type == EventType.ATTACK_SKIPPED
        assert event.reason == SkipReason.EXHAUSTED

    def test_attack_event_names_target(self, leon, merlin):
        """Test that the attack event carries target and power."""
        leon.attack(merlin)
        event = leon.combat_log.of_type(EventType.ATTACK)[0]
        assert event.target == "Merlin"
        assert event.amount == 3
        assert event.resources["stamina"] == 1


class TestWarriorDefense:
    """Test suite for mitigation."""

    def test_defend_reduces_incoming(self, guard):
        """Test that defense power is subtracted and stamina spent."""
        assert guard.defend(15) == 5
        assert guard.stamina == 1

    def test_defend_never_negative(self, guard):
        """Test that weak hits are fully absorbed, not turned into healing."""
        assert guard.defend(4) == 0
        assert guard.stamina == 1

    def test_defend_fails_without_stamina(self, tired_warrior):
        """Test that exhausted warriors let the full hit through."""
        assert tired_warrior.defend(12) == 12
        assert tired_warrior.stamina == 0
        assert tired_warrior.combat_log.last().event_type == EventType.DEFENSE_FAILED

    def test_take_damage_mitigates_until_exhausted(self, guard):
        """Test effective damage while stamina lasts and after it runs out."""
        assert guard.take_damage(15) == 5
        assert (guard.health, guard.stamina) == (45, 1)

        assert guard.take_damage(8) == 0
        assert (guard.health, guard.stamina) == (45, 0)

        assert guard.take_damage(15) == 15
        assert (guard.health, guard.stamina) == (30, 0)

    def test_mitigation_happens_before_clamping(self):
        """Test that a hit is reduced before health is clamped at zero."""
        warrior = Warrior(
            level=CharacterLevel.LEVEL_2, name="Leon", health=5, attack_power=3, stamina=2, defense_power=10
        )
        assert warrior.take_damage(14) == 4
        assert warrior.health == 1

    def test_event_order_for_a_blocked_hit(self, guard):
        """Test that the block is reported before the damage."""
        guard.take_damage(15)
        types = [e.event_type for e in guard.combat_log.events()]
        assert types == [EventType.DEFENDED, EventType.DAMAGE_TAKEN]


class TestWarriorRecovery:
    """Test suite for round regeneration."""

    def test_before_round_restores_stamina(self, tired_warrior):
        """Test that one stamina is recovered before a round."""
        tired_warrior.before_round()
        assert tired_warrior.stamina == 1
        event = tired_warrior.combat_log.last()
        assert event.event_type == EventType.REGENERATED
        assert event.amount == 1
