"""Tests for CombatLog."""

import pytest

from arena.config import DEFAULT_COMBAT_LOG_CAPACITY
from arena.engine.combat_log import CombatLog
from arena.models.events import EventType, SkipReason


class TestCombatLog:
    """Test suite for CombatLog."""

    def test_record_assigns_sequence_and_round(self, combat_log):
        """Test that events are numbered and attributed to the current round."""
        first = combat_log.record(EventType.ATTACK, "Leon", target="Merlin", amount=3)
        combat_log.start_round(2)
        second = combat_log.record(EventType.HEALED, "Merlin", amount=15, resources={"health": 16, "mana": 1})

        assert (first.sequence, first.round_number) == (0, 0)
        assert (second.sequence, second.round_number) == (1, 2)
        assert second.resources == {"health": 16, "mana": 1}
        assert combat_log.round_number == 2

    def test_listeners_notified_in_order(self, combat_log):
        """Test that subscribers receive each event once."""
        seen = []
        combat_log.subscribe(seen.append)
        combat_log.record(EventType.ATTACK, "Leon")
        combat_log.record(EventType.DAMAGE_TAKEN, "Merlin", amount=3)
        assert [e.event_type for e in seen] == [EventType.ATTACK, EventType.DAMAGE_TAKEN]

        combat_log.unsubscribe(seen.append)
        combat_log.record(EventType.ATTACK, "Leon")
        assert len(seen) == 2

    def test_capacity_drops_oldest(self):
        """Test that the log keeps only the newest events."""
        log = CombatLog(capacity=2)
        for _ in range(3):
            log.record(EventType.ATTACK, "Leon")
        assert len(log) == 2
        assert [e.sequence for e in log.events()] == [1, 2]

    def test_invalid_capacity(self):
        """Test that capacity must be positive."""
        with pytest.raises(ValueError):
            CombatLog(capacity=0)

    def test_unbounded_log_keeps_everything(self):
        """Test that a log without capacity never drops events."""
        log = CombatLog(capacity=None)
        for _ in range(DEFAULT_COMBAT_LOG_CAPACITY + 5):
            log.record(EventType.ATTACK, "Leon")
        assert len(log) == DEFAULT_COMBAT_LOG_CAPACITY + 5
        assert log.events()[0].sequence == 0
        assert log.to_dict()["capacity"] is None

    def test_filters(self, combat_log):
        """Test filtering by actor and by type."""
        combat_log.record(EventType.ATTACK, "Leon")
        combat_log.record(EventType.ATTACK_SKIPPED, "Merlin", reason=SkipReason.OUT_OF_MANA)
        combat_log.record(EventType.ATTACK, "Merlin")

        assert len(combat_log.events_for("Merlin")) == 2
        assert len(combat_log.of_type(EventType.ATTACK)) == 2
        assert combat_log.last().actor == "Merlin"

    def test_clear(self, combat_log):
        """Test that clearing resets counters."""
        combat_log.start_round(3)
        combat_log.record(EventType.ATTACK, "Leon")
        combat_log.clear()
        assert len(combat_log) == 0
        assert combat_log.last() is None
        assert combat_log.record(EventType.ATTACK, "Leon").sequence == 0
        assert combat_log.round_number == 0

    def test_events_returns_copy(self, combat_log):
        """Test that callers cannot mutate the log through events()."""
        combat_log.record(EventType.ATTACK, "Leon")
        combat_log.events().clear()
        assert len(combat_log) == 1

    def test_to_dict(self, combat_log):
        """Test JSON-friendly serialization."""
        combat_log.record(EventType.ATTACK_SKIPPED, "Leon", reason=SkipReason.EXHAUSTED)
        data = combat_log.to_dict()
        assert data["capacity"] == combat_log.capacity
        assert data["events"][0]["event_type"] == "attack_skipped"
        assert data["events"][0]["reason"] == "exhausted"
