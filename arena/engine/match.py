"""Round-based match between two characters."""

import logging
from typing import Optional

from arena.config import DEFAULT_REGENERATION_ENABLED
from arena.engine.character import Character
from arena.engine.combat_log import CombatLog, EventListener
from arena.models.events import EventType
from arena.models.results import MatchOutcome, MatchResult

logger = logging.getLogger(__name__)

MATCH_ACTOR = "match"


class MatchAlreadyFoughtError(RuntimeError):
    """Raised when fight() is called on a match that already has a result."""


class Match:
    """Drives a fixed number of rounds between a challenger and an opponent.

    Each round the challenger attacks first; if that defeats the opponent the
    round ends at once and the opponent never retaliates. When regeneration is
    enabled both characters recover before every round except the first.
    A match is fought once and then only reports its result.
    """

    def __init__(
        self,
        rounds: int,
        challenger: Character,
        opponent: Character,
        regenerate: bool = DEFAULT_REGENERATION_ENABLED,
        log: Optional[CombatLog] = None,
        on_event: Optional[EventListener] = None,
    ) -> None:
        """
        Initialize a match.

        Args:
            rounds: Round budget, must be positive
            challenger: Character acting first every round
            opponent: Character acting second
            regenerate: Run before_round() hooks ahead of rounds after the first
            log: Log shared by both characters for the fight (a new unbounded one by default)
            on_event: Optional listener receiving every event as it is recorded
        """
        if rounds <= 0:
            raise ValueError(f"rounds must be positive, got {rounds}")
        if challenger is opponent:
            raise ValueError("challenger and opponent must be different characters")

        self.rounds = rounds
        self.challenger = challenger
        self.opponent = opponent
        self.regenerate = regenerate
        self._log = log if log is not None else CombatLog(capacity=None)
        if on_event is not None:
            self._log.subscribe(on_event)

        self._outcome = MatchOutcome.PENDING
        self._rounds_played = 0
        self._winner: Optional[Character] = None

    @property
    def log(self) -> CombatLog:
        """Get the match log."""
        return self._log

    @property
    def outcome(self) -> MatchOutcome:
        """Get the current match state."""
        return self._outcome

    @property
    def winner(self) -> Optional[Character]:
        """Get the winner (None before the fight or on no-contest)."""
        return self._winner

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    def fight(self) -> Optional[Character]:
        """
        Run the match to completion.

        Returns:
            The winning character, or None when every round passes with both alive
        """
        if self._outcome != MatchOutcome.PENDING:
            raise MatchAlreadyFoughtError("A match can only be fought once")

        logger.info(
            f"Match started: {self.challenger.name} vs {self.opponent.name} "
            f"({self.rounds} rounds, regenerate={self.regenerate})"
        )
        self._outcome = MatchOutcome.RUNNING
        challenger_log = self.challenger.combat_log
        opponent_log = self.opponent.combat_log
        self.challenger.attach_log(self._log)
        self.opponent.attach_log(self._log)
        try:
            return self._run_rounds()
        finally:
            self.challenger.attach_log(challenger_log)
            self.opponent.attach_log(opponent_log)

    def _run_rounds(self) -> Optional[Character]:
        for round_index in range(self.rounds):
            self._rounds_played = round_index + 1
            self._log.start_round(round_index + 1)

            if self.regenerate and round_index > 0:
                self.challenger.before_round()
                self.opponent.before_round()

            self._log.record(EventType.ROUND_STARTED, MATCH_ACTOR, amount=round_index + 1)

            self.challenger.attack(self.opponent)
            if self.opponent.health <= 0:
                self._end_round()
                return self._finish(MatchOutcome.CHALLENGER_WON, self.challenger)

            self.opponent.attack(self.challenger)
            if self.challenger.health <= 0:
                self._end_round()
                return self._finish(MatchOutcome.OPPONENT_WON, self.opponent)

            self._end_round()

        return self._finish(MatchOutcome.NO_CONTEST, None)

    def _end_round(self) -> None:
        self.challenger.after_round()
        self.opponent.after_round()

    def _finish(self, outcome: MatchOutcome, winner: Optional[Character]) -> Optional[Character]:
        self._outcome = outcome
        self._winner = winner
        self._log.record(
            EventType.MATCH_ENDED,
            MATCH_ACTOR,
            target=winner.name if winner else None,
            amount=self._rounds_played,
        )
        if winner is None:
            logger.info(f"No clear winner after {self.rounds} rounds")
        else:
            logger.info(f"Match won by {winner.name} in round {self._rounds_played}")
        return winner

    @property
    def result(self) -> MatchResult:
        """Get the terminal result of a fought match."""
        if self._outcome in (MatchOutcome.PENDING, MatchOutcome.RUNNING):
            raise RuntimeError("Match has not been fought yet")

        loser = None
        if self._winner is self.challenger:
            loser = self.opponent
        elif self._winner is self.opponent:
            loser = self.challenger
        return MatchResult(
            outcome=self._outcome,
            winner=self._winner.name if self._winner else None,
            loser=loser.name if loser else None,
            rounds=self.rounds,
            rounds_played=self._rounds_played,
            events=self._log.events(),
        )
