"""Match outcome models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arena.models.events import CombatEvent


class MatchOutcome(str, Enum):
    """Match states."""

    PENDING = "pending"
    RUNNING = "running"
    CHALLENGER_WON = "challenger_won"
    OPPONENT_WON = "opponent_won"
    NO_CONTEST = "no_contest"


class MatchResult(BaseModel):
    """Terminal outcome of a fought match."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    outcome: MatchOutcome = Field(description="Terminal state reached")
    winner: Optional[str] = Field(default=None, description="Winner name, None on no-contest")
    loser: Optional[str] = Field(default=None, description="Loser name, None on no-contest")
    rounds: int = Field(ge=1, description="Round budget of the match")
    rounds_played: int = Field(ge=0, description="Rounds started before the match ended")
    events: list[CombatEvent] = Field(default_factory=list, description="Full narration of the match")

    @property
    def is_no_contest(self) -> bool:
        """Whether the round budget ran out with both characters alive."""
        return self.outcome == MatchOutcome.NO_CONTEST
