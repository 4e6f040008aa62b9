from dataclasses import dataclass
from enum import Enum

from fileai_mcp.remote.models import ArtifactRecord


class TickOutcome(str, Enum):
    """Result of one CHECKING step."""

    MATCHED_PROCESSED = "matched_processed"
    MATCHED_PENDING = "matched_pending"
    UNMATCHED = "unmatched"


class PollOutcome(str, Enum):
    """How a poll loop run ended."""

    PROCESSED = "processed"
    TIMED_OUT = "timed_out"


@dataclass(slots=True)
class PollState:
    """Mutable state of one poll loop run."""

    max_attempts: int
    interval_seconds: float
    attempts_made: int = 0
    matched_record: ArtifactRecord | None = None

    @property
    def exhausted(self) -> bool:
        return self.attempts_made >= self.max_attempts


@dataclass(frozen=True)
class PollResult:
    """Terminal state handed back to the orchestrator."""

    outcome: PollOutcome
    record: ArtifactRecord | None
    attempts_made: int
    elapsed_seconds: float

    @property
    def is_processed(self) -> bool:
        return self.outcome is PollOutcome.PROCESSED
