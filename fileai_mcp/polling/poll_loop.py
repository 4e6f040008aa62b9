import time
from collections.abc import Callable, Sequence

from fileai_mcp.logging.logger import Log
from fileai_mcp.matching.matcher import match_artifact
from fileai_mcp.polling.models import PollOutcome, PollResult, PollState, TickOutcome
from fileai_mcp.remote.models import ArtifactRecord, UploadTicket

ListSource = Callable[[], Sequence[ArtifactRecord]]


class PollLoop:
    """Bounded reconciler: sleep -> list -> match, until processed or out of attempts.

    A pending match and a missing match both continue to the next tick.
    Exhausting the budget is a soft timeout, not an error. Errors raised by
    the list source propagate unchanged and end the run.
    """

    DEFAULT_MAX_ATTEMPTS = 20
    DEFAULT_INTERVAL_SECONDS = 15.0

    def __init__(
        self,
        list_artifacts: ListSource,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must not be negative, got {interval_seconds}")
        self._list_artifacts = list_artifacts
        self._max_attempts = max_attempts
        self._interval_seconds = interval_seconds
        self._sleep = sleep
        self._clock = clock

    def run(self, uploaded_file_name: str, ticket: UploadTicket) -> PollResult:
        """Poll until the uploaded file is processed or the budget is spent."""
        state = PollState(
            max_attempts=self._max_attempts,
            interval_seconds=self._interval_seconds,
        )
        started = self._clock()

        while not state.exhausted:
            self._sleep(state.interval_seconds)
            outcome = self._check(state, uploaded_file_name, ticket)
            Log.info(
                f"Poll tick {state.attempts_made}/{state.max_attempts}",
                upload_id=ticket.upload_id,
                outcome=outcome.value,
            )
            if outcome is TickOutcome.MATCHED_PROCESSED:
                return self._finish(state, PollOutcome.PROCESSED, started)

        Log.warning(
            f"Not processed after {state.attempts_made} attempts",
            upload_id=ticket.upload_id,
        )
        return self._finish(state, PollOutcome.TIMED_OUT, started)

    def _check(
        self,
        state: PollState,
        uploaded_file_name: str,
        ticket: UploadTicket,
    ) -> TickOutcome:
        records = self._list_artifacts()
        state.attempts_made += 1
        record = match_artifact(records, uploaded_file_name, ticket)
        if record is None:
            return TickOutcome.UNMATCHED
        state.matched_record = record
        if record.is_processed:
            return TickOutcome.MATCHED_PROCESSED
        return TickOutcome.MATCHED_PENDING

    def _finish(self, state: PollState, outcome: PollOutcome, started: float) -> PollResult:
        return PollResult(
            outcome=outcome,
            record=state.matched_record,
            attempts_made=state.attempts_made,
            elapsed_seconds=self._clock() - started,
        )
