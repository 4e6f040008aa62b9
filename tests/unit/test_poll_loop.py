from unittest.mock import MagicMock

import pytest

from fileai_mcp.polling.models import PollOutcome
from fileai_mcp.polling.poll_loop import PollLoop
from fileai_mcp.remote.exceptions import ListError
from fileai_mcp.remote.models import ArtifactRecord, ArtifactStatus, UploadTicket

TICKET = UploadTicket(upload_id="u1", transfer_url="https://s3.test/put")


class FakeClock:
    """Monotonic clock that only advances when the loop sleeps."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def __call__(self) -> float:
        return self.now


def _make_record(status: ArtifactStatus, file_name: str = "invoice_final.pdf") -> ArtifactRecord:
    return ArtifactRecord(file_id="f1", upload_id="u1", file_name=file_name, status=status)


def _make_loop(
    listings: list[list[ArtifactRecord]] | None = None,
    max_attempts: int = 20,
    interval_seconds: float = 15.0,
) -> tuple[PollLoop, MagicMock, FakeClock]:
    list_source = MagicMock()
    if listings is None:
        list_source.return_value = []
    else:
        list_source.side_effect = listings
    clock = FakeClock()
    loop = PollLoop(
        list_source,
        max_attempts=max_attempts,
        interval_seconds=interval_seconds,
        sleep=clock.sleep,
        clock=clock,
    )
    return loop, list_source, clock


class TestBudgetExhaustion:
    def test_performs_exactly_max_attempts_ticks(self) -> None:
        loop, list_source, clock = _make_loop()

        result = loop.run("invoice.pdf", TICKET)

        assert list_source.call_count == 20
        assert len(clock.sleeps) == 20
        assert result.attempts_made == 20

    def test_returns_timed_out_without_error(self) -> None:
        loop, _source, _clock = _make_loop()

        result = loop.run("invoice.pdf", TICKET)

        assert result.outcome is PollOutcome.TIMED_OUT
        assert result.is_processed is False
        assert result.record is None

    def test_elapsed_time_is_five_minutes(self) -> None:
        loop, _source, clock = _make_loop()

        result = loop.run("invoice.pdf", TICKET)

        assert clock.sleeps == [15.0] * 20
        assert result.elapsed_seconds == pytest.approx(300.0)

    def test_keeps_last_pending_match(self) -> None:
        pending = _make_record(ArtifactStatus.PENDING)
        loop, _source, _clock = _make_loop(listings=[[pending]] * 3, max_attempts=3)

        result = loop.run("invoice.pdf", TICKET)

        assert result.outcome is PollOutcome.TIMED_OUT
        assert result.record is pending


class TestEarlyExit:
    @pytest.mark.parametrize("k", [1, 2, 7, 20])
    def test_stops_at_tick_k(self, k: int) -> None:
        processed = _make_record(ArtifactStatus.PROCESSED)
        listings = [[] for _ in range(k - 1)] + [[processed]] + [[] for _ in range(20)]
        loop, list_source, _clock = _make_loop(listings=listings)

        result = loop.run("invoice.pdf", TICKET)

        assert list_source.call_count == k
        assert result.attempts_made == k
        assert result.outcome is PollOutcome.PROCESSED
        assert result.record is processed

    def test_pending_then_processed_continues_until_processed(self) -> None:
        pending = _make_record(ArtifactStatus.PENDING)
        processed = _make_record(ArtifactStatus.PROCESSED)
        loop, list_source, _clock = _make_loop(listings=[[pending], [], [processed]])

        result = loop.run("invoice.pdf", TICKET)

        assert list_source.call_count == 3
        assert result.record is processed

    def test_sleeps_before_first_check(self) -> None:
        processed = _make_record(ArtifactStatus.PROCESSED)
        loop, _source, clock = _make_loop(listings=[[processed]])

        result = loop.run("invoice.pdf", TICKET)

        assert clock.sleeps == [15.0]
        assert result.elapsed_seconds == pytest.approx(15.0)


class TestListErrors:
    def test_list_error_propagates(self) -> None:
        loop, list_source, _clock = _make_loop(max_attempts=5)
        list_source.side_effect = [[], ListError(500, "Internal Server Error")]

        with pytest.raises(ListError):
            loop.run("invoice.pdf", TICKET)

        assert list_source.call_count == 2


class TestConfigurationValidation:
    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            PollLoop(MagicMock(), max_attempts=0)

    def test_rejects_negative_interval(self) -> None:
        with pytest.raises(ValueError, match="interval_seconds"):
            PollLoop(MagicMock(), interval_seconds=-1)
