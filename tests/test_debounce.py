import pytest

from src.dispatch.models.domain import Crew, GeoPoint, Job
from src.dispatch.services.assignment.debounce import RecomputeScheduler
from src.dispatch.services.assignment.ledger import AssignmentLedger, MoveResult


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _job(jid: str, lat: float) -> Job:
    return Job(id=jid, location=GeoPoint(lat, -118.0), estimated_duration_hours=1.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> RecomputeScheduler:
    ledger = AssignmentLedger()
    ledger.distribute(
        [_job("A1", 34.00), _job("B1", 34.05), _job("X", 34.01), _job("Y", 34.06), _job("Z", 34.02)],
        [Crew(id="crew-a", specialization="Mowing"), Crew(id="crew-b", specialization="Design")],
    )
    return RecomputeScheduler(ledger, window_seconds=0.1, clock=clock)


def test_rapid_moves_coalesce_into_one_recompute(clock: FakeClock):
    ledger = AssignmentLedger()
    ledger.distribute(
        [_job("A1", 34.00), _job("X", 34.01), _job("B1", 34.05), _job("Y", 34.06)],
        [Crew(id="crew-a", specialization="Mowing"), Crew(id="crew-b", specialization="Design")],
    )
    ledger.add_unassigned([_job("Z", 34.02)])
    scheduler = RecomputeScheduler(ledger, window_seconds=0.1, clock=clock)

    calls = []
    original = ledger.recompute_dirty

    def counting_recompute():
        calls.append(ledger.sequence_for("crew-a"))
        return original()

    ledger.recompute_dirty = counting_recompute

    # X and Y start on crew-b, Z in the unassigned pool; all three end up on crew-a.
    assert scheduler.move("X", "crew-b", "crew-a") is MoveResult.MOVED
    clock.now = 0.03
    assert scheduler.move("Y", "crew-b", "crew-a") is MoveResult.MOVED
    clock.now = 0.06
    assert scheduler.move("Z", None, "crew-a") is MoveResult.MOVED

    clock.now = 0.1
    assert scheduler.poll() is None
    assert calls == []

    clock.now = 0.2
    results = scheduler.poll()

    assert len(calls) == 1
    assert scheduler.recompute_count == 1
    assert set(results) == {"crew-a", "crew-b"}
    assert set(ledger.sequence_for("crew-a")) >= {"X", "Y", "Z"}
    assert ledger.sequence_for("crew-b") == []
    assert results["crew-a"].billable_hours == 5.0

    clock.now = 1.0
    assert scheduler.poll() is None
    assert scheduler.recompute_count == 1


def test_noop_and_unknown_moves_do_not_schedule(scheduler: RecomputeScheduler, clock: FakeClock):
    assert scheduler.move("X", "crew-a", "crew-a") is MoveResult.NOOP
    assert scheduler.move("missing", "crew-a", "crew-b") is MoveResult.UNKNOWN_JOB

    assert not scheduler.pending
    clock.now = 5.0
    assert scheduler.poll() is None
    assert scheduler.recompute_count == 0


def test_flush_ignores_window(scheduler: RecomputeScheduler):
    scheduler.move("X", "crew-a", "crew-b")

    results = scheduler.flush()

    assert set(results) == {"crew-a", "crew-b"}
    assert not scheduler.pending
    assert scheduler.flush() == {}
    assert scheduler.recompute_count == 1


def test_each_move_restarts_the_window(scheduler: RecomputeScheduler, clock: FakeClock):
    scheduler.move("X", "crew-a", "crew-b")
    clock.now = 0.09
    scheduler.move("Y", "crew-b", "crew-a")
    clock.now = 0.15

    assert scheduler.poll() is None

    clock.now = 0.25
    assert scheduler.poll() is not None


def test_unassign_schedules_recompute(scheduler: RecomputeScheduler, clock: FakeClock):
    scheduler.unassign("Z")
    clock.now = 0.5

    results = scheduler.poll()

    assert list(results) == ["crew-a"]
    assert [job.id for job in scheduler.ledger.unassigned()] == ["Z"]
