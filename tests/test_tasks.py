import pytest

from darkflix.party import tasks
from darkflix.party.limiter import RateLimiter
from darkflix.party.registry import RoomRegistry
from darkflix.party.tasks import ClockTicker, PeriodicTask, Reaper, start_background_tasks


@pytest.fixture
def reg(clock):
    return RoomRegistry(rate_limiter=RateLimiter(window_ms=5000), clock=clock)


def test_ticker_advances_every_room_by_step(reg):
    ticker = ClockTicker(reg, step_seconds=5)
    configured = reg.create_room("alice")
    reg.set_room_details(configured, "https://x/video")
    unconfigured = reg.create_room("bob")

    for _ in range(3):
        ticker.tick()

    assert reg.get_current_time(configured) == 15
    assert reg.get_current_time(unconfigured) == 15


def test_ticker_counts_only_ticks_since_creation(reg):
    ticker = ClockTicker(reg, step_seconds=5)
    early = reg.create_room("alice")
    ticker.tick()
    ticker.tick()
    late = reg.create_room("bob")
    ticker.tick()

    assert reg.get_current_time(early) == 15
    assert reg.get_current_time(late) == 5


def test_reaper_sweep(reg, clock):
    reaper = Reaper(reg, inactivity_seconds=60)
    fresh_unconfigured = reg.create_room("alice")
    idle = reg.create_room("bob")
    reg.set_room_details(idle, "https://x/video")

    assert reaper.sweep() == [fresh_unconfigured]

    clock.advance(60_001)
    assert reaper.sweep() == [idle]
    assert len(reg) == 0


def test_reaper_keeps_polled_rooms(reg, clock):
    reaper = Reaper(reg, inactivity_seconds=60)
    code = reg.create_room("alice")
    reg.set_room_details(code, "https://x/video")

    for _ in range(5):
        clock.advance(30_000)
        reg.get_current_time(code)
        assert reaper.sweep() == []


def test_reaper_prunes_rate_limiter(reg, clock):
    reaper = Reaper(reg, inactivity_seconds=60)
    code = reg.create_room("alice")
    reg.set_room_details(code, "https://x/video")
    reg.post_message(code, "alice", None, "hi")
    assert len(reg.rate_limiter) == 1

    clock.advance(5000)
    reaper.sweep()
    assert len(reg.rate_limiter) == 0


def test_periodic_task_survives_failures(monkeypatch):
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        if len(calls) == 3:
            task.stop()

    task = PeriodicTask("flaky", 5, flaky)
    sleeps = []
    monkeypatch.setattr(tasks.socketio, "sleep", sleeps.append)

    task.run()

    assert len(calls) == 3
    assert sleeps == [5, 5, 5]


def test_background_tasks_disabled_in_tests(app, registry):
    assert start_background_tasks(app, registry) == []


def test_background_tasks_start_once(make_app, monkeypatch):
    started = []
    monkeypatch.setattr(tasks.socketio, "start_background_task", started.append)

    app = make_app(WATCH_PARTY_BACKGROUND_TASKS=True)
    names = [t.name for t in app.extensions["watch_party_tasks"]]
    assert names == ["clock-ticker", "reaper"]
    assert len(started) == 2

    start_background_tasks(app, app.extensions["watch_party"])
    assert len(started) == 2
