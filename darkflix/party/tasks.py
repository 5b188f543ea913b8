import logging

from ..extensions import socketio

logger = logging.getLogger(__name__)


class PeriodicTask:
    """Call ``func`` every ``interval`` seconds on a SocketIO background task."""

    def __init__(self, name, interval, func):
        self.name = name
        self.interval = interval
        self.func = func
        self._stopped = False
        self._task = None

    def run(self):
        logger.info(f"Starting periodic task {self.name} every {self.interval}s")
        while not self._stopped:
            socketio.sleep(self.interval)
            if self._stopped:
                break
            try:
                self.func()
            except Exception:
                logger.exception(f"Periodic task {self.name} failed")

    def start(self):
        self._task = socketio.start_background_task(self.run)
        return self._task

    def stop(self):
        self._stopped = True


class ClockTicker:
    def __init__(self, registry, step_seconds=5):
        self.registry = registry
        self.step_seconds = step_seconds

    def tick(self):
        return self.registry.advance_clock(self.step_seconds)


class Reaper:
    def __init__(self, registry, inactivity_seconds=30 * 60):
        self.registry = registry
        self.inactivity_seconds = inactivity_seconds

    def sweep(self):
        reaped = self.registry.reap(self.inactivity_seconds * 1000)
        pruned = self.registry.rate_limiter.prune(self.registry.clock())
        if pruned:
            logger.debug(f"Pruned {pruned} stale rate limit entries")
        return reaped


def start_background_tasks(app, registry):
    """Start the clock ticker and the reaper for ``app``; returns the tasks."""
    if not app.config.get('WATCH_PARTY_BACKGROUND_TASKS', True):
        return []
    if app.extensions.get('watch_party_tasks'):
        return app.extensions['watch_party_tasks']

    tick_seconds = app.config['WATCH_PARTY_TICK_SECONDS']
    ticker = ClockTicker(registry, step_seconds=tick_seconds)
    reaper = Reaper(registry, inactivity_seconds=app.config['WATCH_PARTY_INACTIVITY_SECONDS'])
    tasks = [
        PeriodicTask('clock-ticker', tick_seconds, ticker.tick),
        PeriodicTask('reaper', app.config['WATCH_PARTY_REAP_INTERVAL_SECONDS'], reaper.sweep),
    ]
    for task in tasks:
        task.start()
    app.extensions['watch_party_tasks'] = tasks
    return tasks
