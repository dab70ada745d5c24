import logging
from typing import Callable, Optional


class DrawTimer:
    """Cancelable handle for the recurring draw loop.

    The loop calls `callback(timer)` once per interval, one call at a time, so
    ticks never overlap. After `cancel()` no further callback fires. A failing
    callback is logged and the loop keeps going.
    """

    def __init__(self, interval: float, callback: Callable[['DrawTimer'], None], sleep: Callable[[float], None],
                 logger: Optional[logging.Logger] = None):
        self.interval = interval
        self.callback = callback
        self._sleep = sleep
        self.logger = logger or logging.getLogger(__name__)
        self.cancelled = False
        self.started = False

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> None:
        while not self.cancelled:
            self._sleep(self.interval)
            if self.cancelled:
                return
            try:
                self.callback(self)
            except Exception:
                self.logger.exception(f"[timer-error] interval={self.interval}s tick failed")


class DrawScheduler:
    """Starts draw timers as Socket.IO background tasks.

    - No-ops in TESTING mode (the handle is returned unstarted and tests call
      `tick()` by hand) unless ENABLE_SCHEDULER_IN_TESTS is set
    """

    def __init__(self, app, socketio):
        self.app = app
        self.socketio = socketio

    def schedule(self, interval: float, callback: Callable[[DrawTimer], None]) -> DrawTimer:
        timer = DrawTimer(interval, callback, self.socketio.sleep, self.app.logger)
        if self.app.config.get('TESTING') and not self.app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
            self.app.logger.info(f"[timer-skip] interval={interval}s testing mode, not started")
            return timer
        self.socketio.start_background_task(timer.run)
        timer.started = True
        self.app.logger.info(f"[timer-set] interval={interval}s")
        return timer
