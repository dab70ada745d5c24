from bingo.services.games.scheduler import DrawScheduler, DrawTimer


def test_timer_calls_back_each_interval_until_cancelled():
    sleeps = []
    fired = []

    def callback(timer):
        fired.append(timer)
        if len(fired) == 3:
            timer.cancel()

    timer = DrawTimer(5, callback, sleeps.append)
    timer.run()
    assert len(fired) == 3
    assert sleeps == [5, 5, 5]


def test_cancel_during_sleep_skips_callback():
    fired = []
    timer = DrawTimer(5, fired.append, lambda _: timer.cancel())
    timer.run()
    assert fired == []


class _FakeSocketIO:
    def __init__(self):
        self.tasks = []

    def sleep(self, seconds):
        pass

    def start_background_task(self, target, *args):
        self.tasks.append(target)


def test_scheduler_does_not_start_in_testing(flask_app):
    sio = _FakeSocketIO()
    timer = DrawScheduler(flask_app, sio).schedule(5, lambda t: None)
    assert timer.started is False
    assert sio.tasks == []


def test_scheduler_starts_background_task_when_enabled(flask_app):
    flask_app.config['ENABLE_SCHEDULER_IN_TESTS'] = True
    sio = _FakeSocketIO()
    timer = DrawScheduler(flask_app, sio).schedule(5, lambda t: None)
    assert timer.started is True
    assert sio.tasks == [timer.run]


def test_failing_tick_is_logged_and_loop_continues(caplog):
    fired = []

    def callback(timer):
        fired.append(timer)
        if len(fired) == 1:
            raise RuntimeError('boom')
        timer.cancel()

    timer = DrawTimer(5, callback, lambda _: None)
    with caplog.at_level('ERROR'):
        timer.run()
    assert len(fired) == 2
    assert any('[timer-error]' in r.getMessage() for r in caplog.records)
