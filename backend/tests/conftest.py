import os
import random
import sys
import pytest

# Ensure the backend root (containing the `bingo` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from bingo import create_app, socketio
from bingo.services.games.session import GameSession


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    DRAW_INTERVAL_SEC = 5
    NUMBER_RANGE = 100
    TICKET_ROWS = 3
    TICKET_ROW_SIZE = 7
    MAX_TICKETS_PER_REQUEST = 10
    SOCKETIO_NAMESPACE = '/ws'
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


class RecordingGateway:
    """Collects outbound events instead of sending them."""

    def __init__(self):
        self.sent = []

    def send_to(self, client_id, event, payload):
        self.sent.append((client_id, event, payload))

    def send_to_all(self, event, payload):
        self.sent.append((None, event, payload))

    def names(self):
        return [e for _, e, _ in self.sent]

    def of(self, event):
        return [(to, p) for to, e, p in self.sent if e == event]


class ManualTimer:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.callback(self)


class ManualScheduler:
    """Hands out timers that only fire when a test says so."""

    def __init__(self):
        self.timers = []

    def schedule(self, interval, callback):
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer


@pytest.fixture()
def gateway():
    return RecordingGateway()


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def make_session(gateway, scheduler):
    def _make(**kwargs):
        kwargs.setdefault('rng', random.Random(1234))
        return GameSession(gateway, scheduler, **kwargs)
    return _make


@pytest.fixture()
def session(make_session):
    return make_session()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
