import os
import sys
import pytest

# Ensure the backend root (containing the `buzzer` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from buzzer import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    DEFAULT_AWARD_POINTS = 10
    DEFAULT_PENALTY_POINTS = 5
    DEFAULT_NICK_PREFIX = 'Player'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def room(flask_app):
    from buzzer import get_room
    return get_room()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()


def events_named(received, name):
    return [pkt for pkt in received if pkt['name'] == name]


def last_state(received):
    updates = events_named(received, 'state:update')
    assert updates, f"no state:update in {[pkt['name'] for pkt in received]}"
    return updates[-1]['args'][0]


def join_as(test_client, nick):
    """Join with ``nick`` and return this connection's player id."""
    test_client.emit('player:join', nick)
    received = test_client.get_received()
    init = events_named(received, 'state:init')[0]['args'][0]
    return next(p['id'] for p in reversed(init['players']) if p['nick'] == nick)
