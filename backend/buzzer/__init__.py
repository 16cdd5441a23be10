from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
from buzzer.config import Config
from buzzer.services.room import Room

socketio = SocketIO(async_mode=None)

ROOM_EXTENSION_KEY = 'buzzer.room'


def get_room() -> Room:
    """The room owned by the running app."""
    return current_app.extensions[ROOM_EXTENSION_KEY]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    origins = flask_app.config.get('CORS_ALLOWED_ORIGINS', '*')
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # One room per process, created here and never replaced
    flask_app.extensions[ROOM_EXTENSION_KEY] = Room(
        nick_prefix=flask_app.config.get('DEFAULT_NICK_PREFIX', 'Player')
    )

    from buzzer.routes import main
    flask_app.register_blueprint(main)

    from buzzer.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    return flask_app
