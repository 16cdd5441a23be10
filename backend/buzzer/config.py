import os


def _split_origins(raw):
    origins = [o.strip() for o in raw.split(',') if o.strip()]
    if origins == ['*']:
        return '*'
    return origins


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    CORS_ALLOWED_ORIGINS = _split_origins(os.environ.get('CORS_ALLOWED_ORIGINS', '*'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Listen address for run.py
    BUZZER_HOST = os.environ.get('BUZZER_HOST', '0.0.0.0')
    BUZZER_PORT = int(os.environ.get('BUZZER_PORT', '3000'))
    # Points used when host:award / host:penalize arrive without a payload
    DEFAULT_AWARD_POINTS = int(os.environ.get('DEFAULT_AWARD_POINTS', '10'))
    DEFAULT_PENALTY_POINTS = int(os.environ.get('DEFAULT_PENALTY_POINTS', '5'))
    # Blank nicknames become "<prefix>-<first 4 chars of the socket id>"
    DEFAULT_NICK_PREFIX = os.environ.get('DEFAULT_NICK_PREFIX', 'Player')
