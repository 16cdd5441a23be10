from flask import Blueprint, jsonify
from buzzer import get_room

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the trivia buzzer server!'})


@main.route('/api/state')
def state():
    room = get_room()
    with room.lock:
        return jsonify(room.snapshot())
