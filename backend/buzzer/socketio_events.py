from flask import current_app, request
from flask_socketio import emit
from buzzer import socketio, get_room
from buzzer import events as ev
from buzzer.services.room import Room, PlayerNotFound


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _broadcast(event: str, *args) -> None:
    socketio.emit(event, *args, namespace=request.namespace)


def _broadcast_state(room: Room) -> None:
    _broadcast(ev.STATE_UPDATE, room.snapshot())


def handle_join(data=None):
    join = ev.parse_join(data)
    sid = _get_sid()
    room = get_room()
    with room.lock:
        player = room.players.join(sid, join.nick)
        current_app.logger.info(f"[join] sid={sid} nick={player.nick} score={player.score}")
        emit(ev.STATE_INIT, room.snapshot())
        _broadcast_state(room)


def handle_press(data=None):
    sid = _get_sid()
    room = get_room()
    with room.lock:
        player = room.players.get(sid)
        accepted = room.round.attempt_press(
            sid, player.nick if player else '', registered=player is not None
        )
        if not accepted:
            current_app.logger.debug(
                f"[press-rejected] sid={sid} open={room.round.is_open} winner={room.round.winner}"
            )
            return
        current_app.logger.info(f"[press-accepted] sid={sid} nick={player.nick}")
        _broadcast(ev.BUZZER_WINNER, room.round.winner.to_dict())
        _broadcast_state(room)


def handle_host_open(data=None):
    room = get_room()
    with room.lock:
        room.round.open_round()
        current_app.logger.info(f"[open] by sid={_get_sid()}")
        _broadcast(ev.BUZZER_OPEN)
        _broadcast_state(room)


def handle_host_close(data=None):
    room = get_room()
    with room.lock:
        room.round.close_round()
        current_app.logger.info(f"[close] by sid={_get_sid()}")
        _broadcast(ev.BUZZER_CLOSE)
        _broadcast_state(room)


def _change_winner_score(room: Room, delta: int, tag: str) -> None:
    winner = room.round.winner
    if winner is None:
        current_app.logger.debug(f"[{tag}-skip] no winner")
        return
    try:
        score = room.players.adjust_score(winner.id, delta)
    except PlayerNotFound:
        current_app.logger.debug(f"[{tag}-skip] winner {winner.id} no longer registered")
        return
    current_app.logger.info(f"[{tag}] sid={winner.id} delta={delta} score={score}")
    _broadcast(ev.SCORE_CHANGED, {'id': winner.id, 'score': score})
    _broadcast_state(room)


def handle_host_award(data=None):
    change = ev.parse_points(data, current_app.config.get('DEFAULT_AWARD_POINTS', 10))
    if change is None:
        current_app.logger.debug(f"[award-skip] invalid points {data!r}")
        return
    room = get_room()
    with room.lock:
        _change_winner_score(room, change.points, 'award')


def handle_host_penalize(data=None):
    change = ev.parse_points(data, current_app.config.get('DEFAULT_PENALTY_POINTS', 5))
    if change is None:
        current_app.logger.debug(f"[penalize-skip] invalid points {data!r}")
        return
    room = get_room()
    with room.lock:
        _change_winner_score(room, -change.points, 'penalize')


def handle_host_reset_scores(data=None):
    room = get_room()
    with room.lock:
        room.players.reset_all_scores()
        current_app.logger.info(f"[reset-scores] by sid={_get_sid()}")
        _broadcast(ev.SCORE_RESET)
        _broadcast_state(room)


def handle_host_kick(data=None):
    kick = ev.parse_kick(data)
    if kick is None:
        current_app.logger.debug(f"[kick-skip] invalid target {data!r}")
        return
    room = get_room()
    with room.lock:
        if not room.remove_player(kick.target):
            current_app.logger.debug(f"[kick-skip] unknown target {kick.target}")
            return
        current_app.logger.info(f"[kick] target={kick.target} by sid={_get_sid()}")
        _broadcast(ev.PLAYER_KICKED, kick.target)
        _broadcast_state(room)


def handle_disconnect(reason=None):
    sid = _get_sid()
    room = get_room()
    with room.lock:
        if not room.remove_player(sid):
            return
        current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
        _broadcast_state(room)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Bind the buzzer protocol to ``namespace``."""
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event(ev.PLAYER_JOIN, handle_join, namespace=namespace)
    socketio.on_event(ev.BUZZER_PRESS, handle_press, namespace=namespace)
    socketio.on_event(ev.HOST_OPEN, handle_host_open, namespace=namespace)
    socketio.on_event(ev.HOST_CLOSE, handle_host_close, namespace=namespace)
    socketio.on_event(ev.HOST_AWARD, handle_host_award, namespace=namespace)
    socketio.on_event(ev.HOST_PENALIZE, handle_host_penalize, namespace=namespace)
    socketio.on_event(ev.HOST_RESET_SCORES, handle_host_reset_scores, namespace=namespace)
    socketio.on_event(ev.HOST_KICK, handle_host_kick, namespace=namespace)
