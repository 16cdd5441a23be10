import threading
from typing import Any, Dict

from .registry import PlayerRegistry
from .round_state import RoundState


def snapshot(registry: PlayerRegistry, round_state: RoundState) -> Dict[str, Any]:
    """Full room state in wire shape. Never mutates anything."""
    winner = round_state.winner
    return {
        'isOpen': round_state.is_open,
        'winner': winner.to_dict() if winner else None,
        'players': [p.to_dict() for p in registry.list_all()],
    }


class Room:
    """The single shared room: players, round state and the lock guarding both.

    Handlers must hold ``lock`` across a whole read-modify-broadcast
    sequence; winner and is_open are only ever updated together.
    """

    def __init__(self, nick_prefix: str = 'Player'):
        self.players = PlayerRegistry(nick_prefix=nick_prefix)
        self.round = RoundState()
        self.lock = threading.RLock()

    def snapshot(self) -> Dict[str, Any]:
        return snapshot(self.players, self.round)

    def remove_player(self, sid: str) -> bool:
        """Drop a player, clearing the round if they were the winner."""
        removed = self.players.remove(sid)
        if removed:
            self.round.clear_winner_if_matches(sid)
        return removed
