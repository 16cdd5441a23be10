"""Buzzer room domain: player registry, round state and snapshots.

Pure domain logic imported by the socket handlers and HTTP routes,
keeping transport concerns separated from the room mechanics.
"""

from .registry import Player, PlayerNotFound, PlayerRegistry
from .round_state import RoundState, Winner
from .projector import Room, snapshot

__all__ = [
    'Player',
    'PlayerNotFound',
    'PlayerRegistry',
    'RoundState',
    'Winner',
    'Room',
    'snapshot',
]
