from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Winner:
    """Who pressed first. The nick is captured at press time."""
    id: str
    nick: str

    def to_dict(self):
        return {'id': self.id, 'nick': self.nick}


class RoundState:
    """Buzzer open/closed flag plus the current round's winner.

    Reachable states are closed without a winner, open without a winner
    and closed with a winner. Accepting a press always closes the buzzer.
    """

    def __init__(self):
        self.is_open = False
        self.winner: Optional[Winner] = None

    def open_round(self) -> None:
        self.is_open = True
        self.winner = None

    def close_round(self) -> None:
        # Manual close keeps any winner
        self.is_open = False

    def attempt_press(self, sid: str, nick: str, registered: bool = True) -> bool:
        if not self.is_open or self.winner is not None or not registered:
            return False
        self.winner = Winner(id=sid, nick=nick)
        self.is_open = False
        return True

    def clear_winner_if_matches(self, sid: str) -> bool:
        if self.winner is None or self.winner.id != sid:
            return False
        self.winner = None
        self.is_open = False
        return True
