"""Socket.IO event names and inbound payload schemas.

Each inbound event is parsed into a small typed value before the
dispatcher touches room state. Nicknames are coerced; points and kick
targets that do not fit their schema yield ``None`` and the event is
ignored.
"""

from dataclasses import dataclass
from typing import Any, Optional

# Inbound
PLAYER_JOIN = 'player:join'
BUZZER_PRESS = 'buzzer:press'
HOST_OPEN = 'host:open'
HOST_CLOSE = 'host:close'
HOST_AWARD = 'host:award'
HOST_PENALIZE = 'host:penalize'
HOST_RESET_SCORES = 'host:resetScores'
HOST_KICK = 'host:kick'

# Outbound
STATE_INIT = 'state:init'
STATE_UPDATE = 'state:update'
BUZZER_WINNER = 'buzzer:winner'
BUZZER_OPEN = 'buzzer:open'
BUZZER_CLOSE = 'buzzer:close'
SCORE_CHANGED = 'score:changed'
SCORE_RESET = 'score:reset'
PLAYER_KICKED = 'player:kicked'


@dataclass(frozen=True)
class Join:
    nick: str


@dataclass(frozen=True)
class ScoreChange:
    points: int


@dataclass(frozen=True)
class Kick:
    target: str


def parse_join(data: Any) -> Join:
    if isinstance(data, str):
        nick = data
    elif isinstance(data, (int, float)) and not isinstance(data, bool):
        nick = str(data)
    else:
        nick = ''
    return Join(nick=nick.strip())


def parse_points(data: Any, default: int) -> Optional[ScoreChange]:
    if data is None:
        return ScoreChange(points=default)
    if isinstance(data, bool) or not isinstance(data, int):
        return None
    return ScoreChange(points=data)


def parse_kick(data: Any) -> Optional[Kick]:
    if not isinstance(data, str) or not data:
        return None
    return Kick(target=data)
