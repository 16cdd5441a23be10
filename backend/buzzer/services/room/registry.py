from dataclasses import dataclass
from typing import Dict, List, Optional


class PlayerNotFound(KeyError):
    """Raised when a score change targets a connection with no player."""


@dataclass
class Player:
    id: str
    nick: str
    score: int = 0

    def to_dict(self):
        return {
            'id': self.id,
            'nick': self.nick,
            'score': self.score,
        }


def default_nick(sid: str, prefix: str = 'Player') -> str:
    return f"{prefix}-{sid[:4]}"


class PlayerRegistry:
    """Connection id -> Player, kept in join order."""

    def __init__(self, nick_prefix: str = 'Player'):
        self.nick_prefix = nick_prefix
        # dicts preserve insertion order, which is the join order clients see
        self._players: Dict[str, Player] = {}

    def join(self, sid: str, nick_raw: str = '') -> Player:
        """Register a connection or rename it.

        A blank nickname falls back to a name derived from the connection id.
        Rejoining keeps the existing score and position.
        """
        nick = (nick_raw or '').strip() or default_nick(sid, self.nick_prefix)
        player = self._players.get(sid)
        if player is None:
            player = Player(id=sid, nick=nick)
            self._players[sid] = player
        else:
            player.nick = nick
        return player

    def get(self, sid: str) -> Optional[Player]:
        return self._players.get(sid)

    def remove(self, sid: str) -> bool:
        return self._players.pop(sid, None) is not None

    def adjust_score(self, sid: str, delta: int) -> int:
        player = self._players.get(sid)
        if player is None:
            raise PlayerNotFound(sid)
        player.score += delta
        return player.score

    def reset_all_scores(self) -> None:
        for player in self._players.values():
            player.score = 0

    def list_all(self) -> List[Player]:
        return list(self._players.values())

    def __contains__(self, sid) -> bool:
        return sid in self._players

    def __len__(self) -> int:
        return len(self._players)
