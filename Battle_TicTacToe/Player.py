"""Player identities and move coordinates."""

from enum import Enum
from typing import NamedTuple


class SymbolType(Enum):
    CROSS = "X"
    CIRCLE = "O"
    TRIANGLE = "^"
    SQUARE = "#"

    @property
    def glyph(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """Accept 'cross', 'CROSS' or the glyph itself."""
        if isinstance(name, cls):
            return name
        key = str(name).strip()
        for member in cls:
            if key.upper() == member.name or key == member.value:
                return member
        raise ValueError(f"Unknown symbol: {name!r}")


class Move(NamedTuple):
    """Zero-based cell coordinate: x is the column, y the row."""

    x: int
    y: int

    def is_valid(self, width, height):
        return 0 <= self.x < width and 0 <= self.y < height

    def is_none(self):
        return self.x == -1 and self.y == -1


# Returned by AI models when the board has no empty cell left.
NO_MOVE = Move(-1, -1)


class Player:
    """A participant in a match.

    Players are compared by identity only: two players with the same name
    and symbol are still different players. The game increments ``points``
    when this player completes a line.
    """

    def __init__(self, name, symbol=SymbolType.CROSS, color=(255, 255, 255), is_ai=False):
        self.name = name
        self.symbol = symbol
        self.color = color
        self.is_ai = is_ai
        self.points = 0

    @property
    def glyph(self):
        return self.symbol.glyph

    def opponent(self, players):
        for player in players:
            if player is not self:
                return player
        return None

    def __repr__(self):
        return f"Player(name={self.name!r}, symbol={self.symbol.name}, points={self.points})"


DEFAULT_PLAYER_COLORS = (
    (255, 99, 132),
    (54, 162, 235),
    (75, 192, 192),
    (255, 206, 86),
)


def default_players():
    return [
        Player("Player 1", SymbolType.CIRCLE, DEFAULT_PLAYER_COLORS[0]),
        Player("Player 2", SymbolType.CROSS, DEFAULT_PLAYER_COLORS[1]),
    ]
