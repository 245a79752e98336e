"""Turn management, scoring and round lifecycle for N-in-a-row matches."""

from enum import Enum

try:
    from Board import Board
    from Player import default_players
except ImportError:
    from Battle_TicTacToe.Board import Board
    from Battle_TicTacToe.Player import default_players


DEFAULT_BOARD_WIDTH = 3
DEFAULT_BOARD_HEIGHT = 3
DEFAULT_TO_WIN = 3


class GameState(Enum):
    PLAYING = 0
    GAME_END = 1


class TicTacToeGame:
    """Owns one Board and the ordered player list; players take turns cyclically.

    ``winner`` is only set once the state is GAME_END and a line was completed.
    GAME_END with ``winner is None`` means the round was drawn.
    """

    def __init__(self, board_width=DEFAULT_BOARD_WIDTH, board_height=DEFAULT_BOARD_HEIGHT, to_win=DEFAULT_TO_WIN, players=None):
        self.board = None
        self.players = []
        self.current = None
        self.winner = None
        self.state = GameState.PLAYING
        self.reset_hard_with_players(board_width, board_height, to_win, players)

    def reset_hard(self):
        self.reset_hard_with_players(DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT, DEFAULT_TO_WIN, None)

    def reset_hard_with_players(self, board_width, board_height, to_win, players):
        """Start a brand new match: fresh board, new player list, all scores zeroed."""
        self.board_width = board_width
        self.board_height = board_height
        self.to_win = to_win
        self.board = Board(board_width, board_height, to_win)

        if not players:
            players = default_players()
        self.players = list(players)
        self.reset_points()

        self.current = self.players[0]
        self.winner = None
        self.state = GameState.PLAYING

    def reset(self):
        """Start the next round of the same match; scores are kept."""
        if self.board is None:
            self.board = Board(self.board_width, self.board_height, self.to_win)
        else:
            self.board.clear()

        self.current = self.players[0]
        self.winner = None
        self.state = GameState.PLAYING

    def reset_points(self):
        for player in self.players:
            player.points = 0

    def next_player(self):
        if not self.players:
            return
        for idx, player in enumerate(self.players):
            if player is self.current:
                self.current = self.players[(idx + 1) % len(self.players)]
                return
        # Current player vanished from the list; restart the rotation.
        self.current = self.players[0]

    def play_move(self, x, y):
        """Play (x, y) for the current player.

        A rejected move returns False and changes nothing, the turn included.
        An accepted move either ends the round (win or draw) or passes the turn.
        """
        if not self.board.play(self.current, x, y):
            return False
        if self.check_win():
            return True
        if self.check_draw():
            return True
        self.next_player()
        return True

    def check_win(self):
        winner = self.board.check_win()
        if winner is None:
            return False
        self.winner = winner
        self.winner.points += 1
        self.state = GameState.GAME_END
        return True

    def check_draw(self):
        if not self.board.check_draw():
            return False
        self.winner = None
        self.state = GameState.GAME_END
        return True

    def is_playing(self):
        return self.state == GameState.PLAYING

    def is_game_end(self):
        return self.state == GameState.GAME_END
