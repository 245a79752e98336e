"""Exhaustive two-player minimax scored only at terminal positions."""

import time

try:
    from Player import NO_MOVE
except ImportError:
    from Battle_TicTacToe.Player import NO_MOVE

from . import random_ai
from .ai_model import AIModel


WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0
# Strictly outside {-1, 0, 1} so the first child always replaces the bound.
INF = 9999


class MinimaxSearcher:
    """Full-depth search from ``me``'s point of view against a single opponent."""

    def __init__(self, me, opponent, stats=None):
        self.me = me
        self.opponent = opponent
        self.stats_list = stats
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """Return the best move for ``me``; ties keep the first move in board.available_moves() order."""
        self.start_time = time.time()
        self.node_counter = 0

        best_score = -INF
        best_move = NO_MOVE
        for move in board.available_moves():
            child = board.clone()
            child.play(self.me, move.x, move.y)
            score = self._minimax(child, maximizing=False)
            if score > best_score:
                best_score = score
                best_move = move

        if self.stats_list is not None:
            self._record_stats(best_move, best_score)
        return best_move

    def _minimax(self, board, maximizing):
        self.node_counter += 1

        # Terminal state check
        winner = board.check_win()
        if winner is self.me:
            return WIN_SCORE
        if winner is not None:
            return LOSS_SCORE
        if board.check_draw():
            return DRAW_SCORE

        if maximizing:
            best = -INF
            for move in board.available_moves():
                child = board.clone()
                child.play(self.me, move.x, move.y)
                score = self._minimax(child, maximizing=False)
                if score > best:
                    best = score
            return best

        best = INF
        for move in board.available_moves():
            child = board.clone()
            child.play(self.opponent, move.x, move.y)
            score = self._minimax(child, maximizing=True)
            if score < best:
                best = score
        return best

    def _record_stats(self, move, score):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "player": self.me.name,
            "nodes": self.node_counter,
            "time": total_time,
            "move": move,
            "score": None if move.is_none() else score,
        })


def choose_move(board, me, players, stats=None):
    """
    Public entry for a minimax search.
    Anything other than exactly two distinct players has no well-defined
    opponent, so the choice is delegated to the random model.
    """
    if len(players) != 2:
        return random_ai.choose_move(board)
    opponent = me.opponent(players)
    if opponent is None:
        return random_ai.choose_move(board)

    searcher = MinimaxSearcher(me, opponent, stats=stats)
    return searcher.choose_move(board)


class MinimaxAI(AIModel):
    name = "minimax"

    def __init__(self, stats=None):
        self.stats = stats

    def next_move(self, board, me, players):
        return choose_move(board, me, players, stats=self.stats)
