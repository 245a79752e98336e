"""Uniform random move picker, also the fallback for unsupported minimax setups."""

import random

try:
    from Player import NO_MOVE
except ImportError:
    from Battle_TicTacToe.Player import NO_MOVE

from .ai_model import AIModel


def choose_move(board):
    moves = board.available_moves()
    if not moves:
        return NO_MOVE
    return random.choice(moves)


class RandomAI(AIModel):
    name = "random"

    def next_move(self, board, me, players):
        return choose_move(board)
