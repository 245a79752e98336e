"""Battle_TicTacToe package exports."""

from .Board import Board
from .TicTacToeGame import TicTacToeGame, GameState
from .Player import Player, Move, NO_MOVE, SymbolType, default_players
from .game_config import GameConfig, PlayerConfig, build_players, default_game_config

# Subpackages for AI models, match engine, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "TicTacToeGame",
    "GameState",
    "Player",
    "Move",
    "NO_MOVE",
    "SymbolType",
    "default_players",
    "GameConfig",
    "PlayerConfig",
    "build_players",
    "default_game_config",
    "ai",
    "engine",
    "utils",
]
