"""Match setup: board geometry and per-player options, loadable from settings."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

try:
    from Player import DEFAULT_PLAYER_COLORS, Player, SymbolType, default_players
    from TicTacToeGame import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, DEFAULT_TO_WIN
    from ai.ai_model import get_model
    from ai.random_ai import RandomAI
except ImportError:
    from Battle_TicTacToe.Player import DEFAULT_PLAYER_COLORS, Player, SymbolType, default_players
    from Battle_TicTacToe.TicTacToeGame import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, DEFAULT_TO_WIN
    from Battle_TicTacToe.ai.ai_model import get_model
    from Battle_TicTacToe.ai.random_ai import RandomAI


MIN_BOARD_DIMENSION = 3

MODES = ("ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human")


@dataclass
class PlayerConfig:
    name: str = ""
    symbol: SymbolType = SymbolType.CROSS
    color: Optional[Tuple[int, int, int]] = None
    is_ai: bool = False
    ai_model: Optional[str] = None
    ready: bool = False

    @classmethod
    def from_dict(cls, data):
        color = data.get("color")
        return cls(
            name=str(data.get("name") or ""),
            symbol=SymbolType.from_name(data.get("symbol", "cross")),
            color=tuple(color) if color is not None else None,
            is_ai=bool(data.get("is_ai", False)),
            ai_model=data.get("ai_model"),
            ready=bool(data.get("ready", False)),
        )


@dataclass
class GameConfig:
    board_width: int = DEFAULT_BOARD_WIDTH
    board_height: int = DEFAULT_BOARD_HEIGHT
    to_win: int = DEFAULT_TO_WIN
    players: List[PlayerConfig] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings):
        """Build a config from a settings mapping (e.g. parsed settings.yaml)."""
        settings = settings or {}
        config = default_game_config()
        config.board_width = _int_setting(settings, "board_width", config.board_width)
        config.board_height = _int_setting(settings, "board_height", config.board_height)
        config.to_win = _int_setting(settings, "to_win", config.to_win)
        if settings.get("players"):
            config.players = [PlayerConfig.from_dict(p) for p in settings["players"]]
        config.validate()
        return config

    def validate(self):
        """Grow boards smaller than MIN_BOARD_DIMENSION on either side up to it."""
        self.board_width = max(self.board_width, MIN_BOARD_DIMENSION)
        self.board_height = max(self.board_height, MIN_BOARD_DIMENSION)
        return self

    def effective_to_win(self):
        min_dim = min(self.board_width, self.board_height)
        if self.to_win <= 0 or self.to_win > min_dim:
            return min_dim
        return self.to_win

    def apply_mode(self, mode, ai_model=None):
        """Flag the first two players as human or AI according to mode ('ai-vs-human' etc.)."""
        if mode not in MODES:
            raise ValueError(f"Unsupported mode: {mode}")
        while len(self.players) < 2:
            self.players.append(PlayerConfig())
        first, second = mode.split("-vs-")
        for pc, kind in zip(self.players, (first, second)):
            pc.is_ai = kind == "ai"
            if pc.is_ai and ai_model:
                pc.ai_model = ai_model
        return self


def _int_setting(settings, key, default):
    """Read an integer setting; a missing or null value means the default."""
    value = settings.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting {key!r} must be an integer, got {value!r}") from exc


def default_game_config():
    return GameConfig(
        players=[
            PlayerConfig(name="Player 1", symbol=SymbolType.CIRCLE, color=DEFAULT_PLAYER_COLORS[0]),
            PlayerConfig(name="Player 2", symbol=SymbolType.CROSS, color=DEFAULT_PLAYER_COLORS[1]),
        ]
    )


def build_players(config):
    """
    Turn player configs into runtime players.
    Returns (players, ai_by_player) where ai_by_player maps each AI player to its model.
    """
    players = []
    ai_by_player = {}

    ready_count = sum(1 for pc in config.players if pc.ready)
    color_idx = 0
    for idx, pc in enumerate(config.players):
        if ready_count > 0 and not pc.ready:
            continue

        color = pc.color
        if color is None:
            color = DEFAULT_PLAYER_COLORS[color_idx % len(DEFAULT_PLAYER_COLORS)]
        color_idx += 1

        player = Player(pc.name or f"Player {idx + 1}", pc.symbol, color, is_ai=pc.is_ai)
        players.append(player)

        if pc.is_ai:
            ai_by_player[player] = get_model(pc.ai_model) if pc.ai_model else RandomAI()

    if not players:
        players = default_players()

    return players, ai_by_player
