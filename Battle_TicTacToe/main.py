"""Entry point for Battle Tic-Tac-Toe matches. Load config, wire players, run the match."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import build_parser
    from utils.logger import log_event
    from TicTacToeGame import TicTacToeGame
    from game_config import GameConfig, build_players
    from engine import console, match
except ImportError:
    from Battle_TicTacToe.utils.cli import build_parser
    from Battle_TicTacToe.utils.logger import log_event
    from Battle_TicTacToe.TicTacToeGame import TicTacToeGame
    from Battle_TicTacToe.game_config import GameConfig, build_players
    from Battle_TicTacToe.engine import console, match


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Battle_TicTacToe/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def merge_settings(settings, args):
    """Command line values win over the settings file."""
    merged = dict(settings)
    overrides = {
        "board_width": args.board_width,
        "board_height": args.board_height,
        "to_win": args.to_win,
        "mode": args.mode,
        "ai_model": args.ai_model,
        "rounds": args.rounds,
        "seed": args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def build_match(settings, input_fn=input):
    """Create the game and the controller for every player from merged settings."""
    config = GameConfig.from_settings(settings)
    config.apply_mode(settings.get("mode") or "human-vs-ai", ai_model=settings.get("ai_model"))

    players, ai_by_player = build_players(config)
    game = TicTacToeGame(config.board_width, config.board_height, config.effective_to_win(), players)

    human = console.ConsoleHuman(input_fn=input_fn)
    controllers = {player: ai_by_player.get(player, human) for player in game.players}
    return game, controllers


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = merge_settings(load_settings(args.settings), args)

    if settings.get("seed") is not None:
        random.seed(settings["seed"])

    try:
        game, controllers = build_match(settings)
    except ValueError as exc:
        parser.error(str(exc))

    def renderer(current_game, last_move):
        print(console.render_board(current_game.board))
        print(console.render_scores(current_game.players, current_game.current))

    rounds = int(settings.get("rounds", 1) or 1)
    scores = match.play_match(
        game,
        controllers,
        rounds=rounds,
        logger=log_event,
        renderer=None if args.quiet else renderer,
    )
    print("Final scores: " + ", ".join(f"{name} {points}" for name, points in scores.items()))
    return scores


if __name__ == "__main__":
    main()
