"""CLI options for selecting players, board geometry, and config paths."""


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Battle Tic-Tac-Toe (N-in-a-row)")
    parser.add_argument("--board-width", type=int, help="Number of columns")
    parser.add_argument("--board-height", type=int, help="Number of rows")
    parser.add_argument("--to-win", type=int, help="Aligned symbols needed to win (clamped to the smaller side)")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who controls player 1 / player 2)",
    )
    parser.add_argument("--ai-model", choices=["random", "minimax"], default=None, help="Strategy for AI players")
    parser.add_argument("--rounds", type=int, default=None, help="Number of rounds in the match")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random AI (optional)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Do not draw the board between moves")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
