"""Text rendering and keyboard input for playing in a terminal."""

try:
    from Player import Move
except ImportError:
    from Battle_TicTacToe.Player import Move


def render_board(board):
    """Draw the grid with column numbers on top and row numbers on the left."""
    width = len(str(max(board.width, board.height) - 1))
    header = " " * (width + 1) + " ".join(str(x).rjust(width) for x in range(board.width))
    lines = [header]
    for y in range(board.height):
        cells = []
        for x in range(board.width):
            player = board.cells[y][x]
            cells.append((player.glyph if player is not None else ".").rjust(width))
        lines.append(str(y).rjust(width) + " " + " ".join(cells))
    return "\n".join(lines)


def render_scores(players, current=None):
    parts = []
    for player in players:
        marker = "*" if player is current else " "
        parts.append(f"{marker}{player.name} ({player.glyph}): {player.points}")
    return " | ".join(parts)


class ConsoleHuman:
    """Reads 'x y' (0-indexed column and row) from the keyboard."""

    def __init__(self, input_fn=input):
        self.input_fn = input_fn

    def next_move(self, board, me, players):
        raw = self.input_fn(f"{me.name} ({me.glyph}) enter move as 'x y' (0-indexed): ").strip()
        try:
            x_str, y_str = raw.replace(",", " ").split()
            return Move(int(x_str), int(y_str))
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
