"""Board state container and victory checking (N-in-a-row on a W x H grid)."""

try:
    from Player import Move
except ImportError:
    from Battle_TicTacToe.Player import Move


# Right, down, down-right, up-right. Every cell is tried as a line start,
# so the reverse directions never need scanning.
WIN_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


class Board:
    def __init__(self, width=3, height=3, to_win=3):
        # Store cells as None (empty) or the Player occupying them
        self.width = width
        self.height = height
        self.to_win = to_win
        self.cells = [[None] * width for _ in range(height)]

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] is None

    def get(self, x, y):
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def play(self, player, x, y):
        """Mark (x, y) for player. Returns False, leaving the grid untouched, if the cell is off-board or taken."""
        if not self.in_bounds(x, y):
            return False
        if self.cells[y][x] is not None:
            return False
        self.cells[y][x] = player
        return True

    def effective_to_win(self):
        """Alignment length actually required; out-of-range values fall back to the smaller dimension."""
        min_dim = min(self.width, self.height)
        if self.to_win <= 0 or self.to_win > min_dim:
            return min_dim
        return self.to_win

    def check_win(self):
        """Return the first player owning a full line, scanning columns left-to-right then rows top-to-bottom."""
        target = self.effective_to_win()
        for x in range(self.width):
            for y in range(self.height):
                start = self.cells[y][x]
                if start is None:
                    continue
                for dx, dy in WIN_DIRECTIONS:
                    if self._line_from(x, y, dx, dy, start, target):
                        return start
        return None

    def check_draw(self):
        """True when no empty cell remains. Does not look for a winning line."""
        for row in self.cells:
            for cell in row:
                if cell is None:
                    return False
        return True

    def available_moves(self):
        """Empty cells as Moves, column-major (x outer, y inner)."""
        return [
            Move(x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.cells[y][x] is None
        ]

    def occupied_count(self):
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def clone(self):
        # Grid storage is copied; the Player references inside are shared.
        new_board = Board(self.width, self.height, self.to_win)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def clear(self):
        for row in self.cells:
            for x in range(len(row)):
                row[x] = None

    def _line_from(self, x, y, dx, dy, player, target):
        """Check that target cells starting at (x, y) in (dx, dy) all belong to player."""
        for step in range(1, target):
            nx, ny = x + dx * step, y + dy * step
            if not self.in_bounds(nx, ny):
                return False
            if self.cells[ny][nx] is not player:
                return False
        return True
