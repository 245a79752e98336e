"""Move validation for moves coming from controllers (humans or AI models)."""


def check_move(move, board):
    """
    Validate a controller's move against the sentinel, bounds and occupancy.
    Raises ValueError on invalid moves.
    """
    x, y = move
    if x == -1 and y == -1:
        raise ValueError("No move available")
    if not board.in_bounds(x, y):
        raise ValueError("Move out of bounds")
    if not board.is_empty(x, y):
        raise ValueError("Cell already occupied")

    return True
