"""Round and match loop driving a TicTacToeGame from human or AI controllers."""

from . import referee


def play_round(game, controllers, logger=print, renderer=None):
    """
    Play the current round until it ends. Returns the winner, or None for a draw.

    controllers maps each Player to an object with next_move(board, me, players).
    Rejected human input is asked for again; a rejected AI move raises ValueError.
    """
    last_move = None
    move_index = 0
    while game.is_playing():
        if renderer:
            renderer(game, last_move)

        player = game.current
        controller = controllers[player]
        try:
            move = controller.next_move(game.board, player, game.players)
            if player.is_ai and tuple(move) == (-1, -1):
                logger(f"{player.name} has no move available")
                break
            referee.check_move(move, game.board)
        except ValueError as exc:
            if player.is_ai:
                raise
            logger(f"Rejected move from {player.name}: {exc}")
            continue

        game.play_move(*move)
        last_move = move
        move_index += 1
        logger(f"Move {move_index}: {player.name} ({player.glyph}) {tuple(move)}")

    if renderer:
        renderer(game, last_move)

    if game.winner is not None:
        logger(f"Winner: {game.winner.name}")
    elif game.is_game_end():
        logger("Result: Draw (board full)")
    return game.winner


def play_match(game, controllers, rounds=1, logger=print, renderer=None):
    """Play several rounds, clearing the board between them. Returns {name: points}."""
    for round_index in range(rounds):
        if round_index > 0:
            game.reset()
        logger(f"Round {round_index + 1}/{rounds}")
        play_round(game, controllers, logger=logger, renderer=renderer)
    return {player.name: player.points for player in game.players}
