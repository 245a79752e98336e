"""Common interface for computer opponents and the model registry."""


class AIModel:
    """Chooses a move for ``me`` on ``board``.

    Implementations must not mutate ``board``; any simulation happens on
    ``board.clone()``. When no empty cell remains they return ``NO_MOVE``.
    """

    name = "ai"

    def next_move(self, board, me, players):
        """Return a Move for the player ``me`` given the full turn order ``players``."""
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


def available_models():
    from . import random_ai, search_minimax

    return {
        random_ai.RandomAI.name: random_ai.RandomAI,
        search_minimax.MinimaxAI.name: search_minimax.MinimaxAI,
    }


def get_model(name):
    """Instantiate an AI model by name ('random' or 'minimax')."""
    models = available_models()
    key = str(name).strip().lower()
    if key not in models:
        raise ValueError(f"Unknown AI model: {name!r} (choose from {', '.join(sorted(models))})")
    return models[key]()
