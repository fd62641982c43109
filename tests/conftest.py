import random
import pytest

from reversi.engine.board import BLACK, Board, opponent
from reversi.engine.rules import apply_move, legal_moves


def random_boards(count: int, seed: int) -> list[tuple[Board, int]]:
    # Boards with the color to move, collected from random games.
    rng = random.Random(seed)
    boards: list[tuple[Board, int]] = []

    board = Board.start()
    turn = BLACK

    while len(boards) < count:
        moves = legal_moves(board, turn)

        if not moves:
            if not legal_moves(board, opponent(turn)):
                board = Board.start()
                turn = BLACK
            else:
                turn = opponent(turn)
            continue

        board = apply_move(board, rng.choice(moves), turn)
        turn = opponent(turn)
        boards.append((board, turn))

    return boards


@pytest.fixture(scope="session")
def sample_boards() -> list[tuple[Board, int]]:
    return random_boards(80, seed=42)
