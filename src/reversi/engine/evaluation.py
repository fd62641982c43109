from __future__ import annotations

from reversi.engine.board import BLACK, CORNERS, WHITE, Board
from reversi.engine.rules import count_moves, score

# A corner is worth as much as ten discs.
CORNER_BONUS = 10


def corner_bonus(board: Board, color: int) -> int:
    return CORNER_BONUS * sum(
        1 for row, col in CORNERS if board.occupied(row, col) == color
    )


def side_total(board: Board, color: int) -> int:
    mobility = count_moves(board, color)
    return mobility + score(board, color) + corner_bonus(board, color)


def heuristic(board: Board) -> int:
    """
    Static evaluation of a board: mobility, disc count and corners, equally
    weighted. Positive values are good for black, negative values for white.
    """

    return side_total(board, BLACK) - side_total(board, WHITE)
