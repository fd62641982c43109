from __future__ import annotations

from reversi.engine.board import (
    BLACK,
    BOARD_MASK,
    DIRECTIONS,
    EMPTY,
    WHITE,
    Board,
    Move,
    on_board,
    opponent,
)

# Excludes columns 0 and 7 so horizontal and diagonal shifts don't wrap rows.
INNER_COLUMNS = 0x7E7E7E7E7E7E7E7E

# Bit shift per line direction, and whether it needs INNER_COLUMNS.
MOVE_SHIFTS = [(1, True), (7, True), (8, False), (9, True)]

def _captured_in_direction(
    board: Board, row: int, col: int, color: int, d_row: int, d_col: int
) -> list[Move]:
    # Opponent discs between (row, col) and the first disc of `color` in this direction.
    opp = opponent(color)
    run: list[Move] = []

    cur_row, cur_col = row + d_row, col + d_col
    while on_board(cur_row, cur_col):
        square = board.occupied(cur_row, cur_col)

        if square == opp:
            run.append(Move(cur_row, cur_col))
        elif square == color:
            return run
        else:
            break

        cur_row += d_row
        cur_col += d_col

    return []

def get_flips(board: Board, row: int, col: int, color: int) -> list[Move]:
    if not board.is_empty(row, col):
        return []

    flips: list[Move] = []
    for d_row, d_col in DIRECTIONS:
        flips += _captured_in_direction(board, row, col, color, d_row, d_col)
    return flips

def is_capturing(board: Board, row: int, col: int, color: int) -> bool:
    if not board.is_empty(row, col):
        return False

    for d_row, d_col in DIRECTIONS:
        if _captured_in_direction(board, row, col, color, d_row, d_col):
            return True
    return False


def get_move_bits(board: Board, color: int) -> int:
    """
    Returns a bitset with a bit set for every empty square where `color` can
    capture. Bit `8 * row + col` is the square (row, col).
    """

    me = board.get_bits(color)
    opp = board.get_bits(opponent(color))
    empties = ~(me | opp) & BOARD_MASK

    moves = 0
    for shift, wraps in MOVE_SHIFTS:
        mask = opp & INNER_COLUMNS if wraps else opp

        # Runs of opponent discs adjacent to a disc of `color`, up to six long.
        flips = mask & (me << shift)
        flips |= mask & (flips << shift)
        pairs = mask & (mask << shift)
        flips |= pairs & (flips << (2 * shift))
        flips |= pairs & (flips << (2 * shift))
        moves |= flips << shift

        flips = mask & (me >> shift)
        flips |= mask & (flips >> shift)
        pairs = mask & (mask >> shift)
        flips |= pairs & (flips >> (2 * shift))
        flips |= pairs & (flips >> (2 * shift))
        moves |= flips >> shift

    return moves & empties

def legal_moves(board: Board, color: int) -> list[Move]:
    """
    Returns all moves for `color` in row-major order. Only moves that flip at
    least one disc are included, passing on a capturing move is not allowed.
    """

    moves = get_move_bits(board, color)
    return [
        Move(index // 8, index % 8) for index in range(64) if moves & (1 << index)
    ]

def count_moves(board: Board, color: int) -> int:
    return bin(get_move_bits(board, color)).count("1")

def has_moves(board: Board, color: int) -> bool:
    return get_move_bits(board, color) != 0

def is_legal_move(board: Board, move: Move, color: int) -> bool:
    row, col = move

    # Raises OutOfBounds for squares that are not on the board.
    if board.occupied(row, col) != EMPTY:
        return False

    return is_capturing(board, row, col, color)

def apply_move(board: Board, move: Move, color: int) -> Board:
    """
    Places a disc of `color` and flips all captured discs. The caller is
    expected to have checked the move with `is_legal_move()` first.
    """

    row, col = move
    assert board.is_empty(row, col)

    flips = get_flips(board, row, col, color)
    return board.placed(row, col, color, flips)

def is_terminal(board: Board) -> bool:
    return not (has_moves(board, BLACK) or has_moves(board, WHITE))

def score(board: Board, color: int) -> int:
    return board.count(color)
