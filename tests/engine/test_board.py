import pytest

from reversi.engine.board import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    Move,
    OutOfBounds,
    color_name,
    opponent,
)

BOARD_CORNER = Board.from_rows(
    [
        "b-------",
        "--------",
        "--------",
        "--------",
        "--------",
        "--------",
        "--------",
        "-------w",
    ]
)


def test_start_board() -> None:
    board = Board.start()
    assert board.occupied(3, 3) == WHITE
    assert board.occupied(3, 4) == BLACK
    assert board.occupied(4, 3) == BLACK
    assert board.occupied(4, 4) == WHITE
    assert board.count_discs() == 4
    assert board.count_empties() == 60


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count_discs() == 0
    assert board.count_empties() == 64


@pytest.mark.parametrize(
    ["color", "expected_black", "expected_white"],
    [
        pytest.param(BLACK, 64, 0, id="black"),
        pytest.param(WHITE, 0, 64, id="white"),
    ],
)
def test_filled(color: int, expected_black: int, expected_white: int) -> None:
    board = Board.filled(color)
    assert board.count(BLACK) == expected_black
    assert board.count(WHITE) == expected_white


def test_filled_error() -> None:
    with pytest.raises(ValueError):
        Board.filled(EMPTY)


def test_init_error() -> None:
    with pytest.raises(ValueError):
        Board(0x1, 0x1)

    with pytest.raises(ValueError):
        Board(1 << 64, 0x0)


def test_from_rows() -> None:
    assert BOARD_CORNER.occupied(0, 0) == BLACK
    assert BOARD_CORNER.occupied(7, 7) == WHITE
    assert BOARD_CORNER.occupied(0, 7) == EMPTY
    assert BOARD_CORNER.count_discs() == 2


def test_from_rows_matches_start() -> None:
    rows = [
        "- - - - - - - -",
        "- - - - - - - -",
        "- - - - - - - -",
        "- - - w b - - -",
        "- - - b w - - -",
        "- - - - - - - -",
        "- - - - - - - -",
        "- - - - - - - -",
    ]
    assert Board.from_rows(rows) == Board.start()


@pytest.mark.parametrize(
    ["rows"],
    [
        pytest.param(["--------"] * 7, id="too-few-rows"),
        pytest.param(["--------"] * 9, id="too-many-rows"),
        pytest.param(["-------"] + ["--------"] * 7, id="short-row"),
        pytest.param(["-------x"] + ["--------"] * 7, id="invalid-square"),
    ],
)
def test_from_rows_error(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        Board.from_rows(rows)


@pytest.mark.parametrize(
    ["row", "col"],
    [
        pytest.param(-1, 0, id="row-too-small"),
        pytest.param(8, 0, id="row-too-big"),
        pytest.param(0, -1, id="col-too-small"),
        pytest.param(0, 8, id="col-too-big"),
    ],
)
def test_occupied_out_of_bounds(row: int, col: int) -> None:
    board = Board.start()

    with pytest.raises(OutOfBounds):
        board.occupied(row, col)


def test_out_of_bounds_is_index_error() -> None:
    with pytest.raises(IndexError):
        Board.start().occupied(3, 9)


def test_placed() -> None:
    board = Board.start()
    child = board.placed(2, 3, BLACK, [Move(3, 3)])

    assert child.occupied(2, 3) == BLACK
    assert child.occupied(3, 3) == BLACK
    assert child.count(BLACK) == 4
    assert child.count(WHITE) == 1

    # The input board is not modified.
    assert board == Board.start()


def test_swapped() -> None:
    swapped = BOARD_CORNER.swapped()
    assert swapped.occupied(0, 0) == WHITE
    assert swapped.occupied(7, 7) == BLACK
    assert swapped.swapped() == BOARD_CORNER


def test_str() -> None:
    lines = str(Board.start()).split("\n")
    assert len(lines) == 9
    assert lines[0] == "   0  1  2  3  4  5  6  7"
    assert lines[1] == "0  -  -  -  -  -  -  -  -"
    assert lines[4] == "3  -  -  -  w  b  -  -  -"
    assert lines[5] == "4  -  -  -  b  w  -  -  -"


def test_board_equality() -> None:
    assert Board.start() == Board.start()
    assert Board.start() != Board.empty()
    assert hash(Board.start()) == hash(Board.start())

    with pytest.raises(TypeError):
        Board.start() == "not a board"


def test_opponent() -> None:
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK

    with pytest.raises(AssertionError):
        opponent(EMPTY)


def test_color_name() -> None:
    assert color_name(BLACK) == "Black"
    assert color_name(WHITE) == "White"


def test_move_str() -> None:
    assert str(Move(2, 3)) == "(2,3)"
