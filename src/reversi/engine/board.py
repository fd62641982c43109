from __future__ import annotations

from typing import Iterable, NamedTuple

BLACK = -1
WHITE = 1
EMPTY = 0

BOARD_MASK = 0xFFFFFFFFFFFFFFFF

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

CORNERS = [(0, 0), (7, 0), (0, 7), (7, 7)]

CELL_CHARS = {EMPTY: "-", BLACK: "b", WHITE: "w"}


class OutOfBounds(IndexError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Square ({row}, {col}) is outside of the board")
        self.row = row
        self.col = col


class Move(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    assert color in [BLACK, WHITE]
    return "Black" if color == BLACK else "White"


def on_board(row: int, col: int) -> bool:
    return row in range(8) and col in range(8)


def square_index(row: int, col: int) -> int:
    if not on_board(row, col):
        raise OutOfBounds(row, col)
    return 8 * row + col


class Board:
    """
    Board stores the discs of both players as two bitsets, bit `8 * row + col`
    is set if that square is taken. Boards are never modified after creation,
    so passing one around is as good as copying it.
    """

    def __init__(self, black: int, white: int) -> None:
        if black & BOARD_MASK != black or white & BOARD_MASK != white:
            raise ValueError("bitsets must fit in 64 bits")

        if black & white:
            raise ValueError("black and white must not overlap")

        self.black = black
        self.white = white

    @classmethod
    def start(cls) -> Board:
        black = 1 << square_index(3, 4) | 1 << square_index(4, 3)
        white = 1 << square_index(3, 3) | 1 << square_index(4, 4)
        return Board(black, white)

    @classmethod
    def empty(cls) -> Board:
        return Board(0x0, 0x0)

    @classmethod
    def filled(cls, color: int) -> Board:
        if color == BLACK:
            return Board(BOARD_MASK, 0x0)
        if color == WHITE:
            return Board(0x0, BOARD_MASK)
        raise ValueError(f"Cannot fill board with {color}")

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """
        Parse a board from 8 rows of 8 characters, using `b` for black, `w` for
        white and `-` for empty squares. Whitespace inside a row is ignored.
        """

        if len(rows) != 8:
            raise ValueError(f"Expected 8 rows, got {len(rows)}")

        black = 0
        white = 0
        for row, line in enumerate(rows):
            chars = "".join(line.split())

            if len(chars) != 8:
                raise ValueError(f'Invalid row "{line}"')

            for col, char in enumerate(chars):
                mask = 1 << square_index(row, col)
                if char == "b":
                    black |= mask
                elif char == "w":
                    white |= mask
                elif char != "-":
                    raise ValueError(f'Invalid square "{char}"')

        return Board(black, white)

    def __repr__(self) -> str:
        return f"Board({hex(self.black)}, {hex(self.white)})"

    def __str__(self) -> str:
        lines = ["   " + "  ".join(str(col) for col in range(8))]
        for row in range(8):
            cells = "  ".join(CELL_CHARS[self.occupied(row, col)] for col in range(8))
            lines.append(f"{row}  {cells}")
        return "\n".join(lines)

    def show(self) -> None:
        print(self)

    def occupied(self, row: int, col: int) -> int:
        mask = 1 << square_index(row, col)

        if self.black & mask:
            return BLACK
        if self.white & mask:
            return WHITE
        return EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return self.occupied(row, col) == EMPTY

    def get_bits(self, color: int) -> int:
        assert color in [BLACK, WHITE]

        if color == BLACK:
            return self.black
        return self.white

    def count(self, color: int) -> int:
        return bin(self.get_bits(color)).count("1")

    def count_discs(self) -> int:
        return bin(self.black | self.white).count("1")

    def count_empties(self) -> int:
        return 64 - self.count_discs()

    def placed(self, row: int, col: int, color: int, flips: Iterable[Move]) -> Board:
        """
        Returns a new board with a disc of `color` on (row, col) and every
        square in `flips` turned to `color`.
        """

        assert color in [BLACK, WHITE]

        changed = 1 << square_index(row, col)
        for flip_row, flip_col in flips:
            changed |= 1 << square_index(flip_row, flip_col)

        own = self.get_bits(color) | changed
        opp = self.get_bits(opponent(color)) & ~changed

        if color == BLACK:
            return Board(own, opp)
        return Board(opp, own)

    def swapped(self) -> Board:
        return Board(self.white, self.black)

    def as_tuple(self) -> tuple[int, int]:
        return (self.black, self.white)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
