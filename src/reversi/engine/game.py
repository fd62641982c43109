from __future__ import annotations

from typing import Optional

from reversi.engine.board import BLACK, WHITE, Board, Move, opponent
from reversi.engine.rules import (
    apply_move,
    has_moves,
    is_legal_move,
    is_terminal,
    legal_moves,
    score,
)


class Game:
    def __init__(self, board: Board, turn: int) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board
        self.turn = turn
        self.boards: list[Board] = [board]
        self.moves: list[Move] = []
        self.passes = 0

    @classmethod
    def start(cls) -> Game:
        # Black always moves first.
        return Game(Board.start(), BLACK)

    def __repr__(self) -> str:
        return f"Game({self.board!r}, {self.turn})"

    def get_moves(self) -> list[Move]:
        return legal_moves(self.board, self.turn)

    def has_moves(self) -> bool:
        return has_moves(self.board, self.turn)

    def play(self, move: Move) -> bool:
        """
        Plays `move` for the player to move. Returns False and leaves the game
        untouched if the move is not legal.
        """

        if not is_legal_move(self.board, move, self.turn):
            return False

        self.board = apply_move(self.board, move, self.turn)
        self.boards.append(self.board)
        self.moves.append(move)
        self.turn = opponent(self.turn)
        return True

    def pass_move(self) -> None:
        if self.has_moves():
            raise ValueError("Cannot pass when moves are available")

        self.passes += 1
        self.turn = opponent(self.turn)

    def is_game_end(self) -> bool:
        return is_terminal(self.board)

    def count(self, color: int) -> int:
        return score(self.board, color)

    def get_winner(self) -> Optional[int]:
        black = self.count(BLACK)
        white = self.count(WHITE)

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None
