from reversi.engine.board import BLACK, EMPTY, WHITE, Board, Move, OutOfBounds, opponent
from reversi.engine.evaluation import heuristic
from reversi.engine.game import Game
from reversi.engine.rules import (
    apply_move,
    is_legal_move,
    is_terminal,
    legal_moves,
    score,
)
from reversi.engine.search import run_ai_turn

__all__ = [
    "BLACK",
    "EMPTY",
    "WHITE",
    "Board",
    "Game",
    "Move",
    "OutOfBounds",
    "apply_move",
    "heuristic",
    "is_legal_move",
    "is_terminal",
    "legal_moves",
    "opponent",
    "run_ai_turn",
    "score",
]
