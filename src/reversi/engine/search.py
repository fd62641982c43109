from __future__ import annotations

from typing import Optional

from reversi.engine.board import BLACK, Board, Move
from reversi.engine.evaluation import heuristic
from reversi.engine.rules import is_terminal
from reversi.engine.tree import SearchNode, build_tree

# Larger than any value heuristic() can return.
INFINITY = 9999999


class SearchStats:
    def __init__(self) -> None:
        self.visited = 0
        self.pruned = 0

    def __repr__(self) -> str:
        return f"SearchStats(visited={self.visited}, pruned={self.pruned})"


class SearchResult:
    def __init__(
        self, root: SearchNode, value: int, move: Move, stats: SearchStats
    ) -> None:
        self.root = root
        self.value = value
        self.move = move
        self.stats = stats

    def get_child_values(self) -> list[tuple[Move, Optional[int]]]:
        return [
            (move, child.value)
            for move, child in zip(self.root.moves, self.root.children, strict=True)
        ]


def search(
    node: SearchNode,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Minimax with alpha-beta pruning. Black maximizes, white minimizes.

    Every visited node gets its value stored in `node.value`. Children that were
    cut off are never visited and keep `value` set to None.
    """

    if stats is not None:
        stats.visited += 1

    if depth == 0 or node.is_leaf() or is_terminal(node.board):
        node.value = heuristic(node.board)
        return node.value

    if maximizing:
        best = -INFINITY
        for index, child in enumerate(node.children):
            value = search(child, depth - 1, alpha, beta, False, stats)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                if stats is not None:
                    stats.pruned += len(node.children) - (index + 1)
                break
    else:
        best = INFINITY
        for index, child in enumerate(node.children):
            value = search(child, depth - 1, alpha, beta, True, stats)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                if stats is not None:
                    stats.pruned += len(node.children) - (index + 1)
                break

    node.value = best
    return best


def select_move(root: SearchNode, value: int) -> Move:
    # First child in move order that reaches the root value.
    for move, child in zip(root.moves, root.children, strict=True):
        if child.value == value:
            return move

    raise AssertionError(f"No child of root has value {value}")


def analyze(board: Board, turn: int, depth: int) -> SearchResult:
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    root = build_tree(board, depth, turn)

    if not root.moves:
        raise ValueError("Cannot search a position without moves")

    stats = SearchStats()
    value = search(root, depth, -INFINITY, INFINITY, turn == BLACK, stats)
    move = select_move(root, value)
    return SearchResult(root, value, move, stats)


def run_ai_turn(board: Board, turn: int, depth: int) -> Move:
    return analyze(board, turn, depth).move
