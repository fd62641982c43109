from __future__ import annotations

from typing import Optional

from reversi.engine.board import BLACK, WHITE, Board, Move, opponent
from reversi.engine.rules import apply_move, legal_moves


class SearchNode:
    def __init__(self, board: Board, turn: int, moves: list[Move]) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board
        self.turn = turn

        # Legal moves of the player to move, children are stored in the same order.
        self.moves = moves
        self.children: list[SearchNode] = []

        # Set by search(), stays None for nodes that were pruned.
        self.value: Optional[int] = None

    @property
    def child_count(self) -> int:
        return len(self.moves)

    def is_leaf(self) -> bool:
        return not self.children

    def count_nodes(self) -> int:
        return 1 + sum(child.count_nodes() for child in self.children)

    def __repr__(self) -> str:
        return (
            f"SearchNode({self.board!r}, {self.turn}, "
            f"children={len(self.children)}, value={self.value})"
        )


def build_tree(board: Board, depth: int, turn: int) -> SearchNode:
    """
    Builds the game tree of all positions reachable from `board` within `depth`
    moves, starting with `turn` to move.

    Passes are not expanded: a node where the player to move has no moves is a
    leaf, even if the opponent could still move.
    """

    moves = legal_moves(board, turn)
    node = SearchNode(board, turn, moves)

    if depth > 0:
        for move in moves:
            child_board = apply_move(board, move, turn)
            node.children.append(build_tree(child_board, depth - 1, opponent(turn)))

    return node
