from __future__ import annotations

import re
from typing import Optional

from reversi.arguments import Arguments, parse_color
from reversi.engine.board import BLACK, CELL_CHARS, WHITE, Move, color_name, opponent
from reversi.engine.game import Game
from reversi.engine.search import SearchResult, analyze, run_ai_turn

MOVE_PATTERN = re.compile("[0-7] [0-7]")
COLOR_PATTERN = re.compile("w|b")

INTRO = """\
Two players take turns placing discs on an 8x8 board. Flanking discs of your
opponent between the disc you place and one of your own flips them to your
color. A move has to flip at least one disc, if you have no such move your turn
passes. Black moves first.

Enter moves as '<row #> <column #>' with numbers [0-7].
"""


def parse_move(text: str) -> Optional[Move]:
    if not MOVE_PATTERN.fullmatch(text):
        return None

    return Move(int(text[0]), int(text[2]))


def format_moves(moves: list[Move]) -> str:
    return "  ".join(str(move) for move in moves)


class PlayCommand:
    def __init__(self, args: Arguments, game: Optional[Game] = None) -> None:
        self.args = args
        self.game = game if game is not None else Game.start()
        self.human_color = args.human_color

    def __call__(self) -> None:
        try:
            self.run()
        except EOFError:
            print("\nInput closed, quitting.")

    def run(self) -> None:
        print(INTRO)

        if self.args.play_ai and self.human_color is None:
            self.human_color = self.ask_color()
            print(f"You have chosen to play as {color_name(self.human_color)}!\n")

        while not self.game.is_game_end():
            if not self.game.has_moves():
                turn = color_name(self.game.turn)
                other = color_name(opponent(self.game.turn))
                print(f"{turn} is out of moves, PASS to {other}.")
                self.game.pass_move()
                continue

            self.show_status()

            if self.is_human_turn():
                self.human_turn()
            else:
                self.ai_turn()

        self.show_result()

    def is_human_turn(self) -> bool:
        return not self.args.play_ai or self.game.turn == self.human_color

    def ask_color(self) -> int:
        while True:
            answer = input("Enter 'b' to play as black or 'w' to play as white: ")

            if COLOR_PATTERN.fullmatch(answer):
                return parse_color(answer)

            print("\nInvalid input: Enter 'b' to be black or 'w' to be white.\n")

    def show_status(self) -> None:
        print(f"Black total: {self.game.count(BLACK)}")
        print(f"White total: {self.game.count(WHITE)}")
        self.game.board.show()
        print()

    def human_turn(self) -> None:
        turn = self.game.turn
        print(f"{color_name(turn)} legal moves:")
        print(format_moves(self.game.get_moves()))

        if self.args.play_ai:
            prompt = f"Your move ({CELL_CHARS[turn]}): "
        else:
            prompt = f"{color_name(turn)}'s move: "

        while True:
            move = parse_move(input(prompt))

            if move is None:
                print(
                    "\nInvalid input: Moves are inputted as '<row #> <column #>' "
                    "with numbers [0-7]."
                )
                print(
                    "e.g. If you want to place your piece at row #1, column #2 "
                    "input '1 2'.\n"
                )
                continue

            if not self.game.play(move):
                print("Illegal move! Try again.")
                continue

            return

    def ai_turn(self) -> None:
        turn = self.game.turn

        if self.args.debug:
            result = analyze(self.game.board, turn, self.args.search_depth)
            self.show_search(result)
            move = result.move
        else:
            move = run_ai_turn(self.game.board, turn, self.args.search_depth)

        played = self.game.play(move)
        assert played

        print(f"{color_name(turn)} (AI) plays {move}\n")

    def show_search(self, result: SearchResult) -> None:
        root = result.root
        print(
            f"DEBUG: AI considered {root.child_count} initial moves "
            "for this board configuration."
        )
        print(format_moves(root.moves))

        for index, (_, value) in enumerate(result.get_child_values()):
            shown = "pruned" if value is None else str(value)
            print(f"\t{index}th node's heuristic value = {shown}")

        print(f"DEBUG: tree has {root.count_nodes()} nodes")
        print(
            f"DEBUG: visited {result.stats.visited} nodes, "
            f"PRUNED {result.stats.pruned} children"
        )
        print(f"DEBUG: optimal value {result.value}, playing {result.move}\n")

    def show_result(self) -> None:
        black_total = self.game.count(BLACK)
        white_total = self.game.count(WHITE)

        self.game.board.show()
        print(f"Black total: {black_total}")
        print(f"White total: {white_total}")
        print(f"Empty squares: {self.game.board.count_empties()}")
        print(f"Passes: {self.game.passes}")

        winner = self.game.get_winner()
        if winner is None:
            print("TIE GAME")
            return

        print(f"{color_name(winner)} wins!")
