from __future__ import annotations

from typing import Optional

from reversi.config import GameConfig
from reversi.engine.board import BLACK, WHITE


class Arguments:
    def __init__(
        self,
        human_color: Optional[int],
        search_depth: int,
        play_ai: bool,
        debug: bool,
    ) -> None:
        assert human_color in [BLACK, WHITE, None]

        self.human_color = human_color
        self.search_depth = search_depth
        self.play_ai = play_ai
        self.debug = debug

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        *,
        color: Optional[str] = None,
        depth: Optional[int] = None,
        two_player: bool = False,
        debug: bool = False,
    ) -> Arguments:
        # Command line options take precedence over the environment.
        if depth is not None:
            config = GameConfig(
                search_depth=depth, play_ai=config.play_ai, debug=config.debug
            )

        return Arguments(
            human_color=parse_color(color) if color is not None else None,
            search_depth=config.search_depth,
            play_ai=config.play_ai and not two_player,
            debug=config.debug or debug,
        )


def parse_color(string: str) -> int:
    if string == "b":
        return BLACK
    if string == "w":
        return WHITE
    raise ValueError(f'Invalid color "{string}"')
