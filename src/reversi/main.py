import typer
from typing import Optional

from reversi.arguments import Arguments
from reversi.commands.play import PlayCommand
from reversi.config import MAX_SEARCH_DEPTH, GameConfig


def play_command(
    color: Optional[str] = typer.Option(
        None, "--color", "-c", help="Play as black (b) or white (w)."
    ),
    depth: Optional[int] = typer.Option(
        None,
        "--depth",
        "-d",
        min=1,
        max=MAX_SEARCH_DEPTH,
        help="Search depth of the AI in moves.",
    ),
    two_player: bool = typer.Option(
        False, "--two-player", help="Play against another human."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show AI search details."),
) -> None:
    if color is not None and color not in ["b", "w"]:
        raise typer.BadParameter("Color must be 'b' or 'w'", param_hint="--color")

    config = GameConfig.from_env()
    args = Arguments.from_config(
        config, color=color, depth=depth, two_player=two_player, debug=debug
    )
    PlayCommand(args)()


def play() -> None:
    typer.run(play_command)
