import os
import typer
from enum import Enum
from typing import Annotated, Optional

from reversi.ai.strategy import Difficulty
from reversi.arguments import Arguments
from reversi.config import get_seed
from reversi.othello.board import BLACK, WHITE
from reversi.othello.session import GameConfig, OpponentMode

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.window import Window  # noqa:E402

app = typer.Typer()


class HumanSide(str, Enum):
    BLACK = "black"
    WHITE = "white"


@app.command()
def main(
    opponent: Annotated[OpponentMode, typer.Option("--opponent", "-o")] = OpponentMode.CPU,
    difficulty: Annotated[
        Difficulty, typer.Option("--difficulty", "-d")
    ] = Difficulty.NORMAL,
    human_side: Annotated[HumanSide, typer.Option("--human-side", "-s")] = HumanSide.BLACK,
    seed: Annotated[Optional[int], typer.Option("--seed")] = None,
) -> None:
    human_color = BLACK if human_side == HumanSide.BLACK else WHITE
    config = GameConfig(opponent, difficulty, human_color)

    if seed is None:
        seed = get_seed()

    Window(Arguments(config, seed)).run()


if __name__ == "__main__":
    app()
