from __future__ import annotations

from typing import Optional

from reversi.othello.session import GameConfig


class Arguments:
    def __init__(self, game: GameConfig, seed: Optional[int]) -> None:
        self.game = game
        self.seed = seed

    @classmethod
    def empty(cls) -> Arguments:
        return Arguments(GameConfig(), None)
