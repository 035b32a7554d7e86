from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from reversi.ai.strategy import Difficulty, pick
from reversi.config import get_ai_delay, get_verbose
from reversi.othello.board import BLACK, WHITE, Board, color_name, opponent
from reversi.othello.rules import (
    InvalidMove,
    Move,
    apply_move,
    get_move,
    has_moves,
    is_game_end,
    legal_moves,
    winner,
)
from reversi.othello.scheduler import Clock, DeferredTask, Scheduler


class OpponentMode(str, Enum):
    HUMAN = "human"
    CPU = "cpu"


class GameNotOver(Exception):
    pass


class GameConfig:
    def __init__(
        self,
        opponent_mode: OpponentMode = OpponentMode.HUMAN,
        difficulty: Difficulty = Difficulty.NORMAL,
        human_color: int = BLACK,
    ) -> None:
        assert human_color in [BLACK, WHITE]

        self.opponent_mode = opponent_mode
        self.difficulty = difficulty
        self.human_color = human_color

    def __repr__(self) -> str:
        return (
            f"GameConfig({self.opponent_mode.value}, {self.difficulty.value}, "
            f"{color_name(self.human_color)})"
        )

    def get_ai_color(self) -> Optional[int]:
        if self.opponent_mode == OpponentMode.CPU:
            return opponent(self.human_color)
        return None


class Snapshot:
    """
    Board and turn as they were at some point in a game.
    Used both for undo history and to check that a scheduled AI move is still current.
    """

    def __init__(self, board: Board, turn: int) -> None:
        self.board = board
        self.turn = turn

    def __repr__(self) -> str:
        return f"Snapshot({self.board}, {color_name(self.turn)})"

    def as_tuple(self) -> tuple[Board, int]:
        return (self.board, self.turn)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            raise TypeError(f"Cannot compare Snapshot with {type(other)}")

        return self.as_tuple() == other.as_tuple()


class GameSession:
    """
    GameSession keeps track of a single game: the board, whose turn it is, undo history
    and the computer opponent. All methods are plain state transitions; the user
    interface reads the state back after each call.

    The computer opponent moves after a short delay. Call `tick()` regularly (once per
    frame) to let it play.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        ai_delay: Optional[float] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.scheduler = Scheduler(clock)
        self.rng = rng or random.Random()
        self.ai_delay = get_ai_delay() if ai_delay is None else ai_delay
        self.verbose = get_verbose()

        self.board = Board.start()
        self.turn = BLACK
        self.history: list[Snapshot] = []

        # Incremented on every state change, so scheduled AI moves can detect they are outdated.
        self.generation = 0
        self.pending_ai: Optional[DeferredTask] = None

        self._on_state_change()

    # --- queries ---

    def current_board(self) -> Board:
        return self.board

    def current_side(self) -> int:
        return self.turn

    def snapshot(self) -> Snapshot:
        return Snapshot(self.board, self.turn)

    def legal_moves(self) -> list[Move]:
        return legal_moves(self.board, self.turn)

    def is_game_over(self) -> bool:
        return is_game_end(self.board)

    def score(self) -> tuple[int, int]:
        return self.board.count(BLACK), self.board.count(WHITE)

    def winner(self) -> Optional[int]:
        """Returns winning color, or None for a draw."""

        if not self.is_game_over():
            raise GameNotOver

        return winner(self.board)

    def winner_label(self) -> str:
        color = self.winner()
        if color is None:
            return "Draw"
        return color_name(color)

    def is_ai_turn(self) -> bool:
        return self.turn == self.config.get_ai_color()

    def is_thinking(self) -> bool:
        return self.pending_ai is not None and self.pending_ai.is_pending()

    def can_undo(self) -> bool:
        return len(self.history) > 0

    def can_pass(self) -> bool:
        return not self.is_game_over() and not has_moves(self.board, self.turn)

    # --- commands ---

    def start_new_game(self, config: GameConfig) -> None:
        self.config = config
        self.reset()

    def reset(self) -> None:
        self.board = Board.start()
        self.turn = BLACK
        self.history = []
        self._on_state_change()

    def setup(self, board: Board, turn: int) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board
        self.turn = turn
        self.history = []
        self._on_state_change()

    def abandon(self) -> None:
        self.config = GameConfig(
            OpponentMode.HUMAN, self.config.difficulty, self.config.human_color
        )
        self.reset()

    def place_at(self, row: int, col: int) -> None:
        if self.is_ai_turn():
            return

        self.commit_move(row, col)

    def commit_move(self, row: int, col: int) -> None:
        if self.is_game_over():
            return

        try:
            move = get_move(self.board, row, col, self.turn)
        except InvalidMove:
            return

        if not move.is_legal():
            return

        child = apply_move(self.board, move, self.turn)
        self.history.append(self.snapshot())
        self.board = child

        if has_moves(child, opponent(self.turn)):
            self.turn = opponent(self.turn)
        elif self.verbose:
            print(f"{color_name(opponent(self.turn))} has to pass")

        self._on_state_change()

    def pass_turn(self) -> None:
        if not self.can_pass():
            return

        self.turn = opponent(self.turn)
        self._on_state_change()

    def undo(self) -> None:
        if not self.history:
            return

        previous = self.history.pop()
        self.board = previous.board
        self.turn = previous.turn
        self._on_state_change()

    def tick(self) -> None:
        self.scheduler.run_pending()

    # --- computer opponent ---

    def _on_state_change(self) -> None:
        self.generation += 1

        if self.pending_ai is not None:
            if self.pending_ai.is_pending() and self.verbose:
                print(f"Cancelled outdated AI move {self.pending_ai}")
            self.pending_ai.cancel()
            self.pending_ai = None

        if self.is_ai_turn() and not self.is_game_over():
            self._schedule_ai_move()

    def _schedule_ai_move(self) -> None:
        move = pick(self.board, self.turn, self.config.difficulty, self.rng)

        if move is None:
            if self.verbose:
                print(f"AI ({color_name(self.turn)}) has no moves and passes")
            self.pass_turn()
            return

        if self.verbose:
            field = Board.index_to_field(move.index)
            print(f"AI ({self.config.difficulty.value}) picked {field}")

        snapshot = self.snapshot()
        generation = self.generation

        def play() -> None:
            if generation != self.generation or snapshot != self.snapshot():
                # Board changed, don't play
                return

            self.pending_ai = None
            self.commit_move(move.row, move.col)

        self.pending_ai = self.scheduler.schedule(self.ai_delay, play)
