import pygame
import random
from pygame.event import Event
from typing import Any

from reversi.arguments import Arguments
from reversi.othello.board import COLS, Board
from reversi.othello.session import GameSession


class GameMode:
    def __init__(self, args: Arguments) -> None:
        self.session = GameSession(args.game, rng=random.Random(args.seed))

    def on_event(self, event: Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_RIGHT:
                self.on_mouse_right_click(event)

        if event.type == pygame.KEYDOWN:
            self.on_key(event)

    def on_frame(self) -> None:
        self.session.tick()

    def on_move(self, move: int) -> None:
        if self.session.is_game_over():
            # Restart game
            self.session.reset()
            return

        row, col = divmod(move, COLS)
        self.session.place_at(row, col)

    def on_mouse_right_click(self, event: Event) -> None:
        # Undo last move.
        self.session.undo()

    def on_key(self, event: Event) -> None:
        if event.key == pygame.K_p:
            self.session.pass_turn()
        elif event.key == pygame.K_n:
            self.session.reset()
        elif event.key == pygame.K_h:
            self.session.abandon()

    def get_board(self) -> Board:
        return self.session.current_board()

    def get_turn(self) -> int:
        return self.session.current_side()

    def get_ui_details(self) -> dict[str, Any]:
        details: dict[str, Any] = {
            "score": self.session.score(),
            "thinking": self.session.is_thinking(),
            "can_pass": self.session.can_pass(),
        }

        if not self.session.is_ai_turn():
            details["move_hints"] = {move.index for move in self.session.legal_moves()}

        if self.session.is_game_over():
            details["winner"] = self.session.winner_label()

        return details
