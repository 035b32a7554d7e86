import pygame
from pygame.event import Event
from typing import Optional

from reversi.arguments import Arguments
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, COLS, ROWS, WHITE, color_name

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600

SQUARE_SIZE = BOARD_WIDTH_PX // COLS
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = GameMode(args)

        self.screen = pygame.display.set_mode((BOARD_WIDTH_PX, BOARD_HEIGHT_PX))
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Reversi")

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            self.mode.on_frame()
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, index: int) -> tuple[int, int]:
        col = index % COLS
        row = index // COLS

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_disc(self, index: int, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(index)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, index: int, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(index)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_grid(self) -> None:
        for i in range(1, ROWS):
            y = i * SQUARE_SIZE
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (0, y), (BOARD_WIDTH_PX, y))

        for i in range(1, COLS):
            x = i * SQUARE_SIZE
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (x, 0), (x, BOARD_HEIGHT_PX))

    def get_caption(self, turn: int, score: tuple[int, int], thinking: bool) -> str:
        black, white = score
        caption = f"Reversi - Black {black} : {white} White - {color_name(turn)} to move"

        if thinking:
            caption += " (AI thinking)"

        return caption

    def draw(self) -> None:
        board = self.mode.get_board()
        turn = self.mode.get_turn()

        ui_details = self.mode.get_ui_details()
        score: tuple[int, int] = ui_details.pop("score")
        thinking: bool = ui_details.pop("thinking", False)
        move_hints: set[int] = ui_details.pop("move_hints", set())
        winner: Optional[str] = ui_details.pop("winner", None)
        can_pass: bool = ui_details.pop("can_pass", False)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if winner is not None:
            black, white = score
            caption = f"Reversi - Game over: Black {black} : {white} White - "
            caption += "Draw" if winner == "Draw" else f"{winner} wins"
        else:
            caption = self.get_caption(turn, score, thinking)
            if can_pass:
                caption += " - no moves, press P to pass"

        pygame.display.set_caption(caption)

        if turn == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()

        for index in range(ROWS * COLS):
            square = board.get_square(index)

            if square == WHITE:
                self.draw_disc(index, COLOR_WHITE_DISC)
            elif square == BLACK:
                self.draw_disc(index, COLOR_BLACK_DISC)
            elif index in move_hints:
                self.draw_move_indicator(index, turn_color)

        pygame.display.flip()

    def get_move_from_event(self, event: Event) -> int:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return row * COLS + col
