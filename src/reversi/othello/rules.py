from __future__ import annotations

from itertools import count
from typing import Optional

from reversi.othello.board import (
    BLACK,
    COLS,
    DIRECTIONS,
    EMPTY,
    ROWS,
    WHITE,
    Board,
    opponent,
)


class InvalidMove(Exception):
    pass


class StaleMove(InvalidMove):
    pass


class Move:
    """
    Move is a square plus the discs it flips. It is only meaningful for the board and
    color it was computed for, so it keeps a reference to both.
    """

    def __init__(
        self, row: int, col: int, flips: frozenset[int], *, board: Board, color: int
    ) -> None:
        assert color in [BLACK, WHITE]

        self.row = row
        self.col = col
        self.flips = flips
        self.board = board
        self.color = color

    @property
    def index(self) -> int:
        return self.row * COLS + self.col

    def is_legal(self) -> bool:
        return len(self.flips) > 0

    def flipped_squares(self) -> list[tuple[int, int]]:
        return [divmod(index, COLS) for index in sorted(self.flips)]

    def __repr__(self) -> str:
        field = Board.index_to_field(self.index)
        return f"Move({field}, flips={Board.indexes_to_fields(sorted(self.flips))})"

    def as_tuple(self) -> tuple[int, int, frozenset[int], Board, int]:
        return (self.row, self.col, self.flips, self.board, self.color)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            raise TypeError(f"Cannot compare Move with {type(other)}")

        return self.as_tuple() == other.as_tuple()


def get_flips(board: Board, row: int, col: int, color: int) -> frozenset[int]:
    if board.get(row, col) != EMPTY:
        return frozenset()

    flipped: set[int] = set()

    for dy, dx in DIRECTIONS:
        flipped_line: list[int] = []

        for d in count(1):
            y = row + dy * d
            x = col + dx * d

            if y not in range(ROWS) or x not in range(COLS):
                break

            index = y * COLS + x
            square = board.get_square(index)

            if square == opponent(color):
                flipped_line.append(index)
                continue

            if square == color:
                flipped.update(flipped_line)

            break

    return frozenset(flipped)


def get_move(board: Board, row: int, col: int, color: int) -> Move:
    if row not in range(ROWS) or col not in range(COLS):
        raise InvalidMove(f"Square ({row}, {col}) is not on the board")

    flips = get_flips(board, row, col, color)
    return Move(row, col, flips, board=board, color=color)


def legal_moves(board: Board, color: int) -> list[Move]:
    moves: list[Move] = []

    for row in range(ROWS):
        for col in range(COLS):
            move = get_move(board, row, col, color)
            if move.is_legal():
                moves.append(move)

    return moves


def has_moves(board: Board, color: int) -> bool:
    return len(legal_moves(board, color)) > 0


def apply_move(board: Board, move: Move, color: int) -> Board:
    if move.color != color or move.board != board:
        raise StaleMove(f"{move} was not computed for this board and color")

    if not move.is_legal():
        return board

    return board.with_squares(color, [move.index, *move.flips])


def is_game_end(board: Board) -> bool:
    if board.is_full():
        return True

    return not (has_moves(board, BLACK) or has_moves(board, WHITE))


def winner(board: Board) -> Optional[int]:
    black = board.count(BLACK)
    white = board.count(WHITE)

    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return None
