from __future__ import annotations

from typing import Iterable

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    assert color in [BLACK, WHITE]
    return "Black" if color == BLACK else "White"


class Board:
    """
    Board stores the 64 squares of an othello board, but not the color of the player to move.
    Boards are never modified after creation: moves produce new boards.
    """

    def __init__(self, squares: Iterable[int]) -> None:
        squares = tuple(squares)

        if len(squares) != ROWS * COLS:
            raise ValueError(f"Board needs {ROWS * COLS} squares, got {len(squares)}")

        for square in squares:
            if square not in [BLACK, WHITE, EMPTY]:
                raise ValueError(f"Invalid square value {square}")

        self.__squares = squares

    @classmethod
    def start(cls) -> Board:
        squares = [EMPTY] * ROWS * COLS
        squares[3 * COLS + 3] = squares[4 * COLS + 4] = WHITE
        squares[3 * COLS + 4] = squares[4 * COLS + 3] = BLACK
        return Board(squares)

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * ROWS * COLS)

    @classmethod
    def from_string(cls, string: str) -> Board:
        """
        Parse a board from 64 characters: `x` for black, `o` for white, `-` for empty.
        Whitespace is ignored, so boards can be written as 8 lines of 8 characters.
        """

        chars = "".join(string.split()).lower()
        lookup = {"x": BLACK, "o": WHITE, "-": EMPTY}

        try:
            squares = [lookup[char] for char in chars]
        except KeyError as e:
            raise ValueError(f"Invalid board character {e}")

        return Board(squares)

    def to_string(self) -> str:
        chars = {BLACK: "x", WHITE: "o", EMPTY: "-"}
        return "\n".join(
            "".join(chars[self.get(row, col)] for col in range(COLS))
            for row in range(ROWS)
        )

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def get_square(self, index: int) -> int:
        if index not in range(ROWS * COLS):
            raise ValueError

        return self.__squares[index]

    def get(self, row: int, col: int) -> int:
        if row not in range(ROWS) or col not in range(COLS):
            raise ValueError

        return self.__squares[row * COLS + col]

    def squares(self) -> tuple[int, ...]:
        return self.__squares

    def with_squares(self, color: int, indexes: Iterable[int]) -> Board:
        assert color in [BLACK, WHITE]

        squares = list(self.__squares)
        for index in indexes:
            squares[index] = color
        return Board(squares)

    def count(self, color: int) -> int:
        assert color in [WHITE, BLACK, EMPTY]
        return self.__squares.count(color)

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def is_full(self) -> bool:
        return EMPTY not in self.__squares

    def show(self, moves: Iterable[int] = ()) -> None:
        moves = set(moves)

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(ROWS):
            print("{} ".format(y + 1), end="")

            for x in range(COLS):
                index = (y * COLS) + x
                square = self.get_square(index)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif index in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        if index not in range(ROWS * COLS):
            raise ValueError
        return "abcdefgh"[index % COLS] + "12345678"[index // COLS]

    @classmethod
    def indexes_to_fields(cls, indexes: Iterable[int]) -> str:
        return " ".join(cls.index_to_field(index) for index in indexes)

    @classmethod
    def field_to_index(cls, field: str) -> int:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return y * COLS + x

    def __hash__(self) -> int:
        return hash(self.__squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.__squares == other.__squares
