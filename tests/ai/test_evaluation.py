import pytest

from reversi.ai.evaluation import WEIGHTS, evaluate, positional_score
from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.rules import apply_move, get_move

BOARD_START = Board.start()
BOARD_AFTER_D3 = apply_move(BOARD_START, get_move(BOARD_START, 2, 3, BLACK), BLACK)
BOARD_BLACK_CORNER = Board.from_string("x" + "-" * 63)


def test_weights_are_symmetric() -> None:
    for row in range(8):
        for col in range(8):
            weight = WEIGHTS[row][col]
            assert WEIGHTS[col][row] == weight
            assert WEIGHTS[7 - row][col] == weight
            assert WEIGHTS[row][7 - col] == weight


def test_weights_corners() -> None:
    assert WEIGHTS[0][0] == 120
    assert WEIGHTS[1][1] == -40
    assert WEIGHTS[0][1] == -20
    assert WEIGHTS[3][3] == 3


@pytest.mark.parametrize(
    ["board", "color", "expected"],
    [
        pytest.param(Board.empty(), BLACK, 0, id="empty"),
        pytest.param(BOARD_START, BLACK, 6, id="start-black"),
        pytest.param(BOARD_START, WHITE, 6, id="start-white"),
        pytest.param(BOARD_AFTER_D3, BLACK, 42, id="after-d3-black"),
        pytest.param(BOARD_AFTER_D3, WHITE, -27, id="after-d3-white"),
        pytest.param(BOARD_BLACK_CORNER, BLACK, 130, id="corner-black"),
        pytest.param(BOARD_BLACK_CORNER, WHITE, -10, id="corner-white"),
    ],
)
def test_evaluate(board: Board, color: int, expected: int) -> None:
    assert evaluate(board, color) == expected


def test_positional_score() -> None:
    assert positional_score(BOARD_BLACK_CORNER, BLACK) == 120
    assert positional_score(BOARD_BLACK_CORNER, WHITE) == 0
