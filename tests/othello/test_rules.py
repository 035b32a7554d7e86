import pytest
import random

from reversi.othello.board import BLACK, EMPTY, WHITE, Board, opponent
from reversi.othello.rules import (
    InvalidMove,
    StaleMove,
    apply_move,
    get_move,
    has_moves,
    is_game_end,
    legal_moves,
    winner,
)

BOARD_START = Board.start()

# Black to move at c3 flips in three directions at once.
BOARD_MULTI_DIRECTION = Board.from_string(
    """
    x-x-----
    -oo-----
    xo------
    --------
    --------
    --------
    --------
    --------
    """
)

# Neither side can move, but most squares are empty.
BOARD_BLOCKED = Board.from_string("x" + "-" * 62 + "o")

BOARD_FULL = Board.from_string("x" * 40 + "o" * 24)

# Black has no moves, white does.
BOARD_BLACK_MUST_PASS = Board.from_string("ox" + "-" * 62)


def test_opening_moves_black() -> None:
    moves = legal_moves(BOARD_START, BLACK)
    assert [(move.row, move.col) for move in moves] == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_opening_moves_white() -> None:
    moves = legal_moves(BOARD_START, WHITE)
    assert [(move.row, move.col) for move in moves] == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_opening_move_flips() -> None:
    move = get_move(BOARD_START, 2, 3, BLACK)
    assert move.flips == frozenset({27})
    assert move.flipped_squares() == [(3, 3)]
    assert move.index == 19
    assert move.is_legal()


def test_flips_multiple_directions() -> None:
    move = get_move(BOARD_MULTI_DIRECTION, 2, 2, BLACK)
    assert move.flipped_squares() == [(1, 1), (1, 2), (2, 1)]


@pytest.mark.parametrize(
    ["string", "row", "col", "expected_flips"],
    [
        pytest.param("-oox" + "-" * 60, 0, 0, {1, 2}, id="long-run"),
        pytest.param("oo" + "-" * 62, 0, 2, set(), id="run-hits-edge"),
        pytest.param("x-o" + "-" * 61, 0, 3, set(), id="run-hits-empty"),
        pytest.param("-xo" + "-" * 61, 0, 0, set(), id="own-disc-first"),
        pytest.param("xo" + "-" * 62, 0, 1, set(), id="occupied"),
    ],
)
def test_get_move_flips(
    string: str, row: int, col: int, expected_flips: set[int]
) -> None:
    board = Board.from_string(string)
    move = get_move(board, row, col, BLACK)
    assert move.flips == frozenset(expected_flips)
    assert move.is_legal() == bool(expected_flips)


@pytest.mark.parametrize(
    ["row", "col"],
    [
        pytest.param(-1, 0, id="row-too-small"),
        pytest.param(8, 0, id="row-too-big"),
        pytest.param(0, -1, id="col-too-small"),
        pytest.param(0, 8, id="col-too-big"),
    ],
)
def test_get_move_off_board(row: int, col: int) -> None:
    with pytest.raises(InvalidMove):
        get_move(BOARD_START, row, col, BLACK)


def test_apply_move() -> None:
    move = get_move(BOARD_START, 2, 3, BLACK)
    child = apply_move(BOARD_START, move, BLACK)

    assert child.get(2, 3) == BLACK
    assert child.get(3, 3) == BLACK
    assert child.count(BLACK) == 4
    assert child.count(WHITE) == 1

    # Input board is untouched.
    assert BOARD_START == Board.start()


def test_apply_illegal_move_is_noop() -> None:
    move = get_move(BOARD_START, 0, 0, BLACK)
    assert apply_move(BOARD_START, move, BLACK) == BOARD_START

    occupied = get_move(BOARD_START, 3, 3, BLACK)
    assert apply_move(BOARD_START, occupied, BLACK) == BOARD_START


def test_apply_stale_move() -> None:
    move = get_move(BOARD_START, 2, 3, BLACK)
    child = apply_move(BOARD_START, move, BLACK)

    with pytest.raises(StaleMove):
        apply_move(child, move, BLACK)


def test_apply_move_wrong_color() -> None:
    move = get_move(BOARD_START, 2, 3, BLACK)

    with pytest.raises(StaleMove):
        apply_move(BOARD_START, move, WHITE)


def test_random_games_keep_invariants() -> None:
    rng = random.Random(1234)

    for _ in range(10):
        board = Board.start()
        turn = BLACK

        while not is_game_end(board):
            moves = legal_moves(board, turn)

            if not moves:
                turn = opponent(turn)
                continue

            for move in moves:
                assert board.get(move.row, move.col) == EMPTY
                assert move.is_legal()

            move = rng.choice(moves)
            child = apply_move(board, move, turn)

            flipped = len(move.flips)
            assert child.count(turn) == board.count(turn) + 1 + flipped
            assert child.count(opponent(turn)) == board.count(opponent(turn)) - flipped
            assert child.count_discs() == board.count_discs() + 1
            assert child.count_discs() + child.count_empties() == 64

            board = child
            turn = opponent(turn)


@pytest.mark.parametrize(
    ["board", "expected"],
    [
        pytest.param(BOARD_START, False, id="start"),
        pytest.param(Board.empty(), True, id="empty"),
        pytest.param(BOARD_BLOCKED, True, id="blocked"),
        pytest.param(BOARD_FULL, True, id="full"),
        pytest.param(BOARD_BLACK_MUST_PASS, False, id="black-must-pass"),
    ],
)
def test_is_game_end(board: Board, expected: bool) -> None:
    assert is_game_end(board) == expected


def test_has_moves() -> None:
    assert not has_moves(BOARD_BLACK_MUST_PASS, BLACK)
    assert has_moves(BOARD_BLACK_MUST_PASS, WHITE)
    assert legal_moves(BOARD_BLACK_MUST_PASS, BLACK) == []


@pytest.mark.parametrize(
    ["board", "expected"],
    [
        pytest.param(BOARD_BLOCKED, None, id="draw"),
        pytest.param(BOARD_FULL, BLACK, id="black"),
        pytest.param(Board.from_string("o" * 33 + "x" * 31), WHITE, id="white"),
    ],
)
def test_winner(board: Board, expected: int) -> None:
    assert winner(board) == expected
