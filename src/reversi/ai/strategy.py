from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Optional

from reversi.ai.evaluation import evaluate
from reversi.othello.board import Board, opponent
from reversi.othello.rules import Move, apply_move, legal_moves


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


def pick(
    board: Board,
    color: int,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """
    Pick a move for `color`, or return None if it has to pass.
    Ties are broken in favour of the first move in row-major order.
    """

    moves = legal_moves(board, color)

    if not moves:
        return None

    if difficulty == Difficulty.EASY:
        if rng is None:
            rng = random.Random()
        return rng.choice(moves)

    if difficulty == Difficulty.NORMAL:
        return _best_move(moves, lambda move: greedy_value(board, move, color))

    if difficulty == Difficulty.HARD:
        return _best_move(moves, lambda move: two_ply_value(board, move, color))

    raise NotImplementedError(difficulty)


def greedy_value(board: Board, move: Move, color: int) -> int:
    return evaluate(apply_move(board, move, color), color)


def two_ply_value(board: Board, move: Move, color: int) -> int:
    child = apply_move(board, move, color)
    opp = opponent(color)
    replies = legal_moves(child, opp)

    if not replies:
        # Opponent has to pass, score from their point of view and negate.
        return -evaluate(child, opp)

    return min(
        evaluate(apply_move(child, reply, opp), color) for reply in replies
    )


def _best_move(moves: list[Move], value_of: Callable[[Move], int]) -> Move:
    best_move = moves[0]
    best_value = value_of(best_move)

    for move in moves[1:]:
        value = value_of(move)
        if value > best_value:
            best_move = move
            best_value = value

    return best_move
