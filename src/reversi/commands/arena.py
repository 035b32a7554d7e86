import random
import typer
from typing import Annotated, Optional

from reversi.ai.strategy import Difficulty, pick
from reversi.config import get_seed
from reversi.othello.board import BLACK, WHITE, Board, opponent
from reversi.othello.rules import apply_move, is_game_end, winner

app = typer.Typer()


class ArenaResult:
    def __init__(self) -> None:
        self.black_wins = 0
        self.white_wins = 0
        self.draws = 0

    def add(self, board: Board) -> None:
        color = winner(board)
        if color == BLACK:
            self.black_wins += 1
        elif color == WHITE:
            self.white_wins += 1
        else:
            self.draws += 1

    def total(self) -> int:
        return self.black_wins + self.white_wins + self.draws


def play_game(
    black_level: Difficulty, white_level: Difficulty, rng: random.Random
) -> tuple[Board, list[int]]:
    """Play one game between two computer players, returns final board and moves played."""

    levels = {BLACK: black_level, WHITE: white_level}
    board = Board.start()
    turn = BLACK
    moves: list[int] = []

    while not is_game_end(board):
        move = pick(board, turn, levels[turn], rng)

        if move is None:
            turn = opponent(turn)
            continue

        board = apply_move(board, move, turn)
        moves.append(move.index)
        turn = opponent(turn)

    return board, moves


@app.command()
def main(
    black_level: Difficulty,
    white_level: Difficulty,
    games: Annotated[int, typer.Option("--games", "-n")] = 10,
    seed: Annotated[Optional[int], typer.Option("--seed")] = None,
    show: Annotated[bool, typer.Option("--show")] = False,
) -> None:
    if seed is None:
        seed = get_seed()

    rng = random.Random(seed)
    result = ArenaResult()

    for game in range(games):
        board, moves = play_game(black_level, white_level, rng)
        result.add(board)

        black = board.count(BLACK)
        white = board.count(WHITE)
        print(f"Game {game + 1:>3}: {black:>2}-{white:<2} {Board.indexes_to_fields(moves)}")

        if show:
            board.show()

    print()
    print(f"Black ({black_level.value}) wins: {result.black_wins}")
    print(f"White ({white_level.value}) wins: {result.white_wins}")
    print(f"Draws: {result.draws}")


if __name__ == "__main__":
    app()
