from reversi.othello.board import COLS, ROWS, Board, opponent

# Points per disc of material difference.
DISC_WEIGHT = 10

# Positional weights: corners are worth a lot, squares next to corners are dangerous.
WEIGHTS = [
    [120, -20, 20, 10, 10, 20, -20, 120],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [20, -5, 15, 3, 3, 15, -5, 20],
    [10, -5, 3, 3, 3, 3, -5, 10],
    [10, -5, 3, 3, 3, 3, -5, 10],
    [20, -5, 15, 3, 3, 15, -5, 20],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [120, -20, 20, 10, 10, 20, -20, 120],
]


def positional_score(board: Board, color: int) -> int:
    return sum(
        WEIGHTS[row][col]
        for row in range(ROWS)
        for col in range(COLS)
        if board.get(row, col) == color
    )


def evaluate(board: Board, color: int) -> int:
    material = board.count(color) - board.count(opponent(color))
    return DISC_WEIGHT * material + positional_score(board, color)
