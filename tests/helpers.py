from tetris_config import COLS, ROWS_TOTAL


def fill_row(board, y, gaps=()):
    """Fill board row y with locked cells, leaving the columns in gaps empty."""
    for x in range(COLS):
        board[y][x] = None if x in gaps else "Z"


def fill_bottom(board, n, gaps=()):
    for y in range(ROWS_TOTAL - n, ROWS_TOTAL):
        fill_row(board, y, gaps)


def stack_height(board):
    """Rows from the floor up to the highest occupied cell."""
    for y, row in enumerate(board):
        if any(row):
            return ROWS_TOTAL - y
    return 0
