# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    side_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    hold_x: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_cell: int

def compute_dims() -> Dims:
    """Hold box left of the board, queue and HUD panel right of it."""
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    preview_cell = max(14, int(cell * 0.75))
    side_w = max(140, preview_cell * 4 + 24)

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + side_w + margin + board_w + margin + side_w + margin
    total_h = margin + board_h + margin

    hold_x = margin
    board_x = hold_x + side_w + margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, side_w=side_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        hold_x=hold_x, board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_cell=preview_cell,
    )
