# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])

    # one-cell border on every side
    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = (COLS + 2) * cell
    total_h = (ROWS + 2) * cell

    return Dims(
        cell=cell,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=cell, board_y=cell,
    )
