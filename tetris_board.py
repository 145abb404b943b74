"""Board helpers: cell access, can_place, merge, sweep"""
from typing import Optional, List
from tetris_piece import Piece, Shape, COLS, ROWS

Board = List[List[Optional[str]]]

def new_board() -> Board:
    return [[None]*COLS for _ in range(ROWS)]

def cell(board: Board, row: int, col: int) -> Optional[str]:
    assert 0 <= row < ROWS and 0 <= col < COLS, f"cell ({row},{col}) outside {ROWS}x{COLS}"
    return board[row][col]

def can_place(board: Board, shape: Shape, x: int, y: int) -> bool:
    # rows above the field are legal and never checked against the board
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=COLS or by>=ROWS: return False
            if by>=0 and board[by][bx]: return False
    return True

def merge(board:Board, piece:Piece):
    for bx,by in piece.cells():
        if by>=0: board[by][bx]=piece.t

def row_full(board:Board, row:int) -> bool:
    return all(board[row][x] for x in range(COLS))

def sweep(board:Board)->int:
    """Clear every complete row in one bottom-up pass; returns rows cleared.

    After a collapse the same index holds the row that was above it, so the
    scan stays put until that row is incomplete.
    """
    c=0; y=ROWS-1
    while y>=0:
        if row_full(board, y):
            del board[y]; board.insert(0,[None]*COLS); c+=1
        else: y-=1
    return c
