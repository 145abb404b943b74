"""Piece model, shape catalog, corner rotation"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

COLS, ROWS = 10, 20
SPAWN_X, SPAWN_Y = 4, 0

Shape = List[List[int]]

VARIANTS = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES: Dict[str, Shape] = {
    "I": [[1,1,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0]],
    "T": [[0,1,0],[1,1,1]],
    "Z": [[1,1,0],[0,1,1]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,191,255),
    "J": (0,121,241),
    "L": (255,161,0),
    "O": (253,249,0),
    "S": (0,228,48),
    "T": (200,122,255),
    "Z": (230,41,55),
}

def shape_of(t: str) -> Shape:
    return [r[:] for r in SHAPES[t]]

def color_of(t: str) -> Tuple[int,int,int]:
    return COLORS[t]

def rotate_cw(m: Shape) -> Shape:
    """90° clockwise about the bounding-box corner: (r, c) -> (c, R-1-r)."""
    return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    x: int
    y: int
    @staticmethod
    def spawn(t: str) -> "Piece":
        return Piece(t, shape_of(t), SPAWN_X, SPAWN_Y)

    def cells(self) -> Iterator[Tuple[int,int]]:
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v: yield self.x+c, self.y+r

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, self.shape, self.x+dx, self.y+dy)

    def with_shape(self, shape: Shape) -> "Piece":
        return Piece(self.t, shape, self.x, self.y)
