"""Game simulation: spawning, gravity, collision-gated moves, locking"""
import logging
from typing import List, Optional, Tuple

from tetris_board import Board, new_board, can_place, merge, sweep, cell
from tetris_config import CONFIG
from tetris_piece import Piece, rotate_cw
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)


class Game:
    """Owns the board and the single live piece.

    Every mutator either commits a position that passes ``can_place`` or
    leaves the piece untouched. Once a freshly spawned piece overlaps the
    stack the game is ``over`` and all mutators return False.
    """

    def __init__(self, rng=None, now: float = 0.0, fall_interval: Optional[float] = None):
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.board: Board = new_board()
        self.fall_interval = CONFIG["FALL_INTERVAL"]
        if fall_interval is not None:
            self.set_fall_interval(fall_interval)
        self.last_fall = now
        self.over = False
        self.rows_cleared = 0
        self.pieces_locked = 0
        self.current = self.spawn()

    def spawn(self) -> Piece:
        return Piece.spawn(self.rng.next_piece())

    def set_fall_interval(self, seconds: float):
        if seconds <= 0:
            raise ValueError(f"fall interval must be positive, got {seconds}")
        self.fall_interval = seconds

    # ---------- mutators ----------
    def try_move(self, dx: int, dy: int) -> bool:
        if self.over: return False
        p = self.current
        if not can_place(self.board, p.shape, p.x+dx, p.y+dy):
            return False
        self.current = p.moved(dx, dy)
        return True

    def move_horizontal(self, dx: int) -> bool:
        assert dx in (-1, 1), f"horizontal step must be +-1, got {dx}"
        return self.try_move(dx, 0)

    def rotate(self) -> bool:
        if self.over: return False
        p = self.current
        ns = rotate_cw(p.shape)
        if not can_place(self.board, ns, p.x, p.y):
            return False
        self.current = p.with_shape(ns)
        return True

    def lock(self):
        if self.over: return
        merge(self.board, self.current)
        self.pieces_locked += 1
        c = sweep(self.board)
        if c:
            self.rows_cleared += c
            log.debug("cleared %d row(s), %d total", c, self.rows_cleared)
        self.current = self.spawn()
        if not can_place(self.board, self.current.shape, self.current.x, self.current.y):
            self.over = True
            log.info("game over after %d pieces", self.pieces_locked)

    def tick(self, now: float) -> bool:
        """Apply gravity if the fall interval has elapsed; True if a step was due."""
        if self.over: return False
        if now - self.last_fall < self.fall_interval:
            return False
        if not self.try_move(0, 1):
            log.debug("locking %s at (%d,%d)", self.current.t, self.current.x, self.current.y)
            self.lock()
        self.last_fall = now
        return True

    # ---------- read-only accessors ----------
    def cell(self, row: int, col: int) -> Optional[str]:
        return cell(self.board, row, col)

    def piece_cells(self) -> List[Tuple[int,int]]:
        return list(self.current.cells())

    @property
    def piece_variant(self) -> str:
        return self.current.t


def new_game(now: float = 0.0, rng=None) -> Game:
    return Game(rng=rng, now=now)
