"""
Rendering helpers for the Tetris project.

- Pre-render the static background (black field + gray one-cell border) once per Dims.
- Pre-render one block Surface per variant color and blit it for every occupied cell.
- Draw order per frame: background, locked cells, live piece, optional game-over banner.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, VARIANTS, color_of

BORDER_COLOR = (80,80,80)
FIELD_COLOR = (0,0,0)

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.game_over_s: Optional[pygame.Surface] = None
        self._make_static()
        self._make_cells()

    # ---------- Static background (border) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BORDER_COLOR)
        pygame.draw.rect(self.bg, FIELD_COLOR, self.board_rect)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Cell sprites, 1px gap on the right/bottom ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t in VARIANTS:
            s = pygame.Surface((c-1, c-1))
            s.fill(color_of(t))
            self.cell_surf[t] = s

    def cell_pos(self, bx: int, by: int):
        return (self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell)

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        screen.blit(self.cell_surf[t], self.cell_pos(bx, by))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, game):
        screen.blit(self.bg, (0,0))
        for y in range(ROWS):
            for x in range(COLS):
                t = game.cell(y, x)
                if t: self.draw_cell(screen, t, x, y)
        t = game.piece_variant
        for bx, by in game.piece_cells():
            if by >= 0: self.draw_cell(screen, t, bx, by)

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0,0,0,160))
        screen.blit(shade, (d.board_x, d.board_y))
        if self.game_over_s is None:
            self.game_over_s = self.font.render("GAME OVER (Esc to quit)", True, (255,220,220))
        screen.blit(self.game_over_s, self.game_over_s.get_rect(center=self.board_rect.center))
