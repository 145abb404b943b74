"""Fixed key bindings -> game actions"""
from typing import Iterable, Optional
import pygame
from tetris_config import CONFIG

KEY_ACTIONS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_r: "rotate",
    pygame.K_UP: "rotate",
    pygame.K_ESCAPE: "quit",
}

class Controls:
    def __init__(self):
        self.soft_drop_held=False
    def handle(self, e) -> Optional[str]:
        if e.type==pygame.QUIT: return "quit"
        if e.type==pygame.KEYDOWN:
            if e.key==pygame.K_DOWN:
                self.soft_drop_held=True; return None
            return KEY_ACTIONS.get(e.key)
        if e.type==pygame.KEYUP and e.key==pygame.K_DOWN:
            self.soft_drop_held=False
        return None
    def fall_interval(self) -> float:
        return CONFIG["SOFT_DROP_INTERVAL"] if self.soft_drop_held else CONFIG["FALL_INTERVAL"]
    def apply(self, events: Iterable, game) -> bool:
        """Feed one frame of events into the game; False once quit was requested."""
        for e in events:
            action = self.handle(e)
            if action == "quit": return False
            if action == "left": game.move_horizontal(-1)
            elif action == "right": game.move_horizontal(1)
            elif action == "rotate": game.rotate()
        game.set_fall_interval(self.fall_interval())
        return True
