"""Injectable piece sources"""
import random
from typing import Iterable, Optional

from tetris_piece import VARIANTS

class UniformRandom:
    """Each draw is uniform over the seven variants, independent of history."""
    PIECES = VARIANTS
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self.PIECES[self._rng.randrange(len(self.PIECES))]

class ScriptedRandom:
    """Replays a fixed sequence of variants, wrapping around at the end."""
    def __init__(self, sequence: Iterable[str]):
        self.sequence = list(sequence)
        if not self.sequence:
            raise ValueError("scripted sequence is empty")
        bad = [t for t in self.sequence if t not in VARIANTS]
        if bad:
            raise ValueError(f"unknown variants in sequence: {bad}")
        self.index = 0

    def next_piece(self) -> str:
        t = self.sequence[self.index]
        self.index = (self.index + 1) % len(self.sequence)
        return t
