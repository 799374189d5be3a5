# chesser/entities/trail.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import List
from chesser import settings
from chesser.world.grid import Grid

Cell = tuple[int, int]

@dataclass(slots=True)
class PathTrail:
    """Reveals a found path one cell at a time, start first."""
    grid: Grid
    interval: float = settings.PATH_REVEAL_INTERVAL

    path: List[Cell] = field(default_factory=list, init=False)
    revealed: set[Cell] = field(default_factory=set, init=False)
    _queue: List[Cell] = field(default_factory=list, init=False)   # cells still hidden
    _t: float = field(default=0.0, init=False)                     # time since last reveal

    @property
    def moves(self) -> int:
        return max(0, len(self.path) - 1)

    def is_animating(self) -> bool:
        return bool(self._queue)

    def start(self, path: List[Cell]) -> None:
        self.clear()
        self.path = list(path)
        self._queue = list(path)

    def clear(self) -> None:
        self.path = []
        self.revealed.clear()
        self._queue.clear()
        self._t = 0.0

    def update(self, dt: float) -> None:
        if not self._queue:
            return
        self._t += dt
        if self.interval <= 0:
            self.revealed.update(self._queue)
            self._queue.clear()
            return
        while self._queue and self._t >= self.interval:
            self._t -= self.interval
            self.revealed.add(self._queue.pop(0))
        if not self._queue:
            self._t = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        self.grid.draw_cells(surface, self.revealed, settings.PATH_RGB)
