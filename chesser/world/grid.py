# chesser/world/grid.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Iterable, Set
from chesser import settings

Cell = tuple[int, int]  # (row, col)

@dataclass(slots=True)
class Grid:
    size: int = settings.GRID_SIZE
    tile_size: int = settings.TILE_SIZE
    origin: tuple[int, int] = settings.BOARD_ORIGIN
    blocked: Set[Cell] = field(default_factory=set)
    start: Cell | None = None
    end: Cell | None = None

    # --- math ---
    def to_px(self, row: int, col: int) -> tuple[int, int]:
        ox, oy = self.origin
        return ox + col * self.tile_size, oy + row * self.tile_size

    def center_px(self, row: int, col: int) -> tuple[int, int]:
        x, y = self.to_px(row, col)
        half = self.tile_size // 2
        return x + half, y + half

    def from_px(self, x: int, y: int) -> Cell:
        ox, oy = self.origin
        return (y - oy) // self.tile_size, (x - ox) // self.tile_size

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def rect(self) -> pygame.Rect:
        ox, oy = self.origin
        side = self.size * self.tile_size
        return pygame.Rect(ox, oy, side, side)

    def tile_rect(self, row: int, col: int) -> pygame.Rect:
        x, y = self.to_px(row, col)
        return pygame.Rect(x, y, self.tile_size, self.tile_size)

    # --- walls ---
    def is_blocked(self, row: int, col: int) -> bool:
        return (row, col) in self.blocked

    def is_passable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and (row, col) not in self.blocked

    def toggle_obstacle(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            return
        if (row, col) in self.blocked:
            self.blocked.remove((row, col))
        else:
            self.blocked.add((row, col))

    def paint_obstacle(self, row: int, col: int) -> None:
        """Drag painting only ever adds walls."""
        if self.in_bounds(row, col):
            self.blocked.add((row, col))

    def clear_walls(self) -> None:
        self.blocked.clear()

    # --- start / end ---
    def cycle_endpoint(self, row: int, col: int) -> None:
        """Right-click rules: deselect start/end if hit, else fill start first, then end."""
        if not self.in_bounds(row, col):
            return
        cell = (row, col)
        if cell == self.start:
            self.start = None
        elif cell == self.end:
            self.end = None
            self.blocked.discard(cell)
        elif self.start is None:
            self.start = cell
        elif self.end is None:
            self.end = cell

    def clear_endpoints(self) -> None:
        self.start = None
        self.end = None

    # --- drawing ---
    def draw_board(self, surface: pygame.Surface) -> None:
        frame = self.rect().inflate(settings.BOARD_BORDER * 2, settings.BOARD_BORDER * 2)
        pygame.draw.rect(surface, settings.BOARD_BORDER_RGB, frame)
        surface.fill(settings.CELL_RGB, self.rect())

    def draw_lines(self, surface: pygame.Surface) -> None:
        ts = self.tile_size
        ox, oy = self.origin
        side = self.size * ts
        color = settings.GRID_COLOR

        for c in range(self.size + 1):
            x = ox + c * ts
            pygame.draw.line(surface, color, (x, oy), (x, oy + side), 1)

        for r in range(self.size + 1):
            y = oy + r * ts
            pygame.draw.line(surface, color, (ox, y), (ox + side, y), 1)

    def draw_cells(self, surface: pygame.Surface, cells: Iterable[Cell], color: tuple[int, int, int]) -> None:
        for r, c in cells:
            if self.in_bounds(r, c):
                surface.fill(color, self.tile_rect(r, c))

    def draw_obstacles(self, surface: pygame.Surface) -> None:
        self.draw_cells(surface, self.blocked, settings.WALL_RGB)

    def draw_endpoints(self, surface: pygame.Surface) -> None:
        # start wins over end, both win over walls and path
        if self.end is not None:
            self.draw_cells(surface, (self.end,), settings.END_RGB)
        if self.start is not None:
            self.draw_cells(surface, (self.start,), settings.START_RGB)

    def draw_highlight(self, surface: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        row, col = self.from_px(*mouse_pos)
        if not self.in_bounds(row, col):
            return
        pygame.draw.rect(surface, settings.GRID_HILITE, self.tile_rect(row, col), width=2)
