# chesser/scenes/board.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field

from chesser import settings
from chesser.world.grid import Grid, Cell
from chesser.world.moves import PIECES, canonical_piece
from chesser.world.pathing import find_piece_path
from chesser.world.errors import ChesserError
from chesser.entities.trail import PathTrail

log = logging.getLogger(__name__)

PIECE_KEYS: dict[int, str] = {
    pygame.K_1: "Rook",
    pygame.K_2: "Bishop",
    pygame.K_3: "Queen",
    pygame.K_4: "King",
    pygame.K_5: "Knight",
}

# Side panel buttons, in 2x2 reading order
ACTIONS: tuple[str, ...] = ("Begin", "Help", "Reset", "Clear")

ACTION_KEYS: dict[int, str] = {
    pygame.K_RETURN: "Begin",
    pygame.K_KP_ENTER: "Begin",
    pygame.K_SPACE: "Begin",
    pygame.K_h: "Help",
    pygame.K_r: "Reset",
    pygame.K_c: "Clear",
}

HELP_LINES: tuple[str, ...] = (
    "About",
    "Breadth-first search finds the fewest moves a chess piece",
    "needs to get from the start cell to the end cell.",
    "",
    "Help",
    "1. Right click a cell to set the start, again for the end.",
    "   Right click them again to deselect.",
    "2. Left click or drag to draw walls. Walls block the piece.",
    "   Click a wall again to remove it.",
    "3. Pick a piece (click it, or keys 1-5), then Begin (Enter/Space).",
    "4. Clear (C) empties the whole board.",
    "5. Reset (R) clears just the path and piece so you can edit the board.",
    "",
    "H / Esc / click to close",
)


@dataclass
class BoardScene:
    """
    Board layer:
    - Wall editor (click toggles, drag paints)
    - Start / end selection (right click)
    - Piece picker (side panel or keys 1-5)
    - Begin / Reset / Clear / Help, with the found path revealed cell by cell
    """
    screen: pygame.Surface
    grid: Grid = field(default_factory=Grid)
    trail: PathTrail = field(init=False)

    piece: str | None = field(default=None, init=False)
    status: str | None = field(default=None, init=False)
    show_help: bool = field(default=False, init=False)

    # drag
    _dragging: bool = field(default=False, init=False)

    # staged clear: seconds since C was pressed, and how many stages are done
    _clear_t: float | None = field(default=None, init=False)
    _clear_stage: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.trail = PathTrail(self.grid)
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self._piece_font = pygame.font.Font(None, settings.PIECE_FONT_SIZE)
        self._action_font = pygame.font.Font(None, settings.ACTION_FONT_SIZE)
        self._help_font = pygame.font.Font(None, settings.HELP_FONT_SIZE)

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            if self.show_help:
                self.show_help = False
            else:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
            return

        # help overlay swallows everything but its own toggles
        if self.show_help:
            if event.type == pygame.MOUSEBUTTONDOWN or (event.type == pygame.KEYDOWN and event.key == pygame.K_h):
                self.show_help = False
            return

        if event.type == pygame.KEYDOWN:
            if event.key in PIECE_KEYS:
                self.select_piece(PIECE_KEYS[event.key])
            elif event.key in ACTION_KEYS:
                self.run_action(ACTION_KEYS[event.key])
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == settings.WALL_BUTTON:
            piece = self._piece_at(event.pos)
            if piece is not None:
                self.select_piece(piece)
                return
            action = self._action_at(event.pos)
            if action is not None:
                self.run_action(action)
                return
            row, col = self.grid.from_px(*event.pos)
            if self.grid.in_bounds(row, col):
                self._dragging = True
                self.grid.toggle_obstacle(row, col)
            return

        if event.type == pygame.MOUSEMOTION and self._dragging:
            row, col = self.grid.from_px(*event.pos)
            self.grid.paint_obstacle(row, col)
            return

        if event.type == pygame.MOUSEBUTTONUP and event.button == settings.WALL_BUTTON:
            self._dragging = False
            return

        if event.type == pygame.WINDOWLEAVE:
            self._dragging = False
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == settings.ENDPOINT_BUTTON:
            row, col = self.grid.from_px(*event.pos)
            self.grid.cycle_endpoint(row, col)

    # ---- Actions ----
    def run_action(self, action: str) -> None:
        if action == "Begin":
            self.begin()
        elif action == "Help":
            self.show_help = True
        elif action == "Reset":
            self.reset()
        elif action == "Clear":
            self.clear()
        else:
            raise ValueError(f"Unknown action '{action}'. Available: {list(ACTIONS)}")

    def select_piece(self, piece: str) -> None:
        try:
            self.piece = canonical_piece(piece)
        except ChesserError as exc:
            log.warning("piece choice rejected: %s", exc)
            self.status = str(exc)
            return
        log.info("piece: %s", self.piece)

    def begin(self) -> list[Cell] | None:
        """Validate the board, run the search, and start revealing the result."""
        if self.grid.start is None:
            self.status = "Select start position"
            return None
        if self.grid.end is None:
            self.status = "Select end position"
            return None
        if self.piece is None:
            self.status = "Select chess piece"
            return None

        self.trail.clear()
        try:
            path = find_piece_path(self.piece, self.grid.start, self.grid.end, self.grid.size, self.grid.blocked)
        except ChesserError as exc:
            log.error("search rejected: %s", exc)
            self.status = str(exc)
            return None

        if path is None:
            log.info("%s: no path %s -> %s", self.piece, self.grid.start, self.grid.end)
            self.status = "No path found!"
            return None

        log.info("%s: %d moves %s -> %s", self.piece, len(path) - 1, self.grid.start, self.grid.end)
        self.status = None
        self.trail.start(path)
        return path

    def reset(self) -> None:
        """Drop the path and the piece; walls and endpoints stay."""
        self.trail.clear()
        self.piece = None
        self.status = None

    def clear(self) -> None:
        """Path and piece now, walls after one delay, endpoints after another."""
        self.reset()
        self._clear_t = 0.0
        self._clear_stage = 0

    # ---- Fixed update ----
    def update(self, dt: float) -> None:
        self.trail.update(dt)

        if self._clear_t is None:
            return
        self._clear_t += dt
        if self._clear_stage == 0 and self._clear_t >= settings.CLEAR_STAGE_DELAY:
            self.grid.clear_walls()
            self._clear_stage = 1
        if self._clear_stage == 1 and self._clear_t >= 2 * settings.CLEAR_STAGE_DELAY:
            self.grid.clear_endpoints()
            self._clear_t = None
            self._clear_stage = 0

    # ---- Render ----
    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(settings.BG_COLOR)
        self._draw_panel(surface)

        self.grid.draw_board(surface)
        self.trail.draw(surface)
        self.grid.draw_obstacles(surface)
        self.grid.draw_endpoints(surface)
        self.grid.draw_lines(surface)
        if not self.show_help:
            self.grid.draw_highlight(surface, pygame.mouse.get_pos())

        self._draw_hud(surface)
        if self.show_help:
            self._draw_help(surface)

    # ---- Side panel ----
    def _piece_rects(self) -> dict[str, pygame.Rect]:
        bw, bh = settings.PIECE_BUTTON_SIZE
        gap = settings.PIECE_BUTTON_GAP
        x = (settings.PANEL_WIDTH - bw) // 2
        y = settings.PIECE_LIST_TOP
        return {name: pygame.Rect(x, y + i * (bh + gap), bw, bh) for i, name in enumerate(PIECES)}

    def _action_rects(self) -> dict[str, pygame.Rect]:
        bw, bh = settings.ACTION_BUTTON_SIZE
        gap = settings.ACTION_BUTTON_GAP
        x0 = (settings.PANEL_WIDTH - (2 * bw + gap)) // 2
        y0 = max(r.bottom for r in self._piece_rects().values()) + settings.ACTION_LIST_GAP
        return {
            name: pygame.Rect(x0 + (i % 2) * (bw + gap), y0 + (i // 2) * (bh + gap), bw, bh)
            for i, name in enumerate(ACTIONS)
        }

    def _piece_at(self, pos: tuple[int, int]) -> str | None:
        for name, rect in self._piece_rects().items():
            if rect.collidepoint(pos):
                return name
        return None

    def _action_at(self, pos: tuple[int, int]) -> str | None:
        for name, rect in self._action_rects().items():
            if rect.collidepoint(pos):
                return name
        return None

    def _draw_panel(self, surface: pygame.Surface) -> None:
        surface.fill(settings.PANEL_BG_RGB, pygame.Rect(0, 0, settings.PANEL_WIDTH, surface.get_height()))
        for i, (name, rect) in enumerate(self._piece_rects().items(), start=1):
            fill = settings.PIECE_ACTIVE_RGB if name == self.piece else settings.PIECE_IDLE_RGB
            self._draw_button(surface, rect, f"{i}  {name}", fill, self._piece_font)
        for name, rect in self._action_rects().items():
            self._draw_button(surface, rect, name, settings.ACTION_IDLE_RGB, self._action_font)

    def _draw_button(self, surface: pygame.Surface, rect: pygame.Rect, text: str,
                     fill: tuple[int, int, int], font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, fill, rect, border_radius=6)
        pygame.draw.rect(surface, settings.PIECE_BORDER_RGB, rect, width=1, border_radius=6)
        label = font.render(text, True, settings.HUD_TEXT_RGB)
        surface.blit(label, label.get_rect(center=rect.center))

    # ---- HUD ----
    def _hud_lines(self) -> list[tuple[str, tuple[int, int, int]]]:
        lines = [(f"Piece: {self.piece or '-'}", settings.HUD_TEXT_RGB)]
        if self.trail.path:
            lines.append((f"Moves: {self.trail.moves}", settings.HUD_TEXT_RGB))
        if self.status:
            lines.append((self.status, settings.HUD_WARN_RGB))
        return lines

    def _draw_hud(self, surface: pygame.Surface) -> list[pygame.Rect]:
        """One pill per line, stacked in the panel above the pieces; returns the pill rects."""
        pad = settings.HUD_PAD
        margin = settings.HUD_MARGIN
        max_w = settings.PANEL_WIDTH - 2 * margin
        y = margin
        rects: list[pygame.Rect] = []
        for text, color in self._hud_lines():
            surf_text = self._font.render(text, True, color)
            w, h = surf_text.get_size()
            # long lines are cut at the panel edge
            w = min(w, max_w - pad * 2)
            pill = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
            pill.fill(settings.HUD_BG_RGBA)
            pill.blit(surf_text, (pad, pad), area=pygame.Rect(0, 0, w, h))
            rects.append(surface.blit(pill, (margin, y)))
            y += h + pad * 2 + pad // 2
        return rects

    # ---- Help ----
    def _draw_help(self, surface: pygame.Surface) -> None:
        dim = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        dim.fill(settings.HELP_DIM_RGBA)
        surface.blit(dim, (0, 0))

        lines = [self._help_font.render(line, True, settings.HELP_TEXT_RGB) for line in HELP_LINES]
        pad = 24
        w = max(s.get_width() for s in lines) + pad * 2
        line_h = self._help_font.get_linesize()
        h = line_h * len(lines) + pad * 2
        box = pygame.Rect(0, 0, w, h)
        box.center = surface.get_rect().center
        pygame.draw.rect(surface, settings.HELP_BG_RGB, box, border_radius=8)
        for i, s in enumerate(lines):
            surface.blit(s, (box.x + pad, box.y + pad + i * line_h))
