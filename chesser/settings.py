# chesser/settings.py
from __future__ import annotations
import os

# Window / render
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 720
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
WINDOW_TITLE: str = "Chesser - shortest piece routes"
FPS: int = 60

# Board (square, in cells)
GRID_SIZE: int = 45
TILE_SIZE: int = 15
BOARD_BORDER: int = 10   # dark frame around the board (px)

# Side panel (piece picker) sits left of the board
PANEL_WIDTH: int = 320
BOARD_ORIGIN: tuple[int, int] = (PANEL_WIDTH + BOARD_BORDER, (SCREEN_HEIGHT - GRID_SIZE * TILE_SIZE) // 2)

# Mouse buttons
WALL_BUTTON: int = 1       # left: toggle / drag walls
ENDPOINT_BUTTON: int = 3   # right: start / end

# Colors
BG_COLOR: tuple[int, int, int] = (0, 0, 0)
BOARD_BORDER_RGB: tuple[int, int, int] = (20, 20, 20)
CELL_RGB: tuple[int, int, int] = (255, 255, 255)
GRID_COLOR: tuple[int, int, int] = (107, 114, 128)
GRID_HILITE: tuple[int, int, int] = (59, 130, 246)
WALL_RGB: tuple[int, int, int] = (0, 0, 0)
START_RGB: tuple[int, int, int] = (46, 10, 152)
END_RGB: tuple[int, int, int] = (20, 7, 83)
PATH_RGB: tuple[int, int, int] = (15, 201, 122)

# Side panel
PANEL_BG_RGB: tuple[int, int, int] = (17, 24, 39)
PIECE_IDLE_RGB: tuple[int, int, int] = (17, 24, 39)
PIECE_ACTIVE_RGB: tuple[int, int, int] = (59, 130, 246)
PIECE_BORDER_RGB: tuple[int, int, int] = (255, 255, 255)
PIECE_BUTTON_SIZE: tuple[int, int] = (200, 44)
PIECE_BUTTON_GAP: int = 12
PIECE_LIST_TOP: int = 150
PIECE_FONT_SIZE: int = 30

# Begin / Help / Reset / Clear, 2x2 below the pieces
ACTION_IDLE_RGB: tuple[int, int, int] = (55, 65, 81)
ACTION_BUTTON_SIZE: tuple[int, int] = (130, 40)
ACTION_BUTTON_GAP: int = 12
ACTION_LIST_GAP: int = 36   # between the last piece and the first action
ACTION_FONT_SIZE: int = 26

# HUD / labels (stacked at the top of the side panel)
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 170)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_WARN_RGB: tuple[int, int, int] = (250, 204, 21)
HUD_FONT_SIZE: int = 22
HUD_MARGIN: int = 10
HUD_PAD: int = 8

# Help overlay
HELP_DIM_RGBA: tuple[int, int, int, int] = (0, 0, 0, 128)
HELP_BG_RGB: tuple[int, int, int] = (255, 255, 255)
HELP_TEXT_RGB: tuple[int, int, int] = (17, 17, 17)
HELP_FONT_SIZE: int = 24

# Timing (seconds)
PATH_REVEAL_INTERVAL: float = 0.005   # one path cell per tick
CLEAR_STAGE_DELAY: float = 0.2        # walls, then endpoints

# Logging
LOG_LEVEL: str = os.environ.get("CHESSER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
