# chesser/world/pathing.py
from __future__ import annotations
import logging
from collections import deque
from collections.abc import Iterable, Sequence
from typing import AbstractSet

from chesser.world.errors import InvalidInput
from chesser.world.moves import Offset, offsets_for

log = logging.getLogger(__name__)

Cell = tuple[int, int]  # (row, col)

NO_PARENT = -1


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _check_cell(name: str, cell: object, grid_size: int) -> Cell:
    if not isinstance(cell, tuple) or len(cell) != 2 or not all(_is_int(v) for v in cell):
        raise InvalidInput(f"{name} must be a (row, col) pair of ints, got {cell!r}")
    r, c = cell
    if not (0 <= r < grid_size and 0 <= c < grid_size):
        raise InvalidInput(f"{name} {cell} is outside a {grid_size}x{grid_size} grid")
    return cell


def _check_offsets(offsets: Iterable[Offset]) -> tuple[Offset, ...]:
    moves = tuple(offsets)
    if not moves:
        raise InvalidInput("offsets must not be empty")
    for m in moves:
        if not isinstance(m, tuple) or len(m) != 2 or not all(_is_int(v) for v in m):
            raise InvalidInput(f"offset must be a (d_row, d_col) pair of ints, got {m!r}")
    return moves


def find_path(
    start: Cell,
    end: Cell,
    grid_size: int,
    offsets: Iterable[Offset],
    blocked: AbstractSet[Cell] = frozenset(),
) -> list[Cell] | None:
    """
    Fewest-moves route from start to end, one offset per move (BFS).
    Start and end are never treated as blocked, whatever `blocked` says;
    `blocked` itself is only read.
    Returns [start .. end], or None when end can't be reached.
    Equal-length routes are decided by the order of `offsets`.
    """
    if not _is_int(grid_size) or grid_size <= 0:
        raise InvalidInput(f"grid_size must be a positive int, got {grid_size!r}")
    _check_cell("start", start, grid_size)
    _check_cell("end", end, grid_size)
    moves = _check_offsets(offsets)

    if start == end:
        return [start]

    n = grid_size
    wall = bytearray(n * n)
    for r, c in blocked:
        if 0 <= r < n and 0 <= c < n:
            wall[r * n + c] = 1
    # exempt endpoints
    wall[start[0] * n + start[1]] = 0
    wall[end[0] * n + end[1]] = 0

    seen = bytearray(n * n)
    parents: list[int] = [NO_PARENT] * (n * n)
    start_i = start[0] * n + start[1]
    end_i = end[0] * n + end[1]
    seen[start_i] = 1

    q: deque[int] = deque([start_i])
    expanded = 0
    while q:
        cur = q.popleft()
        if cur == end_i:
            path = reconstruct_path(end, parents, n)
            log.debug("path %s -> %s: %d moves, %d cells expanded", start, end, len(path) - 1, expanded)
            return path
        expanded += 1
        r, c = divmod(cur, n)
        for dr, dc in moves:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n and 0 <= nc < n):
                continue
            i = nr * n + nc
            if wall[i] or seen[i]:
                continue
            seen[i] = 1
            parents[i] = cur
            q.append(i)

    log.debug("no path %s -> %s after expanding %d cells", start, end, expanded)
    return None


def reconstruct_path(end: Cell, parents: Sequence[int], grid_size: int) -> list[Cell]:
    """Walk parents back to the root (the cell with no parent); returns [start .. end]."""
    path: list[Cell] = []
    cur = end[0] * grid_size + end[1]
    while cur != NO_PARENT:
        path.append(divmod(cur, grid_size))
        cur = parents[cur]
    path.reverse()
    return path


def find_piece_path(
    piece: str,
    start: Cell,
    end: Cell,
    grid_size: int,
    blocked: AbstractSet[Cell] = frozenset(),
) -> list[Cell] | None:
    """Look up the piece's moves and search. Raises UnknownPiece / InvalidInput."""
    return find_path(start, end, grid_size, offsets_for(piece), blocked)
