import random

import pytest

from chesser.world.errors import InvalidInput, UnknownPiece
from chesser.world.moves import BISHOP, KING, KNIGHT, MOVE_INDEX, QUEEN, ROOK
from chesser.world.pathing import NO_PARENT, find_path, find_piece_path, reconstruct_path


def brute_force_moves(start, end, n, offsets, blocked):
    """Shortest move count by relaxing every cell until nothing changes (no queue)."""
    walls = set(blocked) - {start, end}
    inf = float("inf")
    dist = {(r, c): inf for r in range(n) for c in range(n)}
    dist[start] = 0
    changed = True
    while changed:
        changed = False
        for (r, c), d in list(dist.items()):
            if d == inf:
                continue
            for dr, dc in offsets:
                nxt = (r + dr, c + dc)
                if nxt not in dist or nxt in walls:
                    continue
                if d + 1 < dist[nxt]:
                    dist[nxt] = d + 1
                    changed = True
    return None if dist[end] == inf else dist[end]


def assert_valid(path, start, end, offsets, blocked):
    assert path[0] == start
    assert path[-1] == end
    for a, b in zip(path, path[1:]):
        assert (b[0] - a[0], b[1] - a[1]) in offsets
    for cell in path[1:-1]:
        assert cell not in blocked


def test_rook_straight_line():
    path = find_path((0, 0), (0, 2), 5, ROOK, set())
    assert path == [(0, 0), (0, 1), (0, 2)]


def test_tie_break_follows_offset_order():
    # (0, 1) is tried before (1, 0), so the route goes right first
    assert find_path((0, 0), (1, 1), 5, ROOK, set()) == [(0, 0), (0, 1), (1, 1)]


def test_knight_to_diagonal_neighbour_takes_several_hops():
    path = find_path((0, 0), (1, 1), 5, KNIGHT, set())
    assert path is not None
    assert len(path) >= 3
    assert_valid(path, (0, 0), (1, 1), KNIGHT, set())
    assert len(path) - 1 == brute_force_moves((0, 0), (1, 1), 5, KNIGHT, set())


def test_encircled_end_is_unreachable():
    blocked = {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}
    # (1, 1) is the end, so it is exempt; its rook neighbours are all walls
    assert find_path((0, 0), (1, 1), 3, ROOK, blocked) is None


def test_king_walled_in():
    end = (2, 2)
    blocked = {(end[0] + dr, end[1] + dc) for dr, dc in KING}
    assert find_path((0, 0), end, 5, KING, blocked) is None


def test_bishop_cannot_change_colour():
    assert find_path((0, 0), (0, 1), 6, BISHOP, set()) is None


def test_start_equals_end():
    assert find_path((3, 3), (3, 3), 5, KNIGHT, set()) == [(3, 3)]
    assert find_path((3, 3), (3, 3), 5, ROOK, {(3, 3)}) == [(3, 3)]


def test_blocked_start_and_end_are_exempt():
    blocked = {(0, 0), (0, 3)}
    path = find_path((0, 0), (0, 3), 4, ROOK, blocked)
    assert path == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_blocked_set_is_not_mutated():
    blocked = {(0, 0), (4, 4), (2, 2)}
    snapshot = set(blocked)
    find_path((0, 0), (4, 4), 5, QUEEN, blocked)
    assert blocked == snapshot


def test_out_of_grid_walls_are_ignored():
    path = find_path((0, 0), (0, 2), 3, ROOK, {(-1, 0), (7, 7)})
    assert path == [(0, 0), (0, 1), (0, 2)]


def test_walls_force_detour():
    blocked = {(0, 1), (1, 1)}
    path = find_path((0, 0), (0, 2), 3, ROOK, blocked)
    assert path is not None
    assert_valid(path, (0, 0), (0, 2), ROOK, blocked)
    assert len(path) - 1 == 6


def test_repeated_calls_are_identical():
    rng = random.Random(7)
    blocked = {(rng.randrange(8), rng.randrange(8)) for _ in range(15)}
    first = find_path((0, 0), (7, 7), 8, KNIGHT, blocked)
    second = find_path((0, 0), (7, 7), 8, KNIGHT, blocked)
    assert first == second


def test_duplicate_offsets_are_harmless():
    assert find_path((0, 0), (0, 2), 5, ROOK + ROOK, set()) == [(0, 0), (0, 1), (0, 2)]


def test_offsets_given_as_a_set():
    assert find_path((0, 0), (0, 2), 5, set(ROOK), set()) == [(0, 0), (0, 1), (0, 2)]
    path = find_path((0, 0), (4, 4), 5, set(KNIGHT), {(2, 1)})
    assert path is not None
    assert len(path) - 1 == brute_force_moves((0, 0), (4, 4), 5, KNIGHT, {(2, 1)})
    assert_valid(path, (0, 0), (4, 4), set(KNIGHT), {(2, 1)})


@pytest.mark.parametrize("piece", sorted(MOVE_INDEX))
@pytest.mark.parametrize("seed", range(12))
def test_matches_brute_force_on_small_grids(piece, seed):
    rng = random.Random(seed * 31 + len(piece))
    n = rng.randint(1, 8)
    offsets = MOVE_INDEX[piece]
    cells = [(r, c) for r in range(n) for c in range(n)]
    blocked = {cell for cell in cells if rng.random() < 0.3}
    start = rng.choice(cells)
    end = rng.choice(cells)

    expected = brute_force_moves(start, end, n, offsets, blocked)
    path = find_path(start, end, n, offsets, blocked)

    if expected is None:
        assert path is None
    else:
        assert path is not None
        assert len(path) - 1 == expected
        assert_valid(path, start, end, offsets, blocked)


def test_reconstruct_path_walks_parents():
    n = 3
    parents = [NO_PARENT] * (n * n)
    parents[1] = 0          # (0, 1) <- (0, 0)
    parents[4] = 1          # (1, 1) <- (0, 1)
    assert reconstruct_path((1, 1), parents, n) == [(0, 0), (0, 1), (1, 1)]


def test_reconstruct_path_root_only():
    assert reconstruct_path((2, 2), [NO_PARENT] * 9, 3) == [(2, 2)]


@pytest.mark.parametrize("grid_size", [0, -3])
def test_non_positive_grid_size(grid_size):
    with pytest.raises(InvalidInput):
        find_path((0, 0), (0, 0), grid_size, ROOK, set())


@pytest.mark.parametrize("start,end", [
    ((5, 0), (0, 0)),
    ((0, 0), (0, 5)),
    ((-1, 0), (0, 0)),
    ((0, 0), (0, -1)),
])
def test_out_of_bounds_endpoints(start, end):
    with pytest.raises(InvalidInput):
        find_path(start, end, 5, ROOK, set())


def test_malformed_cells_and_offsets():
    with pytest.raises(InvalidInput):
        find_path((0,), (0, 0), 5, ROOK, set())
    with pytest.raises(InvalidInput):
        find_path((0, 0), (0, 1), 5, [(1, "x")], set())


def test_empty_offsets():
    with pytest.raises(InvalidInput):
        find_path((0, 0), (1, 1), 5, (), set())


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        find_path((0, 0), (9, 9), 5, ROOK, set())


def test_find_piece_path_uses_catalog():
    assert find_piece_path("rook", (0, 0), (0, 2), 5) == [(0, 0), (0, 1), (0, 2)]
    assert find_piece_path("Bishop", (0, 0), (2, 2), 5) == [(0, 0), (1, 1), (2, 2)]


def test_find_piece_path_unknown_piece():
    with pytest.raises(UnknownPiece):
        find_piece_path("Pawn", (0, 0), (0, 2), 5)
