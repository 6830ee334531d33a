# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np

from hull_peeler.geometry import (
    PointArena,
    build_hull,
    squared_distance,
    triangulation_covers_hull,
    truncated_distance,
)
from hull_peeler.triangulation import (
    cleanup,
    is_convex_flip,
    shared_diagonal,
    triangulate,
    try_flip,
)

"""Unit tests for the edge-flip cleanup.

Quadrilateral fixtures are indexed A=0, B=1, C=2, D=3 with the starting
pair sharing diagonal A-C.
"""


def quad(a, b, c, d):
    arena = PointArena.from_points([a, b, c, d])
    return arena, [(0, 2, 1), (0, 2, 3)]


def test_flat_rhombus_flips_to_the_short_diagonal():
    arena, tris = quad((0, 0), (4, -1), (8, 0), (4, 1))
    updated, flips = cleanup(arena, tris)

    assert flips == 1
    assert updated == [(0, 1, 3), (2, 1, 3)]


def test_flip_keeps_the_covered_area():
    arena, tris = quad((0, 0), (4, -1), (8, 0), (4, 1))
    updated, _ = cleanup(arena, tris)

    edges = build_hull(arena)
    assert triangulation_covers_hull(arena, edges, tris)
    assert triangulation_covers_hull(arena, edges, updated)


def test_non_convex_quad_is_not_flipped():
    arena, tris = quad((0, 0), (12, -1), (10, 0), (12, 1))
    updated, flips = cleanup(arena, tris)

    assert flips == 0
    assert updated == tris


def test_longer_candidate_diagonal_is_not_flipped():
    arena, tris = quad((0, 0), (1, -5), (2, 0), (1, 5))
    updated, flips = cleanup(arena, tris)

    assert flips == 0
    assert updated == tris


def test_equal_diagonals_are_not_flipped():
    arena, tris = quad((0, 0), (2, -2), (4, 0), (2, 2))
    _, flips = cleanup(arena, tris)
    assert flips == 0


def test_shared_diagonal_needs_exactly_two_common_vertices():
    assert shared_diagonal((0, 1, 2), (0, 3, 4)) is None
    assert shared_diagonal((0, 1, 2), (2, 1, 0)) is None
    assert shared_diagonal((0, 1, 2), (3, 4, 5)) is None
    assert shared_diagonal((0, 2, 1), (3, 0, 2)) == (0, 2, 1, 3)


def test_is_convex_flip_requires_strict_crossing():
    # A lies on the line through B and D: the diagonals only touch
    arena = PointArena.from_points([(0, 0), (2, 2), (4, 0), (4, 4)])
    assert not is_convex_flip(arena, 0, 2, 1, 3)


def test_cleanup_does_not_modify_its_input():
    arena, tris = quad((0, 0), (4, -1), (8, 0), (4, 1))
    original = list(tris)
    cleanup(arena, tris)
    assert tris == original


def test_every_flip_shortens_its_diagonal():
    rng = np.random.default_rng(21)
    arena = PointArena.from_points(rng.integers(0, 1000, size=(50, 2)))
    tris = triangulate(arena)

    # replay the cleanup pass and check each flip as it happens
    flips = 0
    for i in range(len(tris)):
        for j in range(i + 1, len(tris)):
            found = shared_diagonal(tris[i], tris[j])
            flipped = try_flip(arena, tris[i], tris[j])
            if flipped is None:
                continue
            s1, s2, a, b = found
            assert squared_distance(arena[a], arena[b]) < squared_distance(arena[s1], arena[s2])
            tris[i], tris[j] = flipped
            flips += 1

    _, expected_flips = cleanup(arena, triangulate(arena))
    assert flips == expected_flips


def test_cleanup_preserves_tiling_and_count():
    rng = np.random.default_rng(4)
    arena = PointArena.from_points(rng.integers(0, 1_000_000, size=(80, 2)))
    tris = triangulate(arena)
    updated, flips = cleanup(arena, tris)

    assert flips > 0
    assert len(updated) == len(tris)
    assert triangulation_covers_hull(arena, build_hull(arena), updated)


def test_flip_free_set_is_returned_unchanged():
    arena = PointArena.from_points([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    tris = triangulate(arena)
    updated, flips = cleanup(arena, tris)

    assert flips == 0
    assert updated == tris


def test_flip_compares_exact_lengths_not_truncated_ones():
    # |AC|^2 = 18 and |BD|^2 = 17 both truncate to 4, yet BD is shorter
    arena, tris = quad((0, 0), (3, 1), (3, 3), (-1, 2))
    assert truncated_distance(arena[0], arena[2]) == truncated_distance(arena[1], arena[3])

    updated, flips = cleanup(arena, tris)
    assert flips == 1
    assert updated == [(0, 1, 3), (2, 1, 3)]
