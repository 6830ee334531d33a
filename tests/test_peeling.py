# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import pytest

from hull_peeler.geometry import PointArena, hull_vertex_set
from hull_peeler.peeling import PeelResult, on_edges_mask, peel

"""Unit tests for onion peeling.

Fixtures are small hand-checked point sets: nested squares, a square with
a point on its boundary, and degenerate collinear sets where the
'line' and 'segment' membership modes disagree.
"""


SQUARE_WITH_CENTER = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]
NESTED_SQUARES = [
    (0, 0), (4, 0), (4, 4), (0, 4),
    (1, 1), (3, 1), (3, 3), (1, 3),
    (2, 2),
]


def test_square_fixture_peels_to_the_centre():
    arena = PointArena.from_points(SQUARE_WITH_CENTER)
    result = peel(arena)

    assert len(result.layers) == 1
    assert {frozenset(e) for e in result.layers[0]} == {
        frozenset({0, 1}), frozenset({1, 2}), frozenset({2, 3}), frozenset({3, 0})
    }
    assert result.remaining == [arena.index_of(2, 2)]
    assert result.point_count == 5
    assert result.edge_count == 4


def test_nested_squares_give_two_layers():
    arena = PointArena.from_points(NESTED_SQUARES)
    result = peel(arena)

    assert result.depth == 2
    assert hull_vertex_set(result.layers[1]) == {
        arena.index_of(1, 1), arena.index_of(3, 1), arena.index_of(3, 3), arena.index_of(1, 3)
    }
    assert result.remaining == [arena.index_of(2, 2)]
    # counts come from the last hull only
    assert result.point_count == 5
    assert result.edge_count == 4
    assert result.total_edges == 8


def test_boundary_point_on_hull_edge_is_removed_with_the_layer():
    arena = PointArena.from_points([(0, 0), (4, 0), (4, 4), (0, 4), (2, 0), (2, 2)])
    result = peel(arena)

    assert result.depth == 1
    assert result.remaining == [arena.index_of(2, 2)]


def test_peel_of_fewer_than_three_points_computes_nothing():
    arena = PointArena.from_points([(0, 0), (5, 5)])
    result = peel(arena)

    assert result.layers == []
    assert result.remaining == [0, 1]
    assert result.point_count == 0
    assert result.edge_count == 0


def test_peel_of_empty_set():
    result = peel(PointArena())
    assert result == PeelResult()


def test_collinear_points_are_removed_in_one_layer():
    arena = PointArena.from_points([(0, 0), (1, 1), (2, 2), (3, 3)])
    result = peel(arena)

    assert result.depth == 1
    assert result.remaining == []


def test_line_and_segment_membership_differ_on_vertical_sets():
    # every point shares x, so the hull degenerates to a zero-length edge
    # whose supporting "line" matches every point
    pts = [(0, 0), (0, 1), (0, 2)]

    by_line = peel(PointArena.from_points(pts), membership='line')
    by_segment = peel(PointArena.from_points(pts), membership='segment')

    assert by_line.remaining == []
    assert by_segment.remaining == [1, 2]


def test_on_edges_mask_line_mode_matches_points_beyond_the_segment():
    arena = PointArena.from_points([(0, 0), (2, 0), (5, 0), (1, 1)])
    ids = np.array(arena.ids())
    edges = [(0, 1)]

    by_line = on_edges_mask(arena, ids, edges, 'line')
    by_segment = on_edges_mask(arena, ids, edges, 'segment')

    assert by_line.tolist() == [True, True, True, False]
    assert by_segment.tolist() == [True, True, False, False]


def test_unknown_membership_mode_is_rejected():
    arena = PointArena.from_points(SQUARE_WITH_CENTER)
    with pytest.raises(ValueError):
        peel(arena, membership='disc')


def test_peel_does_not_touch_points_outside_the_subset():
    arena = PointArena.from_points(NESTED_SQUARES)
    inner = [arena.index_of(x, y) for x, y in [(1, 1), (3, 1), (3, 3), (1, 3), (2, 2)]]
    result = peel(arena, inner)

    assert result.depth == 1
    assert result.remaining == [arena.index_of(2, 2)]


def test_peel_eventually_strips_every_layer_of_random_points():
    rng = np.random.default_rng(5)
    arena = PointArena.from_points(rng.integers(0, 10_000, size=(120, 2)))
    result = peel(arena)

    assert len(result.remaining) < 3
    removed = set(arena.ids()) - set(result.remaining)
    covered = set()
    for layer in result.layers:
        covered |= hull_vertex_set(layer)
    assert covered <= removed
