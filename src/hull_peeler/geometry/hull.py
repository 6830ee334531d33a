# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
QuickHull convex hull over integer points.

The hull is returned as a list of directed edges (index pairs) forming a
closed cycle: the chain from the minimum-x point to the maximum-x point
followed by the chain back. Points exactly collinear with a hull edge are
never hull vertices.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from .arena import Edge, PointArena, resolve_ids
from .predicates import signed_scores


def find_extreme_x(coords: np.ndarray) -> Tuple[int, int]:
    """
    Positions of the minimum-x and maximum-x rows.

    Ties keep the earliest row.

    :param coords: (N, 2) array of coordinates, N >= 1.
    :type coords: np.ndarray
    :return: Tuple of (min_position, max_position).
    :rtype: Tuple[int, int]
    """
    xs = coords[:, 0]
    return int(np.argmin(xs)), int(np.argmax(xs))


def extreme_recurse(arena: PointArena, candidates: np.ndarray,
                    p1: int, p2: int) -> List[Edge]:
    """
    Hull chain from p1 to p2 over the points left of the directed line p1 -> p2.

    At each step the point with the strictly largest positive line score is
    taken (the first one on ties) and both sub-lines are processed, p1 side
    first. A line with no positive point is a hull edge. Uses an explicit
    stack so deep chains do not grow the interpreter stack.

    :param arena: Point store.
    :type arena: PointArena
    :param candidates: Array of point indices to consider.
    :type candidates: np.ndarray
    :param p1: Index of the chain start.
    :type p1: int
    :param p2: Index of the chain end.
    :type p2: int
    :return: Directed edges from p1 to p2 in chain order.
    :rtype: List[Edge]
    """
    coords = arena.as_array()
    edges: List[Edge] = []
    stack = [(p1, p2, np.asarray(candidates, dtype=np.int64))]

    while stack:
        a, b, cand = stack.pop()
        if cand.size:
            scores = signed_scores(coords[a], coords[b], coords[cand])
            outside = scores > 0
        else:
            outside = np.zeros(0, dtype=bool)

        if not outside.any():
            edges.append((a, b))
            continue

        p_max = int(cand[int(np.argmax(scores))])
        outer = cand[outside]
        # LIFO: push the p2 side first so the p1 side is emitted first
        stack.append((p_max, b, outer))
        stack.append((a, p_max, outer))

    return edges


def build_hull(arena: PointArena, point_ids: Optional[Sequence[int]] = None) -> List[Edge]:
    """
    Compute the convex hull edges of a point set with QuickHull.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Indices of the point set (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :return: Closed cycle of directed hull edges; empty for fewer than 3 points.
    :rtype: List[Edge]
    """
    ids = np.asarray(resolve_ids(arena, point_ids), dtype=np.int64)
    if ids.size < 3:
        return []

    coords = arena.as_array()[ids]
    lo, hi = find_extreme_x(coords)
    min_pt, max_pt = int(ids[lo]), int(ids[hi])

    edges = extreme_recurse(arena, ids, min_pt, max_pt)
    edges.extend(extreme_recurse(arena, ids, max_pt, min_pt))
    return edges


def hull_vertices(edges: Sequence[Edge]) -> List[int]:
    """
    Cyclic vertex order of a hull edge cycle.

    :param edges: Directed edges as returned by build_hull.
    :type edges: Sequence[Edge]
    :return: Vertex indices, each once, in traversal order.
    :rtype: List[int]
    """
    vertices: List[int] = []
    for a, _ in edges:
        if a not in vertices:
            vertices.append(a)
    return vertices


def hull_vertex_set(edges: Sequence[Edge]) -> set:
    """Every index that is an endpoint of some edge."""
    return {i for e in edges for i in e}
