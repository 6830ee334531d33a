# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Trisection triangulation.

The convex hull is fanned to a seed point near a reference centre and each
fan triangle is split around the first point found inside it, recursively,
until no triangle contains another point. The result is a valid but not
Delaunay triangulation; cleanup.py improves it with edge flips.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from ..geometry.arena import Edge, PointArena, Triangle, resolve_ids
from ..geometry.hull import build_hull, hull_vertex_set
from ..geometry.predicates import points_in_triangle, squared_distance, triangle_area2


def bounding_box_center(coords: np.ndarray) -> Tuple[int, int]:
    """
    Integer midpoint of the bounding box of an (N, 2) coordinate array.

    :rtype: Tuple[int, int]
    """
    lo = coords.min(axis=0)
    hi = coords.max(axis=0)
    return int((lo[0] + hi[0]) // 2), int((lo[1] + hi[1]) // 2)


def select_seed(arena: PointArena, point_ids: Sequence[int], edges: Sequence[Edge],
                center: Tuple[int, int]) -> int:
    """
    Pick the fan centre of the triangulation.

    Among points that are not endpoints of a hull edge, the one closest to
    center wins (first found on ties). If every point is a hull vertex the
    first vertex of the first hull edge is used.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Indices of the point set.
    :type point_ids: Sequence[int]
    :param edges: Hull edges of the point set.
    :type edges: Sequence[Edge]
    :param center: Reference (x, y) coordinate.
    :type center: Tuple[int, int]
    :return: Index of the seed point.
    :rtype: int
    """
    on_hull = hull_vertex_set(edges)
    inner = [int(i) for i in point_ids if i not in on_hull]
    if not inner:
        return edges[0][0]

    # exact integers: center is not bounded by the arena's coordinate range
    cx, cy = int(center[0]), int(center[1])
    return min(inner, key=lambda i: squared_distance(arena[i], (cx, cy)))


def trisect(arena: PointArena, point_ids: np.ndarray, triangle: Triangle) -> List[Triangle]:
    """
    Subdivide a triangle around the points inside it.

    The first point (in point_ids order) inside the triangle's bounding box
    that passes the same-sign test splits it into three triangles, which
    are processed the same way in order. A triangle containing no other
    point is a leaf. Zero-area triangles are dropped without being split.
    Uses an explicit stack.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Array of candidate point indices.
    :type point_ids: np.ndarray
    :param triangle: Triangle to subdivide.
    :type triangle: Triangle
    :return: Leaf triangles in depth-first order.
    :rtype: List[Triangle]
    """
    all_coords = arena.as_array()
    coords = all_coords[point_ids]
    leaves: List[Triangle] = []
    stack = [triangle]

    while stack:
        t = stack.pop()
        v1, v2, v3 = (all_coords[i] for i in t)
        # points on a degenerate triangle's line would split it forever
        if triangle_area2(v1, v2, v3) == 0:
            continue

        corners = np.vstack([v1, v2, v3])
        lo = corners.min(axis=0)
        hi = corners.max(axis=0)

        mask = np.all((coords >= lo) & (coords <= hi), axis=1)
        mask &= ~np.isin(point_ids, t)
        inside = np.flatnonzero(mask)
        if inside.size:
            hit = points_in_triangle(coords[inside], v1, v2, v3)
            inside = inside[hit]

        if inside.size == 0:
            leaves.append(t)
            continue

        p = int(point_ids[inside[0]])
        a, b, c = t
        stack.append((c, a, p))
        stack.append((b, c, p))
        stack.append((a, b, p))

    return leaves


def triangulate(arena: PointArena, point_ids: Optional[Sequence[int]] = None,
                center: Optional[Tuple[int, int]] = None) -> List[Triangle]:
    """
    Triangulate a point set by hull fan and trisection.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Indices of the point set (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :param center: Reference point for the seed choice (default: centre of
        the points' bounding box).
    :type center: Optional[Tuple[int, int]]
    :return: Leaf triangles; empty for fewer than 3 points.
    :rtype: List[Triangle]
    """
    ids = resolve_ids(arena, point_ids)
    edges = build_hull(arena, ids)
    if not edges:
        return []

    ids_arr = np.asarray(ids, dtype=np.int64)
    if center is None:
        center = bounding_box_center(arena.as_array()[ids_arr])

    seed = select_seed(arena, ids, edges, center)

    triangles: List[Triangle] = []
    for p1, p2 in edges:
        triangles.extend(trisect(arena, ids_arr, (p1, p2, seed)))
    return triangles
