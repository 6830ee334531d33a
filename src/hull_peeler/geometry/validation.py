# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Cross-checks of computed hulls and triangulations.

These helpers compare the package's own results with SciPy's Qhull-based
convex hull and with Shapely polygons. The exact checks use the integer
shoelace formula; the Shapely helpers are for reporting.
"""

import numpy as np
from scipy.spatial import ConvexHull
from shapely.geometry import Point, Polygon
from typing import List, Optional, Sequence, Set

from .arena import Edge, PointArena, Triangle
from .hull import hull_vertices
from .predicates import polygon_area2, triangle_area2


def reference_hull_vertices(arena: PointArena,
                            point_ids: Optional[Sequence[int]] = None) -> Set[int]:
    """
    Strict hull vertices according to scipy.spatial.ConvexHull.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Indices of the point set (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :return: Set of arena indices on the hull.
    :rtype: Set[int]
    """
    ids = np.asarray(arena.ids() if point_ids is None else list(point_ids), dtype=np.int64)
    if ids.size < 3:
        return set()
    hull = ConvexHull(arena.as_array()[ids].astype(float))
    return {int(ids[v]) for v in hull.vertices}


def hull_polygon(arena: PointArena, edges: Sequence[Edge]) -> Polygon:
    """
    Shapely polygon bounded by a hull edge cycle.

    :param arena: Point store.
    :type arena: PointArena
    :param edges: Directed hull edges.
    :type edges: Sequence[Edge]
    :return: Hull polygon.
    :rtype: Polygon
    """
    return Polygon(arena.coords(hull_vertices(edges)))


def hull_area2(arena: PointArena, edges: Sequence[Edge]) -> int:
    """Twice the (unsigned) area enclosed by a hull edge cycle."""
    return abs(polygon_area2(arena.coords(hull_vertices(edges))))


def triangles_area2(arena: PointArena, triangles: Sequence[Triangle]) -> int:
    """Sum of twice the (unsigned) areas of a triangle list."""
    return sum(abs(triangle_area2(*arena.coords(t))) for t in triangles)


def points_outside_hull(arena: PointArena, edges: Sequence[Edge],
                        point_ids: Optional[Sequence[int]] = None) -> List[int]:
    """
    Points that are neither hull vertices nor covered by the hull polygon.

    :return: Indices of offending points (empty for a correct hull).
    :rtype: List[int]
    """
    ids = arena.ids() if point_ids is None else list(point_ids)
    polygon = hull_polygon(arena, edges)
    return [i for i in ids if not polygon.covers(Point(arena[i]))]


def triangulation_covers_hull(arena: PointArena, edges: Sequence[Edge],
                              triangles: Sequence[Triangle]) -> bool:
    """
    True when the triangle areas add up exactly to the hull area.

    :rtype: bool
    """
    return triangles_area2(arena, triangles) == hull_area2(arena, edges)
