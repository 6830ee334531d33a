# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module: point storage, predicates, QuickHull and result checks."""

from .arena import (
    Edge,
    Triangle,
    COORD_LIMIT,
    PointArena,
    GeometryState,
    resolve_ids
)

from .predicates import (
    line_coefficients,
    signed_score,
    signed_scores,
    same_sign,
    strictly_opposite,
    point_in_triangle,
    points_in_triangle,
    squared_distance,
    truncated_distance,
    truncated_distances,
    triangle_area2,
    polygon_area2
)

from .hull import (
    find_extreme_x,
    extreme_recurse,
    build_hull,
    hull_vertices,
    hull_vertex_set
)

from .validation import (
    reference_hull_vertices,
    hull_polygon,
    hull_area2,
    triangles_area2,
    points_outside_hull,
    triangulation_covers_hull
)

__all__ = [
    # Arena
    'Edge',
    'Triangle',
    'COORD_LIMIT',
    'PointArena',
    'GeometryState',
    'resolve_ids',
    # Predicates
    'line_coefficients',
    'signed_score',
    'signed_scores',
    'same_sign',
    'strictly_opposite',
    'point_in_triangle',
    'points_in_triangle',
    'squared_distance',
    'truncated_distance',
    'truncated_distances',
    'triangle_area2',
    'polygon_area2',
    # Hull
    'find_extreme_x',
    'extreme_recurse',
    'build_hull',
    'hull_vertices',
    'hull_vertex_set',
    # Validation
    'reference_hull_vertices',
    'hull_polygon',
    'hull_area2',
    'triangles_area2',
    'points_outside_hull',
    'triangulation_covers_hull',
]
