# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Hull peeling ("onion peeling").

The convex hull is computed repeatedly; points lying on the produced hull
are stripped and the rest is peeled again until fewer than three points
remain.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..geometry.arena import Edge, PointArena, resolve_ids
from ..geometry.hull import build_hull
from ..geometry.predicates import signed_scores

MEMBERSHIP_MODES = ('line', 'segment')


@dataclass
class PeelResult:
    """
    Outcome of one hull peel.

    point_count and edge_count describe the last hull computed: the number
    of points it was computed over and the number of edges it produced.
    """

    remaining: List[int] = field(default_factory=list)
    layers: List[List[Edge]] = field(default_factory=list)
    point_count: int = 0
    edge_count: int = 0

    @property
    def total_edges(self) -> int:
        return sum(len(layer) for layer in self.layers)

    @property
    def depth(self) -> int:
        return len(self.layers)


def on_edges_mask(arena: PointArena, point_ids: np.ndarray, edges: Sequence[Edge],
                  membership: str = 'line') -> np.ndarray:
    """
    Flag the points lying on any of the given edges.

    With membership='line' a point counts as on an edge when its score
    against the edge's infinite supporting line is exactly zero, so points
    collinear with an edge but outside the segment are flagged too.
    membership='segment' additionally requires the point to lie inside the
    edge's bounding box (true segment containment).

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Array of point indices to classify.
    :type point_ids: np.ndarray
    :param edges: Edges to test against.
    :type edges: Sequence[Edge]
    :param membership: 'line' or 'segment'.
    :type membership: str
    :return: Boolean mask aligned with point_ids.
    :rtype: np.ndarray
    :raises ValueError: If membership is not a known mode.
    """
    if membership not in MEMBERSHIP_MODES:
        raise ValueError(f"Unknown membership mode '{membership}'. Use one of {MEMBERSHIP_MODES}")

    all_coords = arena.as_array()
    coords = all_coords[point_ids]
    on = np.zeros(len(point_ids), dtype=bool)

    for a, b in edges:
        pa, pb = all_coords[a], all_coords[b]
        hit = signed_scores(pa, pb, coords) == 0
        if membership == 'segment':
            lo = np.minimum(pa, pb)
            hi = np.maximum(pa, pb)
            hit &= np.all((coords >= lo) & (coords <= hi), axis=1)
        on |= hit

    return on


def peel(arena: PointArena, point_ids: Optional[Sequence[int]] = None,
         membership: str = 'line') -> PeelResult:
    """
    Peel convex hull layers off a point set.

    :param arena: Point store.
    :type arena: PointArena
    :param point_ids: Indices of the point set (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :param membership: How points are matched to hull edges, 'line' or 'segment'.
    :type membership: str
    :return: Remaining points, hull layers and the last hull's counts.
    :rtype: PeelResult
    """
    if membership not in MEMBERSHIP_MODES:
        raise ValueError(f"Unknown membership mode '{membership}'. Use one of {MEMBERSHIP_MODES}")

    points = np.asarray(resolve_ids(arena, point_ids), dtype=np.int64)
    result = PeelResult()

    while points.size > 2:
        edges = build_hull(arena, points)
        result.layers.append(edges)
        result.point_count = int(points.size)
        result.edge_count = len(edges)

        on = on_edges_mask(arena, points, edges, membership)
        points = points[~on]

    result.remaining = [int(i) for i in points]
    return result
