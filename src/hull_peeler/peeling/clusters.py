# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Cluster-local hull peeling.

The point set is split into k groups of near neighbours around successive
seeds and every group is peeled independently.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..geometry.arena import PointArena, resolve_ids
from ..geometry.predicates import truncated_distances
from .onion import PeelResult, peel

REMAINDER_POLICIES = ('keep', 'fold', 'reject')


@dataclass
class ClusterPeelResult:
    """
    Outcome of a cluster peel.

    clusters[i] holds the point indices of cluster i (seed first) and
    peels[i] its PeelResult. leftover lists points no cluster took; it is
    only non-empty under the 'keep' remainder policy.
    """

    clusters: List[List[int]] = field(default_factory=list)
    peels: List[PeelResult] = field(default_factory=list)
    leftover: List[int] = field(default_factory=list)
    target_size: int = 0

    @property
    def point_count(self) -> int:
        return sum(p.point_count for p in self.peels)

    @property
    def edge_count(self) -> int:
        return sum(p.edge_count for p in self.peels)


def grow_cluster(arena: PointArena, working: np.ndarray, target: int) -> np.ndarray:
    """
    Collect up to target points around the first working point.

    Radii r = 1, 2, 3, ... are scanned in order; at each radius every
    working point whose truncated Euclidean distance to the seed equals r
    is added in working-set order, until the cluster is full or the
    working set is exhausted.

    :param arena: Point store.
    :type arena: PointArena
    :param working: Array of point indices still unclustered, seed first.
    :type working: np.ndarray
    :param target: Desired cluster size, seed included.
    :type target: int
    :return: Array of cluster point indices, seed first.
    :rtype: np.ndarray
    """
    if working.size == 0:
        return working[:0]

    coords = arena.as_array()
    seed = working[0]
    radii = truncated_distances(coords[seed], coords[working[1:]])

    # radius 0 only matches the seed itself, which is already in
    order = np.argsort(radii, kind='stable')
    order = order[radii[order] >= 1]
    members = working[1:][order][:max(target - 1, 0)]
    return np.concatenate([working[:1], members])


def cluster_peel(arena: PointArena, k: int, point_ids: Optional[Sequence[int]] = None,
                 remainder: str = 'keep', membership: str = 'line') -> ClusterPeelResult:
    """
    Split points into k near-neighbour clusters and peel each one.

    Each cluster targets floor(n / k) points, n being the original point
    count. When k does not divide n the remainder policy decides what
    happens to the points left after k clusters:

    - 'keep': they are reported in ClusterPeelResult.leftover.
    - 'fold': the last cluster takes every remaining point.
    - 'reject': a ValueError is raised before any work is done.

    :param arena: Point store.
    :type arena: PointArena
    :param k: Number of clusters.
    :type k: int
    :param point_ids: Indices of the point set (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :param remainder: Remainder policy, 'keep', 'fold' or 'reject'.
    :type remainder: str
    :param membership: Peel membership mode passed to peel().
    :type membership: str
    :return: Clusters, their peel results and any leftover points.
    :rtype: ClusterPeelResult
    :raises ValueError: If k <= 0, the policy is unknown, or 'reject' meets
        an uneven split.
    """
    if k <= 0:
        raise ValueError(f"Cluster count must be positive, got {k}")
    if remainder not in REMAINDER_POLICIES:
        raise ValueError(f"Unknown remainder policy '{remainder}'. Use one of {REMAINDER_POLICIES}")

    working = np.asarray(resolve_ids(arena, point_ids), dtype=np.int64)
    n = int(working.size)
    if remainder == 'reject' and n % k != 0:
        raise ValueError(f"{n} points cannot be split evenly into {k} clusters")

    target = n // k
    result = ClusterPeelResult(target_size=target)

    for i in range(k):
        if remainder == 'fold' and i == k - 1:
            cluster = working
        else:
            cluster = grow_cluster(arena, working, target)

        cluster_ids = [int(j) for j in cluster]
        result.clusters.append(cluster_ids)
        result.peels.append(peel(arena, cluster_ids, membership=membership))

        working = working[~np.isin(working, cluster)]

    result.leftover = [int(j) for j in working]
    return result
