# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point storage and per-operation geometry state.

Every distinct integer coordinate pair is stored once in a PointArena and
addressed by its index. Edges and triangles produced by the hull and
triangulation modules are tuples of these indices.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple


Edge = Tuple[int, int]
Triangle = Tuple[int, int, int]

# |coordinate| < 2**30 keeps every line score a*x + b*y + c inside int64
COORD_LIMIT = 2 ** 30


class PointArena:
    """
    Deduplicated store of integer points.

    Indices are assigned in insertion order and never change, so a list of
    indices preserves the scan order of the points it was built from.
    """

    def __init__(self, points: Optional[Iterable[Sequence[int]]] = None):
        """
        Initialize the arena.

        :param points: Optional iterable of (x, y) integer pairs.
        :type points: Optional[Iterable[Sequence[int]]]
        """
        self._coords: List[Tuple[int, int]] = []
        self._index: Dict[Tuple[int, int], int] = {}
        self._array: Optional[np.ndarray] = None
        if points is not None:
            self.extend(points)

    @classmethod
    def from_points(cls, points) -> 'PointArena':
        """
        Build an arena from a list of pairs or an (N, 2) array.

        :param points: (N, 2) integer coordinates.
        :return: New arena holding the distinct points in first-seen order.
        :rtype: PointArena
        """
        return cls(np.asarray(points).reshape(-1, 2).tolist())

    def add(self, x, y) -> int:
        """
        Insert a point and return its index.

        Adding a coordinate that is already stored returns the existing index.

        :raises ValueError: If a coordinate is not integral or out of range.
        """
        key = (_as_coordinate(x), _as_coordinate(y))
        idx = self._index.get(key)
        if idx is None:
            idx = len(self._coords)
            self._coords.append(key)
            self._index[key] = idx
            self._array = None
        return idx

    def extend(self, points: Iterable[Sequence[int]]) -> List[int]:
        """
        Insert several points.

        :return: Index of every supplied point, duplicates included.
        :rtype: List[int]
        """
        return [self.add(x, y) for x, y in points]

    def index_of(self, x, y) -> int:
        """
        Look up the index of a stored coordinate.

        :raises KeyError: If the point is not in the arena.
        :raises ValueError: If a coordinate is not integral or out of range.
        """
        return self._index[(_as_coordinate(x), _as_coordinate(y))]

    def __contains__(self, point) -> bool:
        x, y = point
        try:
            key = (_as_coordinate(x), _as_coordinate(y))
        except ValueError:
            return False
        return key in self._index

    def __len__(self) -> int:
        return len(self._coords)

    def __getitem__(self, idx: int) -> Tuple[int, int]:
        return self._coords[idx]

    def ids(self) -> List[int]:
        """All indices in insertion order."""
        return list(range(len(self._coords)))

    def coords(self, ids: Iterable[int]) -> List[Tuple[int, int]]:
        return [self._coords[i] for i in ids]

    def as_array(self) -> np.ndarray:
        """
        Coordinates as an (N, 2) int64 array, row i holding point i.

        :rtype: np.ndarray
        """
        if self._array is None:
            self._array = np.array(self._coords, dtype=np.int64).reshape(-1, 2)
        return self._array

    def check_ids(self, ids: Iterable[int]) -> None:
        """
        Fail fast when an index does not address a stored point.

        :raises ValueError: On the first unknown index.
        """
        n = len(self._coords)
        for i in ids:
            if not 0 <= i < n:
                raise ValueError(f"Point index {i} is not in the arena (size {n})")


def _as_coordinate(value) -> int:
    iv = int(value)
    if iv != value:
        raise ValueError(f"Coordinate {value!r} is not an integer")
    if abs(iv) >= COORD_LIMIT:
        raise ValueError(f"Coordinate {value!r} outside supported range ±{COORD_LIMIT}")
    return iv


def resolve_ids(arena: PointArena, point_ids: Optional[Sequence[int]]) -> List[int]:
    """Default to every arena point; otherwise validate the supplied indices."""
    if point_ids is None:
        return arena.ids()
    ids = [int(i) for i in point_ids]
    arena.check_ids(ids)
    return ids


@dataclass
class GeometryState:
    """
    Working set and outputs for one operation.

    The state is owned by the caller. Each operation method clears the
    previous edges and triangles before storing its own, so outputs never
    mix results from different point sets.
    """

    arena: PointArena
    points: List[int] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    triangles: List[Triangle] = field(default_factory=list)

    @classmethod
    def from_points(cls, points) -> 'GeometryState':
        arena = PointArena.from_points(points)
        return cls(arena=arena, points=arena.ids())

    def set_points(self, point_ids: Sequence[int]) -> None:
        """Replace the working set and discard every output built from the old one."""
        self.arena.check_ids(point_ids)
        self.points = list(point_ids)
        self.reset_outputs()

    def add_point(self, x, y) -> int:
        """Append a point to the working set (ignored if already present)."""
        idx = self.arena.add(x, y)
        if idx not in self.points:
            self.points.append(idx)
            self.reset_outputs()
        return idx

    def reset_outputs(self) -> None:
        self.edges = []
        self.triangles = []

    def check_integrity(self) -> None:
        """
        Verify every edge and triangle references stored points.

        :raises ValueError: If an output references an unknown index or a
            triangle repeats a vertex.
        """
        self.arena.check_ids(self.points)
        for edge in self.edges:
            self.arena.check_ids(edge)
        for tri in self.triangles:
            self.arena.check_ids(tri)
            if len(set(tri)) != 3:
                raise ValueError(f"Triangle {tri} repeats a vertex")

    def edge_coords(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        return [(self.arena[a], self.arena[b]) for a, b in self.edges]

    def triangle_coords(self) -> List[Tuple[Tuple[int, int], ...]]:
        return [tuple(self.arena[i] for i in tri) for tri in self.triangles]

    # Operations. Imports are local because the algorithm modules import
    # this one.

    def run_hull(self) -> List[Edge]:
        from .hull import build_hull
        self.reset_outputs()
        self.edges = build_hull(self.arena, self.points)
        return self.edges

    def run_peel(self, membership: str = 'line'):
        from ..peeling.onion import peel
        self.reset_outputs()
        result = peel(self.arena, self.points, membership=membership)
        self.edges = [e for layer in result.layers for e in layer]
        return result

    def run_cluster_peel(self, k: int, remainder: str = 'keep', membership: str = 'line'):
        from ..peeling.clusters import cluster_peel
        self.reset_outputs()
        result = cluster_peel(self.arena, k, self.points,
                              remainder=remainder, membership=membership)
        self.edges = [e for p in result.peels for layer in p.layers for e in layer]
        return result

    def run_triangulation(self, center=None, clean: bool = True) -> int:
        """
        Triangulate the working set, optionally followed by one cleanup pass.

        :return: Number of flips performed by the cleanup (0 if skipped).
        :rtype: int
        """
        from ..triangulation.trisection import triangulate
        from ..triangulation.cleanup import cleanup
        self.reset_outputs()
        triangles = triangulate(self.arena, self.points, center=center)
        flips = 0
        if clean:
            triangles, flips = cleanup(self.arena, triangles)
        self.triangles = triangles
        self.check_integrity()
        return flips
