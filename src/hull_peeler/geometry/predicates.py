# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Exact integer predicates for lines, triangles and distances.

All functions work on integer coordinates and never round, except
truncated_distance which reproduces integer truncation of the Euclidean
distance on purpose.
"""

import math
import numpy as np
from typing import Sequence, Tuple


def line_coefficients(p1: Sequence[int], p2: Sequence[int]) -> Tuple[int, int, int]:
    """
    Implicit line through p1 and p2 as (a, b, c) with a*x + b*y + c = 0.

    The score a*x + b*y + c is positive for points left of the directed
    line p1 -> p2.

    :rtype: Tuple[int, int, int]
    """
    a = p1[1] - p2[1]
    b = p2[0] - p1[0]
    c = p1[0] * p2[1] - p1[1] * p2[0]
    return a, b, c


def signed_score(p1: Sequence[int], p2: Sequence[int], p: Sequence[int]) -> int:
    """Signed score of p against the directed line p1 -> p2."""
    a, b, c = line_coefficients(p1, p2)
    return a * p[0] + b * p[1] + c


def signed_scores(p1: Sequence[int], p2: Sequence[int], coords: np.ndarray) -> np.ndarray:
    """
    Vectorised signed_score for an (N, 2) int64 array.

    :param coords: (N, 2) array of coordinates.
    :type coords: np.ndarray
    :return: (N,) int64 array of scores.
    :rtype: np.ndarray
    """
    a, b, c = line_coefficients(p1, p2)
    return a * coords[:, 0] + b * coords[:, 1] + c


def same_sign(a: int, b: int) -> bool:
    """True when a and b are not strictly of opposite signs (zero matches both)."""
    return (a >= 0 and b >= 0) or (a <= 0 and b <= 0)


def strictly_opposite(a: int, b: int) -> bool:
    return (a > 0 and b < 0) or (a < 0 and b > 0)


def point_in_triangle(p: Sequence[int], t1: Sequence[int], t2: Sequence[int],
                      t3: Sequence[int]) -> bool:
    """
    Three-edge same-sign half-plane test.

    Points on the boundary (or anywhere on the line of a degenerate
    triangle) count as inside.
    """
    d1 = signed_score(t1, t2, p)
    d2 = signed_score(t2, t3, p)
    if strictly_opposite(d1, d2):
        return False
    d3 = signed_score(t3, t1, p)
    if strictly_opposite(d1, d3) or strictly_opposite(d2, d3):
        return False
    return True


def points_in_triangle(coords: np.ndarray, t1: Sequence[int], t2: Sequence[int],
                       t3: Sequence[int]) -> np.ndarray:
    """
    Vectorised point_in_triangle.

    :param coords: (N, 2) array of coordinates.
    :type coords: np.ndarray
    :return: (N,) boolean mask.
    :rtype: np.ndarray
    """
    d1 = signed_scores(t1, t2, coords)
    d2 = signed_scores(t2, t3, coords)
    d3 = signed_scores(t3, t1, coords)
    all_nonneg = (d1 >= 0) & (d2 >= 0) & (d3 >= 0)
    all_nonpos = (d1 <= 0) & (d2 <= 0) & (d3 <= 0)
    return all_nonneg | all_nonpos


def squared_distance(p: Sequence[int], q: Sequence[int]) -> int:
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    return dx * dx + dy * dy


def truncated_distance(p: Sequence[int], q: Sequence[int]) -> int:
    """Euclidean distance truncated to an integer, exact for any magnitude."""
    return math.isqrt(squared_distance(p, q))


def truncated_distances(seed: Sequence[int], coords: np.ndarray) -> np.ndarray:
    """
    Vectorised truncated_distance from one seed to many points.

    :param coords: (N, 2) array of coordinates.
    :type coords: np.ndarray
    :return: (N,) int64 array.
    :rtype: np.ndarray
    """
    diff = coords - np.asarray(seed, dtype=np.int64)
    d2 = np.einsum('ij,ij->i', diff, diff)
    r = np.floor(np.sqrt(d2.astype(float))).astype(np.int64)
    # correct the rare float rounding at perfect-square boundaries
    r[(r + 1) * (r + 1) <= d2] += 1
    r[r * r > d2] -= 1
    return r


def triangle_area2(t1: Sequence[int], t2: Sequence[int], t3: Sequence[int]) -> int:
    """Twice the signed area of a triangle (shoelace formula)."""
    return signed_score(t1, t2, t3)


def polygon_area2(vertices: Sequence[Sequence[int]]) -> int:
    """
    Twice the signed area of a simple polygon (shoelace formula).

    :param vertices: Ordered polygon vertices, not repeating the first.
    :return: Positive for counter-clockwise order.
    :rtype: int
    """
    total = 0
    n = len(vertices)
    for i in range(n):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total
