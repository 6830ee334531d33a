# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Edge-flip cleanup of a triangulation.

Two triangles sharing an edge form a quadrilateral with two diagonals. If
the quadrilateral is strictly convex and the other diagonal is shorter, the
pair is replaced by the two triangles on the shorter diagonal. One pass is
made over all pairs; the result is not iterated to a fixed point.
"""

from typing import List, Optional, Sequence, Tuple

from ..geometry.arena import PointArena, Triangle
from ..geometry.predicates import signed_score, squared_distance, strictly_opposite


def shared_diagonal(t1: Triangle, t2: Triangle) -> Optional[Tuple[int, int, int, int]]:
    """
    Shared edge and apexes of two triangles.

    :param t1: First triangle.
    :type t1: Triangle
    :param t2: Second triangle.
    :type t2: Triangle
    :return: (s1, s2, a, b) with s1, s2 the shared vertices in t1's order,
        a the apex of t1 and b the apex of t2; None unless exactly two
        vertices are shared.
    :rtype: Optional[Tuple[int, int, int, int]]
    """
    shared = set(t1) & set(t2)
    if len(shared) != 2:
        return None
    s1, s2 = (v for v in t1 if v in shared)
    (a,) = set(t1) - shared
    (b,) = set(t2) - shared
    return s1, s2, a, b


def is_convex_flip(arena: PointArena, s1: int, s2: int, a: int, b: int) -> bool:
    """
    True when diagonal s1-s2 may be replaced by a-b.

    Both diagonals must cross strictly: s1 and s2 on opposite sides of line
    a-b, and a and b on opposite sides of line s1-s2.
    """
    ps1, ps2, pa, pb = arena[s1], arena[s2], arena[a], arena[b]
    if not strictly_opposite(signed_score(pa, pb, ps1), signed_score(pa, pb, ps2)):
        return False
    return strictly_opposite(signed_score(ps1, ps2, pa), signed_score(ps1, ps2, pb))


def try_flip(arena: PointArena, t1: Triangle,
             t2: Triangle) -> Optional[Tuple[Triangle, Triangle]]:
    """
    Flipped replacement for an adjacent pair, if the flip shortens the diagonal.

    :return: New (t1, t2) sharing diagonal a-b, or None when the pair is not
        adjacent, not convex, or the new diagonal is not strictly shorter.
    :rtype: Optional[Tuple[Triangle, Triangle]]
    """
    found = shared_diagonal(t1, t2)
    if found is None:
        return None
    s1, s2, a, b = found
    if not is_convex_flip(arena, s1, s2, a, b):
        return None
    if squared_distance(arena[a], arena[b]) >= squared_distance(arena[s1], arena[s2]):
        return None
    return (s1, a, b), (s2, a, b)


def cleanup(arena: PointArena, triangles: Sequence[Triangle]) -> Tuple[List[Triangle], int]:
    """
    One edge-flip pass over every unordered pair of triangles.

    Pairs are visited as (i, j) with i < j; a flip replaces both triangles
    in place, so later pairs see the flipped triangles.

    :param arena: Point store.
    :type arena: PointArena
    :param triangles: Triangles to clean up (not modified).
    :type triangles: Sequence[Triangle]
    :return: Tuple of (updated triangles, number of flips).
    :rtype: Tuple[List[Triangle], int]
    """
    tris = [tuple(t) for t in triangles]
    flips = 0

    for i in range(len(tris)):
        for j in range(i + 1, len(tris)):
            flipped = try_flip(arena, tris[i], tris[j])
            if flipped is not None:
                tris[i], tris[j] = flipped
                flips += 1

    return tris, flips
