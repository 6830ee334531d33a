# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Hull Peeler Package

Convex hulls, hull peeling and trisection triangulation over integer 2D
point sets.

Modules:
--------
- geometry: Point arena, exact predicates, QuickHull and result checks
- peeling: Onion peeling and cluster-local peeling
- triangulation: Trisection triangulation and edge-flip cleanup
- io: Point files (text, XLS, ODS) and result export
- visualization: Figure export
- utils: Scene defaults, point generators and console reporting

Example Usage:
--------------
    import hull_peeler as hp

    arena = hp.geometry.PointArena.from_points([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    edges = hp.geometry.build_hull(arena)

    result = hp.peeling.peel(arena)
    print(result.remaining, result.edge_count)

    triangles = hp.triangulation.triangulate(arena, center=(2, 2))
    triangles, flips = hp.triangulation.cleanup(arena, triangles)
"""

__version__ = '0.1.0'
__author__ = 'Hull Peeler Team'

from . import geometry
from . import peeling
from . import triangulation
from . import io
from . import visualization
from . import utils

__all__ = [
    'geometry',
    'peeling',
    'triangulation',
    'io',
    'visualization',
    'utils',
]
