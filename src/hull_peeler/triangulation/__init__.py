# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Triangulation module: trisection triangulation and edge-flip cleanup."""

from .trisection import (
    bounding_box_center,
    select_seed,
    trisect,
    triangulate
)

from .cleanup import (
    shared_diagonal,
    is_convex_flip,
    try_flip,
    cleanup
)

__all__ = [
    # Trisection
    'bounding_box_center',
    'select_seed',
    'trisect',
    'triangulate',
    # Cleanup
    'shared_diagonal',
    'is_convex_flip',
    'try_flip',
    'cleanup',
]
