# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for helper functions and utilities."""

from .helpers import (
    SCENE_WIDTH,
    SCENE_HEIGHT,
    DEFAULT_POINT_COUNT,
    DEFAULT_TRIANGULATION_POINTS,
    DEFAULT_CLUSTER_COUNT,
    LATTICE_SIZE,
    LATTICE_SPACING,
    get_scene_center,
    admissible_point_count,
    generate_random_points,
    generate_lattice,
    ensure_dir_exists,
    generate_random_colors,
    print_progress,
    print_summary
)

__all__ = [
    'SCENE_WIDTH',
    'SCENE_HEIGHT',
    'DEFAULT_POINT_COUNT',
    'DEFAULT_TRIANGULATION_POINTS',
    'DEFAULT_CLUSTER_COUNT',
    'LATTICE_SIZE',
    'LATTICE_SPACING',
    'get_scene_center',
    'admissible_point_count',
    'generate_random_points',
    'generate_lattice',
    'ensure_dir_exists',
    'generate_random_colors',
    'print_progress',
    'print_summary',
]
