# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Utility functions and helpers.

Scene defaults, point-set generators and console reporting used by the
driver scripts.
"""

import numpy as np
from typing import Optional, Tuple


# Scene defaults (the drawing area the point sets live in)
SCENE_WIDTH = 1000
SCENE_HEIGHT = 800
SCENE_MARGIN = 10  # points stay inside [1, size - 9)

DEFAULT_POINT_COUNT = 100
DEFAULT_TRIANGULATION_POINTS = 10
DEFAULT_CLUSTER_COUNT = 5
LATTICE_SIZE = 10
LATTICE_SPACING = 10
LATTICE_ORIGIN = (100, 100)


def get_scene_center(width: int = SCENE_WIDTH, height: int = SCENE_HEIGHT) -> Tuple[int, int]:
    """
    Integer centre of the scene, the default reference for the triangulation seed.

    :rtype: Tuple[int, int]
    """
    return width // 2, height // 2


def admissible_point_count(width: int = SCENE_WIDTH, height: int = SCENE_HEIGHT) -> int:
    """Number of distinct coordinates random points can take in the scene."""
    return max(width - SCENE_MARGIN, 0) * max(height - SCENE_MARGIN, 0)


def generate_random_points(n: int, width: int = SCENE_WIDTH, height: int = SCENE_HEIGHT,
                           seed: Optional[int] = None) -> np.ndarray:
    """
    Draw n distinct random points inside the scene.

    Coordinates satisfy 1 <= x < width - 9 and 1 <= y < height - 9.

    :param n: Number of points.
    :type n: int
    :param width: Scene width.
    :type width: int
    :param height: Scene height.
    :type height: int
    :param seed: Random seed for reproducibility.
    :type seed: Optional[int]
    :return: (n, 2) int64 array.
    :rtype: np.ndarray
    :raises ValueError: If n is negative or exceeds the admissible coordinates.
    """
    total = admissible_point_count(width, height)
    if n < 0 or n > total:
        raise ValueError(f"No more than {total} points allowed at scene size {width}x{height}, got {n}")

    rng = np.random.default_rng(seed)
    flat = rng.choice(total, size=n, replace=False)
    rows = height - SCENE_MARGIN
    xs = 1 + flat // rows
    ys = 1 + flat % rows
    return np.column_stack([xs, ys]).astype(np.int64)


def generate_lattice(n: int = LATTICE_SIZE, spacing: int = LATTICE_SPACING,
                     origin: Tuple[int, int] = LATTICE_ORIGIN) -> np.ndarray:
    """
    n x n lattice of points, column by column.

    :return: (n*n, 2) int64 array.
    :rtype: np.ndarray
    """
    i, j = np.meshgrid(np.arange(n), np.arange(n), indexing='ij')
    xs = origin[0] + i.ravel() * spacing
    ys = origin[1] + j.ravel() * spacing
    return np.column_stack([xs, ys]).astype(np.int64)


def ensure_dir_exists(path: str) -> None:
    """
    Ensure directory exists, create if necessary.

    :param path: Directory path.
    :type path: str
    """
    import os
    os.makedirs(path, exist_ok=True)


def generate_random_colors(n: int, seed: Optional[int] = None) -> list:
    """
    Generate n distinct random colors.

    :param n: Number of colors to generate.
    :type n: int
    :param seed: Random seed for reproducibility.
    :type seed: Optional[int]
    :return: List of RGBA tuples.
    :rtype: list
    """
    import matplotlib.pyplot as plt
    import random

    cmap = plt.get_cmap('gist_ncar', max(n, 1))
    colors = [cmap(i / max(n, 1)) for i in range(n)]

    if seed is not None:
        random.seed(seed)
    random.shuffle(colors)

    return colors


def print_progress(current: int, total: int, prefix: str = 'Progress') -> None:
    """
    Print a simple progress indicator.

    :param current: Current iteration (0-based or 1-based).
    :type current: int
    :param total: Total number of iterations.
    :type total: int
    :param prefix: Prefix text for progress message.
    :type prefix: str
    """
    percentage = (current / total) * 100 if total > 0 else 0
    print(f"{prefix}: {current}/{total} ({percentage:.1f}%)")


def print_summary(label: str, **counts) -> None:
    """
    Print one summary line of named counts, e.g.
    ``Peel: points=100, edges=12``.
    """
    body = ', '.join(f"{name}={value}" for name, value in counts.items())
    print(f"{label}: {body}")
