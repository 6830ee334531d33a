# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import pytest

from hull_peeler.utils import (
    admissible_point_count,
    generate_lattice,
    generate_random_colors,
    generate_random_points,
    get_scene_center,
    print_progress,
    print_summary,
)

"""Tests for scene defaults, point generators and console reporting."""


def test_random_points_are_distinct_and_inside_the_scene():
    pts = generate_random_points(300, width=200, height=150, seed=1)

    assert pts.shape == (300, 2)
    assert len({tuple(p) for p in pts.tolist()}) == 300
    assert pts[:, 0].min() >= 1 and pts[:, 0].max() < 200 - 9
    assert pts[:, 1].min() >= 1 and pts[:, 1].max() < 150 - 9


def test_random_points_are_reproducible_with_a_seed():
    first = generate_random_points(50, seed=42)
    second = generate_random_points(50, seed=42)
    assert np.array_equal(first, second)


def test_tiny_scene_can_be_filled_exactly():
    pts = generate_random_points(4, width=12, height=12, seed=0)
    assert {tuple(p) for p in pts.tolist()} == {(1, 1), (1, 2), (2, 1), (2, 2)}


def test_too_many_points_are_rejected():
    assert admissible_point_count(20, 20) == 100
    with pytest.raises(ValueError):
        generate_random_points(101, width=20, height=20)
    with pytest.raises(ValueError):
        generate_random_points(-1)


def test_zero_points():
    assert generate_random_points(0, seed=3).shape == (0, 2)


def test_lattice_is_generated_column_by_column():
    pts = generate_lattice(3, spacing=5, origin=(0, 0))

    assert pts.shape == (9, 2)
    assert pts[:4].tolist() == [[0, 0], [0, 5], [0, 10], [5, 0]]
    assert pts[-1].tolist() == [10, 10]


def test_default_lattice():
    pts = generate_lattice()
    assert pts.shape == (100, 2)
    assert pts.min(axis=0).tolist() == [100, 100]
    assert pts.max(axis=0).tolist() == [190, 190]


def test_scene_center():
    assert get_scene_center() == (500, 400)
    assert get_scene_center(11, 7) == (5, 3)


def test_random_colors_are_reproducible():
    assert len(generate_random_colors(4, seed=0)) == 4
    assert generate_random_colors(6, seed=5) == generate_random_colors(6, seed=5)


def test_console_reporting(capsys):
    print_summary('Peel', points=5, edges=4)
    print_progress(1, 4, prefix='Clusters')

    out = capsys.readouterr().out.splitlines()
    assert out == ['Peel: points=5, edges=4', 'Clusters: 1/4 (25.0%)']
