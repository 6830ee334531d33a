# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import matplotlib.pyplot as plt
import pytest

from hull_peeler.geometry import PointArena, build_hull
from hull_peeler.peeling import cluster_peel, peel
from hull_peeler.triangulation import cleanup, triangulate
from hull_peeler.visualization import plot_clusters, plot_edges, plot_peel_layers, plot_triangles

"""Figure tests.

The first group writes every figure type to tmp_path with a non-interactive
backend and only checks that a non-empty PNG appears. The tests marked
@pytest.mark.interactive show a deterministic figure and ask the user to
confirm it; they are deselected by default.
Run them with: pytest -m interactive
"""


def random_arena(n=60, seed=0):
    rng = np.random.default_rng(seed)
    return PointArena.from_points(rng.integers(0, 500, size=(n, 2)))


def assert_png(path):
    assert path.exists()
    assert path.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'


@pytest.fixture(autouse=True)
def agg_backend(request):
    if 'interactive' not in request.keywords:
        plt.switch_backend('Agg')
    yield
    plt.close('all')


def test_plot_edges_writes_png(tmp_path):
    arena = random_arena()
    out = tmp_path / 'hull.png'
    plot_edges(arena, build_hull(arena), str(out))
    assert_png(out)


def test_plot_edges_without_edges(tmp_path):
    arena = PointArena.from_points([(0, 0), (5, 5)])
    out = tmp_path / 'points.png'
    plot_edges(arena, [], str(out))
    assert_png(out)


def test_plot_peel_layers_writes_png(tmp_path):
    arena = random_arena()
    out = tmp_path / 'nested' / 'peel.png'
    plot_peel_layers(arena, peel(arena).layers, str(out))
    assert_png(out)


def test_plot_clusters_writes_png(tmp_path):
    arena = random_arena(seed=1)
    result = cluster_peel(arena, 4)
    out = tmp_path / 'clusters.png'
    plot_clusters(arena, result.clusters, [p.layers for p in result.peels], str(out), seed=0)
    assert_png(out)


def test_plot_triangles_writes_png(tmp_path):
    arena = random_arena(seed=2)
    triangles, _ = cleanup(arena, triangulate(arena))
    out = tmp_path / 'triangles.png'
    plot_triangles(arena, triangles, str(out))
    assert_png(out)


@pytest.mark.interactive
def test_interactive_peel_layers():
    # three nested squares around a centre point
    pts = [(c + dx, c + dy) for c in (0, 10, 20) for dx, dy in
           [(0, 0), (60 - 2 * c, 0), (60 - 2 * c, 60 - 2 * c), (0, 60 - 2 * c)]]
    arena = PointArena.from_points(pts + [(30, 30)])
    layers = peel(arena).layers

    fig, ax = plt.subplots()
    coords = arena.as_array()
    ax.scatter(coords[:, 0], coords[:, 1], c="black", s=20)
    cmap = plt.get_cmap("viridis", max(len(layers), 1))
    for depth, layer in enumerate(layers):
        for a, b in layer:
            ax.plot([arena[a][0], arena[b][0]], [arena[a][1], arena[b][1]], color=cmap(depth))
    ax.set_aspect("equal", adjustable="box")
    ax.set_title("Interactive check: three nested hull layers")

    plt.tight_layout()
    plt.show(block=True)

    answer = input("Do you see three nested squares with the centre point left over? [y/N]: ").strip().lower()
    assert answer == "y"


@pytest.mark.interactive
def test_interactive_triangulation_wireframe():
    arena = PointArena.from_points([(0, 2), (2, 0), (5, 0), (7, 2), (5, 4), (2, 4), (3, 2)])
    triangles = triangulate(arena)

    fig, ax = plt.subplots()
    for t in triangles:
        xy = np.array(arena.coords(t + (t[0],)))
        ax.plot(xy[:, 0], xy[:, 1], color="tab:blue", linewidth=1.0)
    coords = arena.as_array()
    ax.scatter(coords[:, 0], coords[:, 1], c="black", s=30, zorder=3)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title("Interactive check: hexagon fan triangulation")

    plt.tight_layout()
    plt.show(block=True)

    answer = input(
        "Is the hexagon split into six triangles meeting at the inner point? [y/N]: "
    ).strip().lower()
    assert answer == "y"
