# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Figure export for hulls, peels, clusters and triangulations.

Every function draws onto a new figure, saves it to output_path and closes
it; nothing is shown interactively.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from typing import Optional, Sequence
import os

from ..geometry.arena import Edge, PointArena, Triangle
from ..utils.helpers import generate_random_colors


def _segments(arena: PointArena, edges: Sequence[Edge]) -> np.ndarray:
    coords = arena.as_array()
    if not edges:
        return np.zeros((0, 2, 2))
    idx = np.asarray(edges, dtype=np.int64)
    return coords[idx].astype(float)


def _save(fig, ax, title: str, output_path: str, dpi: int) -> None:
    ax.set_title(title)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_aspect('equal')

    # Ensure output directory exists
    os.makedirs(os.path.dirname(output_path) if os.path.dirname(output_path) else '.', exist_ok=True)

    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi)
    plt.close(fig)


def plot_edges(arena: PointArena, edges: Sequence[Edge], output_path: str,
               point_ids: Optional[Sequence[int]] = None,
               title: str = 'Convex hull',
               page_w: float = 6.3, page_h: float = 5.0, dpi: int = 150) -> None:
    """
    Plot points and a set of edges.

    :param arena: Point store.
    :type arena: PointArena
    :param edges: Edges to draw.
    :type edges: Sequence[Edge]
    :param output_path: Path to save the figure.
    :type output_path: str
    :param point_ids: Points to scatter (default: every arena point).
    :type point_ids: Optional[Sequence[int]]
    :param title: Plot title.
    :type title: str
    :param page_w: Figure width in inches.
    :type page_w: float
    :param page_h: Figure height in inches.
    :type page_h: float
    :param dpi: Figure DPI.
    :type dpi: int
    """
    fig, ax = plt.subplots(figsize=(page_w, page_h))
    pts = arena.as_array() if point_ids is None else arena.as_array()[list(point_ids)]
    if len(pts):
        ax.scatter(pts[:, 0], pts[:, 1], s=6, c='black', zorder=3)
    ax.add_collection(LineCollection(_segments(arena, edges), colors='tab:red', linewidths=1.2))
    ax.autoscale()
    _save(fig, ax, title, output_path, dpi)


def plot_peel_layers(arena: PointArena, layers: Sequence[Sequence[Edge]], output_path: str,
                     title: str = 'Hull peel',
                     page_w: float = 6.3, page_h: float = 5.0, dpi: int = 150) -> None:
    """
    Plot peel layers, outermost first, coloured along a sequential colormap.

    :param layers: Edge lists as in PeelResult.layers.
    :type layers: Sequence[Sequence[Edge]]
    """
    fig, ax = plt.subplots(figsize=(page_w, page_h))
    pts = arena.as_array()
    if len(pts):
        ax.scatter(pts[:, 0], pts[:, 1], s=4, c='gray', zorder=3)

    cmap = plt.get_cmap('viridis', max(len(layers), 1))
    for depth, layer in enumerate(layers):
        ax.add_collection(LineCollection(_segments(arena, layer), colors=[cmap(depth)], linewidths=1.0))

    ax.autoscale()
    _save(fig, ax, title, output_path, dpi)


def plot_clusters(arena: PointArena, clusters: Sequence[Sequence[int]],
                  cluster_layers: Sequence[Sequence[Sequence[Edge]]], output_path: str,
                  title: str = 'Cluster peel', seed: Optional[int] = None,
                  page_w: float = 6.3, page_h: float = 5.0, dpi: int = 150) -> None:
    """
    Plot every cluster's points and peel layers in its own colour.

    :param clusters: Point indices per cluster.
    :type clusters: Sequence[Sequence[int]]
    :param cluster_layers: Peel layers per cluster.
    :type cluster_layers: Sequence[Sequence[Sequence[Edge]]]
    :param seed: Colour shuffle seed.
    :type seed: Optional[int]
    """
    fig, ax = plt.subplots(figsize=(page_w, page_h))
    colors = generate_random_colors(len(clusters), seed=seed)
    coords = arena.as_array()

    for color, members, layers in zip(colors, clusters, cluster_layers):
        if members:
            pts = coords[list(members)]
            ax.scatter(pts[:, 0], pts[:, 1], s=6, color=color, zorder=3)
        for layer in layers:
            ax.add_collection(LineCollection(_segments(arena, layer), colors=[color], linewidths=1.0))

    ax.autoscale()
    _save(fig, ax, title, output_path, dpi)


def plot_triangles(arena: PointArena, triangles: Sequence[Triangle], output_path: str,
                   title: str = 'Triangulation',
                   page_w: float = 6.3, page_h: float = 5.0, dpi: int = 150) -> None:
    """
    Plot a triangulation as a wireframe.

    :param triangles: Triangles to draw.
    :type triangles: Sequence[Triangle]
    """
    fig, ax = plt.subplots(figsize=(page_w, page_h))
    edges = [(t[k], t[(k + 1) % 3]) for t in triangles for k in range(3)]
    ax.add_collection(LineCollection(_segments(arena, edges), colors='tab:blue', linewidths=0.8))

    pts = arena.as_array()
    if len(pts):
        ax.scatter(pts[:, 0], pts[:, 1], s=6, c='black', zorder=3)
    ax.autoscale()
    _save(fig, ax, title, output_path, dpi)
