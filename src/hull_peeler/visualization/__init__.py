# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Visualization module for saving result figures."""

from .plots import (
    plot_edges,
    plot_peel_layers,
    plot_clusters,
    plot_triangles
)

__all__ = [
    'plot_edges',
    'plot_peel_layers',
    'plot_clusters',
    'plot_triangles',
]
