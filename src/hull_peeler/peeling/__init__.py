# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Peeling module: onion peeling and cluster-local peeling."""

from .onion import (
    MEMBERSHIP_MODES,
    PeelResult,
    on_edges_mask,
    peel
)

from .clusters import (
    REMAINDER_POLICIES,
    ClusterPeelResult,
    grow_cluster,
    cluster_peel
)

__all__ = [
    # Onion
    'MEMBERSHIP_MODES',
    'PeelResult',
    'on_edges_mask',
    'peel',
    # Clusters
    'REMAINDER_POLICIES',
    'ClusterPeelResult',
    'grow_cluster',
    'cluster_peel',
]
