# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Plain-text point files and result export.

Point files hold one point per row, X then Y, separated by whitespace or
(for .csv files) commas. Results are written as coordinate rows so they
can be plotted or diffed without this package.
"""

import numpy as np
from typing import Optional, Sequence
import os

from ..geometry.arena import Edge, PointArena, Triangle


def rows_to_points(rows: Sequence[Sequence], x_col: int = 0, y_col: int = 1) -> np.ndarray:
    """
    Convert spreadsheet or text rows to integer points.

    Rows whose X or Y cell is empty are skipped.

    :param rows: Sequence of rows (lists of cell values).
    :type rows: Sequence[Sequence]
    :param x_col: Column index of X.
    :type x_col: int
    :param y_col: Column index of Y.
    :type y_col: int
    :return: (N, 2) int64 array.
    :rtype: np.ndarray
    :raises ValueError: If a coordinate is not an integer value.
    """
    points = []
    for row_idx, row in enumerate(rows):
        if max(x_col, y_col) >= len(row):
            continue
        x, y = row[x_col], row[y_col]
        if x in ('', None) or y in ('', None):
            continue
        fx, fy = float(x), float(y)
        if not (fx.is_integer() and fy.is_integer()):
            raise ValueError(f"Row {row_idx}: coordinates ({x}, {y}) are not integers")
        points.append((int(fx), int(fy)))
    return np.array(points, dtype=np.int64).reshape(-1, 2)


def load_points_text(path: str, delimiter: Optional[str] = None,
                     skip_header: bool = False) -> np.ndarray:
    """
    Load integer points from a text or CSV file.

    :param path: File path.
    :type path: str
    :param delimiter: Column separator; defaults to ',' for .csv files and
        whitespace otherwise.
    :type delimiter: Optional[str]
    :param skip_header: If True, the first line is skipped.
    :type skip_header: bool
    :return: (N, 2) int64 array.
    :rtype: np.ndarray
    :raises FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Point file not found: {path}")
    if delimiter is None and path.lower().endswith('.csv'):
        delimiter = ','

    data = np.loadtxt(path, delimiter=delimiter, skiprows=1 if skip_header else 0,
                      ndmin=2, comments='#')
    if data.size == 0:
        return np.zeros((0, 2), dtype=np.int64)
    return rows_to_points(data.tolist())


def save_edges(path: str, arena: PointArena, edges: Sequence[Edge]) -> None:
    """
    Write edges as 'x1 y1 x2 y2' rows.

    :param path: Output file path.
    :type path: str
    :param arena: Point store the edges index into.
    :type arena: PointArena
    :param edges: Edges to write.
    :type edges: Sequence[Edge]
    """
    rows = np.array([arena[a] + arena[b] for a, b in edges], dtype=np.int64).reshape(-1, 4)
    _ensure_parent(path)
    np.savetxt(path, rows, fmt='%d', header='x1 y1 x2 y2')


def save_triangles(path: str, arena: PointArena, triangles: Sequence[Triangle]) -> None:
    """Write triangles as 'x1 y1 x2 y2 x3 y3' rows."""
    rows = np.array([arena[a] + arena[b] + arena[c] for a, b, c in triangles],
                    dtype=np.int64).reshape(-1, 6)
    _ensure_parent(path)
    np.savetxt(path, rows, fmt='%d', header='x1 y1 x2 y2 x3 y3')


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
