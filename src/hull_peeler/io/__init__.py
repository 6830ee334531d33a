# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""I/O module for point sets and results."""

from .text_reader import (
    rows_to_points,
    load_points_text,
    save_edges,
    save_triangles
)

from .xls_reader import (
    load_workbook,
    extract_points,
    read_all_point_sets,
    get_sheet_count
)

from .ods_reader import (
    load_ods,
    header_index,
    extract_column_data,
    extract_points_ods
)

__all__ = [
    'rows_to_points',
    'load_points_text',
    'save_edges',
    'save_triangles',
    'load_workbook',
    'extract_points',
    'read_all_point_sets',
    'get_sheet_count',
    'load_ods',
    'header_index',
    'extract_column_data',
    'extract_points_ods',
]
