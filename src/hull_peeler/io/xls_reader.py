# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
XLS/Excel point-set reading utilities.

Each sheet of a workbook holds one point set. By default column 0 is X and
column 1 is Y, and row 0 is a header.
"""

import xlrd
import numpy as np
from typing import List
import os

from .text_reader import rows_to_points


def load_workbook(xls_path: str) -> xlrd.book.Book:
    """
    Open an XLS workbook.

    :param xls_path: Path to the .xls file (can be absolute or relative).
    :type xls_path: str
    :return: Opened workbook.
    :rtype: xlrd.book.Book
    :raises FileNotFoundError: If the file does not exist.
    :raises xlrd.XLRDError: If the file cannot be opened.
    """
    if not os.path.exists(xls_path):
        raise FileNotFoundError(f"XLS file not found: {xls_path}")
    return xlrd.open_workbook(xls_path)


def extract_points(workbook: xlrd.book.Book, sheet_index: int = 0,
                   x_col: int = 0, y_col: int = 1,
                   skip_header: bool = True) -> np.ndarray:
    """
    Extract the point set stored in one sheet.

    :param workbook: Opened xlrd workbook.
    :type workbook: xlrd.book.Book
    :param sheet_index: Sheet index to read (0-based).
    :type sheet_index: int
    :param x_col: Column holding X coordinates.
    :type x_col: int
    :param y_col: Column holding Y coordinates.
    :type y_col: int
    :param skip_header: If True, row 0 is skipped.
    :type skip_header: bool
    :return: (N, 2) int64 array of points.
    :rtype: np.ndarray
    """
    sheet = workbook.sheet_by_index(sheet_index)
    start = 1 if skip_header else 0
    rows = [sheet.row_values(row_idx) for row_idx in range(start, sheet.nrows)]
    return rows_to_points(rows, x_col, y_col)


def read_all_point_sets(workbook: xlrd.book.Book, x_col: int = 0, y_col: int = 1,
                        skip_header: bool = True) -> List[np.ndarray]:
    """
    Read the point set of every sheet.

    :return: List of (N, 2) arrays, one per sheet.
    :rtype: List[np.ndarray]
    """
    return [
        extract_points(workbook, sheet_index, x_col, y_col, skip_header)
        for sheet_index in range(workbook.nsheets)
    ]


def get_sheet_count(workbook: xlrd.book.Book) -> int:
    return workbook.nsheets
