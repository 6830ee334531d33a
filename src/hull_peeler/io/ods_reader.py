# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
ODS (OpenDocument Spreadsheet) point-set reading utilities.

Columns are selected by header name, so sheets exported with extra
columns can be read as long as they carry X and Y headers.
"""

import ezodf
import numpy as np
from typing import List
import os

from .text_reader import rows_to_points


def load_ods(ods_path: str) -> ezodf.document.PackagedDocument:
    """
    Open an ODS file.

    :param ods_path: Path to the .ods file.
    :type ods_path: str
    :return: Opened ODS document.
    :rtype: ezodf.document.PackagedDocument
    :raises FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(ods_path):
        raise FileNotFoundError(f"ODS file not found: {ods_path}")
    return ezodf.opendoc(ods_path)


def header_index(headers: List, column_name: str) -> int:
    """
    Position of a column in a header row.

    :raises ValueError: If column name not found in header.
    """
    if column_name not in headers:
        raise ValueError(f"Column '{column_name}' not found. Available: {headers}")
    return headers.index(column_name)


def extract_column_data(doc: ezodf.document.PackagedDocument,
                        sheet_index: int,
                        column_name: str) -> List:
    """
    Extract data from a specific column in an ODS sheet.

    :param doc: Opened ODS document.
    :type doc: ezodf.document.PackagedDocument
    :param sheet_index: Index of the sheet to read (0-based).
    :type sheet_index: int
    :param column_name: Name of the column to extract (must match header).
    :type column_name: str
    :return: List of values from the specified column; empty cells are skipped.
    :rtype: List
    :raises ValueError: If the sheet is empty or the column is missing.
    """
    sheet = doc.sheets[sheet_index]
    rows = list(sheet.rows())
    if not rows:
        raise ValueError(f"Sheet {sheet_index} is empty")

    column_index = header_index([cell.value for cell in rows[0]], column_name)

    data = []
    for row in rows[1:]:
        if column_index < len(row) and row[column_index].value is not None:
            data.append(row[column_index].value)
    return data


def extract_points_ods(doc: ezodf.document.PackagedDocument,
                       sheet_index: int = 0,
                       x_column: str = 'x',
                       y_column: str = 'y') -> np.ndarray:
    """
    Extract a point set from two named columns of an ODS sheet.

    :param doc: Opened ODS document.
    :type doc: ezodf.document.PackagedDocument
    :param sheet_index: Index of the sheet to read (default 0).
    :type sheet_index: int
    :param x_column: Header of the X column.
    :type x_column: str
    :param y_column: Header of the Y column.
    :type y_column: str
    :return: (N, 2) int64 array of points.
    :rtype: np.ndarray
    """
    xs = extract_column_data(doc, sheet_index, x_column)
    ys = extract_column_data(doc, sheet_index, y_column)
    if len(xs) != len(ys):
        raise ValueError(f"Columns '{x_column}' and '{y_column}' differ in length ({len(xs)} vs {len(ys)})")
    return rows_to_points(list(zip(xs, ys)))
