# This module contains low-level, generic Excel operations using openpyxl.
# They know nothing about grids or exporters and only touch a workbook or worksheet.

import logging
from copy import copy
from typing import Any, Iterable, List

import openpyxl
from openpyxl.utils.indexed_list import IndexedList
from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)


def write_rows(worksheet: Worksheet, rows: Iterable[List[Any]]) -> int:
    """
    Writes each row to the next worksheet row, starting at row 1.
    Values are written as-is; no formulas or styles are added.

    Returns:
        The number of rows written.
    """
    count = 0
    for row in rows:
        worksheet.append(list(row))
        count += 1
    return count


def apply_merge_regions(worksheet: Worksheet, regions: Iterable[str]) -> None:
    """
    Merges every range string (e.g. "A1:C1") on the worksheet.
    openpyxl raises ValueError for a malformed range; it is not caught here.
    """
    for region in regions:
        worksheet.merge_cells(region)
        logger.debug(f"Merged range {region} on sheet '{worksheet.title}'")


def set_default_font_size(workbook: openpyxl.Workbook, font_size: float) -> None:
    """
    Sets the workbook-wide default font size.

    Unstyled cells and the 'Normal' named style both point at font 0 of the
    stylesheet, so replacing that entry changes the document default.
    openpyxl has no public setter for this; it relies on Workbook._fonts being the
    IndexedList written out as the stylesheet fonts (openpyxl 3.1.x, pinned <4).
    """
    default_font = copy(workbook._fonts[0])
    default_font.size = font_size
    workbook._fonts = IndexedList([default_font])
    logger.debug(f"Default font size set to {font_size}")
