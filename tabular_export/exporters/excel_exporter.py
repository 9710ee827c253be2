import logging
from typing import Any, Iterable, List, Optional

import openpyxl

from ..config.models import ExcelOptions
from ..utils.excel_operations import apply_merge_regions, set_default_font_size, write_rows
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class ExcelExporter(BaseExporter):
    """
    Writes the grid to a single-sheet .xlsx workbook.

    Every merge region is applied after the rows are written and the workbook
    default font size is taken from the options. Errors raised by openpyxl
    (e.g. an invalid merge range) propagate to the caller.
    """

    EXTENSION = '.xlsx'

    def __init__(self, options: Optional[ExcelOptions] = None, merge_regions: Optional[Iterable[str]] = None):
        self.options = options or ExcelOptions()
        self.merge_regions = list(merge_regions or [])

    def build_workbook(self, grid: List[List[Any]]) -> openpyxl.Workbook:
        workbook = openpyxl.Workbook()
        worksheet = workbook.active
        if self.options.sheet_title:
            worksheet.title = self.options.sheet_title

        set_default_font_size(workbook, self.options.font_size)
        rows_written = write_rows(worksheet, grid)
        logger.debug(f"Wrote {rows_written} rows to sheet '{worksheet.title}'")

        if self.merge_regions:
            apply_merge_regions(worksheet, self.merge_regions)
        return workbook

    def write(self, grid: List[List[Any]], path: str) -> None:
        workbook = self.build_workbook(grid)
        try:
            workbook.save(path)
        finally:
            workbook.close()
