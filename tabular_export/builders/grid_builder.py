import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from .. import __version__
from ..config.models import CsvOptions, ExcelOptions, JsonOptions
from ..exporters.csv_exporter import CsvExporter
from ..exporters.excel_exporter import ExcelExporter
from ..exporters.json_exporter import JsonExporter
from ..utils.text import decode_html_row

logger = logging.getLogger(__name__)


class GridBuilder:
    """
    Accumulates rows in memory and assembles them into the grid handed to the exporters.

    Rows are stored sparsely by integer position, so removing a row leaves a gap
    instead of shifting the rows after it. Header, footer, index list and merge
    regions are configuration: they survive reset() and every export call.
    """

    def __init__(self):
        self._rows: Dict[int, List[Any]] = {}
        self._header: List[List[Any]] = []
        self._footer: List[List[Any]] = []
        self._index_list: List[Any] = []
        self._merge_regions: List[str] = []

    def __len__(self) -> int:
        return len(self._rows)

    @staticmethod
    def version() -> str:
        return __version__

    # --- Row Mutation ---

    def _next_position(self) -> int:
        return max(self._rows, default=-1) + 1

    def add_row(self, row: Iterable[Any]) -> None:
        """
        Stores a row at the position after the current maximum (0 when empty).

        The position of a removed highest row is reused: remove_row(k) after a new
        add_row() deletes the new row.
        """
        position = self._next_position()
        self._rows[position] = list(row)
        logger.debug(f"Added row at position {position}")

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        for row in rows:
            self.add_row(row)

    def set_row(self, position: int, row: Iterable[Any]) -> None:
        """Overwrites the row at position, creating it if absent. No bounds checking."""
        self._rows[position] = list(row)
        logger.debug(f"Set row at position {position}")

    def set_rows(self, positions: Iterable[int], row: Iterable[Any]) -> None:
        """
        Broadcast overwrite: every position receives the same row value.

        This is not a per-position assignment. Callers needing a distinct row per
        position must call set_row() once per position.
        """
        row = list(row)
        positions = list(positions)
        for position in positions:
            self._rows[position] = row
        logger.debug(f"Broadcast row to positions {positions}")

    def load_from_records(self, records: Iterable[Any]) -> None:
        """
        Replaces all data rows with one row per record, keeping field order.

        Mappings (dicts, DB rows exposing keys) contribute their values, any other
        record is iterated directly. Header, footer, index list and merge regions
        are left untouched.
        """
        self._rows = {}
        for record in records:
            values = record.values() if isinstance(record, Mapping) else record
            self.add_row(values)
        logger.debug(f"Loaded {len(self._rows)} rows from records")

    def remove_row(self, position: int) -> None:
        """Deletes the row at position; an absent position is ignored."""
        if self._rows.pop(position, None) is not None:
            logger.debug(f"Removed row at position {position}")

    def remove_rows(self, positions: Iterable[int]) -> None:
        for position in positions:
            self.remove_row(position)

    def reset(self) -> None:
        """Clears the data rows only."""
        self._rows = {}
        logger.debug("Data rows cleared")

    # --- Accessors ---

    def get_data(self) -> Dict[int, List[Any]]:
        """Returns a copy of the position -> row mapping, gaps included."""
        return dict(self._rows)

    def get_index_list(self) -> List[Any]:
        return list(self._index_list)

    def set_index_list(self, index_list: Iterable[Any]) -> None:
        self._index_list = list(index_list)

    def get_header(self) -> List[List[Any]]:
        return [list(row) for row in self._header]

    def set_header(self, rows: Iterable[Iterable[Any]]) -> None:
        self._header = [list(row) for row in rows]

    def get_footer(self) -> List[List[Any]]:
        return [list(row) for row in self._footer]

    def set_footer(self, rows: Iterable[Iterable[Any]]) -> None:
        self._footer = [list(row) for row in rows]

    def get_merge_regions(self) -> List[str]:
        return list(self._merge_regions)

    def set_merge_regions(self, regions: Iterable[str]) -> None:
        self._merge_regions = list(regions)

    # --- Assembly ---

    def assemble(self, include_index_start: bool = False, include_index_end: bool = False) -> List[List[Any]]:
        """
        Builds the final grid:
            decoded header rows,
            the index row (if include_index_start),
            surviving data rows in insertion order,
            the index row again (if include_index_end),
            decoded footer rows.

        Every call returns fresh row lists, so callers may modify the result freely.
        """
        grid: List[List[Any]] = [decode_html_row(row) for row in self._header]

        if include_index_start:
            grid.append(list(self._index_list))

        # Overwriting a position keeps its original place, removed positions are skipped.
        grid.extend(list(row) for row in self._rows.values())

        if include_index_end:
            grid.append(list(self._index_list))

        grid.extend(decode_html_row(row) for row in self._footer)
        return grid

    # --- Export Shortcuts ---

    def export_csv(
        self,
        filename: str,
        directory: Optional[str] = None,
        include_index_start: bool = False,
        include_index_end: bool = False,
        options: Optional[CsvOptions] = None,
    ) -> str:
        exporter = CsvExporter(options)
        return exporter.export(self.assemble(include_index_start, include_index_end), filename, directory)

    def export_excel(
        self,
        filename: str,
        directory: Optional[str] = None,
        include_index_start: bool = False,
        include_index_end: bool = False,
        options: Optional[ExcelOptions] = None,
    ) -> str:
        exporter = ExcelExporter(options, merge_regions=self._merge_regions)
        return exporter.export(self.assemble(include_index_start, include_index_end), filename, directory)

    def export_json(
        self,
        filename: str,
        directory: Optional[str] = None,
        include_index_start: bool = False,
        include_index_end: bool = False,
        options: Optional[JsonOptions] = None,
    ) -> str:
        exporter = JsonExporter(options)
        return exporter.export(self.assemble(include_index_start, include_index_end), filename, directory)
