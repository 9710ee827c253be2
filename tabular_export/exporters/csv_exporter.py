import csv
import logging
from typing import Any, List, Optional

from ..config.models import CsvOptions
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class CsvExporter(BaseExporter):
    """
    Writes the grid as delimited text, one line per row.

    Fields containing the delimiter, the quote character or a line break are quoted.
    An embedded quote character is doubled, or prefixed with escapechar when
    doublequote is off. With add_bom the file starts with the UTF-8 byte-order mark
    so spreadsheet applications detect the encoding.
    """

    EXTENSION = '.csv'

    def __init__(self, options: Optional[CsvOptions] = None):
        self.options = options or CsvOptions()

    def write(self, grid: List[List[Any]], path: str) -> None:
        opts = self.options
        encoding = 'utf-8-sig' if opts.add_bom else 'utf-8'
        writer_kwargs = dict(
            delimiter=opts.delimiter,
            quotechar=opts.quotechar,
            doublequote=opts.doublequote,
            lineterminator=opts.lineterminator,
            quoting=csv.QUOTE_MINIMAL,
        )
        # With doubling on, the csv module would also escape escapechar itself inside fields.
        if not opts.doublequote and opts.escapechar:
            writer_kwargs['escapechar'] = opts.escapechar

        with open(path, 'w', encoding=encoding, newline='') as f:
            writer = csv.writer(f, **writer_kwargs)
            writer.writerows(grid)
        logger.debug(f"CSV written with delimiter {opts.delimiter!r}, BOM={opts.add_bom}")
