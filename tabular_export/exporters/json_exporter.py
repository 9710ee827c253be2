import json
import logging
from typing import Any, List, Optional

from ..config.models import JsonOptions
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class JsonExporter(BaseExporter):
    """Writes the grid as a pretty-printed array of arrays, replacing any existing file."""

    EXTENSION = '.json'

    def __init__(self, options: Optional[JsonOptions] = None):
        self.options = options or JsonOptions()

    def write(self, grid: List[List[Any]], path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            # Decimal and date values from database rows are written as strings.
            json.dump(grid, f, indent=self.options.indent, ensure_ascii=self.options.ensure_ascii, default=str)
