__version__ = '2025.01.16'

from .builders import GridBuilder
from .exporters import CsvExporter, ExcelExporter, JsonExporter
from .config import CsvOptions, ExcelOptions, JsonOptions, ExportConfigLoader

__all__ = [
    'GridBuilder',
    'CsvExporter',
    'ExcelExporter',
    'JsonExporter',
    'CsvOptions',
    'ExcelOptions',
    'JsonOptions',
    'ExportConfigLoader',
]
