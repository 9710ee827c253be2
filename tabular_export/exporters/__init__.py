from .base_exporter import BaseExporter
from .csv_exporter import CsvExporter
from .excel_exporter import ExcelExporter
from .json_exporter import JsonExporter

__all__ = [
    'BaseExporter',
    'CsvExporter',
    'ExcelExporter',
    'JsonExporter',
]
