from .models import CsvOptions, ExcelOptions, JsonOptions, ExportProfile
from .config_loader import ExportConfigLoader

__all__ = [
    'CsvOptions',
    'ExcelOptions',
    'JsonOptions',
    'ExportProfile',
    'ExportConfigLoader',
]
