# tabular_export/builders/__init__.py
from .grid_builder import GridBuilder

__all__ = [
    'GridBuilder',
]
