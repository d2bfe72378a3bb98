from .data_table import DataTableComponent
from .pivot_table import PivotTableComponent

__all__ = [
    'DataTableComponent',
    'PivotTableComponent',
]
