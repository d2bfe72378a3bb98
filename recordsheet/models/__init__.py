"""
Models package for the record-to-table export.

Every model is built once per export call and never shared between calls.
"""
from .column import ColumnDescriptor
from .cell import CellValue
from .table import TableDescriptor
from .pivot import PivotSettings, PivotDescriptor, PivotField
from .result import ExportResult

__all__ = [
    'ColumnDescriptor',
    'CellValue',
    'TableDescriptor',
    'PivotSettings',
    'PivotDescriptor',
    'PivotField',
    'ExportResult',
]
