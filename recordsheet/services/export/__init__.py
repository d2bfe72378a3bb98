"""
Export service package for generating Excel workbooks from records.

The data sheet holds a styled, filterable table of the records; when pivot
settings are supplied and the table has rows, a second sheet holds the
cross-tabulation and opens first.

Main entry points:
    ExportService.generate_xlsx(records, schema, pivot_settings)
    ExportService.write(stream, records, schema, pivot_settings)
"""

from .service import ExportService

__all__ = ['ExportService']
