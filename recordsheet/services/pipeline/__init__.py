"""
Record-to-table pipeline.

records -> SchemaReader -> RowProjector (CellEncoder + ColumnWidthEstimator)
-> TableBuilder -> PivotSpecBuilder (optional) -> ExportResult
"""
import logging

from ...models import ExportResult
from ...options import ExportOptions
from .encoder import CellEncoder
from .pivot import PivotSpecBuilder
from .projector import RowProjector
from .schema import SchemaReader
from .table import TableBuilder
from .widths import ColumnWidthEstimator

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Runs one export: a single forward pass over the records, then table and pivot resolution."""

    def __init__(self, options=None, encoder=None):
        self.options = options or ExportOptions()
        self.encoder = encoder or CellEncoder()

    def run(self, records, schema=None, pivot_settings=None):
        columns, records = SchemaReader.infer(records, schema)

        estimator = ColumnWidthEstimator(
            [c.name for c in columns], scale_factor=self.options.width_scale_factor)
        rows = RowProjector(self.encoder).project(records, columns, estimator)

        table = TableBuilder(
            name=self.options.table_name,
            display_name=self.options.table_display_name,
            table_id=self.options.table_id,
        ).build(columns, rows)

        pivot = None
        if pivot_settings is not None:
            pivot = PivotSpecBuilder.build(table, pivot_settings)

        logger.info(f"Built table {table.name} with {table.row_count} rows x {table.column_count} columns")
        return ExportResult(table, rows, estimator, pivot)


__all__ = [
    'CellEncoder',
    'ColumnWidthEstimator',
    'ExportPipeline',
    'PivotSpecBuilder',
    'RowProjector',
    'SchemaReader',
    'TableBuilder',
]
