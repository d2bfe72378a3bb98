"""Resolution of human-named pivot settings against table columns."""
import logging

from ...models import PivotDescriptor

logger = logging.getLogger(__name__)


class PivotSpecBuilder:
    """Maps pivot row/column labels to table column indices."""

    @staticmethod
    def build(table, settings):
        """
        Resolves ``settings`` against ``table.columns``.

        Labels naming columns the table does not have are skipped, not
        reported as errors, so one settings object can serve datasets with
        differing columns. Only column metadata is read, so header-only
        tables resolve too.
        """
        index_by_name = {c.name: c.index for c in table.columns}

        row_field_indices = []
        for name in settings.row_labels:
            index = index_by_name.get(name)
            if index is None:
                logger.debug(f"Pivot row label '{name}' not in table {table.name}; skipped")
                continue
            row_field_indices.append(index)

        column_aggregations = []
        for name, function in settings.column_labels.items():
            index = index_by_name.get(name)
            if index is None:
                logger.debug(f"Pivot value label '{name}' not in table {table.name}; skipped")
                continue
            column_aggregations.append((index, function, name))

        return PivotDescriptor(row_field_indices, column_aggregations)
