"""Pivot settings (caller input) and pivot descriptor (resolved output)."""
from collections import namedtuple

from ..constants import AggregationFunction


class PivotSettings:
    """
    Human-named pivot configuration.

    Args:
        row_labels: Ordered column names to group rows by.
        column_labels: Mapping (or sequence of pairs) of column name to
            aggregation function; iteration order is kept.
    """

    def __init__(self, row_labels=None, column_labels=None):
        self.row_labels = list(row_labels or [])

        if column_labels is None:
            pairs = []
        elif hasattr(column_labels, 'items'):
            pairs = column_labels.items()
        else:
            pairs = column_labels

        self.column_labels = {}
        for name, function in pairs:
            self.column_labels[name] = AggregationFunction.parse(function)

    def __repr__(self):
        return f'<PivotSettings rows={self.row_labels} columns={self.column_labels}>'


PivotField = namedtuple('PivotField', ['column_index', 'function', 'display_name'])


class PivotDescriptor:
    """Pivot layout resolved against a table's columns."""

    def __init__(self, row_field_indices=None, column_aggregations=None):
        self.row_field_indices = list(row_field_indices or [])
        self.column_aggregations = [PivotField(*f) for f in (column_aggregations or [])]

    @property
    def is_empty(self):
        return not self.row_field_indices and not self.column_aggregations

    def __eq__(self, other):
        if not isinstance(other, PivotDescriptor):
            return NotImplemented
        return (self.row_field_indices == other.row_field_indices
                and self.column_aggregations == other.column_aggregations)

    def __repr__(self):
        return f'<PivotDescriptor rows={self.row_field_indices} values={self.column_aggregations}>'
