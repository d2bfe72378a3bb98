"""Aggregated pivot values computed from encoded rows."""
import logging

from ...constants import AggregationFunction, CellKind, GRAND_TOTAL_LABEL

logger = logging.getLogger(__name__)

BLANK_LABEL = '(blank)'


def _numbers(cells):
    return [c.value for c in cells if c.kind in CellKind.NUMERIC]


def _sum(cells):
    numbers = _numbers(cells)
    return sum(numbers) if numbers else None


def _count(cells):
    count = sum(1 for c in cells if not c.is_empty)
    return count or None


def _average(cells):
    numbers = _numbers(cells)
    return sum(numbers) / len(numbers) if numbers else None


def _min(cells):
    numbers = _numbers(cells)
    return min(numbers) if numbers else None


def _max(cells):
    numbers = _numbers(cells)
    return max(numbers) if numbers else None


AGGREGATORS = {
    AggregationFunction.SUM: _sum,
    AggregationFunction.COUNT: _count,
    AggregationFunction.AVERAGE: _average,
    AggregationFunction.MIN: _min,
    AggregationFunction.MAX: _max,
}


def _group_key(cell):
    # Equal numbers share a group whatever their kind
    if cell.is_numeric:
        return ('number', cell.value)
    return (cell.kind, cell.value)


def _sort_key(cell):
    # Numbers first, then booleans, then everything else by text; blanks last (Excel order)
    if cell.is_empty:
        return (3, 0, '')
    if cell.kind in CellKind.NUMERIC:
        return (0, cell.value, '')
    if cell.kind == CellKind.BOOLEAN:
        return (1, int(cell.value), '')
    return (2, 0, cell.string_form())


class CrossTab:
    """
    Materialized cross-tabulation.

    ``header`` holds the row field names followed by the aggregation display
    names; ``rows`` one entry per distinct row-field key in ascending order;
    ``grand_total`` the aggregations over every data row.
    """

    def __init__(self, header, rows, grand_total):
        self.header = header
        self.rows = rows
        self.grand_total = grand_total

    @classmethod
    def compute(cls, table, rows, pivot):
        columns = table.columns
        fields = pivot.column_aggregations

        header = [columns[i].name for i in pivot.row_field_indices]
        header += [f.display_name for f in fields]

        groups = {}
        labels = {}
        for row in rows:
            cells = [row[i] for i in pivot.row_field_indices]
            key = tuple(_group_key(c) for c in cells)
            bucket = groups.get(key)
            if bucket is None:
                bucket = groups[key] = [[] for _ in fields]
                labels[key] = cells
            for values, field in zip(bucket, fields):
                values.append(row[field.column_index])

        ordered_keys = sorted(groups, key=lambda k: tuple(_sort_key(c) for c in labels[k]))

        out_rows = []
        if pivot.row_field_indices:
            for key in ordered_keys:
                names = [BLANK_LABEL if c.is_empty else c.value for c in labels[key]]
                out_rows.append(names + cls._aggregate(fields, groups[key]))

        all_values = [[row[f.column_index] for row in rows] for f in fields]
        grand_total = [GRAND_TOTAL_LABEL] + [None] * max(len(pivot.row_field_indices) - 1, 0)
        grand_total += cls._aggregate(fields, all_values)
        if not pivot.row_field_indices:
            # No row fields: the label sits in its own leading column
            header = [''] + header

        logger.debug(f"Cross-tab of {len(rows)} rows produced {len(out_rows)} groups")
        return cls(header, out_rows, grand_total)

    @staticmethod
    def _aggregate(fields, value_lists):
        return [AGGREGATORS[f.function](values) for f, values in zip(fields, value_lists)]
