import unittest

from recordsheet.constants import CellKind, TypeTag
from recordsheet.errors import FieldResolutionError
from recordsheet.models import CellValue, ColumnDescriptor
from recordsheet.services.pipeline.encoder import CellEncoder
from recordsheet.services.pipeline.projector import RowProjector
from recordsheet.services.pipeline.widths import ColumnWidthEstimator


class TestRowProjector(unittest.TestCase):
    """Test cases for the single forward pass over records."""

    def setUp(self):
        self.columns = [
            ColumnDescriptor('PRODUCT', TypeTag.TEXT, 0),
            ColumnDescriptor('CA_NET', TypeTag.INTEGER, 1),
        ]
        self.estimator = ColumnWidthEstimator([c.name for c in self.columns])
        self.projector = RowProjector(CellEncoder())

    def test_rows_are_aligned_with_columns(self):
        records = [{'CA_NET': 10, 'PRODUCT': 'A'}, {'PRODUCT': 'B', 'CA_NET': None}]
        rows = self.projector.project(records, self.columns, self.estimator)
        self.assertEqual(rows, [
            [CellValue(CellKind.TEXT, 'A'), CellValue(CellKind.INTEGER, 10)],
            [CellValue(CellKind.TEXT, 'B'), CellValue.empty()],
        ])

    def test_extra_fields_are_ignored(self):
        records = [{'PRODUCT': 'A', 'CA_NET': 1, 'EXTRA': 'ignored'}]
        rows = self.projector.project(records, self.columns, self.estimator)
        self.assertEqual(len(rows[0]), 2)

    def test_widths_follow_the_data(self):
        records = [{'PRODUCT': 'a rather long product name', 'CA_NET': 1}]
        self.projector.project(records, self.columns, self.estimator)
        self.assertEqual(self.estimator.widths, {0: len('a rather long product name') + 2, 1: 10})

    def test_missing_field_raises_with_position(self):
        records = [{'PRODUCT': 'A', 'CA_NET': 1}, {'PRODUCT': 'B'}]
        with self.assertRaises(FieldResolutionError) as ctx:
            self.projector.project(records, self.columns, self.estimator)
        self.assertEqual(ctx.exception.column_name, 'CA_NET')
        self.assertEqual(ctx.exception.row_number, 2)

    def test_records_consumed_once_in_order(self):
        seen = []

        def source():
            for name in ['x', 'y', 'z']:
                seen.append(name)
                yield {'PRODUCT': name, 'CA_NET': len(seen)}

        rows = self.projector.project(source(), self.columns, self.estimator)
        self.assertEqual(seen, ['x', 'y', 'z'])
        self.assertEqual([r[1].value for r in rows], [1, 2, 3])


if __name__ == '__main__':
    unittest.main()
