import pytest

from recordsheet.constants import TypeTag
from recordsheet.models import CellValue, ColumnDescriptor, TableDescriptor
from recordsheet.services.pipeline.table import TableBuilder

COLUMNS = [ColumnDescriptor('PRODUCT', TypeTag.TEXT, 0), ColumnDescriptor('CA_NET', TypeTag.INTEGER, 1)]


def test_region_spans_header_and_rows():
    rows = [[CellValue.empty(), CellValue.empty()]] * 2
    table = TableBuilder().build(COLUMNS, rows)
    assert table.region == (0, 0, 2, 1)
    assert table.row_count == 2
    assert table.column_count == 2
    assert table.has_data
    assert table.filterable


def test_header_only_region():
    table = TableBuilder().build(COLUMNS, [])
    assert table.region == (0, 0, 0, 1)
    assert table.end_row == table.start_row
    assert not table.has_data


def test_table_identity():
    table = TableBuilder(name='Sales', display_name='SALES', table_id=3).build(COLUMNS, [])
    assert (table.name, table.display_name, table.table_id) == ('Sales', 'SALES', 3)

    default = TableBuilder().build(COLUMNS, [])
    assert (default.name, default.display_name, default.table_id) == ('Data', 'MYTABLE', 1)


def test_descriptor_enforces_column_span():
    with pytest.raises(ValueError):
        TableDescriptor((0, 0, 1, 4), COLUMNS, 'Data')
    with pytest.raises(ValueError):
        TableDescriptor((3, 0, 1, 1), COLUMNS, 'Data')
