import io
import uuid

import openpyxl
import pytest

from recordsheet.constants import AggregationFunction, TypeTag
from recordsheet.errors import FieldResolutionError
from recordsheet.models import PivotSettings
from recordsheet.options import ExportOptions
from recordsheet.services.export import ExportService
from recordsheet.services.sample_data import generate_sales_stats, sales_pivot_settings


def test_generate_xlsx_with_pivot(sales_records, sales_schema, sales_pivot):
    output = ExportService.generate_xlsx(sales_records, sales_schema, sales_pivot)
    wb = openpyxl.load_workbook(output)

    assert wb.sheetnames == ['DATA', 'PIVOT']
    assert wb.active.title == 'PIVOT'

    data = wb['DATA']
    assert [[c.value for c in row] for row in data.iter_rows()] == [
        ['PRODUCT', 'CA_NET'], ['A', 10], ['B', 20]]
    assert data.tables['Data'].ref == 'A1:B3'

    pivot = wb['PIVOT']
    assert [[c.value for c in row] for row in pivot.iter_rows()] == [
        ['PRODUCT', 'CA_NET'], ['A', 10], ['B', 20], ['Grand Total', 30]]


def test_write_returns_result_and_fills_stream(sales_records):
    stream = io.BytesIO()
    result = ExportService.write(stream, sales_records)
    assert result.table.region == (0, 0, 2, 1)
    assert result.pivot is None

    stream.seek(0)
    wb = openpyxl.load_workbook(stream)
    assert wb.sheetnames == ['DATA']


def test_header_only_workbook(sales_schema, sales_pivot):
    wb = openpyxl.load_workbook(ExportService.generate_xlsx([], sales_schema, sales_pivot))
    assert wb.sheetnames == ['DATA']
    ws = wb['DATA']
    assert [c.value for c in ws[1]] == ['PRODUCT', 'CA_NET']
    assert ws.max_row == 1
    assert ws.auto_filter.ref == 'A1:B1'


def test_failure_writes_nothing(sales_schema):
    stream = io.BytesIO()
    with pytest.raises(FieldResolutionError):
        ExportService.write(stream, [{'PRODUCT': 'A'}], sales_schema)
    assert stream.getvalue() == b''


def test_custom_options(sales_records):
    options = ExportOptions(sheet_name='Stats', pivot_sheet_name='Summary', table_name='Sales',
                            table_display_name='SALES', table_style='TableStyleLight9')
    settings = PivotSettings(row_labels=['PRODUCT'], column_labels={'CA_NET': AggregationFunction.COUNT})
    wb = openpyxl.load_workbook(ExportService.generate_xlsx(sales_records, pivot_settings=settings, options=options))

    assert wb.sheetnames == ['Stats', 'Summary']
    table = wb['Stats'].tables['Sales']
    assert table.displayName == 'SALES'
    assert table.tableStyleInfo.name == 'TableStyleLight9'
    assert wb['Summary']['B4'].value == 2


def test_sample_dataset_roundtrip():
    records = generate_sales_stats(3, seed=7)
    wb = openpyxl.load_workbook(ExportService.generate_xlsx(records, pivot_settings=sales_pivot_settings()))

    data = wb['DATA']
    assert [c.value for c in data[1]] == ['PRODUCT', 'MONTH', 'CA_NET', 'CA_BRUT', 'QTE_VENDUE', 'GUID']
    assert data.max_row == 1 + 3 * 12
    # GUIDs are written as their canonical string
    uuid.UUID(data['F2'].value)

    pivot = wb['PIVOT']
    assert [c.value for c in pivot[1]] == ['PRODUCT', 'MONTH', 'CA_NET', 'CA_BRUT', 'QTE_VENDUE']
    assert pivot.max_row == 1 + 3 * 12 + 1
    assert pivot.cell(row=pivot.max_row, column=1).value == 'Grand Total'


def test_explicit_schema_types_are_honoured():
    schema = [('CODE', TypeTag.TEXT), ('AMOUNT', TypeTag.FLOAT)]
    wb = openpyxl.load_workbook(ExportService.generate_xlsx([{'CODE': 7, 'AMOUNT': 3}], schema))
    ws = wb['DATA']
    assert ws['A2'].value == '7'
    assert ws['B2'].value == 3
