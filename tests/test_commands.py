import json

import openpyxl
from click.testing import CliRunner

from recordsheet import create_cli


class TestConfig:
    EXPORT_SHEET_NAME = 'DATA'
    EXPORT_PIVOT_SHEET_NAME = 'PIVOT'


def run(args):
    runner = CliRunner()
    return runner.invoke(create_cli(TestConfig), args)


def test_sample_command(tmp_workbook_path):
    result = run(['sample', '--products', '2', '--seed', '1', '--output', tmp_workbook_path])
    assert result.exit_code == 0, result.output
    assert 'Wrote 24 rows' in result.output

    wb = openpyxl.load_workbook(tmp_workbook_path)
    assert wb.sheetnames == ['DATA', 'PIVOT']


def test_sample_command_without_pivot(tmp_workbook_path):
    result = run(['sample', '--products', '1', '--no-pivot', '--output', tmp_workbook_path])
    assert result.exit_code == 0, result.output
    assert openpyxl.load_workbook(tmp_workbook_path).sheetnames == ['DATA']


def test_export_json_array_with_pivot(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.json'
    source.write_text(json.dumps([
        {'PRODUCT': 'A', 'CA_NET': 10},
        {'PRODUCT': 'B', 'CA_NET': 20},
        {'PRODUCT': 'A', 'CA_NET': 5},
    ]))

    result = run(['export', str(source), '--output', tmp_workbook_path,
                  '--pivot-row', 'PRODUCT', '--pivot-value', 'CA_NET:sum', '--pivot-value', 'MISSING'])
    assert result.exit_code == 0, result.output
    assert 'Wrote 3 rows x 2 columns' in result.output

    pivot = openpyxl.load_workbook(tmp_workbook_path)['PIVOT']
    assert [[c.value for c in row] for row in pivot.iter_rows()] == [
        ['PRODUCT', 'CA_NET'], ['A', 15], ['B', 20], ['Grand Total', 35]]


def test_export_json_lines(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.jsonl'
    source.write_text('{"N": 1}\n\n{"N": 2}\n')

    result = run(['export', str(source), '--output', tmp_workbook_path])
    assert result.exit_code == 0, result.output
    ws = openpyxl.load_workbook(tmp_workbook_path)['DATA']
    assert [c.value for c in ws['A']] == ['N', 1, 2]


def test_export_reports_missing_field(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.jsonl'
    source.write_text('{"A": 1, "B": 2}\n{"A": 3}\n')

    result = run(['export', str(source), '--output', tmp_workbook_path])
    assert result.exit_code != 0
    assert "Record 2 has no field named 'B'" in result.output
    assert not (tmp_path / 'export.xlsx').exists()


def test_export_rejects_unknown_aggregation(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.json'
    source.write_text('[{"A": 1}]')

    result = run(['export', str(source), '--output', tmp_workbook_path, '--pivot-value', 'A:median'])
    assert result.exit_code != 0
    assert 'median' in result.output


def test_export_empty_file(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.json'
    source.write_text('[]')

    result = run(['export', str(source), '--output', tmp_workbook_path])
    assert result.exit_code != 0
    assert 'no records' in result.output


def test_export_reports_malformed_json_array(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.json'
    source.write_text('[{"A": 1},')

    result = run(['export', str(source), '--output', tmp_workbook_path])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert 'invalid JSON' in result.output


def test_export_reports_undecodable_file(tmp_path, tmp_workbook_path):
    source = tmp_path / 'records.json'
    source.write_bytes(b'\xff\xfe[{"A": 1}]')

    result = run(['export', str(source), '--output', tmp_workbook_path])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert 'Cannot read' in result.output
