import json

import click

from ..constants import AggregationFunction
from ..errors import ExportError
from ..models import PivotSettings
from ..services.export import ExportService


def iter_json_records(path):
    """Yields records from a JSON array file or a JSON-lines file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {path}: {e}")

    stripped = content.lstrip()
    if stripped.startswith('['):
        try:
            records = json.loads(content)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{path}:{e.lineno}: invalid JSON ({e.msg})")
        for record in records:
            yield record
        return

    for line_no, line in enumerate(content.splitlines(), 1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{path}:{line_no}: invalid JSON ({e.msg})")


def parse_pivot_value(spec):
    """'NAME' or 'NAME:FUNC' -> (name, aggregation); FUNC defaults to sum."""
    name, _, function = spec.partition(':')
    if not name:
        raise click.BadParameter(f"Missing column name in {spec!r}")
    try:
        return name, AggregationFunction.parse(function or AggregationFunction.SUM)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.command('export')
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', required=True, type=click.Path(dir_okay=False), help='Workbook to write')
@click.option('--pivot-row', 'pivot_rows', multiple=True, help='Column to group the pivot by (repeatable)')
@click.option('--pivot-value', 'pivot_values', multiple=True,
              help='Column to aggregate, as NAME or NAME:FUNC (sum, count, average, min, max)')
@click.pass_context
def export(ctx, input_path, output, pivot_rows, pivot_values):
    """
    Exports the records of a JSON or JSON-lines file to an Excel table.
    """
    options = ctx.obj['options']

    settings = None
    if pivot_rows or pivot_values:
        settings = PivotSettings(
            row_labels=pivot_rows,
            column_labels=[parse_pivot_value(v) for v in pivot_values],
        )

    # Nothing is written unless the whole input converts
    try:
        result = ExportService.build(iter_json_records(input_path), pivot_settings=settings, options=options)
    except ExportError as e:
        raise click.ClickException(str(e))

    ExportService.save(result, output, options)

    click.echo(f"Wrote {result.table.row_count} rows x {result.table.column_count} columns to {output}")