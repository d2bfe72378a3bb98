import click

from ..errors import ExportError
from ..services.export import ExportService
from ..services.sample_data import generate_sales_stats, sales_pivot_settings


@click.command('sample')
@click.option('--products', default=2000, show_default=True, type=click.IntRange(min=0),
              help='Number of products (twelve monthly rows each)')
@click.option('--output', default='test.xlsx', show_default=True, type=click.Path(dir_okay=False),
              help='Workbook to write')
@click.option('--seed', default=None, type=int, help='Random seed for reproducible values')
@click.option('--no-pivot', is_flag=True, default=False, help='Skip the pivot sheet')
@click.pass_context
def sample(ctx, products, output, seed, no_pivot):
    """
    Writes a demo workbook of synthetic monthly sales statistics.
    """
    options = ctx.obj['options']
    settings = None if no_pivot else sales_pivot_settings()

    try:
        result = ExportService.build(
            generate_sales_stats(products, seed=seed), pivot_settings=settings, options=options)
    except ExportError as e:
        raise click.ClickException(str(e))

    ExportService.save(result, output, options)

    click.echo(f"Wrote {result.table.row_count} rows to {output}")
