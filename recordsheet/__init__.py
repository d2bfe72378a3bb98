import click

from .constants import AggregationFunction, TypeTag
from .errors import (
    EmptySourceError,
    ExportError,
    FieldResolutionError,
    NullSourceError,
    SchemaError,
)
from .models import PivotSettings
from .options import ExportOptions, import_object


def create_cli(config_class='config.Config'):
    """
    CLI Factory Function
    """
    if isinstance(config_class, str):
        config_class = import_object(config_class)

    @click.group()
    @click.pass_context
    def cli(ctx):
        """Export records to Excel tables with optional pivots."""
        ctx.obj = {
            'config': config_class,
            'options': ExportOptions.from_object(config_class),
        }

    # Register CLI commands
    from .commands.sample import sample
    from .commands.export import export

    cli.add_command(sample)
    cli.add_command(export)

    return cli


__all__ = [
    'AggregationFunction',
    'EmptySourceError',
    'ExportError',
    'ExportOptions',
    'FieldResolutionError',
    'NullSourceError',
    'PivotSettings',
    'SchemaError',
    'TypeTag',
    'create_cli',
]
