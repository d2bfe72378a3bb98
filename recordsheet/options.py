"""Immutable export configuration passed explicitly through the pipeline and writer."""
import importlib
from collections import namedtuple

from .constants import (
    DEFAULT_PIVOT_SHEET_NAME,
    DEFAULT_SHEET_NAME,
    DEFAULT_TABLE_DISPLAY_NAME,
    DEFAULT_TABLE_ID,
    DEFAULT_TABLE_NAME,
    DEFAULT_TABLE_STYLE,
    DEFAULT_WIDTH_SCALE_FACTOR,
)

_FIELDS = [
    'sheet_name',
    'pivot_sheet_name',
    'table_name',
    'table_display_name',
    'table_id',
    'table_style',
    'width_scale_factor',
]

# Config attribute that feeds each option
_CONFIG_KEYS = {
    'sheet_name': 'EXPORT_SHEET_NAME',
    'pivot_sheet_name': 'EXPORT_PIVOT_SHEET_NAME',
    'table_name': 'EXPORT_TABLE_NAME',
    'table_display_name': 'EXPORT_TABLE_DISPLAY_NAME',
    'table_id': 'EXPORT_TABLE_ID',
    'table_style': 'EXPORT_TABLE_STYLE',
    'width_scale_factor': 'EXPORT_WIDTH_SCALE_FACTOR',
}


def import_object(import_name):
    """Imports 'package.module.Attr' or 'package.module:Attr'."""
    if ':' in import_name:
        module_name, attr = import_name.split(':', 1)
    else:
        module_name, _, attr = import_name.rpartition('.')
    if not module_name:
        return importlib.import_module(attr)
    return getattr(importlib.import_module(module_name), attr)


class ExportOptions(namedtuple('ExportOptions', _FIELDS)):
    """Sheet/table naming, table style and the column width scale factor."""
    __slots__ = ()

    def __new__(cls,
                sheet_name=DEFAULT_SHEET_NAME,
                pivot_sheet_name=DEFAULT_PIVOT_SHEET_NAME,
                table_name=DEFAULT_TABLE_NAME,
                table_display_name=DEFAULT_TABLE_DISPLAY_NAME,
                table_id=DEFAULT_TABLE_ID,
                table_style=DEFAULT_TABLE_STYLE,
                width_scale_factor=DEFAULT_WIDTH_SCALE_FACTOR):
        width_scale_factor = float(width_scale_factor)
        if width_scale_factor <= 0:
            raise ValueError(f"width_scale_factor must be positive, got {width_scale_factor}")
        if sheet_name == pivot_sheet_name:
            raise ValueError(f"Data and pivot sheets cannot share the name '{sheet_name}'")
        return super().__new__(
            cls, sheet_name, pivot_sheet_name, table_name, table_display_name,
            int(table_id), table_style, width_scale_factor)

    @classmethod
    def from_object(cls, obj):
        """
        Builds options from a config class/object or its import string.
        Attributes that are missing or None keep their defaults.
        """
        if isinstance(obj, str):
            obj = import_object(obj)

        kwargs = {}
        for field, key in _CONFIG_KEYS.items():
            value = getattr(obj, key, None)
            if value is not None:
                kwargs[field] = value
        return cls(**kwargs)
