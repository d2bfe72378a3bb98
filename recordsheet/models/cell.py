"""Encoded cell value model."""
from ..constants import CellKind


class CellValue:
    """
    A spreadsheet-ready value tagged with its kind.
    Exactly one variant is populated; EMPTY cells carry None.
    """

    __slots__ = ('kind', 'value')

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = None if kind == CellKind.EMPTY else value

    @classmethod
    def empty(cls):
        return cls(CellKind.EMPTY)

    @property
    def is_empty(self):
        return self.kind == CellKind.EMPTY

    @property
    def is_numeric(self):
        return self.kind in CellKind.NUMERIC

    def string_form(self):
        if self.is_empty:
            return ''
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, CellValue):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f'<CellValue {self.kind}={self.value!r}>'
