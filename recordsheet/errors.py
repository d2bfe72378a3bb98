class ExportError(Exception):
    """Base class for errors that abort an export before anything is written."""
    pass


class NullSourceError(ExportError):
    """The record source itself is missing."""

    def __init__(self, message="Record source is None"):
        super().__init__(message)


class EmptySourceError(ExportError):
    """The column set cannot be determined (no records and no explicit schema)."""

    def __init__(self, message="Record source yielded no records and no schema was supplied"):
        super().__init__(message)


class FieldResolutionError(ExportError):
    """A declared column is missing from a record."""

    def __init__(self, column_name, row_number):
        self.column_name = column_name
        self.row_number = row_number
        super().__init__(f"Record {row_number} has no field named '{column_name}'")


class SchemaError(ExportError):
    """An explicit schema is malformed (unknown type tag, duplicate column)."""
    pass
