"""Bundle of pipeline outputs handed to a workbook writer."""


class ExportResult:
    """Table descriptor, encoded rows, final widths and optional pivot of one export call."""

    def __init__(self, table, rows, widths, pivot=None):
        self.table = table
        self.rows = rows
        self.widths = widths
        self.pivot = pivot

    @property
    def has_pivot(self):
        return self.pivot is not None

    def __repr__(self):
        return f'<ExportResult {self.table.name} rows={len(self.rows)} pivot={self.has_pivot}>'
