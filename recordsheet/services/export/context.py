from .crosstab import CrossTab


class ExportContext:
    """Holds one pipeline result and caches what the boards derive from it."""
    def __init__(self, result, options):
        self.result = result
        self.options = options
        self._crosstab = None

    @property
    def table(self):
        return self.result.table

    @property
    def rows(self):
        return self.result.rows

    @property
    def widths(self):
        return self.result.widths

    @property
    def pivot(self):
        return self.result.pivot

    @property
    def should_render_pivot(self):
        """A pivot sheet needs settings, at least one data row and something resolved to show."""
        return (self.pivot is not None
                and self.table.has_data
                and not self.pivot.is_empty)

    @property
    def crosstab(self):
        if self._crosstab is None:
            self._crosstab = CrossTab.compute(self.table, self.rows, self.pivot)
        return self._crosstab
