"""Table descriptor model."""


class TableDescriptor:
    """
    Rectangular region occupied by the exported table.

    The header is row ``start_row``; data rows follow it, so
    ``end_row - start_row`` is the number of data rows.
    """

    def __init__(self, region, columns, name, table_id=1, display_name=None, filterable=True):
        start_row, start_col, end_row, end_col = region
        if end_col - start_col + 1 != len(columns):
            raise ValueError(
                f"Region spans {end_col - start_col + 1} columns but {len(columns)} were given")
        if end_row < start_row:
            raise ValueError(f"Region ends (row {end_row}) before it starts (row {start_row})")

        self.region = (start_row, start_col, end_row, end_col)
        self.columns = list(columns)
        self.name = name
        self.table_id = table_id
        self.display_name = display_name or name
        self.filterable = filterable

    @property
    def start_row(self):
        return self.region[0]

    @property
    def start_col(self):
        return self.region[1]

    @property
    def end_row(self):
        return self.region[2]

    @property
    def end_col(self):
        return self.region[3]

    @property
    def row_count(self):
        """Number of data rows (header excluded)."""
        return self.end_row - self.start_row

    @property
    def column_count(self):
        return len(self.columns)

    @property
    def has_data(self):
        return self.row_count > 0

    @property
    def column_names(self):
        return [c.name for c in self.columns]

    def __repr__(self):
        return f'<TableDescriptor {self.name} id={self.table_id} region={self.region}>'
