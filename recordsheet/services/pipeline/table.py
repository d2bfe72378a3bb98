"""Table region construction."""
from ...constants import DEFAULT_TABLE_DISPLAY_NAME, DEFAULT_TABLE_ID, DEFAULT_TABLE_NAME
from ...models import TableDescriptor


class TableBuilder:
    """Places the header at (0, 0) and the data rows directly below it."""

    def __init__(self, name=DEFAULT_TABLE_NAME, display_name=DEFAULT_TABLE_DISPLAY_NAME,
                 table_id=DEFAULT_TABLE_ID):
        self.name = name
        self.display_name = display_name
        self.table_id = table_id

    def build(self, columns, rows):
        # With no rows the region is the header row alone
        region = (0, 0, len(rows), len(columns) - 1)
        return TableDescriptor(
            region,
            columns,
            self.name,
            table_id=self.table_id,
            display_name=self.display_name,
            filterable=True,
        )
