from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.cell_range import CellRange
from openpyxl.worksheet.filters import AutoFilter
from openpyxl.worksheet.table import Table, TableStyleInfo

from ...constants import UNITS_PER_CHAR


class ExportFormatter:
    """Handles Excel styling and worksheet-level formatting."""
    @staticmethod
    def apply_header_style(ws, row=1):
        for cell in ws[row]:
            cell.font = Font(bold=True)

    @staticmethod
    def apply_column_widths(ws, units_by_index, start_col=1):
        """Sets widths given in 1/256 character units, keyed by 0-based column index."""
        for index, units in units_by_index.items():
            column_letter = get_column_letter(start_col + index)
            ws.column_dimensions[column_letter].width = units / UNITS_PER_CHAR

    @staticmethod
    def region_ref(table, start_row=1, start_col=1):
        """A1-style reference of a table descriptor's region on the sheet."""
        return CellRange(
            min_col=start_col + table.start_col,
            min_row=start_row + table.start_row,
            max_col=start_col + table.end_col,
            max_row=start_row + table.end_row,
        ).coord

    @staticmethod
    def add_table(ws, table, style_name, start_row=1, start_col=1):
        """Registers the region as a structured table with row stripes and an autofilter."""
        ref = ExportFormatter.region_ref(table, start_row, start_col)
        xlsx_table = Table(
            id=table.table_id,
            name=table.name,
            displayName=table.display_name,
            ref=ref,
            totalsRowShown=False,
        )
        xlsx_table.tableStyleInfo = TableStyleInfo(
            name=style_name,
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        if table.filterable:
            xlsx_table.autoFilter = AutoFilter(ref=ref)
        ws.add_table(xlsx_table)
        return xlsx_table

    @staticmethod
    def apply_header_filter(ws, table, start_row=1, start_col=1):
        """Autofilter over the header row only, for regions with no data rows."""
        if table.filterable:
            ws.auto_filter.ref = ExportFormatter.region_ref(table, start_row, start_col)

    @staticmethod
    def clean_text(value):
        """Strips control characters openpyxl refuses to store."""
        return ILLEGAL_CHARACTERS_RE.sub('', value)
