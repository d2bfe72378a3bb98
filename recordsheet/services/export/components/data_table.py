from ..base import BaseExportComponent
from ..formatter import ExportFormatter
from ....constants import CellKind


class DataTableComponent(BaseExportComponent):
    """Renders the header, the encoded rows and the structured table over them."""
    def render(self, ws, context, start_row):
        table = context.table

        ws.append([str(name) for name in table.column_names])
        ExportFormatter.apply_header_style(ws, ws.max_row)

        for row in context.rows:
            ws.append([self._cell_value(cell) for cell in row])
            # Text that looks like a formula stays text
            for col_idx, cell in enumerate(row, 1):
                if cell.kind == CellKind.TEXT and cell.value.startswith('='):
                    ws.cell(row=ws.max_row, column=col_idx).data_type = 's'

        ExportFormatter.apply_column_widths(ws, context.widths.all_export_units())

        if table.has_data:
            ExportFormatter.add_table(ws, table, context.options.table_style, start_row=start_row)
        else:
            # Excel rejects structured tables without a body row
            ExportFormatter.apply_header_filter(ws, table, start_row=start_row)

        return start_row + table.row_count + 1

    @staticmethod
    def _cell_value(cell):
        if cell.is_empty:
            return None
        if cell.kind in (CellKind.TEXT, CellKind.UNIQUE_ID):
            return ExportFormatter.clean_text(cell.value)
        return cell.value
