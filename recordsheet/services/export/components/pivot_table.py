from openpyxl.styles import Font

from ..base import BaseExportComponent
from ..formatter import ExportFormatter
from ...pipeline.widths import ColumnWidthEstimator


class PivotTableComponent(BaseExportComponent):
    """Renders the cross-tabulation of the data table with a grand total row."""
    def render(self, ws, context, start_row):
        crosstab = context.crosstab

        ws.append(crosstab.header)
        ExportFormatter.apply_header_style(ws, ws.max_row)

        estimator = ColumnWidthEstimator(
            crosstab.header, scale_factor=context.options.width_scale_factor)

        for row in crosstab.rows + [crosstab.grand_total]:
            ws.append(row)
            for index, value in enumerate(row):
                estimator.observe(index, value)

        for cell in ws[ws.max_row]:
            cell.font = Font(bold=True)

        ExportFormatter.apply_column_widths(ws, estimator.all_export_units())
        return ws.max_row + 1
