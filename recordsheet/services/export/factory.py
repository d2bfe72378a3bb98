from .base import BaseExportBoard
from .components import DataTableComponent, PivotTableComponent


class ExportFactory:
    """Factory to create the export boards for one pipeline result."""
    @staticmethod
    def get_boards(context):
        # Sheet 1: Data table
        boards = [BaseExportBoard(context.options.sheet_name).add_component(DataTableComponent())]

        # Sheet 2: Pivot, only when there is something to aggregate; the workbook opens on it
        if context.should_render_pivot:
            pivot_board = BaseExportBoard(context.options.pivot_sheet_name, opens_first=True)
            boards.append(pivot_board.add_component(PivotTableComponent()))

        return boards
