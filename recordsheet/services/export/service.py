import io
import logging

import openpyxl

from .context import ExportContext
from .factory import ExportFactory
from ..pipeline import ExportPipeline
from ...options import ExportOptions

logger = logging.getLogger(__name__)


class ExportService:
    """Primary service to turn records into Excel workbooks."""
    @staticmethod
    def build(records, schema=None, pivot_settings=None, options=None):
        """Runs the record-to-table pipeline without rendering anything."""
        return ExportPipeline(options or ExportOptions()).run(records, schema, pivot_settings)

    @staticmethod
    def render_workbook(result, options=None):
        """Renders a pipeline result into a new openpyxl Workbook."""
        options = options or ExportOptions()
        context = ExportContext(result, options)

        wb = openpyxl.Workbook()
        default_ws = wb.active

        boards = ExportFactory.get_boards(context)
        opening_ws = default_ws
        for i, board in enumerate(boards):
            if i == 0:
                ws = default_ws
            else:
                ws = wb.create_sheet()
            board.render(ws, context)
            if board.opens_first:
                opening_ws = ws

        for ws in wb.worksheets:
            ws.sheet_view.tabSelected = ws is opening_ws
        wb.active = wb.index(opening_ws)

        return wb

    @staticmethod
    def write(stream, records, schema=None, pivot_settings=None, options=None):
        """
        Builds the table from ``records`` and writes the workbook to ``stream``.

        Args:
            stream: Binary file-like object or path.
            records: Single-use iterable of records.
            schema: Optional explicit schema (see SchemaReader.infer).
            pivot_settings: Optional PivotSettings.
            options: ExportOptions; defaults when omitted.

        Returns:
            ExportResult: The descriptors the workbook was rendered from.
        """
        options = options or ExportOptions()
        result = ExportService.build(records, schema, pivot_settings, options)
        ExportService.save(result, stream, options)
        return result

    @staticmethod
    def save(result, stream, options=None):
        """Renders an already built result and saves it to ``stream``."""
        wb = ExportService.render_workbook(result, options)
        try:
            wb.save(stream)
        except Exception as e:
            logger.error(f"Error writing workbook for table {result.table.name}: {e}")
            raise

    @staticmethod
    def generate_xlsx(records, schema=None, pivot_settings=None, options=None):
        output = io.BytesIO()
        ExportService.write(output, records, schema, pivot_settings, options)
        output.seek(0)
        return output
