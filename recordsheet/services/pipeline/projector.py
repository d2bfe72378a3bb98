"""Forward pass turning records into encoded rows."""
import logging

from ...errors import FieldResolutionError
from .schema import MISSING, get_field

logger = logging.getLogger(__name__)


class RowProjector:
    """Encodes every record column by column, widening the estimator as it goes."""

    def __init__(self, encoder):
        self.encoder = encoder

    def project(self, records, columns, estimator):
        """
        Consumes ``records`` once, in order.

        Returns:
            list: One list of CellValue per record, aligned with ``columns``.

        Raises:
            FieldResolutionError: A record lacks a declared column.
        """
        rows = []
        for row_number, record in enumerate(records, start=1):
            row = []
            for column in columns:
                value = get_field(record, column.name)
                if value is MISSING:
                    raise FieldResolutionError(column.name, row_number)

                row.append(self.encoder.encode(column.type_tag, value))
                estimator.observe(column.index, value)
            rows.append(row)

        logger.debug(f"Projected {len(rows)} rows over {len(columns)} columns")
        return rows
