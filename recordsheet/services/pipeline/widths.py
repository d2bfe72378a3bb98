"""Single-pass column width estimation."""
import math

from ...constants import (
    DATA_PAD,
    DEFAULT_WIDTH_SCALE_FACTOR,
    HEADER_PAD,
    MIN_WIDTH_UNITS,
    UNITS_PER_CHAR,
)
from .encoder import safe_str


class ColumnWidthEstimator:
    """
    Tracks the widest rendered value per column while rows stream through.

    Measuring once during projection replaces a separate auto-fit pass over
    the finished sheet. Widths are character counts and never shrink.
    """

    def __init__(self, header_names, scale_factor=DEFAULT_WIDTH_SCALE_FACTOR):
        if scale_factor <= 0:
            raise ValueError(f"scale_factor must be positive, got {scale_factor}")
        self.scale_factor = scale_factor
        self._widths = [len(safe_str(name)) + HEADER_PAD for name in header_names]

    @staticmethod
    def text_length(value):
        if value is None:
            return 0
        return len(safe_str(value))

    def observe(self, index, value):
        """Widens column ``index`` if ``value`` needs more room; returns the current width."""
        candidate = self.text_length(value) + DATA_PAD
        if candidate > self._widths[index]:
            self._widths[index] = candidate
        return self._widths[index]

    def width(self, index):
        return self._widths[index]

    @property
    def widths(self):
        """Column index -> character width."""
        return {i: w for i, w in enumerate(self._widths)}

    def export_units(self, index):
        """Final width in 1/256 character units, never below MIN_WIDTH_UNITS."""
        scaled = math.floor(self._widths[index] * self.scale_factor)
        return max(scaled * UNITS_PER_CHAR, MIN_WIDTH_UNITS)

    def all_export_units(self):
        return {i: self.export_units(i) for i in range(len(self._widths))}

    def __len__(self):
        return len(self._widths)
