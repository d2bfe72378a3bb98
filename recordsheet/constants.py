class TypeTag:
    """
    Semantic categories a column's values belong to.
    Explicit schemas must use one of these values.
    """
    INTEGER = 'integer'
    FLOAT = 'float'
    FIXED_POINT = 'fixed_point'
    TEXT = 'text'
    CHARACTER = 'character'
    BOOLEAN = 'boolean'
    DATETIME = 'datetime'
    UNIQUE_ID = 'unique_id'
    OBJECT = 'object'  # No declared type; each value is encoded by its own type

    ALL = (INTEGER, FLOAT, FIXED_POINT, TEXT, CHARACTER, BOOLEAN, DATETIME, UNIQUE_ID, OBJECT)


class CellKind:
    """Variants of an encoded cell value."""
    INTEGER = 'integer'
    FLOAT = 'float'
    FIXED_POINT = 'fixed_point'
    TEXT = 'text'
    BOOLEAN = 'boolean'
    DATETIME = 'datetime'
    UNIQUE_ID = 'unique_id'
    EMPTY = 'empty'

    NUMERIC = {INTEGER, FLOAT, FIXED_POINT}


class AggregationFunction:
    """Reduction applied to the values of a pivot column."""
    SUM = 'sum'
    COUNT = 'count'
    AVERAGE = 'average'
    MIN = 'min'
    MAX = 'max'

    ALL = (SUM, COUNT, AVERAGE, MIN, MAX)

    # Excel's own labels for the consolidation functions
    LABELS = {
        SUM: 'Sum',
        COUNT: 'Count',
        AVERAGE: 'Average',
        MIN: 'Min',
        MAX: 'Max',
    }

    @classmethod
    def parse(cls, name):
        """Returns the aggregation constant for a case-insensitive name (e.g. 'Sum', 'AVG')."""
        key = str(name).strip().lower()
        if key in ('avg', 'mean'):
            key = cls.AVERAGE
        if key not in cls.ALL:
            raise ValueError(f"Unknown aggregation function: {name!r}")
        return key


# Column width heuristic
HEADER_PAD = 4
DATA_PAD = 2
UNITS_PER_CHAR = 256
MIN_WIDTH_UNITS = 2048
DEFAULT_WIDTH_SCALE_FACTOR = 1.25

# Largest integer Excel stores without losing digits
MAX_EXACT_INTEGER = 2 ** 53

DEFAULT_SHEET_NAME = 'DATA'
DEFAULT_PIVOT_SHEET_NAME = 'PIVOT'
DEFAULT_TABLE_NAME = 'Data'
DEFAULT_TABLE_DISPLAY_NAME = 'MYTABLE'
DEFAULT_TABLE_ID = 1
DEFAULT_TABLE_STYLE = 'TableStyleMedium16'
GRAND_TOTAL_LABEL = 'Grand Total'
