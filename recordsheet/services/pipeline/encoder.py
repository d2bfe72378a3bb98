"""Type-tag driven conversion of record values into spreadsheet cells."""
import datetime
import decimal
import logging
import uuid
from types import MappingProxyType

from ...constants import CellKind, MAX_EXACT_INTEGER, TypeTag
from ...models import CellValue

logger = logging.getLogger(__name__)


def safe_str(value):
    """str(value) that never raises; broken __str__ implementations fall back to the default repr."""
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _reject(value, expected):
    raise TypeError(f"{type(value).__name__} is not {expected}")


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _encode_integer(value):
    if isinstance(value, bool) or not isinstance(value, int):
        _reject(value, "an integer")
    # Excel stores numbers as doubles; wider integers cannot round-trip exactly
    if abs(value) >= MAX_EXACT_INTEGER:
        return CellValue(CellKind.FLOAT, float(value))
    return CellValue(CellKind.INTEGER, value)


def _encode_float(value):
    if not _is_number(value):
        _reject(value, "a number")
    return CellValue(CellKind.FLOAT, float(value))


def _encode_fixed_point(value):
    if not isinstance(value, decimal.Decimal):
        _reject(value, "a decimal")
    # Decimal -> double: precision loss is accepted
    return CellValue(CellKind.FIXED_POINT, float(value))


def _encode_text(value):
    return CellValue(CellKind.TEXT, safe_str(value))


def _encode_boolean(value):
    if not isinstance(value, bool):
        _reject(value, "a boolean")
    return CellValue(CellKind.BOOLEAN, value)


def _encode_datetime(value):
    if not isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        _reject(value, "a date/time value")
    # xlsx has no timezone support
    if getattr(value, 'tzinfo', None) is not None:
        value = value.replace(tzinfo=None)
    return CellValue(CellKind.DATETIME, value)


def _encode_unique_id(value):
    return CellValue(CellKind.UNIQUE_ID, safe_str(value))


# Checked in order: bool before int, datetime before date
TYPE_INFERENCE_TABLE = (
    (bool, TypeTag.BOOLEAN),
    (int, TypeTag.INTEGER),
    (float, TypeTag.FLOAT),
    (decimal.Decimal, TypeTag.FIXED_POINT),
    (str, TypeTag.TEXT),
    (datetime.datetime, TypeTag.DATETIME),
    (datetime.date, TypeTag.DATETIME),
    (datetime.time, TypeTag.DATETIME),
    (uuid.UUID, TypeTag.UNIQUE_ID),
)


def infer_type_tag(value):
    """Type tag for a runtime value; None and unmapped types give TypeTag.OBJECT."""
    for python_type, tag in TYPE_INFERENCE_TABLE:
        if isinstance(value, python_type):
            return tag
    return TypeTag.OBJECT


DEFAULT_ENCODERS = MappingProxyType({
    TypeTag.INTEGER: _encode_integer,
    TypeTag.FLOAT: _encode_float,
    TypeTag.FIXED_POINT: _encode_fixed_point,
    TypeTag.TEXT: _encode_text,
    TypeTag.CHARACTER: _encode_text,
    TypeTag.BOOLEAN: _encode_boolean,
    TypeTag.DATETIME: _encode_datetime,
    TypeTag.UNIQUE_ID: _encode_unique_id,
    TypeTag.OBJECT: _encode_text,
})


class CellEncoder:
    """
    Registry mapping a column's type tag to its cell converter.

    The mapping is fixed when the encoder is constructed; pass ``overrides``
    to replace or add converters for specific tags.

    Converters only accept values of their own Python types. A value its
    column's converter rejects is encoded under the tag of its own runtime
    type instead, so a float in an integer column stays a float and the
    string "no" in a boolean column stays text. OBJECT columns encode every
    value that way. Tags without a converter, and values nothing accepts,
    are encoded as text.
    """

    def __init__(self, overrides=None):
        encoders = dict(DEFAULT_ENCODERS)
        if overrides:
            encoders.update(overrides)
        self._encoders = MappingProxyType(encoders)

    @property
    def encoders(self):
        return self._encoders

    def encode(self, type_tag, value):
        if value is None:
            return CellValue.empty()

        if type_tag not in self._encoders:
            return _encode_text(value)

        value_tag = infer_type_tag(value)
        if type_tag == TypeTag.OBJECT:
            candidates = (value_tag,)
        elif value_tag == type_tag:
            candidates = (type_tag,)
        else:
            candidates = (type_tag, value_tag)

        for tag in candidates:
            encoder = self._encoders.get(tag)
            if encoder is None:
                continue
            try:
                return encoder(value)
            except (TypeError, ValueError, ArithmeticError) as e:
                logger.debug(f"Encoding {value!r} as {tag} failed ({e})")

        return _encode_text(value)
