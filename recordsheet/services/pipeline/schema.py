"""Column discovery: explicit schemas or inference from the first record."""
import dataclasses
import itertools
import logging
from collections.abc import Mapping

from ...constants import TypeTag
from ...errors import EmptySourceError, NullSourceError, SchemaError
from ...models import ColumnDescriptor
from .encoder import infer_type_tag

logger = logging.getLogger(__name__)

MISSING = object()


def _attribute_names(record):
    names = list(vars(record)) if hasattr(record, '__dict__') else []
    # Base classes first so inherited fields lead
    for klass in reversed(type(record).__mro__):
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if hasattr(record, slot))
        names.extend(name for name, attr in vars(klass).items() if isinstance(attr, property))
    return names


def field_names(record):
    """Named fields of a record in declaration order."""
    if isinstance(record, Mapping):
        return list(record.keys())
    if hasattr(record, '_fields'):  # namedtuple
        return list(record._fields)
    if dataclasses.is_dataclass(record):
        return [f.name for f in dataclasses.fields(record)]

    names = []
    for name in _attribute_names(record):
        if not name.startswith('_') and name not in names:
            names.append(name)
    return names


def get_field(record, name):
    """Value of field ``name`` on ``record``, or MISSING."""
    if isinstance(record, Mapping):
        return record.get(name, MISSING)
    return getattr(record, name, MISSING)


class SchemaReader:
    """Produces the ordered column list for an export."""

    @staticmethod
    def infer(records, schema=None):
        """
        Reads the column layout for ``records``.

        Args:
            records: Single-use iterable of records.
            schema: Optional explicit schema: ColumnDescriptors, (name, type_tag)
                pairs, or a mapping of name to type_tag. Used verbatim when given.

        Returns:
            tuple: (list of ColumnDescriptor, iterator over all records). When
            the schema is inferred, the inspected first record is put back at
            the head of the returned iterator.
        """
        if records is None:
            raise NullSourceError()

        iterator = iter(records)

        if schema is not None:
            columns = SchemaReader.from_schema(schema)
            logger.info(f"Using explicit schema with {len(columns)} columns")
            return columns, iterator

        first = next(iterator, MISSING)
        if first is MISSING:
            raise EmptySourceError()

        columns = SchemaReader.from_record(first)
        logger.info(f"Inferred {len(columns)} columns from first record")
        return columns, itertools.chain([first], iterator)

    @staticmethod
    def from_schema(schema):
        if isinstance(schema, Mapping):
            entries = list(schema.items())
        else:
            entries = list(schema)

        columns = []
        seen = set()
        for index, entry in enumerate(entries):
            if isinstance(entry, ColumnDescriptor):
                name, tag = entry.name, entry.type_tag
            else:
                try:
                    name, tag = entry
                except (TypeError, ValueError):
                    raise SchemaError(f"Schema entry {index} is not a (name, type_tag) pair: {entry!r}")

            if tag not in TypeTag.ALL:
                raise SchemaError(f"Column '{name}' has unknown type tag {tag!r}")
            if name in seen:
                raise SchemaError(f"Column '{name}' is declared more than once")
            seen.add(name)
            columns.append(ColumnDescriptor(name, tag, index))

        if not columns:
            raise EmptySourceError("Explicit schema declares no columns")
        return columns

    @staticmethod
    def from_record(record):
        names = field_names(record)
        if not names:
            raise EmptySourceError(f"First record ({type(record).__name__}) exposes no named fields")
        return [
            ColumnDescriptor(name, infer_type_tag(get_field(record, name)), index)
            for index, name in enumerate(names)
        ]
