"""Column descriptor model."""


class ColumnDescriptor:
    """One column of the exported table; index is fixed once the schema is read."""

    __slots__ = ('name', 'type_tag', 'index')

    def __init__(self, name, type_tag, index):
        self.name = name
        self.type_tag = type_tag
        self.index = index

    def __eq__(self, other):
        if not isinstance(other, ColumnDescriptor):
            return NotImplemented
        return (self.name, self.type_tag, self.index) == (other.name, other.type_tag, other.index)

    def __hash__(self):
        return hash((self.name, self.type_tag, self.index))

    def __repr__(self):
        return f'<ColumnDescriptor {self.index}:{self.name} ({self.type_tag})>'
