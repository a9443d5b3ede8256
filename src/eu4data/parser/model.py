"""
Clausewitz Data Model

In-memory tree produced by the parser: Text scalars, keyed Tables and
unkeyed Arrays. Tables keep insertion order and allow duplicate keys.
"""

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from eu4data.errors import TypeMismatchError


@dataclass
class Value:
    """Base class for values."""

    type_name = "value"

    def as_text(self) -> str:
        """Scalar text of this value. Only Text values have one."""
        raise TypeMismatchError("text", self.type_name)


@dataclass
class Text(Value):
    """A scalar token, already escape-decoded."""
    text: str = ""

    type_name = "text"

    def __repr__(self):
        return f"Text({self.text!r})"

    def as_text(self) -> str:
        return self.text


@dataclass
class Array(Value):
    """An unkeyed sequence of values: { a b c }"""
    items: List[Value] = field(default_factory=list)

    type_name = "array"

    def __repr__(self):
        return f"Array({self.items})"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass
class Entry:
    """A key = value pair. `key` is None for array elements."""
    key: Optional[str]
    value: Value

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


@dataclass
class Table(Value):
    """
    An ordered sequence of entries: { key = value ... }

    Usage:
        table = Table()
        table.set("owner", Text("FRA"))
        table.get("owner").as_text()
    """
    entries: List[Entry] = field(default_factory=list)

    type_name = "table"

    def __repr__(self):
        return f"Table({len(self.entries)} entries)"

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def keys(self) -> List[str]:
        """Keys in entry order, duplicates included, keyless entries skipped."""
        return [e.key for e in self.entries if e.key is not None]

    def get(self, key: str) -> Optional[Value]:
        """Value of the first entry with this key, or None."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None

    def get_all(self, key: str) -> List[Value]:
        """Values of every entry with this key, in order."""
        return [e.value for e in self.entries if e.key == key]

    def get_text(self, key: str) -> Optional[str]:
        """Scalar text stored under key, or None if the key is absent."""
        value = self.get(key)
        if value is None:
            return None
        return value.as_text()

    def set(self, key: str, value: Value) -> None:
        """Overwrite the first entry with this key in place, or append one."""
        if not key:
            raise ValueError("Table keys must be non-empty")
        for entry in self.entries:
            if entry.key == key:
                entry.value = value
                return
        self.entries.append(Entry(key, value))

    def copy(self) -> 'Table':
        """Independent deep copy of this table."""
        return copy.deepcopy(self)

    def serialize(self, legacy_quoting: bool = False) -> str:
        """Serialize back to script text."""
        from eu4data.parser.serializer import serialize
        return serialize(self, legacy_quoting=legacy_quoting)


def color(r: int, g: int, b: int) -> Array:
    """Build a { r g b } colour array from three bytes, as decimal text."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"Colour component out of range 0-255: {component}")
    return Array([Text(str(r)), Text(str(g)), Text(str(b))])
