"""
Tree Serialization: JSON conversion for parsed tables.

JSON export of parsed tables, used by `eu4data parse --json`.

Usage:
    from eu4data.parser.tree_serde import serialize_tree, deserialize_tree, count_values
"""

import json
from typing import Any, Dict, Union

from eu4data.parser.model import Array, Entry, Table, Text, Value


def value_to_dict(value: Value) -> Dict[str, Any]:
    """Convert a value to a JSON-compatible dict."""
    if isinstance(value, Text):
        return {'_type': 'text', 'text': value.text}
    elif isinstance(value, Table):
        return {
            '_type': 'table',
            'entries': [
                {'key': e.key, 'value': value_to_dict(e.value)}
                for e in value.entries
            ]
        }
    elif isinstance(value, Array):
        return {
            '_type': 'array',
            'items': [value_to_dict(i) for i in value.items]
        }
    raise TypeError(f"Cannot convert {type(value).__name__} to dict")


def value_from_dict(data: Dict[str, Any]) -> Value:
    """Rebuild a value from the dict form produced by value_to_dict."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected object, got {type(data).__name__}")

    node_type = data.get('_type')
    if node_type == 'text':
        return Text(data['text'])
    elif node_type == 'table':
        return Table([
            Entry(e.get('key'), value_from_dict(e['value']))
            for e in data['entries']
        ])
    elif node_type == 'array':
        return Array([value_from_dict(i) for i in data['items']])
    raise ValueError(f"Unknown node type: {node_type!r}")


def serialize_tree(table: Table) -> bytes:
    """
    Serialize a table to compact JSON bytes.

    Args:
        table: Parsed or constructed table

    Returns:
        UTF-8 encoded JSON bytes
    """
    data = value_to_dict(table)
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


def deserialize_tree(data: Union[bytes, str]) -> Table:
    """
    Deserialize a table from JSON bytes or string.

    Raises:
        ValueError: if the JSON is malformed or its root is not a table
    """
    if isinstance(data, bytes):
        data = data.decode('utf-8')
    try:
        value = value_from_dict(json.loads(data))
    except KeyError as e:
        raise ValueError(f"Missing field in tree JSON: {e}") from e
    if not isinstance(value, Table):
        raise ValueError(f"Tree root must be a table, got {value.type_name}")
    return value


def count_values(value: Value) -> int:
    """Count values in a tree, the root included."""
    count = 1
    if isinstance(value, Table):
        for entry in value.entries:
            count += count_values(entry.value)
    elif isinstance(value, Array):
        for item in value.items:
            count += count_values(item)
    return count
