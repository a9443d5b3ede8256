"""
Tests for JSON conversion of parsed trees.
"""

import json

import pytest
from eu4data.parser import parse, serialize_tree, deserialize_tree, count_values, Table, Text, Array, Entry


class TestTreeSerde:
    """Test JSON export and import."""

    def test_json_shape(self):
        """Tables, arrays and text have tagged JSON forms."""
        data = json.loads(serialize_tree(parse("a = b c = { d e } f = { g = h }")))
        assert data == {
            '_type': 'table',
            'entries': [
                {'key': 'a', 'value': {'_type': 'text', 'text': 'b'}},
                {'key': 'c', 'value': {'_type': 'array', 'items': [
                    {'_type': 'text', 'text': 'd'},
                    {'_type': 'text', 'text': 'e'},
                ]}},
                {'key': 'f', 'value': {'_type': 'table', 'entries': [
                    {'key': 'g', 'value': {'_type': 'text', 'text': 'h'}},
                ]}},
            ],
        }

    def test_keyless_entry_key_is_null(self):
        data = json.loads(serialize_tree(Table([Entry(None, Text("x"))])))
        assert data['entries'][0]['key'] is None

    def test_restore(self, province_source):
        """Deserializing gives back an equal table."""
        table = parse(province_source)
        assert deserialize_tree(serialize_tree(table)) == table

    def test_restore_from_str(self):
        table = parse('capital = "Linköping"')
        assert deserialize_tree(serialize_tree(table).decode('utf-8')) == table

    def test_root_must_be_table(self):
        with pytest.raises(ValueError):
            deserialize_tree('{"_type": "text", "text": "x"}')

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            deserialize_tree('{"_type": "table", "entries": [{"key": "a", "value": {"_type": "blob"}}]}')

    def test_missing_field(self):
        with pytest.raises(ValueError):
            deserialize_tree('{"_type": "table"}')

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            deserialize_tree(b'{not json')


class TestCountValues:
    """Test value counting."""

    def test_count(self):
        """Root, one scalar, an array and its two items."""
        table = parse("a = b c = { d e }")
        assert count_values(table) == 5

    def test_count_empty(self):
        assert count_values(Table()) == 1
        assert count_values(Array([])) == 1
