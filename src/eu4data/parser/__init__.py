"""
eu4data.parser - Clausewitz Data Parser

Scanner, parser, model and serializer for Clausewitz-style data files.
Converts decoded text into a Table tree and back.
"""

from eu4data.parser.lexer import Scanner
from eu4data.parser.model import Value, Text, Table, Array, Entry, color
from eu4data.parser.parser import Parser, parse, parse_source
from eu4data.parser.serializer import serialize, quote_if_needed
from eu4data.parser.tree_serde import serialize_tree, deserialize_tree, count_values

__all__ = [
    # Scanner
    "Scanner",
    # Parser
    "Parser",
    "parse",
    "parse_source",
    # Serializer
    "serialize",
    "quote_if_needed",
    "serialize_tree",
    "deserialize_tree",
    "count_values",
    # Model
    "Value",
    "Text",
    "Table",
    "Array",
    "Entry",
    "color",
]
