"""
Clausewitz Script Serializer

Converts a Table tree back into script text. Output is one entry per line
with no indentation; formatting of the parsed source is not preserved.

Quoting:
    default         quote any token that would not re-parse as a bare word,
                    escaping backslashes and double quotes
    legacy_quoting  quote only tokens containing a backslash or a space and
                    escape only backslashes; a '"' inside text is emitted
                    raw and the output will not re-parse
"""

from typing import List

from eu4data.parser.lexer import Scanner
from eu4data.parser.model import Array, Table, Text, Value


def _escape(text: str, legacy_quoting: bool) -> str:
    escaped = text.replace('\\', '\\\\')
    if not legacy_quoting:
        escaped = escaped.replace('"', '\\"')
    return f'"{escaped}"'


def _needs_quotes(text: str, legacy_quoting: bool) -> bool:
    if legacy_quoting:
        return '\\' in text or ' ' in text
    return not text or not all(Scanner.is_word_char(ch) for ch in text)


def quote_if_needed(text: str, legacy_quoting: bool = False) -> str:
    """Render a key or scalar, quoting it only when required."""
    if _needs_quotes(text, legacy_quoting):
        return _escape(text, legacy_quoting)
    return text


def _write_value(value: Value, out: List[str], legacy_quoting: bool) -> None:
    if isinstance(value, Text):
        out.append(quote_if_needed(value.text, legacy_quoting))
        out.append("\n")
    elif isinstance(value, Table):
        out.append("{\n")
        _write_entries(value, out, legacy_quoting)
        out.append("}\n")
    elif isinstance(value, Array):
        out.append("{\n")
        for item in value.items:
            _write_value(item, out, legacy_quoting)
        out.append("}\n")
    else:
        raise TypeError(f"Cannot serialize {type(value).__name__}")


def _write_entries(table: Table, out: List[str], legacy_quoting: bool) -> None:
    for entry in table.entries:
        if entry.key is not None:
            out.append(quote_if_needed(entry.key, legacy_quoting))
            out.append(" = ")
        _write_value(entry.value, out, legacy_quoting)


def serialize(table: Table, legacy_quoting: bool = False) -> str:
    """Serialize a table's entries to script text."""
    out: List[str] = []
    _write_entries(table, out, legacy_quoting)
    return ''.join(out)
