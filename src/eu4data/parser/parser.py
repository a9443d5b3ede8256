"""
Clausewitz Script Parser

Recursive descent over a Scanner cursor, producing a Table tree.
Handles keyed and keyless entries, nested blocks, and the devolution of
all-keyless blocks into Arrays.
"""

from typing import List, Optional

from eu4data.errors import NestingTooDeepError, UnbalancedBlockError, UnexpectedTokenError
from eu4data.parser.lexer import Scanner
from eu4data.parser.model import Array, Entry, Table, Text, Value


class Parser:
    """
    Parser for Clausewitz-style data files.

    Usage:
        parser = Parser(source)
        table = parser.parse()
        parser.pos  # offset where parsing stopped
    """

    # Deepest block nesting accepted
    MAX_DEPTH = 64

    def __init__(self, source: str):
        self.scanner = Scanner(source)
        self.depth = 0

    @property
    def pos(self) -> int:
        return self.scanner.pos

    def parse(self, strict: bool = False) -> Table:
        """
        Parse the top-level table body.

        Parsing stops at the first position where no entry matches. Trailing
        input is left unconsumed unless `strict` is set, in which case it is
        reported as an unexpected token.
        """
        table = Table(self._parse_body())
        if strict and not self.scanner.at_end():
            raise self.scanner.error(
                UnexpectedTokenError,
                f"Unexpected {self.scanner.describe_current()} after end of data"
            )
        return table

    def _parse_body(self) -> List[Entry]:
        """Parse entries with layout between them until none match."""
        scanner = self.scanner
        entries = []

        scanner.skip_layout()
        while True:
            entry = self._parse_keyed_entry()
            if entry is None:
                value = self._parse_value()
                if value is None:
                    break
                entry = Entry(None, value)
            entries.append(entry)
            scanner.skip_layout()

        return entries

    def _parse_keyed_entry(self) -> Optional[Entry]:
        """
        Parse `word = value`. Returns None with the cursor restored when the
        input does not start with a word followed by '='.
        """
        scanner = self.scanner
        start = scanner.pos

        ch = scanner.current()
        if ch is None or not scanner.is_word_char(ch):
            return None
        key = scanner.read_word()
        scanner.skip_layout()
        if not scanner.match('='):
            scanner.pos = start
            return None

        # Committed once '=' is consumed
        scanner.skip_layout()
        value = self._parse_value()
        if value is None:
            raise scanner.error(
                UnexpectedTokenError,
                f"Expected value after '{key} =', got {scanner.describe_current()}"
            )
        return Entry(key, value)

    def _parse_value(self) -> Optional[Value]:
        """
        Parse a word, quoted string or block.

        Returns None with nothing consumed when no alternative starts here.
        """
        scanner = self.scanner
        ch = scanner.current()

        if ch is None:
            return None
        if scanner.is_word_char(ch):
            return Text(scanner.read_word())
        if ch == '"':
            return Text(scanner.read_quoted())
        if ch == '{':
            return self._parse_block()
        return None

    def _parse_block(self) -> Value:
        """Parse `{ body }`, then devolve it to an Array if no entry has a key."""
        scanner = self.scanner
        start = scanner.pos
        scanner.match('{')

        if self.depth >= self.MAX_DEPTH:
            raise scanner.error(
                NestingTooDeepError,
                f"Blocks nested deeper than {self.MAX_DEPTH} levels",
                start
            )
        self.depth += 1
        entries = self._parse_body()
        self.depth -= 1

        if not scanner.match('}'):
            if scanner.at_end():
                raise scanner.error(UnbalancedBlockError, "Unclosed '{' (missing '}')", start)
            raise scanner.error(
                UnexpectedTokenError,
                f"Expected '}}' or entry, got {scanner.describe_current()}"
            )

        if all(e.key is None for e in entries):
            return Array([e.value for e in entries])
        return Table(entries)


def parse_source(source: str, strict: bool = False) -> Table:
    """Parse decoded source text into a Table."""
    return Parser(source).parse(strict=strict)


parse = parse_source
