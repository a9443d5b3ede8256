"""
Clausewitz Script Lexical Primitives

Character-level scanners shared by the parser: layout (whitespace and
comments), bare words, and quoted strings with escape decoding.

The scanner is a cursor over already-decoded text. The parser snapshots
`pos` before an alternative and assigns it back to backtrack.
"""

from typing import Optional, Tuple, Type

from eu4data.errors import (
    ParseError,
    UnexpectedTokenError,
    UnterminatedStringError,
)


# Escape letters recognised after a backslash inside a quoted string.
# Any other character after a backslash stands for itself.
ESCAPES = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}


class Scanner:
    """
    Cursor over source text with the format's lexical primitives.

    Usage:
        scanner = Scanner('foo = "bar"')
        key = scanner.read_word()
        scanner.skip_layout()
    """

    # Characters allowed in a bare word besides letters and digits
    WORD_SPECIAL = set("._-")

    @staticmethod
    def is_word_char(ch: str) -> bool:
        """Check if character can appear in a bare word."""
        return ch.isalnum() or ch in Scanner.WORD_SPECIAL

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def current(self) -> Optional[str]:
        """Get current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def at_end(self) -> bool:
        return self.pos >= self.length

    def match(self, ch: str) -> bool:
        """Consume `ch` if it is the current character."""
        if self.current() == ch:
            self.pos += 1
            return True
        return False

    def location(self, pos: Optional[int] = None) -> Tuple[int, int]:
        """1-based (line, column) of an offset, defaulting to the cursor."""
        if pos is None:
            pos = self.pos
        line = self.source.count('\n', 0, pos) + 1
        column = pos - (self.source.rfind('\n', 0, pos) + 1) + 1
        return line, column

    def error(self, error_type: Type[ParseError], message: str, pos: Optional[int] = None) -> ParseError:
        """Build a positioned error; callers raise it."""
        if pos is None:
            pos = self.pos
        line, column = self.location(pos)
        return error_type(message, position=pos, line=line, column=column)

    def describe_current(self) -> str:
        ch = self.current()
        if ch is None:
            return "end of input"
        return repr(ch)

    def skip_layout_unit(self) -> bool:
        """
        Consume one unit of layout: a whitespace character, or a '#'
        comment up to (not including) the next newline.

        Returns False without consuming anything if no layout is present.
        """
        ch = self.current()
        if ch is None:
            return False
        if ch.isspace():
            self.pos += 1
            return True
        if ch == '#':
            end = self.source.find('\n', self.pos)
            self.pos = self.length if end == -1 else end
            return True
        return False

    def skip_layout(self) -> None:
        """Skip any run of whitespace and comments."""
        while self.skip_layout_unit():
            pass

    def read_word(self) -> str:
        """Read a bare word (alphanumerics plus '.', '_', '-')."""
        start = self.pos
        while self.pos < self.length and self.is_word_char(self.source[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.error(UnexpectedTokenError, f"Expected word, got {self.describe_current()}")
        return self.source[start:self.pos]

    def read_quoted(self) -> str:
        """Read a double-quoted string, decoding backslash escapes."""
        start = self.pos
        if not self.match('"'):
            raise self.error(UnexpectedTokenError, f"Expected '\"', got {self.describe_current()}")

        result = []
        while True:
            ch = self.current()
            if ch is None:
                raise self.error(UnterminatedStringError, "Unterminated string", start)
            self.pos += 1
            if ch == '"':
                break
            if ch == '\\':
                esc = self.current()
                if esc is None:
                    raise self.error(UnterminatedStringError, "Unterminated string", start)
                self.pos += 1
                result.append(ESCAPES.get(esc, esc))
            else:
                result.append(ch)

        return ''.join(result)
