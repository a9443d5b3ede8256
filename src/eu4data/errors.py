"""
Exception hierarchy for eu4data.

Every failure raised by the package derives from Eu4DataError, so a caller
loading a batch of data files can catch one type per file and move on.
"""

from pathlib import Path
from typing import Optional, Union


class Eu4DataError(Exception):
    """Base class for all eu4data errors."""


class ParseError(Eu4DataError):
    """Error during parsing, positioned in the source text."""
    def __init__(self, message: str, position: int = 0, line: int = 1, column: int = 1):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(f"Parse error at line {line}, column {column}: {message}")


class UnexpectedTokenError(ParseError):
    """Input matches none of the grammar's alternatives."""


class UnterminatedStringError(ParseError):
    """A quoted string reached end of input before its closing quote."""


class UnbalancedBlockError(ParseError):
    """A '{' reached end of input before its matching '}'."""


class NestingTooDeepError(ParseError):
    """Blocks are nested deeper than the parser allows."""


class TypeMismatchError(Eu4DataError):
    """Scalar text was requested from a table or array value."""
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} value, got {actual}")


class DataFileError(Eu4DataError):
    """A data file could not be read, decoded, parsed or written."""
    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class ConfigError(Eu4DataError):
    """Configuration is missing or invalid."""
    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            super().__init__(f"Config error in {path}: {message}")
        else:
            super().__init__(f"Config error: {message}")
