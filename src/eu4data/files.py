"""
Data file I/O.

Game data files are stored in the legacy Windows-1252 codepage. Decoding is
strict: a byte with no mapping fails the file rather than being replaced.
"""

import logging
from pathlib import Path
from typing import Union

from eu4data.errors import DataFileError, ParseError
from eu4data.parser import Table, parse_source, serialize

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "windows-1252"


def read_text(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """Read and decode an entire file."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DataFileError(path, f"Cannot read file: {e}") from e
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise DataFileError(path, f"Not valid {encoding} at byte {e.start}") from e
    except LookupError as e:
        raise DataFileError(path, f"Unknown encoding {encoding!r}") from e


def write_text(path: Union[str, Path], text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Encode and write text, creating parent directories as needed."""
    path = Path(path)
    try:
        data = text.encode(encoding)
    except UnicodeEncodeError as e:
        raise DataFileError(path, f"Cannot encode {e.object[e.start:e.end]!r} as {encoding}") from e
    except LookupError as e:
        raise DataFileError(path, f"Unknown encoding {encoding!r}") from e
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise DataFileError(path, f"Cannot write file: {e}") from e


def parse_file(path: Union[str, Path], encoding: str = DEFAULT_ENCODING, strict: bool = False) -> Table:
    """Parse a data file into a Table."""
    path = Path(path)
    text = read_text(path, encoding)
    try:
        table = parse_source(text, strict=strict)
    except ParseError as e:
        raise DataFileError(path, str(e)) from e
    logger.debug(f"Parsed {path.name}: {len(table.entries)} entries")
    return table


def write_table(
    path: Union[str, Path],
    table: Table,
    encoding: str = DEFAULT_ENCODING,
    legacy_quoting: bool = False,
) -> None:
    """Serialize a table and write it to a data file."""
    write_text(path, serialize(table, legacy_quoting=legacy_quoting), encoding)
    logger.debug(f"Wrote {path}")
