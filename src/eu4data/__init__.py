"""
eu4data - Europa Universalis IV Data Toolkit

A Python toolkit for reading, editing and writing Clausewitz-style game data
files.
"""

__version__ = "0.1.0"
__author__ = "eu4data contributors"

from eu4data.errors import (
    Eu4DataError,
    ParseError,
    UnexpectedTokenError,
    UnterminatedStringError,
    UnbalancedBlockError,
    NestingTooDeepError,
    TypeMismatchError,
    DataFileError,
    ConfigError,
)
from eu4data.parser import parse, parse_source, serialize, Table, Text, Array, Entry, Value, color
from eu4data.files import parse_file
