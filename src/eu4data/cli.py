"""
CLI entry point for eu4data.

Usage:
    eu4data parse <file>               Parse a file and show a summary
    eu4data format <file>              Re-serialize a file
    eu4data get <file> <key>           Print a top-level value
    eu4data load                       Load game data named by Config.toml
"""

import argparse
import logging
import sys
from pathlib import Path

from eu4data import __version__
from eu4data.errors import Eu4DataError

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )


def cmd_parse(args):
    """Parse a file and show a summary, or dump it as JSON."""
    from .files import parse_file
    from .parser import count_values, serialize_tree

    table = parse_file(args.file, args.encoding, args.strict)

    if args.json:
        sys.stdout.write(serialize_tree(table).decode('utf-8'))
        sys.stdout.write("\n")
        return 0

    print(f"Parsed: {args.file}")
    print(f"Top-level entries: {len(table.entries)}")
    print(f"Total values: {count_values(table) - 1}")

    if args.verbose:
        for entry in table.entries[:20]:
            print(f"  - {entry.key if entry.key is not None else '<no key>'}: {entry.value.type_name}")
        if len(table.entries) > 20:
            print(f"  ... and {len(table.entries) - 20} more")

    return 0


def cmd_format(args):
    """Re-serialize a data file."""
    from .files import parse_file, write_text
    from .parser import serialize

    table = parse_file(args.file, args.encoding, args.strict)
    result = serialize(table, legacy_quoting=args.legacy_quoting)

    if args.inplace:
        write_text(args.file, result, args.encoding)
        logger.info(f"Formatted: {args.file}")
    else:
        sys.stdout.write(result)

    return 0


def cmd_get(args):
    """Print the value of a top-level key."""
    from .files import parse_file
    from .parser import Table, Text, serialize

    table = parse_file(args.file, args.encoding, args.strict)
    value = table.get(args.key)

    if value is None:
        print(f"Key not found: {args.key}", file=sys.stderr)
        return 1

    if isinstance(value, Text):
        print(value.text)
    else:
        holder = Table()
        holder.set(args.key, value)
        sys.stdout.write(serialize(holder))

    return 0


def cmd_load(args):
    """Load the game data named by the configuration."""
    from .config import load_config
    from .loader import load_countries, load_provinces, prepare_output

    config = load_config(args.config)
    prepare_output(config)
    provinces = load_provinces(config)
    countries = load_countries(config)
    logger.info(f"Loaded {len(provinces)} provinces and {len(countries)} countries for {config.mod_name!r}")
    return 0


def _add_file_options(p):
    p.add_argument('file', help='Data file')
    p.add_argument('--encoding', default='windows-1252', help='File encoding (default: windows-1252)')
    p.add_argument('--strict', action='store_true', help='Fail on trailing unparsed input')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='eu4data',
        description="Europa Universalis IV data toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    eu4data parse history/provinces/1-Uppland.txt
    eu4data parse common/countries/Sweden.txt --json
    eu4data format history/provinces/1-Uppland.txt --inplace
    eu4data get history/provinces/1-Uppland.txt owner
"""
    )
    parser.add_argument('--version', action='version', version=f'eu4data {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # parse
    parse_p = subparsers.add_parser('parse', help='Parse a data file')
    _add_file_options(parse_p)
    parse_p.add_argument('--json', action='store_true', help='Print the parsed tree as JSON')
    parse_p.set_defaults(func=cmd_parse)

    # format
    format_p = subparsers.add_parser('format', help='Re-serialize a data file')
    _add_file_options(format_p)
    format_p.add_argument('-i', '--inplace', action='store_true', help='Modify in place')
    format_p.add_argument('--legacy-quoting', action='store_true',
                          help='Quote only on backslash or space, escape only backslashes')
    format_p.set_defaults(func=cmd_format)

    # get
    get_p = subparsers.add_parser('get', help='Print a top-level value')
    _add_file_options(get_p)
    get_p.add_argument('key', help='Top-level key')
    get_p.set_defaults(func=cmd_get)

    # load
    load_p = subparsers.add_parser('load', help='Load game data from Config.toml')
    load_p.add_argument('-c', '--config', type=Path, help='Config file (default: ./config/Config.toml)')
    load_p.set_defaults(func=cmd_load)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    try:
        return args.func(args)
    except Eu4DataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
