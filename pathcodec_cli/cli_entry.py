"""
cli_entry.py - CLI Entry Point

Exposes the pathcodec helpers as subcommands, mainly for inspecting stored
configuration values and paths from a shell.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pathcodec import (
    CoreOptions,
    PreconditionError,
    encode_strings,
    decode_strings,
    split_path,
    join_path,
    split_path_last,
    abs_path,
    split_filename,
    has_extension,
    to_int,
    to_int_array,
    contains,
    TimestampGenerator,
)

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="pathcodec",
        description="Text and path helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a recent-files list
  pathcodec encode "C:\\docs\\a.txt" "b;c.txt" --sep ";"

  # Decode it again
  pathcodec decode "C:\\\\docs\\\\a.txt;b\\;c.txt" --json

  # Filename parts
  pathcodec split-name archive.tar.gz

  # Directory containment
  pathcodec contains /home/user /home/user/docs/file.txt
"""
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # list codec
    encode_parser = subparsers.add_parser("encode", help="Encode strings into one string")
    encode_parser.add_argument("parts", nargs="*", help="Strings to encode")
    encode_parser.add_argument("--sep", "-s", type=str, default=None, help="Separator character")

    decode_parser = subparsers.add_parser("decode", help="Decode an encoded string")
    decode_parser.add_argument("text", type=str, help="Encoded string")
    decode_parser.add_argument("--sep", "-s", type=str, default=None, help="Separator character")

    # paths
    split_parser = subparsers.add_parser("split-path", help="Split path into segments")
    split_parser.add_argument("path", type=str, help="Path")

    join_parser = subparsers.add_parser("join-path", help="Join path segments")
    join_parser.add_argument("parts", nargs="*", help="Path segments")

    last_parser = subparsers.add_parser("split-last", help="Split path at the last separator")
    last_parser.add_argument("path", type=str, help="Path")

    abs_parser = subparsers.add_parser("abspath", help="Absolute path")
    abs_parser.add_argument("path", type=str, help="Path")
    abs_parser.add_argument("--native", action="store_true", help="Keep platform separators")

    contains_parser = subparsers.add_parser("contains", help="Check directory containment")
    contains_parser.add_argument("directory", type=str, help="Directory path")
    contains_parser.add_argument("path", type=str, help="File or directory path")

    # filenames
    name_parser = subparsers.add_parser("split-name", help="Split filename into base and extension")
    name_parser.add_argument("name", type=str, help="Filename")

    ext_parser = subparsers.add_parser("has-ext", help="Check filename extension")
    ext_parser.add_argument("name", type=str, help="Filename")
    ext_parser.add_argument("extensions", nargs="+", help="Extensions (without dot)")

    # numbers
    int_parser = subparsers.add_parser("to-int", help="Parse an integer")
    int_parser.add_argument("value", type=str, help="Text to parse")
    int_parser.add_argument("--default", "-d", type=int, default=0, help="Fallback value")

    ints_parser = subparsers.add_parser("to-ints", help="Parse a list of integers")
    ints_parser.add_argument("value", type=str, help="Text to parse")
    ints_parser.add_argument("--default", "-d", type=int, nargs="*", default=[], help="Fallback values")

    # timestamps
    ts_parser = subparsers.add_parser("timestamp", help="Generate unique timestamps")
    ts_parser.add_argument("--count", "-n", type=int, default=1, help="Number of timestamps")

    return parser


def _print_list(values: List, as_json: bool) -> None:
    if as_json:
        print(json.dumps(values, ensure_ascii=False))
        return
    for value in values:
        print(value)


def _print_bool(value: bool, as_json: bool) -> int:
    print(json.dumps(value) if as_json else str(value).lower())
    return 0 if value else 1


def _options(args) -> CoreOptions:
    """Build options from command-line arguments"""
    sep = getattr(args, "sep", None)
    if sep is None:
        return CoreOptions()
    return CoreOptions(list_separator=sep)


def cmd_encode(args):
    """Handle encode command"""
    options = _options(args)
    print(encode_strings(options.list_separator, args.parts))
    return 0


def cmd_decode(args):
    """Handle decode command"""
    options = _options(args)
    _print_list(decode_strings(options.list_separator, args.text), args.json)
    return 0


def cmd_split_path(args):
    _print_list(split_path(args.path), args.json)
    return 0


def cmd_join_path(args):
    print(join_path(*args.parts))
    return 0


def cmd_split_last(args):
    _print_list(list(split_path_last(args.path)), args.json)
    return 0


def cmd_abspath(args):
    path = abs_path(args.path)
    if args.json:
        print(json.dumps({"normalized": path.normalized, "native": path.native}, ensure_ascii=False))
    else:
        print(path.native if args.native else path.normalized)
    return 0


def cmd_contains(args):
    return _print_bool(contains(args.directory, args.path), args.json)


def cmd_split_name(args):
    _print_list(list(split_filename(args.name)), args.json)
    return 0


def cmd_has_ext(args):
    return _print_bool(has_extension(args.name, *args.extensions), args.json)


def cmd_to_int(args):
    print(to_int(args.value, args.default))
    return 0


def cmd_to_ints(args):
    _print_list(to_int_array(args.value, args.default), args.json)
    return 0


def cmd_timestamp(args):
    """Handle timestamp command"""
    if args.count < 1:
        print(f"Error: Count must be positive: {args.count}", file=sys.stderr)
        return 2
    generator = TimestampGenerator()
    _print_list([generator.next() for _ in range(args.count)], args.json)
    return 0


COMMANDS = {
    "encode": cmd_encode,
    "decode": cmd_decode,
    "split-path": cmd_split_path,
    "join-path": cmd_join_path,
    "split-last": cmd_split_last,
    "abspath": cmd_abspath,
    "contains": cmd_contains,
    "split-name": cmd_split_name,
    "has-ext": cmd_has_ext,
    "to-int": cmd_to_int,
    "to-ints": cmd_to_ints,
    "timestamp": cmd_timestamp,
}


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except PreconditionError as e:
        logger.debug("Command %s rejected its arguments", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
