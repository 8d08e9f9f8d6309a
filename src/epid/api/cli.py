"""
Command-line interface for EPID.

Converts IPv4 addresses to three-word identifiers and back, generates
random identifiers, and runs an interactive line loop.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

import psycopg

from ..config import Settings
from ..core.dictionary import WordDictionary, default_dictionary, load_words
from ..core.generate import generate_epid
from ..core.ipv4 import epid3_to_ipv4, ipv4_to_epid3

BAD_IP = "<bad IP>"
BAD_EPID3 = "<bad EPID3>"
UNKNOWN_COMMAND = "Unknown command. Try ip or epid."


def get_dictionary(args: argparse.Namespace) -> WordDictionary:
    """Pick the word source from the command-line options."""
    if args.db:
        from ..db.postgres import load_dictionary

        return load_dictionary()
    if args.words:
        return load_words(args.words)
    return default_dictionary()


def handle_line(line: str, dictionary: WordDictionary) -> str | None:
    """Answer one loop command. Returns None for quit."""
    tokens = line.split()
    if not tokens:
        return ""
    command, rest = tokens[0], tokens[1:]
    if command == "quit":
        return None
    if command == "ip":
        result = ipv4_to_epid3(rest[0], dictionary) if len(rest) == 1 else None
        return result or BAD_IP
    if command == "epid":
        result = epid3_to_ipv4(rest[0], dictionary) if len(rest) == 1 else None
        return result or BAD_EPID3
    return UNKNOWN_COMMAND


def run_loop(lines: Iterable[str], dictionary: WordDictionary, out: TextIO) -> int:
    """Process commands until quit or end of input."""
    for line in lines:
        reply = handle_line(line, dictionary)
        if reply is None:
            break
        if reply:
            print(reply, file=out, flush=True)
    return 0


def cmd_ip(args: argparse.Namespace) -> int:
    """Convert an IPv4 address to an EPID3."""
    result = ipv4_to_epid3(args.address, get_dictionary(args))
    print(result or BAD_IP)
    return 0 if result else 1


def cmd_epid(args: argparse.Namespace) -> int:
    """Convert an EPID3 to an IPv4 address."""
    result = epid3_to_ipv4(args.identifier, get_dictionary(args))
    print(result or BAD_EPID3)
    return 0 if result else 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Print random identifiers."""
    dictionary = get_dictionary(args)
    for _ in range(args.count):
        print(generate_epid(args.words_per_id, dictionary))
    return 0


def cmd_repl(args: argparse.Namespace) -> int:
    """Read ip/epid/quit commands from stdin."""
    return run_loop(sys.stdin, get_dictionary(args), sys.stdout)


def cmd_load_words(args: argparse.Namespace) -> int:
    """Store a word file in PostgreSQL."""
    from ..db.postgres import connect, init_schema, store_words

    dictionary = load_words(args.file)
    conn = connect()
    try:
        init_schema(conn)
        store_words(conn, dictionary)
    finally:
        conn.close()
    print(f"Stored {len(dictionary)} words")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="epid",
        description="EPID - IPv4 addresses as three memorable words",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--words",
        metavar="FILE",
        help="Word list file (default: $EPID_WORDS_FILE or the bundled list)",
    )
    parser.add_argument(
        "--db",
        action="store_true",
        help="Load the word list from PostgreSQL",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    ip_parser = subparsers.add_parser("ip", help="IPv4 address to EPID3")
    ip_parser.add_argument("address", help="Dotted-quad address, e.g. 192.168.1.1")
    ip_parser.set_defaults(func=cmd_ip)

    epid_parser = subparsers.add_parser("epid", help="EPID3 to IPv4 address")
    epid_parser.add_argument("identifier", help="Three words joined by '.'")
    epid_parser.set_defaults(func=cmd_epid)

    generate_parser = subparsers.add_parser("generate", help="Random identifiers")
    generate_parser.add_argument(
        "-n", "--words-per-id",
        type=int,
        default=3,
        help="Words per identifier (default: 3)",
    )
    generate_parser.add_argument(
        "-c", "--count",
        type=int,
        default=1,
        help="Number of identifiers (default: 1)",
    )
    generate_parser.set_defaults(func=cmd_generate)

    repl_parser = subparsers.add_parser("repl", help="Interactive ip/epid loop")
    repl_parser.set_defaults(func=cmd_repl)

    load_parser = subparsers.add_parser("load-words", help="Store a word list in PostgreSQL")
    load_parser.add_argument("file", help="Word list, one word per line")
    load_parser.set_defaults(func=cmd_load_words)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        # Default to the interactive loop
        args.func = cmd_repl

    try:
        settings = Settings.from_env()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        if args.words is None:
            args.words = settings.words_file
        return args.func(args)
    except (ValueError, OSError, psycopg.Error) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
