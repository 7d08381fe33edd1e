"""Command-line driver: print the tokens of constraint files.

Usage:
    verlex [--kinds | --json] [--strict] [--skip-comments] [FILE ...]

With no FILE, or when FILE is -, reads standard input. By default prints
one lexeme per line, as the scanner produced them.

Exit status:
    0  all inputs scanned
    1  --strict and an illegal token was found
    2  an input could not be opened or failed while being read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from verlex import __version__
from verlex.config import ScanConfig
from verlex.errors import IllegalTokenError
from verlex.lexer import Scanner
from verlex.serialization import to_json
from verlex.tokens import Token, TokenKind

EXIT_OK = 0
EXIT_ILLEGAL = 1
EXIT_IO = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verlex",
        description="Tokenize version constraint expressions.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="input files (default: stdin)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--kinds",
        action="store_true",
        help="print LINE:COL, kind and lexeme for each token",
    )
    output.add_argument("--json", action="store_true", help="print each input's tokens as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="stop with exit status 1 at the first illegal token",
    )
    parser.add_argument("--skip-comments", action="store_true", help="omit comment tokens")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_token(token: Token) -> str:
    """Format a token as ``LINE:COL<TAB>KIND<TAB>lexeme``."""
    return f"{token.lineno}:{token.col}\t{token.kind.name}\t{token.value}"


def scan_stream(stream: TextIO, name: str, config: ScanConfig, args: argparse.Namespace) -> int:
    """Scan one input and print its tokens.

    Returns:
        Exit status for this input.
    """
    scanner = Scanner(stream, source_file=name, config=config)
    try:
        if args.json:
            print(to_json(scanner.tokenize()))
        else:
            for token in scanner:
                if args.kinds:
                    print(format_token(token))
                elif token.kind is not TokenKind.EOF:
                    print(token.value)
    except IllegalTokenError as exc:
        print(f"verlex: {exc}", file=sys.stderr)
        return EXIT_ILLEGAL

    if scanner.source_error is not None:
        print(f"verlex: {name}: read failed: {scanner.source_error}", file=sys.stderr)
        return EXIT_IO
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ScanConfig(skip_comments=args.skip_comments, strict=args.strict)

    status = EXIT_OK
    for path in args.files or ["-"]:
        if path == "-":
            status = max(status, scan_stream(sys.stdin, "<stdin>", config, args))
            continue
        try:
            stream = open(path, encoding="utf-8")
        except OSError as exc:
            print(f"verlex: {path}: {exc.strerror}", file=sys.stderr)
            status = max(status, EXIT_IO)
            continue
        with stream:
            status = max(status, scan_stream(stream, path, config, args))
    return status
