#!/usr/bin/env python3
"""
calclex command-line driver.

Reads an expression from a file, from -e, or from stdin and prints one
line per token until end of input. Stops at the first lexical error.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import Lexer, Token, TokenType, LexerError
from .utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_LEXER_ERROR = 1
EXIT_IO_ERROR = 2

VALUE_TOKENS = (TokenType.INTEGER, TokenType.FLOAT, TokenType.IDENTIFIER)


def format_token(token: Token) -> str:
    """Render a token as its label, followed by the value where it has one."""
    if token.type in VALUE_TOKENS:
        return f"{token.label} {token.value}"
    return token.label


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calclex",
        description="Tokenize an arithmetic/assignment expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    calclex program.txt                 # Tokenize a file
    calclex -e "x = 3.5 + (2 - y)"      # Tokenize an expression
    echo "a * 2" | calclex              # Tokenize stdin
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize (default: stdin)')
    parser.add_argument('-e', '--expression',
                        help='Tokenize this expression instead of a file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log each scanned token to stderr')

    return parser


def _create_lexer(args: argparse.Namespace, stdin: TextIO) -> Lexer:
    if args.expression is not None:
        return Lexer.from_string(args.expression, "<expression>")
    if args.file:
        return Lexer.from_file(args.file)
    return Lexer.from_string(stdin.read(), "<stdin>")


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.expression is not None and args.file:
        parser.error("give either a file or --expression, not both")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=stderr,
                            format="%(name)s: %(message)s")
        logging.getLogger("calclex").setLevel(logging.DEBUG)

    try:
        lexer = _create_lexer(args, stdin)
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror or e}", file=stderr)
        return EXIT_IO_ERROR
    except UnicodeDecodeError as e:
        print(f"error: cannot read {args.file}: not valid UTF-8 ({e.reason} at byte {e.start})",
              file=stderr)
        return EXIT_IO_ERROR

    logger.debug("Tokenizing %s", lexer.filename)

    try:
        for token in lexer:
            print(format_token(token), file=stdout)
    except LexerError as e:
        print(str(e), end="", file=stderr)
        return EXIT_LEXER_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
