"""
calclex Lexer - turns expression text into tokens

A forward-only cursor over the source string. Each call to
get_next_token() looks at the cached current character and hands off
to one of the scanners: whitespace, number, identifier or the
single-character operator table.

xwest
"""

import math
from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, OPERATORS, INT64_MAX, INT64_MAX_DIGITS,
    DECIMAL_POINT, INFORMATION_SEPARATORS
)
from .errors import (
    LexerError,
    create_invalid_character_error, create_invalid_number_error,
    create_number_overflow_error, create_unknown_identifier_error
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """
    Lexical analyzer for arithmetic/assignment expressions.

    Produces one token per get_next_token() call and EOF once the input is
    exhausted. Errors are raised as LexerError and are never recovered from
    internally; the cursor is left where the error was found.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            filename: Name used in source locations for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = source[0] if source else None

    @classmethod
    def from_string(cls, source: str, filename: str = "<string>") -> "Lexer":
        return cls(source, filename)

    @classmethod
    def from_file(cls, filepath: str) -> "Lexer":
        """
        Create a lexer over a file's contents.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            source = f.read()

        return cls(source, str(filepath))

    def advance(self):
        """Move the cursor one character forward and refresh current_char."""
        if self.current_char is None:
            # Already past the end
            return

        if self.current_char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self):
        while self.current_char is not None and self._is_whitespace(self.current_char):
            self.advance()

    def scan_number(self) -> Token:
        """
        Scan an integer or float literal.

        Digits and at most one decimal point are accepted. A second decimal
        point is left in place, so "1.2.3" scans as 1.2 and then .3.
        """
        location = self._location()
        start_pos = self.pos
        seen_point = False

        while self.current_char is not None:
            if self.current_char.isdecimal():
                self.advance()
            elif self.current_char == DECIMAL_POINT and not seen_point:
                seen_point = True
                self.advance()
            else:
                break

        lexeme = self.source[start_pos:self.pos]

        if seen_point:
            return self._make_float(lexeme, location)
        return self._make_integer(lexeme, location)

    def _make_integer(self, lexeme: str, location: SourceLocation) -> Token:
        # Leading zeros never change the value, however many there are
        significant = lexeme.lstrip("0")
        if len(significant) > INT64_MAX_DIGITS:
            raise create_number_overflow_error(lexeme, location, is_float=False)

        value = int(significant) if significant else 0
        if value > INT64_MAX:
            raise create_number_overflow_error(lexeme, location, is_float=False)

        return Token(TokenType.INTEGER, lexeme, value, location)

    def _make_float(self, lexeme: str, location: SourceLocation) -> Token:
        try:
            value = float(lexeme)
        except ValueError:
            raise create_invalid_number_error(
                lexeme,
                location,
                "A decimal point must be preceded or followed by at least one digit."
            )

        if not math.isfinite(value):
            raise create_number_overflow_error(lexeme, location, is_float=True)

        return Token(TokenType.FLOAT, lexeme, value, location)

    def scan_identifier(self) -> Token:
        """Scan a variable name made of letters, digits and underscores."""
        location = self._location()
        start_pos = self.pos

        while self.current_char is not None and self._is_identifier_continue(self.current_char):
            self.advance()

        name = self.source[start_pos:self.pos]

        # Unreachable while the loop above only admits identifier characters
        if not self._is_valid_identifier(name):
            raise create_unknown_identifier_error(name, location)

        return Token(TokenType.IDENTIFIER, name, name, location)

    def get_next_token(self) -> Token:
        """
        Return the next token, or EOF once the input is exhausted.

        Raises:
            LexerError: On an invalid character or a malformed literal
        """
        while self.current_char is not None:
            char = self.current_char

            if self._is_whitespace(char):
                self.skip_whitespace()
                continue

            try:
                if self._is_identifier_start(char):
                    token = self.scan_identifier()
                elif char.isdecimal() or char == DECIMAL_POINT:
                    token = self.scan_number()
                elif char in OPERATORS:
                    location = self._location()
                    self.advance()
                    token = Token(OPERATORS[char], char, None, location)
                else:
                    raise create_invalid_character_error(char, self._location())
            except LexerError as error:
                logger.debug("Lexer error %s at %s: %s", error.code, error.location, error.message)
                raise

            logger.debug("Scanned %s at %s", token, token.location)
            return token

        return Token(TokenType.EOF, "", None, self._location())

    def tokenize(self) -> List[Token]:
        """
        Pull tokens from the current position up to and including EOF.

        Raises:
            LexerError: The first error encountered; no tokens are skipped
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.get_next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    @staticmethod
    def _is_whitespace(char: str) -> bool:
        return char.isspace() and char not in INFORMATION_SEPARATORS

    @staticmethod
    def _is_identifier_start(char: str) -> bool:
        return char.isalpha() or char == '_'

    @staticmethod
    def _is_identifier_continue(char: str) -> bool:
        return char.isalnum() or char == '_'

    def _is_valid_identifier(self, name: str) -> bool:
        return (bool(name) and self._is_identifier_start(name[0]) and
                all(self._is_identifier_continue(c) for c in name))


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    return Lexer.from_file(filepath).tokenize()
