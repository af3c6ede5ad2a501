"""
Token definitions for the calclex lexer.

This module defines the token types of the expression language:
- Literals (64-bit integers and floats)
- Identifiers (variable names)
- Assignment and arithmetic operators
- Parentheses
- End of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in the expression language.

    The set is closed: every consumer (labels, CLI output) covers each member.
    """

    # Special
    EOF = auto()                    # End of input

    # Literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, .5, 2.

    # Identifiers
    IDENTIFIER = auto()             # x, rate_2, _tmp

    # Operators
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and for the CLI's verbose output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # int for INTEGER, float for FLOAT, name for IDENTIFIER
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def label(self) -> str:
        """Fixed textual category of this token, as printed by drivers."""
        return TOKEN_LABELS[self.type]

    @property
    def is_literal(self) -> bool:
        return self.type in (TokenType.INTEGER, TokenType.FLOAT)

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATORS.values()

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


# Single-character operators and punctuation, looked up by the lexer
OPERATORS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

TOKEN_LABELS = {
    TokenType.INTEGER: "integer",
    TokenType.FLOAT: "float",
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MULTIPLY: "*",
    TokenType.DIVIDE: "/",
    TokenType.IDENTIFIER: "variable",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.EOF: "end of file",
}

# Integer literals are 64-bit signed
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
INT64_MAX_DIGITS = len(str(INT64_MAX))

DECIMAL_POINT = "."

# str.isspace() accepts these, but they are not Unicode White_Space
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")
