"""
calclex Lexer Package

Lexical analyzer for arithmetic/assignment expressions such as
``x = 3.5 + (2 - y)``.

Key Features:
- 64-bit integer and float literals
- Identifiers made of letters, digits and underscores
- Single-character operators and parentheses
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, TOKEN_LABELS
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "TOKEN_LABELS",
    "LexerError",
    "Diagnostic",
    "tokenize_string",
    "tokenize_file",
]
