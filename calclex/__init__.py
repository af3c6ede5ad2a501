"""
calclex - lexical analysis for arithmetic/assignment expressions

Architecture:
    calclex/
    ├── lexer/           # Tokens, diagnostics and the Lexer itself
    ├── utils/           # Logging helpers
    └── cli.py           # `calclex` command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string, tokenize_file

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_string",
    "tokenize_file",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
