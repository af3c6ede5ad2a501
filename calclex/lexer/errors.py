"""
Error handling for the calclex lexer.

Provides error reporting with source location information
and suggestions for common typos.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS, INT64_MIN, INT64_MAX


@dataclass
class Diagnostic:
    """A lexer diagnostic with its location and optional help."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot classify the text at the cursor.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestion helpers used when building error messages.

    The lexer itself never recovers; these only enrich the diagnostic.
    """

    # Unicode look-alikes people paste from documents and calculators
    OPERATOR_LOOKALIKES = {
        '×': '*', '⋅': '*', '∗': '*', '·': '*',
        '÷': '/', '∕': '/',
        '−': '-', '–': '-', '—': '-',
        '＋': '+', '＝': '=',
        '（': '(', '）': ')',
    }

    @staticmethod
    def suggest_operator_alternatives(char: str) -> List[str]:
        """Suggest the ASCII operator a look-alike character stands for."""
        replacement = ErrorRecovery.OPERATOR_LOOKALIKES.get(char)
        if replacement is not None and replacement in OPERATORS:
            return [replacement]
        return []


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
    "L005": "Unknown identifier",
    "L007": "Number literal overflow",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no scanning rule accepts."""
    suggestions = ErrorRecovery.suggest_operator_alternatives(char)

    if suggestions:
        help_text = f"Did you mean the ASCII operator '{suggestions[0]}'?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for a numeric literal that does not parse."""
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation, is_float: bool) -> LexerError:
    """Create an error for a numeric literal outside the 64-bit range."""
    if is_float:
        help_text = "Floating-point literals must be finite 64-bit values."
    else:
        help_text = f"Integer literals must be between {INT64_MIN} and {INT64_MAX}."

    return LexerError(
        message=f"Number literal overflow: '{lexeme}'",
        location=location,
        code="L007",
        help_text=help_text
    )


def create_unknown_identifier_error(name: str, location: SourceLocation) -> LexerError:
    """Create an error for an identifier with an invalid shape."""
    return LexerError(
        message=f"Unknown identifier: '{name}'",
        location=location,
        code="L005",
        help_text="Identifiers start with a letter or underscore and contain only "
                  "letters, digits and underscores."
    )
