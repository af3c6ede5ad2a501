"""
Test suite for lexer diagnostics.

Author: xwest
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calclex.lexer.lexer import tokenize_string
from calclex.lexer.tokens import SourceLocation
from calclex.lexer.errors import (
    LexerError, ErrorRecovery, ERROR_CODES, create_invalid_character_error,
    create_invalid_number_error, create_number_overflow_error,
    create_unknown_identifier_error
)


class TestDiagnostics(unittest.TestCase):
    """Test cases for error construction and rendering."""

    def setUp(self):
        self.location = SourceLocation("calc.txt", 3, 7, 20)

    def test_invalid_character_error(self):
        error = create_invalid_character_error("#", self.location)
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.message, "Invalid character: '#'")
        self.assertIs(error.location, self.location)
        self.assertIn("not valid", error.diagnostic.help_text)
        self.assertEqual(error.diagnostic.suggestions, [])

    def test_non_printable_character(self):
        error = create_invalid_character_error("\x07", self.location)
        self.assertIn("U+0007", error.diagnostic.help_text)

    def test_rendering(self):
        error = create_invalid_character_error("×", self.location)
        rendered = str(error)
        self.assertTrue(rendered.startswith("ERROR: Invalid character: '×'\n"))
        self.assertIn("  --> calc.txt:3:7\n", rendered)
        self.assertIn("help: Did you mean the ASCII operator '*'?", rendered)
        self.assertIn("    - *\n", rendered)

    def test_number_errors(self):
        invalid = create_invalid_number_error(".", self.location, "no digits")
        self.assertEqual(invalid.code, "L003")
        self.assertEqual(invalid.diagnostic.help_text, "no digits")

        int_overflow = create_number_overflow_error("99999999999999999999", self.location, is_float=False)
        self.assertEqual(int_overflow.code, "L007")
        self.assertIn("9223372036854775807", int_overflow.diagnostic.help_text)

        float_overflow = create_number_overflow_error("1e999", self.location, is_float=True)
        self.assertIn("finite", float_overflow.diagnostic.help_text)

    def test_unknown_identifier_error(self):
        error = create_unknown_identifier_error("9lives", self.location)
        self.assertEqual(error.code, "L005")
        self.assertIn("'9lives'", error.message)

    def test_codes_are_documented(self):
        for code in ("L001", "L003", "L005", "L007"):
            self.assertIn(code, ERROR_CODES)

    def test_is_an_exception(self):
        self.assertTrue(issubclass(LexerError, Exception))
        self.assertEqual(create_invalid_character_error("$", self.location).args,
                         ("Invalid character: '$'",))


class TestErrorRecovery(unittest.TestCase):
    """Test cases for look-alike operator suggestions."""

    def test_lookalikes(self):
        cases = {'×': '*', '÷': '/', '−': '-', '–': '-', '＝': '=', '（': '(', '）': ')'}
        for char, expected in cases.items():
            with self.subTest(char=char):
                self.assertEqual(ErrorRecovery.suggest_operator_alternatives(char), [expected])

    def test_no_suggestion(self):
        self.assertEqual(ErrorRecovery.suggest_operator_alternatives("#"), [])

    def test_lexer_attaches_suggestion(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("6 ÷ 3")
        self.assertEqual(ctx.exception.diagnostic.suggestions, ["/"])


if __name__ == '__main__':
    unittest.main()
