"""
Test suite for the calclex command-line driver.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calclex.cli import main, format_token, EXIT_OK, EXIT_LEXER_ERROR, EXIT_IO_ERROR
from calclex.lexer.lexer import tokenize_string


class TestCLI(unittest.TestCase):
    """Test cases for the token-printing driver."""

    def _run(self, argv, stdin_text=""):
        stdout = io.StringIO()
        stderr = io.StringIO()
        status = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
        return status, stdout.getvalue().splitlines(), stderr.getvalue()

    def test_expression(self):
        status, lines, err = self._run(["-e", "x = 3 + 2"])
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(lines, ["variable x", "=", "integer 3", "+", "integer 2", "end of file"])
        self.assertEqual(err, "")

    def test_floats_and_parentheses(self):
        status, lines, _ = self._run(["-e", "(a - 1.5) * 2"])
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(lines, ["(", "variable a", "-", "float 1.5", ")", "*",
                                 "integer 2", "end of file"])

    def test_stdin(self):
        status, lines, _ = self._run([], stdin_text="y / 4\n")
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(lines, ["variable y", "/", "integer 4", "end of file"])

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "expr.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("z = 1")

            status, lines, _ = self._run([path])

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(lines, ["variable z", "=", "integer 1", "end of file"])

    def test_lexer_error_stops_output(self):
        status, lines, err = self._run(["-e", "a # b"])
        self.assertEqual(status, EXIT_LEXER_ERROR)
        self.assertEqual(lines, ["variable a"])
        self.assertIn("ERROR: Invalid character: '#'", err)
        self.assertIn("<expression>:1:3", err)

    def test_file_not_utf8(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "latin1.txt")
            with open(path, "wb") as f:
                f.write(b"x = \xff\xfe 1")

            status, lines, err = self._run([path])

        self.assertEqual(status, EXIT_IO_ERROR)
        self.assertEqual(lines, [])
        self.assertIn("not valid UTF-8", err)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "missing.txt")
            status, lines, err = self._run([missing])

        self.assertEqual(status, EXIT_IO_ERROR)
        self.assertEqual(lines, [])
        self.assertIn("cannot read", err)

    def test_file_and_expression_conflict(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run(["expr.txt", "-e", "x"])
        self.assertEqual(ctx.exception.code, 2)

    def test_format_token(self):
        tokens = tokenize_string("n = 2.5")
        self.assertEqual([format_token(t) for t in tokens],
                         ["variable n", "=", "float 2.5", "end of file"])


if __name__ == '__main__':
    unittest.main()
