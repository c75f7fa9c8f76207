"""
Tests for colored logging helpers.
"""

import logging
import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from colored_logger import (
    SUCCESS_LEVEL,
    TRACE_LEVEL,
    ColoredFormatter,
    get_colored_logger,
    resolve_level,
)


class TestResolveLevel(unittest.TestCase):
    """Test level name resolution."""

    def test_standard_level_names(self):
        """Standard names should resolve case-insensitively."""
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level("ERROR"), logging.ERROR)

    def test_custom_level_names(self):
        """Custom levels should resolve too."""
        self.assertEqual(resolve_level("trace"), TRACE_LEVEL)
        self.assertEqual(resolve_level("Success"), SUCCESS_LEVEL)

    def test_numeric_level_passes_through(self):
        """Numeric levels should be returned unchanged."""
        self.assertEqual(resolve_level(logging.WARNING), logging.WARNING)

    def test_unknown_level_raises_error(self):
        """Unknown names should raise ValueError."""
        with self.assertRaises(ValueError):
            resolve_level("loud")


class TestColoredFormatter(unittest.TestCase):
    """Test ANSI colouring."""

    def _record(self, level):
        return logging.LogRecord("test", level, __file__, 1, "hello", None, None)

    def test_no_color_when_disabled(self):
        """use_color=False should leave messages plain."""
        formatter = ColoredFormatter("%(message)s", use_color=False)
        with patch("sys.stderr") as stderr:
            stderr.isatty.return_value = True
            self.assertEqual(formatter.format(self._record(logging.ERROR)), "hello")

    def test_no_color_without_terminal(self):
        """Output that is not a terminal should stay plain."""
        formatter = ColoredFormatter("%(message)s")
        with patch("sys.stderr") as stderr:
            stderr.isatty.return_value = False
            self.assertEqual(formatter.format(self._record(logging.ERROR)), "hello")

    def test_color_on_terminal(self):
        """Terminal output should be wrapped in the level colour."""
        formatter = ColoredFormatter("%(message)s")
        with patch("sys.stderr") as stderr:
            stderr.isatty.return_value = True
            message = formatter.format(self._record(logging.ERROR))
        self.assertEqual(message, "\033[31mhello\033[0m")


class TestEnhancedLogger(unittest.TestCase):
    """Test the custom level methods."""

    def test_trace(self):
        """trace should log at TRACE level."""
        with self.assertLogs("test.enhanced", level=TRACE_LEVEL) as cm:
            get_colored_logger("test.enhanced").trace("detail %d", 1)
        self.assertEqual(cm.output, ["TRACE:test.enhanced:detail 1"])

    def test_success(self):
        """success should log at SUCCESS level."""
        with self.assertLogs("test.enhanced", level=logging.INFO) as cm:
            get_colored_logger("test.enhanced").success("done")
        self.assertEqual(cm.output, ["SUCCESS:test.enhanced:done"])

    def test_standard_methods_delegate(self):
        """Standard methods should reach the wrapped logger."""
        with self.assertLogs("test.enhanced", level=logging.WARNING) as cm:
            get_colored_logger("test.enhanced").warning("careful")
        self.assertEqual(cm.output, ["WARNING:test.enhanced:careful"])


if __name__ == "__main__":
    unittest.main()
