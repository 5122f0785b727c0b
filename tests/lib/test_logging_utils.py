import os
import tempfile
import time
import unittest
import unittest.mock
from pathlib import Path

from bioctl.lib.util.logging_utils import (
    format_log_line,
    log_error,
    log_info,
    log_message,
)
from test_utils import LOG_LINE_RE, read_log_lines


class FormatLogLineTests(unittest.TestCase):
    def test_fixed_format(self) -> None:
        now = time.mktime((2024, 3, 7, 9, 5, 1, 0, 0, -1))
        self.assertEqual(
            format_log_line("INFO", "Creating RAID array", now),
            "2024-03-07 09:05:01 [INFO] Creating RAID array\n",
        )

    def test_current_time_matches_pattern(self) -> None:
        line = format_log_line("ERROR", "Failed to check RAID status")
        self.assertRegex(line.rstrip("\n"), LOG_LINE_RE)


class LogMessageTests(unittest.TestCase):
    def test_appends_one_line_per_call(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "bioctl.log"
            log_file.write_text("existing line\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"BIOCTL_LOG_FILE": str(log_file)}):
                self.assertTrue(log_info("Repairing RAID array"))
                self.assertTrue(log_error("Failed to repair RAID array"))

            lines = read_log_lines(log_file)
            self.assertEqual(len(lines), 3)
            self.assertEqual(lines[0], "existing line")
            self.assertTrue(lines[1].endswith(" [INFO] Repairing RAID array"))
            self.assertTrue(lines[2].endswith(" [ERROR] Failed to repair RAID array"))
            for line in lines[1:]:
                self.assertRegex(line, LOG_LINE_RE)

    def test_missing_directory_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "missing" / "bioctl.log"
            with unittest.mock.patch.dict(os.environ, {"BIOCTL_LOG_FILE": str(log_file)}):
                self.assertFalse(log_message("INFO", "Encrypting disk"))
            self.assertFalse(log_file.parent.exists())

    def test_open_error_is_ignored(self) -> None:
        with unittest.mock.patch("builtins.open", side_effect=PermissionError("denied")):
            self.assertFalse(log_message("ERROR", "Failed to encrypt disk"))

    def test_write_error_is_ignored(self) -> None:
        handle = unittest.mock.mock_open()
        handle.return_value.write.side_effect = OSError("disk full")
        with unittest.mock.patch("builtins.open", handle):
            self.assertFalse(log_message("INFO", "Decrypting disk"))


class ControlCharacterTests(unittest.TestCase):
    """Messages can carry user input; each entry must stay a single line."""

    def test_newlines_are_escaped(self) -> None:
        line = format_log_line("ERROR", "bad: x\n2099-01-01 00:00:00 [INFO] forged\r")
        self.assertEqual(line.count("\n"), 1)
        self.assertTrue(line.endswith("[ERROR] bad: x\\n2099-01-01 00:00:00 [INFO] forged\\r\n"))
        self.assertRegex(line.rstrip("\n"), LOG_LINE_RE)

    def test_other_control_characters_are_escaped(self) -> None:
        line = format_log_line("INFO", "a\tb\x1b[31mc\x00d\x7f")
        self.assertTrue(line.endswith("[INFO] a\\tb\\x1b[31mc\\x00d\\x7f\n"))

    def test_written_entry_is_one_line(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            log_file = Path(td) / "bioctl.log"
            with unittest.mock.patch.dict(os.environ, {"BIOCTL_LOG_FILE": str(log_file)}):
                log_error("x\n2099-01-01 00:00:00 [INFO] forged")
            lines = read_log_lines(log_file)
        self.assertEqual(len(lines), 1)
        self.assertIn("[ERROR] x\\n2099", lines[0])
