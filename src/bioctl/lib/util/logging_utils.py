# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Append-only operation log."""

import time

from ..core.config import log_file_path

INFO = "INFO"
ERROR = "ERROR"

# control characters in a message are logged as escapes; one entry is one line
_ESCAPES = {c: f"\\x{c:02x}" for c in (*range(0x20), 0x7F)}
_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"})


def format_log_line(level: str, message: str, now: float | None = None) -> str:
    """Return ``YYYY-MM-DD HH:MM:SS [LEVEL] message`` in local time, newline-terminated."""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(now))
    return f"{timestamp} [{level}] {message.translate(_ESCAPES)}\n"


def log_message(level: str, message: str) -> bool:
    """Append one line to the operation log.

    Best-effort: the file is opened, appended and closed for every entry, and
    any IO error is ignored so logging never affects the operation itself.
    The parent directory is not created. Returns ``True`` if the line was
    written.
    """
    line = format_log_line(level, message)
    try:
        with open(log_file_path(), "a", encoding="utf-8") as f:
            f.write(line)
    except OSError:
        return False
    return True


def log_info(message: str) -> bool:
    return log_message(INFO, message)


def log_error(message: str) -> bool:
    return log_message(ERROR, message)
