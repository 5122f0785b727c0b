# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Environment-driven settings: log location and wrapped tool names.

bioctl reads no configuration files. Each setting is an environment
variable with a documented default; empty values fall back to the default.
"""

import os
from pathlib import Path

APP_NAME = "bioctl"

DEFAULT_LOG_FILE = Path("/var/log") / "bioctl_linux.log"
DEFAULT_RAID_TOOL = "mdadm"
DEFAULT_CRYPT_TOOL = "cryptsetup"


def _env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def log_file_path() -> Path:
    """
    Operation log file.

    Priority:
      1. BIOCTL_LOG_FILE
      2. /var/log/bioctl_linux.log
    """
    env = _env("BIOCTL_LOG_FILE")
    if env:
        return Path(env).expanduser()
    return DEFAULT_LOG_FILE


def raid_tool() -> str:
    """RAID manager executable (``BIOCTL_RAID_TOOL``, default ``mdadm``)."""
    return _env("BIOCTL_RAID_TOOL") or DEFAULT_RAID_TOOL


def crypt_tool() -> str:
    """Disk-encryption manager executable (``BIOCTL_CRYPT_TOOL``, default ``cryptsetup``)."""
    return _env("BIOCTL_CRYPT_TOOL") or DEFAULT_CRYPT_TOOL
