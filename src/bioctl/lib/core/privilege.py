# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Superuser check performed before any other work."""

import getpass
import os

from ..errors import PrivilegeError

PRIVILEGE_MESSAGE = "You must be root to run this program."


def is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def require_root() -> None:
    """Raise :class:`PrivilegeError` unless the effective user is root."""
    if not is_root():
        raise PrivilegeError(PRIVILEGE_MESSAGE)
