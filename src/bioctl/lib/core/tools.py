# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Lookup and execution of the wrapped external tools."""

import shutil
import subprocess

from ..errors import ExternalToolFailure, MissingToolError
from ..util.logging_utils import log_info
from .config import crypt_tool, raid_tool


def command_exists(name: str) -> bool:
    """Return True if *name* resolves to an executable on ``PATH``."""
    return shutil.which(name) is not None


def require_tools() -> None:
    """Raise :class:`MissingToolError` unless both wrapped tools are installed."""
    raid, crypt = raid_tool(), crypt_tool()
    if not command_exists(raid) or not command_exists(crypt):
        raise MissingToolError(f"Required commands {raid} or {crypt} not found.")


def run_tool(argv: list[str], action: str, failure: str) -> None:
    """Log *action*, then run *argv* in the foreground.

    The child inherits stdin, stdout and stderr so the tool's own output and
    passphrase prompts reach the terminal unchanged. No shell is involved.
    A non-zero exit status, a tool that cannot be started, or Ctrl-C while
    the tool runs raises :class:`ExternalToolFailure` carrying *failure* as
    its message.
    """
    log_info(action)
    try:
        result = subprocess.run(argv, check=False)  # noqa: S603
    except OSError as e:
        raise ExternalToolFailure(failure, argv, None) from e
    except KeyboardInterrupt:
        # the terminal also delivered SIGINT to the child; subprocess.run has reaped it
        raise ExternalToolFailure(failure, argv, None) from None
    if result.returncode != 0:
        raise ExternalToolFailure(failure, argv, result.returncode)
