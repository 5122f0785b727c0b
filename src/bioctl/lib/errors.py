# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Exception types raised by the service layer.

All of them end the current invocation with exit status 1. The CLI entry
point is the only place that catches them.
"""


class BioctlError(Exception):
    """Base class for every failure that terminates a bioctl invocation."""


class PrivilegeError(BioctlError):
    """The process is not running with superuser privileges."""


class MissingToolError(BioctlError):
    """A required external tool could not be found on ``PATH``."""


class UsageError(BioctlError):
    """Missing, unknown or invalid command-line arguments."""


class ExternalToolFailure(BioctlError):
    """The wrapped tool exited with a non-zero status.

    ``returncode`` is ``None`` when the process could not be started at all.
    """

    def __init__(self, message: str, argv: list[str], returncode: int | None) -> None:
        super().__init__(message)
        self.argv = argv
        self.returncode = returncode
