#!/usr/bin/env python3

import argparse
import sys
from typing import NoReturn

from ..lib._util.ansi import red, supports_color
from ..lib.core.privilege import require_root
from ..lib.core.tools import require_tools
from ..lib.core.version import format_version_string, get_version_info
from ..lib.errors import BioctlError, PrivilegeError, UsageError
from ..lib.util.logging_utils import log_error
from .commands import luks, raid

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except Exception:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

COMMAND_MODULES = (raid, luks)

USAGE = (
    "Usage: bioctl {create|add|remove|status|encrypt|decrypt|repair|key-management} [options]\n"
    "  bioctl create <device> <level> <disk-count> [extra-args...]\n"
    "  bioctl add <device> <target>\n"
    "  bioctl remove <device> <target>\n"
    "  bioctl status <device>\n"
    "  bioctl encrypt <device>\n"
    "  bioctl decrypt <device>\n"
    "  bioctl repair\n"
    "  bioctl key-management <device> <add|remove>\n"
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as :class:`UsageError`.

    Subparsers inherit this class, so argparse never exits with status 2.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    version, revision = get_version_info()
    version_string = format_version_string(version, revision)

    parser = _ArgumentParser(
        prog="bioctl",
        description="bioctl – manage RAID arrays (mdadm) and LUKS volumes (cryptsetup)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Must be run as root. Every operation is appended to the log file\n"
            "(BIOCTL_LOG_FILE, default /var/log/bioctl_linux.log).\n"
            "\n"
            "Tools can be overridden with BIOCTL_RAID_TOOL and BIOCTL_CRYPT_TOOL.\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"bioctl {version_string}")
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in COMMAND_MODULES:
        module.register(sub)
    return parser


def print_usage() -> None:
    print(USAGE, end="")


def _fail(message: str) -> NoReturn:
    """Report *message*, log it as ERROR, show usage and exit with status 1."""
    print(f"{red('Error:', supports_color(sys.stderr))} {message}", file=sys.stderr)
    log_error(message)
    print_usage()
    raise SystemExit(1)


def _dispatch(args: argparse.Namespace) -> None:
    for module in COMMAND_MODULES:
        if module.dispatch(args):
            return
    raise UsageError(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    # Enable bash completion if argcomplete is present and activated
    if argcomplete is not None:  # pragma: no cover - shell integration
        try:
            argcomplete.autocomplete(parser)  # type: ignore[attr-defined]
        except Exception:
            pass

    try:
        require_root()
    except PrivilegeError as e:
        print(e, file=sys.stderr)
        raise SystemExit(1) from None

    try:
        if not argv:
            raise UsageError("No command given.")
        require_tools()
        head, passthrough = raid.split_passthrough(argv)
        args = parser.parse_args(head)
        if passthrough:
            args.extra = passthrough
        _dispatch(args)
    except BioctlError as e:
        _fail(str(e))
    except KeyboardInterrupt:
        _fail("Interrupted")


if __name__ == "__main__":
    main()
