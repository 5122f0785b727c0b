# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""RAID array commands: create, add, remove, status, repair."""

import argparse

from ...lib.raid import add_disk, array_status, create_array, remove_disk, repair_arrays
from ._completers import complete_block_devices, complete_md_devices, set_completer


def split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Return (argv for argparse, trailing ``create`` operands kept verbatim).

    argparse drops a ``--`` separator even from REMAINDER arguments, so the
    operands after ``create <device> <level> <disk-count>`` bypass it.
    """
    if argv and argv[0] == "create":
        return argv[:4], argv[4:]
    return argv, []


def register(subparsers) -> None:
    """Register RAID subcommands.

    Subcommands have no ``-h``; an option in an operand slot is a usage error.
    """
    # create
    p_create = subparsers.add_parser("create", help="Create a new RAID array", add_help=False)
    set_completer(
        p_create.add_argument("device", help="Array device to create (e.g. /dev/md0)"),
        complete_md_devices,
    )
    p_create.add_argument("level", help="RAID level passed as --level (e.g. 1, 5, raid10)")
    p_create.add_argument("disk_count", help="Number of member devices (--raid-devices)")
    set_completer(
        p_create.add_argument(
            "extra",
            nargs=argparse.REMAINDER,
            help="Member devices and further mdadm arguments, passed through unchanged",
        ),
        complete_block_devices,
    )

    # add / remove
    for name, help_text, target_help in (
        ("add", "Add a disk to a RAID array", "Disk to add"),
        ("remove", "Remove a disk from a RAID array", "Disk to remove"),
    ):
        p = subparsers.add_parser(name, help=help_text, add_help=False)
        set_completer(p.add_argument("device", help="Array device"), complete_md_devices)
        set_completer(p.add_argument("target", help=target_help), complete_block_devices)

    # status
    p_status = subparsers.add_parser(
        "status", help="Show the detail report of a RAID array", add_help=False
    )
    set_completer(p_status.add_argument("device", help="Array device"), complete_md_devices)

    # repair
    subparsers.add_parser("repair", help="Reassemble all arrays found by scanning", add_help=False)


def dispatch(args) -> bool:
    """Handle RAID commands.  Returns True if handled."""
    if args.cmd == "create":
        create_array(args.device, args.level, args.disk_count, args.extra)
        return True
    if args.cmd == "add":
        add_disk(args.device, args.target)
        return True
    if args.cmd == "remove":
        remove_disk(args.device, args.target)
        return True
    if args.cmd == "status":
        array_status(args.device)
        return True
    if args.cmd == "repair":
        repair_arrays()
        return True
    return False
