# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""RAID array operations backed by the RAID manager (``mdadm``).

Each ``*_command`` function only builds the argument vector; the matching
operation logs the action and runs it through :func:`run_tool`.
"""

from collections.abc import Sequence

from .core.config import raid_tool
from .core.tools import run_tool


def create_command(
    device: str, level: str, disk_count: str, extra: Sequence[str] = ()
) -> list[str]:
    """Return ``mdadm --create`` argv; *extra* is appended verbatim."""
    return [
        raid_tool(),
        "--create",
        device,
        f"--level={level}",
        f"--raid-devices={disk_count}",
        *extra,
    ]


def add_command(device: str, target: str) -> list[str]:
    return [raid_tool(), "--add", device, target]


def remove_command(device: str, target: str) -> list[str]:
    return [raid_tool(), "--remove", device, target]


def detail_command(device: str) -> list[str]:
    return [raid_tool(), "--detail", device]


def assemble_command() -> list[str]:
    return [raid_tool(), "--assemble", "--scan"]


def create_array(device: str, level: str, disk_count: str, extra: Sequence[str] = ()) -> None:
    run_tool(
        create_command(device, level, disk_count, extra),
        "Creating RAID array",
        "Failed to create RAID array",
    )


def add_disk(device: str, target: str) -> None:
    run_tool(
        add_command(device, target),
        "Adding disk to RAID array",
        "Failed to add disk to RAID array",
    )


def remove_disk(device: str, target: str) -> None:
    run_tool(
        remove_command(device, target),
        "Removing disk from RAID array",
        "Failed to remove disk from RAID array",
    )


def array_status(device: str) -> None:
    """Print the RAID detail report for *device* (output comes from mdadm itself)."""
    run_tool(detail_command(device), "Checking RAID status", "Failed to check RAID status")


def repair_arrays() -> None:
    """Reassemble every array found by scanning (``mdadm --assemble --scan``)."""
    run_tool(assemble_command(), "Repairing RAID array", "Failed to repair RAID array")
