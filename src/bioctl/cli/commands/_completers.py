"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

DEV_ROOT = Path("/dev")
SYS_BLOCK_ROOT = Path("/sys/class/block")


def _filter(candidates: Iterable[str], prefix: str) -> list[str]:
    names = sorted(set(candidates))
    if prefix:
        names = [n for n in names if n.startswith(prefix)]
    return names


def complete_md_devices(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return md array device paths (``/dev/md0``, ``/dev/md/name``) matching *prefix*."""
    try:
        found = [str(p) for p in DEV_ROOT.glob("md[0-9]*")]
        found += [str(p) for p in (DEV_ROOT / "md").glob("*")]
    except OSError:
        return []
    return _filter(found, prefix)


def complete_block_devices(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return ``/dev/<name>`` for every block device the kernel lists."""
    try:
        found = [str(DEV_ROOT / p.name) for p in SYS_BLOCK_ROOT.iterdir()]
    except OSError:
        return []
    return _filter(found, prefix)


def complete_mapper_names(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return opened device-mapper names (``/dev/mapper/*`` minus ``control``)."""
    try:
        found = [p.name for p in (DEV_ROOT / "mapper").iterdir() if p.name != "control"]
    except OSError:
        return []
    return _filter(found, prefix)


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*, ignoring missing argcomplete."""
    action.completer = fn  # type: ignore[attr-defined]
