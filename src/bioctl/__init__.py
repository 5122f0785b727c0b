# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""bioctl package.

Modules:
- bioctl.cli: CLI entry point package (bioctl)
- bioctl.lib.raid: RAID array operations (mdadm)
- bioctl.lib.luks: Encrypted volume operations (cryptsetup)
- bioctl.lib.core: Configuration, privilege, external tools, version
- bioctl.lib.util: Operation log
- bioctl.lib._util: Internal helpers (ANSI colors)
"""

__all__ = [
    "cli",
    "lib",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("bioctl")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
