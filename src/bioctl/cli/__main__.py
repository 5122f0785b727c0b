# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for ``python -m bioctl.cli``."""

from .main import main

if __name__ == "__main__":
    main()
