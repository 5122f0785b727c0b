# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for bioctl."""
