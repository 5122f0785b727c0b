# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Service layer: RAID and LUKS operations plus their shared plumbing."""
