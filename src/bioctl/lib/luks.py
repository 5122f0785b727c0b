# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""LUKS volume operations backed by the encryption manager (``cryptsetup``)."""

from .core.config import crypt_tool
from .core.tools import run_tool
from .errors import UsageError

# key-management operation -> cryptsetup action
KEY_OPERATIONS = {
    "add": "luksAddKey",
    "remove": "luksRemoveKey",
}


def format_command(device: str) -> list[str]:
    return [crypt_tool(), "luksFormat", device]


def close_command(device: str) -> list[str]:
    return [crypt_tool(), "luksClose", device]


def key_command(device: str, operation: str) -> list[str]:
    """Return the key slot argv for *operation* (``add`` or ``remove``).

    Raises :class:`UsageError` for any other operation.
    """
    action = KEY_OPERATIONS.get(operation)
    if action is None:
        raise UsageError("Unknown key management operation")
    return [crypt_tool(), action, device]


def encrypt_disk(device: str) -> None:
    """Format *device* as a LUKS volume; cryptsetup prompts for confirmation and passphrase."""
    run_tool(format_command(device), "Encrypting disk", "Failed to encrypt disk")


def decrypt_disk(name: str) -> None:
    """Close the opened LUKS mapping *name*."""
    run_tool(close_command(name), "Decrypting disk", "Failed to decrypt disk")


def manage_key(device: str, operation: str) -> None:
    # built before logging so an unknown operation logs no INFO line
    argv = key_command(device, operation)
    run_tool(argv, "Managing encryption key", "Failed to manage encryption key")
