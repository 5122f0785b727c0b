# SPDX-FileCopyrightText: 2026 The bioctl Authors
#
# SPDX-License-Identifier: Apache-2.0

"""Encryption commands: encrypt, decrypt, key-management."""

from ...lib.luks import KEY_OPERATIONS, decrypt_disk, encrypt_disk, manage_key
from ._completers import complete_block_devices, complete_mapper_names, set_completer


def _complete_key_operations(prefix, parsed_args, **kwargs):  # pragma: no cover
    return [op for op in KEY_OPERATIONS if op.startswith(prefix)]


def register(subparsers) -> None:
    """Register LUKS subcommands."""
    p_encrypt = subparsers.add_parser(
        "encrypt", help="Format a disk as a LUKS volume", add_help=False
    )
    set_completer(p_encrypt.add_argument("device", help="Disk to format"), complete_block_devices)

    p_decrypt = subparsers.add_parser("decrypt", help="Close an opened LUKS volume", add_help=False)
    set_completer(
        p_decrypt.add_argument("device", help="Mapping name of the opened volume"),
        complete_mapper_names,
    )

    p_keys = subparsers.add_parser(
        "key-management", help="Add or remove a passphrase of a LUKS volume", add_help=False
    )
    set_completer(p_keys.add_argument("device", help="LUKS device"), complete_block_devices)
    # validated by manage_key so an unknown operation gets its own message
    set_completer(
        p_keys.add_argument("operation", metavar="{add,remove}", help="Key slot operation"),
        _complete_key_operations,
    )


def dispatch(args) -> bool:
    """Handle LUKS commands.  Returns True if handled."""
    if args.cmd == "encrypt":
        encrypt_disk(args.device)
        return True
    if args.cmd == "decrypt":
        decrypt_disk(args.device)
        return True
    if args.cmd == "key-management":
        manage_key(args.device, args.operation)
        return True
    return False
