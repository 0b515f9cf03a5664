"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Field elements are exchanged as `0x` prefixed hexadecimal strings on the
Starknet RPC surface, and network names (chain identifiers) as short ASCII
strings packed into a single field element.
"""
from ..crypto.finite_field import Felt, to_felt


def has_hex_prefix(hex_string: str) -> bool:
    """
    Check if a hex string starts with hex prefix (0x).
    """
    return hex_string.startswith("0x")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Remove 0x prefix from a hex string if present. This function returns the
    passed hex string if it isn't prefixed with 0x.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_felt(hex_string: str) -> Felt:
    """
    Convert hex string to a field element.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted, with or without `0x`.

    Returns
    -------
    felt : `Felt`
        The decoded value. Raises `FeltOverflowError` when it is not a
        field element.
    """
    return to_felt(int(remove_hex_prefix(hex_string), 16))


def felt_to_hex(value: Felt) -> str:
    """
    Convert a field element to a `0x` prefixed, unpadded hex string.
    """
    return hex(value)


def short_string_to_felt(text: str) -> Felt:
    """
    Pack an ASCII string of at most 31 characters into a field element, most
    significant byte first.
    """
    encoded = text.encode("ascii")
    if len(encoded) > 31:
        raise ValueError(f"short string `{text}` is longer than 31 bytes")
    return Felt.from_be_bytes(encoded)
