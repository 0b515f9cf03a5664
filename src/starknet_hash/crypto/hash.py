"""
Cryptographic Hash Functions
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Starknet transaction hashes are built on a multi-input hash over field
elements (historically Pedersen). This module does not implement that hash;
it only defines the [`Hasher`] interface the hashing rules call into, so any
backend (or a test double) can be plugged in.

The keccak based helpers are used to derive entry point selectors, such as
the one of the `constructor` entry point hashed into deploy transactions.

[`Hasher`]: ref:starknet_hash.crypto.hash.Hasher
"""

from typing import Sequence

from Crypto.Hash import keccak
from ethereum_types.bytes import Bytes, Bytes32
from typing_extensions import Protocol

from .finite_field import Felt, to_felt

Hash32 = Bytes32

STARKNET_KECCAK_MASK = 2**250 - 1


def keccak256(buffer: Bytes) -> Hash32:
    """
    Computes the keccak256 hash of the input `buffer`.

    Parameters
    ----------
    buffer :
        Input for the hashing function.

    Returns
    -------
    hash : `starknet_hash.crypto.hash.Hash32`
        Output of the hash function.
    """
    k = keccak.new(digest_bits=256)
    return Hash32(k.update(buffer).digest())


def starknet_keccak(buffer: Bytes) -> Felt:
    """
    Keccak256 of `buffer`, truncated to its 250 least significant bits so
    that it always fits in the field.
    """
    digest = int.from_bytes(keccak256(buffer), "big")
    return Felt(digest & STARKNET_KECCAK_MASK)


def get_selector_from_name(name: str) -> Felt:
    """
    Entry point selector of the function called `name`.
    """
    return starknet_keccak(name.encode("ascii"))


class Hasher(Protocol):
    """
    Multi-input hash over field elements.

    Implementations must be order sensitive and must define a result for the
    empty sequence.
    """

    def hash_on_elements(self, elements: Sequence[Felt]) -> Felt:
        """
        Reduce the ordered `elements` to a single field element.
        """
        ...


def hash_on_elements(hasher: Hasher, elements: Sequence[Felt]) -> Felt:
    """
    Hash `elements` with `hasher`, checking that the backend returned a
    canonical field element.
    """
    return to_felt(hasher.hash_on_elements(elements))
