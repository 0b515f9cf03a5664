"""
Utility Functions For Addresses
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Contract addresses on Starknet are not chosen by the deployer; they are
derived from what is being deployed. Deploy and deploy account transactions
commit to the derived address, so it has to be computed before their own
hash.
"""
from typing import Sequence, SupportsInt

from ..crypto.finite_field import Felt, felt_constant, to_felt, to_felts
from ..crypto.hash import Hasher, hash_on_elements

PREFIX_CONTRACT_ADDRESS = felt_constant(b"STARKNET_CONTRACT_ADDRESS")

ADDR_BOUND = 2**251 - 256
"""
Exclusive upper bound of contract addresses.
"""


def derive_address(
    salt: SupportsInt,
    class_hash: SupportsInt,
    constructor_calldata: Sequence[SupportsInt],
    hasher: Hasher,
) -> Felt:
    """
    Computes the address of a contract deployed from a class.

    The deployer address is always zero: the address only depends on what is
    deployed, not on who deploys it.

    Parameters
    ----------
    salt :
        Contract address salt chosen by the deployer.
    class_hash :
        Hash of the class being instantiated.
    constructor_calldata :
        Arguments passed to the constructor.
    hasher :
        Multi-input hash used for the derivation.

    Returns
    -------
    address : `Felt`
        The computed address, always lower than `ADDR_BOUND`.
    """
    constructor_calldata_hash = hash_on_elements(
        hasher, to_felts(constructor_calldata)
    )
    computed_address = hash_on_elements(
        hasher,
        (
            PREFIX_CONTRACT_ADDRESS,
            Felt(0),
            to_felt(salt),
            to_felt(class_hash),
            constructor_calldata_hash,
        ),
    )
    return Felt(int(computed_address) % ADDR_BOUND)
