"""
Transactions are the only way to change the state of Starknet. Each
transaction variant carries exactly the fields its hash commits to; fields
that only matter for execution (signatures, resource bounds, class
definitions) are left to the layers that need them.

Field elements are stored as [`Felt`]. Calldata is an ordered tuple of field
elements, hashed as a single sub-sequence.

[`Felt`]: ref:starknet_hash.crypto.finite_field.Felt
"""

from dataclasses import dataclass
from typing import Tuple, Union

from ethereum_types.frozen import slotted_freezable

from .crypto.finite_field import Felt


@slotted_freezable
@dataclass
class InvokeTransactionV0:
    """
    Call to an entry point of a contract, without account abstraction.
    """

    contract_address: Felt
    entry_point_selector: Felt
    calldata: Tuple[Felt, ...]
    max_fee: Felt


@slotted_freezable
@dataclass
class InvokeTransactionV1:
    """
    Call through the `__execute__` entry point of an account contract.
    """

    sender_address: Felt
    calldata: Tuple[Felt, ...]
    max_fee: Felt
    nonce: Felt


@slotted_freezable
@dataclass
class DeclareTransactionV0:
    """
    Declaration of a Cairo 0 class, without a nonce.
    """

    sender_address: Felt
    max_fee: Felt
    class_hash: Felt


@slotted_freezable
@dataclass
class DeclareTransactionV1:
    """
    Declaration of a Cairo 0 class.
    """

    sender_address: Felt
    max_fee: Felt
    nonce: Felt
    class_hash: Felt


@slotted_freezable
@dataclass
class DeclareTransactionV2:
    """
    Declaration of a Sierra class, along with the hash of its compiled CASM.
    """

    sender_address: Felt
    max_fee: Felt
    nonce: Felt
    class_hash: Felt
    compiled_class_hash: Felt


@slotted_freezable
@dataclass
class DeployAccountTransaction:
    """
    Deployment of an account contract, paid for by the account itself.

    The address of the account is not part of the transaction; it is derived
    from the salt, class hash and constructor calldata.
    """

    class_hash: Felt
    contract_address_salt: Felt
    constructor_calldata: Tuple[Felt, ...]
    max_fee: Felt
    nonce: Felt


@slotted_freezable
@dataclass
class DeployTransaction:
    """
    The deprecated, fee-less deployment transaction.
    """

    class_hash: Felt
    contract_address_salt: Felt
    constructor_calldata: Tuple[Felt, ...]


@slotted_freezable
@dataclass
class L1HandlerTransaction:
    """
    Message sent from L1, consumed by an `l1_handler` entry point.
    """

    contract_address: Felt
    entry_point_selector: Felt
    calldata: Tuple[Felt, ...]
    nonce: Felt


InvokeTransaction = Union[InvokeTransactionV0, InvokeTransactionV1]

DeclareTransaction = Union[
    DeclareTransactionV0,
    DeclareTransactionV1,
    DeclareTransactionV2,
]

Transaction = Union[
    InvokeTransactionV0,
    InvokeTransactionV1,
    DeclareTransactionV0,
    DeclareTransactionV1,
    DeclareTransactionV2,
    DeployAccountTransaction,
    DeployTransaction,
    L1HandlerTransaction,
]

UserTransaction = Union[
    InvokeTransactionV0,
    InvokeTransactionV1,
    DeclareTransactionV0,
    DeclareTransactionV1,
    DeclareTransactionV2,
    DeployAccountTransaction,
]
"""
Transactions submitted by users, as opposed to those produced by the
protocol (deploy, L1 handler).
"""
