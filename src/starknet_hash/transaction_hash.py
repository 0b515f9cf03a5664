"""
Transaction Hashes
^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

The hash of a transaction is the multi-input hash of a short, fixed list of
field elements. Which elements, and in which order, depends on the
transaction variant and on the era of the block it was included in.

Every list starts with a domain-separation prefix (the variant name as a
field element) so that two different variants can never produce the same
hash. Calldata is never inlined: it is hashed on its own, and only that hash
goes into the list.

Each variant has its own encoder (`*_elements`) returning the list to hash.
[`compute_hash`] picks the era, calls the right encoder, and hashes the
result.

[`compute_hash`]: ref:starknet_hash.transaction_hash.compute_hash
"""

import logging
from typing import Iterable, List, Optional, SupportsInt, Tuple, Union

from .crypto.finite_field import Felt, felt_constant, to_felt, to_felts
from .crypto.hash import Hasher, get_selector_from_name, hash_on_elements
from .eras import MAINNET_ERA_POLICY, Era, EraPolicy
from .exceptions import TransactionTypeError
from .transactions import (
    DeclareTransactionV0,
    DeclareTransactionV1,
    DeclareTransactionV2,
    DeployAccountTransaction,
    DeployTransaction,
    InvokeTransactionV0,
    InvokeTransactionV1,
    L1HandlerTransaction,
    Transaction,
    UserTransaction,
)
from .utils.address import derive_address

logger = logging.getLogger(__name__)

DECLARE_PREFIX = felt_constant(b"declare")
DEPLOY_ACCOUNT_PREFIX = felt_constant(b"deploy_account")
DEPLOY_PREFIX = felt_constant(b"deploy")
INVOKE_PREFIX = felt_constant(b"invoke")
L1_HANDLER_PREFIX = felt_constant(b"l1_handler")

SIMULATE_TX_VERSION_OFFSET = Felt(2**128)
"""
Added to the version of transactions hashed for simulation (queries), so
that a simulated transaction never has the hash of a real one.
"""

CONSTRUCTOR_ENTRY_POINT_SELECTOR = get_selector_from_name("constructor")

Elements = Tuple[Felt, ...]


def _version(version: int, is_query: bool) -> Felt:
    if is_query:
        return SIMULATE_TX_VERSION_OFFSET + Felt(version)
    return Felt(version)


def invoke_v0_elements(
    tx: InvokeTransactionV0,
    chain_id: Felt,
    is_query: bool,
    era: Era,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a version 0 invoke transaction.

    Legacy blocks hash neither the version nor the max fee.
    """
    calldata_hash = hash_on_elements(hasher, to_felts(tx.calldata))

    if era is Era.LEGACY:
        return (
            INVOKE_PREFIX,
            to_felt(tx.contract_address),
            to_felt(tx.entry_point_selector),
            calldata_hash,
            chain_id,
        )

    return (
        INVOKE_PREFIX,
        _version(0, is_query),
        to_felt(tx.contract_address),
        to_felt(tx.entry_point_selector),
        calldata_hash,
        to_felt(tx.max_fee),
        chain_id,
    )


def invoke_v1_elements(
    tx: InvokeTransactionV1,
    chain_id: Felt,
    is_query: bool,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a version 1 invoke transaction.
    """
    return (
        INVOKE_PREFIX,
        _version(1, is_query),
        to_felt(tx.sender_address),
        Felt(0),  # entry point selector, always `__execute__`
        hash_on_elements(hasher, to_felts(tx.calldata)),
        to_felt(tx.max_fee),
        chain_id,
        to_felt(tx.nonce),
    )


def declare_v0_elements(
    tx: DeclareTransactionV0,
    chain_id: Felt,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a version 0 declare transaction.

    The calldata slot holds the hash of an empty sequence, and the class hash
    is appended at the end, where later versions put the nonce.
    """
    return (
        DECLARE_PREFIX,
        Felt(0),
        to_felt(tx.sender_address),
        Felt(0),
        hash_on_elements(hasher, ()),
        to_felt(tx.max_fee),
        chain_id,
        to_felt(tx.class_hash),
    )


def declare_v1_elements(
    tx: DeclareTransactionV1,
    chain_id: Felt,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a version 1 declare transaction.
    """
    return (
        DECLARE_PREFIX,
        Felt(1),
        to_felt(tx.sender_address),
        Felt(0),
        hash_on_elements(hasher, (to_felt(tx.class_hash),)),
        to_felt(tx.max_fee),
        chain_id,
        to_felt(tx.nonce),
    )


def declare_v2_elements(
    tx: DeclareTransactionV2,
    chain_id: Felt,
    is_query: bool,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a version 2 declare transaction.
    """
    return (
        DECLARE_PREFIX,
        _version(2, is_query),
        to_felt(tx.sender_address),
        Felt(0),
        hash_on_elements(hasher, (to_felt(tx.class_hash),)),
        to_felt(tx.max_fee),
        chain_id,
        to_felt(tx.nonce),
        to_felt(tx.compiled_class_hash),
    )


def deploy_account_elements(
    tx: DeployAccountTransaction,
    chain_id: Felt,
    contract_address: Felt,
    is_query: bool,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a deploy account transaction.

    Parameters
    ----------
    tx :
        The transaction.
    chain_id :
        Identifier of the network.
    contract_address :
        Address of the account, as computed by `derive_address`.
    is_query :
        Whether the hash is for a simulation.
    hasher :
        Multi-input hash used for the calldata.

    Returns
    -------
    elements : `Tuple[Felt, ...]`
        Elements to hash, in order.
    """
    calldata = (
        to_felt(tx.class_hash),
        to_felt(tx.contract_address_salt),
        *to_felts(tx.constructor_calldata),
    )
    return (
        DEPLOY_ACCOUNT_PREFIX,
        _version(1, is_query),
        contract_address,
        Felt(0),
        hash_on_elements(hasher, calldata),
        to_felt(tx.max_fee),
        chain_id,
        to_felt(tx.nonce),
    )


def deploy_elements(
    tx: DeployTransaction,
    chain_id: Felt,
    contract_address: Felt,
    era: Era,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for a deploy transaction.

    Deploy transactions carry no fee: the current rules hash a zero in the
    max fee slot, legacy blocks drop both the version and the fee.
    """
    constructor_calldata_hash = hash_on_elements(
        hasher, to_felts(tx.constructor_calldata)
    )

    if era is Era.LEGACY:
        return (
            DEPLOY_PREFIX,
            contract_address,
            CONSTRUCTOR_ENTRY_POINT_SELECTOR,
            constructor_calldata_hash,
            chain_id,
        )

    return (
        DEPLOY_PREFIX,
        Felt(0),
        contract_address,
        CONSTRUCTOR_ENTRY_POINT_SELECTOR,
        constructor_calldata_hash,
        Felt(0),
        chain_id,
    )


def l1_handler_elements(
    tx: L1HandlerTransaction,
    chain_id: Felt,
    era: Era,
    hasher: Hasher,
) -> Elements:
    """
    Elements hashed for an L1 handler transaction.

    Before L1 handler transactions had their own prefix they were hashed as
    invoke transactions, first without and then with the message nonce.
    """
    contract_address = to_felt(tx.contract_address)
    entry_point_selector = to_felt(tx.entry_point_selector)
    calldata_hash = hash_on_elements(hasher, to_felts(tx.calldata))

    if era is Era.PRE_LEGACY:
        return (
            INVOKE_PREFIX,
            contract_address,
            entry_point_selector,
            calldata_hash,
            chain_id,
        )

    if era is Era.LEGACY:
        return (
            INVOKE_PREFIX,
            contract_address,
            entry_point_selector,
            calldata_hash,
            chain_id,
            to_felt(tx.nonce),
        )

    return (
        L1_HANDLER_PREFIX,
        Felt(0),
        contract_address,
        entry_point_selector,
        calldata_hash,
        Felt(0),  # L1 messages pay no L2 fee
        chain_id,
        to_felt(tx.nonce),
    )


def _default_hasher() -> Hasher:
    from .crypto.pedersen import PEDERSEN

    return PEDERSEN


def contract_address_of(
    tx: Union[DeployTransaction, DeployAccountTransaction],
    hasher: Optional[Hasher] = None,
) -> Felt:
    """
    Address of the contract created by a deploy or deploy account
    transaction.
    """
    if hasher is None:
        hasher = _default_hasher()
    return derive_address(
        tx.contract_address_salt,
        tx.class_hash,
        tx.constructor_calldata,
        hasher,
    )


def transaction_elements(
    tx: Transaction,
    chain_id: SupportsInt,
    is_query: bool,
    block_number: Optional[SupportsInt],
    hasher: Hasher,
    policy: EraPolicy = MAINNET_ERA_POLICY,
) -> Elements:
    """
    Elements hashed for `tx`, whichever its variant.

    Raises `TransactionTypeError` if `tx` is not a known transaction.
    """
    chain_id = to_felt(chain_id)

    if isinstance(tx, InvokeTransactionV0):
        era = policy.general_era(block_number)
        return invoke_v0_elements(tx, chain_id, is_query, era, hasher)
    elif isinstance(tx, InvokeTransactionV1):
        return invoke_v1_elements(tx, chain_id, is_query, hasher)
    elif isinstance(tx, DeclareTransactionV0):
        return declare_v0_elements(tx, chain_id, hasher)
    elif isinstance(tx, DeclareTransactionV1):
        return declare_v1_elements(tx, chain_id, hasher)
    elif isinstance(tx, DeclareTransactionV2):
        return declare_v2_elements(tx, chain_id, is_query, hasher)
    elif isinstance(tx, DeployAccountTransaction):
        contract_address = contract_address_of(tx, hasher)
        return deploy_account_elements(
            tx, chain_id, contract_address, is_query, hasher
        )
    elif isinstance(tx, DeployTransaction):
        contract_address = contract_address_of(tx, hasher)
        era = policy.general_era(block_number)
        return deploy_elements(tx, chain_id, contract_address, era, hasher)
    elif isinstance(tx, L1HandlerTransaction):
        era = policy.l1_handler_era(block_number)
        return l1_handler_elements(tx, chain_id, era, hasher)
    else:
        raise TransactionTypeError(type(tx).__name__)


def compute_hash(
    tx: Transaction,
    chain_id: SupportsInt,
    is_query: bool = False,
    block_number: Optional[SupportsInt] = None,
    *,
    hasher: Optional[Hasher] = None,
    policy: EraPolicy = MAINNET_ERA_POLICY,
) -> Felt:
    """
    Computes the hash of a transaction.

    Parameters
    ----------
    tx :
        Transaction to hash.
    chain_id :
        Identifier of the network the transaction is meant for.
    is_query :
        `True` when the hash is for a simulation rather than for a
        transaction that will be included in a block.
    block_number :
        Height of the block including the transaction, if any. Selects the
        era of the hashing rules.
    hasher :
        Multi-input hash to use. Defaults to Pedersen.
    policy :
        Era thresholds of the network. Defaults to those of mainnet.

    Returns
    -------
    hash : `Felt`
        The transaction hash.
    """
    if hasher is None:
        hasher = _default_hasher()

    logger.debug(
        "hashing %s (query=%s, block=%s)",
        type(tx).__name__,
        is_query,
        block_number,
    )
    elements = transaction_elements(
        tx, chain_id, is_query, block_number, hasher, policy
    )
    return hash_on_elements(hasher, elements)


def compute_user_transaction_hash(
    tx: UserTransaction,
    chain_id: SupportsInt,
    is_query: bool = False,
    *,
    hasher: Optional[Hasher] = None,
    policy: EraPolicy = MAINNET_ERA_POLICY,
) -> Felt:
    """
    Computes the hash of a transaction submitted by a user, which has no
    block context yet.
    """
    if isinstance(tx, (DeployTransaction, L1HandlerTransaction)):
        raise TransactionTypeError(type(tx).__name__)
    return compute_hash(
        tx, chain_id, is_query, None, hasher=hasher, policy=policy
    )


def compute_block_transaction_hashes(
    transactions: Iterable[Transaction],
    chain_id: SupportsInt,
    block_number: SupportsInt,
    *,
    hasher: Optional[Hasher] = None,
    policy: EraPolicy = MAINNET_ERA_POLICY,
) -> List[Felt]:
    """
    Computes the hashes of all the transactions of a block, in order.
    """
    if hasher is None:
        hasher = _default_hasher()
    return [
        compute_hash(
            tx, chain_id, False, block_number, hasher=hasher, policy=policy
        )
        for tx in transactions
    ]
