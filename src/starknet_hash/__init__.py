"""
Starknet Transaction Hashing
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

Every Starknet transaction is identified by a single field element, its
_transaction hash_. The hash commits to the content of the transaction, is
what accounts sign, and has to be reproducible for any block ever produced,
even though the encoding rules changed several times since the network
launched.

This package contains the hashing rules for every transaction variant and
every historical encoding era, written as plainly as possible so that nodes
re-verifying old chain data can rely on them.
"""

__version__ = "0.1.0"
