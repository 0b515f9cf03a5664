"""
Cryptographic primitives used to hash Starknet transactions.
"""
