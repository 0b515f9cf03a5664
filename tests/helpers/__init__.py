from typing import List, Sequence, Tuple

from starknet_hash.crypto.finite_field import Felt, to_felt
from starknet_hash.crypto.hash import keccak256
from starknet_hash.utils.hexadecimal import short_string_to_felt

CHAIN_ID = short_string_to_felt("SN_MAIN")


def fake_hash(elements: Sequence[int]) -> Felt:
    """
    Deterministic, order sensitive stand-in for the Pedersen hash chain.
    """
    preimage = b"".join(to_felt(e).to_be_bytes32() for e in elements)
    preimage += len(elements).to_bytes(8, "big")
    return Felt(int.from_bytes(keccak256(preimage), "big"))


class RecordingHasher:
    """
    Hasher that remembers every sequence it was asked to hash, in order.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[Felt, ...]] = []

    def hash_on_elements(self, elements: Sequence[Felt]) -> Felt:
        recorded = tuple(elements)
        self.calls.append(recorded)
        return fake_hash(recorded)

    @property
    def last(self) -> Tuple[Felt, ...]:
        return self.calls[-1]


class ConstantHasher:
    """
    Hasher returning the same value for every input.
    """

    def __init__(self, value: int) -> None:
        self.value = value

    def hash_on_elements(self, elements: Sequence[Felt]) -> int:
        return self.value
