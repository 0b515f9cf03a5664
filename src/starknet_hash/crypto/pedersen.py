"""
Pedersen Hash Backend
^^^^^^^^^^^^^^^^^^^^^

[`Hasher`] implementation backed by the Pedersen hash shipped with
`cairo-lang`. Install the `pedersen` extra to use it.

The chain used for sequences is the usual Starknet one::

    h = 0
    for element in elements:
        h = pedersen(h, element)
    h = pedersen(h, len(elements))

which makes the hash of the empty sequence ``pedersen(0, 0)``.

[`Hasher`]: ref:starknet_hash.crypto.hash.Hasher
"""

from typing import Sequence

from starkware.cairo.common.hash_state import compute_hash_on_elements
from starkware.crypto.signature.fast_pedersen_hash import pedersen_hash

from .finite_field import Felt, to_felt


class PedersenHasher:
    """
    Pedersen hash chain over field elements.
    """

    def hash_on_elements(self, elements: Sequence[Felt]) -> Felt:
        """
        Hash `elements` with the Pedersen hash chain.
        """
        result = compute_hash_on_elements(
            data=[int(element) for element in elements],
            hash_func=pedersen_hash,
        )
        return to_felt(result)

    def __repr__(self) -> str:
        return "PedersenHasher()"


PEDERSEN = PedersenHasher()
