"""
Finite Fields
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Every value that goes into, or comes out of, a Starknet transaction hash is an
element of the STARK prime field, ``P = 2**251 + 17 * 2**192 + 1``.

Values cross into the field in two ways. Arithmetic results are reduced
modulo the prime, as in any prime field. Values coming from _outside_ (caller
supplied integers, hash backends, fixed byte strings) go through the checked
conversions [`to_felt`] and [`Felt.from_be_bytes`], which refuse anything that
is not already a canonical field element instead of silently wrapping it.

[`to_felt`]: ref:starknet_hash.crypto.finite_field.to_felt
[`Felt.from_be_bytes`]: ref:starknet_hash.crypto.finite_field.Felt.from_be_bytes
"""

# flake8: noqa: D102, D105

from typing import Iterable, SupportsInt, Tuple

from ethereum_types.bytes import Bytes, Bytes32
from typing_extensions import Protocol, Self

from ..exceptions import FeltOverflowError, InvalidConstantError


class Field(Protocol):
    """
    A type protocol for defining fields.
    """

    __slots__ = ()

    def __add__(self, right: Self) -> Self:
        """Field addition (self + right)."""
        ...

    def __mul__(self, right: Self) -> Self:
        """Field multiplication (self * right)."""
        ...


class PrimeField(int, Field):
    """
    Superclass for integers modulo a prime. Not intended to be used
    directly, but rather to be subclassed.
    """

    __slots__ = ()
    PRIME: int

    def __new__(cls, value: int) -> Self:
        return int.__new__(cls, value % cls.PRIME)

    def __radd__(self, left: Self) -> Self:  # type: ignore[override]
        return self.__add__(left)

    def __add__(self, right: Self) -> Self:  # type: ignore[override]
        if not isinstance(right, int):
            return NotImplemented
        return self.__new__(type(self), int.__add__(self, right))

    def __mul__(self, right: Self) -> Self:  # type: ignore[override]
        if not isinstance(right, int):
            return NotImplemented
        return self.__new__(type(self), int.__mul__(self, right))

    def __rmul__(self, left: Self) -> Self:  # type: ignore[override]
        return self.__mul__(left)

    # Disabled operations
    __sub__ = None  # type: ignore
    __rsub__ = None  # type: ignore
    __neg__ = None  # type: ignore
    __floordiv__ = None  # type: ignore
    __rfloordiv__ = None  # type: ignore
    __divmod__ = None  # type: ignore
    __rdivmod__ = None  # type: ignore
    __and__ = None  # type: ignore
    __or__ = None  # type: ignore
    __xor__ = None  # type: ignore
    __rshift__ = None  # type: ignore
    __lshift__ = None  # type: ignore


class Felt(PrimeField):
    """
    Element of the STARK prime field.
    """

    __slots__ = ()
    PRIME = 2**251 + 17 * 2**192 + 1

    @classmethod
    def from_be_bytes(cls, buffer: Bytes) -> Self:
        """
        Converts a big-endian byte string into a field element.

        Unlike the constructor, this never reduces: the buffer must be at most
        32 bytes long and encode a value below [`PRIME`].

        [`PRIME`]: ref:starknet_hash.crypto.finite_field.Felt.PRIME

        Parameters
        ----------
        buffer :
            Bytes to decode.

        Returns
        -------
        felt : `Felt`
            The decoded field element.
        """
        value = int.from_bytes(buffer, "big")
        if len(buffer) > 32 or value >= cls.PRIME:
            raise FeltOverflowError(value)
        return cls.__new__(cls, value)

    def to_be_bytes32(self) -> Bytes32:
        """
        Converts this field element to its canonical, big-endian, 32 byte
        representation.
        """
        return Bytes32(self.to_bytes(32, "big"))


def to_felt(value: SupportsInt) -> Felt:
    """
    Checked conversion of an integer-like value into a [`Felt`].

    Field elements pass through untouched. Anything else must be in the range
    ``[0, PRIME)``; no modular reduction is performed.

    [`Felt`]: ref:starknet_hash.crypto.finite_field.Felt

    Parameters
    ----------
    value :
        Integer, `Felt`, or any object implementing `__int__`.

    Returns
    -------
    felt : `Felt`
        The same value, as a field element.
    """
    if isinstance(value, Felt):
        return value
    number = int(value)
    if number < 0 or number >= Felt.PRIME:
        raise FeltOverflowError(number)
    return Felt(number)


def to_felts(values: Iterable[SupportsInt]) -> Tuple[Felt, ...]:
    """
    Apply [`to_felt`] to every value, keeping their order.

    [`to_felt`]: ref:starknet_hash.crypto.finite_field.to_felt
    """
    return tuple(to_felt(value) for value in values)


def felt_constant(buffer: Bytes) -> Felt:
    """
    Field element of a fixed byte string, for module level constants.

    A string that does not fit in the field is a defect of the constant
    itself, reported as [`InvalidConstantError`] so that it surfaces at import
    time.

    [`InvalidConstantError`]: ref:starknet_hash.exceptions.InvalidConstantError
    """
    try:
        return Felt.from_be_bytes(buffer)
    except FeltOverflowError as e:
        raise InvalidConstantError(
            f"constant {buffer!r} is not a field element"
        ) from e
