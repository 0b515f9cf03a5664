"""
Error types raised while hashing transactions.
"""

from typing import Final


class StarknetHashException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown by this package.
    """


class InvalidConstantError(StarknetHashException):
    """
    Thrown when one of the fixed constants (domain-separation prefixes,
    address prefix) cannot be represented as a field element.

    This can only be caused by a broken build, and is raised while the
    constants are being created, so that nothing is ever hashed with them.
    """


class FeltOverflowError(StarknetHashException, ValueError):
    """
    Thrown when a value does not fit in the STARK prime field.
    """

    value: Final[int]
    """
    The offending value.
    """

    def __init__(self, value: int):
        super().__init__(f"value `{value:#x}` is not a field element")
        self.value = value


class TransactionTypeError(StarknetHashException, TypeError):
    """
    Thrown when the hashing rules are asked to hash an object that is not one
    of the known transaction variants.
    """

    transaction_type: Final[str]
    """
    Name of the type of the object that caused the error.
    """

    def __init__(self, transaction_type: str):
        super().__init__(f"unknown transaction type `{transaction_type}`")
        self.transaction_type = transaction_type


class InvalidConfigurationError(StarknetHashException, ValueError):
    """
    Thrown when an era policy or network configuration is inconsistent.
    """
