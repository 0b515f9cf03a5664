"""
Encoding eras.

Starknet changed the way transaction hashes are computed a few times before
settling on the current rules. Nodes still need the older rules to
re-verify historical blocks, so every hash is computed under an _era_ picked
from the height of the block the transaction belongs to:

- [`Era.CURRENT`]: the rules in effect today.
- [`Era.LEGACY`]: blocks at or below the general legacy cutoff. Invoke (v0)
  and deploy transactions hash without a version element, and L1 handler
  transactions reuse the `invoke` prefix.
- [`Era.PRE_LEGACY`]: only meaningful for L1 handler transactions in blocks
  at or below the (older) L1 handler cutoff, which also hash without a nonce.

Transactions hashed without any block context (for example, transactions
sitting in a mempool) have no height to compare against the cutoffs. What
happens then is spelled out per transaction family by [`EraPolicy`], rather
than falling out of how an absent value happens to compare.

[`Era.CURRENT`]: ref:starknet_hash.eras.Era.CURRENT
[`Era.LEGACY`]: ref:starknet_hash.eras.Era.LEGACY
[`Era.PRE_LEGACY`]: ref:starknet_hash.eras.Era.PRE_LEGACY
[`EraPolicy`]: ref:starknet_hash.eras.EraPolicy
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, SupportsInt

from ethereum_types.numeric import Uint

from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

LEGACY_BLOCK_NUMBER = Uint(1470)
"""
Last mainnet block hashed with the legacy rules.
"""

LEGACY_L1_HANDLER_BLOCK = Uint(854)
"""
Last mainnet block whose L1 handler transactions hash without a nonce.
"""


class Era(str, enum.Enum):
    """
    Encoding regime a transaction is hashed under.
    """

    CURRENT = "current"
    LEGACY = "legacy"
    PRE_LEGACY = "pre_legacy"


def to_block_number(block_number: Optional[SupportsInt]) -> Optional[Uint]:
    """
    Convert an optional, integer-like block height into a `Uint`.

    Negative heights raise `OverflowError`.
    """
    if block_number is None:
        return None
    return Uint(int(block_number))


@dataclass(frozen=True)
class EraPolicy:
    """
    Block height thresholds of one network, and the eras used when no block
    height is known.
    """

    legacy_block_number: Optional[Uint]
    """
    Highest block hashed with the legacy rules, or `None` if the network
    never used them.
    """

    legacy_l1_handler_block: Optional[Uint]
    """
    Highest block whose L1 handler transactions are hashed with the
    pre-legacy rules, or `None` if there is no such block. Must be strictly
    lower than [`legacy_block_number`].

    [`legacy_block_number`]: ref:starknet_hash.eras.EraPolicy.legacy_block_number
    """

    absent_height_era: Optional[Era] = None
    """
    Era of invoke (v0) and deploy transactions hashed without a block height.
    Defaults to `Era.LEGACY` for networks with a legacy cutoff, and to
    `Era.CURRENT` otherwise.
    """

    absent_height_l1_handler_era: Era = Era.CURRENT
    """
    Era of L1 handler transactions hashed without a block height.
    """

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "legacy_block_number",
            to_block_number(self.legacy_block_number),
        )
        object.__setattr__(
            self,
            "legacy_l1_handler_block",
            to_block_number(self.legacy_l1_handler_block),
        )

        if self.legacy_l1_handler_block is not None:
            if self.legacy_block_number is None:
                raise InvalidConfigurationError(
                    "an L1 handler cutoff requires a general legacy cutoff"
                )
            if self.legacy_l1_handler_block >= self.legacy_block_number:
                raise InvalidConfigurationError(
                    "the L1 handler cutoff must be lower than the general "
                    "legacy cutoff"
                )
        if self.absent_height_era is None:
            default = Era.LEGACY
            if self.legacy_block_number is None:
                default = Era.CURRENT
            object.__setattr__(self, "absent_height_era", default)

        if self.absent_height_era is Era.PRE_LEGACY:
            raise InvalidConfigurationError(
                "the pre-legacy era only exists for L1 handler transactions"
            )
        if (
            self.absent_height_era is Era.LEGACY
            or self.absent_height_l1_handler_era is Era.LEGACY
        ) and self.legacy_block_number is None:
            raise InvalidConfigurationError(
                "blocks without a height cannot use the legacy era on a "
                "network without a legacy cutoff"
            )
        if (
            self.absent_height_l1_handler_era is Era.PRE_LEGACY
            and self.legacy_l1_handler_block is None
        ):
            raise InvalidConfigurationError(
                "blocks without a height cannot use the pre-legacy era on a "
                "network without an L1 handler cutoff"
            )

    def general_era(self, block_number: Optional[SupportsInt]) -> Era:
        """
        Era of an invoke (v0) or deploy transaction included in
        `block_number`.

        Parameters
        ----------
        block_number :
            Height of the block containing the transaction, or `None` when
            there is no block context.

        Returns
        -------
        era : `Era`
            Either `Era.CURRENT` or `Era.LEGACY`.
        """
        height = to_block_number(block_number)
        if height is None:
            era = self.absent_height_era
            assert era is not None
            logger.debug("no block height, using %s era", era.value)
            return era
        if (
            self.legacy_block_number is not None
            and height <= self.legacy_block_number
        ):
            return Era.LEGACY
        return Era.CURRENT

    def l1_handler_era(self, block_number: Optional[SupportsInt]) -> Era:
        """
        Era of an L1 handler transaction included in `block_number`.
        """
        height = to_block_number(block_number)
        if height is None:
            logger.debug(
                "no block height, using %s era for L1 handler",
                self.absent_height_l1_handler_era.value,
            )
            return self.absent_height_l1_handler_era
        if (
            self.legacy_l1_handler_block is not None
            and height <= self.legacy_l1_handler_block
        ):
            return Era.PRE_LEGACY
        if (
            self.legacy_block_number is not None
            and height <= self.legacy_block_number
        ):
            return Era.LEGACY
        return Era.CURRENT


MAINNET_ERA_POLICY = EraPolicy(
    legacy_block_number=LEGACY_BLOCK_NUMBER,
    legacy_l1_handler_block=LEGACY_L1_HANDLER_BLOCK,
)
