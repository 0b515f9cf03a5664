"""
A module for loading network configurations.

Each network Starknet runs on has its own chain identifier and, for networks
that existed before the current hashing rules, its own legacy block
cutoffs. Networks are described in a YAML file (by default the bundled
`networks.yaml`) and validated with Pydantic.

Classes:
- NetworkConfig: Chain identifier and era thresholds of one network.
- NetworkConfigFile: Root model of a file describing several networks.

Functions:
- load_networks: Load and validate a network file.
- get_network: Look up a single network by name.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from ethereum_types.numeric import Uint
from pydantic import (
    BaseModel,
    Field,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)
from typing_extensions import Self

from .crypto.finite_field import Felt
from .eras import Era, EraPolicy
from .exceptions import InvalidConfigurationError
from .utils.hexadecimal import short_string_to_felt

NETWORKS_PATH = Path(__file__).resolve().parent / "networks.yaml"

logger = logging.getLogger(__name__)


class NetworkConfig(BaseModel):
    """
    Represents the configuration of a single network.

    Attributes:
    - chain_name (str): ASCII name of the chain, e.g. `SN_MAIN`.
    - legacy_block_number (Optional[int]): Last block hashed with the legacy
      rules, if any.
    - legacy_l1_handler_block (Optional[int]): Last block whose L1 handler
      transactions hash without a nonce, if any.
    - absent_height_era (Optional[Era]): Era of invoke (v0) and deploy
      transactions hashed without a block height. Follows the legacy cutoff
      when left out.
    - absent_height_l1_handler_era (Era): Era of L1 handler transactions
      hashed without a block height.
    """

    chain_name: str
    legacy_block_number: Optional[int] = Field(default=None, ge=0)
    legacy_l1_handler_block: Optional[int] = Field(default=None, ge=0)
    absent_height_era: Optional[Era] = None
    absent_height_l1_handler_era: Era = Era.CURRENT

    @field_validator("chain_name")
    @classmethod
    def check_chain_name(cls, value: str) -> str:
        """Ensure the chain name packs into a single field element."""
        short_string_to_felt(value)
        return value

    @model_validator(mode="after")
    def check_thresholds(self) -> Self:
        """Ensure the thresholds describe a consistent era schedule."""
        self.era_policy()
        return self

    @property
    def chain_id(self) -> Felt:
        """The chain identifier, as a field element."""
        return short_string_to_felt(self.chain_name)

    def era_policy(self) -> EraPolicy:
        """Build the era policy of this network."""
        return EraPolicy(
            legacy_block_number=_to_uint(self.legacy_block_number),
            legacy_l1_handler_block=_to_uint(self.legacy_l1_handler_block),
            absent_height_era=self.absent_height_era,
            absent_height_l1_handler_era=self.absent_height_l1_handler_era,
        )


def _to_uint(value: Optional[int]) -> Optional[Uint]:
    if value is None:
        return None
    return Uint(value)


class NetworkConfigFile(RootModel[Dict[str, NetworkConfig]]):
    """Root model to describe a file that contains network configurations."""

    root: Dict[str, NetworkConfig]

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Read the network configuration from a yaml file."""
        with path.open("r") as file:
            config_data = yaml.safe_load(file)
            return cls.model_validate(config_data)


def load_networks(path: Optional[Path] = None) -> Dict[str, NetworkConfig]:
    """
    Load every network described in `path` (the bundled file by default).

    Raises `InvalidConfigurationError` when the file does not validate.
    """
    if path is None:
        path = NETWORKS_PATH

    try:
        networks = NetworkConfigFile.from_yaml(path).root
    except (ValidationError, InvalidConfigurationError) as e:
        raise InvalidConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug("loaded %d networks from %s", len(networks), path)
    return networks


def get_network(name: str, path: Optional[Path] = None) -> NetworkConfig:
    """
    Configuration of the network called `name`.

    Raises `KeyError` for unknown networks.
    """
    networks = load_networks(path)
    try:
        return networks[name]
    except KeyError:
        raise KeyError(
            f"unknown network `{name}`, expected one of {sorted(networks)}"
        ) from None
