from pathlib import Path

import pytest
from pydantic import ValidationError

from starknet_hash.config import (
    NETWORKS_PATH,
    NetworkConfig,
    get_network,
    load_networks,
)
from starknet_hash.eras import MAINNET_ERA_POLICY, Era
from starknet_hash.exceptions import InvalidConfigurationError
from starknet_hash.utils.hexadecimal import short_string_to_felt


def test_bundled_networks() -> None:
    networks = load_networks()
    assert set(networks) == {"mainnet", "sepolia"}
    assert load_networks(NETWORKS_PATH) == networks


def test_mainnet() -> None:
    mainnet = get_network("mainnet")
    assert mainnet.chain_id == short_string_to_felt("SN_MAIN")
    assert mainnet.chain_id == 0x534E5F4D41494E
    assert mainnet.era_policy() == MAINNET_ERA_POLICY


def test_sepolia() -> None:
    sepolia = get_network("sepolia")
    assert sepolia.chain_id == short_string_to_felt("SN_SEPOLIA")

    policy = sepolia.era_policy()
    assert policy.legacy_block_number is None
    assert policy.general_era(0) is Era.CURRENT
    assert policy.general_era(None) is Era.CURRENT
    assert policy.l1_handler_era(0) is Era.CURRENT


def test_unknown_network() -> None:
    with pytest.raises(KeyError, match="mainnet"):
        get_network("goerli")


def test_defaults_without_legacy_history() -> None:
    policy = NetworkConfig(chain_name="SN_TEST").era_policy()
    assert policy.legacy_block_number is None
    assert policy.legacy_l1_handler_block is None
    assert policy.general_era(None) is Era.CURRENT
    assert policy.general_era(0) is Era.CURRENT
    assert policy.l1_handler_era(None) is Era.CURRENT


def test_defaults_with_legacy_history() -> None:
    config = NetworkConfig(chain_name="SN_TEST", legacy_block_number=10)
    assert config.era_policy().general_era(None) is Era.LEGACY


@pytest.mark.parametrize("chain_name", ["X" * 32, "SN_M\u00c4IN"])
def test_invalid_chain_name(chain_name: str) -> None:
    with pytest.raises(ValidationError):
        NetworkConfig(chain_name=chain_name)


def test_custom_file(tmp_path: Path) -> None:
    path = tmp_path / "networks.yaml"
    path.write_text(
        "devnet:\n"
        "  chain_name: SN_DEVNET\n"
        "  legacy_block_number: 10\n"
        "  legacy_l1_handler_block: 5\n"
        "  absent_height_era: current\n"
    )

    devnet = get_network("devnet", path)
    policy = devnet.era_policy()
    assert policy.legacy_block_number == 10
    assert policy.legacy_l1_handler_block == 5
    assert policy.general_era(None) is Era.CURRENT
    assert policy.l1_handler_era(5) is Era.PRE_LEGACY


@pytest.mark.parametrize(
    "body",
    [
        # missing chain name
        "devnet:\n  legacy_block_number: 10\n",
        # negative threshold
        "devnet:\n  chain_name: SN_DEVNET\n  legacy_block_number: -1\n",
        # unknown era
        "devnet:\n  chain_name: SN_DEVNET\n  absent_height_era: ancient\n",
        # L1 handler cutoff above the general one
        "devnet:\n"
        "  chain_name: SN_DEVNET\n"
        "  legacy_block_number: 5\n"
        "  legacy_l1_handler_block: 10\n",
        # L1 handler cutoff without a general one
        "devnet:\n  chain_name: SN_DEVNET\n  legacy_l1_handler_block: 10\n",
        # pre-legacy is L1 handler only
        "devnet:\n  chain_name: SN_DEVNET\n  absent_height_era: pre_legacy\n",
        # chain name longer than 31 bytes
        "devnet:\n  chain_name: SN_DEVNET_WITH_A_VERY_LONG_CHAIN_NAME\n",
        # legacy era without a legacy cutoff
        "devnet:\n  chain_name: SN_DEVNET\n  absent_height_era: legacy\n",
        "devnet:\n"
        "  chain_name: SN_DEVNET\n"
        "  absent_height_l1_handler_era: legacy\n",
        # pre-legacy era without an L1 handler cutoff
        "devnet:\n"
        "  chain_name: SN_DEVNET\n"
        "  legacy_block_number: 10\n"
        "  absent_height_l1_handler_era: pre_legacy\n",
    ],
)
def test_invalid_file(tmp_path: Path, body: str) -> None:
    path = tmp_path / "networks.yaml"
    path.write_text(body)

    with pytest.raises(InvalidConfigurationError, match="Invalid config"):
        load_networks(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_networks(tmp_path / "missing.yaml")
