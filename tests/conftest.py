"""Shared pytest fixtures for tomo-networks tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from tomo_networks import NetworkRegistry, default_registry

# Well-known development mnemonic and its first two derived accounts
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_ADDRESS_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TEST_ADDRESS_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
TEST_PRIVATE_KEY_0 = "ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def networks_file(fixtures_dir: Path) -> Path:
    """Return path to the sample networks file."""
    return fixtures_dir / "networks.json"


@pytest.fixture
def sample_networks_json(networks_file: Path) -> Dict[str, Any]:
    """Load and return the sample networks.json fixture."""
    with open(networks_file) as f:
        return json.load(f)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove provider secrets from the process environment."""
    monkeypatch.delenv("MNEMONIC", raising=False)
    monkeypatch.delenv("LOCALNET_PRIVATE_KEY", raising=False)
    return monkeypatch


@pytest.fixture
def secrets_env(clean_env):
    """Set provider secrets in the process environment."""
    clean_env.setenv("MNEMONIC", TEST_MNEMONIC)
    clean_env.setenv("LOCALNET_PRIVATE_KEY", TEST_PRIVATE_KEY_0)
    return clean_env


@pytest.fixture
def registry() -> NetworkRegistry:
    """Default registry reading secrets from os.environ."""
    return default_registry()


@pytest.fixture
def mnemonic() -> str:
    """Development mnemonic phrase."""
    return TEST_MNEMONIC


@pytest.fixture
def private_key() -> str:
    """Private key of the mnemonic's first account, without 0x prefix."""
    return TEST_PRIVATE_KEY_0


@pytest.fixture
def addresses() -> Dict[int, str]:
    """Checksummed addresses derived from the mnemonic, by account index."""
    return {0: TEST_ADDRESS_0, 1: TEST_ADDRESS_1}
