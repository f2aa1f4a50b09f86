"""
tomo-networks: Python library declaring TomoChain deployment networks
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigFileNotFoundError,
    InvalidNetworkConfigError,
    InvalidSecretError,
    MissingSecretError,
    NetworkError,
    NetworkIdMismatchError,
    NetworkNotFoundError,
)
from .parsers import load_networks_file
from .providers import HDWalletProviderFactory, PrivateKeyProviderFactory
from .registry import NetworkRegistry, default_registry
from .types import NetworkConfig

try:
    __version__ = version("tomo-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "NetworkRegistry",
    "default_registry",
    "load_networks_file",
    "NetworkConfig",
    "HDWalletProviderFactory",
    "PrivateKeyProviderFactory",
    "NetworkError",
    "NetworkNotFoundError",
    "InvalidNetworkConfigError",
    "MissingSecretError",
    "InvalidSecretError",
    "NetworkIdMismatchError",
    "ConfigFileNotFoundError",
]
