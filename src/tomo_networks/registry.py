"""Main API for tomo-networks library."""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Union

from web3 import Web3

from .constants import (
    ANY_NETWORK_ID,
    DEVELOPMENT_HOST,
    DEVELOPMENT_PORT,
    LOCALNET_NETWORK_ID,
    LOCALNET_PRIVATE_KEY_ENV,
    LOCALNET_RPC_URL,
    MNEMONIC_ENV,
    RPC_TIMEOUT,
    TOMO_MAINNET_NETWORK_ID,
    TOMO_MAINNET_RPC_URL,
    TOMO_TESTNET_NETWORK_ID,
    TOMO_TESTNET_RPC_URL,
)
from .exceptions import InvalidNetworkConfigError, NetworkIdMismatchError, NetworkNotFoundError
from .providers import HDWalletProviderFactory, PrivateKeyProviderFactory, http_connection
from .rpc import fetch_network_id, network_id_matches
from .types import NetworkConfig

logger = logging.getLogger(__name__)


class NetworkRegistry:
    """Read-only mapping from network name to its connection parameters."""

    def __init__(self, networks: Mapping[str, NetworkConfig]):
        """
        Initialize the registry.

        Args:
            networks: Mapping of network name to NetworkConfig. The registry
                      keeps its own copy; later changes to ``networks`` are
                      not seen.

        Raises:
            InvalidNetworkConfigError: If a name is empty or a value is not a NetworkConfig
        """
        entries: Dict[str, NetworkConfig] = {}
        for name, config in networks.items():
            if not isinstance(name, str) or not name:
                raise InvalidNetworkConfigError(f"Invalid network name: {name!r}")
            if not isinstance(config, NetworkConfig):
                raise InvalidNetworkConfigError(
                    f"Network '{name}' must be a NetworkConfig, got {type(config).__name__}"
                )
            entries[name] = config

        self._networks = MappingProxyType(entries)

    def __getitem__(self, name: str) -> NetworkConfig:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._networks

    def __iter__(self) -> Iterator[str]:
        return iter(self._networks)

    def __len__(self) -> int:
        return len(self._networks)

    def __repr__(self) -> str:
        return f"NetworkRegistry({list(self._networks)!r})"

    def get(self, name: str) -> NetworkConfig:
        """
        Get the configuration for a network.

        Args:
            name: Network name (e.g. "development")

        Returns:
            NetworkConfig for the network

        Raises:
            NetworkNotFoundError: If network not in registry
        """
        try:
            return self._networks[name]
        except KeyError:
            raise NetworkNotFoundError(f"Network '{name}' not found in registry") from None

    def has_network(self, name: str) -> bool:
        """Check if a network is registered."""
        return name in self._networks

    def names(self) -> List[str]:
        """Get registered network names in declaration order."""
        return list(self._networks)

    def production_networks(self) -> List[str]:
        """Get names of networks flagged as production."""
        return [name for name, config in self._networks.items() if config.production]

    def endpoint(self, name: str) -> Optional[str]:
        """
        Get the RPC endpoint URL of a network.

        Raises:
            NetworkNotFoundError: If network not in registry
        """
        return self.get(name).endpoint

    def connect(self, name: str) -> Web3:
        """
        Build a connection for a network.

        Only the named network is touched: its provider factory is invoked
        here, so missing secrets surface now and not at registry load.

        Args:
            name: Network name

        Returns:
            Web3 instance (signing when the network has a provider factory)

        Raises:
            NetworkNotFoundError: If network not in registry
            MissingSecretError: If the provider needs an unset environment variable
        """
        config = self.get(name)
        if config.uses_provider:
            logger.debug("Invoking provider factory for network '%s'", name)
            return config.provider()

        logger.debug("Connecting to network '%s' at %s", name, config.endpoint)
        return http_connection(config.endpoint)

    def verify_network_id(self, name: str, timeout: int = RPC_TIMEOUT) -> Union[int, str]:
        """
        Check that the node behind a network reports the configured network id.

        Args:
            name: Network name
            timeout: Request timeout in seconds

        Returns:
            Network id reported by the node

        Raises:
            NetworkNotFoundError: If network not in registry
            InvalidNetworkConfigError: If the network has no known endpoint
            NetworkIdMismatchError: If the node serves a different network
        """
        config = self.get(name)
        rpc_url = config.endpoint
        if rpc_url is None:
            raise InvalidNetworkConfigError(f"Network '{name}' has no known RPC endpoint")

        actual = fetch_network_id(rpc_url, timeout=timeout)
        if not network_id_matches(config.network_id, actual):
            logger.warning(
                "Network '%s' expects id %s but %s reports %s",
                name,
                config.network_id,
                rpc_url,
                actual,
            )
            raise NetworkIdMismatchError(
                f"Network '{name}' expects network id {config.network_id}, "
                f"but node at {rpc_url} reports {actual}"
            )
        return actual


def default_registry(environ: Optional[Mapping[str, str]] = None) -> NetworkRegistry:
    """
    Build the standard TomoChain network registry.

    No secrets are read here. ``environ`` is handed to the provider
    factories, which read it only when invoked.

    Args:
        environ: Mapping to read secrets from (defaults to os.environ at call time)

    Returns:
        NetworkRegistry with development, tomotestnet, localnet and tomomainnet
    """
    return NetworkRegistry(
        {
            "development": NetworkConfig(
                host=DEVELOPMENT_HOST,
                port=DEVELOPMENT_PORT,
                network_id=ANY_NETWORK_ID,
            ),
            "tomotestnet": NetworkConfig(
                provider=HDWalletProviderFactory(
                    TOMO_TESTNET_RPC_URL, secret_env=MNEMONIC_ENV, environ=environ
                ),
                network_id=TOMO_TESTNET_NETWORK_ID,
                production=True,
            ),
            "localnet": NetworkConfig(
                provider=PrivateKeyProviderFactory(
                    LOCALNET_RPC_URL, secret_env=LOCALNET_PRIVATE_KEY_ENV, environ=environ
                ),
                network_id=LOCALNET_NETWORK_ID,
                production=True,
            ),
            "tomomainnet": NetworkConfig(
                provider=HDWalletProviderFactory(
                    TOMO_MAINNET_RPC_URL, secret_env=MNEMONIC_ENV, environ=environ
                ),
                network_id=TOMO_MAINNET_NETWORK_ID,
                production=True,
            ),
        }
    )
