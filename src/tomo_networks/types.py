"""Data types and dataclasses for tomo-networks library."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .exceptions import InvalidNetworkConfigError

NetworkId = Union[int, str]
ProviderFactory = Callable[[], Any]


@dataclass(frozen=True)
class NetworkConfig:
    """
    Connection parameters for a single deployment target.

    Connectivity comes from exactly one source: a local node (``host`` and
    ``port``) or a ``provider`` factory. The factory is a zero-argument
    callable and is only invoked when the network is actually used.
    """

    network_id: NetworkId  # "*" matches any chain
    host: Optional[str] = None
    port: Optional[int] = None
    provider: Optional[ProviderFactory] = None
    production: bool = False  # Public, irreversible network

    def __post_init__(self) -> None:
        if self.network_id is None or self.network_id == "":
            raise InvalidNetworkConfigError("network_id is required")

        if isinstance(self.network_id, bool) or not isinstance(self.network_id, (int, str)):
            raise InvalidNetworkConfigError(
                f"network_id must be an int or str, got {type(self.network_id).__name__}"
            )

        if (self.host is None) != (self.port is None):
            raise InvalidNetworkConfigError("host and port must be given together")

        if self.port is not None and (
            isinstance(self.port, bool) or not isinstance(self.port, int)
        ):
            raise InvalidNetworkConfigError(f"port must be an int, got {self.port!r}")

        if self.port is not None and not 1 <= self.port <= 65535:
            raise InvalidNetworkConfigError(f"port must be in 1..65535, got {self.port}")

        if self.host is not None and (not isinstance(self.host, str) or not self.host):
            raise InvalidNetworkConfigError(f"host must be a non-empty str, got {self.host!r}")

        if self.host is not None and self.provider is not None:
            raise InvalidNetworkConfigError(
                "host/port and provider are conflicting sources of connectivity"
            )

        if self.host is None and self.provider is None:
            raise InvalidNetworkConfigError("either host/port or provider is required")

        if self.provider is not None and not callable(self.provider):
            raise InvalidNetworkConfigError("provider must be a zero-argument callable")

    @property
    def uses_provider(self) -> bool:
        """True when connectivity comes from a provider factory."""
        return self.provider is not None

    @property
    def endpoint(self) -> Optional[str]:
        """
        RPC endpoint URL for this network.

        Returns:
            ``http://host:port`` for local nodes, the factory's ``rpc_url``
            when it exposes one, otherwise None
        """
        if self.host is not None:
            return f"http://{self.host}:{self.port}"
        return getattr(self.provider, "rpc_url", None)
