"""Custom exception classes for tomo-networks library."""


class NetworkError(Exception):
    """Base exception for network configuration errors."""

    pass


class NetworkNotFoundError(NetworkError, KeyError):
    """Raised when requested network is not in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class InvalidNetworkConfigError(NetworkError, ValueError):
    """Raised when a network record or networks file is malformed."""

    pass


class MissingSecretError(NetworkError, LookupError):
    """Raised when a provider factory needs an environment secret that is not set."""

    def __init__(self, variable: str, network_hint: str = ""):
        self.variable = variable
        message = f"Environment variable '{variable}' is not set"
        if network_hint:
            message += f" (required by provider for {network_hint})"
        super().__init__(message)


class InvalidSecretError(NetworkError, ValueError):
    """Raised when an environment secret is present but cannot be used."""

    pass


class NetworkIdMismatchError(NetworkError, ValueError):
    """Raised when a node reports a different network id than configured."""

    pass


class ConfigFileNotFoundError(NetworkError, FileNotFoundError):
    """Raised when a networks file is not found."""

    pass
