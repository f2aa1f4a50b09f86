"""Networks file parsers for tomo-networks library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .constants import PROVIDER_TYPE_HD_WALLET, PROVIDER_TYPE_PRIVATE_KEY
from .exceptions import ConfigFileNotFoundError, InvalidNetworkConfigError
from .providers import HDWalletProviderFactory, PrivateKeyProviderFactory
from .registry import NetworkRegistry
from .types import NetworkConfig, ProviderFactory

NETWORK_KEYS = {"host", "port", "network_id", "provider", "production"}
PROVIDER_KEYS = {
    PROVIDER_TYPE_HD_WALLET: {"type", "url", "secret_env", "account_index"},
    PROVIDER_TYPE_PRIVATE_KEY: {"type", "url", "secret_env"},
}


def reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    JSON object hook refusing repeated keys.

    Raises:
        InvalidNetworkConfigError: If a key appears twice in one object
    """
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise InvalidNetworkConfigError(f"Duplicate key '{key}' in networks file")
        result[key] = value
    return result


def parse_provider(
    data: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> ProviderFactory:
    """
    Build a provider factory from its networks file description.

    Args:
        data: Provider object with ``type``, ``url`` and ``secret_env``
              (``hd_wallet`` also accepts ``account_index``)
        environ: Mapping the factory reads secrets from when invoked

    Returns:
        HDWalletProviderFactory or PrivateKeyProviderFactory

    Raises:
        InvalidNetworkConfigError: If the description is incomplete or unknown
    """
    if not isinstance(data, dict):
        raise InvalidNetworkConfigError("provider must be an object")

    provider_type = data.get("type")
    if provider_type not in PROVIDER_KEYS:
        raise InvalidNetworkConfigError(f"Unknown provider type: {provider_type!r}")

    unknown = set(data) - PROVIDER_KEYS[provider_type]
    if unknown:
        raise InvalidNetworkConfigError(
            f"Unknown keys for {provider_type} provider: {', '.join(sorted(unknown))}"
        )

    for key in ("url", "secret_env"):
        if not isinstance(data.get(key), str) or not data[key]:
            raise InvalidNetworkConfigError(f"{provider_type} provider requires '{key}'")

    if provider_type == PROVIDER_TYPE_HD_WALLET:
        account_index = data.get("account_index", 0)
        if isinstance(account_index, bool) or not isinstance(account_index, int) or account_index < 0:
            raise InvalidNetworkConfigError(
                f"account_index must be a non-negative int, got {account_index!r}"
            )
        return HDWalletProviderFactory(
            data["url"],
            secret_env=data["secret_env"],
            account_index=account_index,
            environ=environ,
        )

    return PrivateKeyProviderFactory(data["url"], secret_env=data["secret_env"], environ=environ)


def parse_network_config(
    data: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> NetworkConfig:
    """
    Parse one network entry of a networks file.

    Args:
        data: Network object (host, port, network_id, provider, production)
        environ: Mapping provider factories read secrets from when invoked

    Returns:
        NetworkConfig

    Raises:
        InvalidNetworkConfigError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise InvalidNetworkConfigError("network entry must be an object")

    unknown = set(data) - NETWORK_KEYS
    if unknown:
        raise InvalidNetworkConfigError(f"Unknown network keys: {', '.join(sorted(unknown))}")

    if "network_id" not in data:
        raise InvalidNetworkConfigError("network_id is required")

    production = data.get("production", False)
    if not isinstance(production, bool):
        raise InvalidNetworkConfigError(f"production must be a boolean, got {production!r}")

    provider = None
    if "provider" in data:
        provider = parse_provider(data["provider"], environ)

    return NetworkConfig(
        network_id=data["network_id"],
        host=data.get("host"),
        port=data.get("port"),
        provider=provider,
        production=production,
    )


def load_networks_file(
    path: Union[Path, str], environ: Optional[Mapping[str, str]] = None
) -> NetworkRegistry:
    """
    Load a network registry from a JSON networks file.

    No secrets are read while loading.

    Args:
        path: Path to the networks file
        environ: Mapping provider factories read secrets from when invoked

    Returns:
        NetworkRegistry with the file's networks in file order

    Raises:
        ConfigFileNotFoundError: If the file does not exist
        InvalidNetworkConfigError: If the file is not valid JSON or a network is invalid
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigFileNotFoundError(f"Networks file not found at {file_path}")
    if not file_path.is_file():
        raise InvalidNetworkConfigError(f"Networks file {file_path} is not a regular file")

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f, object_pairs_hook=reject_duplicate_keys)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidNetworkConfigError(f"Networks file {file_path} is not valid JSON: {e}") from e

    networks = data.get("networks") if isinstance(data, dict) else None
    if not isinstance(networks, dict):
        raise InvalidNetworkConfigError(f"Networks file {file_path} has no 'networks' object")

    entries: Dict[str, NetworkConfig] = {}
    for name, entry in networks.items():
        try:
            entries[name] = parse_network_config(entry, environ)
        except InvalidNetworkConfigError as e:
            raise InvalidNetworkConfigError(f"Network '{name}': {e}") from e

    return NetworkRegistry(entries)
