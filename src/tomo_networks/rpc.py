"""Network id probing over JSON-RPC for tomo-networks library."""

import logging
from typing import Union

import requests

from .constants import ANY_NETWORK_ID, RPC_TIMEOUT

logger = logging.getLogger(__name__)


def fetch_network_id(rpc_url: str, timeout: int = RPC_TIMEOUT) -> Union[int, str]:
    """
    Ask a node which network it serves (``net_version``).

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Network id as int when numeric, otherwise the raw string

    Raises:
        KeyError: If RPC response is missing the result field
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "net_version",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        network_id = str(result["result"])
        logger.debug("Node at %s reports network id %s", rpc_url, network_id)

        if network_id.isascii() and network_id.isdecimal():
            return int(network_id)
        return network_id

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def network_id_matches(expected: Union[int, str], actual: Union[int, str]) -> bool:
    """
    Check a reported network id against a configured one.

    The wildcard ``"*"`` matches any id. Ids compare as strings so that
    ``88`` and ``"88"`` are the same network.
    """
    if str(expected) == ANY_NETWORK_ID:
        return True
    return str(expected) == str(actual)
