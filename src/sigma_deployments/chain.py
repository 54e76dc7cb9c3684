"""Raw JSON-RPC probes for sigma-deployments library."""

import logging

import requests

from .exceptions import ChainIdMismatchError
from .types import NetworkProfile

logger = logging.getLogger(__name__)


def get_chain_id(rpc_url: str) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain ID reported by ``eth_chainId``

    Raises:
        ValueError: If RPC returns an error or no hex chain ID
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=30,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        chain_id_hex = result.get("result")
        if not isinstance(chain_id_hex, str):
            raise ValueError(f"RPC response has no chain ID: {result}")

        return int(chain_id_hex, 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def check_network(profile: NetworkProfile) -> int:
    """
    Confirm that a profile's RPC endpoint serves the configured chain.

    Args:
        profile: Network profile to probe

    Returns:
        The confirmed chain ID

    Raises:
        ChainIdMismatchError: If the endpoint reports a different chain
    """
    chain_id = get_chain_id(profile.rpc_url)
    logger.debug("%s reports chain ID %d", profile.rpc_url, chain_id)

    ensure_chain_id(profile, chain_id)
    return chain_id


def ensure_chain_id(profile: NetworkProfile, chain_id: int) -> None:
    """
    Reject a chain ID that differs from the profile's.

    Args:
        profile: Network profile the caller intends to use
        chain_id: Chain ID reported by the connected node

    Raises:
        ChainIdMismatchError: If the IDs differ
    """
    if chain_id != profile.chain_id:
        raise ChainIdMismatchError(
            f"RPC endpoint for '{profile.name}' serves chain {chain_id}, "
            f"expected {profile.chain_id}"
        )
