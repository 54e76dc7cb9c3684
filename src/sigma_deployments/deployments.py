"""Main API for sigma-deployments library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from eth_account import Account
from web3 import Web3

from .artifacts import load_artifact, validate_request
from .chain import ensure_chain_id
from .constants import DEFAULT_GAS_LIMIT, DEPLOYMENT_PRESETS
from .exceptions import DeploymentFailedError, PresetNotFoundError
from .types import DeploymentRequest, DeploymentResult, NetworkProfile

logger = logging.getLogger(__name__)


def request_from_dict(data: Mapping[str, Any]) -> DeploymentRequest:
    """
    Build a deployment request from a plain mapping.

    Args:
        data: Mapping with ``contract_name`` and optional ``constructor_args``
              and ``gas_limit``

    Returns:
        DeploymentRequest

    Raises:
        ValueError: If the mapping or any field has the wrong type
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Deployment request must be an object, got {type(data).__name__}")

    contract_name = data.get("contract_name")
    if not isinstance(contract_name, str) or not contract_name:
        raise ValueError("Deployment request needs a non-empty contract_name string")

    constructor_args = data.get("constructor_args", ())
    if not isinstance(constructor_args, (list, tuple)):
        raise ValueError(
            f"constructor_args must be a list, got {type(constructor_args).__name__}"
        )

    gas_limit = data.get("gas_limit", DEFAULT_GAS_LIMIT)
    # bool is an int subclass
    if not isinstance(gas_limit, int) or isinstance(gas_limit, bool) or gas_limit <= 0:
        raise ValueError(f"gas_limit must be a positive integer, got {gas_limit!r}")

    return DeploymentRequest(
        contract_name=contract_name,
        constructor_args=tuple(constructor_args),
        gas_limit=gas_limit,
    )


def load_request(params_path: Union[Path, str]) -> DeploymentRequest:
    """
    Load a deployment request from a JSON params file.

    Args:
        params_path: Path to JSON file with the request fields

    Returns:
        DeploymentRequest
    """
    with open(params_path) as f:
        return request_from_dict(json.load(f))


def preset_names() -> List[str]:
    return sorted(DEPLOYMENT_PRESETS.keys())


def get_preset(name: str) -> Tuple[str, DeploymentRequest]:
    """
    Get a built-in deployment preset.

    Args:
        name: Preset name (e.g., "sigma-hop-fuji")

    Returns:
        Tuple of (network_name, request)

    Raises:
        PresetNotFoundError: If preset does not exist
    """
    if name not in DEPLOYMENT_PRESETS:
        raise PresetNotFoundError(
            f"Preset '{name}' not found (known presets: {', '.join(preset_names())})"
        )

    preset: Dict[str, Any] = DEPLOYMENT_PRESETS[name]
    return preset["network"], request_from_dict(preset)


def connect(profile: NetworkProfile) -> Web3:
    return Web3(Web3.HTTPProvider(profile.rpc_url))


def deploy(
    request: DeploymentRequest,
    profile: NetworkProfile,
    private_key: str,
    artifacts_dir: Optional[Union[Path, str]] = None,
    web3: Optional[Web3] = None,
) -> DeploymentResult:
    """
    Deploy one contract instance.

    Every call submits a new contract-creation transaction, so calling this
    twice yields two distinct contracts at two different addresses.

    Args:
        request: Contract name, constructor arguments and gas limit
        profile: Target network
        private_key: Signing key of the deployer
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)
        web3: Connected Web3 instance (defaults to an HTTP connection to
              profile.rpc_url)

    Returns:
        DeploymentResult describing the confirmed deployment

    Raises:
        ArtifactNotFoundError: If the contract artifact is missing
        ConstructorArityError: If arguments don't match the constructor
        ChainIdMismatchError: If the node serves a different chain than profile
        DeploymentFailedError: If the transaction reverted
    """
    # Validate locally before touching the network
    artifact = load_artifact(request.contract_name, artifacts_dir)
    args = validate_request(request, artifact)

    deployer = Account.from_key(private_key)
    logger.info("Deploying contracts with the account: %s", deployer.address)

    if web3 is None:
        web3 = connect(profile)

    ensure_chain_id(profile, web3.eth.chain_id)

    contract = web3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    transaction = contract.constructor(*args).build_transaction(
        {
            "from": deployer.address,
            "nonce": web3.eth.get_transaction_count(deployer.address),
            "gas": request.gas_limit,
            "chainId": profile.chain_id,
        }
    )

    signed = deployer.sign_transaction(transaction)
    tx_hash = web3.eth.send_raw_transaction(signed.raw_transaction)
    logger.debug("Submitted %s creation in %s", request.contract_name, Web3.to_hex(tx_hash))

    receipt = web3.eth.wait_for_transaction_receipt(tx_hash)
    if receipt["status"] != 1:
        raise DeploymentFailedError(
            f"Deployment of {request.contract_name} reverted in transaction "
            f"{Web3.to_hex(tx_hash)}"
        )

    address = Web3.to_checksum_address(receipt["contractAddress"])
    logger.info("Contract address: %s", address)

    return DeploymentResult(
        contract_name=request.contract_name,
        network=profile.name,
        address=address,
        deployer=deployer.address,
        transaction_hash=Web3.to_hex(tx_hash),
        block=receipt["blockNumber"],
        gas_used=receipt["gasUsed"],
        url=profile.address_url(address),
    )
