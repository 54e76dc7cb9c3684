"""Compiled artifact loading and constructor checks for sigma-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eth_utils import is_hex_address, to_checksum_address

from .exceptions import ArtifactNotFoundError, ConstructorArityError
from .paths import get_artifact_path
from .types import ContractArtifact, DeploymentRequest


def load_artifact(
    contract_name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> ContractArtifact:
    """
    Load a Hardhat compiler artifact.

    Args:
        contract_name: Contract name (e.g., "SigmaHop")
        artifacts_dir: Artifacts directory (defaults to ./artifacts)

    Returns:
        ContractArtifact with ABI and creation bytecode

    Raises:
        ArtifactNotFoundError: If the artifact file is missing or carries no
            bytecode (interfaces and abstract contracts)
    """
    artifact_path = get_artifact_path(contract_name, artifacts_dir)
    if not artifact_path.exists():
        raise ArtifactNotFoundError(
            f"Artifact for '{contract_name}' not found at {artifact_path}. "
            "Compile the contracts first."
        )

    with open(artifact_path) as f:
        data = json.load(f)

    bytecode = data.get("bytecode") or ""
    if bytecode in ("", "0x"):
        raise ArtifactNotFoundError(
            f"Artifact for '{contract_name}' has no bytecode (abstract contract or interface?)"
        )

    return ContractArtifact(
        contract_name=data.get("contractName", contract_name),
        abi=data["abi"],
        bytecode=bytecode,
        source_name=data.get("sourceName"),
    )


def constructor_arity(abi: List[Dict[str, Any]]) -> int:
    """
    Count the inputs of the constructor in a contract ABI.

    Args:
        abi: Contract ABI

    Returns:
        Number of constructor inputs, 0 if the ABI declares no constructor
    """
    for item in abi:
        if item.get("type") == "constructor":
            return len(item.get("inputs", []))
    return 0


def normalize_argument(value: Any) -> Any:
    """Convert hex address strings to checksum form, leave anything else alone."""
    if isinstance(value, str) and is_hex_address(value):
        return to_checksum_address(value)
    return value


def validate_request(request: DeploymentRequest, artifact: ContractArtifact) -> List[Any]:
    """
    Check a deployment request against the contract's constructor.

    Args:
        request: Deployment request
        artifact: Compiled artifact of the requested contract

    Returns:
        Constructor arguments ready for ABI encoding

    Raises:
        ConstructorArityError: If the argument count doesn't match the constructor
    """
    expected = constructor_arity(artifact.abi)
    if len(request.constructor_args) != expected:
        raise ConstructorArityError(
            f"{request.contract_name} constructor takes {expected} argument(s), "
            f"got {len(request.constructor_args)}"
        )

    return [normalize_argument(arg) for arg in request.constructor_args]
