"""Path management utilities for sigma-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_artifacts_dir() -> Path:
    """
    Get default Hardhat artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def get_artifact_path(
    contract_name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the artifact file path for a contract.

    Hardhat writes one artifact per contract under
    ``artifacts/contracts/<Name>.sol/<Name>.json``.

    Args:
        contract_name: Contract name (e.g., "SigmaHop")
        artifacts_dir: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Absolute path to the contract's artifact JSON
    """
    if artifacts_dir is None:
        artifacts_dir = get_default_artifacts_dir()
    else:
        artifacts_dir = Path(artifacts_dir).absolute()

    return artifacts_dir / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"
