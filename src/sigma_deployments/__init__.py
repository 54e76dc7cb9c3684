"""
sigma-deployments: deployment configuration and tooling for the Sigma contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .config import DeploymentConfig, load_config
from .deployments import deploy, get_preset, load_request
from .exceptions import (
    ArtifactNotFoundError,
    ChainIdMismatchError,
    ConstructorArityError,
    DeploymentError,
    DeploymentFailedError,
    MissingCredentialError,
    NetworkNotFoundError,
    PresetNotFoundError,
)
from .types import CompilerSettings, DeploymentRequest, DeploymentResult, NetworkProfile

try:
    __version__ = version("sigma-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "load_config",
    "deploy",
    "get_preset",
    "load_request",
    "DeploymentConfig",
    "CompilerSettings",
    "NetworkProfile",
    "DeploymentRequest",
    "DeploymentResult",
    "DeploymentError",
    "NetworkNotFoundError",
    "PresetNotFoundError",
    "ArtifactNotFoundError",
    "MissingCredentialError",
    "ConstructorArityError",
    "ChainIdMismatchError",
    "DeploymentFailedError",
]
