"""Custom exception classes for sigma-deployments library."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not configured."""

    pass


class PresetNotFoundError(DeploymentError, ValueError):
    """Raised when requested deployment preset does not exist."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a compiled contract artifact is missing or has no bytecode."""

    pass


class MissingCredentialError(DeploymentError, ValueError):
    """Raised when no signing key is present in the environment."""

    pass


class ConstructorArityError(DeploymentError, ValueError):
    """Raised when constructor arguments don't match the contract constructor."""

    pass


class ChainIdMismatchError(DeploymentError, ValueError):
    """Raised when an RPC endpoint reports a different chain than configured."""

    pass


class DeploymentFailedError(DeploymentError, RuntimeError):
    """Raised when the contract-creation transaction reverts."""

    pass
