"""Environment-backed configuration for sigma-deployments library."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import COMPILER_SETTINGS, NETWORK_CONFIG, PLACEHOLDER_API_KEYS, PRIVATE_KEY_ENV
from .exceptions import MissingCredentialError, NetworkNotFoundError
from .types import CompilerSettings, NetworkProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeploymentConfig:
    """Compiler settings, network profiles and signing credential for one process."""

    compiler: CompilerSettings
    networks: Mapping[str, NetworkProfile]
    private_key: Optional[str] = None

    def network(self, name: str) -> NetworkProfile:
        """
        Look up a network profile by name.

        Args:
            name: Network name (e.g., "fuji")

        Returns:
            NetworkProfile for the network

        Raises:
            NetworkNotFoundError: If network is not configured
        """
        try:
            return self.networks[name]
        except KeyError:
            known = ", ".join(sorted(self.networks))
            raise NetworkNotFoundError(
                f"Network '{name}' not configured (known networks: {known})"
            ) from None

    def require_private_key(self) -> str:
        """
        Return the signing key, failing loudly if it is absent.

        Raises:
            MissingCredentialError: If no private key was found
        """
        if not self.private_key:
            raise MissingCredentialError(
                f"Signing key not found: set ${PRIVATE_KEY_ENV} in the environment or .env file"
            )
        return self.private_key


def _env_prefix(network: str) -> str:
    return network.upper()


def _clean_api_key(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() in PLACEHOLDER_API_KEYS:
        return None
    return value.strip()


def build_network_profiles(environ: Mapping[str, str]) -> Mapping[str, NetworkProfile]:
    """
    Build network profiles from static config plus environment overrides.

    Overrides are read from ``<NAME>_RPC_URL`` and ``<NAME>_EXPLORER_API_KEY``
    with the network name upper-cased.

    Args:
        environ: Environment mapping to read overrides from

    Returns:
        Read-only mapping of network name -> NetworkProfile
    """
    profiles = {}
    for name, network_config in NETWORK_CONFIG.items():
        prefix = _env_prefix(name)
        api_key = environ.get(f"{prefix}_EXPLORER_API_KEY", network_config["explorer_api_key"])

        profiles[name] = NetworkProfile(
            name=name,
            chain_id=network_config["chain_id"],
            chain_name=network_config["chain_name"],
            rpc_url=environ.get(f"{prefix}_RPC_URL") or network_config["rpc_url"],
            explorer_api_url=network_config["explorer_api_url"],
            explorer_browser_url=network_config["explorer_browser_url"],
            explorer_api_key=_clean_api_key(api_key),
            private_key_env=PRIVATE_KEY_ENV,
        )

    return MappingProxyType(profiles)


def load_config(
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DeploymentConfig:
    """
    Load deployment configuration.

    Values from ``env_file`` (defaults to ./.env) are used as a base and the
    process environment takes precedence over them.

    Args:
        env_file: Path to a dotenv file (defaults to ./.env, ignored if missing)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Immutable DeploymentConfig

    Note:
        A missing private key is not an error here; see
        DeploymentConfig.require_private_key().
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"
    if environ is None:
        environ = os.environ

    merged = {}
    if Path(env_file).exists():
        logger.debug("Loading environment from %s", env_file)
        merged.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    merged.update(environ)

    return DeploymentConfig(
        compiler=CompilerSettings(**COMPILER_SETTINGS),
        networks=build_network_profiles(merged),
        private_key=merged.get(PRIVATE_KEY_ENV) or None,
    )
