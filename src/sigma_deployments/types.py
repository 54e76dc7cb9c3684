"""Data types and dataclasses for sigma-deployments library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import DEFAULT_GAS_LIMIT, PRIVATE_KEY_ENV


@dataclass(frozen=True)
class CompilerSettings:
    """solc settings the deployed bytecode was compiled with."""

    version: str  # e.g., "0.8.24"
    optimizer_enabled: bool
    optimizer_runs: int
    yul_optimizer_steps: str
    evm_version: str  # e.g., "paris"
    via_ir: bool

    def to_solc_settings(self) -> Dict[str, Any]:
        """
        Render the standard-JSON ``settings`` object for explorer verification.

        Returns:
            Dictionary in solc standard-JSON input layout
        """
        return {
            "optimizer": {
                "enabled": self.optimizer_enabled,
                "runs": self.optimizer_runs,
                "details": {
                    "yulDetails": {"optimizerSteps": self.yul_optimizer_steps},
                },
            },
            "evmVersion": self.evm_version,
            "viaIR": self.via_ir,
        }


@dataclass(frozen=True)
class NetworkProfile:
    """Everything needed to deploy to and verify on one network."""

    name: str  # e.g., "fuji"
    chain_id: int
    chain_name: str
    rpc_url: str
    explorer_api_url: str
    explorer_browser_url: str
    explorer_api_key: Optional[str] = None
    private_key_env: str = PRIVATE_KEY_ENV

    def explorer_chain_entry(self) -> Dict[str, Any]:
        """Custom-chain entry consumed by etherscan-compatible verifiers."""
        return {
            "network": self.name,
            "chainId": self.chain_id,
            "urls": {
                "apiURL": self.explorer_api_url,
                "browserURL": self.explorer_browser_url,
            },
        }

    def address_url(self, address: str) -> str:
        return f"{self.explorer_browser_url.rstrip('/')}/address/{address}"


@dataclass(frozen=True)
class DeploymentRequest:
    """A single contract-creation to submit."""

    contract_name: str  # e.g., "SigmaHop"
    constructor_args: Tuple[str, ...] = ()
    gas_limit: int = DEFAULT_GAS_LIMIT


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as emitted by the Hardhat compiler task."""

    contract_name: str
    abi: List[Dict[str, Any]] = field(hash=False)
    bytecode: str
    source_name: Optional[str] = None  # e.g., "contracts/SigmaHop.sol"


@dataclass
class DeploymentResult:
    """Outcome of a confirmed deployment."""

    contract_name: str
    network: str
    address: str  # Checksummed address
    deployer: str
    transaction_hash: str
    block: int
    gas_used: int
    url: str  # Block explorer URL
