"""Shared pytest fixtures for sigma-deployments tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from sigma_deployments.types import DeploymentRequest, NetworkProfile


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the Hardhat-style artifacts directory used by tests."""
    return fixtures_dir / "artifacts"


@pytest.fixture
def sigma_hop_artifact_json(artifacts_dir: Path) -> Dict[str, Any]:
    """Load and return the SigmaHop artifact fixture."""
    with open(artifacts_dir / "contracts" / "SigmaHop.sol" / "SigmaHop.json") as f:
        return json.load(f)


@pytest.fixture
def sigma_hop_request() -> DeploymentRequest:
    """A SigmaHop request with five lower-case address arguments."""
    return DeploymentRequest(
        contract_name="SigmaHop",
        constructor_args=(
            "0xa3cf45939bd6260bcfe3d66bc73d60f19e49a8bb",
            "0x7bbce28e64b3f8b84d876ab298393c38ad7aac4c",
            "0xa9fb1b3009dcb79e2fe346c16a604b8fa8ae0a79",
            "0xeb08f243e5d3fcff26a9e38ae5520a669f4019d0",
            "0x5425890298aed601595a70ab815c96711a31bc65",
        ),
        gas_limit=1_000_000,
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    """Run in an empty directory with no deployment variables set."""
    for name in ("PRIVATE_KEY", "FUJI_RPC_URL", "FUJI_EXPLORER_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def tester_web3():
    """Web3 connected to an in-process eth-tester chain."""
    from web3 import EthereumTesterProvider, Web3

    return Web3(EthereumTesterProvider())


@pytest.fixture
def funded_key(tester_web3) -> str:
    """Private key of a fresh account funded with 10 ether on the tester chain."""
    from eth_account import Account

    account = Account.create()
    tx_hash = tester_web3.eth.send_transaction(
        {
            "from": tester_web3.eth.accounts[0],
            "to": account.address,
            "value": tester_web3.to_wei(10, "ether"),
        }
    )
    tester_web3.eth.wait_for_transaction_receipt(tx_hash)
    return "0x" + bytes(account.key).hex()


@pytest.fixture
def tester_profile(tester_web3) -> NetworkProfile:
    """Network profile matching the eth-tester chain."""
    return NetworkProfile(
        name="tester",
        chain_id=tester_web3.eth.chain_id,
        chain_name="eth-tester",
        rpc_url="http://127.0.0.1:8545",
        explorer_api_url="https://explorer.invalid/api",
        explorer_browser_url="https://explorer.invalid/",
    )
