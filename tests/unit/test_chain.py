"""Unit tests for JSON-RPC chain probes."""

import json

import pytest
import requests
import responses

from sigma_deployments.chain import check_network, ensure_chain_id, get_chain_id
from sigma_deployments.exceptions import ChainIdMismatchError
from sigma_deployments.types import NetworkProfile

RPC_URL = "http://test-rpc.example.com"


@pytest.fixture
def fuji_profile() -> NetworkProfile:
    return NetworkProfile(
        name="fuji",
        chain_id=43113,
        chain_name="Avalanche Fuji",
        rpc_url=RPC_URL,
        explorer_api_url="https://api.routescan.io/v2/network/testnet/evm/43113/etherscan",
        explorer_browser_url="https://c-chain.snowtrace.io",
    )


class TestGetChainId:
    """Test the get_chain_id function."""

    @responses.activate
    def test_parses_hex_chain_id(self):
        """Test that the hex result is parsed."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0xa869"},
            status=200,
        )

        assert get_chain_id(RPC_URL) == 43113

    @responses.activate
    def test_sends_eth_chain_id_request(self):
        """Test the JSON-RPC request body."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x14a34"},
            status=200,
        )

        assert get_chain_id(RPC_URL) == 84532

        body = json.loads(responses.calls[0].request.body)
        assert body["method"] == "eth_chainId"
        assert body["params"] == []

    @responses.activate
    def test_http_error_raises_runtime_error(self):
        """Test that non-200 responses raise RuntimeError."""
        responses.add(responses.POST, RPC_URL, status=503)

        with pytest.raises(RuntimeError) as exc_info:
            get_chain_id(RPC_URL)

        assert "503" in str(exc_info.value)

    @responses.activate
    def test_rpc_error_raises_value_error(self):
        """Test that RPC error objects raise ValueError."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "not found"}},
            status=200,
        )

        with pytest.raises(ValueError) as exc_info:
            get_chain_id(RPC_URL)

        assert "RPC error" in str(exc_info.value)

    @responses.activate
    def test_network_error_raises_runtime_error(self):
        """Test that transport failures are wrapped in RuntimeError."""
        responses.add(
            responses.POST,
            RPC_URL,
            body=requests.ConnectionError("connection refused"),
        )

        with pytest.raises(RuntimeError) as exc_info:
            get_chain_id(RPC_URL)

        assert "Network error" in str(exc_info.value)


class TestCheckNetwork:
    """Test the check_network function."""

    @responses.activate
    def test_matching_chain_id(self, fuji_profile: NetworkProfile):
        """Test that a matching endpoint passes."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": hex(43113)},
            status=200,
        )

        assert check_network(fuji_profile) == 43113

    @responses.activate
    def test_mismatched_chain_id_raises(self, fuji_profile: NetworkProfile):
        """Test that an endpoint serving another chain is rejected."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": hex(11155420)},
            status=200,
        )

        with pytest.raises(ChainIdMismatchError) as exc_info:
            check_network(fuji_profile)

        assert "11155420" in str(exc_info.value)
        assert "43113" in str(exc_info.value)


class TestGetChainIdMalformedResult:
    """Test responses without a usable chain ID."""

    @pytest.mark.parametrize(
        "body",
        [{"jsonrpc": "2.0", "id": 1, "result": None}, {"jsonrpc": "2.0", "id": 1}],
    )
    @responses.activate
    def test_missing_result_raises_value_error(self, body):
        """Test that a null or absent result raises ValueError."""
        responses.add(responses.POST, RPC_URL, json=body, status=200)

        with pytest.raises(ValueError) as exc_info:
            get_chain_id(RPC_URL)

        assert "no chain ID" in str(exc_info.value)


class TestEnsureChainId:
    """Test the ensure_chain_id function."""

    def test_matching_chain_id_passes(self, fuji_profile: NetworkProfile):
        ensure_chain_id(fuji_profile, 43113)

    def test_mismatch_raises(self, fuji_profile: NetworkProfile):
        """Test that a different chain ID is rejected."""
        with pytest.raises(ChainIdMismatchError) as exc_info:
            ensure_chain_id(fuji_profile, 84532)

        assert "'fuji'" in str(exc_info.value)
