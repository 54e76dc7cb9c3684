"""Configuration constants for sigma-deployments library."""

# Environment variable holding the deployer's private key
PRIVATE_KEY_ENV = "PRIVATE_KEY"

# Explorer keys that are placeholders rather than real credentials
PLACEHOLDER_API_KEYS = frozenset({"", "your API key"})

# solc settings the contracts are compiled with (mirrors the explorer verification input)
COMPILER_SETTINGS = {
    "version": "0.8.24",
    "optimizer_enabled": True,
    "optimizer_runs": 800,
    "yul_optimizer_steps": "u",
    "evm_version": "paris",
    "via_ir": True,
}

# Network configuration, keyed by the network names used on the command line
NETWORK_CONFIG = {
    "opSepolia": {
        "chain_id": 11155420,
        "chain_name": "OP Sepolia",
        "rpc_url": "https://sepolia.optimism.io/",
        "explorer_api_key": "89K6NC1QZIUZSA6A6S5SY1N3DVIBCJCD3A",
        "explorer_api_url": "https://api-sepolia-optimistic.etherscan.io/api",
        "explorer_browser_url": "https://sepolia-optimism.etherscan.io/",
    },
    "baseSepolia": {
        "chain_id": 84532,
        "chain_name": "Base Sepolia",
        "rpc_url": "https://sepolia.base.org",
        "explorer_api_key": "BZP99H9U5SEDZTTP3BIBUYE5X2TMM9PX5Q",
        "explorer_api_url": "https://api-sepolia.basescan.org/api",
        "explorer_browser_url": "https://sepolia.basescan.org/",
    },
    "fuji": {
        "chain_id": 43113,
        "chain_name": "Avalanche Fuji",
        "rpc_url": "https://api.avax-test.network/ext/bc/C/rpc",
        "explorer_api_key": "your API key",
        "explorer_api_url": "https://api.routescan.io/v2/network/testnet/evm/43113/etherscan",
        "explorer_browser_url": "https://c-chain.snowtrace.io",
    },
}

# Literal deployment requests carried over from the per-network scripts
DEPLOYMENT_PRESETS = {
    "sigma-hop-fuji": {
        "contract_name": "SigmaHop",
        "network": "fuji",
        "constructor_args": [
            "0xA3cF45939bD6260bcFe3D66bc73d60f19e49a8BB",
            "0x7bbcE28e64B3F8b84d876Ab298393c38ad7aac4C",
            "0xa9fb1b3009dcb79e2fe346c16a604b8fa8ae0a79",  # Circle MessageTransmitter
            "0xeb08f243e5d3fcff26a9e38ae5520a669f4019d0",  # Circle TokenMessenger
            "0x5425890298aed601595a70ab815c96711a31bc65",  # USDC
        ],
        "gas_limit": 1_000_000,
    },
}

DEFAULT_GAS_LIMIT = 1_000_000
