"""Configuration constants for tomo-networks library."""

# Wildcard network id: accept whatever chain the node reports
ANY_NETWORK_ID = "*"

# Environment variables holding provider secrets
MNEMONIC_ENV = "MNEMONIC"
LOCALNET_PRIVATE_KEY_ENV = "LOCALNET_PRIVATE_KEY"

# BIP-44 path for Ethereum-compatible accounts, formatted with the account index
HD_PATH_TEMPLATE = "m/44'/60'/0'/0/{index}"

DEVELOPMENT_HOST = "127.0.0.1"
DEVELOPMENT_PORT = 7545

TOMO_TESTNET_RPC_URL = "https://testnet.tomochain.com"
TOMO_MAINNET_RPC_URL = "https://rpc.tomochain.com"
LOCALNET_RPC_URL = "https://localhost:8080"

TOMO_TESTNET_NETWORK_ID = 88
TOMO_MAINNET_NETWORK_ID = 89
LOCALNET_NETWORK_ID = 88

# Timeout (seconds) for JSON-RPC probes
RPC_TIMEOUT = 30

# Provider "type" values accepted in networks files
PROVIDER_TYPE_HD_WALLET = "hd_wallet"
PROVIDER_TYPE_PRIVATE_KEY = "private_key"
