"""py-walletd — JSON RPC dispatch layer and CLI client for a wallet-enabled node."""

__version__ = "0.1.0"
