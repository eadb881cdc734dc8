"""Application entry point for the walletd RPC server."""

from __future__ import annotations

import uvicorn

from walletd.config.settings import AppConfig


def main() -> None:
    """Start the walletd server."""
    config = AppConfig()
    uvicorn.run(
        "walletd.api.app:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=config.debug,
        log_level=config.log_level.value,
    )


if __name__ == "__main__":
    main()
