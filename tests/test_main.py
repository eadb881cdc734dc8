"""Tests for walletd.main entry point."""

from __future__ import annotations

from unittest.mock import patch


def test_main_calls_uvicorn_run() -> None:
    """Verify that main() delegates to uvicorn.run with expected args."""
    with patch("walletd.main.uvicorn.run") as mock_run:
        from walletd.main import main

        main()
        mock_run.assert_called_once()
        call_kwargs = mock_run.call_args
        assert call_kwargs[0][0] == "walletd.api.app:create_app"
        assert call_kwargs[1]["factory"] is True
        assert call_kwargs[1]["port"] == 9888
        assert call_kwargs[1]["log_level"] == "info"
