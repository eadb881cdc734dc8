"""Errors raised by the ``walletd-cli`` client.

Each carries the process exit code the CLI terminates with.
"""

from __future__ import annotations

from walletd.errors.walletd_errors import WalletdError

EXIT_SUCCESS = 0
EXIT_LOCAL_EXE = 1
EXIT_CONNECT = 2
EXIT_LOCAL_PARSE = 3
EXIT_REMOTE = 4


class ClientError(WalletdError):
    """Base class for client-side failures."""

    exit_code = EXIT_LOCAL_EXE

    def __init__(self, message: str, *, code: str = "client-error") -> None:
        super().__init__(message, status_code=400, code=code)


class LocalValidationError(ClientError):
    """Bad or missing CLI argument, detected before any network call."""

    exit_code = EXIT_LOCAL_EXE

    def __init__(self, message: str) -> None:
        super().__init__(message, code="local-validation")


class NodeConnectError(ClientError):
    """The node could not be reached."""

    exit_code = EXIT_CONNECT

    def __init__(self, message: str) -> None:
        super().__init__(message, code="node-connect")


class ResponseParseError(ClientError):
    """The node answered with something that is not the expected shape."""

    exit_code = EXIT_LOCAL_PARSE

    def __init__(self, message: str) -> None:
        super().__init__(message, code="response-parse")


class RemoteError(ClientError):
    """The node answered with a fail envelope."""

    exit_code = EXIT_REMOTE

    def __init__(self, message: str) -> None:
        super().__init__(message, code="remote-error")
