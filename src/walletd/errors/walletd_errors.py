"""WalletdError — base exception class for all py-walletd errors."""

from __future__ import annotations


class WalletdError(Exception):
    """Base error for all node API and client operations.

    Attributes:
        message: Human-readable error description, sent as ``error_detail``.
        status_code: HTTP status code used for the fail envelope.
        code: Machine-readable error code string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        code: str = "walletd-error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class CollaboratorError(WalletdError):
    """An account, asset, wallet or chain collaborator call failed."""

    def __init__(self, message: str, *, status_code: int = 500) -> None:
        super().__init__(message, status_code=status_code, code="collaborator-error")


class RegistryError(WalletdError):
    """A handler could not be registered.

    Raised while the endpoint table is being built, never at request time.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=500, code="registry-error")
