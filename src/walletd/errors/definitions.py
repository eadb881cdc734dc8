"""Predefined errors returned by the RPC dispatch layer."""

from __future__ import annotations

from walletd.errors.walletd_errors import WalletdError

# -- Transport -------------------------------------------------------------

ErrNotFound = WalletdError("not Found", status_code=404, code="not-found")
ErrBodyTooLarge = WalletdError(
    "request body too large", status_code=413, code="body-too-large"
)
ErrInvalidJSON = WalletdError(
    "request body is not a JSON object", status_code=400, code="invalid-json"
)

# -- Aggregation -----------------------------------------------------------

ErrBalanceOverflow = WalletdError(
    "balance exceeds the 64-bit amount range", status_code=422, code="balance-overflow"
)


def invalid_request(detail: str) -> WalletdError:
    """Build a 400 error for a request body that does not match its schema."""
    return WalletdError(f"invalid request: {detail}", status_code=400, code="invalid-request")


def service_unavailable(service: str) -> WalletdError:
    """Build a 503 error for a collaborator that was not supplied to the node."""
    return WalletdError(
        f"{service} service is not available",
        status_code=503,
        code="service-unavailable",
    )
