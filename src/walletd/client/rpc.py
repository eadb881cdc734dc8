"""NodeClient — synchronous HTTP client for the walletd RPC.

Each method is one round trip; nothing is retried. Replies are parsed with
the server's own :class:`ResponseEnvelope`, and failures surface as
:class:`ClientError` subclasses carrying the CLI exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

import httpx
from pydantic import ValidationError

from walletd.api.envelope import ResponseEnvelope
from walletd.api.schemas import (
    AccountInfoRequest,
    SignRequest,
    SubmitRequest,
    TransactionFilter,
)
from walletd.errors.client_errors import NodeConnectError, RemoteError, ResponseParseError

if TYPE_CHECKING:
    from types import TracebackType

    from walletd.api.schemas import BuildRequest


class NodeClient:
    """RPC client for a walletd node.

    Usage::

        with NodeClient("http://127.0.0.1:9888") as node:
            template = node.build_transaction(builder.build_request())
            signed = node.sign_transaction(template, password)
            node.submit_transaction(signed)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def call(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """POST *body* to ``/<path>`` and return the envelope's ``data``.

        Raises:
            NodeConnectError: The node could not be reached.
            ResponseParseError: The reply is not a valid envelope.
            RemoteError: The node answered with a fail envelope.
        """
        try:
            response = self._client.post(f"/{path.lstrip('/')}", json=body or {})
        except httpx.HTTPError as exc:
            msg = f"cannot reach node at {self._base_url}: {exc}"
            raise NodeConnectError(msg) from exc

        try:
            envelope = ResponseEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            msg = f"unexpected response from /{path} (HTTP {response.status_code})"
            raise ResponseParseError(msg) from exc

        if not envelope.ok:
            raise RemoteError(envelope.error_detail or f"/{path} failed")
        return envelope.data

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def build_transaction(self, request: BuildRequest) -> Any:
        return self.call("build-transaction", {"actions": request.wire_actions()})

    def sign_transaction(self, template: dict[str, Any], password: str) -> Any:
        req = SignRequest(auth=password, transaction=template)
        return self.call("sign-transaction", req.model_dump(mode="json"))

    def submit_transaction(self, template: dict[str, Any]) -> Any:
        req = SubmitRequest(transaction=template)
        return self.call("submit-transaction", req.model_dump(mode="json"))

    def sign_submit_transaction(self, template: dict[str, Any], password: str) -> Any:
        req = SignRequest(auth=password, transaction=template)
        return self.call("sign-submit-transaction", req.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_transactions(self, *, id_: str = "", account_id: str = "") -> Any:
        req = TransactionFilter(id=id_, account_id=account_id)
        return self.call("list-transactions", req.model_dump())

    def list_balances(self) -> Any:
        return self.call("list-balances")

    def list_unspent_outputs(self, *, id_: str = "") -> Any:
        return self.call("list-unspent-outputs", {"id": id_})

    def create_control_program(self, account_info: str) -> Any:
        req = AccountInfoRequest(account_info=account_info)
        return self.call("create-control-program", req.model_dump())

    def gas_rate(self) -> Any:
        return self.call("gas-rate")

    def info(self) -> Any:
        return self.call("info")
