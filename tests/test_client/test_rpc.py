"""Tests for NodeClient — uses httpx.MockTransport instead of a live node."""

from __future__ import annotations

import json

import httpx
import pytest

from walletd.client.rpc import NodeClient
from walletd.client.template import TransactionTemplateBuilder
from walletd.errors.client_errors import (
    EXIT_CONNECT,
    EXIT_LOCAL_PARSE,
    EXIT_REMOTE,
    NodeConnectError,
    RemoteError,
    ResponseParseError,
)

BASE_URL = "http://node.test:9888"


def _client(handler) -> NodeClient:
    return NodeClient(BASE_URL, transport=httpx.MockTransport(handler))


def _recording(data, calls: list[tuple[str, dict]]):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"status": "success", "data": data})

    return handler


class TestCall:
    def test_success_returns_data(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({"gas_rate": 7}, calls)) as node:
            assert node.gas_rate() == {"gas_rate": 7}
        assert calls == [("/gas-rate", {})]

    def test_fail_envelope_raises_remote(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"status": "fail", "error_detail": "not Found"})

        with _client(handler) as node, pytest.raises(RemoteError) as exc_info:
            node.list_balances()
        assert exc_info.value.message == "not Found"
        assert exc_info.value.exit_code == EXIT_REMOTE

    def test_non_json_raises_parse(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>bad gateway</html>")

        with _client(handler) as node, pytest.raises(ResponseParseError) as exc_info:
            node.list_balances()
        assert exc_info.value.exit_code == EXIT_LOCAL_PARSE

    def test_wrong_shape_raises_parse(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "maybe"})

        with _client(handler) as node, pytest.raises(ResponseParseError):
            node.list_balances()

    def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        with _client(handler) as node, pytest.raises(NodeConnectError) as exc_info:
            node.list_balances()
        assert exc_info.value.exit_code == EXIT_CONNECT
        assert BASE_URL in exc_info.value.message


class TestOperations:
    def test_build_transaction(self) -> None:
        calls: list[tuple[str, dict]] = []
        builder = TransactionTemplateBuilder("issue", "acc1", "aa", "10", gas="1")
        with _client(_recording({"raw_transaction": "07"}, calls)) as node:
            assert node.build_transaction(builder.build_request()) == {"raw_transaction": "07"}
        path, body = calls[0]
        assert path == "/build-transaction"
        assert [a["type"] for a in body["actions"]] == ["spend_account", "issue", "control_account"]

    def test_sign_transaction(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({}, calls)) as node:
            node.sign_transaction({"raw": "07"}, "pw")
        assert calls == [("/sign-transaction", {"auth": "pw", "transaction": {"raw": "07"}})]

    def test_submit_transaction(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({"tx_id": "ab"}, calls)) as node:
            assert node.submit_transaction({"raw": "07"}) == {"tx_id": "ab"}
        assert calls == [("/submit-transaction", {"transaction": {"raw": "07"}})]

    def test_sign_submit_transaction(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({"tx_id": "ab"}, calls)) as node:
            node.sign_submit_transaction({"raw": "07"}, "pw")
        assert calls[0][0] == "/sign-submit-transaction"

    def test_list_transactions(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording([], calls)) as node:
            node.list_transactions(account_id="acc1")
        assert calls == [("/list-transactions", {"id": "", "account_id": "acc1"})]

    def test_list_unspent_outputs(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording([], calls)) as node:
            node.list_unspent_outputs(id_="acc1")
        assert calls == [("/list-unspent-outputs", {"id": "acc1"})]

    def test_base_url_trailing_slash(self) -> None:
        calls: list[tuple[str, dict]] = []
        node = NodeClient(
            BASE_URL + "/", transport=httpx.MockTransport(_recording([], calls))
        )
        with node:
            node.list_balances()
        assert calls[0][0] == "/list-balances"

    def test_create_control_program(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({"control_program": "0014"}, calls)) as node:
            assert node.create_control_program("alice") == {"control_program": "0014"}
        assert calls == [("/create-control-program", {"account_info": "alice"})]

    def test_info(self) -> None:
        calls: list[tuple[str, dict]] = []
        with _client(_recording({"version": "0.1.0"}, calls)) as node:
            assert node.info() == {"version": "0.1.0"}
        assert calls == [("/info", {})]
