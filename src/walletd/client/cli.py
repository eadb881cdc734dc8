"""walletd-cli — command line client for the walletd RPC.

    walletd-cli build-transaction <accountID> <assetID> <amount> [receiver] \\
        --type {issue|spend} [--receiver PROGRAM] [--gas N] [--pretty]
    walletd-cli sign-transaction '<template json>' --password PW [--pretty]
    walletd-cli submit-transaction '<signed template json>'
    walletd-cli sign-submit-transaction '<template json>' --password PW
    walletd-cli list-transactions [--id TXID] [--account-id ID]
    walletd-cli list-balances
    walletd-cli list-unspent-outputs [--id ACCOUNT]
    walletd-cli create-control-program <account>
    walletd-cli gas-rate
    walletd-cli info

Exit codes: 0 success, 1 bad arguments (nothing sent), 2 node unreachable,
3 unparseable reply, 4 the node reported a failure.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, Any, NoReturn

from walletd.client.rpc import NodeClient
from walletd.client.template import TransactionTemplateBuilder
from walletd.config.settings import AppConfig, ClientConfig
from walletd.errors.client_errors import (
    EXIT_SUCCESS,
    ClientError,
    LocalValidationError,
    ResponseParseError,
)

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger("walletd.cli")


class _ArgumentParser(argparse.ArgumentParser):
    """Turn usage errors into local validation errors instead of exit(2)."""

    def error(self, message: str) -> NoReturn:
        raise LocalValidationError(f"{self.prog}: {message}")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _print_json_list(data: Any) -> None:
    if not isinstance(data, list):
        msg = "expected a list in the node response"
        raise ResponseParseError(msg)
    for idx, item in enumerate(data):
        print(f"{idx}:")
        _print_json(item)


def _compact(data: Any) -> str:
    if not isinstance(data, dict):
        msg = "expected a JSON object in the node response"
        raise ResponseParseError(msg)
    return json.dumps(data, separators=(",", ":"))


def _load_template(raw: str) -> dict[str, Any]:
    try:
        template = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"template is not valid JSON: {exc}"
        raise LocalValidationError(msg) from exc
    if not isinstance(template, dict):
        msg = "template must be a JSON object"
        raise LocalValidationError(msg)
    return template


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_build_transaction(args: argparse.Namespace, node: NodeClient) -> None:
    builder = TransactionTemplateBuilder(
        args.type,
        args.account_id,
        args.asset_id,
        args.amount,
        receiver=args.receiver or args.receiver_arg or "",
        gas=args.gas,
    )
    data = node.build_transaction(builder.build_request())
    if args.pretty:
        _print_json(data)
        return
    print(f"Template Type: {builder.kind.value}\n{_compact(data)}")


def cmd_sign_transaction(args: argparse.Namespace, node: NodeClient) -> None:
    template = _load_template(args.template)
    data = node.sign_transaction(template, args.password)
    if args.pretty:
        _print_json(data)
        return
    print(f"\nSign Template:\n{_compact(data)}")


def cmd_submit_transaction(args: argparse.Namespace, node: NodeClient) -> None:
    template = _load_template(args.template)
    _print_json(node.submit_transaction(template))


def cmd_sign_submit_transaction(args: argparse.Namespace, node: NodeClient) -> None:
    template = _load_template(args.template)
    _print_json(node.sign_submit_transaction(template, args.password))


def cmd_list_transactions(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json_list(node.list_transactions(id_=args.id, account_id=args.account_id))


def cmd_list_balances(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json_list(node.list_balances())


def cmd_list_unspent_outputs(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json_list(node.list_unspent_outputs(id_=args.id))


def cmd_create_control_program(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json(node.create_control_program(args.account))


def cmd_gas_rate(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json(node.gas_rate())


def cmd_info(args: argparse.Namespace, node: NodeClient) -> None:
    _print_json(node.info())


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser(config: ClientConfig) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="walletd-cli", description="walletd RPC client")
    parser.add_argument(
        "--node-url",
        default=config.node_url,
        help=f"node RPC address (default: {config.node_url})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build-transaction", help="Build one transaction template")
    build.add_argument("account_id")
    build.add_argument("asset_id")
    build.add_argument("amount")
    build.add_argument("receiver_arg", nargs="?", default="", metavar="receiver")
    build.add_argument(
        "-t", "--type", required=True, help="transaction type, valid types: 'issue', 'spend'"
    )
    build.add_argument("-r", "--receiver", default="", help="control program of the receiver")
    build.add_argument(
        "-g", "--gas", default=str(config.default_gas), help="gas (fee) amount to spend"
    )
    build.add_argument("--pretty", action="store_true", help="pretty print json result")
    build.set_defaults(func=cmd_build_transaction)

    sign = subparsers.add_parser(
        "sign-transaction", help="Sign transaction templates with account password"
    )
    sign.add_argument("template", help="json template")
    sign.add_argument("-p", "--password", required=True, help="password of the signing account")
    sign.add_argument("--pretty", action="store_true", help="pretty print json result")
    sign.set_defaults(func=cmd_sign_transaction)

    submit = subparsers.add_parser("submit-transaction", help="Submit signed transaction template")
    submit.add_argument("template", help="signed json template")
    submit.set_defaults(func=cmd_submit_transaction)

    sign_submit = subparsers.add_parser(
        "sign-submit-transaction",
        help="Sign and submit transaction templates with account password",
    )
    sign_submit.add_argument("template", help="json template")
    sign_submit.add_argument(
        "-p", "--password", required=True, help="password of the signing account"
    )
    sign_submit.set_defaults(func=cmd_sign_submit_transaction)

    list_txs = subparsers.add_parser("list-transactions", help="List the transactions")
    list_txs.add_argument("--id", default="", help="transaction id")
    list_txs.add_argument("--account-id", default="", help="account id")
    list_txs.set_defaults(func=cmd_list_transactions)

    balances = subparsers.add_parser("list-balances", help="List the account balances")
    balances.set_defaults(func=cmd_list_balances)

    utxos = subparsers.add_parser("list-unspent-outputs", help="List the unspent outputs")
    utxos.add_argument("--id", default="", help="account id")
    utxos.set_defaults(func=cmd_list_unspent_outputs)

    program = subparsers.add_parser(
        "create-control-program", help="Create a control program for an account"
    )
    program.add_argument("account", help="account id or alias")
    program.set_defaults(func=cmd_create_control_program)

    gas = subparsers.add_parser("gas-rate", help="Print the current gas rate")
    gas.set_defaults(func=cmd_gas_rate)

    info = subparsers.add_parser("info", help="Print the node summary")
    info.set_defaults(func=cmd_info)

    return parser


def main(
    argv: list[str] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run one CLI command and return its exit code."""
    logging.basicConfig(level=logging.WARNING, format="%(message)s", stream=sys.stderr)
    config = AppConfig().client
    try:
        args = build_parser(config).parse_args(argv)
        with NodeClient(args.node_url, timeout=config.timeout, transport=transport) as node:
            args.func(args, node)
    except ClientError as exc:
        logger.error("%s", exc.message)
        return exc.exit_code
    return EXIT_SUCCESS


def run() -> NoReturn:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
