"""Shared test fixtures for py-walletd test suite.

Collaborators are in-memory fakes; they record what the handlers asked of
them so tests can assert on the passthrough.
"""

from __future__ import annotations

from typing import Any

import pytest

from walletd.engine.models import UnspentOutput
from walletd.engine.services import NodeServices

ASSET_A = bytes.fromhex("aa" * 32)
ASSET_B = bytes.fromhex("bb" * 32)


def make_utxo(
    account_id: str,
    asset_id: bytes,
    amount: int,
    *,
    output_id: bytes = b"\x01" * 32,
    **kwargs: Any,
) -> UnspentOutput:
    return UnspentOutput(
        account_id=account_id,
        asset_id=asset_id,
        amount=amount,
        output_id=output_id,
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeAccounts:
    def __init__(self, aliases: dict[str, str] | None = None) -> None:
        self.aliases = aliases if aliases is not None else {}
        self.tags: dict[str, dict[str, Any]] = {}
        self.deleted: list[str] = []

    def get_alias_by_id(self, id_: str) -> str:
        return self.aliases.get(id_, "")

    async def list_accounts(self, id_: str) -> list[dict[str, Any]]:
        return [
            {"id": acc, "alias": alias}
            for acc, alias in sorted(self.aliases.items())
            if not id_ or acc == id_
        ]

    async def create_account(
        self,
        root_xpubs: list[str],
        quorum: int,
        alias: str,
        tags: dict[str, Any] | None,
    ) -> dict[str, Any]:
        self.aliases["acc_new"] = alias
        return {"id": "acc_new", "alias": alias, "quorum": quorum, "xpubs": root_xpubs}

    async def update_tags(self, account_info: str, tags: dict[str, Any]) -> None:
        self.tags[account_info] = tags

    async def delete_account(self, account_info: str) -> None:
        if account_info not in self.aliases:
            msg = f"account {account_info} not found"
            raise LookupError(msg)
        self.deleted.append(account_info)

    async def create_receiver(self, account_info: str, expires_at: Any) -> dict[str, Any]:
        return {"control_program": "0014" + "cd" * 20, "expires_at": expires_at}

    async def create_control_program(self, account_info: str) -> dict[str, str]:
        if account_info not in self.aliases and account_info not in self.aliases.values():
            msg = f"account {account_info} not found"
            raise LookupError(msg)
        return {"control_program": "0014" + "ef" * 20}


class FakeAssets:
    def __init__(self, aliases: dict[str, str] | None = None) -> None:
        self.aliases = aliases if aliases is not None else {}
        self.tags: dict[str, dict[str, Any]] = {}

    def get_alias_by_id(self, id_: str) -> str:
        return self.aliases.get(id_, "")

    async def list_assets(self, id_: str) -> list[dict[str, Any]]:
        return [
            {"id": asset, "alias": alias}
            for asset, alias in sorted(self.aliases.items())
            if not id_ or asset == id_
        ]

    async def create_asset(
        self,
        root_xpubs: list[str],
        quorum: int,
        alias: str,
        tags: dict[str, Any] | None,
        definition: dict[str, Any] | None,
    ) -> dict[str, Any]:
        return {"id": "cc" * 32, "alias": alias, "definition": definition or {}}

    async def update_tags(self, asset_info: str, tags: dict[str, Any]) -> None:
        self.tags[asset_info] = tags


class FakeWallet:
    def __init__(
        self,
        utxos: list[UnspentOutput] | None = None,
        transactions: list[dict[str, Any]] | None = None,
    ) -> None:
        self.utxos = utxos or []
        self.transactions = transactions or []
        self.utxo_filters: list[str] = []

    async def get_account_utxos(self, account_id: str) -> list[UnspentOutput]:
        self.utxo_filters.append(account_id)
        return [u for u in self.utxos if not account_id or u.account_id == account_id]

    async def get_transactions_by_account_id(self, account_id: str) -> list[dict[str, Any]]:
        return [t for t in self.transactions if account_id in t["accounts"]]

    async def get_transactions_by_tx_id(self, tx_id: str) -> list[dict[str, Any]]:
        return [t for t in self.transactions if not tx_id or t["id"] == tx_id]


class FakeKeys:
    def __init__(self) -> None:
        self.keys: dict[str, str] = {}

    async def create_key(self, alias: str, password: str) -> dict[str, str]:
        xpub = f"xpub_{alias}"
        self.keys[xpub] = password
        return {"alias": alias, "xpub": xpub}

    async def list_keys(self) -> list[dict[str, str]]:
        return [{"xpub": xpub} for xpub in sorted(self.keys)]

    async def delete_key(self, xpub: str, password: str) -> None:
        self._check(xpub, password)
        del self.keys[xpub]

    async def reset_password(self, xpub: str, old_password: str, new_password: str) -> None:
        self._check(xpub, old_password)
        self.keys[xpub] = new_password

    async def sign_template(self, template: dict[str, Any], password: str) -> dict[str, Any]:
        if password != "secret":
            msg = "could not decrypt key with given passphrase"
            raise PermissionError(msg)
        return {**template, "signed": True}

    def _check(self, xpub: str, password: str) -> None:
        if self.keys.get(xpub) != password:
            msg = "invalid key or password"
            raise PermissionError(msg)


class FakeTransactions:
    def __init__(self) -> None:
        self.built: list[list[dict[str, Any]]] = []
        self.submitted: list[dict[str, Any]] = []

    async def build(self, actions: list[dict[str, Any]]) -> dict[str, Any]:
        self.built.append(actions)
        return {"raw_transaction": "0701", "signing_instructions": [], "allow_additional": False}

    async def submit(self, template: dict[str, Any]) -> dict[str, str]:
        self.submitted.append(template)
        return {"tx_id": "ab" * 32}


class FakeChain:
    async def best_block_hash(self) -> str:
        return "12" * 32

    async def block_height(self) -> int:
        return 42

    async def get_block_header_by_hash(self, block_hash: str) -> dict[str, Any]:
        return {"hash": block_hash, "height": 42}

    async def get_block_by_hash(self, block_hash: str) -> dict[str, Any]:
        return {"hash": block_hash, "transactions": []}

    async def get_block_by_height(self, height: int) -> dict[str, Any]:
        return {"height": height, "transactions": []}

    async def get_block_transactions_count_by_hash(self, block_hash: str) -> int:
        return 3

    async def get_block_transactions_count_by_height(self, height: int) -> int:
        return 5

    async def gas_rate(self) -> int:
        return 1000


class FakeNetwork:
    async def net_info(self) -> dict[str, Any]:
        return {"listening": True, "syncing": False, "peer_count": 4}

    async def is_listening(self) -> bool:
        return True

    async def is_syncing(self) -> bool:
        return False

    async def peer_count(self) -> int:
        return 4

    async def is_mining(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_config():
    """Provide a test AppConfig with safe defaults."""
    from walletd.config.settings import AppConfig

    return AppConfig(debug=True)


@pytest.fixture
def wallet_utxos() -> list[UnspentOutput]:
    return [
        make_utxo("acc2", ASSET_A, 5, output_id=b"\x01" * 32),
        make_utxo("acc1", ASSET_B, 3, output_id=b"\x02" * 32),
        make_utxo("acc2", ASSET_A, 7, output_id=b"\x03" * 32, change=True),
    ]


@pytest.fixture
def services(wallet_utxos) -> NodeServices:
    """A fully equipped, wallet-enabled node."""
    return NodeServices(
        accounts=FakeAccounts({"acc1": "alice", "acc2": "bob"}),
        assets=FakeAssets({ASSET_A.hex(): "GOLD"}),
        wallet=FakeWallet(
            wallet_utxos,
            [
                {"id": "tx1", "accounts": ["acc1"]},
                {"id": "tx2", "accounts": ["acc2"]},
            ],
        ),
        keys=FakeKeys(),
        transactions=FakeTransactions(),
        chain=FakeChain(),
        network=FakeNetwork(),
    )


@pytest.fixture
def test_client(app_config, services):
    """Provide a FastAPI TestClient for a wallet-enabled node."""
    from fastapi.testclient import TestClient

    from walletd.api.app import create_app

    app = create_app(config=app_config, services=services)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def read_only_client(app_config):
    """TestClient for a node without accounts/assets services."""
    from fastapi.testclient import TestClient

    from walletd.api.app import create_app

    ro_services = NodeServices(
        wallet=FakeWallet(),
        transactions=FakeTransactions(),
        chain=FakeChain(),
        network=FakeNetwork(),
    )
    app = create_app(config=app_config, services=ro_services)
    return TestClient(app, raise_server_exceptions=False)
