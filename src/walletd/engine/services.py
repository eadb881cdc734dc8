"""Collaborator capabilities consumed by the RPC handlers.

Storage, signing, consensus and networking live outside this package.
The node embedding the API hands in whichever of these it runs; the
endpoint registry decides from that set which operations to expose.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from walletd.errors.definitions import service_unavailable

if TYPE_CHECKING:
    from datetime import datetime

    from walletd.engine.models import UnspentOutput


@runtime_checkable
class AliasResolver(Protocol):
    """Resolve an opaque id to a display alias; ``""`` when unknown."""

    def get_alias_by_id(self, id_: str) -> str: ...


class AccountsService(AliasResolver, Protocol):
    """Account registry."""

    async def list_accounts(self, id_: str) -> list[Any]: ...

    async def create_account(
        self,
        root_xpubs: list[str],
        quorum: int,
        alias: str,
        tags: dict[str, Any] | None,
    ) -> Any: ...

    async def update_tags(self, account_info: str, tags: dict[str, Any]) -> None: ...

    async def delete_account(self, account_info: str) -> None: ...

    async def create_receiver(self, account_info: str, expires_at: datetime | None) -> Any: ...

    async def create_control_program(self, account_info: str) -> Any: ...

class AssetsService(AliasResolver, Protocol):
    """Asset registry."""

    async def list_assets(self, id_: str) -> list[Any]: ...

    async def create_asset(
        self,
        root_xpubs: list[str],
        quorum: int,
        alias: str,
        tags: dict[str, Any] | None,
        definition: dict[str, Any] | None,
    ) -> Any: ...

    async def update_tags(self, asset_info: str, tags: dict[str, Any]) -> None: ...


class WalletService(Protocol):
    """Wallet index over unspent outputs and transaction history."""

    async def get_account_utxos(self, account_id: str) -> list[UnspentOutput]: ...

    async def get_transactions_by_account_id(self, account_id: str) -> list[Any]: ...

    async def get_transactions_by_tx_id(self, tx_id: str) -> list[Any]: ...


class KeyStore(Protocol):
    """Key management and template signing."""

    async def create_key(self, alias: str, password: str) -> Any: ...

    async def list_keys(self) -> list[Any]: ...

    async def delete_key(self, xpub: str, password: str) -> None: ...

    async def reset_password(self, xpub: str, old_password: str, new_password: str) -> None: ...

    async def sign_template(self, template: dict[str, Any], password: str) -> dict[str, Any]: ...


class TransactionService(Protocol):
    """Template building and submission to the mempool."""

    async def build(self, actions: list[dict[str, Any]]) -> dict[str, Any]: ...

    async def submit(self, template: dict[str, Any]) -> Any: ...


class ChainService(Protocol):
    """Read access to the block store."""

    async def best_block_hash(self) -> str: ...

    async def block_height(self) -> int: ...

    async def get_block_header_by_hash(self, block_hash: str) -> Any: ...

    async def get_block_by_hash(self, block_hash: str) -> Any: ...

    async def get_block_by_height(self, height: int) -> Any: ...

    async def get_block_transactions_count_by_hash(self, block_hash: str) -> int: ...

    async def get_block_transactions_count_by_height(self, height: int) -> int: ...

    async def gas_rate(self) -> int: ...


class NetworkService(Protocol):
    """Peer-to-peer and mining status."""

    async def net_info(self) -> Any: ...

    async def is_listening(self) -> bool: ...

    async def is_syncing(self) -> bool: ...

    async def peer_count(self) -> int: ...

    async def is_mining(self) -> bool: ...


@dataclass(frozen=True)
class NodeServices:
    """The set of collaborators supplied at construction time.

    Any of them may be absent. Fetch one inside a handler with
    :meth:`require`, which fails the request with a 503 envelope
    when the collaborator was not supplied.
    """

    accounts: AccountsService | None = None
    assets: AssetsService | None = None
    wallet: WalletService | None = None
    keys: KeyStore | None = None
    transactions: TransactionService | None = None
    chain: ChainService | None = None
    network: NetworkService | None = None

    @property
    def wallet_enabled(self) -> bool:
        """Accounts and assets are both present."""
        return self.accounts is not None and self.assets is not None

    def require(self, name: str) -> Any:
        """Return the collaborator called *name* or raise a 503 error."""
        service = getattr(self, name)
        if service is None:
            raise service_unavailable(name)
        return service

    def present(self) -> list[str]:
        """Names of the collaborators that were supplied."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
