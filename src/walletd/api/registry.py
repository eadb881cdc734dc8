"""EndpointRegistry — the immutable name → endpoint table.

The table is built once at startup by :class:`RegistryBuilder`, which
checks the supplied collaborators and picks one of two variants:

- ``wallet``    — core endpoints plus every wallet endpoint
- ``read_only`` — core endpoints only; wallet paths are simply absent and
  fall through to the NotFound envelope
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from walletd.api.endpoint import Endpoint, EndpointGroup
from walletd.errors.walletd_errors import RegistryError

if TYPE_CHECKING:
    from walletd.engine.services import NodeServices

logger = logging.getLogger(__name__)


class RegistryVariant(enum.StrEnum):
    """Which endpoint set a registry exposes."""

    WALLET = "wallet"
    READ_ONLY = "read_only"


class EndpointRegistry(Mapping[str, Endpoint]):
    """Read-only mapping of endpoint name to :class:`Endpoint`."""

    def __init__(self, variant: RegistryVariant, endpoints: Iterable[Endpoint]) -> None:
        table: dict[str, Endpoint] = {}
        for endpoint in endpoints:
            if not isinstance(endpoint, Endpoint):
                msg = f"not an Endpoint: {endpoint!r}"
                raise RegistryError(msg)
            if endpoint.name in table:
                msg = f"duplicate endpoint {endpoint.name!r}"
                raise RegistryError(msg)
            if variant is RegistryVariant.READ_ONLY and endpoint.group is EndpointGroup.WALLET:
                msg = f"wallet endpoint {endpoint.name!r} in a read-only registry"
                raise RegistryError(msg)
            table[endpoint.name] = endpoint
        self._variant = variant
        self._table = MappingProxyType(table)

    @property
    def variant(self) -> RegistryVariant:
        return self._variant

    @property
    def wallet_enabled(self) -> bool:
        return self._variant is RegistryVariant.WALLET

    def match(self, path: str) -> Endpoint | None:
        """Return the endpoint serving URL *path* (``/list-balances``), if any."""
        return self._table.get(path.strip("/"))

    def __getitem__(self, name: str) -> Endpoint:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"EndpointRegistry(variant={self._variant.value!r}, endpoints={len(self)})"


class RegistryBuilder:
    """Choose the registry variant from the collaborators present.

    Usage::

        registry = RegistryBuilder(services).build()
    """

    def __init__(
        self,
        services: NodeServices,
        *,
        core: Iterable[Endpoint] | None = None,
        wallet: Iterable[Endpoint] | None = None,
    ) -> None:
        if core is None or wallet is None:
            from walletd.api.handlers import CORE_ENDPOINTS, WALLET_ENDPOINTS

            core = CORE_ENDPOINTS if core is None else core
            wallet = WALLET_ENDPOINTS if wallet is None else wallet
        self._services = services
        self._core = tuple(core)
        self._wallet = tuple(wallet)

    def build(self) -> EndpointRegistry:
        """Build the registry; logs once when the wallet endpoints are left out."""
        if self._services.wallet_enabled:
            return EndpointRegistry(RegistryVariant.WALLET, (*self._wallet, *self._core))
        logger.warning(
            "Wallet disabled: accounts and assets services are required, "
            "%d wallet endpoints not registered",
            len(self._wallet),
        )
        return EndpointRegistry(RegistryVariant.READ_ONLY, self._core)
