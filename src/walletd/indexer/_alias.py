"""Alias lookup shared by the indexers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from walletd.engine.services import AliasResolver

logger = logging.getLogger(__name__)


def resolve_alias(resolver: AliasResolver, id_: str) -> str:
    """Return the alias for *id_*, or ``""`` if the lookup yields nothing.

    A failing lookup is logged and treated as "no alias"; it never fails
    the request.
    """
    try:
        alias = resolver.get_alias_by_id(id_)
    except Exception:
        logger.warning("alias lookup failed for %s", id_, exc_info=True)
        return ""
    return alias or ""
