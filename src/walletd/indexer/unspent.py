"""UnspentOutputIndexer — display form of raw unspent outputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from walletd.indexer._alias import resolve_alias
from walletd.indexer.models import AnnotatedUnspentOutput

if TYPE_CHECKING:
    from collections.abc import Iterable

    from walletd.engine.models import UnspentOutput
    from walletd.engine.services import AliasResolver


class UnspentOutputIndexer:
    """Map each unspent output to an :class:`AnnotatedUnspentOutput`.

    One output per input, in input order. Binary fields are rendered as
    lowercase hex and the account alias is resolved.
    """

    def __init__(self, *, accounts: AliasResolver) -> None:
        self._accounts = accounts

    def annotate(self, utxo: UnspentOutput) -> AnnotatedUnspentOutput:
        """Annotate a single output."""
        return AnnotatedUnspentOutput(
            alias=resolve_alias(self._accounts, utxo.account_id),
            id=utxo.output_id.hex(),
            asset_id=utxo.asset_id.hex(),
            amount=utxo.amount,
            account_id=utxo.account_id,
            program_index=utxo.program_index,
            program=utxo.program.hex(),
            source_id=utxo.source_id.hex(),
            source_pos=utxo.source_pos,
            ref_data=utxo.ref_data.hex(),
            change=utxo.change,
        )

    def index(self, utxos: Iterable[UnspentOutput]) -> list[AnnotatedUnspentOutput]:
        return [self.annotate(utxo) for utxo in utxos]
