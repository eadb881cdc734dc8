"""Records handed to the API by the wallet collaborator."""

from __future__ import annotations

from dataclasses import dataclass

MAX_AMOUNT = (1 << 64) - 1


@dataclass(frozen=True)
class UnspentOutput:
    """A spendable balance unit tied to one account and one asset.

    Owned by the wallet; read-only here.
    """

    account_id: str
    asset_id: bytes
    amount: int  # unsigned 64-bit
    program: bytes = b""
    program_index: int = 0
    source_id: bytes = b""
    source_pos: int = 0
    ref_data: bytes = b""
    change: bool = False
    output_id: bytes = b""
