"""Response schemas produced by the indexers."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AssetAmount(BaseModel):
    """Total held of one asset within an account."""

    asset_alias: str = ""
    asset_id: str
    amount: int = Field(ge=0)


class AccountBalance(BaseModel):
    """Per-account balances, one entry per asset, ordered by asset id."""

    id: str
    alias: str = ""
    balances: list[AssetAmount] = Field(default_factory=list)


class AnnotatedUnspentOutput(BaseModel):
    """Display form of an unspent output; binary fields are lowercase hex."""

    alias: str = ""
    id: str
    asset_id: str
    amount: int
    account_id: str
    program_index: int
    program: str
    source_id: str
    source_pos: int
    ref_data: str
    change: bool
