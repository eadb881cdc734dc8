"""RPC request schemas.

These define the JSON contract of each endpoint. The CLI client builds its
requests from the same models, so client and server cannot drift apart.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - Pydantic needs this at runtime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from walletd.engine.models import MAX_AMOUNT

Amount = Annotated[int, Field(ge=0, le=MAX_AMOUNT)]

# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class IDFilter(BaseModel):
    """``{"id": ...}`` — empty id means "all"."""

    id: str = ""


class TransactionFilter(BaseModel):
    """POST /list-transactions — by account when ``account_id`` is set."""

    id: str = ""
    account_id: str = ""


# ---------------------------------------------------------------------------
# Accounts / assets
# ---------------------------------------------------------------------------


class CreateAccountRequest(BaseModel):
    root_xpubs: list[str] = Field(min_length=1)
    quorum: int = Field(default=1, ge=1)
    alias: str = ""
    tags: dict[str, Any] | None = None


class UpdateAccountTagsRequest(BaseModel):
    account_info: str
    tags: dict[str, Any] = Field(default_factory=dict)


class AccountInfoRequest(BaseModel):
    """Identifies an account by id or alias."""

    account_info: str


class CreateReceiverRequest(BaseModel):
    account_info: str
    expires_at: datetime | None = None


class CreateAssetRequest(BaseModel):
    root_xpubs: list[str] = Field(min_length=1)
    quorum: int = Field(default=1, ge=1)
    alias: str = ""
    tags: dict[str, Any] | None = None
    definition: dict[str, Any] | None = None


class UpdateAssetTagsRequest(BaseModel):
    asset_info: str
    tags: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class CreateKeyRequest(BaseModel):
    alias: str
    password: str


class DeleteKeyRequest(BaseModel):
    xpub: str
    password: str


class ResetPasswordRequest(BaseModel):
    xpub: str
    old_password: str
    new_password: str


# ---------------------------------------------------------------------------
# Transaction actions
# ---------------------------------------------------------------------------


class Receiver(BaseModel):
    """Destination of a ``control_receiver`` action."""

    control_program: str = Field(min_length=1)
    expires_at: datetime | None = None


class SpendAccountAction(BaseModel):
    type: Literal["spend_account"] = "spend_account"
    asset_id: str
    amount: Amount
    account_id: str


class IssueAction(BaseModel):
    type: Literal["issue"] = "issue"
    asset_id: str
    amount: Amount


class ControlAccountAction(BaseModel):
    type: Literal["control_account"] = "control_account"
    asset_id: str
    amount: Amount
    account_id: str


class ControlReceiverAction(BaseModel):
    type: Literal["control_receiver"] = "control_receiver"
    asset_id: str
    amount: Amount
    receiver: Receiver


Action = Annotated[
    SpendAccountAction | IssueAction | ControlAccountAction | ControlReceiverAction,
    Field(discriminator="type"),
]


class BuildRequest(BaseModel):
    """POST /build-transaction — ordered actions, fee-paying spend first."""

    actions: list[Action] = Field(min_length=1)

    def wire_actions(self) -> list[dict[str, Any]]:
        """Actions as JSON-ready dicts, unset optional fields dropped."""
        return [a.model_dump(mode="json", exclude_none=True) for a in self.actions]


class SignRequest(BaseModel):
    """POST /sign-transaction and /sign-submit-transaction."""

    auth: str
    transaction: dict[str, Any]


class SubmitRequest(BaseModel):
    """POST /submit-transaction."""

    transaction: dict[str, Any]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class BlockHashRequest(BaseModel):
    block_hash: str = Field(min_length=1)


class BlockHeightRequest(BaseModel):
    block_height: int = Field(ge=0)
