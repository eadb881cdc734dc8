"""TransactionTemplateBuilder — CLI parameters to a ``build-transaction`` request.

Two flows are supported. Both start with the fee-paying spend of the
native asset from the same account:

- issue: spend fee, issue *asset*, control the issued amount to the account
- spend: spend fee, spend *asset* from the account, control it to a receiver
"""

from __future__ import annotations

import enum

from walletd.api.schemas import (
    Action,
    BuildRequest,
    ControlAccountAction,
    ControlReceiverAction,
    IssueAction,
    Receiver,
    SpendAccountAction,
)
from walletd.config.settings import DEFAULT_GAS, FEE_ASSET_ID
from walletd.engine.models import MAX_AMOUNT
from walletd.errors.client_errors import LocalValidationError


class BuildKind(enum.StrEnum):
    """Supported transaction template flows."""

    ISSUE = "issue"
    SPEND = "spend"


def parse_amount(value: str | int, name: str = "amount") -> int:
    """Parse a CLI amount into an unsigned 64-bit integer."""
    try:
        amount = int(value)
    except (TypeError, ValueError):
        msg = f"{name} must be an integer, got {value!r}"
        raise LocalValidationError(msg) from None
    if not 0 <= amount <= MAX_AMOUNT:
        msg = f"{name} must be between 0 and {MAX_AMOUNT}"
        raise LocalValidationError(msg)
    return amount


class TransactionTemplateBuilder:
    """Validated parameters of one build request.

    All checks run in the constructor, so an invalid combination never
    reaches the network.
    """

    def __init__(
        self,
        kind: str,
        account_id: str,
        asset_id: str,
        amount: str | int,
        *,
        receiver: str = "",
        gas: str | int = DEFAULT_GAS,
    ) -> None:
        try:
            self.kind = BuildKind(kind)
        except ValueError:
            msg = f"Invalid transaction template type {kind!r}, valid types: issue, spend"
            raise LocalValidationError(msg) from None
        if not account_id:
            msg = "account id is required"
            raise LocalValidationError(msg)
        if not asset_id:
            msg = "asset id is required"
            raise LocalValidationError(msg)
        if self.kind is BuildKind.SPEND and not receiver:
            msg = "a receiver program is required for spend transactions"
            raise LocalValidationError(msg)

        self.account_id = account_id
        self.asset_id = asset_id
        self.amount = parse_amount(amount)
        self.gas = parse_amount(gas, "gas")
        self.receiver = receiver

    def fee_action(self) -> SpendAccountAction:
        return SpendAccountAction(
            asset_id=FEE_ASSET_ID,
            amount=self.gas,
            account_id=self.account_id,
        )

    def actions(self) -> list[Action]:
        """Ordered action list; the fee spend always comes first."""
        if self.kind is BuildKind.ISSUE:
            return [
                self.fee_action(),
                IssueAction(asset_id=self.asset_id, amount=self.amount),
                ControlAccountAction(
                    asset_id=self.asset_id,
                    amount=self.amount,
                    account_id=self.account_id,
                ),
            ]
        return [
            self.fee_action(),
            SpendAccountAction(
                asset_id=self.asset_id,
                amount=self.amount,
                account_id=self.account_id,
            ),
            ControlReceiverAction(
                asset_id=self.asset_id,
                amount=self.amount,
                receiver=Receiver(control_program=self.receiver),
            ),
        ]

    def build_request(self) -> BuildRequest:
        return BuildRequest(actions=self.actions())
