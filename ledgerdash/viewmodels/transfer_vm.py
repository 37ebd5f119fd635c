from __future__ import annotations

from typing import Callable, Optional

from ledgerdash.domain.models import TransferResult
from ledgerdash.usecases.submit_transfer import SubmitTransfer

from .operation_state import AsyncOperation, OperationState
from .status_format import format_sol


class TransferVM:
    """Transfer form fields and submission state.

    The form is cleared after a successful submission and left as typed after
    a failure so the user can correct and resend.
    """

    def __init__(
        self,
        submit_transfer: SubmitTransfer,
        *,
        on_change: Optional[Callable[[OperationState[TransferResult]], None]] = None,
    ) -> None:
        self.uc_submit_transfer = submit_transfer
        self.payer_id: str = ""
        self.receiver_id: str = ""
        self.amount: str = ""
        self.operation: AsyncOperation[TransferResult] = AsyncOperation(
            "transfer", on_change=on_change
        )

    @property
    def state(self) -> OperationState[TransferResult]:
        return self.operation.state

    async def submit(self) -> OperationState[TransferResult]:
        payer_id, receiver_id, amount = self.payer_id, self.receiver_id, self.amount
        return await self.operation.run(
            self.uc_submit_transfer,
            lambda: self.uc_submit_transfer.validate(payer_id, receiver_id, amount),
            on_success=lambda _result: self.clear_form(),
        )

    def clear_form(self) -> None:
        self.payer_id = ""
        self.receiver_id = ""
        self.amount = ""

    def button_label(self) -> str:
        return "Processing Transaction..." if self.state.is_pending else "Send Transaction"

    def sender_balance_text(self) -> str:
        result = self.state.result
        return f"{format_sol(result.sender_balance_sol)} SOL" if result is not None else ""

    def receiver_balance_text(self) -> str:
        result = self.state.result
        return f"{format_sol(result.receiver_balance_sol)} SOL" if result is not None else ""

    def dispose(self) -> None:
        self.operation.dispose()
