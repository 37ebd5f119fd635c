from __future__ import annotations

from typing import Callable, Optional

from ledgerdash.domain.models import BalanceResult
from ledgerdash.usecases.fetch_balance import FetchBalance

from .operation_state import AsyncOperation, OperationState
from .status_format import format_sol


class BalanceVM:
    """Public-key form and balance lookup state. No I/O here."""

    def __init__(
        self,
        fetch_balance: FetchBalance,
        *,
        on_change: Optional[Callable[[OperationState[BalanceResult]], None]] = None,
    ) -> None:
        self.uc_fetch_balance = fetch_balance
        self.pubkey: str = ""
        self.operation: AsyncOperation[BalanceResult] = AsyncOperation(
            "balance", on_change=on_change
        )

    @property
    def state(self) -> OperationState[BalanceResult]:
        return self.operation.state

    async def fetch_balance(self) -> OperationState[BalanceResult]:
        pubkey = self.pubkey
        return await self.operation.run(
            self.uc_fetch_balance,
            lambda: self.uc_fetch_balance.validate(pubkey),
        )

    def button_label(self) -> str:
        return "Fetching Balance..." if self.state.is_pending else "Get Balance"

    def balance_text(self) -> str:
        result = self.state.result
        return format_sol(result.balance_sol) if result is not None else ""

    def dispose(self) -> None:
        self.operation.dispose()
