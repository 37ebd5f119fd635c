"""History tab state: one public key, two independent fetches.

The signatures list and the full records list each own an ``AsyncOperation``.
``active_view`` only chooses which one is shown; switching it never starts,
resets or cancels a fetch.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, Callable, Dict, List, Optional

from ledgerdash.domain.models import SignatureRecord
from ledgerdash.domain.ports import FullTransactionRecord
from ledgerdash.usecases.fetch_transaction_history import FetchFullHistory, FetchSignatures

from .operation_state import AsyncOperation, OperationState
from .status_format import format_block_time, pretty_json, signature_status_label

SIGNATURES_VIEW = "signatures"
FULL_VIEW = "full"
HISTORY_VIEWS = (SIGNATURES_VIEW, FULL_VIEW)


class HistoryVM:
    def __init__(
        self,
        fetch_signatures: FetchSignatures,
        fetch_full_history: FetchFullHistory,
        *,
        on_change: Optional[Callable[[OperationState[Any]], None]] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.uc_fetch_signatures = fetch_signatures
        self.uc_fetch_full_history = fetch_full_history
        self.tz = tz
        self.pubkey: str = ""
        self.active_view: str = SIGNATURES_VIEW
        self.signatures: AsyncOperation[List[SignatureRecord]] = AsyncOperation(
            "signatures", on_change=on_change
        )
        self.full_history: AsyncOperation[List[FullTransactionRecord]] = AsyncOperation(
            "full_history", on_change=on_change
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_view(self, view: str) -> None:
        if view not in HISTORY_VIEWS:
            raise ValueError(f"Unknown history view: {view!r}")
        self.active_view = view

    async def fetch_signatures(self) -> OperationState[List[SignatureRecord]]:
        pubkey = self.pubkey
        return await self.signatures.run(
            self.uc_fetch_signatures,
            lambda: self.uc_fetch_signatures.validate(pubkey),
        )

    async def fetch_full_history(self) -> OperationState[List[FullTransactionRecord]]:
        pubkey = self.pubkey
        return await self.full_history.run(
            self.uc_fetch_full_history,
            lambda: self.uc_fetch_full_history.validate(pubkey),
        )

    def dispose(self) -> None:
        self.signatures.dispose()
        self.full_history.dispose()

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    def visible_state(self) -> OperationState[Any]:
        if self.active_view == FULL_VIEW:
            return self.full_history.state
        return self.signatures.state

    def button_label(self) -> str:
        if self.active_view == FULL_VIEW:
            if self.full_history.state.is_pending:
                return "Fetching Full History..."
            return "Get Full Transaction History"
        if self.signatures.state.is_pending:
            return "Fetching Signatures..."
        return "Get Transaction Signatures"

    def signature_rows(self) -> List[Dict[str, Any]]:
        records = self.signatures.state.result or []
        return [
            {
                "signature": record.signature,
                "status": signature_status_label(record),
                "failed": record.failed,
                "slot": f"Slot: {record.slot}",
                "time": format_block_time(record.block_time, self.tz),
                "memo": record.memo or "",
            }
            for record in records
        ]

    def full_rows(self) -> List[Dict[str, Any]]:
        records = self.full_history.state.result or []
        rows: List[Dict[str, Any]] = []
        for index, record in enumerate(records, start=1):
            block_time = record.get("blockTime")
            rows.append(
                {
                    "title": f"Transaction {index}",
                    "time": format_block_time(block_time, self.tz)
                    if isinstance(block_time, int) and block_time
                    else "",
                    "body": pretty_json(record),
                }
            )
        return rows

    def signatures_heading(self) -> str:
        return f"Transaction Signatures ({len(self.signatures.state.result or [])})"

    def full_heading(self) -> str:
        return f"Full Transaction Details ({len(self.full_history.state.result or [])})"
