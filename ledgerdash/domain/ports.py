from __future__ import annotations

from typing import Any, Dict, List, Protocol

from .models import BalanceResult, SignatureRecord, TransferInput, TransferResult

Pubkey = str
FullTransactionRecord = Dict[str, Any]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class LedgerPort(Protocol):
    """Balance, transfer and history operations against the ledger backend."""

    def get_balance(self, pubkey: Pubkey) -> BalanceResult: ...
    def transfer(self, transfer: TransferInput) -> TransferResult: ...
    def list_signatures(self, pubkey: Pubkey) -> List[SignatureRecord]: ...
    def list_full_transactions(
        self, pubkey: Pubkey
    ) -> List[FullTransactionRecord]: ...  # opaque backend-defined records
