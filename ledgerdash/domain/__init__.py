"""Domain package exports for ledger value objects and ports."""

from .errors import ValidationError
from .models import BalanceResult, SignatureRecord, TransferInput, TransferResult
from .ports import FullTransactionRecord, LedgerPort, Pubkey, UseCaseError

__all__ = [
    "BalanceResult",
    "FullTransactionRecord",
    "LedgerPort",
    "Pubkey",
    "SignatureRecord",
    "TransferInput",
    "TransferResult",
    "UseCaseError",
    "ValidationError",
]
