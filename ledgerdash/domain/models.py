"""Ledger value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string.")
    return value


def _require_number(payload: Mapping[str, Any], key: str) -> float:
    value = payload.get(key)
    # bool is an int subclass; a JSON true is not a balance.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field '{key}' must be a number.")
    return float(value)


def _optional_int(payload: Mapping[str, Any], key: str) -> Optional[int]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer or null.")
    return value


@dataclass(frozen=True)
class BalanceResult:
    """Balance of one ledger account as reported by the backend."""

    pubkey: str
    balance_sol: float

    def __post_init__(self) -> None:
        if self.balance_sol < 0:
            raise ValueError("balance_sol must be >= 0.")

    @classmethod
    def from_payload(cls, payload: Any) -> "BalanceResult":
        if not isinstance(payload, Mapping):
            raise ValueError("Balance payload must be an object.")
        return cls(
            pubkey=_require_str(payload, "pubkey"),
            balance_sol=_require_number(payload, "balance_sol"),
        )


@dataclass(frozen=True)
class TransferInput:
    """Validated transfer request.

    ``payer_id`` points at the signing material the backend loads (usually a
    keypair file path); the client never reads it.
    """

    payer_id: str
    receiver_id: str
    amount_sol: float

    def __post_init__(self) -> None:
        if not self.payer_id.strip() or not self.receiver_id.strip():
            raise ValueError("payer_id and receiver_id must be non-empty.")
        if not math.isfinite(self.amount_sol) or self.amount_sol <= 0:
            raise ValueError("amount_sol must be a finite number > 0.")


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a settled transfer."""

    signature: str
    sender_balance_sol: float
    receiver_balance_sol: float

    @classmethod
    def from_payload(cls, payload: Any) -> "TransferResult":
        if not isinstance(payload, Mapping):
            raise ValueError("Transfer payload must be an object.")
        return cls(
            signature=_require_str(payload, "signature"),
            sender_balance_sol=_require_number(payload, "sender_balance_sol"),
            receiver_balance_sol=_require_number(payload, "receiver_balance_sol"),
        )


@dataclass(frozen=True)
class SignatureRecord:
    """Lightweight history entry for one transaction signature."""

    signature: str
    slot: int
    err: Any = None
    """Backend error payload; non-null marks the transaction as failed."""
    memo: Optional[str] = None
    block_time: Optional[int] = None
    """Unix seconds, ``blockTime`` on the wire."""

    def __post_init__(self) -> None:
        if self.slot < 0:
            raise ValueError("slot must be >= 0.")

    @property
    def failed(self) -> bool:
        return self.err is not None

    @classmethod
    def from_payload(cls, payload: Any) -> "SignatureRecord":
        if not isinstance(payload, Mapping):
            raise ValueError("Signature entry must be an object.")
        slot = payload.get("slot")
        if isinstance(slot, bool) or not isinstance(slot, int):
            raise ValueError("Field 'slot' must be an integer.")
        memo = payload.get("memo")
        if memo is not None and not isinstance(memo, str):
            raise ValueError("Field 'memo' must be a string or null.")
        return cls(
            signature=_require_str(payload, "signature"),
            slot=slot,
            err=payload.get("err"),
            memo=memo,
            block_time=_optional_int(payload, "blockTime"),
        )


__all__ = ["BalanceResult", "SignatureRecord", "TransferInput", "TransferResult"]
