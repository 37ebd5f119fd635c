"""Client-side input checks that run before any network call."""

from __future__ import annotations

import math
from typing import Union

from ledgerdash.domain.errors import ValidationError
from ledgerdash.domain.models import TransferInput

INVALID_PUBKEY = "Please enter a valid public key"
MISSING_FIELDS = "Please fill in all fields"
INVALID_AMOUNT = "Please enter a valid amount"

AmountText = Union[str, int, float]


def validate_pubkey(pubkey: str) -> str:
    """Return ``pubkey`` unchanged when it has non-blank content.

    The key is not stripped; the backend receives exactly what
    the user typed.
    """
    if not isinstance(pubkey, str) or not pubkey.strip():
        raise ValidationError(INVALID_PUBKEY)
    return pubkey


def validate_transfer(payer_id: str, receiver_id: str, amount: AmountText) -> TransferInput:
    """Build a ``TransferInput`` from raw form values.

    Checks run in order and the first failure wins: missing fields, then the
    amount.
    """
    amount_text = amount if isinstance(amount, str) else str(amount)
    if not _filled(payer_id) or not _filled(receiver_id) or not amount_text.strip():
        raise ValidationError(MISSING_FIELDS)
    amount_sol = parse_amount(amount)
    return TransferInput(payer_id=payer_id, receiver_id=receiver_id, amount_sol=amount_sol)


def parse_amount(amount: AmountText) -> float:
    if isinstance(amount, bool):
        raise ValidationError(INVALID_AMOUNT)
    try:
        value = float(amount.strip() if isinstance(amount, str) else amount)
    except (TypeError, ValueError):
        raise ValidationError(INVALID_AMOUNT)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(INVALID_AMOUNT)
    return value


def _filled(value: str) -> bool:
    return isinstance(value, str) and bool(value.strip())


__all__ = [
    "INVALID_AMOUNT",
    "INVALID_PUBKEY",
    "MISSING_FIELDS",
    "parse_amount",
    "validate_pubkey",
    "validate_transfer",
]
