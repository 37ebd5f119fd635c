"""Display formatting helpers for view models.

Call context:
    ``BalanceVM``, ``TransferVM`` and ``HistoryVM`` call these helpers to turn
    typed results into operator-facing labels. Nothing here interprets ledger
    semantics.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone, tzinfo
from typing import Any, Optional

from ledgerdash.domain.models import SignatureRecord

UNKNOWN_TIME = "Unknown"


def format_sol(value: float) -> str:
    """Render an amount with four decimals, e.g. ``1.2346``."""
    return f"{float(value):.4f}"


def format_block_time(timestamp: Optional[int], tz: Optional[tzinfo] = None) -> str:
    """Convert Unix seconds into local date-time text.

    Missing, zero or out-of-range timestamps render as ``"Unknown"``.
    """
    if not timestamp:
        return UNKNOWN_TIME
    try:
        moment = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
        local = moment.astimezone(tz) if tz is not None else moment.astimezone()
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIME
    return local.strftime("%Y-%m-%d %H:%M:%S")


def signature_status_label(record: SignatureRecord) -> str:
    return "Failed" if record.failed else "Success"


def pretty_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


__all__ = [
    "UNKNOWN_TIME",
    "format_block_time",
    "format_sol",
    "pretty_json",
    "signature_status_label",
]
