from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ledgerdash.domain.models import (
    BalanceResult,
    SignatureRecord,
    TransferInput,
    TransferResult,
)


class FakeLedgerPort:
    """In-memory ``LedgerPort`` recording every call.

    ``errors`` maps an operation name to the exception it should raise.
    """

    def __init__(
        self,
        *,
        balance: float = 1.5,
        transfer_result: Optional[TransferResult] = None,
        signatures: Sequence[SignatureRecord] = (),
        full: Sequence[Dict[str, Any]] = (),
        errors: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.balance = balance
        self.transfer_result = transfer_result or TransferResult("sig-xyz", 9.5, 0.5)
        self.signatures = list(signatures)
        self.full = list(full)
        self.errors = dict(errors or {})
        self.calls: List[tuple] = []

    def _maybe_raise(self, name: str) -> None:
        exc = self.errors.get(name)
        if exc is not None:
            raise exc

    def get_balance(self, pubkey: str) -> BalanceResult:
        self.calls.append(("get_balance", pubkey))
        self._maybe_raise("get_balance")
        return BalanceResult(pubkey=pubkey, balance_sol=self.balance)

    def transfer(self, transfer: TransferInput) -> TransferResult:
        self.calls.append(("transfer", transfer))
        self._maybe_raise("transfer")
        return self.transfer_result

    def list_signatures(self, pubkey: str) -> List[SignatureRecord]:
        self.calls.append(("list_signatures", pubkey))
        self._maybe_raise("list_signatures")
        return list(self.signatures)

    def list_full_transactions(self, pubkey: str) -> List[Dict[str, Any]]:
        self.calls.append(("list_full_transactions", pubkey))
        self._maybe_raise("list_full_transactions")
        return list(self.full)


class ResponseStub:
    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class SessionStub:
    """Stands in for ``JsonSession``; returns queued responses in order."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _next(self) -> ResponseStub:
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url: str, *, timeout: Optional[float] = None) -> ResponseStub:
        self.calls.append({"method": "GET", "url": url, "timeout": timeout})
        return self._next()

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> ResponseStub:
        self.calls.append({"method": "POST", "url": url, "json_body": json_body, "timeout": timeout})
        return self._next()


__all__ = ["FakeLedgerPort", "ResponseStub", "SessionStub"]
