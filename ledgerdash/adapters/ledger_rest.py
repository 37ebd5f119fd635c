from __future__ import annotations

import logging
from typing import Any, List
from urllib.parse import quote

import requests

from ledgerdash.domain.models import (
    BalanceResult,
    SignatureRecord,
    TransferInput,
    TransferResult,
)
from ledgerdash.domain.ports import FullTransactionRecord, LedgerPort, Pubkey

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTransportError,
    build_error_message,
    response_text,
)
from .http_client import HttpConfig, JsonSession

LOGGER = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://127.0.0.1:8080"
# Field name read by the existing backend (sic).
DEFAULT_RECEIVER_FIELD = "reciever_id"


class LedgerRestAdapter(LedgerPort):
    """REST adapter for the balance, transfer and history endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        *,
        request_timeout_s: float = 10,
        receiver_field: str = DEFAULT_RECEIVER_FIELD,
    ) -> None:
        if not str(base_url or "").strip():
            raise ValueError("LedgerRestAdapter requires a backend URL")
        if not str(receiver_field or "").strip():
            raise ValueError("receiver_field must be a non-empty string")

        self.base_url = str(base_url).strip().rstrip("/")
        self.receiver_field = str(receiver_field).strip()
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = JsonSession(self.cfg)

    def get_balance(self, pubkey: Pubkey) -> BalanceResult:
        ctx = f"balance[{pubkey}]"
        resp = self.session.get(self._make_url("balance", pubkey))
        self._ensure_ok(resp, ctx)
        return self._parse(BalanceResult.from_payload, self._json_any(resp, ctx), ctx)

    def transfer(self, transfer: TransferInput) -> TransferResult:
        ctx = "transfer"
        body = {
            "payer_id": transfer.payer_id,
            self.receiver_field: transfer.receiver_id,
            "amount_in_sol": transfer.amount_sol,
        }
        resp = self.session.post(self._make_url("transfer"), json_body=body)
        self._ensure_ok(resp, ctx)
        return self._parse(TransferResult.from_payload, self._json_any(resp, ctx), ctx)

    def list_signatures(self, pubkey: Pubkey) -> List[SignatureRecord]:
        ctx = f"signatures[{pubkey}]"
        resp = self.session.get(self._make_url("transaction", pubkey))
        self._ensure_ok(resp, ctx)
        data = self._expect_list(self._json_any(resp, ctx), ctx)
        return [self._parse(SignatureRecord.from_payload, entry, ctx) for entry in data]

    def list_full_transactions(self, pubkey: Pubkey) -> List[FullTransactionRecord]:
        ctx = f"full_history[{pubkey}]"
        resp = self.session.get(self._make_url("transaction", "full", pubkey))
        self._ensure_ok(resp, ctx)
        data = self._expect_list(self._json_any(resp, ctx), ctx)
        records: List[FullTransactionRecord] = []
        for entry in data:
            if not isinstance(entry, dict):
                raise ApiTransportError(f"{ctx}: expected object entries", context=ctx)
            records.append(entry)
        return records

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, *segments: str) -> str:
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self.base_url}/{path}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        body = response_text(resp)
        message = build_error_message(ctx, status, body)
        LOGGER.info("%s", message)
        if 400 <= status < 500:
            raise ApiClientError(message, status=status, body=body, context=ctx)
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, body=body, context=ctx)
        raise ApiError(message, status=status, body=body, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = response_text(resp)[:400]
            raise ApiTransportError(
                f"{ctx}: invalid JSON response: {snippet}", context=ctx
            ) from exc

    @staticmethod
    def _expect_list(data: Any, ctx: str) -> List[Any]:
        if not isinstance(data, list):
            raise ApiTransportError(f"{ctx}: expected list response", context=ctx)
        return data

    @staticmethod
    def _parse(factory, payload: Any, ctx: str):
        try:
            return factory(payload)
        except (TypeError, ValueError) as exc:
            raise ApiTransportError(f"{ctx}: malformed response: {exc}", context=ctx) from exc


__all__ = ["DEFAULT_BACKEND_URL", "DEFAULT_RECEIVER_FIELD", "LedgerRestAdapter"]
