from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for ledger REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        body: str = "",
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the ledger backend."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        body: str = "",
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, body=body, context=context)


class ApiServerError(ApiError):
    """HTTP 5xx from the ledger backend."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        body: str = "",
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, body=body, context=context)


class ApiTransportError(ApiError):
    """Request could not complete: unreachable host, timeout, or malformed payload."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


def response_text(resp: Any) -> str:
    """Best-effort extraction of the raw response body without raising."""
    try:
        text = resp.text
    except Exception:
        return ""
    return text if isinstance(text, str) else ""


def build_error_message(ctx: str, status: int, body: str) -> str:
    snippet = (body or "").strip()[:400]
    if snippet:
        return f"{ctx}: {snippet} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTransportError",
    "build_error_message",
    "response_text",
]
