"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from ledgerdash.adapters.api_errors import ApiError, ApiTransportError
from ledgerdash.domain.errors import BACKEND_UNREACHABLE, REQUEST_FAILED
from ledgerdash.domain.ports import UseCaseError

UNREACHABLE_HINT = "Make sure the ledger backend is running."


def map_api_error(
    exc: Exception,
    *,
    failure_message: str,
    surface_body: bool = False,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised while talking to the ledger port.
        failure_message: Fixed text shown for application-level rejections.
        surface_body: Show the backend response body verbatim instead of
            ``failure_message`` when the body is non-empty.

    Returns:
        UseCaseError: ``BACKEND_UNREACHABLE`` for transport failures,
        ``REQUEST_FAILED`` for everything the backend rejected.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTransportError):
        return UseCaseError(BACKEND_UNREACHABLE, _unreachable_message(failure_message))
    if isinstance(exc, ApiError):
        if surface_body and exc.body:
            return UseCaseError(REQUEST_FAILED, exc.body)
        return UseCaseError(REQUEST_FAILED, failure_message)
    return UseCaseError(REQUEST_FAILED, failure_message)


def _unreachable_message(failure_message: str) -> str:
    base = failure_message.strip().rstrip(".")
    return f"{base}. {UNREACHABLE_HINT}"


__all__ = ["UNREACHABLE_HINT", "map_api_error"]
