"""Domain-level error types for use-case and adapter mapping.

Validation failures are raised before any network call and carry the exact
text shown to the user.
"""

from __future__ import annotations

from .ports import UseCaseError

VALIDATION = "VALIDATION"
BACKEND_UNREACHABLE = "BACKEND_UNREACHABLE"
REQUEST_FAILED = "REQUEST_FAILED"


class ValidationError(UseCaseError):
    """Local input rejection; never reaches the network."""

    def __init__(self, message: str) -> None:
        super().__init__(VALIDATION, message)


__all__ = ["BACKEND_UNREACHABLE", "REQUEST_FAILED", "VALIDATION", "ValidationError"]
