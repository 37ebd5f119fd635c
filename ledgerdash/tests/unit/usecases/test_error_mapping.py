from __future__ import annotations

from ledgerdash.adapters.api_errors import ApiClientError, ApiError, ApiTransportError
from ledgerdash.domain.errors import BACKEND_UNREACHABLE, REQUEST_FAILED, ValidationError
from ledgerdash.usecases.error_mapping import UNREACHABLE_HINT, map_api_error


def test_use_case_errors_pass_through() -> None:
    err = ValidationError("Please enter a valid public key")

    assert map_api_error(err, failure_message="x") is err


def test_transport_error_appends_hint() -> None:
    mapped = map_api_error(ApiTransportError("refused"), failure_message="Failed to fetch balance.")

    assert mapped.code == BACKEND_UNREACHABLE
    assert mapped.message == f"Failed to fetch balance. {UNREACHABLE_HINT}"


def test_body_only_surfaced_when_requested() -> None:
    err = ApiClientError("ctx", status=422, body="bad receiver")

    assert map_api_error(err, failure_message="Generic.").message == "Generic."
    assert map_api_error(err, failure_message="Generic.", surface_body=True).message == "bad receiver"


def test_unusual_status_is_request_failure() -> None:
    mapped = map_api_error(ApiError("ctx", status=302, body=""), failure_message="Nope.")

    assert mapped.code == REQUEST_FAILED
    assert mapped.message == "Nope."


def test_unknown_exception_uses_failure_message() -> None:
    mapped = map_api_error(KeyError("x"), failure_message="Nope.")

    assert mapped.code == REQUEST_FAILED
    assert mapped.message == "Nope."
