"""Use case for submitting a payer -> receiver transfer."""

from __future__ import annotations

from dataclasses import dataclass

from ledgerdash.domain.models import TransferInput, TransferResult
from ledgerdash.domain.ports import LedgerPort, UseCaseError

from .error_mapping import map_api_error
from .validate_inputs import AmountText, validate_transfer

TRANSFER_FAILED = "Transaction failed"


@dataclass
class SubmitTransfer:
    """Validate form values and hand the transfer to the ledger backend.

    Signing happens on the backend; ``payer_id`` is forwarded untouched.
    """

    ledger_port: LedgerPort

    @staticmethod
    def validate(payer_id: str, receiver_id: str, amount: AmountText) -> TransferInput:
        return validate_transfer(payer_id, receiver_id, amount)

    def __call__(self, transfer: TransferInput) -> TransferResult:
        """Submit ``transfer``.

        Raises:
            UseCaseError: ``REQUEST_FAILED`` carrying the backend response body
            verbatim (or ``"Transaction failed"`` when it is empty), or
            ``BACKEND_UNREACHABLE`` when no response arrived.
        """
        try:
            return self.ledger_port.transfer(transfer)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(
                exc, failure_message=TRANSFER_FAILED, surface_body=True
            ) from exc
