"""Use case for reading one account balance."""

from __future__ import annotations

from dataclasses import dataclass

from ledgerdash.domain.models import BalanceResult
from ledgerdash.domain.ports import LedgerPort, UseCaseError

from .error_mapping import map_api_error
from .validate_inputs import validate_pubkey

BALANCE_FAILED = "Failed to fetch balance."


@dataclass
class FetchBalance:
    ledger_port: LedgerPort

    @staticmethod
    def validate(pubkey: str) -> str:
        return validate_pubkey(pubkey)

    def __call__(self, pubkey: str) -> BalanceResult:
        """Fetch the balance for ``pubkey``.

        Raises:
            UseCaseError: ``VALIDATION`` for a blank key, otherwise the mapped
            adapter failure. Backend error bodies are not surfaced.
        """
        self.validate(pubkey)
        try:
            return self.ledger_port.get_balance(pubkey)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(exc, failure_message=BALANCE_FAILED) from exc
