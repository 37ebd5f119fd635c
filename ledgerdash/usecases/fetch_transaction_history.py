"""Use cases for the two transaction history views.

``FetchSignatures`` reads the lightweight signature list and
``FetchFullHistory`` the expanded transaction records. Both keep the backend's
element order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ledgerdash.domain.models import SignatureRecord
from ledgerdash.domain.ports import FullTransactionRecord, LedgerPort, UseCaseError

from .error_mapping import map_api_error
from .validate_inputs import validate_pubkey

SIGNATURES_FAILED = "Failed to fetch transaction history."
FULL_HISTORY_FAILED = "Failed to fetch full transaction history."


@dataclass
class FetchSignatures:
    ledger_port: LedgerPort

    @staticmethod
    def validate(pubkey: str) -> str:
        return validate_pubkey(pubkey)

    def __call__(self, pubkey: str) -> List[SignatureRecord]:
        self.validate(pubkey)
        try:
            return list(self.ledger_port.list_signatures(pubkey))
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(exc, failure_message=SIGNATURES_FAILED) from exc


@dataclass
class FetchFullHistory:
    ledger_port: LedgerPort

    @staticmethod
    def validate(pubkey: str) -> str:
        return validate_pubkey(pubkey)

    def __call__(self, pubkey: str) -> List[FullTransactionRecord]:
        self.validate(pubkey)
        try:
            return list(self.ledger_port.list_full_transactions(pubkey))
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(exc, failure_message=FULL_HISTORY_FAILED) from exc
