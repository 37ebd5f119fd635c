"""Adapter and use-case wiring for the dashboard runtime.

This module owns lazy construction of the ledger REST adapter and the
use-case objects that depend on values in
:class:`ledgerdash.viewmodels.settings_vm.SettingsVM`. It is invoked by the web
runtime before any viewmodel is built.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.ledger_rest import LedgerRestAdapter
from ..domain.ports import LedgerPort
from ..usecases.fetch_balance import FetchBalance
from ..usecases.fetch_transaction_history import FetchFullHistory, FetchSignatures
from ..usecases.submit_transfer import SubmitTransfer
from ..viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


class AppController:
    """Create and cache the ledger adapter and use-cases from settings state.

    Call chain:
        ``ledgerdash.web_ui.runtime.WebRuntime`` creates one instance per
        browser client and calls ``ensure_ready`` before building viewmodels.
    """

    def __init__(self, settings_vm: SettingsVM, *, ledger_port: Optional[LedgerPort] = None) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings holding the backend URL, timeout and receiver
                wire field used to build the adapter.
            ledger_port: Optional pre-built port, used instead of the REST
                adapter (tests, alternative transports).
        """
        self.settings_vm = settings_vm
        self._injected_port = ledger_port
        self._ledger_port: Optional[LedgerPort] = None
        self.uc_fetch_balance: Optional[FetchBalance] = None
        self.uc_submit_transfer: Optional[SubmitTransfer] = None
        self.uc_fetch_signatures: Optional[FetchSignatures] = None
        self.uc_fetch_full_history: Optional[FetchFullHistory] = None

    @property
    def ledger_port(self) -> Optional[LedgerPort]:
        """Return the cached port used for every backend request."""
        return self._ledger_port

    def reset(self) -> None:
        """Drop the cached adapter and use-cases.

        Side Effects:
            The next ``ensure_ready`` call rebuilds everything from current
            settings values.
        """
        self._ledger_port = None
        self.uc_fetch_balance = None
        self.uc_submit_transfer = None
        self.uc_fetch_signatures = None
        self.uc_fetch_full_history = None

    def ensure_ready(self) -> bool:
        """Ensure the adapter and use-cases exist.

        Returns:
            ``True`` when dependencies are available, ``False`` when settings
            are invalid.
        """
        if self._ledger_port is not None:
            return True
        if self._injected_port is not None:
            port: LedgerPort = self._injected_port
        else:
            if not self.settings_vm.is_valid():
                LOGGER.warning("Ledger settings invalid: %s", self.settings_vm.to_dict())
                return False
            port = LedgerRestAdapter(
                self.settings_vm.backend_url,
                request_timeout_s=self.settings_vm.request_timeout_s,
                receiver_field=self.settings_vm.receiver_field,
            )
            LOGGER.info("Ledger backend: %s", self.settings_vm.backend_url)

        self._ledger_port = port
        self.uc_fetch_balance = FetchBalance(port)
        self.uc_submit_transfer = SubmitTransfer(port)
        self.uc_fetch_signatures = FetchSignatures(port)
        self.uc_fetch_full_history = FetchFullHistory(port)
        return True
