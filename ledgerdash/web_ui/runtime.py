"""NiceGUI runtime orchestration for the ledger dashboard.

This module composes the settings, controller and the three operation
viewmodels for one browser client.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ledgerdash.app.controller import AppController
from ledgerdash.domain.ports import LedgerPort
from ledgerdash.viewmodels.balance_vm import BalanceVM
from ledgerdash.viewmodels.history_vm import HistoryVM
from ledgerdash.viewmodels.operation_state import OperationState
from ledgerdash.viewmodels.settings_vm import SettingsVM
from ledgerdash.viewmodels.transfer_vm import TransferVM

LOGGER = logging.getLogger(__name__)

TABS = ("balance", "transfer", "history")


class WebRuntime:
    """Per-client state used by NiceGUI views.

    Each viewmodel owns its operation state; the runtime only holds the tab
    selection and forwards state changes to ``on_state_change``.
    """

    def __init__(
        self,
        settings_vm: Optional[SettingsVM] = None,
        *,
        ledger_port: Optional[LedgerPort] = None,
    ) -> None:
        self.settings_vm = settings_vm or SettingsVM.from_env()
        self.controller = AppController(self.settings_vm, ledger_port=ledger_port)
        if not self.controller.ensure_ready():
            raise ValueError(f"Invalid ledger settings: {self.settings_vm.to_dict()}")
        self.on_state_change: Optional[Callable[[str], None]] = None
        self.active_tab: str = TABS[0]

        self.balance_vm = BalanceVM(
            self.controller.uc_fetch_balance,
            on_change=self._forward("balance"),
        )
        self.transfer_vm = TransferVM(
            self.controller.uc_submit_transfer,
            on_change=self._forward("transfer"),
        )
        self.history_vm = HistoryVM(
            self.controller.uc_fetch_signatures,
            self.controller.uc_fetch_full_history,
            on_change=self._forward("history"),
        )

    @property
    def backend_url(self) -> str:
        return self.settings_vm.backend_url

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.active_tab = tab

    def dispose(self) -> None:
        """Stop applying responses once the browser client is gone."""
        LOGGER.debug("Disposing runtime for %s", self.backend_url)
        self.on_state_change = None
        self.balance_vm.dispose()
        self.transfer_vm.dispose()
        self.history_vm.dispose()

    def _forward(self, section: str) -> Callable[[OperationState[Any]], None]:
        def _notify(_state: OperationState[Any]) -> None:
            if self.on_state_change:
                self.on_state_change(section)

        return _notify
