from __future__ import annotations

from ledgerdash.adapters.ledger_rest import LedgerRestAdapter
from ledgerdash.app.controller import AppController
from ledgerdash.tests.unit.helpers import FakeLedgerPort
from ledgerdash.viewmodels.settings_vm import SettingsVM


def test_ensure_ready_builds_rest_adapter_from_settings() -> None:
    settings = SettingsVM()
    settings.apply_dict(
        {"backend_url": "http://ledger:7000", "request_timeout_s": 4, "receiver_field": "receiver_id"}
    )
    controller = AppController(settings)

    assert controller.ensure_ready()

    port = controller.ledger_port
    assert isinstance(port, LedgerRestAdapter)
    assert port.base_url == "http://ledger:7000"
    assert port.receiver_field == "receiver_id"
    assert controller.uc_fetch_balance.ledger_port is port
    assert controller.uc_fetch_full_history.ledger_port is port


def test_injected_port_skips_adapter_construction() -> None:
    fake = FakeLedgerPort()
    controller = AppController(SettingsVM(), ledger_port=fake)

    assert controller.ensure_ready()
    assert controller.ledger_port is fake
    assert controller.uc_submit_transfer.ledger_port is fake


def test_ensure_ready_caches_until_reset() -> None:
    controller = AppController(SettingsVM())
    controller.ensure_ready()
    first = controller.ledger_port

    controller.ensure_ready()
    assert controller.ledger_port is first

    controller.reset()
    assert controller.ledger_port is None
    assert controller.uc_fetch_signatures is None
    controller.ensure_ready()
    assert controller.ledger_port is not first


def test_invalid_settings_leave_controller_unready() -> None:
    settings = SettingsVM()
    settings.backend_url = "ftp://ledger"
    controller = AppController(settings)

    assert controller.ensure_ready() is False
    assert controller.ledger_port is None
    assert controller.uc_fetch_balance is None
