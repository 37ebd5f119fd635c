from __future__ import annotations

import json
from datetime import timezone

import pytest

from ledgerdash.adapters.api_errors import ApiTransportError
from ledgerdash.domain.errors import BACKEND_UNREACHABLE
from ledgerdash.domain.models import SignatureRecord
from ledgerdash.tests.unit.helpers import FakeLedgerPort
from ledgerdash.usecases.fetch_transaction_history import FetchFullHistory, FetchSignatures
from ledgerdash.viewmodels.history_vm import FULL_VIEW, SIGNATURES_VIEW, HistoryVM
from ledgerdash.viewmodels.operation_state import Phase


def _vm(port: FakeLedgerPort) -> HistoryVM:
    return HistoryVM(FetchSignatures(port), FetchFullHistory(port), tz=timezone.utc)


@pytest.mark.asyncio
async def test_fetch_signatures_scenario() -> None:
    record = SignatureRecord("sig1", 100, None, None, 1700000000)
    port = FakeLedgerPort(signatures=[record])
    vm = _vm(port)
    vm.pubkey = "ABC123"

    state = await vm.fetch_signatures()

    assert state.phase is Phase.SUCCEEDED
    assert state.result == [record]
    assert port.calls == [("list_signatures", "ABC123")]
    assert vm.signature_rows() == [
        {
            "signature": "sig1",
            "status": "Success",
            "failed": False,
            "slot": "Slot: 100",
            "time": "2023-11-14 22:13:20",
            "memo": "",
        }
    ]
    assert vm.signatures_heading() == "Transaction Signatures (1)"


@pytest.mark.asyncio
async def test_failed_records_do_not_fail_operation() -> None:
    records = [
        SignatureRecord("ok", 3, None, None, None),
        SignatureRecord("bad", 2, {"InstructionError": [0, "Custom"]}, "memo", 0),
    ]
    vm = _vm(FakeLedgerPort(signatures=records))
    vm.pubkey = "K"

    state = await vm.fetch_signatures()

    assert state.phase is Phase.SUCCEEDED
    rows = vm.signature_rows()
    assert [row["status"] for row in rows] == ["Success", "Failed"]
    assert [row["time"] for row in rows] == ["Unknown", "Unknown"]
    assert rows[1]["memo"] == "memo"


@pytest.mark.asyncio
async def test_sub_operations_are_independent() -> None:
    full = [{"slot": 9, "blockTime": 1700000000, "meta": {"fee": 5000}}, {"slot": 8}]
    port = FakeLedgerPort(
        full=full,
        errors={"list_signatures": ApiTransportError("refused")},
    )
    vm = _vm(port)
    vm.pubkey = "K"

    full_state = await vm.fetch_full_history()
    sig_state = await vm.fetch_signatures()

    assert full_state.phase is Phase.SUCCEEDED
    assert sig_state.phase is Phase.FAILED
    assert sig_state.error_code == BACKEND_UNREACHABLE
    assert vm.full_history.state is full_state

    rows = vm.full_rows()
    assert [row["title"] for row in rows] == ["Transaction 1", "Transaction 2"]
    assert rows[0]["time"] == "2023-11-14 22:13:20"
    assert rows[1]["time"] == ""
    assert json.loads(rows[0]["body"]) == full[0]
    assert vm.full_heading() == "Full Transaction Details (2)"


@pytest.mark.asyncio
async def test_switching_view_keeps_cached_results() -> None:
    port = FakeLedgerPort(signatures=[SignatureRecord("s", 1)], full=[{"slot": 1}])
    vm = _vm(port)
    vm.pubkey = "K"
    await vm.fetch_signatures()

    vm.select_view(FULL_VIEW)
    assert vm.visible_state().phase is Phase.IDLE
    assert vm.button_label() == "Get Full Transaction History"
    vm.select_view(SIGNATURES_VIEW)

    assert vm.visible_state().result == [SignatureRecord("s", 1)]
    assert len(port.calls) == 1


@pytest.mark.asyncio
async def test_blank_pubkey_fails_both_without_network() -> None:
    port = FakeLedgerPort()
    vm = _vm(port)
    vm.pubkey = " "

    sig_state = await vm.fetch_signatures()
    full_state = await vm.fetch_full_history()

    assert sig_state.error_message == full_state.error_message == "Please enter a valid public key"
    assert port.calls == []


def test_unknown_view_rejected() -> None:
    with pytest.raises(ValueError):
        _vm(FakeLedgerPort()).select_view("graph")


@pytest.mark.asyncio
async def test_millisecond_block_time_renders_unknown() -> None:
    vm = _vm(FakeLedgerPort(signatures=[SignatureRecord("ms", 1, block_time=1700000000000)]))
    vm.pubkey = "K"

    await vm.fetch_signatures()

    assert vm.signature_rows()[0]["time"] == "Unknown"
