from __future__ import annotations

import pytest

from ledgerdash.adapters.api_errors import ApiClientError
from ledgerdash.domain.models import TransferInput, TransferResult
from ledgerdash.tests.unit.helpers import FakeLedgerPort
from ledgerdash.usecases.submit_transfer import SubmitTransfer
from ledgerdash.viewmodels.operation_state import Phase
from ledgerdash.viewmodels.transfer_vm import TransferVM


def _vm(port: FakeLedgerPort, payer: str = "/k.json", receiver: str = "R1", amount: str = "0.5") -> TransferVM:
    vm = TransferVM(SubmitTransfer(port))
    vm.payer_id = payer
    vm.receiver_id = receiver
    vm.amount = amount
    return vm


@pytest.mark.asyncio
async def test_success_clears_form_and_exposes_result() -> None:
    port = FakeLedgerPort(transfer_result=TransferResult("5xSig", 9.87654, 0.5))
    vm = _vm(port)

    state = await vm.submit()

    assert state.phase is Phase.SUCCEEDED
    assert state.result.signature == "5xSig"
    assert port.calls == [("transfer", TransferInput("/k.json", "R1", 0.5))]
    assert (vm.payer_id, vm.receiver_id, vm.amount) == ("", "", "")
    assert vm.sender_balance_text() == "9.8765 SOL"
    assert vm.receiver_balance_text() == "0.5000 SOL"


@pytest.mark.asyncio
async def test_rejection_shows_body_and_keeps_form() -> None:
    port = FakeLedgerPort(errors={"transfer": ApiClientError("ctx", status=400, body="insufficient funds")})
    vm = _vm(port)

    state = await vm.submit()

    assert state.phase is Phase.FAILED
    assert state.error_message == "insufficient funds"
    assert (vm.payer_id, vm.receiver_id, vm.amount) == ("/k.json", "R1", "0.5")


@pytest.mark.asyncio
async def test_missing_field_fails_locally() -> None:
    port = FakeLedgerPort()
    vm = _vm(port, receiver="  ")

    state = await vm.submit()

    assert state.error_message == "Please fill in all fields"
    assert port.calls == []
    assert vm.receiver_id == "  "


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["0", "-1", "NaN", "abc"])
async def test_bad_amount_fails_locally(amount: str) -> None:
    port = FakeLedgerPort()
    vm = _vm(port, amount=amount)

    state = await vm.submit()

    assert state.error_message == "Please enter a valid amount"
    assert port.calls == []


@pytest.mark.asyncio
async def test_smallest_step_amount_accepted() -> None:
    port = FakeLedgerPort()
    vm = _vm(port, amount="0.0001")

    state = await vm.submit()

    assert state.phase is Phase.SUCCEEDED
    assert port.calls[0][1].amount_sol == pytest.approx(0.0001)


def test_button_label_idle() -> None:
    assert _vm(FakeLedgerPort()).button_label() == "Send Transaction"
