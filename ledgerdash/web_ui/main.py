"""NiceGUI entrypoint for the ledger dashboard."""

from __future__ import annotations

import argparse
import logging

from nicegui import ui

from ledgerdash.utils.logging import configure_logging
from ledgerdash.viewmodels.history_vm import FULL_VIEW, SIGNATURES_VIEW
from ledgerdash.viewmodels.operation_state import OperationState, Phase
from ledgerdash.viewmodels.settings_vm import SettingsVM
from ledgerdash.web_ui.runtime import WebRuntime

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the dashboard."""
    ui.add_head_html(
        """
<style>
:root {
  --ld-bg-a: #f5f0ff;
  --ld-bg-b: #e8efff;
  --ld-card: rgba(255, 255, 255, 0.75);
  --ld-accent: #6d28d9;
  --ld-ok: #15803d;
}
body {
  background: linear-gradient(135deg, var(--ld-bg-a), var(--ld-bg-b));
}
.ld-page { max-width: 1100px; margin: 0 auto; padding: 16px; }
.ld-card { background: var(--ld-card); border-radius: 14px; backdrop-filter: blur(6px); }
.ld-mono { font-family: ui-monospace, monospace; word-break: break-all; }
.ld-ok { color: var(--ld-ok); }
</style>
        """
    )


def _render_error(state: OperationState) -> None:
    """Show the failure text of a FAILED state, nothing otherwise."""
    if state.phase is Phase.FAILED:
        ui.label(state.error_message or "").classes("text-negative")


def _build_ui(settings_vm: SettingsVM) -> None:
    """Register the NiceGUI page; every browser client gets its own runtime."""

    @ui.page("/")
    async def index() -> None:
        _install_theme()
        runtime = WebRuntime(settings_vm)
        ui.context.client.on_disconnect(runtime.dispose)

        balance_vm = runtime.balance_vm
        transfer_vm = runtime.transfer_vm
        history_vm = runtime.history_vm

        @ui.refreshable
        def render_balance() -> None:
            state = balance_vm.state
            with ui.card().classes("ld-card w-full"):
                ui.label("Check Wallet Balance").classes("text-h6")
                ui.input(
                    "Public Key",
                    value=balance_vm.pubkey,
                    placeholder="Enter public key...",
                    on_change=lambda e: setattr(balance_vm, "pubkey", str(e.value or "")),
                ).props("outlined dense").classes("w-full ld-mono")
                ui.button(
                    balance_vm.button_label(), on_click=balance_vm.fetch_balance
                ).props("loading" if state.is_pending else "").classes("w-full")
                _render_error(state)
            if state.phase is Phase.SUCCEEDED and state.result is not None:
                with ui.card().classes("ld-card w-full"):
                    ui.label("Balance Information").classes("text-h6 ld-ok")
                    ui.label("Public Key").classes("text-caption")
                    ui.label(state.result.pubkey).classes("ld-mono")
                    ui.label("Balance").classes("text-caption")
                    ui.label(f"{balance_vm.balance_text()} SOL").classes("text-h4 ld-ok")

        @ui.refreshable
        def render_transfer() -> None:
            state = transfer_vm.state
            with ui.card().classes("ld-card w-full"):
                ui.label("Send Transaction").classes("text-h6")
                ui.input(
                    "Sender Keypair Path",
                    value=transfer_vm.payer_id,
                    placeholder="/path/to/keypair.json",
                    on_change=lambda e: setattr(transfer_vm, "payer_id", str(e.value or "")),
                ).props("outlined dense").classes("w-full ld-mono")
                ui.input(
                    "Receiver Public Key",
                    value=transfer_vm.receiver_id,
                    on_change=lambda e: setattr(transfer_vm, "receiver_id", str(e.value or "")),
                ).props("outlined dense").classes("w-full ld-mono")
                ui.input(
                    "Amount (SOL)",
                    value=transfer_vm.amount,
                    placeholder="0.1",
                    on_change=lambda e: setattr(transfer_vm, "amount", str(e.value or "")),
                ).props("outlined dense").classes("w-full")
                ui.button(
                    transfer_vm.button_label(), on_click=transfer_vm.submit
                ).props("loading" if state.is_pending else "").classes("w-full")
                _render_error(state)
            if state.phase is Phase.SUCCEEDED and state.result is not None:
                with ui.card().classes("ld-card w-full"):
                    ui.label("Transaction Successful").classes("text-h6 ld-ok")
                    ui.label("Transaction Signature").classes("text-caption")
                    ui.label(state.result.signature).classes("ld-mono")
                    with ui.row().classes("w-full q-gutter-lg"):
                        with ui.column():
                            ui.label("Sender Balance").classes("text-caption")
                            ui.label(transfer_vm.sender_balance_text()).classes("text-h6")
                        with ui.column():
                            ui.label("Receiver Balance").classes("text-caption")
                            ui.label(transfer_vm.receiver_balance_text()).classes("text-h6 ld-ok")

        @ui.refreshable
        def render_history() -> None:
            action = (
                history_vm.fetch_full_history
                if history_vm.active_view == FULL_VIEW
                else history_vm.fetch_signatures
            )
            state = history_vm.visible_state()
            with ui.card().classes("ld-card w-full"):
                ui.label("Transaction History").classes("text-h6")
                ui.input(
                    "Public Key",
                    value=history_vm.pubkey,
                    placeholder="Enter public key...",
                    on_change=lambda e: setattr(history_vm, "pubkey", str(e.value or "")),
                ).props("outlined dense").classes("w-full ld-mono")
                ui.toggle(
                    {SIGNATURES_VIEW: "Signatures Only", FULL_VIEW: "Full Details"},
                    value=history_vm.active_view,
                    on_change=lambda e: select_history_view(str(e.value)),
                )
                ui.button(history_vm.button_label(), on_click=action).props(
                    "loading" if state.is_pending else ""
                ).classes("w-full")
                _render_error(state)

            if history_vm.active_view == SIGNATURES_VIEW:
                rows = history_vm.signature_rows()
                if rows:
                    with ui.card().classes("ld-card w-full"):
                        ui.label(history_vm.signatures_heading()).classes("text-h6")
                        for row in rows:
                            with ui.card().classes("w-full q-pa-sm"):
                                with ui.row().classes("w-full justify-between items-start"):
                                    ui.label(row["signature"]).classes("ld-mono text-caption")
                                    ui.badge(row["status"], color="negative" if row["failed"] else "positive")
                                with ui.row().classes("w-full justify-between text-caption"):
                                    ui.label(row["slot"])
                                    ui.label(row["time"])
                                if row["memo"]:
                                    ui.label(f"Memo: {row['memo']}").classes("text-caption text-grey-8")
            else:
                rows = history_vm.full_rows()
                if rows:
                    with ui.card().classes("ld-card w-full"):
                        ui.label(history_vm.full_heading()).classes("text-h6")
                        for row in rows:
                            with ui.card().classes("w-full q-pa-sm"):
                                with ui.row().classes("w-full justify-between"):
                                    ui.badge(row["title"], color="grey-7").props("outline")
                                    if row["time"]:
                                        ui.label(row["time"]).classes("text-caption")
                                ui.code(row["body"], language="json").classes("w-full")

        def select_history_view(view: str) -> None:
            history_vm.select_view(view)
            render_history.refresh()

        renderers = {
            "balance": render_balance,
            "transfer": render_transfer,
            "history": render_history,
        }

        def on_state_change(section: str) -> None:
            renderers[section].refresh()

        runtime.on_state_change = on_state_change

        with ui.column().classes("ld-page w-full"):
            with ui.column().classes("w-full items-center"):
                ui.label("Ledger Wallet").classes("text-h3")
                ui.label("Inspect balances, send transfers and browse history.")
                ui.badge(f"Backend {runtime.backend_url}", color="positive")

            with ui.tabs().classes("w-full") as tabs:
                tab_balance = ui.tab("balance", label="Balance", icon="account_balance_wallet")
                tab_transfer = ui.tab("transfer", label="Transfer", icon="send")
                tab_history = ui.tab("history", label="History", icon="history")
            tabs.on_value_change(lambda e: runtime.select_tab(str(e.value)))

            with ui.tab_panels(tabs, value=tab_balance).classes("w-full"):
                with ui.tab_panel(tab_balance):
                    render_balance()
                with ui.tab_panel(tab_transfer):
                    render_transfer()
                with ui.tab_panel(tab_history):
                    render_history()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the ledger dashboard web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8081)
    parser.add_argument("--backend-url", default=None, help="Ledger backend base URL.")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    settings_vm = SettingsVM.from_env()
    if args.backend_url:
        settings_vm.backend_url = args.backend_url
    if args.debug:
        settings_vm.debug_logging = True
    configure_logging(debug=settings_vm.debug_logging)
    if args.smoke_test:
        runtime = WebRuntime(settings_vm)
        print("web-smoke-ok", runtime.backend_url, settings_vm.receiver_field)
        return
    _build_ui(settings_vm)
    LOGGER.info("Dashboard on %s:%s, backend %s", args.host, args.port, settings_vm.backend_url)
    ui.run(
        host=args.host,
        port=args.port,
        title="Ledger Wallet",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
