"""Checkout modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from lunchtray.models import OrderSnapshot
from lunchtray.rendering import format_order_summary

SUBMIT = "submit"
CANCEL = "cancel"


class CheckoutModal(ModalScreen[str | None]):
    """Review the order, then submit it, cancel it or go back."""

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-body {
        color: white;
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

    def __init__(self, snapshot: OrderSnapshot) -> None:
        super().__init__()
        self.snapshot = snapshot

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Order Summary", id="checkout-title")
            yield Static(id="checkout-body")
            yield Static("Enter/s submit. c cancel order. Esc/b back.", id="checkout-help")

    def on_mount(self) -> None:
        self.query_one("#checkout-body", Static).update(format_order_summary(self.snapshot))

    def on_key(self, event: Key) -> None:
        if event.key in {"enter", "s"}:
            self.dismiss(SUBMIT)
            event.stop()
            return

        if event.key == "c":
            self.dismiss(CANCEL)
            event.stop()
            return

        if event.key in {"escape", "b", "left"}:
            self.dismiss(None)
            event.stop()
            return
