"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunchtray.checkout_modal import CANCEL, SUBMIT, CheckoutModal
from lunchtray.data import COURSE_ORDER, items_for_type
from lunchtray.models import ItemType, OrderSnapshot
from lunchtray.order_state import OrderState
from lunchtray.rendering import format_currency, format_item_label, format_order_summary, slot_title

logger = logging.getLogger("lunchtray")

START = "start"
CHECKOUT = "checkout"


class LunchTrayApp(App):
    """A Textual app that walks through entree, side and accompaniment."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #item-detail {
        height: 3;
        color: $text-muted;
    }

    #order-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    step = reactive(START)
    cursor_index = reactive(0)

    BINDINGS = [
        ("enter", "select_current", "Select"),
        ("j", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("n", "next_step", "Next course"),
        ("right", "next_step", "Next course"),
        ("b", "previous_step", "Back"),
        ("left", "previous_step", "Back"),
        ("ctrl+c", "cancel_order", "Cancel order"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, order: OrderState | None = None) -> None:
        super().__init__()
        self.order = order if order is not None else OrderState()
        self.system_status = ""
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="menu-title", classes="pane-title")
                yield Static(id="menu-list")
                yield Static(id="item-detail")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-summary")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._unsubscribe = self.order.subscribe(self._on_order_changed)
        logger.info("app mounted")
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def current_course(self) -> ItemType | None:
        if self.step in (START, CHECKOUT):
            return None
        return ItemType(self.step)

    def action_select_current(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        if self.step == START:
            self._go_to(ItemType.ENTREE.value)
            return

        course = self.current_course()
        if course is None:
            return
        entries = items_for_type(course, self.order.menu_items)
        if not entries:
            return

        item_id, _ = entries[self.cursor_index]
        item = self.order.set_selection(course, item_id)
        if item is not None:
            self.system_status = f"{slot_title(course)}: {item.name}"
        self._refresh_status()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        course = self.current_course()
        if course is None:
            return

        entries = items_for_type(course, self.order.menu_items)
        if not entries:
            self.cursor_index = 0
            return
        self.cursor_index = (self.cursor_index + delta) % len(entries)
        self._refresh_menu()

    def action_next_step(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        course = self.current_course()
        if course is None:
            return

        idx = COURSE_ORDER.index(course)
        if idx + 1 < len(COURSE_ORDER):
            self._go_to(COURSE_ORDER[idx + 1].value)
            return
        self._open_checkout()

    def action_previous_step(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        course = self.current_course()
        if course is None:
            return

        idx = COURSE_ORDER.index(course)
        if idx == 0:
            return
        self._go_to(COURSE_ORDER[idx - 1].value)

    def action_cancel_order(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        if self.step == START:
            return
        self._finish_order(CANCEL)

    def _open_checkout(self) -> None:
        self.step = CHECKOUT
        logger.debug("checkout opened total=%s", self.order.total)
        self.push_screen(CheckoutModal(self.order.snapshot()), callback=self._on_checkout_closed)

    def _on_checkout_closed(self, result: str | None) -> None:
        if result in (SUBMIT, CANCEL):
            self._finish_order(result)
            return
        self._go_to(ItemType.ACCOMPANIMENT.value)

    def _finish_order(self, outcome: str) -> None:
        if outcome == SUBMIT:
            logger.info("order submitted total=%s", self.order.total)
            self.system_status = f"Order submitted: {self.order.formatted_total}"
        else:
            logger.info("order cancelled")
            self.system_status = "Order cancelled"
        self.order.reset_order()
        self._go_to(START)

    def _go_to(self, step: str) -> None:
        self.step = step
        course = self.current_course()
        self.cursor_index = 0
        if course is not None:
            # Land on the current selection when revisiting a course.
            selected = self.order.selection(course)
            for idx, (_, item) in enumerate(items_for_type(course, self.order.menu_items)):
                if item == selected:
                    self.cursor_index = idx
                    break
        self._refresh_all()

    def _on_order_changed(self, snapshot: OrderSnapshot) -> None:
        self._refresh_order(snapshot)
        self._refresh_menu()
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order(self.order.snapshot())
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#menu-title", Static)
            menu_list = self.query_one("#menu-list", Static)
            detail = self.query_one("#item-detail", Static)
        except NoMatches:
            return

        course = self.current_course()
        if course is None:
            title.update("Lunch Tray")
            menu_list.update("Press Enter to start an order.")
            detail.update("")
            return

        title.update(f"Choose {slot_title(course).lower()}")
        entries = items_for_type(course, self.order.menu_items)
        if not entries:
            menu_list.update("No items")
            detail.update("")
            return

        if self.cursor_index >= len(entries):
            self.cursor_index = 0

        selected = self.order.selection(course)
        lines = Text()
        for idx, (_, item) in enumerate(entries):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            checked = "(•) " if item == selected else "( ) "
            lines.append(pointer + checked)
            lines.append_text(format_item_label(item))
        menu_list.update(lines)
        detail.update(entries[self.cursor_index][1].description)

    def _refresh_order(self, snapshot: OrderSnapshot) -> None:
        try:
            summary = self.query_one("#order-summary", Static)
        except NoMatches:
            return
        summary.update(format_order_summary(snapshot))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        status = self.system_status or "Ready"
        if self.current_course() is None:
            bar.update(f"Enter start. Ctrl+Q quit.\n{status}")
            return
        bar.update(
            f"J/K move, Enter select, N next, B back, Ctrl+C cancel. Subtotal {format_currency(self.order.subtotal)}\n{status}"
        )
