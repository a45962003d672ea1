"""Order state for the three-course lunch flow."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from lunchtray.config import TAX_RATE
from lunchtray.data import MENU_ITEMS, lookup_item
from lunchtray.models import ItemType, MenuItem, OrderSnapshot, Selection, to_decimal
from lunchtray.rendering import format_currency

logger = logging.getLogger("lunchtray")

ZERO = Decimal("0")
CENT = Decimal("0.01")

OrderListener = Callable[[OrderSnapshot], None]


class OrderState:
    """Selections for entree, side and accompaniment plus derived money fields.

    Every setter leaves ``subtotal``, ``tax`` and ``total`` consistent with the
    current selections before any listener is notified. Changing a slot swaps
    the previous item's price for the new one instead of adding to it.

    A menu id that is not in the menu deselects the slot.
    """

    def __init__(
        self,
        menu_items: Mapping[str, MenuItem] | None = None,
        tax_rate: Decimal | str | float = TAX_RATE,
    ) -> None:
        rate = to_decimal(tax_rate)
        if not rate.is_finite() or not (ZERO <= rate < 1):
            raise ValueError(f"tax_rate must be in [0, 1), got {rate}")

        self.menu_items: Mapping[str, MenuItem] = MENU_ITEMS if menu_items is None else menu_items
        self._tax_rate = rate
        self._listeners: list[OrderListener] = []
        self._selections: dict[ItemType, Selection] = {}
        self._previous_prices: dict[ItemType, Decimal] = {}
        self._subtotal = ZERO
        self._tax = ZERO
        self._total = ZERO
        self._clear()

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def entree(self) -> Selection:
        return self._selections[ItemType.ENTREE]

    @property
    def side(self) -> Selection:
        return self._selections[ItemType.SIDE]

    @property
    def accompaniment(self) -> Selection:
        return self._selections[ItemType.ACCOMPANIMENT]

    @property
    def subtotal(self) -> Decimal:
        return self._subtotal

    @property
    def tax(self) -> Decimal:
        return self._tax

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def formatted_subtotal(self) -> str:
        return format_currency(self._subtotal)

    @property
    def formatted_tax(self) -> str:
        return format_currency(self._tax)

    @property
    def formatted_total(self) -> str:
        return format_currency(self._total)

    def set_entree(self, item_id: str) -> Selection:
        """Set the entree for the order."""
        return self.set_selection(ItemType.ENTREE, item_id)

    def set_side(self, item_id: str) -> Selection:
        """Set the side for the order."""
        return self.set_selection(ItemType.SIDE, item_id)

    def set_accompaniment(self, item_id: str) -> Selection:
        """Set the accompaniment for the order."""
        return self.set_selection(ItemType.ACCOMPANIMENT, item_id)

    def selection(self, item_type: ItemType) -> Selection:
        return self._selections[ItemType(item_type)]

    def set_selection(self, item_type: ItemType, item_id: str) -> Selection:
        """Replace one slot's selection and reprice the order."""
        slot = ItemType(item_type)
        current = self._selections[slot]
        self._previous_prices[slot] = current.price if current is not None else ZERO
        self._subtotal -= self._previous_prices[slot]

        item = lookup_item(item_id, self.menu_items)
        if item is None:
            logger.warning("unknown menu id=%r slot=%s, deselecting", item_id, slot.value)
        else:
            logger.debug("select slot=%s id=%r price=%s", slot.value, item_id, item.price)
        self._selections[slot] = item

        self._subtotal += item.price if item is not None else ZERO
        self._update_tax_and_total()
        self._notify()
        return item

    def calculate_tax_and_total(self) -> None:
        """Recompute tax and total from the current subtotal."""
        self._update_tax_and_total()
        self._notify()

    def reset_order(self) -> None:
        """Clear every selection and amount. Call on submit or cancel."""
        self._clear()
        logger.info("order reset")
        self._notify()

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            entree=self.entree,
            side=self.side,
            accompaniment=self.accompaniment,
            subtotal=self._subtotal,
            tax=self._tax,
            total=self._total,
        )

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register a listener called after each completed update.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update_tax_and_total(self) -> None:
        self._tax = (self._subtotal * self._tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)
        self._total = self._subtotal + self._tax

    def _clear(self) -> None:
        for slot in ItemType:
            self._selections[slot] = None
            self._previous_prices[slot] = ZERO
        self._subtotal = ZERO
        self._tax = ZERO
        self._total = ZERO

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
