"""Currency formatting and Rich rendering helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from lunchtray.config import CURRENCY_SYMBOL
from lunchtray.constant import ITEM_TYPE_BADGES
from lunchtray.models import ItemType, MenuItem, OrderSnapshot, Selection, to_decimal

_SLOT_TITLES: dict[ItemType, str] = {
    ItemType.ENTREE: "Entree",
    ItemType.SIDE: "Side",
    ItemType.ACCOMPANIMENT: "Accompaniment",
}


def format_currency(amount: Decimal | str | int | float) -> str:
    """Render an amount as currency, e.g. ``$1,234.50``."""
    value = to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"


def formatted_price(item: MenuItem) -> str:
    return format_currency(item.price)


def slot_title(item_type: ItemType) -> str:
    return _SLOT_TITLES[ItemType(item_type)]


def badge_style(item_type: ItemType) -> str:
    """Return a consistent badge style for course tags."""
    item_type = ItemType(item_type)
    if item_type is ItemType.ENTREE:
        return "bold #ffffff on #b23a48"
    if item_type is ItemType.SIDE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_item_label(item: MenuItem) -> Text:
    """Render an item with its course badge and price."""
    text = Text()
    text.append(ITEM_TYPE_BADGES[item.type.value], style=badge_style(item.type))
    text.append(f" {item.name}  ")
    text.append(formatted_price(item), style="dim")
    return text


def format_selection(item_type: ItemType, selection: Selection) -> Text:
    text = Text()
    text.append(f"{slot_title(item_type)}: ", style="bold")
    if selection is None:
        text.append("(none)", style="dim")
    else:
        text.append_text(format_item_label(selection))
    return text


def format_order_summary(snapshot: OrderSnapshot) -> Text:
    """Render the three slots followed by subtotal, tax and total."""
    text = Text()
    for item_type in ItemType:
        text.append_text(format_selection(item_type, snapshot.selection(item_type)))
        text.append("\n")
    text.append("\n")
    text.append(f"Subtotal: {format_currency(snapshot.subtotal)}\n")
    text.append(f"Tax: {format_currency(snapshot.tax)}\n")
    text.append(f"Total: {format_currency(snapshot.total)}", style="bold")
    return text
