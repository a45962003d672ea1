"""Static menu data."""

from __future__ import annotations

from collections.abc import Mapping

from lunchtray.constant import MENU_TABLE
from lunchtray.models import ItemType, MenuItem

MENU_ITEMS: dict[str, MenuItem] = {
    item_id: MenuItem(
        name=row["name"],
        description=row["description"],
        price=row["price"],
        type=ItemType(row["type"]),
    )
    for item_id, row in MENU_TABLE.items()
}

COURSE_ORDER: tuple[ItemType, ...] = (ItemType.ENTREE, ItemType.SIDE, ItemType.ACCOMPANIMENT)


def lookup_item(item_id: str, menu: Mapping[str, MenuItem] = MENU_ITEMS) -> MenuItem | None:
    """Get a menu item by id, or None when the id is unknown."""
    return menu.get(item_id)


def items_for_type(item_type: ItemType, menu: Mapping[str, MenuItem] = MENU_ITEMS) -> list[tuple[str, MenuItem]]:
    """Return (id, item) pairs of one course, in menu order."""
    item_type = ItemType(item_type)
    return [(item_id, item) for item_id, item in menu.items() if item.type is item_type]
