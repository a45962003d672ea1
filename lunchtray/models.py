"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum


class ItemType(str, Enum):
    """Course a menu item belongs to."""

    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"


def to_decimal(value: Decimal | str | int | float) -> Decimal:
    """Normalise a price-like value to Decimal."""
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f"not a decimal amount: {value!r}") from None


@dataclass(frozen=True)
class MenuItem:
    """A dish that can fill one order slot."""

    name: str
    description: str
    price: Decimal
    type: ItemType

    def __post_init__(self) -> None:
        price = to_decimal(self.price)
        if not price.is_finite() or price < 0:
            raise ValueError(f"price must be a finite non-negative amount, got {price}")
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "type", ItemType(self.type))


Selection = MenuItem | None


@dataclass(frozen=True)
class OrderSnapshot:
    """Consistent view of an order after an update has completed."""

    entree: Selection
    side: Selection
    accompaniment: Selection
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def selection(self, item_type: ItemType) -> Selection:
        return getattr(self, ItemType(item_type).value)
