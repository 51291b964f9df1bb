from decimal import Decimal
from typing import Dict, Tuple

import attrs

from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.domain.entity.theater_entity import MenuItem
from cinesphere.service.booking.domain.value_object.money import ZERO, to_money


@attrs.frozen
class FoodOrderLine:
    name: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return to_money(self.unit_price * self.quantity)


@attrs.define
class FoodOrder:
    """
    Quantity-aggregated food order, keyed by item name (case-sensitive).

    The unit price is captured on the first addition of an item. Lines are
    exposed ordered by item name.
    """

    _lines: Dict[str, FoodOrderLine] = attrs.field(factory=dict, init=False)

    @Logger.io
    def add_item(self, item: MenuItem, quantity: int) -> None:
        if quantity <= 0:
            return

        existing = self._lines.get(item.name)
        if existing is None:
            self._lines[item.name] = FoodOrderLine(
                name=item.name, quantity=quantity, unit_price=item.price
            )
        else:
            self._lines[item.name] = attrs.evolve(existing, quantity=existing.quantity + quantity)

    def lines(self) -> Tuple[FoodOrderLine, ...]:
        return tuple(self._lines[name] for name in sorted(self._lines))

    def total_price(self) -> Decimal:
        return to_money(sum((line.subtotal for line in self._lines.values()), ZERO))

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines
