from decimal import Decimal
from typing import Iterable, Optional, Tuple

import attrs

from cinesphere.service.booking.domain.seat_ledger import SeatLedger
from cinesphere.service.booking.domain.value_object.money import to_money


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'{type(instance).__name__} {attribute.name} cannot be empty')


@attrs.frozen
class MenuItem:
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: Decimal = attrs.field(converter=to_money)
    category: str = attrs.field(validator=_validate_non_empty_string)


DEFAULT_MENU: Tuple[MenuItem, ...] = (
    MenuItem(name='Caramel Popcorn (Large)', price=Decimal('350.00'), category='Popcorn'),
    MenuItem(name='Salty Popcorn (Medium)', price=Decimal('250.00'), category='Popcorn'),
    MenuItem(name='Coca-Cola (500ml)', price=Decimal('150.00'), category='Beverage'),
    MenuItem(name='Fresh Lime Soda', price=Decimal('180.00'), category='Beverage'),
    MenuItem(name='Nachos with Cheese Dip', price=Decimal('290.00'), category='Snack'),
    MenuItem(name='Veg Burger', price=Decimal('220.00'), category='Snack'),
)


@attrs.define
class Theater:
    """A theater owns its seat ledger and its menu; neither outlives it."""

    name: str = attrs.field(validator=_validate_non_empty_string)
    city: str = attrs.field(validator=_validate_non_empty_string)
    state: str = attrs.field(validator=_validate_non_empty_string)
    seat_ledger: SeatLedger = attrs.field(factory=SeatLedger)
    menu: Tuple[MenuItem, ...] = attrs.field(converter=tuple, default=DEFAULT_MENU)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        city: str,
        state: str,
        standard_rows: int,
        premium_rows: int,
        seats_per_row: int,
        menu: Optional[Iterable[MenuItem]] = None,
    ) -> 'Theater':
        return cls(
            name=name,
            city=city,
            state=state,
            seat_ledger=SeatLedger.build(
                premium_rows=premium_rows,
                standard_rows=standard_rows,
                seats_per_row=seats_per_row,
            ),
            menu=DEFAULT_MENU if menu is None else tuple(menu),
        )
