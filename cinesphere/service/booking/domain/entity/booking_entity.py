from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List, Tuple

import attrs

from cinesphere.platform.config.business_config import FoodDiscount
from cinesphere.platform.exception.exceptions import DomainError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrder, FoodOrderLine
from cinesphere.service.booking.domain.entity.showtime_entity import Showtime
from cinesphere.service.booking.domain.entity.theater_entity import Theater
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus
from cinesphere.service.booking.domain.value_object.booking_record import BookingRecord
from cinesphere.service.booking.domain.value_object.money import ZERO, to_money
from cinesphere.service.booking.domain.value_object.showtime_key import ShowtimeKey


if TYPE_CHECKING:
    from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog


def _ticket_subtotal(*, theater: Theater, seat_ids: Iterable[str]) -> Decimal:
    # Seat ids missing from the theater are skipped, the subtotal undercounts
    total = ZERO
    for seat_id in seat_ids:
        seat = theater.seat_ledger.find_seat(seat_id)
        if seat is not None:
            total += seat.price
    return to_money(total)


def _food_discount(food_subtotal: Decimal) -> Decimal:
    if food_subtotal > FoodDiscount.THRESHOLD:
        return to_money(food_subtotal * FoodDiscount.RATE)
    return ZERO


@attrs.frozen
class Booking:
    """Snapshot of a confirmed transaction. Totals are computed once, at construction."""

    id: int
    showtime_id: int
    showtime_key: ShowtimeKey
    seat_ids: Tuple[str, ...] = attrs.field(converter=tuple)
    food_lines: Tuple[FoodOrderLine, ...] = attrs.field(converter=tuple, factory=tuple)
    ticket_subtotal: Decimal = ZERO
    food_subtotal: Decimal = ZERO
    discount: Decimal = ZERO
    grand_total: Decimal = ZERO

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        booking_id: int,
        showtime: Showtime,
        catalog: 'Catalog',
        seat_ids: List[str],
        food_order: FoodOrder,
    ) -> 'Booking':
        """
        Fresh booking: seats are expected to be BOOKED already.

        Discount is 10% of the food subtotal when it exceeds the threshold.
        """
        if not seat_ids:
            raise DomainError('A booking needs at least one seat')

        theater = catalog.theater(showtime.theater_id)
        ticket_subtotal = _ticket_subtotal(theater=theater, seat_ids=seat_ids)
        food_subtotal = food_order.total_price()
        discount = _food_discount(food_subtotal)

        return cls(
            id=booking_id,
            showtime_id=showtime.id,
            showtime_key=showtime.key,
            seat_ids=seat_ids,
            food_lines=food_order.lines(),
            ticket_subtotal=ticket_subtotal,
            food_subtotal=food_subtotal,
            discount=discount,
            grand_total=to_money(ticket_subtotal + food_subtotal - discount),
        )

    @classmethod
    @Logger.io
    def reconstruct(
        cls,
        *,
        booking_id: int,
        showtime: Showtime,
        catalog: 'Catalog',
        seat_ids: Iterable[str],
    ) -> 'Booking':
        """Rebuild a persisted booking. Food detail is not persisted, so only tickets count."""
        seat_ids = tuple(seat_ids)
        ticket_subtotal = _ticket_subtotal(
            theater=catalog.theater(showtime.theater_id), seat_ids=seat_ids
        )
        return cls(
            id=booking_id,
            showtime_id=showtime.id,
            showtime_key=showtime.key,
            seat_ids=seat_ids,
            ticket_subtotal=ticket_subtotal,
            grand_total=ticket_subtotal,
        )

    @Logger.io
    def cancel(self, *, catalog: 'Catalog') -> List[str]:
        """
        Release this booking's seats: BOOKED -> AVAILABLE.

        Seats that are missing or not BOOKED are left untouched.

        Returns:
            Seat ids that were released
        """
        ledger = catalog.theater_of(self.showtime_id).seat_ledger
        released: List[str] = []
        for seat_id in self.seat_ids:
            seat = ledger.find_seat(seat_id)
            if seat is not None and seat.status == SeatStatus.BOOKED:
                ledger.set_status(seat, SeatStatus.AVAILABLE)
                released.append(seat_id)
        return released

    def serialize(self) -> str:
        return BookingRecord(
            booking_id=self.id, showtime_key=str(self.showtime_key), seat_ids=self.seat_ids
        ).to_line()

    @property
    def seat_count(self) -> int:
        return len(self.seat_ids)
