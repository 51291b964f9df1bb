"""
Unit tests for Booking

Test Coverage:
1. create(): ticket subtotal, food subtotal, discount threshold, grand total
2. reconstruct(): tickets only
3. cancel(): releases BOOKED seats only
4. serialize(): persisted line format
"""

from decimal import Decimal

import pytest

from cinesphere.platform.exception.exceptions import DomainError
from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrder
from cinesphere.service.booking.domain.entity.theater_entity import DEFAULT_MENU
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus


pytestmark = pytest.mark.unit

CARAMEL_POPCORN, SALTY_POPCORN, COLA, LIME_SODA, NACHOS, BURGER = DEFAULT_MENU


def _book_seats(catalog, seat_ids):
    ledger = catalog.theater(0).seat_ledger
    for seat_id in seat_ids:
        ledger.set_status(ledger.find_seat(seat_id), SeatStatus.BOOKED)


def _create(catalog, seat_ids, food_order=None, booking_id=5001):
    return Booking.create(
        booking_id=booking_id,
        showtime=catalog.showtime(0),
        catalog=catalog,
        seat_ids=seat_ids,
        food_order=food_order or FoodOrder(),
    )


class TestBookingCreate:
    def test_premium_plus_standard_without_food(self, catalog):
        # Given: one premium (A1) and one standard (C3) seat
        _book_seats(catalog, ['A1', 'C3'])

        # When
        booking = _create(catalog, ['A1', 'C3'])

        # Then
        assert booking.ticket_subtotal == Decimal('700.00')
        assert booking.food_subtotal == Decimal('0.00')
        assert booking.discount == Decimal('0.00')
        assert booking.grand_total == Decimal('700.00')
        assert booking.seat_ids == ('A1', 'C3')
        assert booking.food_lines == ()

    def test_food_above_threshold_gets_ten_percent_off(self, catalog):
        # Given: food subtotal 600.00 (350 + 250)
        order = FoodOrder()
        order.add_item(CARAMEL_POPCORN, 1)
        order.add_item(SALTY_POPCORN, 1)

        # When
        booking = _create(catalog, ['C1'], order)

        # Then
        assert booking.food_subtotal == Decimal('600.00')
        assert booking.discount == Decimal('60.00')
        assert booking.grand_total == Decimal('790.00')  # 250 + 600 - 60

    def test_food_exactly_at_threshold_gets_no_discount(self, catalog):
        order = FoodOrder()
        order.add_item(SALTY_POPCORN, 2)

        booking = _create(catalog, ['C1'], order)

        assert booking.food_subtotal == Decimal('500.00')
        assert booking.discount == Decimal('0.00')
        assert booking.grand_total == Decimal('750.00')

    def test_food_just_above_threshold(self, catalog):
        # Given: 290.00 + 220.00 = 510.00
        order = FoodOrder()
        order.add_item(NACHOS, 1)
        order.add_item(BURGER, 1)

        booking = _create(catalog, ['A1'], order)

        assert booking.discount == Decimal('51.00')
        assert booking.grand_total == Decimal('909.00')  # 450 + 510 - 51

    def test_food_lines_are_frozen_at_confirmation(self, catalog):
        order = FoodOrder()
        order.add_item(COLA, 2)
        booking = _create(catalog, ['C1'], order)

        order.add_item(COLA, 5)

        assert booking.food_lines[0].quantity == 2
        assert booking.food_subtotal == Decimal('300.00')

    def test_unknown_seat_is_not_charged(self, catalog):
        booking = _create(catalog, ['A1', 'Z9'])

        assert booking.ticket_subtotal == Decimal('450.00')
        assert booking.seat_ids == ('A1', 'Z9')

    def test_booking_needs_a_seat(self, catalog):
        with pytest.raises(DomainError):
            _create(catalog, [])

    def test_key_and_showtime_are_captured(self, catalog):
        booking = _create(catalog, ['A1'])

        assert booking.showtime_id == 0
        assert str(booking.showtime_key) == 'PVR Phoenix|2025-12-15|10:30 AM|The AI Architect'


class TestBookingReconstruct:
    def test_only_tickets_count(self, catalog):
        booking = Booking.reconstruct(
            booking_id=5007, showtime=catalog.showtime(0), catalog=catalog, seat_ids=['A1', 'C3']
        )

        assert booking.id == 5007
        assert booking.ticket_subtotal == Decimal('700.00')
        assert booking.food_subtotal == Decimal('0.00')
        assert booking.discount == Decimal('0.00')
        assert booking.grand_total == Decimal('700.00')


class TestBookingCancel:
    def test_cancel_releases_booked_seats(self, catalog):
        # Given
        _book_seats(catalog, ['A1', 'C3'])
        booking = _create(catalog, ['A1', 'C3'])

        # When
        released = booking.cancel(catalog=catalog)

        # Then
        ledger = catalog.theater(0).seat_ledger
        assert released == ['A1', 'C3']
        assert ledger.find_seat('A1').status == SeatStatus.AVAILABLE
        assert ledger.find_seat('C3').status == SeatStatus.AVAILABLE

    def test_cancel_skips_seats_not_booked(self, catalog):
        ledger = catalog.theater(0).seat_ledger
        _book_seats(catalog, ['A1'])
        ledger.set_status(ledger.find_seat('A2'), SeatStatus.SELECTED)
        booking = _create(catalog, ['A1', 'A2', 'Z9'])

        released = booking.cancel(catalog=catalog)

        assert released == ['A1']
        assert ledger.find_seat('A2').status == SeatStatus.SELECTED


class TestBookingSerialize:
    def test_serialize_line(self, catalog):
        booking = _create(catalog, ['A1', 'C3'])

        assert booking.serialize() == (
            '5001|PVR Phoenix|2025-12-15|10:30 AM|The AI Architect|A1,C3'
        )
