from unittest.mock import Mock

import pytest

from cinesphere.platform.exception.exceptions import NotFoundError
from cinesphere.service.booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrder
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus
from cinesphere.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)


pytestmark = pytest.mark.unit


class TestCancelBookingUseCase:
    @pytest.fixture(autouse=True)
    def setup(self, catalog):
        self.catalog = catalog
        self.ledger = catalog.theater(0).seat_ledger
        self.booking_command_repo = BookingCommandRepoImpl()
        self.save_bookings_use_case = Mock()
        self.save_bookings_use_case.try_execute.return_value = None
        self.use_case = CancelBookingUseCase(
            catalog=catalog,
            booking_command_repo=self.booking_command_repo,
            save_bookings_use_case=self.save_bookings_use_case,
        )

        for seat_id in ('A1', 'C3'):
            self.ledger.set_status(self.ledger.find_seat(seat_id), SeatStatus.BOOKED)
        self.booking = Booking.create(
            booking_id=5001,
            showtime=catalog.showtime(0),
            catalog=catalog,
            seat_ids=['A1', 'C3'],
            food_order=FoodOrder(),
        )
        self.booking_command_repo.add(booking=self.booking)

    def test_cancel_releases_seats_and_removes_booking(self):
        # When
        result = self.use_case.execute(booking_id=5001)

        # Then
        assert result.booking == self.booking
        assert result.released_seat_ids == ['A1', 'C3']
        assert result.persisted
        assert self.ledger.count(SeatStatus.BOOKED) == 0
        assert self.booking_command_repo.get_by_id(booking_id=5001) is None
        self.save_bookings_use_case.try_execute.assert_called_once()

    def test_unknown_id_raises_not_found(self):
        with pytest.raises(NotFoundError):
            self.use_case.execute(booking_id=9999)

        assert self.booking_command_repo.list_all() == [self.booking]
        self.save_bookings_use_case.try_execute.assert_not_called()

    def test_save_failure_is_reported(self):
        self.save_bookings_use_case.try_execute.return_value = 'Cannot write booking file'

        result = self.use_case.execute(booking_id=5001)

        assert result.save_error == 'Cannot write booking file'
        assert self.booking_command_repo.list_all() == []
