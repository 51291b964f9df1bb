from typing import Dict, List

from cinesphere.platform.exception.exceptions import ConflictError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.domain.entity.booking_entity import Booking


class BookingCommandRepoImpl(IBookingCommandRepo):
    """In-memory active booking set; dict order is insertion order."""

    def __init__(self) -> None:
        self._bookings: Dict[int, Booking] = {}

    @Logger.io
    def add(self, *, booking: Booking) -> Booking:
        if booking.id in self._bookings:
            raise ConflictError(f'Booking {booking.id} already exists')
        self._bookings[booking.id] = booking
        return booking

    def get_by_id(self, *, booking_id: int) -> Booking | None:
        return self._bookings.get(booking_id)

    @Logger.io
    def remove(self, *, booking_id: int) -> Booking | None:
        return self._bookings.pop(booking_id, None)

    def list_all(self) -> List[Booking]:
        return list(self._bookings.values())
