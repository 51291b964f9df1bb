from typing import List, Optional

from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, *, booking_command_repo: IBookingCommandRepo) -> None:
        self.booking_command_repo = booking_command_repo

    def execute(self) -> List[Booking]:
        return self.booking_command_repo.list_all()

    def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        return self.booking_command_repo.get_by_id(booking_id=booking_id)
