"""
Create Booking Use Case

Turns a seat selection plus a food order into a confirmed booking.

Flow:
1. start_selection(): open a SeatSelection on the showtime's theater
2. (caller toggles seats, builds the food order)
3. execute(): finalize seats -> build Booking -> register -> save

A failure between finalize and registration rolls the seats back to
AVAILABLE. A failed save keeps the booking; the result reports the error.
"""

from cinesphere.platform.exception.exceptions import DomainError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.command.save_bookings_use_case import SaveBookingsUseCase
from cinesphere.service.booking.app.dto.booking_result import BookingResult
from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog
from cinesphere.service.booking.domain.booking_id_generator import BookingIdGenerator
from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrder
from cinesphere.service.booking.domain.seat_selection_domain import SeatSelection


class CreateBookingUseCase:
    def __init__(
        self,
        *,
        catalog: Catalog,
        booking_command_repo: IBookingCommandRepo,
        booking_id_generator: BookingIdGenerator,
        save_bookings_use_case: SaveBookingsUseCase,
    ) -> None:
        self.catalog = catalog
        self.booking_command_repo = booking_command_repo
        self.booking_id_generator = booking_id_generator
        self.save_bookings_use_case = save_bookings_use_case

    @Logger.io
    def start_selection(self, *, showtime_id: int) -> SeatSelection:
        showtime = self.catalog.showtime(showtime_id)
        theater = self.catalog.theater(showtime.theater_id)
        return SeatSelection(theater_id=showtime.theater_id, seat_ledger=theater.seat_ledger)

    @Logger.io
    def execute(
        self, *, showtime_id: int, selection: SeatSelection, food_order: FoodOrder
    ) -> BookingResult:
        showtime = self.catalog.showtime(showtime_id)
        if selection.theater_id != showtime.theater_id:
            raise DomainError('Seat selection belongs to a different theater')

        seat_ids = selection.finalize()
        try:
            booking = Booking.create(
                booking_id=self.booking_id_generator.issue(),
                showtime=showtime,
                catalog=self.catalog,
                seat_ids=seat_ids,
                food_order=food_order,
            )
            self.booking_command_repo.add(booking=booking)
        except Exception:
            selection.rollback()
            raise

        Logger.base.info(
            f'🎟️ [BOOKING] Confirmed booking {booking.id}: '
            f'{booking.seat_count} seats, total {booking.grand_total}'
        )
        return BookingResult(
            booking=booking, save_error=self.save_bookings_use_case.try_execute()
        )
