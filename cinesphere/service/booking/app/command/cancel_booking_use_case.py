from cinesphere.platform.exception.exceptions import NotFoundError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.command.save_bookings_use_case import SaveBookingsUseCase
from cinesphere.service.booking.app.dto.booking_result import CancellationResult
from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog


class CancelBookingUseCase:
    def __init__(
        self,
        *,
        catalog: Catalog,
        booking_command_repo: IBookingCommandRepo,
        save_bookings_use_case: SaveBookingsUseCase,
    ) -> None:
        self.catalog = catalog
        self.booking_command_repo = booking_command_repo
        self.save_bookings_use_case = save_bookings_use_case

    @Logger.io
    def execute(self, *, booking_id: int) -> CancellationResult:
        """
        Release the booking's seats, drop it from the active set, then save.

        Raises:
            NotFoundError: no active booking with this id
        """
        booking = self.booking_command_repo.get_by_id(booking_id=booking_id)
        if booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')

        released = booking.cancel(catalog=self.catalog)
        self.booking_command_repo.remove(booking_id=booking_id)

        Logger.base.info(f'🗑️ [CANCEL] Booking {booking_id} cancelled, released {released}')
        return CancellationResult(
            booking=booking,
            released_seat_ids=released,
            save_error=self.save_bookings_use_case.try_execute(),
        )
