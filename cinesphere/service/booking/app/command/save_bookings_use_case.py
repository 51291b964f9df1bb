from typing import Optional

from cinesphere.platform.exception.exceptions import PersistenceError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.app.interface.i_booking_file_store import IBookingFileStore


class SaveBookingsUseCase:
    """
    Rewrite the booking file from the active booking set.

    Full-file replace, one line per active booking in set order. Saving an
    unchanged set produces byte-identical output.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_file_store: IBookingFileStore,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_file_store = booking_file_store

    @Logger.io
    def execute(self) -> int:
        lines = [booking.serialize() for booking in self.booking_command_repo.list_all()]
        self.booking_file_store.write_lines(lines)
        Logger.base.info(
            f'💾 [SAVE] Wrote {len(lines)} bookings to {self.booking_file_store.path}'
        )
        return len(lines)

    def try_execute(self) -> Optional[str]:
        """Save, returning the error message instead of raising when the file is unwritable."""
        try:
            self.execute()
        except PersistenceError as e:
            return e.message
        return None
