from typing import List

from cinesphere.platform.exception.exceptions import MalformedRecordError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.app.interface.i_booking_file_store import IBookingFileStore
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog
from cinesphere.service.booking.domain.booking_id_generator import BookingIdGenerator
from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus
from cinesphere.service.booking.domain.value_object.booking_record import BookingRecord


class LoadBookingsUseCase:
    """
    Restore persisted bookings and replay their seats onto the seat ledgers.

    Runs once at startup, against freshly built seat maps, before any
    interactive flow.

    Flow per line:
    1. Parse id | showtime key | seat list (malformed lines: warning, skipped)
    2. Resolve the showtime key against the catalog (unresolved: dropped)
    3. Mark every listed seat BOOKED in the theater's ledger
    4. Rebuild the booking in reconstruction mode and add it to the active set
    5. Advance the id generator past the restored id
    """

    def __init__(
        self,
        *,
        catalog: Catalog,
        booking_command_repo: IBookingCommandRepo,
        booking_file_store: IBookingFileStore,
        booking_id_generator: BookingIdGenerator,
    ) -> None:
        self.catalog = catalog
        self.booking_command_repo = booking_command_repo
        self.booking_file_store = booking_file_store
        self.booking_id_generator = booking_id_generator

    @Logger.io
    def execute(self) -> List[Booking]:
        restored: List[Booking] = []
        for line_number, line in enumerate(self.booking_file_store.read_lines(), start=1):
            if not line.strip():
                continue

            try:
                record = BookingRecord.parse(line)
            except MalformedRecordError as e:
                Logger.base.warning(
                    f'⚠️ [LOAD] Skipping line {line_number}: {e.message} ({e.line!r})'
                )
                continue

            booking = self._restore(record)
            if booking is not None:
                restored.append(booking)

        Logger.base.info(
            f'📂 [LOAD] Restored {len(restored)} bookings from {self.booking_file_store.path}'
        )
        return restored

    def _restore(self, record: BookingRecord) -> Booking | None:
        showtime = self.catalog.find_showtime_by_key(record.showtime_key)
        if showtime is None:
            Logger.base.debug(
                f'[LOAD] Dropping booking {record.booking_id}: '
                f'unknown showtime {record.showtime_key!r}'
            )
            return None

        if self.booking_command_repo.get_by_id(booking_id=record.booking_id) is not None:
            Logger.base.warning(f'⚠️ [LOAD] Skipping duplicate booking id {record.booking_id}')
            return None

        ledger = self.catalog.theater(showtime.theater_id).seat_ledger
        for seat_id in record.seat_ids:
            seat = ledger.find_seat(seat_id)
            if seat is None:
                continue
            if seat.status == SeatStatus.BOOKED:
                Logger.base.warning(
                    f'⚠️ [LOAD] Seat {seat_id} of booking {record.booking_id} '
                    'is already booked by an earlier record'
                )
            ledger.set_status(seat, SeatStatus.BOOKED)

        booking = Booking.reconstruct(
            booking_id=record.booking_id,
            showtime=showtime,
            catalog=self.catalog,
            seat_ids=record.seat_ids,
        )
        self.booking_command_repo.add(booking=booking)
        self.booking_id_generator.advance_past(record.booking_id)
        return booking
