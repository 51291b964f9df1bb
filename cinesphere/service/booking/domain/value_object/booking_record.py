"""
Booking Record Value Object

One persisted booking line:

    <bookingId>|<theaterName>|<date>|<time>|<movieTitle>|<seatId1>,<seatId2>,...

The showtime key itself contains the field separator, so a line is split
at its first and last separator only: id, showtime key, seat list.
"""

from typing import Tuple

import attrs

from cinesphere.platform.config.business_config import BookingRecordFormat
from cinesphere.platform.exception.exceptions import MalformedRecordError


@attrs.frozen
class BookingRecord:
    booking_id: int
    showtime_key: str
    seat_ids: Tuple[str, ...] = attrs.field(converter=tuple, factory=tuple)

    @classmethod
    def parse(cls, line: str) -> 'BookingRecord':
        """
        Parse one persisted line.

        Raises:
            MalformedRecordError: missing separators, non-numeric id, or a
                showtime key without exactly four parts
        """
        separator = BookingRecordFormat.FIELD_SEPARATOR
        raw_id, first_sep, rest = line.partition(separator)
        showtime_key, last_sep, seat_list = rest.rpartition(separator)
        if not first_sep or not last_sep:
            raise MalformedRecordError(
                f'Expected 3 fields ({BookingRecordFormat.FORMAT_DESCRIPTION})', line=line
            )

        raw_id = raw_id.strip()
        # ASCII only: int() rejects some Unicode digits str.isdigit() accepts
        if not (raw_id.isascii() and raw_id.isdigit()):
            raise MalformedRecordError(f'Booking id is not numeric: {raw_id!r}', line=line)
        booking_id = int(raw_id)

        if len(showtime_key.split(separator)) != BookingRecordFormat.SHOWTIME_KEY_PARTS:
            raise MalformedRecordError(f'Malformed showtime key: {showtime_key!r}', line=line)

        seat_ids = tuple(
            seat_id.strip()
            for seat_id in seat_list.split(BookingRecordFormat.SEAT_SEPARATOR)
            if seat_id.strip()
        )
        return cls(booking_id=booking_id, showtime_key=showtime_key, seat_ids=seat_ids)

    def to_line(self) -> str:
        return BookingRecordFormat.FIELD_SEPARATOR.join(
            (
                str(self.booking_id),
                self.showtime_key,
                BookingRecordFormat.SEAT_SEPARATOR.join(self.seat_ids),
            )
        )
