"""
Seat Ledger - per-theater seat grid

The ledger is the authoritative source of seat availability. Rows are
ordered premium first, then standard; row letters start at "A" and
columns at 1.

Seat state machine (driven by SeatSelection and Booking):

    AVAILABLE --select--> SELECTED --deselect--> AVAILABLE
    SELECTED  --confirm-> BOOKED
    BOOKED    --cancel--> AVAILABLE
"""

from collections.abc import Iterator
import string
from typing import List, Optional

import attrs

from cinesphere.platform.config.business_config import SeatGrid
from cinesphere.platform.exception.exceptions import DomainError
from cinesphere.service.booking.domain.entity.seat_entity import Seat
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus, SeatType


@attrs.define
class SeatLedger:
    rows: List[List[Seat]] = attrs.field(factory=list)

    @classmethod
    def build(cls, *, premium_rows: int, standard_rows: int, seats_per_row: int) -> 'SeatLedger':
        if premium_rows < 0 or standard_rows < 0 or seats_per_row < 0:
            raise DomainError('Seat grid dimensions cannot be negative')
        if premium_rows + standard_rows > SeatGrid.MAX_ROWS:
            raise DomainError(f'A theater supports at most {SeatGrid.MAX_ROWS} seat rows')

        row_letters = iter(string.ascii_uppercase)
        rows: List[List[Seat]] = []
        for seat_type, row_count in (
            (SeatType.PREMIUM, premium_rows),
            (SeatType.STANDARD, standard_rows),
        ):
            for _ in range(row_count):
                letter = next(row_letters)
                rows.append(
                    [
                        Seat(seat_id=f'{letter}{column}', seat_type=seat_type)
                        for column in range(1, seats_per_row + 1)
                    ]
                )
        return cls(rows=rows)

    def find_seat(self, seat_id: str) -> Optional[Seat]:
        """Return the first seat with this id, or None (e.g. an identifier typo)."""
        return next((seat for seat in self.iter_seats() if seat.seat_id == seat_id), None)

    def set_status(self, seat: Seat, new_status: SeatStatus) -> None:
        """Unconditional write; callers respect the seat state machine."""
        seat.status = new_status

    def iter_seats(self) -> Iterator[Seat]:
        for row in self.rows:
            yield from row

    def seat_ids_with_status(self, status: SeatStatus) -> List[str]:
        return [seat.seat_id for seat in self.iter_seats() if seat.status == status]

    def count(self, status: SeatStatus) -> int:
        return sum(1 for seat in self.iter_seats() if seat.status == status)
