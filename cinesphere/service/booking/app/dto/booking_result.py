from typing import List, Optional

import attrs

from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.entity.movie_entity import Movie
from cinesphere.service.booking.domain.entity.showtime_entity import Showtime
from cinesphere.service.booking.domain.entity.theater_entity import Theater


@attrs.frozen
class BookingResult:
    """Outcome of a confirmed booking. A failed save does not undo the booking."""

    booking: Booking
    save_error: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.save_error is None


@attrs.frozen
class CancellationResult:
    booking: Booking
    released_seat_ids: List[str] = attrs.field(factory=list)
    save_error: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.save_error is None


@attrs.frozen
class ShowtimeView:
    """A showtime with its movie and theater resolved, for display."""

    showtime: Showtime
    movie: Movie
    theater: Theater
