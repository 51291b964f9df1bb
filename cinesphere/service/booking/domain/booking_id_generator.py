import attrs

from cinesphere.platform.config.business_config import BookingIdentity


@attrs.define
class BookingIdGenerator:
    """
    Monotonic booking reference ids.

    Starts at the seed and is advanced past every id restored from disk,
    so ids issued afterwards never collide with reloaded bookings.
    """

    next_id: int = BookingIdentity.SEED

    def issue(self) -> int:
        booking_id = self.next_id
        self.next_id += 1
        return booking_id

    def advance_past(self, booking_id: int) -> None:
        if booking_id >= self.next_id:
            self.next_id = booking_id + 1
