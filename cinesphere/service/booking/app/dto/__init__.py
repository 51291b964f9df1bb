from cinesphere.service.booking.app.dto.booking_result import (
    BookingResult,
    CancellationResult,
    ShowtimeView,
)

__all__ = ['BookingResult', 'CancellationResult', 'ShowtimeView']
