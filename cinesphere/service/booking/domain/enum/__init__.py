"""Booking Domain Enums"""

from cinesphere.service.booking.domain.enum.seat_status import SeatStatus, SeatType
from cinesphere.service.booking.domain.enum.selection_outcome import SelectionOutcome

__all__ = ['SeatStatus', 'SeatType', 'SelectionOutcome']
