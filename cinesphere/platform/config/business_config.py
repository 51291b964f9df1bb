"""Business logic configuration and constants."""

from decimal import Decimal
from typing import Final


class TicketPricing:
    """Fixed ticket price table, keyed by seat type."""

    STANDARD: Final[Decimal] = Decimal('250.00')
    PREMIUM: Final[Decimal] = Decimal('450.00')


class FoodDiscount:
    """Discount applied to the food subtotal of a booking."""

    THRESHOLD: Final[Decimal] = Decimal('500.00')  # strictly greater than
    RATE: Final[Decimal] = Decimal('0.10')


class BookingIdentity:
    """Booking reference id counter."""

    SEED: Final[int] = 5001


class BookingRecordFormat:
    """Constants for the persisted booking line format."""

    FIELD_SEPARATOR: Final[str] = '|'
    SEAT_SEPARATOR: Final[str] = ','
    SHOWTIME_KEY_PARTS: Final[int] = 4
    FORMAT_DESCRIPTION: Final[str] = 'id|theater|date|time|movie|seat,seat,...'


class SeatEntryCommand:
    """Keywords accepted at the seat selection prompt."""

    DONE: Final[str] = 'DONE'
    CANCEL: Final[str] = 'CANCEL'


class SeatGrid:
    """Seat grid limits."""

    MAX_ROWS: Final[int] = 26  # one row letter per row, A-Z
