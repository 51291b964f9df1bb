from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    BOOKED = 'booked'


class SeatType(StrEnum):
    STANDARD = 'standard'
    PREMIUM = 'premium'
