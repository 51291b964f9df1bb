"""
Booking Command Repository Interface

Holds the active booking set: bookings that are confirmed and not cancelled.
"""

from abc import ABC, abstractmethod
from typing import List

from cinesphere.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    def add(self, *, booking: Booking) -> Booking:
        """
        Register a booking in the active set

        Raises:
            ConflictError: a booking with the same id is already active
        """
        pass

    @abstractmethod
    def get_by_id(self, *, booking_id: int) -> Booking | None:
        pass

    @abstractmethod
    def remove(self, *, booking_id: int) -> Booking | None:
        """Remove a booking from the active set; returns it, or None if unknown"""
        pass

    @abstractmethod
    def list_all(self) -> List[Booking]:
        """Active bookings in insertion order"""
        pass
