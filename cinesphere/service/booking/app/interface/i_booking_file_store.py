"""
Booking File Store Interface

Line-oriented storage for serialized bookings. Writing replaces the whole
file; there is no append.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from pathlib import Path


class IBookingFileStore(ABC):
    @property
    @abstractmethod
    def path(self) -> Path:
        pass

    @abstractmethod
    def read_lines(self) -> Iterator[str]:
        """
        Yield stored lines without their line terminator. A missing file yields nothing.

        Raises:
            PersistenceError: the file exists but cannot be read
        """
        pass

    @abstractmethod
    def write_lines(self, lines: Iterable[str]) -> None:
        """
        Overwrite the file with one newline-terminated line per item

        Raises:
            PersistenceError: the file cannot be written
        """
        pass
