from collections.abc import Iterable, Iterator
from pathlib import Path

from cinesphere.platform.exception.exceptions import PersistenceError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.interface.i_booking_file_store import IBookingFileStore


class BookingFileStoreImpl(IBookingFileStore):
    def __init__(self, *, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @Logger.io
    def read_lines(self) -> Iterator[str]:
        if not self._path.exists():
            Logger.base.info(f'📂 [LOAD] No booking file at {self._path}, starting empty')
            return

        try:
            with self._path.open('r', encoding='utf-8') as f:
                for line in f:
                    yield line.rstrip('\r\n')
        except OSError as e:
            raise PersistenceError(f'Cannot read booking file {self._path}: {e}') from e

    @Logger.io
    def write_lines(self, lines: Iterable[str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open('w', encoding='utf-8', newline='\n') as f:
                for line in lines:
                    f.write(f'{line}\n')
        except OSError as e:
            raise PersistenceError(f'Cannot write booking file {self._path}: {e}') from e
