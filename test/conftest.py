"""
Test Configuration and Fixtures

This module provides:
- Environment setup (file logging off, test log dir) before app imports
- A small catalog seed shared by unit and integration tests
- ScriptedConsoleIO: an in-memory console fed from a list of inputs
- session_factory: a fully assembled booking session on a tmp booking file

Architecture:
- Unit tests (test/**/unit/): real domain objects, mocked collaborators
- Integration tests (test/**/integration/): real files under tmp_path
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['LOG_TO_FILE'] = 'false'
    os.environ.setdefault('CONSOLE_LOG_LEVEL', 'CRITICAL')


_early_setup_test_environment()

from collections import deque  # noqa: E402
from collections.abc import Callable, Iterable  # noqa: E402
from typing import Any, Dict, List  # noqa: E402

import attrs  # noqa: E402
import pytest  # noqa: E402

from cinesphere.service.booking.app.command.cancel_booking_use_case import (  # noqa: E402
    CancelBookingUseCase,
)
from cinesphere.service.booking.app.command.create_booking_use_case import (  # noqa: E402
    CreateBookingUseCase,
)
from cinesphere.service.booking.app.command.load_bookings_use_case import (  # noqa: E402
    LoadBookingsUseCase,
)
from cinesphere.service.booking.app.command.save_bookings_use_case import (  # noqa: E402
    SaveBookingsUseCase,
)
from cinesphere.service.booking.app.interface.i_console_io import IConsoleIO  # noqa: E402
from cinesphere.service.booking.app.query.browse_catalog_use_case import (  # noqa: E402
    BrowseCatalogUseCase,
)
from cinesphere.service.booking.app.query.list_bookings_use_case import (  # noqa: E402
    ListBookingsUseCase,
)
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog  # noqa: E402
from cinesphere.service.booking.domain.booking_id_generator import (  # noqa: E402
    BookingIdGenerator,
)
from cinesphere.service.booking.driven_adapter.file.booking_file_store_impl import (  # noqa: E402
    BookingFileStoreImpl,
)
from cinesphere.service.booking.driven_adapter.repo.booking_command_repo_impl import (  # noqa: E402
    BookingCommandRepoImpl,
)
from cinesphere.service.booking.driven_adapter.seed.catalog_seed_loader import (  # noqa: E402
    build_catalog,
)
from cinesphere.service.booking.driving_adapter.console.booking_console_controller import (  # noqa: E402
    BookingConsoleController,
)


# =============================================================================
# Catalog seed
# =============================================================================
# Theater 0 "PVR Phoenix": rows A-B premium (450.00), rows C-D standard (250.00), 4 seats per row
# Theater 1 "Gopalan Cinemas": row A premium, rows B-C standard, 3 seats per row, custom menu
# Showtime 0: The AI Architect @ PVR Phoenix, 2025-12-15 10:30 AM
# Showtime 1: Eternal Sun      @ PVR Phoenix, 2025-12-15 07:00 PM
# Showtime 2: Eternal Sun      @ Gopalan Cinemas, 2025-12-16 09:00 PM


def _catalog_seed() -> Dict[str, Any]:
    return {
        'states': ['Maharashtra', 'Karnataka'],
        'movies': [
            {'title': 'The AI Architect', 'genre': 'Sci-Fi/Action', 'duration_minutes': 145},
            {'title': 'Eternal Sun', 'genre': 'Romantic Drama', 'duration_minutes': 120},
        ],
        'theaters': [
            {
                'name': 'PVR Phoenix',
                'city': 'Mumbai',
                'state': 'Maharashtra',
                'standard_rows': 2,
                'premium_rows': 2,
                'seats_per_row': 4,
            },
            {
                'name': 'Gopalan Cinemas',
                'city': 'Bangalore',
                'state': 'Karnataka',
                'standard_rows': 2,
                'premium_rows': 1,
                'seats_per_row': 3,
                'menu': [{'name': 'Filter Coffee', 'price': '90.00', 'category': 'Beverage'}],
            },
        ],
        'showtimes': [
            {'movie': 0, 'theater': 0, 'time': '10:30 AM', 'date': '2025-12-15'},
            {'movie': 1, 'theater': 0, 'time': '07:00 PM', 'date': '2025-12-15'},
            {'movie': 1, 'theater': 1, 'time': '09:00 PM', 'date': '2025-12-16'},
        ],
    }


@pytest.fixture
def catalog_seed() -> Dict[str, Any]:
    return _catalog_seed()


@pytest.fixture
def catalog(catalog_seed: Dict[str, Any]) -> Catalog:
    return build_catalog(catalog_seed)


# =============================================================================
# Scripted console
# =============================================================================
class ScriptedConsoleIO(IConsoleIO):
    """Feeds queued answers to prompts; raises EOFError once they run out."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self.inputs = deque(inputs)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.clear_count = 0

    def feed(self, *inputs: str) -> None:
        self.inputs.extend(inputs)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.popleft()

    def write(self, text: str = '') -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.clear_count += 1

    @property
    def output(self) -> str:
        return '\n'.join(self.lines)


@pytest.fixture
def scripted_console() -> ScriptedConsoleIO:
    return ScriptedConsoleIO()


# =============================================================================
# Assembled booking session
# =============================================================================
@attrs.define
class BookingSession:
    catalog: Catalog
    booking_command_repo: BookingCommandRepoImpl
    booking_file_store: BookingFileStoreImpl
    booking_id_generator: BookingIdGenerator
    save_bookings_use_case: SaveBookingsUseCase
    load_bookings_use_case: LoadBookingsUseCase
    create_booking_use_case: CreateBookingUseCase
    cancel_booking_use_case: CancelBookingUseCase
    browse_catalog_use_case: BrowseCatalogUseCase
    list_bookings_use_case: ListBookingsUseCase
    console_io: ScriptedConsoleIO

    def controller(self) -> BookingConsoleController:
        return BookingConsoleController(
            console_io=self.console_io,
            browse_catalog_use_case=self.browse_catalog_use_case,
            create_booking_use_case=self.create_booking_use_case,
            cancel_booking_use_case=self.cancel_booking_use_case,
            list_bookings_use_case=self.list_bookings_use_case,
        )


@pytest.fixture
def booking_data_file(tmp_path: Path) -> Path:
    return tmp_path / 'bookings.txt'


@pytest.fixture
def session_factory(booking_data_file: Path) -> Callable[..., BookingSession]:
    """
    Build a fresh session (new catalog, new seat maps) on the same booking file.

    Calling it twice simulates a process restart.
    """

    def _build(*, data_file: Path = booking_data_file, load: bool = True) -> BookingSession:
        catalog = build_catalog(_catalog_seed())
        repo = BookingCommandRepoImpl()
        file_store = BookingFileStoreImpl(path=data_file)
        id_generator = BookingIdGenerator()
        save = SaveBookingsUseCase(booking_command_repo=repo, booking_file_store=file_store)
        session = BookingSession(
            catalog=catalog,
            booking_command_repo=repo,
            booking_file_store=file_store,
            booking_id_generator=id_generator,
            save_bookings_use_case=save,
            load_bookings_use_case=LoadBookingsUseCase(
                catalog=catalog,
                booking_command_repo=repo,
                booking_file_store=file_store,
                booking_id_generator=id_generator,
            ),
            create_booking_use_case=CreateBookingUseCase(
                catalog=catalog,
                booking_command_repo=repo,
                booking_id_generator=id_generator,
                save_bookings_use_case=save,
            ),
            cancel_booking_use_case=CancelBookingUseCase(
                catalog=catalog, booking_command_repo=repo, save_bookings_use_case=save
            ),
            browse_catalog_use_case=BrowseCatalogUseCase(catalog=catalog),
            list_bookings_use_case=ListBookingsUseCase(booking_command_repo=repo),
            console_io=ScriptedConsoleIO(),
        )
        if load:
            session.load_bookings_use_case.execute()
        return session

    return _build
