"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from cinesphere.platform.config.core_setting import Settings
from cinesphere.service.booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from cinesphere.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from cinesphere.service.booking.app.command.load_bookings_use_case import LoadBookingsUseCase
from cinesphere.service.booking.app.command.save_bookings_use_case import SaveBookingsUseCase
from cinesphere.service.booking.app.query.browse_catalog_use_case import BrowseCatalogUseCase
from cinesphere.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from cinesphere.service.booking.domain.booking_id_generator import BookingIdGenerator
from cinesphere.service.booking.driven_adapter.file.booking_file_store_impl import (
    BookingFileStoreImpl,
)
from cinesphere.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from cinesphere.service.booking.driven_adapter.seed.catalog_seed_loader import load_catalog
from cinesphere.service.booking.driving_adapter.console.booking_console_controller import (
    BookingConsoleController,
)
from cinesphere.service.booking.driving_adapter.console.console_io import ConsoleIO


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Session state - one catalog, one active booking set per process
    catalog = providers.Singleton(load_catalog, path=config_service.provided.CATALOG_FILE)
    booking_id_generator = providers.Singleton(BookingIdGenerator)
    booking_command_repo = providers.Singleton(BookingCommandRepoImpl)
    booking_file_store = providers.Singleton(
        BookingFileStoreImpl, path=config_service.provided.BOOKING_DATA_FILE
    )
    console_io = providers.Singleton(ConsoleIO)

    # Use cases
    save_bookings_use_case = providers.Factory(
        SaveBookingsUseCase,
        booking_command_repo=booking_command_repo,
        booking_file_store=booking_file_store,
    )
    load_bookings_use_case = providers.Factory(
        LoadBookingsUseCase,
        catalog=catalog,
        booking_command_repo=booking_command_repo,
        booking_file_store=booking_file_store,
        booking_id_generator=booking_id_generator,
    )
    create_booking_use_case = providers.Factory(
        CreateBookingUseCase,
        catalog=catalog,
        booking_command_repo=booking_command_repo,
        booking_id_generator=booking_id_generator,
        save_bookings_use_case=save_bookings_use_case,
    )
    cancel_booking_use_case = providers.Factory(
        CancelBookingUseCase,
        catalog=catalog,
        booking_command_repo=booking_command_repo,
        save_bookings_use_case=save_bookings_use_case,
    )
    browse_catalog_use_case = providers.Factory(BrowseCatalogUseCase, catalog=catalog)
    list_bookings_use_case = providers.Factory(
        ListBookingsUseCase, booking_command_repo=booking_command_repo
    )

    # Driving adapter
    booking_console_controller = providers.Factory(
        BookingConsoleController,
        console_io=console_io,
        browse_catalog_use_case=browse_catalog_use_case,
        create_booking_use_case=create_booking_use_case,
        cancel_booking_use_case=cancel_booking_use_case,
        list_bookings_use_case=list_bookings_use_case,
        clear_screen=config_service.provided.CLEAR_SCREEN,
    )


container = Container()


def cleanup() -> None:
    """Drop provider overrides and cached singletons (catalog, booking set, id counter)."""
    container.reset_override()
    container.reset_singletons()
