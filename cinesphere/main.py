"""
CineSphere Booking Console entry point.

Startup: build the catalog, replay the booking file onto the seat maps.
Shutdown: rewrite the booking file, whatever ended the session.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject

from cinesphere.platform.config.core_setting import Settings
from cinesphere.platform.config.di import Container, container
from cinesphere.platform.exception.exceptions import CatalogLoadError, PersistenceError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.command.load_bookings_use_case import LoadBookingsUseCase
from cinesphere.service.booking.app.command.save_bookings_use_case import SaveBookingsUseCase
from cinesphere.service.booking.app.interface.i_console_io import IConsoleIO
from cinesphere.service.booking.driving_adapter.console.booking_console_controller import (
    BookingConsoleController,
)
from cinesphere.service.booking.driving_adapter.console.presenter import LINE_SEPARATOR


@inject
def run_console(
    config: Settings = Provide[Container.config_service],
    console_io: IConsoleIO = Provide[Container.console_io],
    load_bookings_use_case: LoadBookingsUseCase = Provide[Container.load_bookings_use_case],
    save_bookings_use_case: SaveBookingsUseCase = Provide[Container.save_bookings_use_case],
    controller: BookingConsoleController = Provide[Container.booking_console_controller],
) -> int:
    console_io.write(LINE_SEPARATOR)
    console_io.write(f'{config.PROJECT_NAME} v{config.VERSION}')
    console_io.write('Welcome to the world-class movie booking experience.')
    console_io.write(LINE_SEPARATOR)

    try:
        load_bookings_use_case.execute()
    except PersistenceError as e:
        # Leave the unreadable file untouched: no session, no shutdown save
        console_io.write(f'[System Error] {e.message}')
        return 1

    save_error: Optional[str] = None
    try:
        controller.run()
    except KeyboardInterrupt:
        Logger.base.info('⏹️ [CONSOLE] Interrupted by user')
        console_io.write()
    finally:
        save_error = save_bookings_use_case.try_execute()
        console_io.write(f'\n{LINE_SEPARATOR}')
        if save_error is None:
            console_io.write(
                'Application Session Ended. '
                f'All current bookings have been saved to {config.BOOKING_DATA_FILE}'
            )
        else:
            console_io.write(f'[System Error] Unable to save booking data: {save_error}')
        console_io.write(LINE_SEPARATOR)

    return 0 if save_error is None else 1


def main() -> int:
    container.wire(modules=[__name__])
    try:
        return run_console()
    except CatalogLoadError as e:
        Logger.base.error(f'❌ [STARTUP] {e.message}')
        return 2
    finally:
        container.unwire()


if __name__ == '__main__':
    raise SystemExit(main())
