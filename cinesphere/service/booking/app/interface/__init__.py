from cinesphere.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from cinesphere.service.booking.app.interface.i_booking_file_store import IBookingFileStore
from cinesphere.service.booking.app.interface.i_console_io import IConsoleIO

__all__ = ['IBookingCommandRepo', 'IBookingFileStore', 'IConsoleIO']
