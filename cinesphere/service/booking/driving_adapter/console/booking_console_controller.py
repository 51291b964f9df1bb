"""
Booking Console Controller

Interactive menu loop driving the booking and cancellation use cases.

Booking cycle:
1. State -> city -> theater
2. Optional movie-title filter -> showtime
3. Seat selection (toggle seat ids, DONE / CANCEL)
4. Food selection (menu number + quantity, 0 to continue)
5. Confirmation and bill

Seats held SELECTED by the cycle are released whenever it ends without a
confirmation, including on end of input.
"""

from typing import Optional

from cinesphere.platform.config.business_config import SeatEntryCommand, TicketPricing
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from cinesphere.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from cinesphere.service.booking.app.dto.booking_result import (
    BookingResult,
    CancellationResult,
    ShowtimeView,
)
from cinesphere.service.booking.app.interface.i_console_io import IConsoleIO
from cinesphere.service.booking.app.query.browse_catalog_use_case import BrowseCatalogUseCase
from cinesphere.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrder
from cinesphere.service.booking.domain.entity.theater_entity import Theater
from cinesphere.service.booking.domain.enum.selection_outcome import SelectionOutcome
from cinesphere.service.booking.domain.seat_selection_domain import SeatSelection
from cinesphere.service.booking.driving_adapter.console.presenter import (
    LINE_SEPARATOR,
    format_currency,
    render_bill,
    render_booking_brief,
    render_food_lines,
    render_header,
    render_menu_item,
    render_seat_map,
    render_showtime,
)


class MainMenuChoice:
    BOOK = 1
    CANCEL = 2
    EXIT = 3


class BookingConsoleController:
    def __init__(
        self,
        *,
        console_io: IConsoleIO,
        browse_catalog_use_case: BrowseCatalogUseCase,
        create_booking_use_case: CreateBookingUseCase,
        cancel_booking_use_case: CancelBookingUseCase,
        list_bookings_use_case: ListBookingsUseCase,
        clear_screen: bool = False,
    ) -> None:
        self.console_io = console_io
        self.browse_catalog_use_case = browse_catalog_use_case
        self.create_booking_use_case = create_booking_use_case
        self.cancel_booking_use_case = cancel_booking_use_case
        self.list_bookings_use_case = list_bookings_use_case
        self.clear_screen = clear_screen

    def run(self) -> None:
        """Main menu loop. Returns on Exit or when input ends."""
        try:
            while True:
                if self.clear_screen:
                    self.console_io.clear()
                self.console_io.write(render_header('MAIN MENU'))
                self.console_io.write('[1] Start New Booking')
                self.console_io.write('[2] Cancel Existing Booking')
                self.console_io.write('[3] Exit Application')
                self.console_io.write(LINE_SEPARATOR)

                choice = self._prompt_int('Enter your choice: ')
                if choice == MainMenuChoice.EXIT:
                    return
                if choice == MainMenuChoice.CANCEL:
                    self.run_cancellation()
                elif choice == MainMenuChoice.BOOK:
                    self.run_booking_cycle()
                else:
                    self.console_io.write('Invalid choice. Please select 1, 2, or 3.')
        except EOFError:
            Logger.base.info('⏹️ [CONSOLE] Input closed, leaving main menu')
            self.console_io.write()

    # --- booking ---

    def run_booking_cycle(self) -> Optional[BookingResult]:
        city = self._select_location()
        theater_id = self._select_theater(city) if city is not None else None
        if theater_id is None:
            self.console_io.write('\nBooking process aborted. No theater selected.')
            return None

        showtime_id = self._select_showtime(theater_id)
        if showtime_id is None:
            self.console_io.write('\nBooking process aborted. No showtime selected.')
            return None

        view = self.browse_catalog_use_case.get_showtime_view(showtime_id)
        selection = self.create_booking_use_case.start_selection(showtime_id=showtime_id)
        try:
            if not self._select_seats(view, selection):
                self.console_io.write('\nBooking process aborted. No seats selected.')
                return None

            food_order = self._select_food(view.theater)
            result = self.create_booking_use_case.execute(
                showtime_id=showtime_id, selection=selection, food_order=food_order
            )
        finally:
            selection.abort()

        self.console_io.write(render_bill(result.booking, view))
        if not result.persisted:
            self.console_io.write(f'\n[System Error] Unable to save booking data: {result.save_error}')
        self.console_io.read('\nPress Enter to return to the main menu...')
        return result

    def _select_location(self) -> Optional[str]:
        states = self.browse_catalog_use_case.list_states()
        if not states:
            self.console_io.write('No locations available.')
            return None

        self.console_io.write(render_header('STEP 1.1: Select Location (State)'))
        for index, state in enumerate(states, start=1):
            self.console_io.write(f'[{index}] {state}')
        state = states[
            self._prompt_choice('Enter State number: ', len(states), 'Invalid state selection.') - 1
        ]
        self.console_io.write(f'-> Selected State: {state}')

        cities = self.browse_catalog_use_case.list_cities(state)
        if not cities:
            self.console_io.write(f'No cities available in {state}.')
            return None

        self.console_io.write(render_header('STEP 1.2: Select Location (City)'))
        for index, city in enumerate(cities, start=1):
            self.console_io.write(f'[{index}] {city}')
        city = cities[
            self._prompt_choice('Enter City number: ', len(cities), 'Invalid city selection.') - 1
        ]
        self.console_io.write(f'-> Selected City: {city}')
        return city

    def _select_theater(self, city: str) -> Optional[int]:
        theaters = self.browse_catalog_use_case.list_theaters(city)
        if not theaters:
            self.console_io.write(f'No theaters available in {city}.')
            return None

        self.console_io.write(render_header('STEP 2.1: Select Theater'))
        self.console_io.write(f'Available theaters in {city}:')
        for index, (_, theater) in enumerate(theaters, start=1):
            self.console_io.write(f'  [{index}] {theater.name}')

        choice = self._prompt_choice(
            'Enter Theater number: ', len(theaters), 'Invalid theater number.'
        )
        theater_id, theater = theaters[choice - 1]
        self.console_io.write(f'-> Selected Theater: {theater.name}')
        return theater_id

    def _select_showtime(self, theater_id: int) -> Optional[int]:
        theater = self.browse_catalog_use_case.get_theater(theater_id)
        title_filter = ''
        if self._confirm('\nDo you want to filter showtimes by a movie title? (Y/N): '):
            title_filter = self.console_io.read(
                "Enter part of the movie title to filter (e.g., 'Architect'): "
            ).strip()
            self.console_io.write(f"Filtering for movies containing: '{title_filter}'")

        views = self.browse_catalog_use_case.list_showtimes(
            theater_id=theater_id, title_filter=title_filter
        )
        if not views:
            suffix = ' matching your filter.' if title_filter else ''
            self.console_io.write(f'No showtimes available at {theater.name}{suffix}')
            return None

        self.console_io.write(render_header('STEP 2.2: Select Showtime (Time & Movie)'))
        self.console_io.write(f'Showtimes at {theater.name}:')
        for index, view in enumerate(views, start=1):
            self.console_io.write(render_showtime(index, view))

        choice = self._prompt_choice(
            'Enter Showtime number to book: ', len(views), 'Invalid showtime number.'
        )
        view = views[choice - 1]
        self.console_io.write(f'-> Confirmed: {view.movie.title} at {view.showtime.time}')
        return view.showtime.id

    def _select_seats(self, view: ShowtimeView, selection: SeatSelection) -> bool:
        """Returns True once at least one seat is held and the user typed DONE."""
        self.console_io.write(render_header('STEP 3: Select Seats'))
        self.console_io.write(
            f'Theater: {view.theater.name} | Movie: {view.movie.title} | Time: {view.showtime.time}'
        )
        self.console_io.write('Legend: [S=Standard, P=Premium, X=Booked, V=Selected]')
        self.console_io.write(
            f'Standard Price: {format_currency(TicketPricing.STANDARD)}'
            f' | Premium Price: {format_currency(TicketPricing.PREMIUM)}'
        )

        while True:
            self.console_io.write(render_seat_map(selection.seat_ledger))
            entry = (
                self.console_io.read(
                    'Enter Seat ID to select/deselect (e.g., A1, P5, C10), '
                    f"'{SeatEntryCommand.DONE}' to finish or '{SeatEntryCommand.CANCEL}' to abort: "
                )
                .strip()
                .upper()
            )
            if not entry:
                continue

            if entry == SeatEntryCommand.CANCEL:
                return False

            if entry == SeatEntryCommand.DONE:
                if selection.is_empty:
                    self.console_io.write('Please select at least one seat before proceeding.')
                    continue
                return True

            outcome = selection.toggle(entry)
            current = ' '.join(selection.selected_seat_ids)
            if outcome == SelectionOutcome.SELECTED:
                self.console_io.write(f'-> Seat {entry} selected. Current Selections: {current}')
            elif outcome == SelectionOutcome.DESELECTED:
                self.console_io.write(f'-> Seat {entry} deselected. Current Selections: {current}')
            elif outcome == SelectionOutcome.UNAVAILABLE:
                self.console_io.write(f'Seat {entry} is already BOOKED (X). Select another seat.')
            else:
                self.console_io.write(
                    f'Invalid Seat ID: {entry}. Please check the map and try again.'
                )

    def _select_food(self, theater: Theater) -> FoodOrder:
        order = FoodOrder()
        menu = theater.menu

        self.console_io.write(render_header('STEP 4: Select Food & Beverages (Optional)'))
        self.console_io.write(f'You are ordering from the menu of {theater.name}.')

        while True:
            self.console_io.write(f'\n{LINE_SEPARATOR}')
            self.console_io.write('Menu: ')
            for index, item in enumerate(menu, start=1):
                self.console_io.write(render_menu_item(index, item))
            self.console_io.write(LINE_SEPARATOR)
            self.console_io.write('[0] Proceed to Payment (Skip Food / Finish Order)')

            choice = self._prompt_int('Enter menu number to add, or 0 to continue: ')
            if choice == 0:
                return order
            if not 1 <= choice <= len(menu):
                self.console_io.write(
                    f'Invalid menu number. Please select from 1 to {len(menu)}.'
                )
                continue

            item = menu[choice - 1]
            quantity = self._prompt_int(f'Enter quantity for {item.name}: ')
            if quantity <= 0:
                self.console_io.write('Quantity must be at least 1. Nothing added.')
                continue

            order.add_item(item, quantity)
            self.console_io.write(f'-> Added {quantity} x {item.name} to your order.')
            self.console_io.write(render_food_lines(order.lines(), order.total_price()))

    # --- cancellation ---

    def run_cancellation(self) -> Optional[CancellationResult]:
        self.console_io.write(render_header('BOOKING CANCELLATION'))
        bookings = self.list_bookings_use_case.execute()
        if not bookings:
            self.console_io.write('There are no successful bookings to cancel.')
            return None

        self.console_io.write('Existing Bookings:')
        for booking in bookings:
            view = self.browse_catalog_use_case.get_showtime_view(booking.showtime_id)
            self.console_io.write(render_booking_brief(booking, view))
        self.console_io.write(LINE_SEPARATOR)

        booking_id = self._prompt_int(
            'Enter the Reference ID of the booking to cancel (or 0 to abort): '
        )
        if booking_id == 0:
            self.console_io.write('Cancellation aborted.')
            return None

        if self.list_bookings_use_case.get_by_id(booking_id=booking_id) is None:
            self.console_io.write(f'Error: Booking ID {booking_id} not found.')
            return None

        self.console_io.write('\n--- Confirmation ---')
        if not self._confirm(f'Are you sure you want to cancel booking ID {booking_id}? (Y/N): '):
            self.console_io.write('Cancellation operation aborted by user.')
            return None

        result = self.cancel_booking_use_case.execute(booking_id=booking_id)
        self.console_io.write(f'\n>> BOOKING ID {booking_id} HAS BEEN SUCCESSFULLY CANCELED.')
        self.console_io.write('>> Corresponding seats are now AVAILABLE.')
        if not result.persisted:
            self.console_io.write(f'\n[System Error] Unable to save booking data: {result.save_error}')
        return result

    # --- prompts ---

    def _prompt_int(self, prompt: str) -> int:
        while True:
            raw = self.console_io.read(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self.console_io.write('Invalid input. Please enter a valid number.')

    def _prompt_choice(self, prompt: str, count: int, invalid_message: str) -> int:
        """Prompt until a number in 1..count is entered."""
        while True:
            choice = self._prompt_int(prompt)
            if 1 <= choice <= count:
                return choice
            self.console_io.write(invalid_message)

    def _confirm(self, prompt: str) -> bool:
        return self.console_io.read(prompt).strip().upper().startswith('Y')
