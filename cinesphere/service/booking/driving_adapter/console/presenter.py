"""
Console Presenter

Pure text rendering for the booking console. Every function returns a
string (possibly multi-line); printing is the controller's job.
"""

from decimal import Decimal
from typing import Iterable, List

from cinesphere.platform.config.business_config import FoodDiscount
from cinesphere.platform.config.core_setting import settings
from cinesphere.service.booking.app.dto.booking_result import ShowtimeView
from cinesphere.service.booking.domain.entity.booking_entity import Booking
from cinesphere.service.booking.domain.entity.food_order_entity import FoodOrderLine
from cinesphere.service.booking.domain.entity.seat_entity import Seat
from cinesphere.service.booking.domain.entity.theater_entity import MenuItem
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus, SeatType
from cinesphere.service.booking.domain.seat_ledger import SeatLedger


LINE_SEPARATOR = '-' * 70

_SEAT_MARKERS = {
    SeatStatus.BOOKED: 'X',
    SeatStatus.SELECTED: 'V',
}
_SEAT_TYPE_MARKERS = {
    SeatType.PREMIUM: 'P',
    SeatType.STANDARD: 'S',
}


def format_currency(amount: Decimal) -> str:
    return f'{settings.CURRENCY_LABEL} {amount:.2f}'


def render_header(title: str) -> str:
    return f'\n{"=" * 10} {title} {"=" * 10}'


def render_seat(seat: Seat) -> str:
    marker = _SEAT_MARKERS.get(seat.status, _SEAT_TYPE_MARKERS[seat.seat_type])
    return f'[{marker}{seat.seat_id:>4}]'


def render_seat_map(seat_ledger: SeatLedger) -> str:
    lines = [LINE_SEPARATOR]
    for row in seat_ledger.rows:
        if not row:
            continue
        lines.append(f'Row {row[0].seat_id[0]} | ' + ''.join(render_seat(seat) for seat in row))
    lines.append(LINE_SEPARATOR)
    return '\n'.join(lines)


def render_menu_item(index: int, item: MenuItem) -> str:
    return f'  [{index}] {item.name:<30} - {item.category:<10} @ {format_currency(item.price)}'


def render_food_lines(lines: Iterable[FoodOrderLine], total: Decimal) -> str:
    rendered = ['', '    --- Food Order Details ---']
    lines = list(lines)
    if not lines:
        rendered.append('    (No food items ordered)')
        return '\n'.join(rendered)

    for line in lines:
        rendered.append(
            f'    * {line.name:<30} x{line.quantity:>3} @ {format_currency(line.unit_price)}'
            f' = {format_currency(line.subtotal)}'
        )
    rendered.append(f'    Total Food Cost: {format_currency(total)}')
    return '\n'.join(rendered)


def render_showtime(index: int, view: ShowtimeView) -> str:
    return (
        f'  [{index}] {view.showtime.time:<10} - {view.movie.title:<30}'
        f' ({view.movie.duration_minutes} mins) on {view.showtime.date}'
    )


def render_bill(booking: Booking, view: ShowtimeView) -> str:
    lines: List[str] = [
        render_header('BOOKING CONFIRMATION & BILL'),
        f'Reference ID: {booking.id}',
        LINE_SEPARATOR,
        f'{"Movie:":<20}{view.movie.title}',
        f'{"Theater:":<20}{view.theater.name} ({view.theater.city})',
        f'{"Show Time:":<20}{view.showtime.date} at {view.showtime.time}',
        LINE_SEPARATOR,
        'Ticket Details:',
        f'  Seats Reserved ({booking.seat_count}): {", ".join(booking.seat_ids)}',
        f'{"  Ticket Subtotal:":<20}{format_currency(booking.ticket_subtotal)}',
        render_food_lines(booking.food_lines, booking.food_subtotal),
    ]
    if booking.discount:
        lines.append(
            f'    Food Discount ({FoodDiscount.RATE:.0%}): -{format_currency(booking.discount)}'
        )
    lines += [
        LINE_SEPARATOR,
        f'>> {"GRAND TOTAL:":<20}{format_currency(booking.grand_total)}',
        LINE_SEPARATOR,
        'Enjoy your movie! Seats are confirmed.',
    ]
    return '\n'.join(lines)


def render_booking_brief(booking: Booking, view: ShowtimeView) -> str:
    return (
        f'  [ID: {booking.id}] {view.movie.title} at {view.showtime.time}'
        f' on {view.showtime.date} ({view.theater.name})\n'
        f'    Seats: {", ".join(booking.seat_ids)}'
    )
