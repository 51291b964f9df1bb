from decimal import Decimal
from typing import Final, Mapping

import attrs

from cinesphere.platform.config.business_config import TicketPricing
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus, SeatType


TICKET_PRICES: Final[Mapping[SeatType, Decimal]] = {
    SeatType.STANDARD: TicketPricing.STANDARD,
    SeatType.PREMIUM: TicketPricing.PREMIUM,
}


@attrs.define
class Seat:
    seat_id: str = attrs.field(on_setattr=attrs.setters.frozen)  # row letter + column, e.g. "A5"
    seat_type: SeatType = attrs.field(on_setattr=attrs.setters.frozen)
    status: SeatStatus = SeatStatus.AVAILABLE

    @property
    def price(self) -> Decimal:
        return TICKET_PRICES[self.seat_type]
