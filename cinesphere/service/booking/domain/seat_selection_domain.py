"""
Seat Selection Domain

One booking cycle's tentative seat picks against a theater's seat ledger.

Lifecycle:
- toggle(): AVAILABLE <-> SELECTED; BOOKED seats are rejected
- finalize(): every seat this selection holds SELECTED -> BOOKED
- abort(): every seat this selection still holds SELECTED -> AVAILABLE
- rollback(): undo a finalize whose booking could not be registered

abort() is safe to call unconditionally when a cycle ends, so no seat is
left SELECTED between cycles.
"""

from typing import List, Tuple

import attrs

from cinesphere.platform.exception.exceptions import DomainError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.domain.enum.seat_status import SeatStatus
from cinesphere.service.booking.domain.enum.selection_outcome import SelectionOutcome
from cinesphere.service.booking.domain.seat_ledger import SeatLedger


@attrs.define
class SeatSelection:
    theater_id: int
    seat_ledger: SeatLedger
    _selected: List[str] = attrs.field(factory=list, init=False)
    _finalized: List[str] = attrs.field(factory=list, init=False)

    @property
    def selected_seat_ids(self) -> Tuple[str, ...]:
        return tuple(self._selected)

    @property
    def is_empty(self) -> bool:
        return not self._selected

    @property
    def is_finalized(self) -> bool:
        return bool(self._finalized)

    @Logger.io
    def toggle(self, seat_id: str) -> SelectionOutcome:
        if self.is_finalized:
            raise DomainError('Seat selection already finalized')

        normalized = seat_id.strip().upper()
        seat = self.seat_ledger.find_seat(normalized)
        if seat is None:
            return SelectionOutcome.NOT_FOUND

        if seat.status == SeatStatus.AVAILABLE:
            self.seat_ledger.set_status(seat, SeatStatus.SELECTED)
            self._selected.append(normalized)
            return SelectionOutcome.SELECTED

        if seat.status == SeatStatus.SELECTED and normalized in self._selected:
            self.seat_ledger.set_status(seat, SeatStatus.AVAILABLE)
            self._selected.remove(normalized)
            return SelectionOutcome.DESELECTED

        return SelectionOutcome.UNAVAILABLE

    @Logger.io
    def finalize(self) -> List[str]:
        """
        Convert every seat of this selection to BOOKED.

        Raises:
            DomainError: nothing selected, or already finalized
        """
        if self.is_finalized:
            raise DomainError('Seat selection already finalized')
        if not self._selected:
            raise DomainError('No seats selected')

        for seat_id in self._selected:
            seat = self.seat_ledger.find_seat(seat_id)
            if seat is not None and seat.status == SeatStatus.SELECTED:
                self.seat_ledger.set_status(seat, SeatStatus.BOOKED)

        self._finalized = list(self._selected)
        self._selected.clear()
        return list(self._finalized)

    @Logger.io
    def abort(self) -> List[str]:
        """Release seats still SELECTED by this selection. No-op after finalize."""
        released: List[str] = []
        for seat_id in self._selected:
            seat = self.seat_ledger.find_seat(seat_id)
            if seat is not None and seat.status == SeatStatus.SELECTED:
                self.seat_ledger.set_status(seat, SeatStatus.AVAILABLE)
                released.append(seat_id)
        self._selected.clear()
        return released

    @Logger.io
    def rollback(self) -> List[str]:
        """Undo finalize(): seats it booked go back to AVAILABLE."""
        released: List[str] = []
        for seat_id in self._finalized:
            seat = self.seat_ledger.find_seat(seat_id)
            if seat is not None and seat.status == SeatStatus.BOOKED:
                self.seat_ledger.set_status(seat, SeatStatus.AVAILABLE)
                released.append(seat_id)
        self._finalized.clear()
        return released
