"""
Showtime Key Value Object

Identity of a showtime across process restarts. Persisted booking lines
carry the key verbatim, so every part must be free of the record separator.
"""

import attrs

from cinesphere.platform.config.business_config import BookingRecordFormat
from cinesphere.platform.exception.exceptions import DomainError


def _validate_key_part(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Showtime key {attribute.name} cannot be empty')
    if BookingRecordFormat.FIELD_SEPARATOR in value:
        raise DomainError(
            f'Showtime key {attribute.name} cannot contain '
            f'"{BookingRecordFormat.FIELD_SEPARATOR}": {value}'
        )


@attrs.frozen
class ShowtimeKey:
    """Showtime Key (Value Object)"""

    theater_name: str = attrs.field(validator=_validate_key_part)
    date: str = attrs.field(validator=_validate_key_part)
    time: str = attrs.field(validator=_validate_key_part)
    movie_title: str = attrs.field(validator=_validate_key_part)

    def __str__(self) -> str:
        return BookingRecordFormat.FIELD_SEPARATOR.join(
            (self.theater_name, self.date, self.time, self.movie_title)
        )
