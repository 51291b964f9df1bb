import attrs

from cinesphere.service.booking.domain.value_object.showtime_key import ShowtimeKey


@attrs.frozen
class Showtime:
    """
    A movie playing in a theater at a date/time.

    Movie and theater are referenced by their index in the catalog; the
    catalog owns both.
    """

    id: int
    movie_id: int
    theater_id: int
    date: str
    time: str
    key: ShowtimeKey
