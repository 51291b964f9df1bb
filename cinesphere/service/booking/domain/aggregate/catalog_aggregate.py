"""
Catalog Aggregate - static reference data for one run

[Design]
- Catalog owns movies, theaters and showtimes in three lists
- Showtimes reference movies/theaters by list index; bookings reference
  showtimes by list index
- Assembled once at startup, never shrinks

[Data integrity precondition]
- Showtime keys are unique; lookups by key return the first match
"""

from typing import List, Optional

import attrs

from cinesphere.platform.exception.exceptions import NotFoundError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.domain.entity.movie_entity import Movie
from cinesphere.service.booking.domain.entity.seat_entity import Seat
from cinesphere.service.booking.domain.entity.showtime_entity import Showtime
from cinesphere.service.booking.domain.entity.theater_entity import Theater
from cinesphere.service.booking.domain.value_object.showtime_key import ShowtimeKey


@attrs.define
class Catalog:
    states: List[str] = attrs.field(factory=list)
    movies: List[Movie] = attrs.field(factory=list)
    theaters: List[Theater] = attrs.field(factory=list)
    showtimes: List[Showtime] = attrs.field(factory=list)

    @Logger.io
    def add_showtime(self, *, movie_id: int, theater_id: int, date: str, time: str) -> Showtime:
        movie = self.movie(movie_id)
        theater = self.theater(theater_id)
        showtime = Showtime(
            id=len(self.showtimes),
            movie_id=movie_id,
            theater_id=theater_id,
            date=date,
            time=time,
            key=ShowtimeKey(
                theater_name=theater.name, date=date, time=time, movie_title=movie.title
            ),
        )
        self.showtimes.append(showtime)
        return showtime

    # --- index lookups ---

    def movie(self, movie_id: int) -> Movie:
        if not 0 <= movie_id < len(self.movies):
            raise NotFoundError(f'Movie {movie_id} not found')
        return self.movies[movie_id]

    def theater(self, theater_id: int) -> Theater:
        if not 0 <= theater_id < len(self.theaters):
            raise NotFoundError(f'Theater {theater_id} not found')
        return self.theaters[theater_id]

    def showtime(self, showtime_id: int) -> Showtime:
        if not 0 <= showtime_id < len(self.showtimes):
            raise NotFoundError(f'Showtime {showtime_id} not found')
        return self.showtimes[showtime_id]

    def theater_of(self, showtime_id: int) -> Theater:
        return self.theater(self.showtime(showtime_id).theater_id)

    def find_seat(self, *, theater_id: int, seat_id: str) -> Optional[Seat]:
        return self.theater(theater_id).seat_ledger.find_seat(seat_id)

    def find_showtime_by_key(self, key: str) -> Optional[Showtime]:
        return next((showtime for showtime in self.showtimes if str(showtime.key) == key), None)

    # --- location browsing ---

    def cities_in(self, state: str) -> List[str]:
        cities: List[str] = []
        for theater in self.theaters:
            if theater.state == state and theater.city not in cities:
                cities.append(theater.city)
        return cities

    def theater_ids_in(self, city: str) -> List[int]:
        return [
            theater_id for theater_id, theater in enumerate(self.theaters) if theater.city == city
        ]

    def showtimes_at(self, theater_id: int, *, title_filter: str = '') -> List[Showtime]:
        return [
            showtime
            for showtime in self.showtimes
            if showtime.theater_id == theater_id
            and (not title_filter or title_filter in self.movies[showtime.movie_id].title)
        ]
