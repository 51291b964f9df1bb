from typing import List, Tuple

from cinesphere.service.booking.app.dto.booking_result import ShowtimeView
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog
from cinesphere.service.booking.domain.entity.theater_entity import Theater


class BrowseCatalogUseCase:
    """Read-only navigation: state -> city -> theater -> showtime."""

    def __init__(self, *, catalog: Catalog) -> None:
        self.catalog = catalog

    def list_states(self) -> List[str]:
        return list(self.catalog.states)

    def list_cities(self, state: str) -> List[str]:
        return self.catalog.cities_in(state)

    def list_theaters(self, city: str) -> List[Tuple[int, Theater]]:
        return [
            (theater_id, self.catalog.theater(theater_id))
            for theater_id in self.catalog.theater_ids_in(city)
        ]

    def get_theater(self, theater_id: int) -> Theater:
        return self.catalog.theater(theater_id)

    def get_showtime_view(self, showtime_id: int) -> ShowtimeView:
        showtime = self.catalog.showtime(showtime_id)
        return ShowtimeView(
            showtime=showtime,
            movie=self.catalog.movie(showtime.movie_id),
            theater=self.catalog.theater(showtime.theater_id),
        )

    def list_showtimes(self, *, theater_id: int, title_filter: str = '') -> List[ShowtimeView]:
        return [
            self.get_showtime_view(showtime.id)
            for showtime in self.catalog.showtimes_at(theater_id, title_filter=title_filter)
        ]
