import pytest

from cinesphere.platform.exception.exceptions import DomainError, NotFoundError
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog
from cinesphere.service.booking.domain.entity.movie_entity import Movie
from cinesphere.service.booking.domain.entity.theater_entity import Theater


pytestmark = pytest.mark.unit


class TestCatalogLookups:
    def test_index_lookups(self, catalog):
        assert catalog.movie(1).title == 'Eternal Sun'
        assert catalog.theater(1).name == 'Gopalan Cinemas'
        assert catalog.showtime(2).theater_id == 1
        assert catalog.theater_of(2).name == 'Gopalan Cinemas'

    @pytest.mark.parametrize('lookup', ['movie', 'theater', 'showtime'])
    def test_out_of_range_raises_not_found(self, catalog, lookup):
        with pytest.raises(NotFoundError):
            getattr(catalog, lookup)(99)
        with pytest.raises(NotFoundError):
            getattr(catalog, lookup)(-1)

    def test_find_seat(self, catalog):
        assert catalog.find_seat(theater_id=1, seat_id='A3').seat_id == 'A3'
        assert catalog.find_seat(theater_id=1, seat_id='A4') is None

    def test_find_showtime_by_key(self, catalog):
        showtime = catalog.find_showtime_by_key('PVR Phoenix|2025-12-15|07:00 PM|Eternal Sun')

        assert showtime is not None
        assert showtime.id == 1

    def test_unknown_key_is_none(self, catalog):
        assert catalog.find_showtime_by_key('PVR Phoenix|2025-12-15|07:00 PM|Nope') is None


class TestCatalogBrowsing:
    def test_cities_are_unique_and_ordered(self):
        catalog = Catalog(
            states=['Maharashtra'],
            theaters=[
                Theater.create(
                    name=name,
                    city=city,
                    state='Maharashtra',
                    standard_rows=1,
                    premium_rows=1,
                    seats_per_row=1,
                )
                for name, city in [('T1', 'Pune'), ('T2', 'Mumbai'), ('T3', 'Pune')]
            ],
        )

        assert catalog.cities_in('Maharashtra') == ['Pune', 'Mumbai']
        assert catalog.theater_ids_in('Pune') == [0, 2]
        assert catalog.cities_in('Goa') == []

    def test_showtimes_at_theater(self, catalog):
        assert [showtime.id for showtime in catalog.showtimes_at(0)] == [0, 1]
        assert [showtime.id for showtime in catalog.showtimes_at(1)] == [2]

    def test_title_filter_is_substring_match(self, catalog):
        filtered = catalog.showtimes_at(0, title_filter='Architect')

        assert [showtime.id for showtime in filtered] == [0]
        assert catalog.showtimes_at(0, title_filter='architect') == []


class TestAddShowtime:
    def test_add_showtime_builds_key(self, catalog):
        showtime = catalog.add_showtime(
            movie_id=0, theater_id=1, date='2025-12-17', time='01:00 PM'
        )

        assert showtime.id == 3
        assert str(showtime.key) == 'Gopalan Cinemas|2025-12-17|01:00 PM|The AI Architect'

    def test_separator_in_title_is_rejected(self):
        catalog = Catalog(
            movies=[Movie(title='Bad|Title', genre='Drama', duration_minutes=90)],
            theaters=[
                Theater.create(
                    name='T', city='C', state='S', standard_rows=1, premium_rows=0, seats_per_row=1
                )
            ],
        )

        with pytest.raises(DomainError):
            catalog.add_showtime(movie_id=0, theater_id=0, date='2025-12-15', time='10:00 AM')

    def test_unknown_movie_raises(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.add_showtime(movie_id=7, theater_id=0, date='2025-12-15', time='10:00 AM')
