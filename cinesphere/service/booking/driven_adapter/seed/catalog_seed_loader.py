"""
Catalog Seed Loader

Builds the Catalog from a JSON seed:

    {
      "states":   ["Maharashtra", ...],                       # optional
      "movies":   [{"title", "genre", "duration_minutes"}],
      "theaters": [{"name", "city", "state", "standard_rows",
                    "premium_rows", "seats_per_row", "menu"?}],
      "showtimes": [{"movie", "theater", "date", "time"}]     # list indexes
    }

"menu" entries are {"name", "price", "category"}; a theater without one
gets the default menu.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import orjson

from cinesphere.platform.exception.exceptions import CatalogLoadError, CustomBaseError
from cinesphere.platform.logging.loguru_io import Logger
from cinesphere.service.booking.domain.aggregate.catalog_aggregate import Catalog
from cinesphere.service.booking.domain.entity.movie_entity import Movie
from cinesphere.service.booking.domain.entity.theater_entity import MenuItem, Theater


def _build_menu(raw_menu: Optional[List[Dict[str, Any]]]) -> Optional[List[MenuItem]]:
    if raw_menu is None:
        return None
    return [
        MenuItem(name=item['name'], price=item['price'], category=item['category'])
        for item in raw_menu
    ]


def _derive_states(theaters: List[Theater]) -> List[str]:
    states: List[str] = []
    for theater in theaters:
        if theater.state not in states:
            states.append(theater.state)
    return states


def build_catalog(raw: Dict[str, Any]) -> Catalog:
    """
    Raises:
        CatalogLoadError: missing keys, wrong types, bad indexes or invalid values
    """
    try:
        movies = [
            Movie(
                title=movie['title'],
                genre=movie['genre'],
                duration_minutes=int(movie['duration_minutes']),
            )
            for movie in raw['movies']
        ]
        theaters = [
            Theater.create(
                name=theater['name'],
                city=theater['city'],
                state=theater['state'],
                standard_rows=int(theater['standard_rows']),
                premium_rows=int(theater['premium_rows']),
                seats_per_row=int(theater['seats_per_row']),
                menu=_build_menu(theater.get('menu')),
            )
            for theater in raw['theaters']
        ]
        states = list(raw['states']) if 'states' in raw else _derive_states(theaters)

        catalog = Catalog(states=states, movies=movies, theaters=theaters)
        for showtime in raw['showtimes']:
            catalog.add_showtime(
                movie_id=int(showtime['movie']),
                theater_id=int(showtime['theater']),
                date=showtime['date'],
                time=showtime['time'],
            )
    except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError) as e:
        raise CatalogLoadError(f'Invalid catalog seed: {type(e).__name__}: {e}') from e
    except CustomBaseError as e:
        raise CatalogLoadError(f'Invalid catalog seed: {e.message}') from e

    return catalog


@Logger.io
def load_catalog(*, path: Path | str) -> Catalog:
    """
    Raises:
        CatalogLoadError: unreadable file, invalid JSON, or invalid content
    """
    try:
        raw = orjson.loads(Path(path).read_bytes())
    except OSError as e:
        raise CatalogLoadError(f'Cannot read catalog seed {path}: {e}') from e
    except orjson.JSONDecodeError as e:
        raise CatalogLoadError(f'Catalog seed {path} is not valid JSON: {e}') from e

    if not isinstance(raw, dict):
        raise CatalogLoadError(f'Catalog seed {path} must be a JSON object')

    catalog = build_catalog(raw)
    Logger.base.info(
        f'🎬 [CATALOG] Loaded {len(catalog.movies)} movies, {len(catalog.theaters)} theaters, '
        f'{len(catalog.showtimes)} showtimes'
    )
    return catalog
