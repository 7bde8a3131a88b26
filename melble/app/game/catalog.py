"""Static suburb catalog.

Suburbs and their coordinates come from ``data/suburbs.json``; the codes of
suburbs that have an outline image come from ``data/suburb_images.json``.
Only suburbs with an image can be a daily target, but every suburb can be
guessed.  File order is significant: it fixes the daily target rotation.
"""

from __future__ import annotations

import functools
import json
import pathlib
from collections.abc import Callable, Sequence

import pydantic

from . import names
from .models.location import Location

DATA_DIR = pathlib.Path(__file__).resolve().parent / 'data'

DisplayNameResolver = Callable[[str, Location], str]

_location_list_adapter = pydantic.TypeAdapter(list[Location])


def get_suburb_name(language: str, location: Location) -> str:
    """Return the display name of *location* for *language*.

    Suburb names are not translated, so every language gets the catalog name.
    """
    return location.name


class Catalog:
    """Read-only collection of every guessable suburb."""

    def __init__(
        self, locations: Sequence[Location], image_codes: Sequence[str]
    ) -> None:
        codes = [loc.code for loc in locations]
        if len(set(codes)) != len(codes):
            raise ValueError('Suburb codes must be unique')
        with_image = {code.lower() for code in image_codes}
        self.locations: tuple[Location, ...] = tuple(locations)
        self.eligible: tuple[Location, ...] = tuple(
            loc for loc in locations if loc.code.lower() in with_image
        )
        self._by_code = {loc.code: loc for loc in locations}

    def __len__(self) -> int:
        return len(self.locations)

    def get(self, code: str) -> Location | None:
        """Return the location with *code*, or ``None``."""
        return self._by_code.get(code)

    def find_by_name(
        self,
        raw_text: str,
        language: str = 'en',
        display_name: DisplayNameResolver = get_suburb_name,
    ) -> Location | None:
        """Return the first location whose display name matches *raw_text*.

        Matching is on :func:`names.sanitize_name` forms, so case, accents and
        punctuation are ignored.  Returns ``None`` if nothing matches.
        """
        wanted = names.sanitize_name(raw_text)
        if not wanted:
            return None
        return next(
            (
                loc
                for loc in self.locations
                if names.sanitize_name(display_name(language, loc)) == wanted
            ),
            None,
        )

    def display_names(
        self, language: str = 'en', display_name: DisplayNameResolver = get_suburb_name
    ) -> list[str]:
        """Every display name for *language*, sorted alphabetically."""
        return sorted(display_name(language, loc) for loc in self.locations)


def load_catalog(data_dir: pathlib.Path = DATA_DIR) -> Catalog:
    """Load a :class:`Catalog` from the JSON files in *data_dir*."""
    locations = _location_list_adapter.validate_json(
        (data_dir / 'suburbs.json').read_bytes()
    )
    image_codes: list[str] = json.loads(
        (data_dir / 'suburb_images.json').read_text(encoding='utf-8')
    )
    return Catalog(locations, image_codes)


@functools.cache
def default_catalog() -> Catalog:
    """The bundled catalog, loaded once per process."""
    return load_catalog()
