"""Shared fixtures for Melble unit tests."""

import sqlalchemy
import sqlalchemy.pool
import sqlmodel

from .catalog import Catalog
from .models.location import Location

MELBOURNE = Location(
    code='melbourne', name='Melbourne', latitude=-37.8136, longitude=144.9631
)
CARLTON = Location(
    code='carlton', name='Carlton', latitude=-37.8001, longitude=144.9671
)
ST_KILDA = Location(
    code='st-kilda', name='St Kilda', latitude=-37.8676, longitude=144.9809
)
FOOTSCRAY = Location(
    code='footscray', name='Footscray', latitude=-37.8000, longitude=144.9000
)
RICHMOND = Location(
    code='richmond', name='Richmond', latitude=-37.8230, longitude=144.9980
)
BRUNSWICK = Location(
    code='brunswick', name='Brunswick', latitude=-37.7667, longitude=144.9600
)
POINT_COOK = Location(
    code='point-cook', name='Point Cook', latitude=-37.9150, longitude=144.7500
)
DANDENONG = Location(
    code='dandenong', name='Dandenong', latitude=-37.9870, longitude=145.2150
)
MOONEE_PONDS = Location(
    code='moonee-ponds', name='Moonee Ponds', latitude=-37.7650, longitude=144.9190
)

ALL_LOCATIONS = [
    MELBOURNE,
    CARLTON,
    ST_KILDA,
    FOOTSCRAY,
    RICHMOND,
    BRUNSWICK,
    POINT_COOK,
    DANDENONG,
    MOONEE_PONDS,
]


def make_catalog(image_codes: list[str] | None = None) -> Catalog:
    """A small catalog whose only daily target is Melbourne by default."""
    return Catalog(ALL_LOCATIONS, ['melbourne'] if image_codes is None else image_codes)


def make_in_memory_engine() -> sqlalchemy.Engine:
    """Create an in-memory SQLite engine for testing."""
    from . import store  # noqa: F401 # pyright: ignore[reportUnusedImport]

    engine = sqlmodel.create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=sqlalchemy.pool.StaticPool,
    )
    sqlmodel.SQLModel.metadata.create_all(engine)
    return engine
