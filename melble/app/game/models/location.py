"""Location catalog models.

A :class:`Location` is one named suburb with static coordinates.  Locations
are loaded once from the bundled data files and shared read-only by every
round.
"""

from __future__ import annotations

import enum

import pydantic


class Direction(enum.StrEnum):
    """The 16 standard compass labels, clockwise from north."""

    N = 'N'
    NNE = 'NNE'
    NE = 'NE'
    ENE = 'ENE'
    E = 'E'
    ESE = 'ESE'
    SE = 'SE'
    SSE = 'SSE'
    S = 'S'
    SSW = 'SSW'
    SW = 'SW'
    WSW = 'WSW'
    W = 'W'
    WNW = 'WNW'
    NW = 'NW'
    NNW = 'NNW'


class Location(pydantic.BaseModel):
    """A named suburb with decimal-degree coordinates."""

    model_config = pydantic.ConfigDict(frozen=True)

    # Stable slug; also the name of the suburb's image directory.
    code: str
    name: str
    latitude: float = pydantic.Field(ge=-90, le=90)
    longitude: float = pydantic.Field(ge=-180, le=180)

    @property
    def point(self) -> tuple[float, float]:
        """``(latitude, longitude)`` pair, the shape geopy expects."""
        return (self.latitude, self.longitude)
