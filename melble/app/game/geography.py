"""Guess scoring and proximity encoding.

Distances are great-circle (haversine) metres from geopy.  Directions use the
rhumb-line bearing from the guess to the target, snapped to the nearest 45
degrees, so only the eight octant labels are ever produced even though the
arrow table covers all sixteen.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import geopy.distance  # pyright: ignore[reportMissingTypeStubs]

from .models.location import Direction, Location
from .models.round import Guess, Theme

# Farthest meaningful distance inside Greater Melbourne.
MAX_DISTANCE_IN_MELBOURNE = 70_000

SQUARE_COUNT = 5
GREEN_SQUARE = '🟩'
YELLOW_SQUARE = '🟨'
NEUTRAL_SQUARES: dict[str, str] = {'light': '⬜', 'dark': '⬛'}

SOLVED_EMOJI = '🎉'

_COMPASS_LABELS: tuple[Direction, ...] = tuple(Direction)

DIRECTION_ARROWS: dict[Direction, str] = {
    Direction.N: '⬆️',
    Direction.NNE: '↗️',
    Direction.NE: '↗️',
    Direction.ENE: '↗️',
    Direction.E: '➡️',
    Direction.ESE: '↘️',
    Direction.SE: '↘️',
    Direction.SSE: '↘️',
    Direction.S: '⬇️',
    Direction.SSW: '↙️',
    Direction.SW: '↙️',
    Direction.WSW: '↙️',
    Direction.W: '⬅️',
    Direction.WNW: '↖️',
    Direction.NW: '↖️',
    Direction.NNW: '↖️',
}


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def get_distance(origin: Location, destination: Location) -> int:
    """Great-circle distance between two locations, in whole metres."""
    meters = geopy.distance.great_circle(origin.point, destination.point).meters
    return round(meters)


def get_rhumb_line_bearing(origin: Location, destination: Location) -> float:
    """Constant-heading bearing from *origin* to *destination*, in ``[0, 360)``."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(destination.latitude)
    delta_lambda = math.radians(destination.longitude - origin.longitude)
    delta_psi = math.log(
        math.tan(phi2 / 2 + math.pi / 4) / math.tan(phi1 / 2 + math.pi / 4)
    )
    # Take the shorter way round across the antimeridian.
    if abs(delta_lambda) > math.pi:
        if delta_lambda > 0:
            delta_lambda -= 2 * math.pi
        else:
            delta_lambda += 2 * math.pi
    return (math.degrees(math.atan2(delta_lambda, delta_psi)) + 360) % 360


def snap_bearing(bearing: float, step: float = 45) -> float:
    """Round *bearing* to the nearest multiple of *step*; halves round up."""
    return (math.floor(bearing / step + 0.5) * step) % 360


def get_compass_direction(origin: Location, destination: Location) -> Direction:
    """Compass label for the snapped bearing from *origin* to *destination*."""
    bearing = snap_bearing(get_rhumb_line_bearing(origin, destination))
    index = math.floor(bearing / 22.5 + 0.5) % len(_COMPASS_LABELS)
    return _COMPASS_LABELS[index]


def score_guess(raw_text: str, guessed: Location, target: Location) -> Guess:
    """Build the :class:`Guess` for *guessed* against today's *target*."""
    return Guess(
        raw_text=raw_text,
        distance_meters=get_distance(guessed, target),
        direction=get_compass_direction(guessed, target),
    )


# ---------------------------------------------------------------------------
# Proximity encoding
# ---------------------------------------------------------------------------


def compute_proximity_percent(distance: int) -> int:
    """Closeness score in ``[0, 100]``: 100 at the target, 0 from 70 km out."""
    proximity = max(MAX_DISTANCE_IN_MELBOURNE - distance, 0)
    return proximity * 100 // MAX_DISTANCE_IN_MELBOURNE


def generate_square_characters(percent: int, theme: Theme) -> list[str]:
    """Render *percent* as exactly five coloured squares.

    One green square per full 20%, then one yellow square if at least 10% is
    left over and a cell remains, then neutral squares for *theme*.
    """
    percent = max(0, min(100, percent))
    green_count = percent // 20
    yellow_count = 1 if percent - green_count * 20 >= 10 else 0
    yellow_count = min(yellow_count, SQUARE_COUNT - green_count)
    neutral_count = SQUARE_COUNT - green_count - yellow_count
    return (
        [GREEN_SQUARE] * green_count
        + [YELLOW_SQUARE] * yellow_count
        + [NEUTRAL_SQUARES[theme]] * neutral_count
    )


def get_direction_emoji(guess: Guess) -> str:
    """Arrow pointing from the guess towards the target, or a party popper."""
    if guess.distance_meters == 0:
        return SOLVED_EMOJI
    return DIRECTION_ARROWS[guess.direction]


def best_guess_percent(guesses: Iterable[Guess]) -> int:
    """Highest proximity percent over *guesses*; 0 when there are none."""
    return max(
        (compute_proximity_percent(g.distance_meters) for g in guesses), default=0
    )


def format_distance(distance_meters: int) -> str:
    """Distance as whole kilometres, e.g. ``'12km'`` or ``'1,204km'``."""
    return f'{math.floor(distance_meters / 1000 + 0.5):,}km'
