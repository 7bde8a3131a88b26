"""Round, guess and settings models.

A :class:`Round` is the complete guess history for one day key.  Its status
is never stored; :func:`melble.app.game.rounds.evaluate` derives it.

Persisted and API payloads use camelCase field names (``dayKey``,
``distanceMeters`` ...); Python code uses the snake_case attributes.
"""

from __future__ import annotations

import enum
from typing import Literal

import pydantic
import pydantic.alias_generators

from .location import Direction, Location

Theme = Literal['light', 'dark']

# Interface languages; each is also a Wikipedia subdomain.
Language = Literal['en', 'fr', 'es', 'eu', 'hu', 'nl', 'pl', 'pt', 'de', 'ja', 'co']

MAX_SHIFT_DAY_COUNT = 7

_CAMEL_CONFIG = pydantic.ConfigDict(
    alias_generator=pydantic.alias_generators.to_camel,
    populate_by_name=True,
)


class RoundStatus(enum.StrEnum):
    """Outcome of a round so far."""

    IN_PROGRESS = 'in_progress'
    # The most recent guess has zero distance.
    WON = 'won'
    # The guess budget is spent without an exact match.
    LOST = 'lost'


class Guess(pydantic.BaseModel):
    """One scored submission.  Distance is always computed, never supplied."""

    model_config = pydantic.ConfigDict(**_CAMEL_CONFIG, frozen=True)

    raw_text: str
    distance_meters: int = pydantic.Field(ge=0)
    direction: Direction


class ModifierOverrides(pydantic.BaseModel):
    """Per-day difficulty modifier choices; ``None`` defers to global settings."""

    model_config = pydantic.ConfigDict(**_CAMEL_CONFIG, frozen=True)

    hide_image: bool | None = None
    rotate: bool | None = None


class StoredRound(pydantic.BaseModel):
    """The persisted layout of a round, keyed by ``day_key``."""

    model_config = _CAMEL_CONFIG

    day_key: str
    guesses: list[Guess] = pydantic.Field(default_factory=list)
    modifiers: ModifierOverrides = pydantic.Field(default_factory=ModifierOverrides)


class Round(StoredRound):
    """A stored round plus the target it is played against."""

    target: Location


class PlayerSettings(pydantic.BaseModel):
    """Global player settings.  Read-only as far as the game is concerned."""

    shift_day_count: int = 0
    no_image_mode: bool = False
    rotation_mode: bool = False
    theme: Theme = 'light'
    language: Language = 'en'

    @pydantic.field_validator('shift_day_count')
    @classmethod
    def _clamp_shift(cls, value: int) -> int:
        return max(0, min(MAX_SHIFT_DAY_COUNT, value))
