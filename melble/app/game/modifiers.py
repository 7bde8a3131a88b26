"""Difficulty modifiers: hide the suburb image, or rotate it.

Each day starts from the player's global settings and can override either
flag for that day only.  Modifiers change what the page shows and how the
share title is decorated; they never change scoring.
"""

from __future__ import annotations

import enum
import math
import random

import pydantic

from .models.round import ModifierOverrides, PlayerSettings, RoundStatus


class Modifier(enum.StrEnum):
    """Names of the per-day toggles."""

    HIDE_IMAGE = 'hide_image'
    ROTATE = 'rotate'


class ActiveModifiers(pydantic.BaseModel):
    """Effective modifier flags for one day."""

    model_config = pydantic.ConfigDict(frozen=True)

    hide_image: bool
    rotate: bool


def resolve_modifiers(
    overrides: ModifierOverrides, settings: PlayerSettings
) -> ActiveModifiers:
    """Apply the day's *overrides* on top of the global *settings*."""
    hide_image = overrides.hide_image
    rotate = overrides.rotate
    return ActiveModifiers(
        hide_image=settings.no_image_mode if hide_image is None else hide_image,
        rotate=settings.rotation_mode if rotate is None else rotate,
    )


def set_override(
    overrides: ModifierOverrides, modifier: Modifier, value: bool | None
) -> ModifierOverrides:
    """Return *overrides* with *modifier* set to *value* (``None`` clears it)."""
    return overrides.model_copy(update={modifier.value: value})


def image_hidden(active: ActiveModifiers, status: RoundStatus) -> bool:
    """The image stays hidden only while the round is being played."""
    return active.hide_image and status == RoundStatus.IN_PROGRESS


def image_rotated(active: ActiveModifiers, status: RoundStatus) -> bool:
    """The image stays rotated only while the round is being played."""
    return active.rotate and status == RoundStatus.IN_PROGRESS


class Rotation(pydantic.BaseModel):
    """How the suburb image is turned in rotation mode."""

    model_config = pydantic.ConfigDict(frozen=True)

    angle: int
    # Shrinks the turned image so its corners stay inside the frame.
    scale: float


def rotation_for_day(day_key: str) -> Rotation:
    """The rotation for *day_key*; every player sees the same one that day."""
    angle = random.Random(day_key).randrange(360)
    radians = math.radians(angle)
    scale = 1 / (abs(math.cos(radians)) + abs(math.sin(radians)))
    return Rotation(angle=angle, scale=round(scale, 3))
