"""Exceptions raised by the Melble game engine."""

from __future__ import annotations


class MelbleError(Exception):
    """Base class for all game errors."""


class UnresolvedLocationError(MelbleError, ValueError):
    """The submitted text matches no catalog location."""

    def __init__(self, raw_text: str) -> None:
        super().__init__(f'Unknown suburb: {raw_text!r}')
        self.raw_text = raw_text


class RoundAlreadyTerminalError(MelbleError, ValueError):
    """A guess was submitted after the round was won or lost."""

    def __init__(self, day_key: str) -> None:
        super().__init__(f'Round {day_key} is already over')
        self.day_key = day_key


class MissingTargetForDayError(MelbleError, RuntimeError):
    """No eligible target location exists for a day."""

    def __init__(self, day_key: str) -> None:
        super().__init__(f'No target suburb available for {day_key}')
        self.day_key = day_key
