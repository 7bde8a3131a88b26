"""Round state machine.

A round moves from ``IN_PROGRESS`` to ``WON`` (exact guess) or ``LOST`` (guess
budget spent).  :func:`evaluate` is the only place that decides which;
:func:`submit_guess` is the only transition, and like the rest of this module
it never modifies the round it is given.
"""

from __future__ import annotations

import enum

import pydantic

from . import geography
from .catalog import Catalog, DisplayNameResolver, get_suburb_name
from .errors import RoundAlreadyTerminalError, UnresolvedLocationError
from .models.location import Location
from .models.round import Guess, Round, RoundStatus, StoredRound

MAX_TRY_COUNT = 6


class GuessError(enum.StrEnum):
    """Why a submission was rejected."""

    UNKNOWN_LOCATION = 'unknown_location'
    ROUND_OVER = 'round_over'


class GuessResult(pydantic.BaseModel):
    """Outcome of :func:`submit_guess`."""

    accepted: bool
    error: GuessError | None = None
    error_message: str | None = None
    # The scored guess when accepted.
    guess: Guess | None = None
    # The round after the submission; unchanged from the input when rejected.
    updated_round: Round
    status: RoundStatus


def new_round(day_key: str, target: Location) -> Round:
    """A fresh in-progress round for *day_key*."""
    return Round(day_key=day_key, target=target)


def restore_round(stored: StoredRound, target: Location) -> Round:
    """Rebuild a playable round from its persisted form."""
    return Round(
        day_key=stored.day_key,
        target=target,
        guesses=list(stored.guesses),
        modifiers=stored.modifiers,
    )


def to_stored(round_: Round) -> StoredRound:
    """The persisted form of *round_* (everything but the target)."""
    return StoredRound(
        day_key=round_.day_key,
        guesses=list(round_.guesses),
        modifiers=round_.modifiers,
    )


def evaluate(round_: Round) -> RoundStatus:
    """Derive the status of *round_* from its guesses."""
    guesses = round_.guesses
    if guesses and guesses[-1].distance_meters == 0:
        return RoundStatus.WON
    if len(guesses) >= MAX_TRY_COUNT:
        return RoundStatus.LOST
    return RoundStatus.IN_PROGRESS


def is_over(round_: Round) -> bool:
    """True once the round is won or lost."""
    return evaluate(round_) != RoundStatus.IN_PROGRESS


def submit_guess(
    round_: Round,
    raw_text: str,
    catalog: Catalog,
    language: str = 'en',
    display_name: DisplayNameResolver = get_suburb_name,
) -> GuessResult:
    """Resolve, score and append a guess, returning a :class:`GuessResult`.

    Rejections leave the guesses untouched: a terminal round reports
    ``ROUND_OVER`` and an unrecognised name reports ``UNKNOWN_LOCATION``.
    """
    updated = round_.model_copy(deep=True)
    try:
        guess = _apply_guess(updated, raw_text, catalog, language, display_name)
    except RoundAlreadyTerminalError as exc:
        return _rejected(round_, GuessError.ROUND_OVER, exc)
    except UnresolvedLocationError as exc:
        return _rejected(round_, GuessError.UNKNOWN_LOCATION, exc)

    return GuessResult(
        accepted=True,
        guess=guess,
        updated_round=updated,
        status=evaluate(updated),
    )


def _apply_guess(
    round_: Round,
    raw_text: str,
    catalog: Catalog,
    language: str,
    display_name: DisplayNameResolver,
) -> Guess:
    """Append the scored guess to *round_* in place."""
    if is_over(round_):
        raise RoundAlreadyTerminalError(round_.day_key)
    guessed = catalog.find_by_name(raw_text, language, display_name)
    if guessed is None:
        raise UnresolvedLocationError(raw_text)
    guess = geography.score_guess(raw_text, guessed, round_.target)
    round_.guesses.append(guess)
    return guess


def _rejected(round_: Round, error: GuessError, exc: Exception) -> GuessResult:
    return GuessResult(
        accepted=False,
        error=error,
        error_message=str(exc),
        updated_round=round_,
        status=evaluate(round_),
    )
