"""Game services: glue between settings, the round store and the engine.

Route handlers call these functions; everything below them is pure except
:mod:`.store`.  A round is read when its day key is resolved and written back
after every accepted change.
"""

import datetime
import logging
import urllib.parse

import pydantic
from sqlmodel import Session

from . import days, geography, modifiers, rounds, share, store
from .catalog import Catalog, DisplayNameResolver, default_catalog, get_suburb_name
from .models.round import Guess, PlayerSettings, Round, RoundStatus, Theme

logger = logging.getLogger(__name__)


class GuessRow(pydantic.BaseModel):
    """One rendered guess."""

    name: str
    distance: str
    distance_meters: int
    direction: str
    arrow: str
    percent: int
    squares: list[str]


class RoundView(pydantic.BaseModel):
    """Everything the page and the JSON API show for a round."""

    day_key: str
    puzzle_number: int
    status: RoundStatus
    max_try_count: int
    guesses: list[GuessRow]
    hide_image: bool
    rotate: bool
    image_hidden: bool
    image_rotated: bool
    image_path: str
    rotation_angle: int
    image_scale: float
    best_percent: int
    can_shift_back: bool
    can_shift_forward: bool
    # Only filled in once the round is over.
    share_text: str | None = None
    target_name: str | None = None
    google_maps_url: str | None = None
    wikipedia_url: str | None = None


def _catalog_or_default(catalog: Catalog | None) -> Catalog:
    return catalog if catalog is not None else default_catalog()


def get_round(
    session: Session,
    settings: PlayerSettings,
    now: datetime.datetime | None = None,
    catalog: Catalog | None = None,
) -> Round:
    """Load the round for the settings' day key, or start a new one.

    Raises:
        MissingTargetForDayError: If no target exists for the day.
    """
    day_key = days.get_day_string(settings.shift_day_count, now)
    target = days.target_for_day(day_key, _catalog_or_default(catalog))
    stored = store.load_round(session, day_key)
    if stored is None:
        logger.info('[%s] Starting a new round', day_key)
        return rounds.new_round(day_key, target)
    return rounds.restore_round(stored, target)


def play_guess(
    session: Session,
    settings: PlayerSettings,
    raw_text: str,
    now: datetime.datetime | None = None,
    catalog: Catalog | None = None,
    display_name: DisplayNameResolver = get_suburb_name,
) -> rounds.GuessResult:
    """Submit a guess for the current day and persist the round if accepted."""
    catalog = _catalog_or_default(catalog)
    round_ = get_round(session, settings, now, catalog)
    result = rounds.submit_guess(
        round_, raw_text, catalog, settings.language, display_name
    )
    if not result.accepted:
        logger.info(
            '[%s] Rejected guess %r: %s', round_.day_key, raw_text, result.error
        )
        return result

    store.save_round(session, rounds.to_stored(result.updated_round))
    assert result.guess is not None
    logger.info(
        '[%s] Guess %d %r scored %d m %s',
        round_.day_key,
        len(result.updated_round.guesses),
        raw_text,
        result.guess.distance_meters,
        result.guess.direction,
    )
    if result.status != RoundStatus.IN_PROGRESS:
        logger.info('[%s] Round finished: %s', round_.day_key, result.status)
    return result


def update_modifier(
    session: Session,
    settings: PlayerSettings,
    modifier: modifiers.Modifier,
    value: bool | None,
    now: datetime.datetime | None = None,
    catalog: Catalog | None = None,
) -> Round:
    """Override a difficulty modifier for the current day and persist it."""
    round_ = get_round(session, settings, now, catalog)
    updated = round_.model_copy(
        update={'modifiers': modifiers.set_override(round_.modifiers, modifier, value)}
    )
    store.save_round(session, rounds.to_stored(updated))
    logger.info('[%s] Set %s to %s', round_.day_key, modifier, value)
    return updated


def share_text(round_: Round, settings: PlayerSettings) -> str:
    """The share text for *round_* with the day's effective modifiers."""
    active = modifiers.resolve_modifiers(round_.modifiers, settings)
    return share.build_share_text(
        round_, settings.theme, active.hide_image, active.rotate
    )


def _guess_row(guess: Guess, theme: Theme) -> GuessRow:
    percent = geography.compute_proximity_percent(guess.distance_meters)
    return GuessRow(
        name=guess.raw_text,
        distance=geography.format_distance(guess.distance_meters),
        distance_meters=guess.distance_meters,
        direction=guess.direction.value,
        arrow=geography.get_direction_emoji(guess),
        percent=percent,
        squares=geography.generate_square_characters(percent, theme),
    )


def build_round_view(
    round_: Round,
    settings: PlayerSettings,
    display_name: DisplayNameResolver = get_suburb_name,
) -> RoundView:
    """Render *round_* for the page and the API."""
    status = rounds.evaluate(round_)
    active = modifiers.resolve_modifiers(round_.modifiers, settings)
    rotation = modifiers.rotation_for_day(round_.day_key)
    rows = [_guess_row(guess, settings.theme) for guess in round_.guesses]
    view = RoundView(
        day_key=round_.day_key,
        puzzle_number=days.puzzle_number(round_.day_key),
        status=status,
        max_try_count=rounds.MAX_TRY_COUNT,
        guesses=rows,
        hide_image=active.hide_image,
        rotate=active.rotate,
        image_hidden=modifiers.image_hidden(active, status),
        image_rotated=modifiers.image_rotated(active, status),
        image_path=f'images/suburbs/{round_.target.code.lower()}/vector.svg',
        rotation_angle=rotation.angle,
        image_scale=rotation.scale,
        best_percent=geography.best_guess_percent(round_.guesses),
        can_shift_back=settings.shift_day_count > 0,
        can_shift_forward=settings.shift_day_count < days.MAX_SHIFT_DAY_COUNT,
    )
    if status != RoundStatus.IN_PROGRESS:
        name = display_name(settings.language, round_.target)
        view.share_text = share_text(round_, settings)
        view.target_name = name
        view.google_maps_url = google_maps_url(name, settings.language)
        view.wikipedia_url = wikipedia_url(name, settings.language)
    return view


def google_maps_url(suburb_name: str, language: str) -> str:
    """Google Maps search for a Victorian suburb."""
    query = urllib.parse.urlencode({'q': f'{suburb_name}, VIC', 'hl': language})
    return f'https://www.google.com/maps?{query}'


def wikipedia_url(suburb_name: str, language: str) -> str:
    """Wikipedia article for a Victorian suburb."""
    title = urllib.parse.quote(f'{suburb_name}, Victoria'.replace(' ', '_'), safe=',')
    return f'https://{language}.wikipedia.org/wiki/{title}'


def suburb_names(
    catalog: Catalog | None = None,
    language: str = 'en',
    display_name: DisplayNameResolver = get_suburb_name,
) -> list[str]:
    """Sorted display names of every guessable suburb."""
    return _catalog_or_default(catalog).display_names(language, display_name)
