"""HTTP routes for the daily Melble puzzle.

Registers:

* ``GET  /melble``                      : game page
* ``POST /melble/guess``                : form guess, redirects back to the page
* ``POST /melble/modifiers/{modifier}`` : form toggle of a per-day modifier
* ``GET  /api/melble/round``            : current round as JSON
* ``POST /api/melble/guesses``          : submit a guess
* ``PUT  /api/melble/modifiers``        : set or clear per-day modifiers
* ``GET  /api/melble/share``            : share text of a finished round
* ``GET  /api/melble/suburbs``          : every guessable suburb name

Player settings travel as query parameters on every route (``shift``,
``theme``, ``no_image_mode``, ``rotation_mode``, ``language``).
"""

from __future__ import annotations

import contextlib
import logging
import pathlib
import urllib.parse
from collections.abc import Iterator

import fastapi
import fastapi.responses
import pydantic
from sqlmodel import Session

import common.app

from ..game import errors, rounds, services
from ..game.database import get_session
from ..game.models.round import Language, PlayerSettings, RoundStatus, Theme
from ..game.modifiers import Modifier

logger = logging.getLogger(__name__)

_APP_DIR = pathlib.Path(__file__).resolve().parent.parent
_STATIC_DIR = _APP_DIR / 'static'
templates = common.app.make_templates(
    _APP_DIR / 'templates', max_try_count=rounds.MAX_TRY_COUNT
)

router = fastapi.APIRouter()


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class GuessRequest(pydantic.BaseModel):
    """Body of POST /api/melble/guesses."""

    guess: str


class GuessResponse(pydantic.BaseModel):
    """Returned by POST /api/melble/guesses for an accepted guess."""

    guess: services.GuessRow
    status: RoundStatus
    round: services.RoundView


class ModifierUpdate(pydantic.BaseModel):
    """Body of PUT /api/melble/modifiers.

    Only the fields present are changed; an explicit ``null`` clears the
    day's override so the global setting applies again.
    """

    hide_image: bool | None = None
    rotate: bool | None = None


class ShareResponse(pydantic.BaseModel):
    """Returned by GET /api/melble/share."""

    text: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def get_player_settings(
    shift: int = 0,
    theme: Theme = 'light',
    no_image_mode: bool = False,
    rotation_mode: bool = False,
    language: Language = 'en',
) -> PlayerSettings:
    """Build :class:`PlayerSettings` from query parameters."""
    return PlayerSettings(
        shift_day_count=shift,
        theme=theme,
        no_image_mode=no_image_mode,
        rotation_mode=rotation_mode,
        language=language,
    )


@contextlib.contextmanager
def _surface_missing_target() -> Iterator[None]:
    """Turn a missing daily target into a 503 instead of a server error."""
    try:
        yield
    except errors.MissingTargetForDayError as exc:
        logger.error('[%s] %s', exc.day_key, exc)
        raise fastapi.HTTPException(status_code=503, detail=str(exc)) from exc


def _settings_query(settings: PlayerSettings, **extra: str) -> str:
    params = {
        'shift': str(settings.shift_day_count),
        'theme': settings.theme,
        'no_image_mode': str(settings.no_image_mode).lower(),
        'rotation_mode': str(settings.rotation_mode).lower(),
        'language': settings.language,
        **extra,
    }
    return urllib.parse.urlencode(params)


def _redirect_to_game(
    settings: PlayerSettings, **extra: str
) -> fastapi.responses.RedirectResponse:
    return fastapi.responses.RedirectResponse(
        url=f'/melble?{_settings_query(settings, **extra)}', status_code=303
    )


# ---------------------------------------------------------------------------
# HTML endpoints
# ---------------------------------------------------------------------------


@router.get('/melble', response_class=fastapi.responses.HTMLResponse)
async def melble_page(
    request: fastapi.Request,
    error: str | None = None,
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> fastapi.responses.HTMLResponse:
    """Render the game page for the current day."""
    with _surface_missing_target():
        round_ = services.get_round(session, settings)
    view = services.build_round_view(round_, settings)
    shift = settings.shift_day_count
    shifted = {
        'back': _settings_query(settings, shift=str(shift - 1)),
        'forward': _settings_query(settings, shift=str(shift + 1)),
    }
    return templates.TemplateResponse(
        request=request,
        name='melble.html.jinja2',
        context={
            'view': view,
            'settings': settings,
            'settings_query': _settings_query(settings),
            'shifted': shifted,
            'image_available': (_STATIC_DIR / view.image_path).is_file(),
            'error': error,
            'suburbs': services.suburb_names(language=settings.language),
        },
    )


@router.post('/melble/guess')
async def melble_form_guess(
    guess: str = fastapi.Form(''),
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> fastapi.responses.RedirectResponse:
    """Submit a guess from the page form and redirect back to the page."""
    with _surface_missing_target():
        result = services.play_guess(session, settings, guess)
    if result.error is not None:
        return _redirect_to_game(settings, error=result.error.value)
    return _redirect_to_game(settings)


@router.post('/melble/modifiers/{modifier}')
async def melble_form_modifier(
    modifier: Modifier,
    value: bool = fastapi.Form(...),
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> fastapi.responses.RedirectResponse:
    """Override one difficulty modifier for today from the page."""
    with _surface_missing_target():
        services.update_modifier(session, settings, modifier, value)
    return _redirect_to_game(settings)


# ---------------------------------------------------------------------------
# JSON API
# ---------------------------------------------------------------------------


@router.get('/api/melble/round', response_model=services.RoundView)
async def get_round(
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> services.RoundView:
    """Return the round for the current day."""
    with _surface_missing_target():
        round_ = services.get_round(session, settings)
    return services.build_round_view(round_, settings)


@router.post('/api/melble/guesses', response_model=GuessResponse)
async def submit_guess(
    body: GuessRequest,
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> GuessResponse:
    """Score a guess against today's suburb.

    Returns 422 for an unknown suburb and 409 once the round is over; neither
    changes the stored round.
    """
    with _surface_missing_target():
        result = services.play_guess(session, settings, body.guess)
    if result.error == rounds.GuessError.UNKNOWN_LOCATION:
        raise fastapi.HTTPException(status_code=422, detail=result.error_message)
    if result.error == rounds.GuessError.ROUND_OVER:
        raise fastapi.HTTPException(status_code=409, detail=result.error_message)

    view = services.build_round_view(result.updated_round, settings)
    return GuessResponse(guess=view.guesses[-1], status=result.status, round=view)


@router.put('/api/melble/modifiers', response_model=services.RoundView)
async def update_modifiers(
    body: ModifierUpdate,
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> services.RoundView:
    """Set or clear today's difficulty modifier overrides."""
    with _surface_missing_target():
        round_ = services.get_round(session, settings)
        for field in sorted(body.model_fields_set):
            round_ = services.update_modifier(
                session, settings, Modifier(field), getattr(body, field)
            )
    return services.build_round_view(round_, settings)


@router.get('/api/melble/share', response_model=ShareResponse)
async def get_share_text(
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
    session: Session = fastapi.Depends(get_session),
) -> ShareResponse:
    """Return the share text once the round is over."""
    with _surface_missing_target():
        round_ = services.get_round(session, settings)
    if not rounds.is_over(round_):
        raise fastapi.HTTPException(
            status_code=409, detail='The round is still in progress'
        )
    return ShareResponse(text=services.share_text(round_, settings))


@router.get('/api/melble/suburbs', response_model=list[str])
async def list_suburbs(
    settings: PlayerSettings = fastapi.Depends(get_player_settings),
) -> list[str]:
    """Return every guessable suburb name, sorted."""
    return services.suburb_names(language=settings.language)
