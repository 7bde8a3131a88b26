"""Shareable emoji summary of a round.

Example for a round won on the third guess::

    #melble #214 3/6 (100%) 🌀
    🟩🟩⬜⬜⬜↗️
    🟩🟩🟩🟩🟨⬅️
    🟩🟩🟩🟩🟩🎉
    https://melble.azzola.dev
"""

from __future__ import annotations

import common.settings

from . import days, geography, rounds
from .models.round import Round, RoundStatus, Theme

SHARE_TAG = '#melble'
UNSOLVED_PLACEHOLDER = 'X'
HIDE_IMAGE_EMOJI = '🙈'
ROTATION_EMOJI = '🌀'


def build_title(round_: Round, hide_image_mode: bool, rotation_mode: bool) -> str:
    """First line of the share text."""
    won = rounds.evaluate(round_) == RoundStatus.WON
    guess_count = str(len(round_.guesses)) if won else UNSOLVED_PLACEHOLDER
    best_percent = geography.best_guess_percent(round_.guesses)
    title = (
        f'{SHARE_TAG} #{days.puzzle_number(round_.day_key)} '
        f'{guess_count}/{rounds.MAX_TRY_COUNT} ({best_percent}%)'
    )
    if hide_image_mode:
        title += f' {HIDE_IMAGE_EMOJI}'
    elif rotation_mode:
        title += f' {ROTATION_EMOJI}'
    return title


def build_guess_lines(round_: Round, theme: Theme) -> list[str]:
    """One line of squares plus arrow per guess, in submission order."""
    lines: list[str] = []
    for guess in round_.guesses:
        percent = geography.compute_proximity_percent(guess.distance_meters)
        squares = ''.join(geography.generate_square_characters(percent, theme))
        lines.append(squares + geography.get_direction_emoji(guess))
    return lines


def build_share_text(
    round_: Round, theme: Theme, hide_image_mode: bool, rotation_mode: bool
) -> str:
    """Title, guess lines and site link joined by newlines."""
    return '\n'.join(
        [
            build_title(round_, hide_image_mode, rotation_mode),
            *build_guess_lines(round_, theme),
            common.settings.SITE_URL,
        ]
    )
