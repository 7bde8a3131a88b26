"""Unit tests for round and settings models."""

import unittest

import pydantic

from melble.app.game import testing
from melble.app.game.models.location import Direction, Location
from melble.app.game.models.round import (
    Guess,
    ModifierOverrides,
    PlayerSettings,
    Round,
    StoredRound,
)


class TestGuess(unittest.TestCase):
    """Tests for the Guess model."""

    def test_accepts_camel_case_and_snake_case(self) -> None:
        camel = Guess.model_validate(
            {'rawText': 'Kew', 'distanceMeters': 10, 'direction': 'SW'}
        )
        snake = Guess(raw_text='Kew', distance_meters=10, direction=Direction.SW)
        self.assertEqual(camel, snake)

    def test_negative_distance_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            Guess(raw_text='Kew', distance_meters=-1, direction=Direction.N)

    def test_unknown_direction_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            Guess.model_validate(
                {'rawText': 'Kew', 'distanceMeters': 10, 'direction': 'UP'}
            )

    def test_frozen(self) -> None:
        guess = Guess(raw_text='Kew', distance_meters=10, direction=Direction.N)
        with self.assertRaises(pydantic.ValidationError):
            guess.distance_meters = 0  # type: ignore[misc]


class TestRound(unittest.TestCase):
    """Tests for StoredRound and Round."""

    def test_defaults(self) -> None:
        round_ = Round(day_key='2024-01-01', target=testing.CARLTON)
        self.assertEqual(round_.guesses, [])
        self.assertEqual(round_.modifiers, ModifierOverrides())

    def test_stored_round_json_round_trip(self) -> None:
        stored = StoredRound(
            day_key='2024-01-01',
            modifiers=ModifierOverrides(hide_image=True),
        )
        payload = stored.model_dump_json(by_alias=True)
        self.assertIn('"hideImage":true', payload)
        self.assertEqual(StoredRound.model_validate_json(payload), stored)


class TestLocation(unittest.TestCase):
    """Tests for the Location model."""

    def test_point(self) -> None:
        self.assertEqual(testing.MELBOURNE.point, (-37.8136, 144.9631))

    def test_latitude_range(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            Location(code='x', name='X', latitude=91, longitude=0)

    def test_sixteen_directions_clockwise(self) -> None:
        labels = [d.value for d in Direction]
        self.assertEqual(len(labels), 16)
        self.assertEqual(labels[:5], ['N', 'NNE', 'NE', 'ENE', 'E'])
        self.assertEqual(labels[-1], 'NNW')


class TestPlayerSettings(unittest.TestCase):
    """Tests for PlayerSettings."""

    def test_defaults(self) -> None:
        settings = PlayerSettings()
        self.assertEqual(settings.shift_day_count, 0)
        self.assertEqual(settings.theme, 'light')
        self.assertFalse(settings.no_image_mode)
        self.assertFalse(settings.rotation_mode)

    def test_shift_clamped(self) -> None:
        self.assertEqual(PlayerSettings(shift_day_count=-3).shift_day_count, 0)
        self.assertEqual(PlayerSettings(shift_day_count=12).shift_day_count, 7)

    def test_language_must_be_supported(self) -> None:
        self.assertEqual(PlayerSettings(language='fr').language, 'fr')
        for language in ('evil.example/x?', 'xx', 'EN'):
            with self.assertRaises(pydantic.ValidationError):
                PlayerSettings(language=language)  # type: ignore[arg-type]

    def test_unknown_theme_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            PlayerSettings(theme='sepia')  # type: ignore[arg-type]


if __name__ == '__main__':
    unittest.main()
