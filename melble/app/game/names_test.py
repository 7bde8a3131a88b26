"""Unit tests for suburb name canonicalization."""

import unittest

from melble.app.game import names


class TestSanitizeName(unittest.TestCase):
    """Tests for sanitize_name."""

    def test_lower_cases(self) -> None:
        """Case is ignored."""
        self.assertEqual(names.sanitize_name('CARLTON'), 'carlton')

    def test_strips_separators(self) -> None:
        """Spaces, hyphens, apostrophes and parentheses are dropped."""
        self.assertEqual(names.sanitize_name('St Kilda'), 'stkilda')
        self.assertEqual(names.sanitize_name("st-kilda"), 'stkilda')
        self.assertEqual(names.sanitize_name("O'Halloran (Hill)"), 'ohalloranhill')

    def test_strips_diacritics(self) -> None:
        """Accented letters compare equal to their base letters."""
        self.assertEqual(names.sanitize_name('Prâhrän'), 'prahran')
        self.assertEqual(names.sanitize_name('Élwood'), 'elwood')

    def test_strips_whole_diacritical_block(self) -> None:
        """Every mark in U+0300..U+036F goes, including zero-class ones."""
        self.assertEqual(names.sanitize_name('Kew\u034f'), 'kew')
        self.assertEqual(names.sanitize_name('Ke\u0301w\u036f'), 'kew')

    def test_keeps_other_punctuation(self) -> None:
        """Only the listed separators are removed."""
        self.assertEqual(names.sanitize_name('St. Kilda'), 'st.kilda')

    def test_idempotent(self) -> None:
        """Sanitizing twice gives the same result as sanitizing once."""
        samples = [
            '',
            'Moonee Ponds',
            "  Box-Hill (North) ",
            'Ñüñez',
            'İstanbul',
            'straße',
            'ǅemal',
            'ﬁtzroy',
        ]
        for sample in samples:
            once = names.sanitize_name(sample)
            self.assertEqual(names.sanitize_name(once), once, sample)


if __name__ == '__main__':
    unittest.main()
