"""Name canonicalization for matching typed guesses against the catalog."""

from __future__ import annotations

import re
import unicodedata

_IGNORED_CHARACTERS = re.compile(r"[- '()]")
# Combining Diacritical Marks block.
_DIACRITICS = re.compile('[\u0300-\u036f]')


def sanitize_name(name: str) -> str:
    """Return the canonical form of *name* used for equality comparison.

    Lower-cases, strips combining diacritical marks (U+0300 to U+036F) and
    drops spaces, hyphens, apostrophes and parentheses, so ``"St Kilda"``, ``"st-kilda"`` and ``"STKILDA"`` all compare
    equal.  Display text never uses this form.
    """
    decomposed = unicodedata.normalize('NFD', name.lower())
    stripped = _DIACRITICS.sub('', decomposed)
    return _IGNORED_CHARACTERS.sub('', stripped)
