"""Citation key grammar shared by the bibliography loader and the scanner."""
from __future__ import annotations

import re

# word characters, a period, a four digit year and one optional suffix character
CITATION_KEY_PATTERN = r"\w+\.\d{4}\w?"

CITATION_KEY_RE = re.compile(CITATION_KEY_PATTERN)


def is_citation_key(value: object) -> bool:
    """Return True when ``value`` is a string matching the key grammar exactly."""
    return isinstance(value, str) and CITATION_KEY_RE.fullmatch(value) is not None


def citation_pattern(marker: str | None = None) -> re.Pattern[str]:
    """Compile the search pattern used to find keys in free text.

    A match may not be followed by another word character, so ``Doe.2020ab``
    yields nothing rather than a truncated ``Doe.2020a``. With ``marker`` set
    (``"@"`` for Pandoc Markdown) only keys directly preceded by it count.
    """
    prefix = re.escape(marker) if marker else ""
    return re.compile(rf"{prefix}(?P<key>{CITATION_KEY_PATTERN})(?!\w)")
