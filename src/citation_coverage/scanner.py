"""Utilities for detecting citation keys in document text."""
from __future__ import annotations

from typing import FrozenSet, List

from .keys import citation_pattern
from .models import Citation, DocumentScan


class CitationScanner:
    """Find every citation key in raw text, ignoring markup."""

    def __init__(self, marker: str | None = None):
        self.marker = marker or None
        self.pattern = citation_pattern(self.marker)

    def scan(self, text: str) -> DocumentScan:
        citations: List[Citation] = [
            Citation(
                key=match.group("key"),
                position=match.start("key"),
                raw_text=match.group(0),
            )
            for match in self.pattern.finditer(text)
        ]
        return DocumentScan(citations=citations)


def scan_citation_keys(text: str, marker: str | None = None) -> FrozenSet[str]:
    """Return the distinct citation keys occurring in ``text``."""
    return CitationScanner(marker=marker).scan(text).keys
