"""Logic for comparing bibliography keys with cited keys."""
from __future__ import annotations

from typing import Iterable

from .models import CoverageResult


class CoverageDiffer:
    """Compute uncited bibliography entries and unknown citations."""

    def diff(self, bibliography_keys: Iterable[str], document_keys: Iterable[str]) -> CoverageResult:
        bibliography = set(bibliography_keys)
        cited = set(document_keys)
        return CoverageResult(
            uncited=sorted(bibliography - cited),
            unknown=sorted(cited - bibliography),
            bibliography_keys=len(bibliography),
            document_keys=len(cited),
        )


def compute_coverage(
    bibliography_keys: Iterable[str], document_keys: Iterable[str]
) -> CoverageResult:
    return CoverageDiffer().diff(bibliography_keys, document_keys)
