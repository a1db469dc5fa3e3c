"""Data models for citation coverage checks."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional


@dataclass(frozen=True)
class BibliographyEntry:
    """Key-only projection of one bibliography record."""

    citation_key: str
    index: int


@dataclass(frozen=True)
class Citation:
    """Represents an in-text citation key occurrence."""

    key: str
    position: int
    raw_text: str


@dataclass
class ValidationIssue:
    """Represents a non-fatal finding."""

    code: str
    message: str
    context: Optional[str] = None
    severity: str = "warning"


@dataclass
class BibliographyLoad:
    """Entries accepted from a bibliography export and the issues met on the way."""

    entries: List[BibliographyEntry] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def keys(self) -> FrozenSet[str]:
        return frozenset(entry.citation_key for entry in self.entries)


@dataclass
class DocumentScan:
    """Citation keys found in a document, in order of appearance."""

    citations: List[Citation] = field(default_factory=list)

    @property
    def keys(self) -> FrozenSet[str]:
        return frozenset(citation.key for citation in self.citations)

    def counts(self) -> Counter:
        """Return how often each key occurs."""
        return Counter(citation.key for citation in self.citations)


@dataclass
class CoverageResult:
    """Outcome of comparing bibliography keys with document keys."""

    uncited: List[str] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    bibliography_keys: int = 0
    document_keys: int = 0

    @property
    def is_complete(self) -> bool:
        return not self.uncited


@dataclass
class CoverageReport:
    """Container for one coverage run and everything needed to present it."""

    result: CoverageResult
    scan: DocumentScan
    issues: List[ValidationIssue] = field(default_factory=list)
    document_path: Optional[str] = None
    bibliography_paths: List[str] = field(default_factory=list)
