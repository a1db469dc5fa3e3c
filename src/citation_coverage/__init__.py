"""Check that every bibliography entry is cited in a document."""

from .app import CoverageCheckerApp
from .bibliography import BibliographyLoader, load_bibliography_keys
from .errors import (
    BibliographyNotFoundError,
    CitationCoverageError,
    InputReadError,
    MalformedEntryError,
    ParseError,
)
from .keys import CITATION_KEY_PATTERN, is_citation_key
from .matcher import CoverageDiffer, compute_coverage
from .models import Citation, CoverageReport, CoverageResult, DocumentScan, ValidationIssue
from .scanner import CitationScanner, scan_citation_keys

__all__ = [
    "CoverageCheckerApp",
    "BibliographyLoader",
    "load_bibliography_keys",
    "CitationScanner",
    "scan_citation_keys",
    "CoverageDiffer",
    "compute_coverage",
    "CITATION_KEY_PATTERN",
    "is_citation_key",
    "Citation",
    "CoverageReport",
    "CoverageResult",
    "DocumentScan",
    "ValidationIssue",
    "CitationCoverageError",
    "InputReadError",
    "BibliographyNotFoundError",
    "ParseError",
    "MalformedEntryError",
]
