"""High-level orchestrator for citation coverage checks."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from .bibliography import DEFAULT_KEY_FIELD, BibliographyLoader
from .errors import BibliographyNotFoundError
from .matcher import CoverageDiffer
from .models import BibliographyLoad, CoverageReport, ValidationIssue
from .parsers import STDIN_PATH, DocumentParser, read_text_file
from .report import render_report
from .scanner import CitationScanner

logger = logging.getLogger(__name__)


class CoverageCheckerApp:
    """Coordinates loading, scanning, and diffing for one coverage run."""

    def __init__(
        self,
        key_field: str = DEFAULT_KEY_FIELD,
        strict: bool = False,
        marker: str | None = None,
    ):
        self.parser = DocumentParser()
        self.loader = BibliographyLoader(key_field=key_field, strict=strict)
        self.scanner = CitationScanner(marker=marker)
        self.differ = CoverageDiffer()

    def load_bibliographies(self, texts: Iterable[str]) -> BibliographyLoad:
        """Load several exports and merge them into one key projection."""

        merged = BibliographyLoad()
        seen = set()
        for text in texts:
            loaded = self.loader.load(text)
            merged.issues.extend(loaded.issues)
            for entry in loaded.entries:
                if entry.citation_key in seen:
                    merged.issues.append(
                        ValidationIssue(
                            code="duplicate-entry",
                            message="Citation key present in more than one bibliography",
                            context=entry.citation_key,
                        )
                    )
                    continue
                seen.add(entry.citation_key)
                merged.entries.append(entry)
        return merged

    def check_text(
        self, document_text: str, bibliography_texts: str | Sequence[str]
    ) -> CoverageReport:
        if isinstance(bibliography_texts, str):
            bibliography_texts = [bibliography_texts]
        bibliography = self.load_bibliographies(bibliography_texts)
        scan = self.scanner.scan(document_text)
        result = self.differ.diff(bibliography.keys, scan.keys)
        logger.info(
            "%d bibliography keys, %d cited keys, %d uncited, %d unknown",
            result.bibliography_keys,
            result.document_keys,
            len(result.uncited),
            len(result.unknown),
        )
        return CoverageReport(result=result, scan=scan, issues=bibliography.issues)

    def resolve_bibliography_paths(self, document_path: str | Path, document_text: str) -> List[Path]:
        """Find the bibliographies named in the document's front matter."""

        declared = self.parser.bibliography_paths(document_text)
        if not declared:
            raise BibliographyNotFoundError(
                document_path,
                "no bibliography given and none declared in the document front matter",
            )
        if str(document_path) == STDIN_PATH:
            base = Path.cwd()
        else:
            base = Path(document_path).parent
        resolved = [base / Path(path).expanduser() for path in declared]
        logger.info("Using bibliography from front matter: %s", ", ".join(map(str, resolved)))
        return resolved

    def check_files(
        self,
        document_path: str | Path,
        bibliography_paths: Sequence[str | Path] | None = None,
    ) -> CoverageReport:
        """Read a document and its bibliographies from disk and check coverage."""

        document_text = self.parser.load_text(document_path)
        if bibliography_paths:
            paths = [Path(p) for p in bibliography_paths]
        else:
            paths = self.resolve_bibliography_paths(document_path, document_text)
        bibliography_texts = [read_text_file(path) for path in paths]
        report = self.check_text(document_text, bibliography_texts)
        report.document_path = str(document_path)
        report.bibliography_paths = [str(path) for path in paths]
        return report

    def user_report(
        self,
        document_path: str | Path,
        bibliography_paths: Sequence[str | Path] | None = None,
    ) -> str:
        return render_report(self.check_files(document_path, bibliography_paths))
