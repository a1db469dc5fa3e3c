"""Exceptions raised while loading coverage inputs."""
from __future__ import annotations

from pathlib import Path
from typing import Any


class CitationCoverageError(Exception):
    """Base class for all coverage checker failures."""


class InputReadError(CitationCoverageError):
    """An input file could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"could not read {self.path}: {reason}")


class BibliographyNotFoundError(InputReadError):
    """No bibliography was given and the document does not declare one."""


class ParseError(CitationCoverageError):
    """Structured input is not well-formed."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        self.message = message
        super().__init__(f"{stage}: {message}")


class MalformedEntryError(CitationCoverageError):
    """A bibliography record has no usable citation key."""

    def __init__(self, index: int, reason: str, entry: Any = None):
        self.index = index
        self.reason = reason
        self.entry = entry
        super().__init__(f"entry {index}: {reason}")
