"""Loading citation keys from CSL-JSON bibliography exports."""
from __future__ import annotations

import json
import logging
from typing import Any, FrozenSet, Set

from .errors import MalformedEntryError, ParseError
from .keys import is_citation_key
from .models import BibliographyEntry, BibliographyLoad, ValidationIssue

logger = logging.getLogger(__name__)

DEFAULT_KEY_FIELD = "citation-key"


class BibliographyLoader:
    """Project a JSON array of bibliography records onto their citation keys.

    Records without a valid key are skipped with a ``malformed-entry`` warning
    unless ``strict`` is set, in which case the first one raises
    :class:`MalformedEntryError`.
    """

    def __init__(self, key_field: str = DEFAULT_KEY_FIELD, strict: bool = False):
        self.key_field = key_field
        self.strict = strict

    def load(self, text: str) -> BibliographyLoad:
        records = self._parse(text)
        loaded = BibliographyLoad()
        seen: Set[str] = set()
        for index, record in enumerate(records):
            try:
                key = self._entry_key(index, record)
            except MalformedEntryError as exc:
                if self.strict:
                    raise
                logger.warning("Skipping bibliography %s", exc)
                loaded.issues.append(
                    ValidationIssue(
                        code="malformed-entry",
                        message=f"Skipped bibliography entry {index}: {exc.reason}",
                        context=_describe(record),
                    )
                )
                continue
            if key in seen:
                logger.warning("Duplicate citation key %s at entry %d", key, index)
                loaded.issues.append(
                    ValidationIssue(
                        code="duplicate-entry",
                        message=f"Citation key repeated at bibliography entry {index}",
                        context=key,
                    )
                )
                continue
            seen.add(key)
            loaded.entries.append(BibliographyEntry(citation_key=key, index=index))
        logger.debug(
            "Loaded %d citation keys from %d records", len(loaded.entries), len(records)
        )
        return loaded

    @staticmethod
    def _parse(text: str) -> list:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(
                "bibliography",
                f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
            ) from exc
        except RecursionError as exc:
            raise ParseError("bibliography", "JSON nested too deeply") from exc
        if not isinstance(data, list):
            raise ParseError(
                "bibliography",
                f"expected a JSON array of entries, got {type(data).__name__}",
            )
        return data

    def _entry_key(self, index: int, record: Any) -> str:
        if not isinstance(record, dict):
            raise MalformedEntryError(
                index, f"expected an object, got {type(record).__name__}", record
            )
        if self.key_field not in record:
            raise MalformedEntryError(index, f"missing '{self.key_field}' field", record)
        key = record[self.key_field]
        if not is_citation_key(key):
            raise MalformedEntryError(index, f"invalid citation key {key!r}", record)
        return key


def _describe(record: Any) -> str:
    if isinstance(record, dict):
        return json.dumps(record, ensure_ascii=False, sort_keys=True)[:200]
    return repr(record)[:200]


def load_bibliography_keys(
    text: str, key_field: str = DEFAULT_KEY_FIELD, strict: bool = False
) -> FrozenSet[str]:
    """Return the set of valid citation keys in a bibliography export."""
    return BibliographyLoader(key_field=key_field, strict=strict).load(text).keys
