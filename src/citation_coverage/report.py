"""Coverage reporting utilities."""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .models import CoverageReport, CoverageResult, ValidationIssue

TABLE_COLUMNS = ["Key", "Status"]


def render_report(report: CoverageReport, show_unknown: bool = True) -> str:
    """Return a human-readable report summarizing coverage findings."""

    result = report.result
    lines = ["Citation Coverage Report"]
    if report.document_path:
        lines.append(f"Document: {report.document_path}")
    for path in report.bibliography_paths:
        lines.append(f"Bibliography: {path}")
    lines.append(f"Bibliography entries: {result.bibliography_keys}")
    lines.append(f"Citation keys in document: {result.document_keys}")

    if result.is_complete:
        lines.append("All sources cited.")
    else:
        noun = "source" if len(result.uncited) == 1 else "sources"
        lines.append(f"{len(result.uncited)} {noun} not cited:")
        lines.extend(f"  {key}" for key in result.uncited)

    if show_unknown and result.unknown:
        lines.append(f"Unknown citations ({len(result.unknown)}):")
        lines.extend(f"  {key}" for key in result.unknown)

    if report.issues:
        lines.append("Warnings:")
        lines.extend(_format_issue(issue) for issue in report.issues)
    return "\n".join(lines)


def _format_issue(issue: ValidationIssue) -> str:
    line = f"[{issue.severity.upper()}] {issue.code}: {issue.message}"
    if issue.context:
        line += f" -> {issue.context}"
    return line


def _serialize_issues(issues: List[ValidationIssue]) -> List[Dict[str, Any]]:
    return [
        {
            "code": issue.code,
            "message": issue.message,
            "context": issue.context,
            "severity": issue.severity,
        }
        for issue in issues
    ]


def build_result(report: CoverageReport) -> Dict[str, Any]:
    """Return a JSON-serializable view of a coverage run."""

    result = report.result
    return {
        "document": report.document_path,
        "bibliographies": list(report.bibliography_paths),
        "bibliography_keys": result.bibliography_keys,
        "document_keys": result.document_keys,
        "complete": result.is_complete,
        "uncited": list(result.uncited),
        "unknown": list(result.unknown),
        "citation_counts": dict(sorted(report.scan.counts().items())),
        "issues": _serialize_issues(report.issues),
    }


def coverage_table(result: CoverageResult) -> pd.DataFrame:
    """Tabulate uncited and unknown keys, uncited first."""

    rows = [{"Key": key, "Status": "uncited"} for key in result.uncited]
    rows.extend({"Key": key, "Status": "unknown"} for key in result.unknown)
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
