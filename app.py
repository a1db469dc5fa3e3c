from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import Optional

import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from citation_coverage.app import CoverageCheckerApp  # noqa: E402
from citation_coverage.errors import CitationCoverageError, InputReadError  # noqa: E402
from citation_coverage.parsers import DocumentParser  # noqa: E402
from citation_coverage.report import coverage_table  # noqa: E402


def _read_upload(upload) -> Optional[str]:
    if upload is None:
        return None
    try:
        return upload.getvalue().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputReadError(upload.name, f"not valid UTF-8 ({exc.reason})") from exc


def _document_text(upload, pasted: str) -> str:
    if upload is None:
        return pasted
    suffix = Path(upload.name).suffix.lower()
    if suffix in {".docx", ".pdf"}:
        # the DOCX/PDF readers work on paths
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir) / upload.name
            tmp_path.write_bytes(upload.getvalue())
            return DocumentParser().load_text(tmp_path)
    return _read_upload(upload) or ""


def main() -> None:
    st.set_page_config(page_title="Citation Coverage Checker", layout="wide")
    st.title("Citation Coverage Checker")
    st.caption(
        "Upload a CSL-JSON bibliography export and a manuscript to list entries that are never cited."
    )

    left, right = st.columns(2)
    with left:
        bib_upload = st.file_uploader("Bibliography export (JSON)", type=["json"])
        bib_pasted = st.text_area("...or paste the export", height=200)
    with right:
        doc_upload = st.file_uploader("Document", type=["md", "txt", "docx", "pdf"])
        doc_pasted = st.text_area("...or paste the document", height=200)

    marker = st.text_input(
        "Citation marker",
        value="",
        help="Only count keys preceded by this marker, e.g. '@' for Pandoc Markdown.",
    )
    strict = st.checkbox("Stop on bibliography entries without a valid key", value=False)

    if not st.button("Check coverage"):
        return

    checker = CoverageCheckerApp(strict=strict, marker=marker or None)
    try:
        bibliography = _read_upload(bib_upload) or bib_pasted
        if not bibliography.strip():
            st.warning("Provide a bibliography export first.")
            return
        document = _document_text(doc_upload, doc_pasted)
        report = checker.check_text(document, bibliography)
    except CitationCoverageError as exc:
        st.error(str(exc))
        return

    result = report.result
    cols = st.columns(4)
    cols[0].metric("Bibliography entries", result.bibliography_keys)
    cols[1].metric("Cited keys", result.document_keys)
    cols[2].metric("Uncited", len(result.uncited))
    cols[3].metric("Unknown", len(result.unknown))

    for issue in report.issues:
        st.warning(f"{issue.message}: {issue.context}" if issue.context else issue.message)

    if result.is_complete and not result.unknown:
        st.success("All sources cited.")
        return

    st.dataframe(coverage_table(result), use_container_width=True, hide_index=True)
    if result.uncited:
        st.download_button(
            "Download uncited keys",
            data="\n".join(result.uncited) + "\n",
            file_name="uncited.txt",
            mime="text/plain",
        )


if __name__ == "__main__":
    main()
