import json
import sys
import zipfile
from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


SAMPLE_ENTRIES = [
    {
        "id": ".2024",
        "citation-key": ".2024",
        "container-title": "JuristenZeitung",
        "DOI": "10.1628/jz-2024-0306",
        "title": "Potenzial und Grenzen eines Einsatzes von Large Language Models in der öffentlichen Verwaltung",
        "type": "article-journal",
    },
    {
        "id": "AGGelnhausen.2024",
        "authority": "AG Gelnhausen",
        "citation-key": "AGGelnhausen.2024",
        "number": "52 C 76/24",
        "title": "AG Gelnhausen, 04.03.2024 - 52 C 76/24",
        "type": "legal_case",
    },
    {
        "id": "Alexander.2024",
        "author": [{"family": "Alexander", "given": ""}],
        "citation-key": "Alexander.2024",
        "title": "§ 2 GeschGehG",
        "type": "entry-encyclopedia",
    },
    {
        "id": "Alexander.2024a",
        "author": [{"family": "Alexander", "given": ""}],
        "citation-key": "Alexander.2024a",
        "title": "§ 6 GeschGehG",
        "type": "entry-encyclopedia",
    },
    {
        "id": "BGH.2024",
        "authority": "BGH",
        "citation-key": "BGH.2024",
        "type": "legal_case",
    },
]

SAMPLE_MARKDOWN = """Gemeinsame Voraussetzung beider Schranken ist zunächst, dass der
Zugang zu den Daten rechtmäßig erfolgt.[@Bomhard.2024b Rn. 15] Dieser
kann etwa auf einer dahingegenden Lizenz beruhen. Eine solche kann sich
(konkludent) durch öffentliche Zugänglichmachung im Internet ergeben.[@BGH.2024 Rn. 45--47;
@BGH.2010c Rn. 36; so auch @LGHamburg.2024 Rn. 86] Das wird meist der
Fall sein. @Alexander.2024; @Alexander.2024a
"""


def build_minimal_docx(paragraphs) -> bytes:
    """Create a DOCX archive holding only the given paragraphs."""

    body = "".join(
        "<w:p><w:r><w:t>{}</w:t></w:r></w:p>".format(escape(para)) for para in paragraphs
    )
    document_xml = (
        "<?xml version=\"1.0\" encoding=\"UTF-8\" standalone=\"yes\"?>"
        "<w:document xmlns:w=\"http://schemas.openxmlformats.org/wordprocessingml/2006/main\">"
        f"<w:body>{body}</w:body></w:document>"
    )
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, mode="w") as archive:
        archive.writestr("word/document.xml", document_xml)
    return buffer.getvalue()


@pytest.fixture()
def sample_bibliography_json() -> str:
    return json.dumps(SAMPLE_ENTRIES, ensure_ascii=False, indent=2)


@pytest.fixture()
def sample_markdown() -> str:
    return SAMPLE_MARKDOWN


@pytest.fixture()
def sample_files(tmp_path: Path, sample_bibliography_json: str, sample_markdown: str):
    """Write the sample export and manuscript to disk; return (document, bibliography)."""

    bib_path = tmp_path / "library.json"
    bib_path.write_text(sample_bibliography_json, encoding="utf-8")
    doc_path = tmp_path / "paper.md"
    doc_path.write_text(sample_markdown, encoding="utf-8")
    return doc_path, bib_path


@pytest.fixture()
def sample_docx_path(tmp_path: Path) -> Path:
    paragraphs = [
        "Dummy Manuscript for Coverage Checker",
        "The first claim follows Smith.2020 and the second one Jones.2021a.",
        "A later paragraph repeats Smith.2020 once more.",
    ]
    docx_path = tmp_path / "sample_manuscript.docx"
    docx_path.write_bytes(build_minimal_docx(paragraphs))
    return docx_path
