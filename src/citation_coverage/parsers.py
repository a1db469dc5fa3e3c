"""Readers turning input files into text for the coverage checker."""
from __future__ import annotations

import re
import sys
import zipfile
from pathlib import Path
from typing import List

from xml.etree import ElementTree

import yaml

from .errors import InputReadError, ParseError

STDIN_PATH = "-"


def read_text_file(file_path: str | Path) -> str:
    """Read a UTF-8 text file, or standard input when given ``-``."""
    if str(file_path) == STDIN_PATH:
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError("<stdin>", str(exc)) from exc
    path = Path(file_path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc


class DocumentParser:
    """Loads manuscript text and reads bibliography hints from its front matter."""

    FRONT_MATTER = re.compile(
        r"\A\ufeff?---[ \t]*\r?\n(?P<body>.*?)\r?\n(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
        re.DOTALL,
    )

    def load_docx_text(self, file_path: str | Path) -> str:
        """Read a DOCX file and return its text content with paragraph spacing."""

        doc_path = Path(file_path)
        try:
            with zipfile.ZipFile(doc_path) as archive:
                xml = archive.read("word/document.xml")
            tree = ElementTree.fromstring(xml)
        except (OSError, KeyError, zipfile.BadZipFile, ElementTree.ParseError) as exc:
            raise InputReadError(doc_path, f"not a readable DOCX file ({exc})") from exc
        namespace = {"w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"}
        paragraphs = []
        for para in tree.findall(".//w:p", namespace):
            texts = [node.text for node in para.findall(".//w:t", namespace) if node.text]
            paragraphs.append("".join(texts))
        return "\n".join(paragraphs)

    def load_pdf_text(self, file_path: str | Path) -> str:
        """Read a PDF file and return its extracted text."""
        try:
            from pypdf import PdfReader
            from pypdf.errors import PyPdfError
        except ImportError as exc:
            raise InputReadError(
                file_path, "PDF support requires the 'pypdf' package"
            ) from exc

        pdf_path = Path(file_path)
        try:
            reader = PdfReader(str(pdf_path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except (OSError, ValueError, KeyError, PyPdfError) as exc:
            raise InputReadError(pdf_path, f"not a readable PDF file ({exc})") from exc
        return "\n".join(page for page in pages if page)

    def load_text(self, file_path: str | Path) -> str:
        """Load text from supported document formats."""
        if str(file_path) == STDIN_PATH:
            return read_text_file(file_path)
        path = Path(file_path)
        suffix = path.suffix.lower()
        if suffix == ".docx":
            return self.load_docx_text(path)
        if suffix == ".pdf":
            return self.load_pdf_text(path)
        return read_text_file(path)

    def bibliography_paths(self, text: str) -> List[str]:
        """Return the ``bibliography`` entries declared in YAML front matter."""
        match = self.FRONT_MATTER.match(text)
        if not match:
            return []
        # YAML rejects tab indentation
        body = match.group("body").replace("\t", "  ")
        try:
            metadata = yaml.safe_load(body)
        except yaml.YAMLError as exc:
            raise ParseError("front-matter", f"invalid YAML: {exc}") from exc
        if not isinstance(metadata, dict):
            return []
        value = metadata.get("bibliography")
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise ParseError(
            "front-matter", "'bibliography' must be a path or a list of paths"
        )
