"""FastAPI + Tailwind interface for the citation coverage checker.

Run with:
    uvicorn citation_coverage.web:app --reload
"""
from __future__ import annotations

from html import escape
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .app import CoverageCheckerApp
from .bibliography import DEFAULT_KEY_FIELD
from .errors import CitationCoverageError
from .report import build_result, render_report

app = FastAPI(
    title="Citation Coverage Checker",
    description="Find bibliography entries that a document never cites",
)


class CheckRequest(BaseModel):
    bibliography: str
    document: str
    marker: Optional[str] = None
    key_field: str = DEFAULT_KEY_FIELD


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>Citation Coverage Checker</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">Citation Coverage Checker</h1>
                <p class=\"text-gray-600 mt-2\">Paste a CSL-JSON bibliography export and your manuscript to list entries that are never cited.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(
    report: str | None = None,
    error: str | None = None,
    marker: str = "",
) -> str:
    """Render the landing page with optional report or error output."""

    form = f"""
    <form action=\"/check\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"bibliography\">Bibliography export (CSL-JSON)</label>
        <textarea name=\"bibliography\" required placeholder=\"[{{&quot;citation-key&quot;: &quot;Smith.2020&quot;}}]\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm font-mono\"></textarea>
        <label class=\"block text-sm font-medium text-gray-700 mt-4 mb-2\" for=\"document\">Document text</label>
        <textarea name=\"document\" required placeholder=\"Paste manuscript text...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm\"></textarea>
        <div class=\"flex items-center gap-2 mt-3\">
            <label for=\"marker\" class=\"text-sm text-gray-700\">Citation marker (optional, e.g. @)</label>
            <input type=\"text\" id=\"marker\" name=\"marker\" value=\"{escape(marker)}\" class=\"w-16 border border-gray-300 rounded-md px-2 py-1 text-sm\" />
        </div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Check coverage</button>
    </form>
    """

    error_block = ""
    if error:
        error_block = f"""
        <div class=\"mt-8 bg-red-50 border border-red-200 text-red-800 rounded-lg p-4\">
            <h2 class=\"text-lg font-semibold\">Could not check coverage</h2>
            <p class=\"mt-2 text-sm\">{escape(error)}</p>
        </div>
        """

    report_block = ""
    if report:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Coverage Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    return _layout(form + error_block + report_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the submission form."""

    return HTMLResponse(_form_page())


@app.post("/check", response_class=HTMLResponse)
async def check_form(
    bibliography: str = Form(...),
    document: str = Form(...),
    marker: str = Form(""),
) -> HTMLResponse:
    """Check pasted text and return a formatted report."""

    checker = CoverageCheckerApp(marker=marker or None)
    try:
        report = checker.check_text(document, bibliography)
    except CitationCoverageError as exc:
        return HTMLResponse(_form_page(error=str(exc), marker=marker), status_code=400)
    return HTMLResponse(_form_page(render_report(report), marker=marker))


@app.post("/api/check")
async def check_api(request: CheckRequest) -> Dict[str, Any]:
    """Check coverage and return the structured result."""

    checker = CoverageCheckerApp(key_field=request.key_field, marker=request.marker)
    try:
        report = checker.check_text(request.document, request.bibliography)
    except CitationCoverageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return build_result(report)


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("citation_coverage.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
