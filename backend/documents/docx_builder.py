"""
Merge extracted fields into the tenancy agreement template and write a Word document.

Template syntax (plain text, one paragraph per line):
  {{field}}             replaced with the field value ("" when missing)
  [[if field]] [[end]]  block kept only when the field is non-empty; " " shows, "" hides
  # / ## / ###          headings
  ---                   page break
"""
from __future__ import annotations

import os
import re
from io import BytesIO
from pathlib import Path
from typing import Any, Iterable

from docx import Document

from models import Term

from .format_utils import NEWLINE

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_PATH = Path(os.environ.get("MODEL_TENANCY_TEMPLATE_TEXT", "") or _TEMPLATE_DIR / "model_tenancy.txt")

DOCUMENT_TITLE = "Private Residential Tenancy Agreement"

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")
_SECTION_START_RE = re.compile(r"^\[\[if\s+([A-Za-z0-9_]+)\s*\]\]$")
_SECTION_END = "[[end]]"
_HEADING_RE = re.compile(r"^(#{1,3})\s+(.*)$")
# Characters Word documents cannot hold; vertical tab and form feed are Word line and page breaks
_XML_ILLEGAL_RE = re.compile("[\x00-\x08\x0e-\x1f\ufffe\uffff]")
_WORD_BREAKS_RE = re.compile("[\x0b\x0c]")


def load_template_text(path: Path | None = None) -> str:
    return (path or TEMPLATE_PATH).read_text(encoding="utf-8")


def xml_safe(text: str) -> str:
    return _XML_ILLEGAL_RE.sub("", _WORD_BREAKS_RE.sub(NEWLINE, text))


def render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return xml_safe(str(value))


def substitute(text: str, fields: dict[str, Any]) -> str:
    return _PLACEHOLDER_RE.sub(lambda m: render_value(fields.get(m.group(1))), text)


def apply_sections(lines: Iterable[str], fields: dict[str, Any]) -> list[str]:
    """Drop [[if x]] blocks whose field is empty. Blocks do not nest."""
    kept = []
    keep = True
    for line in lines:
        stripped = line.strip()
        m = _SECTION_START_RE.match(stripped)
        if m:
            keep = bool(fields.get(m.group(1)))
            continue
        if stripped == _SECTION_END:
            keep = True
            continue
        if keep:
            kept.append(line)
    return kept


def _add_paragraph(doc, text: str) -> None:
    parts = text.split(NEWLINE)
    paragraph = doc.add_paragraph()
    run = paragraph.add_run(parts[0])
    for part in parts[1:]:
        run.add_break()
        run.add_text(part)


def build_docx(
    fields: dict[str, Any],
    template_text: str | None = None,
    additional_terms: Iterable[Term] = (),
) -> bytes:
    """Render the agreement to .docx bytes."""
    if template_text is None:
        template_text = load_template_text()

    doc = Document()
    doc.core_properties.title = DOCUMENT_TITLE
    for line in apply_sections(template_text.splitlines(), fields):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped == "---":
            doc.add_page_break()
            continue
        heading = _HEADING_RE.match(stripped)
        if heading:
            level = len(heading.group(1)) - 1
            doc.add_heading(substitute(heading.group(2), fields), level=level)
            continue
        _add_paragraph(doc, substitute(line, fields))

    terms = [t for t in additional_terms if t.title.strip() or t.content.strip()]
    if terms:
        doc.add_heading("Additional terms", level=1)
        for term in terms:
            doc.add_heading(xml_safe(term.title), level=2)
            _add_paragraph(doc, xml_safe(term.content))

    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()
