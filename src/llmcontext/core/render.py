# src/llmcontext/core/render.py
"""Renders the aggregated document: header, table of contents, sections, footer."""
import posixpath
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from llmcontext.config import DEFAULT_TITLE, SECTION_SEPARATOR, TOC_SEPARATOR
from llmcontext.models import Document

SECTION_MARKER = "# Document "
SOURCE_MARKER = "<!-- Source: {} -->"
END_MARKER = "<!-- End of Documentation -->"

def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-01-31T09:15:00.000Z."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"

def human_title(rel_path: str, separator: str) -> str:
    stem, _ext = posixpath.splitext(rel_path)
    return stem.replace("/", separator)

def render_header(title: str, document_count: int, generated_at: str) -> str:
    return (
        f"# {title} - Complete Documentation\n\n"
        "> This file is auto-generated from the documentation sources.\n"
        f"> Generated on: {generated_at}\n"
        f"> Total documents: {document_count}\n\n"
        "---\n\n"
    )

def render_toc(documents: Sequence[Document]) -> str:
    lines = ["## Table of Contents\n\n"]
    for i, doc in enumerate(documents, start=1):
        lines.append(f"{i}. {human_title(doc.rel_path, TOC_SEPARATOR)}\n")
    lines.append("\n---\n\n")
    return "".join(lines)

def render_section(index: int, doc: Document) -> str:
    title = human_title(doc.rel_path, SECTION_SEPARATOR)
    return (
        f"\n\n{SECTION_MARKER}{index}: {title}\n\n"
        f"{SOURCE_MARKER.format(doc.rel_path)}\n\n"
        f"{doc.content}"
        "\n\n---\n"
    )

def render_document(documents: Sequence[Document], title: str = DEFAULT_TITLE, generated_at: Optional[str] = None) -> str:
    """
    Concatenates the documents in the given order. Content is emitted verbatim;
    only the surrounding markers are generated.
    """
    if generated_at is None:
        generated_at = iso_timestamp()

    parts: List[str] = [
        render_header(title, len(documents), generated_at),
        render_toc(documents),
    ]
    for i, doc in enumerate(documents, start=1):
        parts.append(render_section(i, doc))
    parts.append(f"\n\n{END_MARKER}\n")
    return "".join(parts)
