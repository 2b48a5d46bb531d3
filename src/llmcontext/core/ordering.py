# src/llmcontext/core/ordering.py
import posixpath
import re
from typing import Iterable, List, Tuple

from llmcontext.models import DocumentEntry

# Digit runs, letter runs, or a single punctuation character.
_CHUNK_RE = re.compile(r"\d+|[^\W\d_]+|[\W_]")

_PUNCT, _DIGIT, _TEXT = 0, 1, 2

def _segment_key(segment: str) -> Tuple[Tuple[int, int, str], ...]:
    """
    Splits a path segment into punctuation, digit and text runs. Punctuation
    sorts below digits, digits below text. Digit runs compare by value, text
    runs case-insensitively. Every chunk is a (kind, number, text) triple so
    mixed chunks never compare int against str.
    """
    key = []
    for chunk in _CHUNK_RE.findall(segment):
        if chunk.isdecimal():
            key.append((_DIGIT, int(chunk), chunk))
        elif chunk.isalpha():
            key.append((_TEXT, 0, chunk.casefold()))
        else:
            key.append((_PUNCT, 0, chunk))
    return tuple(key)

def natural_key(rel_path: str) -> Tuple:
    """
    Sort key for a '/'-separated relative path, compared segment by segment.
    The file suffix is left out of the name so "page.md" sorts before
    "page2.md", and a file sorts before the folder of the same name.
    """
    stem, suffix = posixpath.splitext(rel_path)
    segments = tuple(_segment_key(part) for part in stem.split("/"))
    # Suffix, then the raw path, keep the order total ("A.md" vs "a.md").
    return (segments, suffix.casefold(), rel_path)

def sort_entries(entries: Iterable[DocumentEntry]) -> List[DocumentEntry]:
    return sorted(entries, key=lambda e: natural_key(e.rel_path))
