# src/llmcontext/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

@dataclass(frozen=True)
class DocumentEntry:
    """A discovered document. rel_path always uses '/' separators."""
    path: Path
    rel_path: str

@dataclass(frozen=True)
class Document:
    entry: DocumentEntry
    content: str

    @property
    def rel_path(self) -> str:
        return self.entry.rel_path

@dataclass(frozen=True)
class AggregationStats:
    document_count: int
    size_bytes: int
    word_count: int
    estimated_tokens: int
    exact_tokens: Optional[int] = None

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024

@dataclass
class AggregationResult:
    output_path: Path
    documents: List[Document]
    text: str
    stats: AggregationStats
    skipped: List[str] = field(default_factory=list)
