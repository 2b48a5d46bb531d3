# src/llmcontext/core/aggregator.py
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from llmcontext.config import DEFAULT_EXTENSIONS, DEFAULT_IGNORE_FILE, DEFAULT_TITLE, READ_ERROR_POLICIES
from llmcontext.core.ignore import load_ignore_spec, output_exclusion_pattern
from llmcontext.core.ordering import sort_entries
from llmcontext.core.render import render_document
from llmcontext.core.scanner import DocumentScanner
from llmcontext.core.writer import atomic_write
from llmcontext.errors import ReadError
from llmcontext.models import AggregationResult, AggregationStats, Document, DocumentEntry
from llmcontext.utils.tokenizer import Tokenizer

def display_name(rel_path: str) -> str:
    """Printable form of a path whose name may hold undecodable bytes."""
    return rel_path.encode("utf-8", "backslashreplace").decode("utf-8")

def read_document(entry: DocumentEntry) -> Document:
    """Reads raw bytes and decodes strict UTF-8, so CRLF and the like survive verbatim."""
    try:
        entry.rel_path.encode("utf-8")
    except UnicodeEncodeError as e:
        # The name ends up in the table of contents and source marker.
        raise ReadError("Document name is not valid UTF-8", os.fsencode(entry.rel_path)) from e
    try:
        data = entry.path.read_bytes()
    except OSError as e:
        raise ReadError(f"Cannot read document ({e.strerror or e})", entry.rel_path) from e
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadError(f"Document is not valid UTF-8 text (byte {e.start})", entry.rel_path) from e
    return Document(entry=entry, content=content)

class DocumentAggregator:
    """
    One run: discover, order, read, render, write. Nothing is written unless
    every step before the write succeeds.
    """

    def __init__(
        self,
        root_dir: Path,
        output_file: Path,
        extensions: Optional[Iterable[str]] = None,
        title: str = DEFAULT_TITLE,
        ignore_file: Optional[Path] = None,
        exclude: Optional[List[str]] = None,
        on_read_error: str = "abort",
        exact_tokens: bool = False,
        verbose: bool = True,
    ):
        if on_read_error not in READ_ERROR_POLICIES:
            raise ValueError(f"on_read_error must be one of {READ_ERROR_POLICIES}, got {on_read_error!r}")
        self.root_dir = root_dir.resolve()
        self.output_file = output_file.resolve()
        self.extensions = set(extensions) if extensions else set(DEFAULT_EXTENSIONS)
        self.title = title
        self.ignore_file = ignore_file if ignore_file is not None else self.root_dir / DEFAULT_IGNORE_FILE
        self.exclude = list(exclude or [])
        self.on_read_error = on_read_error
        self.exact_tokens = exact_tokens
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def discover(self) -> List[DocumentEntry]:
        extra = list(self.exclude)
        own_output = output_exclusion_pattern(self.root_dir, self.output_file)
        if own_output:
            extra.append(own_output)
        ignore_spec = load_ignore_spec(self.ignore_file, extra_patterns=extra)

        scanner = DocumentScanner(self.root_dir, ignore_spec, self.extensions)
        return sort_entries(scanner.scan())

    def read_all(self, entries: List[DocumentEntry]):
        documents: List[Document] = []
        skipped: List[str] = []
        for entry in entries:
            self._log(f"  ├─ Processing: {display_name(entry.rel_path)}")
            try:
                documents.append(read_document(entry))
            except ReadError as e:
                if self.on_read_error == "abort":
                    raise
                print(f"  > [Warning] Skipping {display_name(entry.rel_path)} ({e.message})", file=sys.stderr)
                skipped.append(entry.rel_path)
        return documents, skipped

    def run(self, generated_at: Optional[str] = None) -> AggregationResult:
        self._log("Scanning documentation files...")
        entries = self.discover()
        self._log(f"Found {len(entries)} documents")

        documents, skipped = self.read_all(entries)
        text = render_document(documents, title=self.title, generated_at=generated_at)
        exact_tokens = Tokenizer.count(text) if self.exact_tokens else None
        size_bytes = atomic_write(self.output_file, text)

        word_count = Tokenizer.count_words(text)
        stats = AggregationStats(
            document_count=len(documents),
            size_bytes=size_bytes,
            word_count=word_count,
            estimated_tokens=Tokenizer.estimate(word_count),
            exact_tokens=exact_tokens,
        )
        return AggregationResult(
            output_path=self.output_file,
            documents=documents,
            text=text,
            stats=stats,
            skipped=skipped,
        )
