# src/llmcontext/core/scanner.py
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

import pathspec

from llmcontext.config import DEFAULT_EXTENSIONS
from llmcontext.core.ignore import is_path_ignored
from llmcontext.errors import FilesystemError
from llmcontext.models import DocumentEntry

def parse_extensions(raw: str) -> Set[str]:
    """'*' or a comma-separated list; a missing leading dot is added."""
    raw = raw.strip()
    if raw == "*":
        return {"*"}
    extensions = set()
    for ext in raw.split(","):
        ext = ext.strip()
        if not ext:
            continue
        extensions.add(ext if ext.startswith(".") else f".{ext}")
    return extensions

class DocumentScanner:
    def __init__(self, root_dir: Path, ignore_spec: Optional[pathspec.PathSpec] = None, extensions: Optional[Iterable[str]] = None):
        self.root_dir = root_dir
        self.ignore_spec = ignore_spec
        self.extensions = set(extensions) if extensions else set(DEFAULT_EXTENSIONS)
        self.match_all = "*" in self.extensions

    def _matches_filter(self, path: Path) -> bool:
        if self.match_all:
            return True
        return path.suffix in self.extensions or path.name in self.extensions

    def _is_ignored(self, rel_path: Path, is_directory: bool) -> bool:
        if self.ignore_spec is None:
            return False
        return is_path_ignored(self.ignore_spec, rel_path, is_directory=is_directory)

    def scan(self) -> Iterator[DocumentEntry]:
        """
        Walks the tree top-down, pruning ignored directories before descending,
        and yields an entry for every file passing the extension filter.
        Yield order follows the directory listing and carries no meaning.
        """
        if not self.root_dir.exists():
            raise FilesystemError("Root directory does not exist", self.root_dir)
        if not self.root_dir.is_dir():
            raise FilesystemError("Root path is not a directory", self.root_dir)

        def _on_error(e: OSError):
            raise FilesystemError(f"Cannot list directory ({e.strerror})", e.filename)

        # Directory symlinks are not followed, so link cycles cannot occur.
        for root, dirs, files in os.walk(self.root_dir, onerror=_on_error):
            root_path = Path(root)

            for d in list(dirs):
                if self._is_ignored((root_path / d).relative_to(self.root_dir), is_directory=True):
                    dirs.remove(d)

            for f in files:
                file_abs_path = root_path / f
                rel_path = file_abs_path.relative_to(self.root_dir)

                if not self._matches_filter(file_abs_path):
                    continue
                if self._is_ignored(rel_path, is_directory=False):
                    continue

                yield DocumentEntry(path=file_abs_path, rel_path=rel_path.as_posix())

    def discover(self) -> List[DocumentEntry]:
        return list(self.scan())
