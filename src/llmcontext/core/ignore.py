# src/llmcontext/core/ignore.py
from pathlib import Path, PurePath
from typing import Iterable, List, Optional

import pathspec

from llmcontext.errors import AggregatorError, ReadError

def load_ignore_spec(ignore_file: Optional[Path], extra_patterns: Optional[Iterable[str]] = None) -> pathspec.PathSpec:
    """
    Builds a gitignore-style spec from the ignore file, if any, plus extra
    patterns, e.g. the output file itself. Without either nothing is ignored.
    """
    lines: List[str] = []

    if ignore_file is not None and ignore_file.is_file():
        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Could not read ignore file ({e})", ignore_file) from e

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except ValueError as e:
        raise AggregatorError(f"Invalid ignore pattern ({e})", ignore_file) from e

def is_path_ignored(spec: pathspec.PathSpec, rel_path: PurePath, is_directory: bool = False) -> bool:
    """Directory-only patterns ("build/") need the trailing slash to match."""
    candidate = rel_path.as_posix()
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)

def output_exclusion_pattern(root_dir: Path, output_file: Path) -> Optional[str]:
    """Anchored pattern excluding the output file, or None if it lives outside root."""
    try:
        rel = output_file.resolve().relative_to(root_dir.resolve())
    except ValueError:
        return None
    return "/" + rel.as_posix()
