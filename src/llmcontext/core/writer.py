# src/llmcontext/core/writer.py
import os
import tempfile
from pathlib import Path

from llmcontext.errors import WriteError

def atomic_write(path: Path, text: str) -> int:
    """
    Writes text through a temp file in the target directory and renames it into
    place, so readers never observe a half-written file. Newlines are written
    untranslated. Returns the size of the written file in bytes.
    """
    tmp_path = None
    try:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
                newline="",
            ) as f:
                tmp_path = Path(f.name)
                f.write(text)
            os.chmod(tmp_path, 0o644)
            tmp_path.replace(path)
        except BaseException:
            # Includes KeyboardInterrupt; the temp file must never outlive a failed run.
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise
        return path.stat().st_size
    except (OSError, UnicodeError) as e:
        reason = getattr(e, "strerror", None) or e
        raise WriteError(f"Cannot write output ({reason})", path) from e
