from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

logger = logging.getLogger(__name__)


def iter_source_files(root: str, extensions: Sequence[str],
                      keep_dir: Optional[Callable[[str], bool]] = None) -> Iterator[str]:
    """Yield files under ``root`` whose suffix is in ``extensions``, sorted.

    ``keep_dir`` filters the top-level subdirectories only.
    """
    suffixes = tuple(e.lower() for e in extensions)

    def _raise(err: OSError) -> None:
        raise RuntimeError(f"Failed to traverse {err.filename}: {err.strerror}") from err

    root_path = os.path.abspath(root)
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        if keep_dir is not None and os.path.abspath(dirpath) == root_path:
            dirnames[:] = [d for d in dirnames if keep_dir(d)]
        dirnames.sort()
        for name in sorted(filenames):
            if name.lower().endswith(suffixes):
                yield os.path.join(dirpath, name)


def read_text(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
            return f.read()
    except OSError as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def write_text(path: str, text: str) -> None:
    try:
        Path(path).write_text(text, encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"{path} could not be written: {e}") from e


__all__ = ["iter_source_files", "read_text", "write_text"]
