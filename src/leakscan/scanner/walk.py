"""File discovery for the scanner."""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

BINARY_EXTS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".bmp",
    ".webp",
    ".ico",
    ".pdf",
    ".doc",
    ".docx",
    ".xls",
    ".xlsx",
    ".ppt",
    ".pptx",
    ".zip",
    ".gz",
    ".tar",
    ".tgz",
    ".bz2",
    ".xz",
    ".7z",
    ".rar",
    ".jar",
    ".war",
    ".whl",
    ".dmg",
    ".iso",
    ".exe",
    ".dll",
    ".so",
    ".dylib",
    ".a",
    ".o",
    ".class",
    ".pyc",
    ".pyo",
    ".woff",
    ".woff2",
    ".ttf",
    ".otf",
    ".eot",
    ".mp3",
    ".mp4",
    ".wav",
    ".avi",
    ".mov",
    ".webm",
    ".sqlite",
    ".db",
}

# Bytes inspected for a NUL when deciding whether a file is binary.
SNIFF_BYTES = 8192


@dataclass(frozen=True)
class FileEntry:
    path: Path
    rel_path: str  # posix, relative to the scan root


def is_binary_path(path: Path) -> bool:
    return path.suffix.lower() in BINARY_EXTS


def looks_binary(head: bytes) -> bool:
    """Heuristic: any NUL byte in the leading chunk means binary."""
    return b"\x00" in head[:SNIFF_BYTES]


def _excluded_by_glob(rel_path: str, exclude_globs: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in exclude_globs)


def iter_files(
    root: Path,
    exclude_dirs: Iterable[str] = (),
    exclude_globs: Iterable[str] = (),
    on_error: Optional[Callable[[str], None]] = None,
) -> Iterator[FileEntry]:
    """
    Depth-first walk of *root* in sorted order, yielding regular files.

    Directories named in *exclude_dirs* are pruned wherever they appear.
    Symlinks are never followed. Directories that cannot be listed are
    reported through *on_error* and skipped.
    """
    exclude_dirs = set(exclude_dirs)
    exclude_globs = list(exclude_globs)

    if root.is_file():
        yield FileEntry(path=root, rel_path=root.name)
        return

    def _onerror(err: OSError) -> None:
        if on_error is not None:
            name = err.filename or str(root)
            on_error(f"{_relative(Path(name), root)}: {err.strerror or err}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror, followlinks=False):
        current = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames
            if d not in exclude_dirs and not (current / d).is_symlink()
        )
        for name in sorted(filenames):
            path = current / name
            if path.is_symlink() or not path.is_file():
                continue
            rel_path = _relative(path, root)
            if _excluded_by_glob(rel_path, exclude_globs):
                continue
            yield FileEntry(path=path, rel_path=rel_path)


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
