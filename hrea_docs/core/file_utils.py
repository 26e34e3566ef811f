"""
File utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .constants import COLORS


def create_file(
    path: Path,
    content: str,
    quiet: bool = False
) -> None:
    """
    Create or overwrite file with content

    Args:
        path: File path
        content: Content
        quiet: Don't print message
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

    if not quiet:
        rel_path = path.name if len(str(path)) > 50 else path
        print(f"  {COLORS.success(str(rel_path))}")


def iter_source_files(directory: Path, suffix: str, skip: str) -> Iterator[Path]:
    """
    Yield files in directory with the given suffix, sorted by name.

    Args:
        directory: Folder to list (not recursive)
        suffix: File extension to keep, e.g. ".ts"
        skip: File name to leave out, e.g. "index.ts"
    """
    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.suffix != suffix:
            continue
        if path.name == skip:
            continue
        yield path
