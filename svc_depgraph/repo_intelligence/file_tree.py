"""
Directory listing and file reading used by the graph builder.
"""

import os
from pathlib import Path
from typing import Iterator


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _raise(error: OSError) -> None:
    raise error


def list_files(root: Path | str) -> Iterator[Path]:
    """
    Yield every file beneath root, recursively.

    A missing root yields nothing. Hidden files and directories are skipped,
    symlinked directories are followed. Directories are walked in sorted
    order so the listing is stable. A directory that cannot be listed raises.

    Args:
        root: Directory to walk

    Yields:
        Paths of regular files, each prefixed with root
    """
    root = Path(root)
    if not root.is_dir():
        return

    for dirpath, dirs, files in os.walk(root, onerror=_raise, followlinks=True):
        dirs[:] = sorted(d for d in dirs if not _is_hidden(d))
        for file in sorted(files):
            if not _is_hidden(file):
                yield Path(dirpath) / file


def list_source_files(root: Path | str, extension: str) -> Iterator[Path]:
    """Yield the files beneath root whose name ends with extension."""
    for path in list_files(root):
        if path.name.endswith(extension):
            yield path


def list_child_directories(root: Path | str) -> list[str]:
    """
    List the names of the immediate child directories of root.

    Args:
        root: Directory to inspect

    Returns:
        Sorted directory names; empty when root does not exist
    """
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not _is_hidden(entry.name)
    )


def read_source(path: Path | str) -> str:
    """Read the full text of a source file."""
    return Path(path).read_text(encoding="utf-8")
