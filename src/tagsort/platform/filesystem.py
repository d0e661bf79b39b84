"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from tagsort.platform.logging import logger


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def walk_entries(root: Path) -> Iterator[Path]:
    """Yield every directory and file below ``root`` in depth-first order.

    Entries inside one directory are visited sorted by name, and a directory
    is yielded right before its contents, so the order is stable across runs.
    Symlinked directories are yielded but not descended into. A subdirectory
    that cannot be listed is logged and skipped; an unreadable ``root``
    raises.
    """

    yield from _walk(_sorted_entries(root))


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)


def _walk(entries: list[os.DirEntry[str]]) -> Iterator[Path]:
    for entry in entries:
        path = Path(entry.path)
        yield path
        if not entry.is_dir(follow_symlinks=False):
            continue
        try:
            children = _sorted_entries(path)
        except OSError as exc:
            logger.warning("Skipping unreadable directory %s: %s", path, exc)
            continue
        yield from _walk(children)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every regular file below ``root`` in walk order."""

    for entry in walk_entries(root):
        if entry.is_dir():
            continue
        if entry.is_file():
            yield entry


def remove_empty_directories(directory: Path, *, dry_run: bool = False) -> list[Path]:
    """Remove empty subdirectories of ``directory``, deepest first.

    A directory that only contains empty directories counts as empty. The
    root itself is never removed.

    Args:
        directory: Root directory to inspect.
        dry_run: Only report what would be removed.

    Returns:
        list[Path]: Directories removed (or that would be removed).
    """
    if not directory.is_dir():
        return []

    removed: list[Path] = []
    removed_set: set[Path] = set()
    for current, _, _ in os.walk(directory, topdown=False):
        current_path = Path(current)
        if current_path == directory:
            continue
        try:
            children = list(current_path.iterdir())
        except OSError as exc:
            logger.warning("Cannot list %s: %s", current_path, exc)
            continue
        if any(child not in removed_set for child in children):
            continue
        if not dry_run:
            try:
                current_path.rmdir()
            except OSError as exc:
                logger.warning("Cannot remove %s: %s", current_path, exc)
                continue
        removed.append(current_path)
        removed_set.add(current_path)
    return removed


__all__ = [
    "ensure_directory",
    "ensure_parent_directory",
    "remove_empty_directories",
    "walk_entries",
    "walk_files",
]
