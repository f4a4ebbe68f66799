"""Filesystem enumeration implementing the ``FileEnumerator`` port."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from tomltojson.errors import DirectoryNotReadableError
from tomltojson.types import MAX_RECURSION_DEPTH

logger = logging.getLogger(__name__)


def _scan(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        raise DirectoryNotReadableError(directory, exc.strerror or str(exc)) from exc


def _is_dir(entry: os.DirEntry[str]) -> bool | None:
    """Classify an entry, returning ``None`` when it cannot be inspected."""
    try:
        return entry.is_dir()
    except OSError as exc:
        logger.warning("Skipping unreadable entry %s: %s", entry.path, exc)
        return None


def _normalize_extension(extension: str) -> str:
    return extension if extension.startswith(".") else f".{extension}"


def _clamp_depth(depth: int) -> int:
    if depth < 0:
        raise ValueError("depth must be non-negative.")
    return min(depth, MAX_RECURSION_DEPTH)


def _descend(
    directory: Path,
    collect: list[Path],
    visit: Callable[[Path], list[Path]],
) -> None:
    """List a nested directory, skipping it when it cannot be read."""
    try:
        collect.extend(visit(directory))
    except DirectoryNotReadableError as exc:
        logger.warning("Skipping %s", exc)


def list_files(directory: Path, depth: int, extension: str) -> list[Path]:
    """Return files in ``directory`` whose last suffix equals ``extension``.

    Parameters
    ----------
    directory : Path
        Directory to list.
    depth : int
        ``0`` lists only ``directory``; ``n`` also descends into each
        subdirectory with depth ``n - 1``.
    extension : str
        Case-sensitive suffix, with or without the leading dot.

    Returns
    -------
    list[Path]
        Matching files in directory-listing order.

    Raises
    ------
    DirectoryNotReadableError
        If ``directory`` itself cannot be listed.
    """
    depth = _clamp_depth(depth)
    suffix = _normalize_extension(extension)
    result: list[Path] = []

    for entry in _scan(directory):
        is_dir = _is_dir(entry)
        if is_dir is None:
            continue
        path = Path(entry.path)
        if is_dir:
            if depth > 0:
                _descend(
                    path,
                    result,
                    lambda nested: list_files(nested, depth - 1, suffix),
                )
        elif path.suffix == suffix:
            result.append(path)

    return result


def list_subdirectories(directory: Path, depth: int) -> list[Path]:
    """Return subdirectories of ``directory`` down to ``depth`` extra levels.

    ``depth=0`` returns the immediate subdirectories only. Each subdirectory
    is listed before its own descendants.

    Raises
    ------
    DirectoryNotReadableError
        If ``directory`` itself cannot be listed.
    """
    depth = _clamp_depth(depth)
    result: list[Path] = []

    for entry in _scan(directory):
        if not _is_dir(entry):
            continue
        path = Path(entry.path)
        result.append(path)
        if depth > 0:
            _descend(
                path,
                result,
                lambda nested: list_subdirectories(nested, depth - 1),
            )

    return result


class FilesystemEnumerator:
    """Default directory enumerator backed by ``os.scandir``."""

    def list_files(self, directory: Path, depth: int, extension: str) -> list[Path]:
        """List matching files; see :func:`list_files`."""
        return list_files(directory, depth, extension)

    def list_subdirectories(self, directory: Path, depth: int) -> list[Path]:
        """List subdirectories; see :func:`list_subdirectories`."""
        return list_subdirectories(directory, depth)
