"""Atomic output writer implementing the ``DocumentWriter`` port."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from tomltojson.errors import DocumentWriteError

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents if missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DocumentWriteError(f"Cannot create directory {path}: {exc}") from exc


class AtomicFileWriter:
    """Write documents through a temporary sibling file and ``os.replace``."""

    def prepare_directory(self, directory: Path) -> None:
        ensure_directory(directory)
        logger.debug("Prepared directory %s", directory)

    def write(self, target_path: Path, payload: bytes) -> None:
        """Write ``payload`` to ``target_path``.

        The parent directory is created first. On failure the temporary file
        is removed and any existing ``target_path`` is left untouched.

        Parameters
        ----------
        target_path : Path
            Final output location.
        payload : bytes
            Complete document content.

        Raises
        ------
        DocumentWriteError
            If the directory, temporary file or final rename fails.
        """
        ensure_directory(target_path.parent)
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target_path.name}.", suffix=".tmp", dir=target_path.parent
            )
        except OSError as exc:
            raise DocumentWriteError(f"Cannot write {target_path}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            # mkstemp creates 0600 files; use the regular umask-derived mode.
            os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, target_path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise DocumentWriteError(f"Cannot write {target_path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(payload), target_path)
