"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from tomltojson.types import JsonFormat


class FileEnumerator(Protocol):
    """List source documents and directories."""

    def list_files(self, directory: Path, depth: int, extension: str) -> list[Path]:
        """Return files with ``extension`` under ``directory``."""

    def list_subdirectories(self, directory: Path, depth: int) -> list[Path]:
        """Return subdirectories of ``directory``."""


class DocumentTranscoder(Protocol):
    """Convert source document bytes into target document bytes."""

    def transcode(self, source_bytes: bytes, json_format: JsonFormat) -> bytes:
        """Raise ``TranscodeError`` on invalid input."""


class DocumentWriter(Protocol):
    """Persist an output document."""

    def write(self, target_path: Path, payload: bytes) -> None:
        """Write ``payload`` without leaving partial output on failure."""

    def prepare_directory(self, directory: Path) -> None:
        """Create ``directory`` (and parents) so it exists even when empty."""
