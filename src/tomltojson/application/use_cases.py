"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path

from pydantic import ValidationError

from tomltojson.adapters.enumerator import FilesystemEnumerator
from tomltojson.adapters.transcoder import TomlJsonTranscoder
from tomltojson.application.options import ConversionOptions
from tomltojson.application.ports import DocumentTranscoder, DocumentWriter, FileEnumerator
from tomltojson.application.results import ConversionOutcome, ConversionReport
from tomltojson.errors import (
    ConversionArgumentError,
    DirectoryNotReadableError,
    DocumentWriteError,
    SourceReadError,
    TomlToJsonError,
)
from tomltojson.freshness import file_age, is_eligible, parse_duration
from tomltojson.infrastructure.writer import AtomicFileWriter
from tomltojson.paths import classify_path, json_name_for, mirror, resolve_target
from tomltojson.schemas import ConversionRequest
from tomltojson.types import SOURCE_EXTENSION, PathKind

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def build_conversion_options(
    *,
    pretty: bool = False,
    modified: str | timedelta | None = None,
    recursion: int = 0,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    threshold = parse_duration(modified) if isinstance(modified, str) else modified
    return ConversionOptions(
        json_format="pretty" if pretty else "compact",
        modified_threshold=threshold,
        recursion_depth=recursion,
    )


def build_conversion_request(
    *,
    source_path: Path,
    target_path: str | os.PathLike[str] | None,
    options: ConversionOptions,
) -> ConversionRequest:
    """Use-case: classify ``SOURCE``/``TARGET`` and validate the run parameters.

    No document is read or written here.
    """
    source_kind = classify_path(source_path)
    resolved_target, _ = resolve_target(source_path, source_kind, target_path)
    try:
        return ConversionRequest(
            source_path=source_path,
            target_path=resolved_target,
            path_kind=source_kind,
            recursion_depth=options.recursion_depth,
            modified_threshold=options.modified_threshold,
            json_format=options.json_format,
        )
    except ValidationError as exc:
        raise ConversionArgumentError(f"Invalid conversion parameters: {exc}") from exc


def convert_document(
    source_file: Path,
    target_file: Path,
    request: ConversionRequest,
    *,
    transcoder: DocumentTranscoder,
    writer: DocumentWriter,
    now: Clock = time.time,
) -> ConversionOutcome:
    """Filter, transcode and write one document.

    Returns a ``converted`` or ``skipped_stale`` outcome; failures raise.
    """
    try:
        age = file_age(source_file, now)
    except OSError as exc:
        raise SourceReadError(f"Cannot stat {source_file}: {exc}") from exc

    if not is_eligible(age, request.modified_threshold):
        logger.debug("Skipping %s: modified %s ago", source_file, age)
        return ConversionOutcome(
            source_path=source_file,
            target_path=target_file,
            status="skipped_stale",
        )

    try:
        source_bytes = source_file.read_bytes()
    except OSError as exc:
        raise SourceReadError(f"Cannot read {source_file}: {exc}") from exc

    payload = transcoder.transcode(source_bytes, request.json_format)
    writer.write(target_file, payload)
    logger.info("Converted %s -> %s", source_file, target_file)
    return ConversionOutcome(
        source_path=source_file,
        target_path=target_file,
        status="converted",
        bytes_read=len(source_bytes),
    )


def _failed(source: Path, target: Path | None, exc: TomlToJsonError) -> ConversionOutcome:
    logger.warning("Failed %s: %s", source, exc)
    return ConversionOutcome(
        source_path=source,
        target_path=target,
        status="failed",
        reason=f"{type(exc).__name__}: {exc}",
    )


def convert_file(
    request: ConversionRequest,
    *,
    transcoder: DocumentTranscoder | None = None,
    writer: DocumentWriter | None = None,
    now: Clock = time.time,
) -> ConversionReport:
    """Use-case: convert a single source file.

    Errors propagate to the caller instead of being collected.
    """
    if request.path_kind is not PathKind.FILE:
        raise ConversionArgumentError(f"{request.source_path} is not a file.")

    outcome = convert_document(
        request.source_path,
        request.target_path,
        request,
        transcoder=transcoder or TomlJsonTranscoder(),
        writer=writer or AtomicFileWriter(),
        now=now,
    )
    return ConversionReport(outcomes=(outcome,))


def _convert_directory_files(
    files: list[Path],
    target_dir: Path,
    request: ConversionRequest,
    *,
    transcoder: DocumentTranscoder,
    writer: DocumentWriter,
    now: Clock,
    outcomes: list[ConversionOutcome],
) -> None:
    for source_file in files:
        target_file = target_dir / json_name_for(source_file)
        try:
            outcomes.append(
                convert_document(
                    source_file,
                    target_file,
                    request,
                    transcoder=transcoder,
                    writer=writer,
                    now=now,
                )
            )
        except TomlToJsonError as exc:
            outcomes.append(_failed(source_file, target_file, exc))


def convert_folder(
    request: ConversionRequest,
    *,
    enumerator: FileEnumerator | None = None,
    transcoder: DocumentTranscoder | None = None,
    writer: DocumentWriter | None = None,
    now: Clock = time.time,
) -> ConversionReport:
    """Use-case: convert ``.toml`` files in a folder, mirroring subfolders.

    The root folder is processed first. With ``recursion_depth > 0`` every
    subfolder down to that depth is then processed on its own, writing into
    the mirrored folder under ``target_path``. Target folders are created
    even when nothing in them ends up converted.

    Raises
    ------
    DirectoryNotReadableError
        If the source root cannot be listed.
    DocumentWriteError
        If the target root cannot be created. Unreadable subfolders,
        uncreatable mirrored folders and per-file failures are recorded in
        the report instead.
    """
    if request.path_kind is not PathKind.DIRECTORY:
        raise ConversionArgumentError(f"{request.source_path} is not a folder.")

    enumerator = enumerator or FilesystemEnumerator()
    transcoder = transcoder or TomlJsonTranscoder()
    writer = writer or AtomicFileWriter()
    source_root = request.source_path
    target_root = request.target_path
    outcomes: list[ConversionOutcome] = []

    root_files = enumerator.list_files(source_root, 0, SOURCE_EXTENSION)
    writer.prepare_directory(target_root)
    _convert_directory_files(
        root_files,
        target_root,
        request,
        transcoder=transcoder,
        writer=writer,
        now=now,
        outcomes=outcomes,
    )

    if request.recursion_depth > 0:
        subfolders = enumerator.list_subdirectories(source_root, request.recursion_depth - 1)
        for subfolder in subfolders:
            target_dir = mirror(source_root, target_root, subfolder)
            try:
                files = enumerator.list_files(subfolder, 0, SOURCE_EXTENSION)
                writer.prepare_directory(target_dir)
            except (DirectoryNotReadableError, DocumentWriteError) as exc:
                outcomes.append(_failed(subfolder, target_dir, exc))
                continue
            _convert_directory_files(
                files,
                target_dir,
                request,
                transcoder=transcoder,
                writer=writer,
                now=now,
                outcomes=outcomes,
            )

    report = ConversionReport(outcomes=tuple(outcomes))
    logger.info(
        "Folder %s: %d converted, %d skipped, %d failed",
        source_root,
        report.converted,
        report.skipped,
        len(report.failures),
    )
    return report


def run_conversion(
    request: ConversionRequest,
    *,
    enumerator: FileEnumerator | None = None,
    transcoder: DocumentTranscoder | None = None,
    writer: DocumentWriter | None = None,
    now: Clock = time.time,
) -> ConversionReport:
    """Use-case: dispatch to single-file or folder conversion."""
    if request.path_kind is PathKind.FILE:
        return convert_file(request, transcoder=transcoder, writer=writer, now=now)
    return convert_folder(
        request,
        enumerator=enumerator,
        transcoder=transcoder,
        writer=writer,
        now=now,
    )
