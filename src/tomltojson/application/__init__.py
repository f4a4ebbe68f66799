"""Application-layer use-cases and option objects."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

from tomltojson.application.options import ConversionOptions
from tomltojson.application.ports import (
    DocumentTranscoder,
    DocumentWriter,
    FileEnumerator,
)
from tomltojson.application.results import ConversionOutcome, ConversionReport
from tomltojson.schemas import ConversionRequest


def build_conversion_options(
    *,
    pretty: bool = False,
    modified: str | timedelta | None = None,
    recursion: int = 0,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from tomltojson.application.use_cases import build_conversion_options as _impl

    return _impl(pretty=pretty, modified=modified, recursion=recursion)


def build_conversion_request(
    *,
    source_path: Path,
    target_path: str | os.PathLike[str] | None,
    options: ConversionOptions,
) -> ConversionRequest:
    """Classify and validate a run via lazy use-case import."""
    from tomltojson.application.use_cases import build_conversion_request as _impl

    return _impl(source_path=source_path, target_path=target_path, options=options)


def run_conversion(
    request: ConversionRequest,
    *,
    enumerator: FileEnumerator | None = None,
    transcoder: DocumentTranscoder | None = None,
    writer: DocumentWriter | None = None,
) -> ConversionReport:
    """Run a validated conversion request via lazy use-case import."""
    from tomltojson.application.use_cases import run_conversion as _impl

    return _impl(
        request,
        enumerator=enumerator,
        transcoder=transcoder,
        writer=writer,
    )


__all__ = [
    "ConversionOptions",
    "ConversionOutcome",
    "ConversionReport",
    "ConversionRequest",
    "build_conversion_options",
    "build_conversion_request",
    "run_conversion",
]
