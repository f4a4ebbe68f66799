"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from tomltojson.adapters.transcoder import TomlJsonTranscoder
from tomltojson.application.results import ConversionReport
from tomltojson.application.use_cases import build_conversion_options
from tomltojson.application.use_cases import build_conversion_request
from tomltojson.application.use_cases import run_conversion


def convert_toml_to_json(
    source: Union[str, os.PathLike[str]],
    target: Optional[Union[str, os.PathLike[str]]] = None,
    *,
    pretty: bool = False,
    modified: Optional[Union[str, timedelta]] = None,
    recursion: int = 0,
) -> ConversionReport:
    """Convert a TOML file, or a folder of TOML files, to JSON."""
    options = build_conversion_options(
        pretty=pretty,
        modified=modified,
        recursion=recursion,
    )
    request = build_conversion_request(
        source_path=Path(source),
        target_path=target,
        options=options,
    )
    return run_conversion(request)


def transcode_toml(document: Union[str, bytes], pretty: bool = False) -> str:
    """Transcode TOML text in memory and return the JSON text."""
    source_bytes = document.encode("utf-8") if isinstance(document, str) else document
    output = TomlJsonTranscoder().transcode(
        source_bytes, "pretty" if pretty else "compact"
    )
    return output.decode("utf-8")
