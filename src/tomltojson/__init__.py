"""Top-level API for TOML-to-JSON conversion."""

from __future__ import annotations

import os
from datetime import timedelta

from tomltojson.application.results import ConversionOutcome, ConversionReport
from tomltojson.types import JsonFormat, PathKind

__version__ = "0.5.0"


def convert_toml_to_json(
    source: str | os.PathLike[str],
    target: str | os.PathLike[str] | None = None,
    *,
    pretty: bool = False,
    modified: str | timedelta | None = None,
    recursion: int = 0,
) -> ConversionReport:
    """Convert a TOML file, or a folder of TOML files, to JSON.

    Parameters
    ----------
    source : str | os.PathLike
        Existing ``.toml`` file or folder.
    target : str | os.PathLike | None, default=None
        Output file or folder. Defaults to ``source`` with a ``.json``
        extension for files and to ``source`` itself for folders.
    pretty : bool, default=False
        Indent JSON output instead of writing it compactly.
    modified : str | timedelta | None, default=None
        Convert only files modified within this duration, e.g. ``"30d"``.
    recursion : int, default=0
        Subfolder depth to convert when ``source`` is a folder.

    Returns
    -------
    ConversionReport
        Converted, skipped and failed outcomes for the run.
    """
    from .api import convert_toml_to_json as _impl

    return _impl(
        source,
        target,
        pretty=pretty,
        modified=modified,
        recursion=recursion,
    )


def transcode_toml(document: str | bytes, pretty: bool = False) -> str:
    """Transcode a TOML document held in memory to JSON text.

    Parameters
    ----------
    document : str | bytes
        TOML text, or its UTF-8 bytes.
    pretty : bool, default=False
        Indent JSON output.

    Returns
    -------
    str
        JSON text.
    """
    from .api import transcode_toml as _impl

    return _impl(document, pretty=pretty)


__all__ = [
    "ConversionOutcome",
    "ConversionReport",
    "JsonFormat",
    "PathKind",
    "__version__",
    "convert_toml_to_json",
    "transcode_toml",
]
