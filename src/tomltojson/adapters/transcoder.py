"""TOML-to-JSON transcoder implementing the ``DocumentTranscoder`` port."""

from __future__ import annotations

import datetime as dt
import json
import tomllib

from tomltojson.errors import EncodingError, TomlParseError, UnrepresentableValueError
from tomltojson.types import JsonFormat, TomlTable


def _encode_temporal(value: object) -> str:
    # Offset/local date-times, local dates and local times as ISO 8601 text.
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def decode_source(source_bytes: bytes) -> str:
    """Decode a source document as strict UTF-8."""
    try:
        return source_bytes.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"Source is not valid UTF-8 (byte {exc.start}): {exc.reason}"
        ) from exc


def parse_toml(text: str) -> TomlTable:
    """Parse TOML text into ordered nested values."""
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise TomlParseError(f"Invalid TOML: {exc}") from exc
    except RecursionError as exc:
        raise TomlParseError("Invalid TOML: values are nested too deeply") from exc
    except ValueError as exc:
        # Integer literals beyond the int-to-str digit limit.
        raise TomlParseError(f"Invalid TOML: {exc}") from exc


def dump_json(document: TomlTable, json_format: JsonFormat = "compact") -> str:
    """Serialize a parsed document as JSON text.

    Parameters
    ----------
    document : TomlTable
        Parsed TOML document. Key order is kept as declared.
    json_format : {"compact", "pretty"}, default="compact"
        ``pretty`` indents nested values by two spaces; ``compact`` emits no
        insignificant whitespace.

    Raises
    ------
    UnrepresentableValueError
        If the document holds ``inf`` or ``nan`` floats, or is nested deeper
        than the encoder can recurse.
    """
    if json_format == "pretty":
        layout: dict[str, object] = {"indent": 2}
    else:
        layout = {"separators": (",", ":")}
    try:
        return json.dumps(
            document,
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_temporal,
            **layout,
        )
    except ValueError as exc:
        raise UnrepresentableValueError(
            f"Document contains a value JSON cannot represent: {exc}"
        ) from exc
    except RecursionError as exc:
        raise UnrepresentableValueError("Document is nested too deeply to encode") from exc


class TomlJsonTranscoder:
    """Default in-memory TOML → JSON transcoder."""

    def transcode(self, source_bytes: bytes, json_format: JsonFormat) -> bytes:
        """Transcode one TOML document into UTF-8 JSON bytes.

        Parameters
        ----------
        source_bytes : bytes
            Full content of the source document.
        json_format : {"compact", "pretty"}
            Output layout.

        Returns
        -------
        bytes
            Encoded JSON document.

        Raises
        ------
        EncodingError
            If ``source_bytes`` is not UTF-8.
        TomlParseError
            If the text is not valid TOML or exceeds the parser limits.
        UnrepresentableValueError
            If a value has no JSON form.
        """
        document = parse_toml(decode_source(source_bytes))
        return dump_json(document, json_format).encode("utf-8")
