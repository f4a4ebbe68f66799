"""Unit tests for the TOML → JSON transcoder."""

from __future__ import annotations

import datetime as dt
import json
import tomllib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tomltojson.adapters.transcoder import TomlJsonTranscoder, dump_json
from tomltojson.errors import (
    EncodingError,
    TomlParseError,
    TranscodeError,
    UnrepresentableValueError,
)

DOCUMENT = """\
zeta = 1
alpha = "two"
ratio = 0.5
flag = false
born = 1979-05-27T07:32:00-08:00
local = 1979-05-27T07:32:00
day = 1979-05-27
alarm = 07:32:00

[server]
hosts = ["alpha", "omega"]
matrix = [[1, 2], ["a", "b"]]

[[products]]
name = "Hammer"

[[products]]
name = "Nail"
sku = 284758393
"""


def _normalize(value: object) -> object:
    """Apply the JSON text convention to a parsed TOML value."""
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return value


@pytest.fixture
def transcoder() -> TomlJsonTranscoder:
    return TomlJsonTranscoder()


def test_compact_output_has_no_whitespace(transcoder: TomlJsonTranscoder) -> None:
    """Emit the minimal representation in compact mode."""
    out = transcoder.transcode(b'a = 1\nb = [1, 2]\n[c]\nd = "x"\n', "compact")
    assert out == b'{"a":1,"b":[1,2],"c":{"d":"x"}}'


def test_pretty_output_is_indented(transcoder: TomlJsonTranscoder) -> None:
    """Indent nested values by two spaces in pretty mode."""
    out = transcoder.transcode(b"a = 1\n[b]\nc = true\n", "pretty")
    assert out.decode("utf-8") == '{\n  "a": 1,\n  "b": {\n    "c": true\n  }\n}'


def test_key_order_follows_document(transcoder: TomlJsonTranscoder) -> None:
    """Keep declaration order instead of sorting keys."""
    out = json.loads(transcoder.transcode(DOCUMENT.encode(), "compact"))
    assert list(out)[:3] == ["zeta", "alpha", "ratio"]


def test_scalar_types_survive(transcoder: TomlJsonTranscoder) -> None:
    """Keep integers, floats, booleans and strings distinct."""
    out = json.loads(transcoder.transcode(b"i = 1\nf = 1.0\nb = true\ns = '1'\n", "compact"))
    assert out == {"i": 1, "f": 1.0, "b": True, "s": "1"}
    assert isinstance(out["i"], int)
    assert isinstance(out["f"], float)


def test_datetimes_use_iso_8601(transcoder: TomlJsonTranscoder) -> None:
    """Render every temporal kind as ISO 8601 text."""
    out = json.loads(transcoder.transcode(DOCUMENT.encode(), "compact"))
    assert out["born"] == "1979-05-27T07:32:00-08:00"
    assert out["local"] == "1979-05-27T07:32:00"
    assert out["day"] == "1979-05-27"
    assert out["alarm"] == "07:32:00"


@pytest.mark.parametrize("json_format", ["compact", "pretty"])
def test_round_trip_matches_direct_parse(
    transcoder: TomlJsonTranscoder, json_format: str
) -> None:
    """Re-parsing the JSON equals the normalized TOML parse in both layouts."""
    out = transcoder.transcode(DOCUMENT.encode(), json_format)  # type: ignore[arg-type]
    assert json.loads(out) == _normalize(tomllib.loads(DOCUMENT))


def test_output_is_deterministic(transcoder: TomlJsonTranscoder) -> None:
    """Produce byte-identical output for identical input."""
    first = transcoder.transcode(DOCUMENT.encode(), "pretty")
    second = transcoder.transcode(DOCUMENT.encode(), "pretty")
    assert first == second


def test_non_ascii_text_is_written_as_utf8(transcoder: TomlJsonTranscoder) -> None:
    """Write non-ASCII characters directly rather than escaping them."""
    out = transcoder.transcode('name = "Zoë ☃"\n'.encode("utf-8"), "compact")
    assert out == '{"name":"Zoë ☃"}'.encode("utf-8")


def test_invalid_utf8_is_an_encoding_error(transcoder: TomlJsonTranscoder) -> None:
    """Reject non-UTF-8 input instead of reading it partially."""
    with pytest.raises(EncodingError):
        transcoder.transcode(b'name = "\xff\xfe"\n', "compact")


@pytest.mark.parametrize("source", [b"a = \n", b"[table\n", b"a = 1\na = 2\n"])
def test_malformed_toml_is_a_parse_error(
    transcoder: TomlJsonTranscoder, source: bytes
) -> None:
    """Surface grammar errors as ``TomlParseError``."""
    with pytest.raises(TomlParseError):
        transcoder.transcode(source, "compact")


@pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
def test_non_finite_floats_are_rejected(transcoder: TomlJsonTranscoder, value: str) -> None:
    """Refuse to emit invalid JSON for special floats."""
    with pytest.raises(UnrepresentableValueError):
        transcoder.transcode(f"x = {value}\n".encode(), "compact")


def test_oversized_integer_is_a_parse_error(transcoder: TomlJsonTranscoder) -> None:
    """Report integers past the digit conversion limit as parse failures."""
    with pytest.raises(TomlParseError):
        transcoder.transcode(b"a = 1" + b"1" * 5000 + b"\n", "compact")


def test_deeply_nested_document_is_a_transcode_error(
    transcoder: TomlJsonTranscoder,
) -> None:
    """Fail with a transcode error instead of leaking ``RecursionError``."""
    source = b"a = " + b"[" * 3000 + b"]" * 3000 + b"\n"
    with pytest.raises(TranscodeError):
        transcoder.transcode(source, "compact")


@pytest.mark.parametrize("json_format", ["compact", "pretty"])
def test_encoder_recursion_limit_is_unrepresentable(json_format: str) -> None:
    """Map encoder recursion failures onto ``UnrepresentableValueError``."""
    nested: list[object] = []
    for _ in range(10_000):
        nested = [nested]
    with pytest.raises(UnrepresentableValueError):
        dump_json({"a": nested}, json_format)  # type: ignore[arg-type]


def test_empty_document(transcoder: TomlJsonTranscoder) -> None:
    """Transcode an empty document to an empty object."""
    assert transcoder.transcode(b"", "compact") == b"{}"
    assert dump_json({}, "pretty") == "{}"


_keys = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=8)
_scalars = st.one_of(
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    st.floats(allow_nan=False, allow_infinity=False),
    st.booleans(),
    # TOML forbids a raw DEL in basic strings and json.dumps leaves it unescaped.
    st.text(
        alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\x7f"),
        max_size=20,
    ),
)


@given(st.dictionaries(_keys, _scalars, max_size=8))
def test_round_trip_of_flat_tables(table: dict[str, object]) -> None:
    """Keep scalar values and key order through a TOML → JSON round trip."""
    lines = [f"{key} = {json.dumps(value)}" for key, value in table.items()]
    source = ("\n".join(lines) + "\n").encode("utf-8")
    parsed = tomllib.loads(source.decode("utf-8"))

    out = json.loads(TomlJsonTranscoder().transcode(source, "compact"))

    assert out == parsed
    assert list(out) == list(table)
