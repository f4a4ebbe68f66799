"""Unit tests for thin public wrapper modules."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

import tomltojson
from tomltojson import api as api_module
from tomltojson import application


def test_top_level_convert_forwards(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward top-level arguments to the API implementation."""
    called: dict[str, object] = {}

    def fake_impl(source: object, target: object, **kwargs: object) -> str:
        called.update(kwargs, source=source, target=target)
        return "report"

    monkeypatch.setattr(api_module, "convert_toml_to_json", fake_impl)

    out = tomltojson.convert_toml_to_json("in", "out", pretty=True, modified="1h", recursion=2)

    assert out == "report"
    assert called == {
        "source": "in",
        "target": "out",
        "pretty": True,
        "modified": "1h",
        "recursion": 2,
    }


def test_transcode_toml_accepts_text_and_bytes() -> None:
    """Transcode in-memory documents in both layouts."""
    assert tomltojson.transcode_toml("a = 1\n") == '{"a":1}'
    assert tomltojson.transcode_toml(b"a = 1\n", pretty=True) == '{\n  "a": 1\n}'


def test_api_converts_single_file(tmp_path: Path) -> None:
    """Run the full pipeline through the public API."""
    source = tmp_path / "app.toml"
    source.write_text("[server]\nport = 8080\n")

    report = tomltojson.convert_toml_to_json(source)

    assert report.converted == 1
    assert report.ok
    assert (tmp_path / "app.json").read_text() == '{"server":{"port":8080}}'


def test_application_wrappers_forward(tmp_path: Path) -> None:
    """Build options and requests through the lazy application wrappers."""
    options = application.build_conversion_options(modified=timedelta(hours=1))
    request = application.build_conversion_request(
        source_path=tmp_path, target_path=None, options=options
    )
    report = application.run_conversion(request)

    assert request.modified_threshold == timedelta(hours=1)
    assert report.converted == 0
    assert report.outcomes == ()
