"""Shared pytest configuration, marker assignment and file fixtures."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_TOML = """\
title = "TOML Example"
version = 2

[owner]
name = "Tom Preston-Werner"
dob = 1979-05-27T07:32:00-08:00

[database]
enabled = true
ports = [8000, 8001, 8002]
temp_targets = { cpu = 79.5, case = 72.0 }
"""

DAY = 86400


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_toml() -> Callable[..., Path]:
    """Return a helper writing a TOML file, optionally backdated by ``age_days``."""

    def _write(path: Path, content: str = SAMPLE_TOML, age_days: float = 0) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if age_days:
            stamp = time.time() - age_days * DAY
            os.utime(path, (stamp, stamp))
        return path

    return _write
