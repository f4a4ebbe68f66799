"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from tomltojson.types import JsonFormat


@dataclass(frozen=True)
class ConversionOptions:
    """Options supplied by the CLI or API caller."""

    json_format: JsonFormat = "compact"
    modified_threshold: timedelta | None = None
    recursion_depth: int = 0
