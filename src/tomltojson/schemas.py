"""Pydantic schemas for runtime validation of conversion requests."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tomltojson.types import MAX_RECURSION_DEPTH, JsonFormat, PathKind


class ConversionRequest(BaseModel):
    """Validated, immutable description of one conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    target_path: Path
    path_kind: PathKind
    recursion_depth: int = Field(default=0, ge=0, le=MAX_RECURSION_DEPTH)
    modified_threshold: timedelta | None = None
    json_format: JsonFormat = "compact"

    @field_validator("path_kind")
    @classmethod
    def _validate_path_kind(cls, value: PathKind) -> PathKind:
        if value is PathKind.UNRESOLVED:
            raise ValueError("path_kind must be resolved to a file or directory.")
        return value

    @field_validator("modified_threshold")
    @classmethod
    def _validate_threshold(cls, value: timedelta | None) -> timedelta | None:
        if value is not None and value < timedelta(0):
            raise ValueError("modified_threshold cannot be negative.")
        return value
