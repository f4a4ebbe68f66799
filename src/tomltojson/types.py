"""Shared type aliases and tags for conversion modules."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Literal

type JsonFormat = Literal["compact", "pretty"]
type OutcomeStatus = Literal["converted", "skipped_stale", "failed"]

type TomlScalar = str | int | float | bool | dt.datetime | dt.date | dt.time
type TomlValue = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
type TomlTable = dict[str, TomlValue]

SOURCE_EXTENSION = ".toml"
TARGET_EXTENSION = ".json"
MAX_RECURSION_DEPTH = 255


class PathKind(str, Enum):
    """Kind of a ``SOURCE``/``TARGET`` path.

    ``UNRESOLVED`` only exists while a target argument is being classified and
    is rejected once a request is built.
    """

    FILE = "file"
    DIRECTORY = "directory"
    UNRESOLVED = "unresolved"
