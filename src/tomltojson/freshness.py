"""Modification-time eligibility checks for source documents."""

from __future__ import annotations

import re
import time
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path

from tomltojson.errors import DurationOutOfRangeError, InvalidDurationFormatError

_DURATION_PATTERN = re.compile(r"([0-9]+)([smhd])")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> timedelta:
    """Parse a ``--modified`` threshold such as ``30d`` or ``90s``.

    Parameters
    ----------
    value : str
        Integer immediately followed by one unit suffix: ``s`` (seconds),
        ``m`` (minutes), ``h`` (hours) or ``d`` (days).

    Returns
    -------
    timedelta
        Threshold duration.

    Raises
    ------
    InvalidDurationFormatError
        If ``value`` has any other shape (fractions, combined units,
        unknown suffix, trailing characters).
    DurationOutOfRangeError
        If the duration is too large for ``timedelta``.
    """
    match = _DURATION_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidDurationFormatError(value)
    amount, unit = match.groups()
    try:
        return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])
    except (OverflowError, ValueError) as exc:
        # ValueError: digit strings past the int conversion limit.
        raise DurationOutOfRangeError(value) from exc


def file_age(path: Path, now: Callable[[], float] = time.time) -> timedelta:
    """Return time elapsed since ``path`` was last modified.

    A modification time in the future counts as age zero.
    """
    elapsed = now() - path.stat().st_mtime
    return timedelta(seconds=max(elapsed, 0.0))


def is_eligible(age: timedelta, threshold: timedelta | None) -> bool:
    """Return ``True`` when a file of ``age`` was modified within ``threshold``.

    The comparison is strict: a file exactly as old as the threshold is not
    eligible. Without a threshold every file is eligible.
    """
    if threshold is None:
        return True
    return max(age, timedelta(0)) < threshold
