"""Exception hierarchy for TOML-to-JSON conversion."""

from __future__ import annotations

from pathlib import Path


class TomlToJsonError(Exception):
    """Base class for all conversion errors.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error aborts a run.
    """

    exit_code: int = 1


class ConversionArgumentError(TomlToJsonError):
    """Invalid or incompatible command/API arguments."""

    exit_code = 2


class InvalidDurationFormatError(ConversionArgumentError):
    """Duration string does not match ``<digits><s|m|h|d>``."""

    def __init__(self, value: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f"Invalid duration '{value}'. Use an integer followed by s, m, h or d (e.g. 30d)."
        )
        self.value = value


class DurationOutOfRangeError(InvalidDurationFormatError):
    """Well-formed duration too large to represent."""

    def __init__(self, value: str) -> None:
        super().__init__(value, f"Duration '{value}' is out of range (at most 999999999d).")


class PathKindMismatchError(ConversionArgumentError):
    """Source and target paths disagree in kind (file vs directory)."""


class SourceNotFoundError(ConversionArgumentError):
    """Source path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"SOURCE does not exist: {path}")
        self.path = path


class DirectoryNotReadableError(TomlToJsonError):
    """Directory listing failed for a traversal root."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path


class SourceReadError(TomlToJsonError):
    """Source document could not be inspected or read."""


class TranscodeError(TomlToJsonError):
    """A single document could not be transcoded."""


class EncodingError(TranscodeError):
    """Source bytes are not valid UTF-8."""


class TomlParseError(TranscodeError):
    """Source text is not a valid TOML document."""


class UnrepresentableValueError(TranscodeError):
    """Parsed value has no valid JSON representation."""


class DocumentWriteError(TomlToJsonError):
    """Output document could not be written."""
