"""Source/target path classification and mirroring."""

from __future__ import annotations

import os
from pathlib import Path

from tomltojson.errors import PathKindMismatchError, SourceNotFoundError
from tomltojson.types import TARGET_EXTENSION, PathKind

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def json_name_for(path: Path) -> str:
    """Return the output file name for a source document."""
    return f"{path.stem}{TARGET_EXTENSION}"


def classify_path(path: Path) -> PathKind:
    """Classify an existing source path.

    Raises
    ------
    SourceNotFoundError
        If ``path`` does not exist.
    """
    if path.is_file():
        return PathKind.FILE
    if path.is_dir():
        return PathKind.DIRECTORY
    raise SourceNotFoundError(path)


def _classify_target(target_arg: str | os.PathLike[str], source_kind: PathKind) -> PathKind:
    target = Path(target_arg)
    if target.is_dir():
        return PathKind.DIRECTORY
    if target.exists():
        return PathKind.FILE
    # Not on disk yet: infer intent from the argument and the source.
    if str(target_arg).endswith(_SEPARATORS) or source_kind is PathKind.DIRECTORY:
        return PathKind.DIRECTORY
    return PathKind.FILE


def resolve_target(
    source_path: Path,
    source_kind: PathKind,
    target_arg: str | os.PathLike[str] | None = None,
) -> tuple[Path, PathKind]:
    """Resolve the output path for ``source_path``.

    If ``SOURCE`` is a file and ``TARGET`` is:

    - absent: ``SOURCE`` with its extension replaced by ``.json``;
    - a file: ``TARGET`` as given;
    - a directory: ``<TARGET>/<SOURCE stem>.json``.

    If ``SOURCE`` is a directory and ``TARGET`` is:

    - absent: ``SOURCE`` itself (output is written beside the input);
    - a directory: ``TARGET`` as given;
    - a file: rejected.

    Parameters
    ----------
    source_path : Path
        Existing source path.
    source_kind : PathKind
        Result of :func:`classify_path` for ``source_path``.
    target_arg : str | os.PathLike | None, default=None
        Raw ``TARGET`` argument.

    Returns
    -------
    tuple[Path, PathKind]
        Resolved target path and its kind (always equal to ``source_kind``).

    Raises
    ------
    PathKindMismatchError
        If a directory source is paired with a file target.
    """
    if source_kind is PathKind.UNRESOLVED:
        raise PathKindMismatchError("SOURCE kind must be resolved before the target.")

    if target_arg is None:
        if source_kind is PathKind.FILE:
            return source_path.with_name(json_name_for(source_path)), PathKind.FILE
        return source_path, PathKind.DIRECTORY

    target_path = Path(target_arg)
    target_kind = _classify_target(target_arg, source_kind)

    if source_kind is PathKind.FILE:
        if target_kind is PathKind.DIRECTORY:
            return target_path / json_name_for(source_path), PathKind.FILE
        return target_path, PathKind.FILE

    if target_kind is PathKind.FILE:
        raise PathKindMismatchError(
            f"SOURCE folder must have a folder as a TARGET (got file {target_path})."
        )
    return target_path, PathKind.DIRECTORY


def mirror(source_root: Path, target_root: Path, discovered: Path) -> Path:
    """Map ``discovered`` (under ``source_root``) onto ``target_root``.

    Raises
    ------
    ValueError
        If ``discovered`` is not inside ``source_root``.
    """
    return target_root / discovered.relative_to(source_root)
