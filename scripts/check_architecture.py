#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/tomltojson"

# Layer -> top-level modules it must not import.
BANNED_IMPORTS: dict[str, set[str]] = {
    "application": {"typer", "tomllib", "json", "tomltojson.cli"},
    "adapters": {"typer", "pydantic", "tomltojson.application", "tomltojson.cli"},
    "infrastructure": {"typer", "pydantic", "tomltojson.application", "tomltojson.cli"},
    "cli": {"tomllib", "json", "tomltojson.adapters", "tomltojson.infrastructure"},
}


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    found: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            found.add(node.module)
    return found


def _violations(path: Path, banned: set[str]) -> list[str]:
    return sorted(
        module
        for module in _imported_modules(path)
        if any(module == name or module.startswith(f"{name}.") for name in banned)
    )


def check(package: Path = PACKAGE) -> list[str]:
    """Return one message per forbidden cross-layer import."""
    problems: list[str] = []
    for layer, banned in BANNED_IMPORTS.items():
        for path in sorted((package / layer).glob("*.py")):
            for module in _violations(path, banned):
                problems.append(f"{path.relative_to(package)} imports '{module}'")
    return problems


def main() -> None:
    """Run repository architecture boundary checks."""
    problems = check()
    if problems:
        raise SystemExit("Architecture violations:\n" + "\n".join(f"- {p}" for p in problems))
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
