"""Expose the PayLinq package version to the API and health checks."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "paylinq"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"

_SECTION_PATTERN = re.compile(r"^\[(?P<name>[^\]]+)\]$")
_VERSION_PATTERN = re.compile(r'^version\s*=\s*"(?P<version>[^"]+)"')


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version or the checkout's declared one."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return read_declared_version(PYPROJECT_PATH)


def read_declared_version(pyproject_path: Path) -> str:
    """Read ``[project].version`` from ``pyproject_path``.

    Source checkouts that were never installed (tests run straight from the
    repository) have no distribution metadata, so the project file is the
    only place the version is recorded.
    """

    if not pyproject_path.exists():
        raise RuntimeError(f"Unable to locate project metadata at {pyproject_path}")

    in_project = False
    for raw_line in pyproject_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        section = _SECTION_PATTERN.match(line)
        if section:
            in_project = section.group("name") == "project"
            continue
        if not in_project:
            continue
        match = _VERSION_PATTERN.match(line)
        if match:
            return match.group("version")

    raise RuntimeError("Unable to determine project version from pyproject.toml")


__all__ = ["get_project_version", "read_declared_version"]
