"""Small helpers shared by the commands."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from .models import Package

_SORT_KEYS: dict[str, Callable[[Package], Any]] = {
    "name": lambda pkg: pkg.name,
    "usage_count": lambda pkg: pkg.usage_count,
    "last_used": lambda pkg: pkg.last_used,
    "installed_at": lambda pkg: pkg.installed_at,
}


def file_exists(filename: str | os.PathLike[str]) -> bool:
    """Return True if the path exists."""
    return os.path.exists(filename)


def sort_packages(
    packages: list[Package], sort_by: str, ascending: bool
) -> list[Package]:
    """Sort packages in place by a field name (unknown names sort by name)."""
    packages.sort(key=_SORT_KEYS.get(sort_by, _SORT_KEYS["name"]), reverse=not ascending)
    return packages