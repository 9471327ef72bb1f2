"""Persistent record of fetched packages, kept as JSON in the user config dir."""

from __future__ import annotations

import json
import os
import sys
from datetime import datetime
from pathlib import Path

from .models import Package

APP_DIR_NAME = "gobox"
PACKAGES_FILE_NAME = "packages.json"


class ConfigDirError(OSError):
    """The user configuration directory cannot be determined."""


def _user_config_dir() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise ConfigDirError("%AppData% is not defined")
        return Path(appdata)
    if sys.platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            raise ConfigDirError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            raise ConfigDirError("path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)
    home = os.environ.get("HOME", "")
    if not home:
        raise ConfigDirError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def get_config_dir() -> Path:
    """Return the gobox directory inside the user's configuration directory."""
    return _user_config_dir() / APP_DIR_NAME


class PackageStore:
    """Reads and writes the list of saved packages."""

    def __init__(self, config_dir: str | os.PathLike[str] | None = None) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else get_config_dir()

    def packages_file_path(self) -> Path:
        """Path of the JSON file holding the packages."""
        return self.config_dir / PACKAGES_FILE_NAME

    def init(self) -> None:
        """Create the config directory and an empty package list if missing."""
        self.config_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
        path = self.packages_file_path()
        if not path.exists():
            path.write_text("[]", encoding="utf-8")

    def load_packages(self) -> list[Package]:
        """Read every saved package; raises OSError or ValueError on bad data."""
        data = json.loads(self.packages_file_path().read_text(encoding="utf-8"))
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("packages file must hold a JSON array")
        return [Package.from_dict(entry) for entry in data]

    def find_package(self, name: str) -> Package | None:
        """Return the saved package with this name, or None."""
        return next((pkg for pkg in self.load_packages() if pkg.name == name), None)

    def save_package(self, package_name: str) -> None:
        """Record a use of a package, adding it if it is new."""
        packages = self.load_packages()
        now = datetime.now().astimezone()
        for pkg in packages:
            if pkg.name == package_name:
                pkg.usage_count += 1
                pkg.last_used = now
                break
        else:
            packages.append(
                Package(
                    name=package_name, usage_count=1, last_used=now, installed_at=now
                )
            )
        self.save_all_packages(packages)

    def remove_package(self, name: str) -> None:
        """Drop every saved entry with this name."""
        self.save_all_packages([pkg for pkg in self.load_packages() if pkg.name != name])

    def save_all_packages(self, packages: list[Package]) -> None:
        """Overwrite the packages file with the given list."""
        text = json.dumps([pkg.to_dict() for pkg in packages], indent=2, ensure_ascii=False)
        fd = os.open(self.packages_file_path(), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)