"""Locate the configuration file on disk.

Reads prefer the per-user data directory and fall back to the base directory
only when the per-user directory does not exist at all. Writes always go to
the per-user directory, creating it when needed.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from platformdirs import user_data_dir

from .errors import ConfigDirectoryUnavailable

LOGGER = logging.getLogger(__name__)
LOGGER.addHandler(logging.NullHandler())

APP_NAME = "sm64pc"

# Environment variable overrides (useful for tests and portable installs)
ENV_CONFIG_DIR = "SM64_CONFIG_DIR"
ENV_BASE_DIR = "SM64_BASE_DIR"

# rwxrwxr-x
DIR_MODE = 0o775

PathProvider = Callable[[], Path]


def is_frozen() -> bool:
    """Return True if running under a frozen bundle (e.g., PyInstaller)."""
    return bool(getattr(sys, "frozen", False))


def default_preferred_dir(app_name: str = APP_NAME) -> Path:
    """Return the per-user data directory for ``app_name``.

    Linux:   $XDG_DATA_HOME/sm64pc (~/.local/share/sm64pc)
    macOS:   ~/Library/Application Support/sm64pc
    Windows: %LOCALAPPDATA%\\sm64pc
    """
    override = os.getenv(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser()
    return Path(user_data_dir(appname=app_name, appauthor=False))


def default_base_dir() -> Path:
    """Return the executable directory when frozen, else the working directory."""
    override = os.getenv(ENV_BASE_DIR)
    if override:
        return Path(override).expanduser()
    if is_frozen():
        try:
            return Path(sys.executable).resolve().parent
        except OSError as exc:  # pragma: no cover - highly unlikely
            LOGGER.warning("Failed to resolve executable dir: %s", exc)
    return Path.cwd()


@dataclass(frozen=True)
class ResolvedPaths:
    preferred_dir: Path
    fallback_dir: Path

    @property
    def active_dir(self) -> Path:
        """Directory a read would use right now."""
        if self.preferred_dir.is_dir():
            return self.preferred_dir
        return self.fallback_dir


class PathResolver:
    """Decide where the configuration file is read from and written to."""

    def __init__(
        self,
        preferred_dir: Optional[PathProvider] = None,
        fallback_dir: Optional[PathProvider] = None,
    ) -> None:
        self._preferred_dir = preferred_dir or default_preferred_dir
        self._fallback_dir = fallback_dir or default_base_dir

    @classmethod
    def fixed(cls, preferred_dir: Path, fallback_dir: Path) -> "PathResolver":
        preferred, fallback = Path(preferred_dir), Path(fallback_dir)
        return cls(lambda: preferred, lambda: fallback)

    def resolve(self) -> ResolvedPaths:
        return ResolvedPaths(
            preferred_dir=Path(self._preferred_dir()),
            fallback_dir=Path(self._fallback_dir()),
        )

    def resolve_for_read(self, filename: str) -> Optional[Path]:
        """Return the file to load, or None when there is nothing to read.

        The fallback directory is consulted only when the preferred directory
        is missing; a preferred directory without the file yields None.
        """
        paths = self.resolve()
        if not paths.preferred_dir.is_dir():
            LOGGER.info("%s not found.", paths.preferred_dir)
            candidate = paths.fallback_dir / filename
        else:
            candidate = paths.preferred_dir / filename
        if candidate.is_file():
            return candidate
        return None

    def resolve_for_write(self, filename: str) -> Path:
        """Return the file to save to, creating the preferred directory if absent.

        Raises ConfigDirectoryUnavailable when the directory cannot be created.
        """
        paths = self.resolve()
        directory = paths.preferred_dir
        if not directory.is_dir():
            try:
                directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            except OSError as exc:
                LOGGER.error("Couldn't create config directory '%s': %s", directory, exc)
                raise ConfigDirectoryUnavailable(
                    f"Couldn't get config path '{directory}': {exc}"
                ) from exc
            LOGGER.debug("Created config directory %s", directory)
        return directory / filename


__all__ = [
    "APP_NAME",
    "ENV_BASE_DIR",
    "ENV_CONFIG_DIR",
    "PathResolver",
    "ResolvedPaths",
    "default_base_dir",
    "default_preferred_dir",
    "is_frozen",
]
