from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .defaults import CONF_DIR, CONF_FILE_NAME
from .exceptions import ConfigIOError

logger = logging.getLogger(__name__)


class ConfigStorage:
    """Filesystem location and reading of the configuration document."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = (path or self._determine_default_path()).expanduser()

    @staticmethod
    def _determine_default_path() -> Path:
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        else:
            xdg_home = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg_home) if xdg_home else Path.home() / ".config"
        return base / CONF_DIR / CONF_FILE_NAME

    @classmethod
    def locate(cls, override: Optional[Path] = None) -> Optional["ConfigStorage"]:
        """Return storage for ``override`` or for the platform location.

        ``None`` means the platform location could not be determined; the
        failure has already been reported.
        """
        if override is not None:
            return cls(Path(override))
        try:
            return cls()
        except (OSError, RuntimeError, KeyError) as exc:
            logger.error("Can not open config file: %s", exc)
            return None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config_dir(self) -> Path:
        return self._path.parent

    def resolve(self, candidate: Path) -> Path:
        """Anchor a relative path to the configuration directory."""
        candidate = Path(candidate).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.config_dir / candidate

    def read_text(self) -> str:
        """Read the document. ``FileNotFoundError`` propagates untouched."""
        try:
            return self._path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            raise
        except OSError as exc:
            raise ConfigIOError(f"bad config file: {self._path}, {exc}") from exc


__all__ = ["ConfigStorage"]
