from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config.defaults import ICON_THEME_FILE_NAME
from ..config.exceptions import ThemeError
from ..config.storage import ConfigStorage
from ..config.validation import theme_field_errors
from ..flags.icons import IconThemeChoice
from .icon import IconTheme

logger = logging.getLogger(__name__)


def default_theme_path(storage: Optional[ConfigStorage]) -> Optional[Path]:
    """``icons.yaml`` beside the configuration file."""
    if storage is None:
        return None
    return storage.config_dir / ICON_THEME_FILE_NAME


def read_theme_document(path: Path) -> Optional[Dict[str, Any]]:
    """Parse an icon theme document.

    Returns ``None`` when the file does not exist. Raises :class:`ThemeError`
    for anything unreadable, unparsable or of the wrong shape.
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ThemeError(f"bad icon theme file: {path}, {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeError(f"icon theme file format error: {path}, {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeError(f"icon theme file format error: {path}, root must be a mapping")

    errors = theme_field_errors(data)
    if errors:
        details = "; ".join(str(error) for error in errors)
        raise ThemeError(f"icon theme file format error: {path}, {details}")
    return data


def load_icon_theme(choice: IconThemeChoice, path: Optional[Path] = None) -> IconTheme:
    """Build the icon table for ``choice``.

    ``unicode`` is always the compiled-in table. ``fancy`` is the compiled-in
    table overlaid by the document at ``path`` when it exists and is valid.
    """
    if choice is IconThemeChoice.UNICODE:
        return IconTheme.unicode()

    base = IconTheme.fancy()
    if path is None:
        return base
    try:
        document = read_theme_document(path)
    except ThemeError as exc:
        logger.error("%s", exc)
        return base
    if document is None:
        logger.debug("No icon theme file at %s", path)
        return base
    logger.debug("Applying icon theme overrides from %s", path)
    return base.overlay(document)


__all__ = ["default_theme_path", "read_theme_document", "load_icon_theme"]
