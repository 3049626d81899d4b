"""Per-entry icon lookup.

The glyph is chosen in a fixed order, first match wins:

1. icons disabled: empty string;
2. symlinks, sockets, pipes, devices and other special files: the category
   glyph, whatever the name;
3. the lowercase full name in the by-name table;
4. the lowercase extension in the by-extension table;
5. the category glyph (directory, executable or plain file).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .flags.icons import IconFlags, IconOption
from .meta.filetype import TYPE_DEFINED, FileEntry
from .theme.icon import IconTheme
from .theme.loader import load_icon_theme

# Windows reports every file as executable.
EXEC_BIT = os.name != "nt"


def icons_enabled(when: IconOption, tty: bool) -> bool:
    if when is IconOption.NEVER:
        return False
    if when is IconOption.AUTO:
        return tty
    return True


class Icons:
    def __init__(self, theme: Optional[IconTheme], separator: str = " ") -> None:
        self._theme = theme
        self._separator = separator

    @classmethod
    def new(
        cls,
        tty: bool,
        flags: IconFlags,
        theme_path: Optional[Path] = None,
    ) -> "Icons":
        theme = load_icon_theme(flags.theme, theme_path) if icons_enabled(flags.when, tty) else None
        return cls(theme, flags.separator)

    @property
    def theme(self) -> Optional[IconTheme]:
        return self._theme

    @property
    def separator(self) -> str:
        return self._separator

    def glyph(self, entry: FileEntry) -> Optional[str]:
        """The bare glyph for ``entry``, or ``None`` when icons are off."""
        theme = self._theme
        if theme is None:
            return None
        if isinstance(entry.file_type, TYPE_DEFINED):
            return theme.filetype.glyph_for(entry.file_type, EXEC_BIT)
        icon = theme.name.get(entry.name.lower())
        if icon is not None:
            return icon
        if entry.extension is not None:
            icon = theme.extension.get(entry.extension.lower())
            if icon is not None:
                return icon
        return theme.filetype.glyph_for(entry.file_type, EXEC_BIT)

    def get(self, entry: FileEntry) -> str:
        icon = self.glyph(entry)
        return "" if icon is None else f"{icon}{self._separator}"


__all__ = ["Icons", "icons_enabled", "EXEC_BIT"]
