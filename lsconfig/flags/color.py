from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document


class ColorOption(Enum):
    """When to colorize the output."""

    NEVER = "never"
    AUTO = "auto"
    ALWAYS = "always"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["ColorOption"]:
        value = matches.value_of("color")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["ColorOption"]:
        if document.color is None:
            return None
        return choice_from_document(cls, document.color.when, "color/when", document)

    @classmethod
    def default(cls) -> "ColorOption":
        return cls.AUTO

    def enabled(self, tty: bool) -> bool:
        if self is ColorOption.AUTO:
            return tty
        return self is ColorOption.ALWAYS


@dataclass(frozen=True)
class ColorTheme:
    """Location of a color theme file.

    Only the path is resolved here; ``None`` selects the built-in colors.
    ``resolve_flags`` anchors a relative path to the configuration directory.
    """

    path: Optional[Path] = None

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["ColorTheme"]:
        value = matches.value_of("color-theme")
        return None if value is None else cls(Path(value))

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["ColorTheme"]:
        if document.color is None or document.color.theme is None:
            return None
        return cls(Path(document.color.theme))

    @classmethod
    def default(cls) -> "ColorTheme":
        return cls()


__all__ = ["ColorOption", "ColorTheme"]
