from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document, configure_from


class IconOption(Enum):
    """When to print icons."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["IconOption"]:
        value = matches.value_of("icon")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["IconOption"]:
        if document.icons is None:
            return None
        return choice_from_document(cls, document.icons.when, "icons/when", document)

    @classmethod
    def default(cls) -> "IconOption":
        return cls.AUTO


class IconThemeChoice(Enum):
    """Which built-in glyph set to start from."""

    FANCY = "fancy"
    UNICODE = "unicode"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["IconThemeChoice"]:
        value = matches.value_of("icon-theme")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["IconThemeChoice"]:
        if document.icons is None:
            return None
        return choice_from_document(cls, document.icons.theme, "icons/theme", document)

    @classmethod
    def default(cls) -> "IconThemeChoice":
        return cls.FANCY


class IconSeparator:
    """Text between the glyph and the name. Only configurable in the document."""

    @staticmethod
    def from_arguments(matches: ArgMatches) -> Optional[str]:
        return None

    @staticmethod
    def from_document(document: ConfigDocument) -> Optional[str]:
        if document.icons is None:
            return None
        return document.icons.separator

    @staticmethod
    def default() -> str:
        return " "


@dataclass(frozen=True)
class IconFlags:
    when: IconOption = IconOption.AUTO
    theme: IconThemeChoice = IconThemeChoice.FANCY
    separator: str = " "

    @classmethod
    def configure_from(
        cls, matches: ArgMatches, document: Optional[ConfigDocument] = None
    ) -> "IconFlags":
        return cls(
            when=configure_from(IconOption, matches, document),
            theme=configure_from(IconThemeChoice, matches, document),
            separator=configure_from(IconSeparator, matches, document),
        )


__all__ = ["IconOption", "IconThemeChoice", "IconSeparator", "IconFlags"]
