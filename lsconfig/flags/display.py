from __future__ import annotations

from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document


class _DocumentDisplay(Enum):
    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"


class Display(Enum):
    """Which filesystem entries get listed."""

    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["Display"]:
        if matches.is_present("all"):
            return cls.ALL
        if matches.is_present("almost-all"):
            return cls.ALMOST_ALL
        if matches.is_present("directory-only"):
            return cls.DIRECTORY_ONLY
        return None

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["Display"]:
        # "visible-only" is the unconfigured behavior, not a document value.
        choice = choice_from_document(_DocumentDisplay, document.display, "display", document)
        return None if choice is None else cls(choice.value)

    @classmethod
    def default(cls) -> "Display":
        return cls.VISIBLE_ONLY


__all__ = ["Display"]
