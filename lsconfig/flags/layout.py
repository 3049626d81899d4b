from __future__ import annotations

from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document


class Layout(Enum):
    GRID = "grid"
    TREE = "tree"
    ONELINE = "oneline"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["Layout"]:
        if matches.is_present("tree"):
            return cls.TREE
        if matches.is_present("long") or matches.is_present("oneline"):
            return cls.ONELINE
        return None

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["Layout"]:
        return choice_from_document(cls, document.layout, "layout", document)

    @classmethod
    def default(cls) -> "Layout":
        return cls.GRID


__all__ = ["Layout"]
