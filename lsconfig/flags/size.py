from __future__ import annotations

from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document


class SizeFlag(Enum):
    """Format of the size column."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["SizeFlag"]:
        value = matches.value_of("size")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["SizeFlag"]:
        return choice_from_document(cls, document.size, "size", document)

    @classmethod
    def default(cls) -> "SizeFlag":
        return cls.DEFAULT


__all__ = ["SizeFlag"]
