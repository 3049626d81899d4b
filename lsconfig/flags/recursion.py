from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import configure_from


class _RecursionEnabled:
    @staticmethod
    def from_arguments(matches: ArgMatches) -> Optional[bool]:
        if matches.is_present("recursive") or matches.is_present("tree"):
            return True
        return None

    @staticmethod
    def from_document(document: ConfigDocument) -> Optional[bool]:
        if document.recursion is None:
            return None
        return document.recursion.enabled

    @staticmethod
    def default() -> bool:
        return False


class _RecursionDepth:
    # None at every layer means no limit.

    @staticmethod
    def from_arguments(matches: ArgMatches) -> Optional[int]:
        return matches.value_of("depth")

    @staticmethod
    def from_document(document: ConfigDocument) -> Optional[int]:
        if document.recursion is None:
            return None
        return document.recursion.depth

    @staticmethod
    def default() -> Optional[int]:
        return None


@dataclass(frozen=True)
class Recursion:
    enabled: bool = False
    depth: Optional[int] = None

    @classmethod
    def configure_from(
        cls, matches: ArgMatches, document: Optional[ConfigDocument] = None
    ) -> "Recursion":
        return cls(
            enabled=configure_from(_RecursionEnabled, matches, document),
            depth=configure_from(_RecursionDepth, matches, document),
        )


__all__ = ["Recursion"]
