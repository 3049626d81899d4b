from __future__ import annotations

from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument


class SymlinkArrow:
    """Text between a symlink and its target. Only set by the document."""

    @staticmethod
    def from_arguments(matches: ArgMatches) -> Optional[str]:
        return None

    @staticmethod
    def from_document(document: ConfigDocument) -> Optional[str]:
        return document.symlink_arrow

    @staticmethod
    def default() -> str:
        return "⇒"


__all__ = ["SymlinkArrow"]
