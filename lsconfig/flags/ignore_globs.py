from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

import pathspec

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument

logger = logging.getLogger(__name__)


def compile_globs(patterns: Iterable[str]) -> pathspec.PathSpec:
    """Compile gitignore-style globs; invalid patterns raise ``ValueError``."""
    return pathspec.PathSpec.from_lines("gitwildmatch", list(patterns))


@dataclass(frozen=True)
class IgnoreGlobs:
    patterns: Tuple[str, ...] = ()
    spec: pathspec.PathSpec = field(
        default_factory=lambda: compile_globs(()), compare=False, repr=False
    )

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "IgnoreGlobs":
        patterns = tuple(patterns)
        return cls(patterns, compile_globs(patterns))

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["IgnoreGlobs"]:
        values = matches.values_of("ignore-glob")
        return None if values is None else cls.from_patterns(values)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["IgnoreGlobs"]:
        if document.ignore_globs is None:
            return None
        try:
            return cls.from_patterns(document.ignore_globs)
        except ValueError as exc:
            logger.error("%s: invalid ignore-globs pattern: %s", document.source, exc)
            return None

    @classmethod
    def default(cls) -> "IgnoreGlobs":
        return cls()

    def is_match(self, name: str) -> bool:
        return self.spec.match_file(name)


__all__ = ["IgnoreGlobs", "compile_globs"]
