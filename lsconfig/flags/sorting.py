from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import choice_from_document, configure_from


class SortColumn(Enum):
    EXTENSION = "extension"
    NAME = "name"
    TIME = "time"
    SIZE = "size"
    VERSION = "version"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["SortColumn"]:
        # -t, -S, -X, -v and --sort share one destination; the last one given wins.
        value = matches.value_of("sort")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["SortColumn"]:
        if document.sorting is None:
            return None
        return choice_from_document(cls, document.sorting.column, "sorting/column", document)

    @classmethod
    def default(cls) -> "SortColumn":
        return cls.NAME


class SortOrder(Enum):
    DEFAULT = "default"
    REVERSE = "reverse"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["SortOrder"]:
        return cls.REVERSE if matches.is_present("reverse") else None

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["SortOrder"]:
        if document.sorting is None or document.sorting.reverse is None:
            return None
        return cls.REVERSE if document.sorting.reverse else cls.DEFAULT

    @classmethod
    def default(cls) -> "SortOrder":
        return cls.DEFAULT


class DirGrouping(Enum):
    FIRST = "first"
    LAST = "last"
    NONE = "none"

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["DirGrouping"]:
        value = matches.value_of("group-dirs")
        return None if value is None else cls(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["DirGrouping"]:
        if document.sorting is None:
            return None
        return choice_from_document(
            cls, document.sorting.dir_grouping, "sorting/dir-grouping", document
        )

    @classmethod
    def default(cls) -> "DirGrouping":
        return cls.NONE


@dataclass(frozen=True)
class Sorting:
    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE

    @classmethod
    def configure_from(
        cls, matches: ArgMatches, document: Optional[ConfigDocument] = None
    ) -> "Sorting":
        return cls(
            column=configure_from(SortColumn, matches, document),
            order=configure_from(SortOrder, matches, document),
            dir_grouping=configure_from(DirGrouping, matches, document),
        )


__all__ = ["SortColumn", "SortOrder", "DirGrouping", "Sorting"]
