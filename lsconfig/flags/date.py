from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument

logger = logging.getLogger(__name__)


class DateKind(Enum):
    DATE = "date"
    RELATIVE = "relative"
    FORMATTED = "formatted"


def parse_date_value(value: str) -> Optional["DateFlag"]:
    """Parse ``date``, ``relative`` or ``+<strftime format>``."""
    if value == "date":
        return DateFlag(DateKind.DATE)
    if value == "relative":
        return DateFlag(DateKind.RELATIVE)
    if value.startswith("+"):
        fmt = value[1:]
        try:
            datetime.now().strftime(fmt)
        except ValueError:
            return None
        return DateFlag(DateKind.FORMATTED, fmt)
    return None


@dataclass(frozen=True)
class DateFlag:
    kind: DateKind = DateKind.DATE
    fmt: Optional[str] = None

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["DateFlag"]:
        value = matches.value_of("date")
        return None if value is None else parse_date_value(value)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["DateFlag"]:
        if document.date is None:
            return None
        parsed = parse_date_value(document.date)
        if parsed is None:
            logger.error(
                "%s: Not a valid date value: %s. "
                "Possible values are date, relative or +<date_format>",
                document.source,
                document.date,
            )
        return parsed

    @classmethod
    def default(cls) -> "DateFlag":
        return cls(DateKind.DATE)


__all__ = ["DateKind", "DateFlag", "parse_date_value"]
