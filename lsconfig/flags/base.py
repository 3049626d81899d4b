"""The three-layer resolution contract shared by every option.

Each option knows how to read itself from the invocation arguments, from the
configuration document and what its built-in default is. ``configure_from``
walks those layers in that order and keeps the first value found.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Type, TypeVar

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
E = TypeVar("E", bound=Enum)


class Configurable(Protocol[T_co]):
    def from_arguments(self, matches: ArgMatches) -> Optional[T_co]:
        ...

    def from_document(self, document: ConfigDocument) -> Optional[T_co]:
        ...

    def default(self) -> T_co:
        ...


def configure_from(
    option: Configurable[T],
    matches: ArgMatches,
    document: Optional[ConfigDocument] = None,
) -> T:
    value = option.from_arguments(matches)
    if value is not None:
        return value
    if document is not None:
        value = option.from_document(document)
        if value is not None:
            return value
    return option.default()


def choice_from_document(
    enum_cls: Type[E],
    value: Optional[str],
    key: str,
    document: ConfigDocument,
) -> Optional[E]:
    """Map a document string onto ``enum_cls`` by value, reporting misses."""
    if value is None:
        return None
    for member in enum_cls:
        if member.value == value:
            return member
    allowed = ", ".join(str(member.value) for member in enum_cls)
    logger.error(
        "%s: %s can only be one of %s, but got %s",
        document.source,
        key,
        allowed,
        value,
    )
    return None


@dataclass(frozen=True)
class Switch:
    """A boolean option: a presence flag on the command line, a bool in the
    document and ``False`` by default."""

    argument: str
    field: str

    def from_arguments(self, matches: ArgMatches) -> Optional[bool]:
        return True if matches.is_present(self.argument) else None

    def from_document(self, document: ConfigDocument) -> Optional[bool]:
        return getattr(document, self.field)

    def default(self) -> bool:
        return False


__all__ = ["Configurable", "configure_from", "choice_from_document", "Switch"]
