from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from ..config.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class Block(Enum):
    PERMISSION = "permission"
    USER = "user"
    GROUP = "group"
    CONTEXT = "context"
    SIZE = "size"
    SIZE_VALUE = "size_value"
    DATE = "date"
    NAME = "name"
    INODE = "inode"
    LINKS = "links"

    @classmethod
    def parse(cls, value: str) -> "Block":
        try:
            return cls(value)
        except ValueError:
            raise ConfigValidationError(f"Not a valid 'blocks' value: {value}") from None


def parse_blocks(values: Iterable[str]) -> Tuple[Block, ...]:
    blocks = tuple(Block.parse(value) for value in values)
    if not blocks:
        raise ConfigValidationError("'blocks' must name at least one column")
    return blocks


@dataclass(frozen=True)
class Blocks:
    """The columns of the long and tree layouts, in display order."""

    items: Tuple[Block, ...]

    @classmethod
    def from_arguments(cls, matches: ArgMatches) -> Optional["Blocks"]:
        values = matches.values_of("blocks")
        if values is None:
            return None
        return cls(tuple(value if isinstance(value, Block) else Block(value) for value in values))

    @classmethod
    def from_document(cls, document: ConfigDocument) -> Optional["Blocks"]:
        if document.blocks is None:
            return None
        try:
            return cls(parse_blocks(document.blocks))
        except ConfigValidationError as exc:
            logger.error("%s: %s", document.source, exc)
            return None

    @classmethod
    def default(cls) -> "Blocks":
        return cls(
            (
                Block.PERMISSION,
                Block.USER,
                Block.GROUP,
                Block.SIZE,
                Block.DATE,
                Block.NAME,
            )
        )


__all__ = ["Block", "Blocks", "parse_blocks"]
