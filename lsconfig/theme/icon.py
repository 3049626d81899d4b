from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..meta.filetype import (
    BlockDevice,
    CharDevice,
    Directory,
    File,
    FileType,
    Pipe,
    Socket,
    Special,
    SymLink,
)
from .glyphs import (
    FANCY_BY_EXTENSION,
    FANCY_BY_FILETYPE,
    FANCY_BY_NAME,
    UNICODE_BY_FILETYPE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByFileType:
    """One glyph per file type category. Every field is required."""

    dir: str
    file: str
    pipe: str
    socket: str
    executable: str
    device_char: str
    device_block: str
    special: str
    symlink_dir: str
    symlink_file: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "ByFileType":
        return cls(**{f.name: data[f.name.replace("_", "-")] for f in fields(cls)})

    def overlay(self, overrides: Mapping[str, str]) -> "ByFileType":
        known = {f.name for f in fields(self)}
        changes: Dict[str, str] = {}
        for key, glyph in overrides.items():
            attr = str(key).replace("-", "_")
            if attr in known:
                changes[attr] = glyph
            else:
                logger.debug("Ignoring unknown icons-by-filetype key: %s", key)
        return replace(self, **changes)

    def glyph_for(self, file_type: FileType, exec_bit: bool = True) -> str:
        """Category glyph. ``exec_bit`` is false where the platform has none."""
        if isinstance(file_type, Directory):
            return self.dir
        if isinstance(file_type, File):
            return self.executable if exec_bit and file_type.executable else self.file
        if isinstance(file_type, SymLink):
            return self.symlink_dir if file_type.is_dir else self.symlink_file
        if isinstance(file_type, Socket):
            return self.socket
        if isinstance(file_type, Pipe):
            return self.pipe
        if isinstance(file_type, CharDevice):
            return self.device_char
        if isinstance(file_type, BlockDevice):
            return self.device_block
        if isinstance(file_type, Special):
            return self.special
        raise TypeError(f"Unknown file type: {file_type!r}")


def _lowercase_keys(table: Optional[Mapping[Any, str]], strip_dot: bool = False) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, glyph in (table or {}).items():
        key = str(key).lower()
        if strip_dot:
            key = key.lstrip(".")
        result[key] = glyph
    return result


@dataclass(frozen=True)
class IconTheme:
    """Immutable glyph lookup table shared by every icon lookup."""

    filetype: ByFileType
    name: Mapping[str, str]
    extension: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", MappingProxyType(dict(self.name)))
        object.__setattr__(self, "extension", MappingProxyType(dict(self.extension)))

    @classmethod
    def fancy(cls) -> "IconTheme":
        return cls(
            filetype=ByFileType.from_mapping(FANCY_BY_FILETYPE),
            name=FANCY_BY_NAME,
            extension=FANCY_BY_EXTENSION,
        )

    @classmethod
    def unicode(cls) -> "IconTheme":
        return cls(
            filetype=ByFileType.from_mapping(UNICODE_BY_FILETYPE),
            name={},
            extension={},
        )

    def overlay(self, document: Mapping[str, Any]) -> "IconTheme":
        """Replace glyphs key by key; keys the document omits keep this table's glyph."""
        return IconTheme(
            filetype=self.filetype.overlay(document.get("icons-by-filetype") or {}),
            name={**self.name, **_lowercase_keys(document.get("icons-by-name"))},
            extension={
                **self.extension,
                **_lowercase_keys(document.get("icons-by-extension"), strip_dot=True),
            },
        )


__all__ = ["ByFileType", "IconTheme"]
