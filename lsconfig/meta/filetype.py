"""File type categories and the per-entry facts needed to pick an icon."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Directory:
    pass


@dataclass(frozen=True)
class SymLink:
    is_dir: bool = False


@dataclass(frozen=True)
class Socket:
    pass


@dataclass(frozen=True)
class Pipe:
    pass


@dataclass(frozen=True)
class CharDevice:
    pass


@dataclass(frozen=True)
class BlockDevice:
    pass


@dataclass(frozen=True)
class Special:
    pass


@dataclass(frozen=True)
class File:
    executable: bool = False


FileType = Union[Directory, SymLink, Socket, Pipe, CharDevice, BlockDevice, Special, File]

# Categories whose icon depends on the type alone, never on the name.
TYPE_DEFINED = (SymLink, Socket, Pipe, CharDevice, BlockDevice, Special)


def file_type_from_mode(mode: int, target_is_dir: bool = False) -> FileType:
    """Classify an ``lstat`` mode.

    ``target_is_dir`` is only consulted for symbolic links.
    """
    if stat.S_ISDIR(mode):
        return Directory()
    if stat.S_ISLNK(mode):
        return SymLink(is_dir=target_is_dir)
    if stat.S_ISSOCK(mode):
        return Socket()
    if stat.S_ISFIFO(mode):
        return Pipe()
    if stat.S_ISCHR(mode):
        return CharDevice()
    if stat.S_ISBLK(mode):
        return BlockDevice()
    if stat.S_ISREG(mode):
        return File(executable=bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)))
    return Special()


def extension_of(name: str) -> Optional[str]:
    """Text after the last dot, unless that dot starts the name.

    ``archive.tar.gz`` -> ``gz``; ``.gitignore`` and ``Makefile`` -> ``None``.
    """
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1:] or None


@dataclass(frozen=True)
class FileEntry:
    name: str
    file_type: FileType
    extension: Optional[str] = None

    @classmethod
    def new(cls, name: str, file_type: FileType) -> "FileEntry":
        return cls(name=name, file_type=file_type, extension=extension_of(name))

    @classmethod
    def from_path(cls, path: Union[str, Path], dereference: bool = False) -> "FileEntry":
        path = Path(path)
        st = path.stat() if dereference else path.lstat()
        target_is_dir = stat.S_ISLNK(st.st_mode) and path.is_dir()
        name = path.name or str(path)
        return cls.new(name, file_type_from_mode(st.st_mode, target_is_dir))


__all__ = [
    "Directory",
    "SymLink",
    "Socket",
    "Pipe",
    "CharDevice",
    "BlockDevice",
    "Special",
    "File",
    "FileType",
    "TYPE_DEFINED",
    "file_type_from_mode",
    "extension_of",
    "FileEntry",
]
