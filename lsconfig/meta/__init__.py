from .filetype import (
    BlockDevice,
    CharDevice,
    Directory,
    File,
    FileEntry,
    FileType,
    Pipe,
    Socket,
    Special,
    SymLink,
    extension_of,
    file_type_from_mode,
)

__all__ = [
    "BlockDevice",
    "CharDevice",
    "Directory",
    "File",
    "FileEntry",
    "FileType",
    "Pipe",
    "Socket",
    "Special",
    "SymLink",
    "extension_of",
    "file_type_from_mode",
]
