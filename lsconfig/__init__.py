"""Layered option resolution and icon theming for directory listings."""

from .cli.matches import ArgMatches
from .config.document import ConfigDocument
from .flags import Flags
from .icon import Icons
from .meta.filetype import FileEntry
from .theme.icon import IconTheme

__version__ = "1.0.0"

__all__ = [
    "ArgMatches",
    "ConfigDocument",
    "Flags",
    "Icons",
    "FileEntry",
    "IconTheme",
]
