from __future__ import annotations

from .document import (
    ColorSection,
    ConfigDocument,
    IconsSection,
    RecursionSection,
    SortingSection,
    load_document,
)
from .exceptions import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
    ThemeError,
)
from .storage import ConfigStorage

__all__ = [
    "ConfigDocument",
    "ColorSection",
    "IconsSection",
    "RecursionSection",
    "SortingSection",
    "ConfigStorage",
    "load_document",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigValidationError",
    "ThemeError",
]
