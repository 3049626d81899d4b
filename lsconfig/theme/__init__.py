from .icon import ByFileType, IconTheme
from .loader import default_theme_path, load_icon_theme, read_theme_document

__all__ = [
    "ByFileType",
    "IconTheme",
    "default_theme_path",
    "load_icon_theme",
    "read_theme_document",
]
