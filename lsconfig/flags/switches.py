from __future__ import annotations

from .base import Switch

Classic = Switch("classic", "classic")
Dereference = Switch("dereference", "dereference")
Indicators = Switch("classify", "indicators")
NoSymlink = Switch("no-symlink", "no_symlink")
TotalSize = Switch("total-size", "total_size")

__all__ = ["Classic", "Dereference", "Indicators", "NoSymlink", "TotalSize"]
