from .color_support import ColorSupport, color_support

__all__ = ["ColorSupport", "color_support"]
