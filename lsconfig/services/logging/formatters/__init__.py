from .color_formatter import ColorFormatter

__all__ = ["ColorFormatter"]
