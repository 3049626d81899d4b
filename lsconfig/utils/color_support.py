# lsconfig/utils/color_support.py

import os
import sys
from functools import lru_cache
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console


class ColorSupport:
    """Decides whether diagnostics written to a stream may carry ANSI colors."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._force_color: Optional[bool] = self._get_env_force_color()
        just_fix_windows_console()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @staticmethod
    def _get_env_force_color() -> Optional[bool]:
        if os.environ.get('NO_COLOR') is not None:
            return False
        if os.environ.get('FORCE_COLOR', '').lower() in ('1', 'true', 'yes'):
            return True
        return None

    def set_force_color(self, force: Optional[bool]) -> None:
        """Force or reset color detection.

        Args:
            force: ``True`` to force-enable colors, ``False`` to disable them and
                ``None`` to fall back to environment-based detection.
        """
        if force not in (True, False, None):
            raise ValueError("force must be True, False or None")

        target = self._get_env_force_color() if force is None else force
        if target == self._force_color:
            return
        self._force_color = target
        self.supports_color.cache_clear()

    @lru_cache(maxsize=1)
    def supports_color(self) -> bool:
        if self._force_color is not None:
            return self._force_color
        if 'dumb' in os.environ.get('TERM', '').lower():
            return False
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def colored(self, text: str, color: Optional[str] = None, bright: bool = False) -> str:
        """Wrap ``text`` in color codes when supported."""
        if not self.supports_color() or not text:
            return text
        prefix = (Style.BRIGHT if bright else '') + (color or '')
        return f"{prefix}{text}{Style.RESET_ALL}"

    def error(self, text: str) -> str:
        return self.colored(text, Fore.RED)

    def warning(self, text: str) -> str:
        return self.colored(text, Fore.YELLOW)

    def info(self, text: str) -> str:
        return self.colored(text, Fore.CYAN)


# Global instance
color_support = ColorSupport()
