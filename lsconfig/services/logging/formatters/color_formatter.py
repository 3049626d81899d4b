# lsconfig/services/logging/formatters/color_formatter.py

import logging
from typing import Any, Dict, Optional

from colorama import Fore

from lsconfig.utils.color_support import ColorSupport, color_support


class ColorFormatter(logging.Formatter):
    """
    Console formatter that colors the level name and the message by severity.
    """

    LEVEL_STYLES: Dict[str, Dict[str, Any]] = {
        'DEBUG': {'color': Fore.CYAN},
        'INFO': {'color': Fore.GREEN},
        'WARNING': {'color': Fore.YELLOW, 'bright': True},
        'ERROR': {'color': Fore.RED, 'bright': True},
        'CRITICAL': {'color': Fore.MAGENTA, 'bright': True},
    }

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        support: Optional[ColorSupport] = None,
    ):
        super().__init__(fmt or self._get_default_format(), datefmt)
        self._support = support or color_support

    @staticmethod
    def _get_default_format() -> str:
        return 'lsconfig: %(levelname)s: %(message)s'

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the record, coloring it when the console supports it.

        The record is restored afterwards so other handlers see it unchanged.
        """
        orig_msg = record.msg
        orig_levelname = record.levelname

        try:
            if self._support.supports_color():
                style = self.LEVEL_STYLES.get(record.levelname, {})
                record.levelname = self._support.colored(
                    record.levelname,
                    color=style.get('color'),
                    bright=style.get('bright', False),
                )
                if isinstance(record.msg, str) and style.get('bright'):
                    record.msg = self._support.colored(record.msg, style.get('color'))
            return super().format(record)
        finally:
            record.msg = orig_msg
            record.levelname = orig_levelname
