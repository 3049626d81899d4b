import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters.color_formatter import ColorFormatter
from ...utils.color_support import color_support


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
    force_color: Optional[bool] = None,
    preserve_existing_handlers: bool = False,
) -> None:
    """
    Route diagnostics to stderr and, optionally, to a rotating log file.

    Configuration problems are reported through this channel, so the default
    level is WARNING; ``verbose`` lowers it to DEBUG.

    Args:
        verbose: Enable debug logging if True
        log_file: Optional path to log file
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
        force_color: Force (True) or disable (False) colored output. ``None`` keeps
            automatic detection.
        preserve_existing_handlers: Keep handlers that are already installed on
            the root logger.
    """
    color_support.set_force_color(force_color)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not preserve_existing_handlers:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

    console_handler: Optional[logging.Handler] = None
    if preserve_existing_handlers:
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and getattr(handler, 'stream', None) in {sys.stdout, sys.stderr}:
                console_handler = handler
                break

    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColorFormatter())
        root_logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8',
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            ))
            # The file always records everything, whatever the console shows.
            file_handler.setLevel(logging.DEBUG)
            root_logger.addHandler(file_handler)
            root_logger.setLevel(logging.DEBUG)
            if not verbose:
                console_handler.setLevel(logging.WARNING)
        except OSError as e:
            logging.error(color_support.error(f"Failed to initialize log file: {e}"))

    if verbose:
        logging.debug(color_support.info("Verbose logging enabled"))
    color_mode = "forced" if force_color is not None else "auto"
    logging.debug(f"Color support: {color_support.supports_color()} ({color_mode})")
