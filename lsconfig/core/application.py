import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import yaml

from lsconfig.cli.matches import ArgMatches
from lsconfig.cli.parser import parse_arguments
from lsconfig.config.defaults import DEFAULT_CONFIG_YAML
from lsconfig.config.document import ConfigDocument, load_document
from lsconfig.config.storage import ConfigStorage
from lsconfig.flags import ColorTheme, Flags
from lsconfig.icon import Icons
from lsconfig.meta.filetype import FileEntry
from lsconfig.services.logging.logging_service import setup_logging
from lsconfig.theme.loader import default_theme_path

logger = logging.getLogger(__name__)


def resolve_flags(matches: ArgMatches, storage: Optional[ConfigStorage], ignore_config: bool = False) -> Flags:
    """Merge arguments, the configuration document and defaults.

    A relative color theme path is anchored to the configuration directory.
    """
    document: Optional[ConfigDocument] = None
    if ignore_config:
        logger.debug("Configuration file ignored on request")
    else:
        document = load_document(storage)
    flags = Flags.configure_from(matches, document)
    theme_path = flags.color_theme.path
    if storage is not None and theme_path is not None:
        flags = replace(flags, color_theme=ColorTheme(storage.resolve(theme_path)))
    return flags


def _theme_path(args, storage: Optional[ConfigStorage]) -> Optional[Path]:
    if args.icon_theme_file:
        return Path(args.icon_theme_file).expanduser()
    return default_theme_path(storage)


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file)

    if args.print_default_config:
        sys.stdout.write(DEFAULT_CONFIG_YAML)
        return 0

    config_path = Path(args.config_file).expanduser() if args.config_file else None
    storage = ConfigStorage.locate(config_path)
    flags = resolve_flags(ArgMatches(args), storage, args.ignore_config)

    if args.print_config:
        yaml.safe_dump(flags.to_dict(), sys.stdout, allow_unicode=True, sort_keys=False)
        return 0

    tty = sys.stdout.isatty()
    icons = Icons.new(tty, flags.icons, _theme_path(args, storage))

    status = 0
    for name in args.files or ["."]:
        try:
            entry = FileEntry.from_path(name, dereference=flags.dereference)
        except OSError as exc:
            logger.error("%s: %s", name, exc.strerror or exc)
            status = 2
            continue
        sys.stdout.write(f"{icons.get(entry)}{name}\n")
    return status
