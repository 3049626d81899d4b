import argparse
from typing import List, Optional

from lsconfig.flags.blocks import parse_blocks
from lsconfig.flags.color import ColorOption
from lsconfig.flags.date import parse_date_value
from lsconfig.flags.icons import IconOption, IconThemeChoice
from lsconfig.flags.ignore_globs import compile_globs
from lsconfig.flags.size import SizeFlag
from lsconfig.flags.sorting import DirGrouping, SortColumn
from lsconfig.config.exceptions import ConfigValidationError


def _choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"depth must be a positive integer, got {value}")
    return number


def _date(value: str) -> str:
    if parse_date_value(value) is None:
        raise argparse.ArgumentTypeError(
            f"invalid date value {value!r}; expected date, relative or +<date_format>"
        )
    return value


def _blocks(value: str) -> List[str]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    try:
        parse_blocks(names)
    except ConfigValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return names


def _glob(value: str) -> str:
    try:
        compile_globs([value])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid glob {value!r}: {exc}") from None
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsconfig",
        description="Resolve listing options and print entries with their icons.",
        epilog=(
            "Examples:\n"
            "  lsconfig --icon always src setup.py\n"
            "  lsconfig --classic --print-config\n"
            "  lsconfig --config-file ./config.yaml --icon-theme unicode .\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("files", nargs="*", default=None, help="Entries to list (default: .)")

    # Display
    parser.add_argument("-a", "--all", action="store_true", help="Do not ignore entries starting with .")
    parser.add_argument(
        "-A",
        "--almost-all",
        action="store_true",
        help="Do not list implied . and ..",
    )
    parser.add_argument(
        "-d",
        "--directory-only",
        action="store_true",
        help="Display directories themselves, and not their contents",
    )

    # Color and icons
    parser.add_argument("--color", choices=_choices(ColorOption), default=None, help="When to use terminal colours")
    parser.add_argument("--color-theme", default=None, metavar="PATH", help="Path of the color theme file")
    parser.add_argument("--icon", choices=_choices(IconOption), default=None, help="When to print the icons")
    parser.add_argument(
        "--icon-theme",
        choices=_choices(IconThemeChoice),
        default=None,
        help="Whether to use fancy or unicode icons",
    )

    # Layout and recursion
    parser.add_argument("-1", "--oneline", action="store_true", help="Display one entry per line")
    parser.add_argument("-l", "--long", action="store_true", help="Display extended file metadata as a table")
    parser.add_argument("--tree", action="store_true", help="Recurse into directories and present the result as a tree")
    parser.add_argument("-R", "--recursive", action="store_true", help="Recurse into directories")
    parser.add_argument("--depth", type=_positive_int, default=None, help="Stop recursing into directories after reaching specified depth")
    parser.add_argument(
        "--blocks",
        type=_blocks,
        action="append",
        default=None,
        help="Specify the blocks that will be displayed and in what order",
    )

    # Columns
    parser.add_argument("--size", choices=_choices(SizeFlag), default=None, help="How to display size")
    parser.add_argument("--date", type=_date, default=None, help="How to display date [possible values: date, relative, +date-time-format]")
    parser.add_argument("-F", "--classify", action="store_true", help="Append indicator (one of */=>@|) at the end of the file names")
    parser.add_argument("-L", "--dereference", action="store_true", help="When showing file information for a symbolic link, show information for the file the link references")
    parser.add_argument("--no-symlink", action="store_true", help="Do not display symlink target")
    parser.add_argument("--total-size", action="store_true", help="Display the total size of directories")

    # Sorting; the short flags and --sort share a destination so the last one wins
    parser.add_argument("-t", "--timesort", dest="sort", action="store_const", const=SortColumn.TIME.value, help="Sort by time modified")
    parser.add_argument("-S", "--sizesort", dest="sort", action="store_const", const=SortColumn.SIZE.value, help="Sort by size")
    parser.add_argument("-X", "--extensionsort", dest="sort", action="store_const", const=SortColumn.EXTENSION.value, help="Sort by file extension")
    parser.add_argument("-v", "--versionsort", dest="sort", action="store_const", const=SortColumn.VERSION.value, help="Natural sort of (version) numbers within text")
    parser.add_argument("--sort", dest="sort", choices=_choices(SortColumn), default=None, help="Sort by WORD instead of name")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the order of the sort")
    parser.add_argument("--group-dirs", dest="group_dirs", choices=_choices(DirGrouping), default=None, help="Sort the directories then the files")
    parser.add_argument(
        "--group-directories-first",
        dest="group_dirs",
        action="store_const",
        const=DirGrouping.FIRST.value,
        help="Groups the directories at the top before the files. Same as --group-dirs=first",
    )

    # Filtering
    parser.add_argument(
        "-I",
        "--ignore-glob",
        type=_glob,
        action="append",
        default=None,
        metavar="PATTERN",
        help="Do not display files/directories with names matching the glob pattern(s)",
    )
    parser.add_argument("--classic", action="store_true", help="Enable classic mode (display output similar to ls)")

    # Configuration controls
    parser.add_argument("--config-file", type=str, default=None, metavar="PATH", help="Provide a custom configuration file")
    parser.add_argument("--ignore-config", action="store_true", help="Ignore the configuration file")
    parser.add_argument("--icon-theme-file", type=str, default=None, metavar="PATH", help="Provide a custom icon theme file")
    parser.add_argument("--print-config", action="store_true", help="Print the effective configuration as YAML and exit")
    parser.add_argument("--print-default-config", action="store_true", help="Print the built-in configuration template and exit")

    # Logging
    parser.add_argument("--verbose", action="store_true", help="Enables verbose logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Path to the log file.")

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
