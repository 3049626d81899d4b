"""Effective configuration.

:class:`Flags` holds one resolved value per option. Build it with
:meth:`Flags.configure_from`, which applies classic mode to the document
layer first and then resolves every option as arguments, then document,
then default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..cli.matches import ArgMatches
from ..config.document import ConfigDocument
from .base import Configurable, configure_from
from .blocks import Block, Blocks
from .classic import apply_classic
from .color import ColorOption, ColorTheme
from .date import DateFlag, DateKind
from .display import Display
from .icons import IconFlags, IconOption, IconThemeChoice
from .ignore_globs import IgnoreGlobs
from .layout import Layout
from .recursion import Recursion
from .size import SizeFlag
from .sorting import DirGrouping, SortColumn, SortOrder, Sorting
from .switches import Classic, Dereference, Indicators, NoSymlink, TotalSize
from .symlink_arrow import SymlinkArrow


@dataclass(frozen=True)
class Flags:
    classic: bool = False
    blocks: Blocks = field(default_factory=Blocks.default)
    color: ColorOption = ColorOption.AUTO
    color_theme: ColorTheme = field(default_factory=ColorTheme)
    date: DateFlag = field(default_factory=DateFlag.default)
    dereference: bool = False
    display: Display = Display.VISIBLE_ONLY
    icons: IconFlags = field(default_factory=IconFlags)
    ignore_globs: IgnoreGlobs = field(default_factory=IgnoreGlobs)
    indicators: bool = False
    layout: Layout = Layout.GRID
    recursion: Recursion = field(default_factory=Recursion)
    size: SizeFlag = SizeFlag.DEFAULT
    sorting: Sorting = field(default_factory=Sorting)
    no_symlink: bool = False
    total_size: bool = False
    symlink_arrow: str = "⇒"

    @classmethod
    def configure_from(
        cls, matches: ArgMatches, document: Optional[ConfigDocument] = None
    ) -> "Flags":
        classic = configure_from(Classic, matches, document)
        if classic:
            document = apply_classic(document or ConfigDocument.empty())

        return cls(
            classic=classic,
            blocks=configure_from(Blocks, matches, document),
            color=configure_from(ColorOption, matches, document),
            color_theme=configure_from(ColorTheme, matches, document),
            date=configure_from(DateFlag, matches, document),
            dereference=configure_from(Dereference, matches, document),
            display=configure_from(Display, matches, document),
            icons=IconFlags.configure_from(matches, document),
            ignore_globs=configure_from(IgnoreGlobs, matches, document),
            indicators=configure_from(Indicators, matches, document),
            layout=configure_from(Layout, matches, document),
            recursion=Recursion.configure_from(matches, document),
            size=configure_from(SizeFlag, matches, document),
            sorting=Sorting.configure_from(matches, document),
            no_symlink=configure_from(NoSymlink, matches, document),
            total_size=configure_from(TotalSize, matches, document),
            symlink_arrow=configure_from(SymlinkArrow, matches, document),
        )

    def to_dict(self) -> dict:
        """Document-shaped view of the resolved values."""
        if self.date.kind is DateKind.FORMATTED:
            date = f"+{self.date.fmt}"
        else:
            date = self.date.kind.value
        color = {"when": self.color.value}
        if self.color_theme.path is not None:
            color["theme"] = str(self.color_theme.path)
        recursion = {"enabled": self.recursion.enabled}
        if self.recursion.depth is not None:
            recursion["depth"] = self.recursion.depth
        data = {
            "classic": self.classic,
            "blocks": [block.value for block in self.blocks.items],
            "color": color,
            "date": date,
            "dereference": self.dereference,
            "icons": {
                "when": self.icons.when.value,
                "theme": self.icons.theme.value,
                "separator": self.icons.separator,
            },
            "ignore-globs": list(self.ignore_globs.patterns),
            "indicators": self.indicators,
            "layout": self.layout.value,
            "recursion": recursion,
            "size": self.size.value,
            "sorting": {
                "column": self.sorting.column.value,
                "reverse": self.sorting.order is SortOrder.REVERSE,
                "dir-grouping": self.sorting.dir_grouping.value,
            },
            "no-symlink": self.no_symlink,
            "total-size": self.total_size,
            "symlink-arrow": self.symlink_arrow,
        }
        if self.display is not Display.VISIBLE_ONLY:
            data["display"] = self.display.value
        return data


__all__ = [
    "Flags",
    "Configurable",
    "configure_from",
    "Block",
    "Blocks",
    "ColorOption",
    "ColorTheme",
    "DateFlag",
    "DateKind",
    "Display",
    "IconFlags",
    "IconOption",
    "IconThemeChoice",
    "IgnoreGlobs",
    "Layout",
    "Recursion",
    "SizeFlag",
    "DirGrouping",
    "SortColumn",
    "SortOrder",
    "Sorting",
    "SymlinkArrow",
]
