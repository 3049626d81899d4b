from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lsconfig.cli.matches import ArgMatches
from lsconfig.config import ConfigDocument
from lsconfig.flags import (
    Block,
    Blocks,
    ColorOption,
    ColorTheme,
    DateFlag,
    DateKind,
    DirGrouping,
    Display,
    IconOption,
    IconThemeChoice,
    IgnoreGlobs,
    Layout,
    SizeFlag,
    SortColumn,
    SortOrder,
    SymlinkArrow,
    configure_from,
)
from lsconfig.flags.icons import IconSeparator
from lsconfig.flags.switches import Dereference, Indicators, NoSymlink, TotalSize


def matches(*argv: str) -> ArgMatches:
    return ArgMatches.from_argv(argv)


def doc(text: str) -> ConfigDocument:
    return ConfigDocument.from_yaml(text, source="test.yaml")


def test_display_from_arguments() -> None:
    assert Display.from_arguments(matches()) is None
    assert Display.from_arguments(matches("--all")) is Display.ALL
    assert Display.from_arguments(matches("--almost-all")) is Display.ALMOST_ALL
    assert Display.from_arguments(matches("--directory-only")) is Display.DIRECTORY_ONLY


def test_display_all_takes_priority() -> None:
    assert Display.from_arguments(matches("-A", "-a")) is Display.ALL
    assert Display.from_arguments(matches("-d", "-A")) is Display.ALMOST_ALL


def test_display_from_document() -> None:
    assert Display.from_document(ConfigDocument.empty()) is None
    assert Display.from_document(doc("display: all")) is Display.ALL
    assert Display.from_document(doc("display: almost-all")) is Display.ALMOST_ALL
    assert Display.from_document(doc("display: directory-only")) is Display.DIRECTORY_ONLY


def test_display_rejects_unknown_document_value(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert Display.from_document(doc("display: visible-only")) is None
    message = caplog.records[0].getMessage()
    assert "test.yaml" in message
    assert "display can only be one of all, almost-all, directory-only" in message
    assert configure_from(Display, matches(), doc("display: everything")) is Display.VISIBLE_ONLY


def test_color_option_layers() -> None:
    assert ColorOption.from_arguments(matches()) is None
    assert ColorOption.from_arguments(matches("--color", "always")) is ColorOption.ALWAYS
    assert ColorOption.from_document(doc("color:\n  when: never")) is ColorOption.NEVER
    assert ColorOption.from_document(doc("color:\n  theme: x.yaml")) is None
    assert ColorOption.default() is ColorOption.AUTO


@pytest.mark.parametrize(
    "option, tty, expected",
    [
        (ColorOption.ALWAYS, False, True),
        (ColorOption.NEVER, True, False),
        (ColorOption.AUTO, True, True),
        (ColorOption.AUTO, False, False),
    ],
)
def test_color_option_enabled(option: ColorOption, tty: bool, expected: bool) -> None:
    assert option.enabled(tty) is expected


def test_color_theme_layers() -> None:
    assert ColorTheme.default().path is None
    assert ColorTheme.from_arguments(matches("--color-theme", "mine.yaml")) == ColorTheme(Path("mine.yaml"))
    theme = ColorTheme.from_document(doc("color:\n  theme: colors.yaml"))
    assert theme == ColorTheme(Path("colors.yaml"))
    assert ColorTheme.from_document(doc("color:\n  when: never")) is None


def test_icon_option_layers() -> None:
    assert IconOption.from_arguments(matches()) is None
    assert IconOption.from_arguments(matches("--icon", "never")) is IconOption.NEVER
    assert IconOption.from_document(doc("icons:\n  when: always")) is IconOption.ALWAYS
    assert IconOption.default() is IconOption.AUTO


def test_icon_theme_layers() -> None:
    assert IconThemeChoice.from_arguments(matches("--icon-theme", "unicode")) is IconThemeChoice.UNICODE
    assert IconThemeChoice.from_document(doc("icons:\n  theme: unicode")) is IconThemeChoice.UNICODE
    assert IconThemeChoice.from_document(doc("icons:\n  when: never")) is None
    assert IconThemeChoice.default() is IconThemeChoice.FANCY


def test_icon_theme_rejects_unknown_document_value(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert IconThemeChoice.from_document(doc("icons:\n  theme: emoji")) is None
    assert "icons/theme can only be one of fancy, unicode" in caplog.records[0].getMessage()


def test_icon_separator_is_document_only() -> None:
    assert IconSeparator.from_arguments(matches("--icon", "always")) is None
    assert IconSeparator.from_document(doc("icons:\n  separator: '  '")) == "  "
    assert IconSeparator.default() == " "


def test_date_layers() -> None:
    assert DateFlag.from_arguments(matches()) is None
    assert DateFlag.from_arguments(matches("--date", "relative")) == DateFlag(DateKind.RELATIVE)
    assert DateFlag.from_arguments(matches("--date", "+%Y")) == DateFlag(DateKind.FORMATTED, "%Y")
    assert DateFlag.from_document(doc("date: '+%d %b'")) == DateFlag(DateKind.FORMATTED, "%d %b")
    assert DateFlag.default() == DateFlag(DateKind.DATE)


def test_date_rejects_unknown_document_value(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert DateFlag.from_document(doc("date: yesterday")) is None
    assert "Not a valid date value: yesterday" in caplog.records[0].getMessage()


def test_layout_layers() -> None:
    assert Layout.from_arguments(matches()) is None
    assert Layout.from_arguments(matches("--tree")) is Layout.TREE
    assert Layout.from_arguments(matches("--long")) is Layout.ONELINE
    assert Layout.from_arguments(matches("-1")) is Layout.ONELINE
    assert Layout.from_arguments(matches("--tree", "--long")) is Layout.TREE
    assert Layout.from_document(doc("layout: oneline")) is Layout.ONELINE
    assert Layout.default() is Layout.GRID


def test_size_layers() -> None:
    assert SizeFlag.from_arguments(matches("--size", "bytes")) is SizeFlag.BYTES
    assert SizeFlag.from_document(doc("size: short")) is SizeFlag.SHORT
    assert SizeFlag.default() is SizeFlag.DEFAULT


def test_sort_column_layers() -> None:
    assert SortColumn.from_arguments(matches()) is None
    assert SortColumn.from_arguments(matches("-t")) is SortColumn.TIME
    assert SortColumn.from_arguments(matches("--sort", "version")) is SortColumn.VERSION
    assert SortColumn.from_document(doc("sorting:\n  column: size")) is SortColumn.SIZE
    assert SortColumn.default() is SortColumn.NAME


def test_last_sort_flag_wins() -> None:
    assert SortColumn.from_arguments(matches("-t", "-S")) is SortColumn.SIZE
    assert SortColumn.from_arguments(matches("-S", "-t")) is SortColumn.TIME
    assert SortColumn.from_arguments(matches("--sort", "time", "-X")) is SortColumn.EXTENSION


def test_sort_order_layers() -> None:
    assert SortOrder.from_arguments(matches()) is None
    assert SortOrder.from_arguments(matches("-r")) is SortOrder.REVERSE
    assert SortOrder.from_document(doc("sorting:\n  reverse: true")) is SortOrder.REVERSE
    assert SortOrder.from_document(doc("sorting:\n  reverse: false")) is SortOrder.DEFAULT
    assert SortOrder.from_document(doc("sorting:\n  column: name")) is None


def test_dir_grouping_layers() -> None:
    assert DirGrouping.from_arguments(matches("--group-dirs", "last")) is DirGrouping.LAST
    assert DirGrouping.from_arguments(matches("--group-directories-first")) is DirGrouping.FIRST
    assert DirGrouping.from_document(doc("sorting:\n  dir-grouping: first")) is DirGrouping.FIRST
    assert DirGrouping.default() is DirGrouping.NONE


def test_blocks_layers() -> None:
    assert Blocks.from_arguments(matches()) is None
    from_args = Blocks.from_arguments(matches("--blocks", "name,size", "--blocks", "date"))
    assert from_args == Blocks((Block.NAME, Block.SIZE, Block.DATE))
    assert Blocks.from_document(doc("blocks:\n  - inode\n  - name")) == Blocks((Block.INODE, Block.NAME))
    assert Blocks.default().items[0] is Block.PERMISSION
    assert Blocks.default().items[-1] is Block.NAME


def test_blocks_rejects_unknown_document_value(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert Blocks.from_document(doc("blocks:\n  - name\n  - colour")) is None
    assert "colour" in caplog.records[0].getMessage()


def test_blocks_rejects_empty_document_list(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert Blocks.from_document(doc("blocks: []")) is None
    assert "at least one column" in caplog.records[0].getMessage()
    assert configure_from(Blocks, matches(), doc("blocks: []")) == Blocks.default()


def test_ignore_globs_layers() -> None:
    assert IgnoreGlobs.from_arguments(matches()) is None
    from_args = IgnoreGlobs.from_arguments(matches("-I", "*.pyc", "-I", ".git"))
    assert from_args.patterns == ("*.pyc", ".git")
    assert from_args.is_match("module.pyc")
    assert from_args.is_match(".git")
    assert not from_args.is_match("module.py")

    from_doc = IgnoreGlobs.from_document(doc("ignore-globs:\n  - build"))
    assert from_doc.patterns == ("build",)
    assert not IgnoreGlobs.default().is_match("anything")


@pytest.mark.parametrize(
    "switch, argument, key",
    [
        (Dereference, "--dereference", "dereference"),
        (Indicators, "--classify", "indicators"),
        (NoSymlink, "--no-symlink", "no-symlink"),
        (TotalSize, "--total-size", "total-size"),
    ],
)
def test_switch_layers(switch, argument: str, key: str) -> None:
    assert switch.from_arguments(matches()) is None
    assert switch.from_arguments(matches(argument)) is True
    assert switch.from_document(doc(f"{key}: true")) is True
    assert switch.from_document(doc(f"{key}: false")) is False
    assert switch.from_document(ConfigDocument.empty()) is None
    assert switch.default() is False


def test_symlink_arrow_is_document_only() -> None:
    assert SymlinkArrow.from_arguments(matches()) is None
    assert SymlinkArrow.from_document(doc("symlink-arrow: '->'")) == "->"
    assert SymlinkArrow.default() == "⇒"
