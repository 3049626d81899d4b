from __future__ import annotations

import argparse

import pytest

from lsconfig.cli.matches import ArgMatches
from lsconfig.cli.parser import build_parser, parse_arguments


def test_parse_arguments_defaults() -> None:
    args = parse_arguments([])
    assert not args.files
    assert args.color is None
    assert args.icon is None
    assert args.sort is None
    assert args.blocks is None
    assert args.config_file is None
    assert args.ignore_config is False
    assert args.verbose is False


def test_parse_arguments_mixes_files_and_options() -> None:
    args = parse_arguments(["--icon", "always", "src", "setup.py", "--color=never"])
    assert args.files == ["src", "setup.py"]
    assert args.icon == "always"
    assert args.color == "never"


@pytest.mark.parametrize(
    "argv",
    [
        ["--color", "sometimes"],
        ["--icon-theme", "emoji"],
        ["--sort", "colour"],
        ["--blocks", "name,colour"],
        ["--blocks", ""],
        ["--blocks", " , "],
        ["--date", "yesterday"],
        ["--depth", "0"],
        ["--depth", "deep"],
    ],
)
def test_parse_arguments_rejects_invalid_values(argv, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(argv)
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_sort_shortcuts_share_one_destination() -> None:
    assert parse_arguments(["-t", "-S"]).sort == "size"
    assert parse_arguments(["-X", "--sort", "time"]).sort == "time"
    assert parse_arguments(["-v"]).sort == "version"


def test_group_directories_first_alias() -> None:
    assert parse_arguments(["--group-directories-first"]).group_dirs == "first"
    assert parse_arguments(["--group-dirs", "last"]).group_dirs == "last"


def test_blocks_are_split_and_accumulated() -> None:
    args = parse_arguments(["--blocks", "permission, name", "--blocks", "size"])
    assert args.blocks == [["permission", "name"], ["size"]]


def test_help_lists_config_controls() -> None:
    text = build_parser().format_help()
    for option in ("--config-file", "--ignore-config", "--icon-theme-file", "--print-config"):
        assert option in text


def test_matches_presence() -> None:
    matches = ArgMatches.from_argv(["-a", "--icon", "never"])
    assert matches.is_present("all")
    assert not matches.is_present("almost-all")
    assert matches.is_present("icon")
    assert not matches.is_present("color")
    assert not matches.is_present("no-such-option")


def test_matches_values() -> None:
    matches = ArgMatches.from_argv(["-I", "*.o", "--blocks", "name,size", "--blocks", "date"])
    assert matches.value_of("no-such-option") is None
    assert matches.values_of("ignore-glob") == ["*.o"]
    assert matches.values_of("blocks") == ["name", "size", "date"]
    assert matches.values_of("ignore_glob") == ["*.o"]


def test_empty_matches_answer_nothing() -> None:
    matches = ArgMatches()
    assert isinstance(matches.namespace, argparse.Namespace)
    assert not matches.is_present("all")
    assert matches.values_of("blocks") is None
