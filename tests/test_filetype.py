from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from lsconfig.meta import (
    BlockDevice,
    CharDevice,
    Directory,
    File,
    FileEntry,
    Pipe,
    Socket,
    Special,
    SymLink,
    extension_of,
    file_type_from_mode,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("archive.tar.gz", "gz"),
        ("README.md", "md"),
        ("Makefile", None),
        (".gitignore", None),
        (".config.yaml", "yaml"),
        ("trailing.", None),
    ],
)
def test_extension_of(name: str, expected) -> None:
    assert extension_of(name) == expected


@pytest.mark.parametrize(
    "mode, expected",
    [
        (stat.S_IFDIR | 0o755, Directory()),
        (stat.S_IFREG | 0o644, File(executable=False)),
        (stat.S_IFREG | 0o755, File(executable=True)),
        (stat.S_IFREG | 0o640 | stat.S_IXGRP, File(executable=True)),
        (stat.S_IFIFO | 0o644, Pipe()),
        (stat.S_IFSOCK | 0o755, Socket()),
        (stat.S_IFCHR | 0o666, CharDevice()),
        (stat.S_IFBLK | 0o660, BlockDevice()),
        (0, Special()),
    ],
)
def test_file_type_from_mode(mode: int, expected) -> None:
    assert file_type_from_mode(mode) == expected


def test_symlink_mode_uses_target_kind() -> None:
    assert file_type_from_mode(stat.S_IFLNK | 0o777, target_is_dir=True) == SymLink(is_dir=True)
    assert file_type_from_mode(stat.S_IFLNK | 0o777) == SymLink(is_dir=False)


def test_entry_new_derives_extension() -> None:
    entry = FileEntry.new("photo.JPG", File())
    assert entry.extension == "JPG"
    assert FileEntry.new("Dockerfile", File()).extension is None


def test_from_path_regular_file_and_directory(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hi", encoding="utf-8")

    entry = FileEntry.from_path(target)
    assert entry == FileEntry("notes.txt", File(executable=False), "txt")
    assert FileEntry.from_path(tmp_path).file_type == Directory()


@pytest.mark.skipif(os.name == "nt", reason="no executable bit on Windows")
def test_from_path_executable(tmp_path: Path) -> None:
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)
    assert FileEntry.from_path(script).file_type == File(executable=True)


def _symlink(link: Path, target: Path, target_is_directory: bool = False) -> None:
    try:
        link.symlink_to(target, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported here")


def test_from_path_symlinks(tmp_path: Path) -> None:
    folder = tmp_path / "folder"
    folder.mkdir()
    plain = tmp_path / "plain.txt"
    plain.write_text("", encoding="utf-8")
    _symlink(tmp_path / "to-folder", folder, target_is_directory=True)
    _symlink(tmp_path / "to-plain", plain)

    assert FileEntry.from_path(tmp_path / "to-folder").file_type == SymLink(is_dir=True)
    assert FileEntry.from_path(tmp_path / "to-plain").file_type == SymLink(is_dir=False)
    assert FileEntry.from_path(tmp_path / "to-folder", dereference=True).file_type == Directory()


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="mkfifo is not available")
def test_from_path_pipe(tmp_path: Path) -> None:
    fifo = tmp_path / "queue"
    os.mkfifo(fifo)
    assert FileEntry.from_path(fifo).file_type == Pipe()


def test_from_path_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileEntry.from_path(tmp_path / "ghost")
