"""Compiled-in glyph tables.

The fancy set uses Nerd Font code points and needs a patched font; the
unicode set only uses standard emoji and has no name/extension entries.
"""

from __future__ import annotations

from typing import Dict

FANCY_BY_FILETYPE: Dict[str, str] = {
    "dir": "\uf115",
    "file": "\uf016",
    "pipe": "\uf731",
    "socket": "\uf6a7",
    "executable": "\uf489",
    "device-char": "\ue601",
    "device-block": "\ufc29",
    "special": "\uf2dc",
    "symlink-dir": "\uf482",
    "symlink-file": "\uf481",
}

UNICODE_BY_FILETYPE: Dict[str, str] = {
    "dir": "\U0001f4c2",
    "file": "\U0001f4c4",
    "pipe": "\U0001f4e9",
    "socket": "\U0001f50c",
    "executable": "\U0001f3d7",
    "device-char": "\U0001f5a9",
    "device-block": "\U0001f5b4",
    "special": "\U0001f4df",
    "symlink-dir": "\U0001f5c2",
    "symlink-file": "\U0001f516",
}

FANCY_BY_NAME: Dict[str, str] = {
    ".atom": "\ue764",
    ".bash_profile": "\ue615",
    ".bashrc": "\uf489",
    ".clang-format": "\ue615",
    ".git": "\uf1d3",
    ".gitattributes": "\uf1d3",
    ".gitconfig": "\uf1d3",
    ".github": "\uf408",
    ".gitignore": "\uf1d3",
    ".gitlab-ci.yml": "\uf296",
    ".gitmodules": "\uf1d3",
    ".npmignore": "\ue71e",
    ".rvm": "\ue21e",
    ".vimrc": "\ue62b",
    ".vscode": "\ue70c",
    ".zshrc": "\uf489",
    "bin": "\ue5fc",
    "cargo.lock": "\ue7a8",
    "cargo.toml": "\ue7a8",
    "config": "\ue5fc",
    "docker-compose.yml": "\uf308",
    "dockerfile": "\uf308",
    ".ds_store": "\uf179",
    "gemfile": "\ue21e",
    "gemfile.lock": "\ue21e",
    "gruntfile.js": "\ue611",
    "gulpfile.js": "\ue610",
    "include": "\ue5fc",
    "lib": "\uf121",
    "license": "\ue60a",
    "licence": "\ue60a",
    "makefile": "\ue779",
    "node_modules": "\ue718",
    "package.json": "\ue718",
    "package-lock.json": "\ue718",
    "procfile": "\ue607",
    "rakefile": "\ue21e",
    "readme": "\ue609",
    "requirements.txt": "\ue606",
    "yarn.lock": "\ue718",
}

FANCY_BY_EXTENSION: Dict[str, str] = {
    "apk": "\ue70e",
    "avi": "\uf03d",
    "awk": "\uf489",
    "bash": "\uf489",
    "bat": "\uf17a",
    "bmp": "\uf1c5",
    "bz2": "\uf410",
    "c": "\ue61e",
    "c++": "\ue61d",
    "cc": "\ue61d",
    "cfg": "\ue615",
    "clj": "\ue768",
    "cljs": "\ue76a",
    "coffee": "\uf0f4",
    "conf": "\ue615",
    "cpp": "\ue61d",
    "cs": "\uf81a",
    "css": "\ue749",
    "csv": "\uf1c3",
    "cxx": "\ue61d",
    "d": "\ue7af",
    "dart": "\ue798",
    "db": "\uf1c0",
    "diff": "\uf440",
    "doc": "\uf1c2",
    "docx": "\uf1c2",
    "ejs": "\ue618",
    "elm": "\ue62c",
    "epub": "\ue28a",
    "erb": "\ue73b",
    "erl": "\ue7b1",
    "exe": "\uf17a",
    "fish": "\uf489",
    "flac": "\uf001",
    "gif": "\uf1c5",
    "go": "\ue626",
    "gz": "\uf410",
    "h": "\uf0fd",
    "hpp": "\uf0fd",
    "hs": "\ue777",
    "htm": "\uf13b",
    "html": "\uf13b",
    "ico": "\uf1c5",
    "ini": "\uf17a",
    "jar": "\ue256",
    "java": "\ue256",
    "jpeg": "\uf1c5",
    "jpg": "\uf1c5",
    "js": "\ue74e",
    "json": "\ue60b",
    "jsx": "\ue7ba",
    "kt": "\ue634",
    "less": "\ue758",
    "lock": "\uf023",
    "log": "\uf18d",
    "lua": "\ue620",
    "md": "\uf48a",
    "mkv": "\uf03d",
    "mp3": "\uf001",
    "mp4": "\uf03d",
    "ogg": "\uf001",
    "pdf": "\uf1c1",
    "php": "\ue73d",
    "pl": "\ue769",
    "png": "\uf1c5",
    "ppt": "\uf1c4",
    "pptx": "\uf1c4",
    "ps1": "\uf489",
    "py": "\ue606",
    "pyc": "\ue606",
    "r": "\uf25d",
    "rar": "\uf410",
    "rb": "\ue21e",
    "rs": "\ue7a8",
    "rss": "\uf09e",
    "sass": "\ue603",
    "scala": "\ue737",
    "scss": "\ue603",
    "sh": "\uf489",
    "sql": "\uf1c0",
    "sqlite3": "\ue7c4",
    "svg": "\uf1c5",
    "swift": "\ue755",
    "tar": "\uf410",
    "tex": "\ue600",
    "toml": "\ue615",
    "ts": "\ue628",
    "tsx": "\ue7ba",
    "txt": "\uf15c",
    "vim": "\ue62b",
    "vue": "\ufd42",
    "wav": "\uf001",
    "webm": "\uf03d",
    "xls": "\uf1c3",
    "xlsx": "\uf1c3",
    "xml": "\ue619",
    "yaml": "\uf481",
    "yml": "\uf481",
    "zip": "\uf410",
    "zsh": "\uf489",
}

__all__ = [
    "FANCY_BY_FILETYPE",
    "UNICODE_BY_FILETYPE",
    "FANCY_BY_NAME",
    "FANCY_BY_EXTENSION",
]
