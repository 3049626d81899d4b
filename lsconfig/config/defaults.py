from __future__ import annotations

from typing import Any, Dict

CONF_DIR = "lsconfig"
CONF_FILE_NAME = "config.yaml"
ICON_THEME_FILE_NAME = "icons.yaml"

DEFAULT_CONFIG_YAML = """\
---
# == Classic ==
# Shorthand that makes the listing look like plain `ls`. When enabled it
# forces "color"->"when", "icons"->"when", "date" and "sorting"->"dir-grouping".
# Explicit command line arguments still take precedence.
# Possible values: false, true
classic: false

# == Blocks ==
# Columns and their order for the long and tree layouts.
# Possible values: permission, user, group, context, size, size_value, date,
#                  name, inode, links
blocks:
  - permission
  - user
  - group
  - size
  - date
  - name

# == Color ==
color:
  # When to colorize the output. Classic mode sets this to "never".
  # Possible values: never, auto, always
  when: auto
  # Path of a color theme file, relative to this directory or absolute.
  # theme: colors.yaml

# == Date ==
# Format of the date column. Classic mode sets this to "date".
# Possible values: date, relative, +<strftime format>
date: date

# == Dereference ==
# Whether to follow symbolic links when reading metadata.
# Possible values: false, true
dereference: false

# == Display ==
# Which entries to show. Leave unset to show visible entries only.
# Possible values: all, almost-all, directory-only
# display: all

# == Icons ==
icons:
  # When to print icons. Classic mode sets this to "never".
  # Possible values: always, auto, never
  when: auto
  # Built-in glyph set. "fancy" needs a patched (nerd) font and can be
  # customised through icons.yaml next to this file.
  # Possible values: fancy, unicode
  theme: fancy
  # Text printed between the icon and the file name.
  separator: " "

# == Ignore Globs ==
# Glob patterns of entries to hide.
# ignore-globs:
#   - .git

# == Indicators ==
# Whether to append type indicators (/, *, @, ...) to names.
# Possible values: false, true
indicators: false

# == Layout ==
# Possible values: grid, tree, oneline
layout: grid

# == Recursion ==
recursion:
  # Possible values: false, true
  enabled: false
  # Maximum depth, a positive integer. Leave unset for no limit.
  # depth: 3

# == Size ==
# Format of the size column.
# Possible values: default, short, bytes
size: default

# == Sorting ==
sorting:
  # Possible values: extension, name, time, size, version
  column: name
  # Possible values: false, true
  reverse: false
  # Where to put directories. Classic mode sets this to "none".
  # Possible values: first, last, none
  dir-grouping: none

# == No Symlink ==
# Whether to hide symlink targets.
# Possible values: false, true
no-symlink: false

# == Total size ==
# Whether to compute the total size of directories.
# Possible values: false, true
total-size: false

# == Symlink arrow ==
# Text shown between a symlink and its target.
symlink-arrow: ⇒
"""


def _nullable(type_name: str, **extra: Any) -> Dict[str, Any]:
    return {"type": [type_name, "null"], **extra}


def _string_list() -> Dict[str, Any]:
    return _nullable("array", items={"type": "string"})


CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "classic": _nullable("boolean"),
        "blocks": _string_list(),
        "color": _nullable(
            "object",
            properties={
                "when": _nullable("string"),
                "theme": _nullable("string"),
            },
        ),
        "date": _nullable("string"),
        "dereference": _nullable("boolean"),
        "display": _nullable("string"),
        "icons": _nullable(
            "object",
            properties={
                "when": _nullable("string"),
                "theme": _nullable("string"),
                "separator": _nullable("string"),
            },
        ),
        "ignore-globs": _string_list(),
        "indicators": _nullable("boolean"),
        "layout": _nullable("string"),
        "recursion": _nullable(
            "object",
            properties={
                "enabled": _nullable("boolean"),
                "depth": _nullable("integer", minimum=1),
            },
        ),
        "size": _nullable("string"),
        "sorting": _nullable(
            "object",
            properties={
                "column": _nullable("string"),
                "reverse": _nullable("boolean"),
                "dir-grouping": _nullable("string"),
            },
        ),
        "no-symlink": _nullable("boolean"),
        "total-size": _nullable("boolean"),
        "symlink-arrow": _nullable("string"),
    },
    "additionalProperties": True,
}

_GLYPH_TABLE = _nullable("object", additionalProperties={"type": "string"})

ICON_THEME_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "icons-by-filetype": _GLYPH_TABLE,
        "icons-by-name": _GLYPH_TABLE,
        "icons-by-extension": _GLYPH_TABLE,
    },
    "additionalProperties": True,
}

__all__ = [
    "CONF_DIR",
    "CONF_FILE_NAME",
    "ICON_THEME_FILE_NAME",
    "DEFAULT_CONFIG_YAML",
    "CONFIG_SCHEMA",
    "ICON_THEME_SCHEMA",
]
