"""Typed, partially populated view of the YAML configuration document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigError, ConfigParseError
from .storage import ConfigStorage
from .validation import config_field_errors

logger = logging.getLogger(__name__)

_SECTIONS = frozenset({"color", "icons", "recursion", "sorting"})


def _section(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, dict) else {}


def _sequence(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    return tuple(value)


@dataclass(frozen=True)
class ColorSection:
    when: Optional[str] = None
    theme: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["ColorSection"]:
        if data is None:
            return None
        data = _section(data)
        return cls(when=data.get("when"), theme=data.get("theme"))


@dataclass(frozen=True)
class IconsSection:
    when: Optional[str] = None
    theme: Optional[str] = None
    separator: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["IconsSection"]:
        if data is None:
            return None
        data = _section(data)
        return cls(
            when=data.get("when"),
            theme=data.get("theme"),
            separator=data.get("separator"),
        )


@dataclass(frozen=True)
class RecursionSection:
    enabled: Optional[bool] = None
    depth: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["RecursionSection"]:
        if data is None:
            return None
        data = _section(data)
        depth = data.get("depth")
        # The schema accepts integral floats such as 2.0 as integers.
        if isinstance(depth, float):
            depth = int(depth)
        return cls(enabled=data.get("enabled"), depth=depth)


@dataclass(frozen=True)
class SortingSection:
    column: Optional[str] = None
    reverse: Optional[bool] = None
    dir_grouping: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["SortingSection"]:
        if data is None:
            return None
        data = _section(data)
        return cls(
            column=data.get("column"),
            reverse=data.get("reverse"),
            dir_grouping=data.get("dir-grouping"),
        )


@dataclass(frozen=True)
class ConfigDocument:
    """Every field is optional; ``None`` means the document does not set it.

    ``source`` names where the document came from and is only used when
    reporting problems.
    """

    classic: Optional[bool] = None
    blocks: Optional[Tuple[str, ...]] = None
    color: Optional[ColorSection] = None
    date: Optional[str] = None
    dereference: Optional[bool] = None
    display: Optional[str] = None
    icons: Optional[IconsSection] = None
    ignore_globs: Optional[Tuple[str, ...]] = None
    indicators: Optional[bool] = None
    layout: Optional[str] = None
    recursion: Optional[RecursionSection] = None
    size: Optional[str] = None
    sorting: Optional[SortingSection] = None
    no_symlink: Optional[bool] = None
    total_size: Optional[bool] = None
    symlink_arrow: Optional[str] = None
    source: str = field(default="<config>", compare=False)

    @classmethod
    def empty(cls) -> "ConfigDocument":
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str = "<config>") -> "ConfigDocument":
        """Build a document, dropping (and reporting) fields of the wrong type."""
        cleaned: Dict[str, Any] = {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in data.items()
        }
        dropped = set()
        for error in config_field_errors(cleaned):
            if not error.location:
                raise ConfigParseError(f"{source}: {error.message}")
            top = error.location[0]
            section = cleaned.get(top)
            if top in _SECTIONS and len(error.location) > 1 and isinstance(section, dict):
                key = error.location[:2]
            else:
                key = error.location[:1]
            if key in dropped:
                continue
            dropped.add(key)
            logger.error("%s: invalid value for '%s': %s", source, error.key, error.message)
            if len(key) == 2:
                section.pop(key[1], None)
            else:
                cleaned.pop(top, None)

        return cls(
            classic=cleaned.get("classic"),
            blocks=_sequence(cleaned.get("blocks")),
            color=ColorSection.from_mapping(cleaned.get("color")),
            date=cleaned.get("date"),
            dereference=cleaned.get("dereference"),
            display=cleaned.get("display"),
            icons=IconsSection.from_mapping(cleaned.get("icons")),
            ignore_globs=_sequence(cleaned.get("ignore-globs")),
            indicators=cleaned.get("indicators"),
            layout=cleaned.get("layout"),
            recursion=RecursionSection.from_mapping(cleaned.get("recursion")),
            size=cleaned.get("size"),
            sorting=SortingSection.from_mapping(cleaned.get("sorting")),
            no_symlink=cleaned.get("no-symlink"),
            total_size=cleaned.get("total-size"),
            symlink_arrow=cleaned.get("symlink-arrow"),
            source=source,
        )

    @classmethod
    def from_yaml(cls, text: str, source: str = "<config>") -> "ConfigDocument":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigParseError(f"configuration file format error, {exc}") from exc
        if data is None:
            return cls(source=source)
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"configuration file format error, {source}: root must be a mapping"
            )
        return cls.from_mapping(data, source=source)


def load_document(storage: Optional[ConfigStorage]) -> Optional[ConfigDocument]:
    """Read and parse the document behind ``storage``.

    A missing file yields ``None`` silently; every other failure is reported
    and also yields ``None``.
    """
    if storage is None:
        return None
    try:
        text = storage.read_text()
        return ConfigDocument.from_yaml(text, source=str(storage.path))
    except FileNotFoundError:
        logger.debug("No configuration file at %s", storage.path)
        return None
    except ConfigError as exc:
        logger.error("%s", exc)
        return None


__all__ = [
    "ColorSection",
    "IconsSection",
    "RecursionSection",
    "SortingSection",
    "ConfigDocument",
    "load_document",
]
