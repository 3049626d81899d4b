from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

from jsonschema import Draft202012Validator

from .defaults import CONFIG_SCHEMA, ICON_THEME_SCHEMA

_config_validator = Draft202012Validator(CONFIG_SCHEMA)
_theme_validator = Draft202012Validator(ICON_THEME_SCHEMA)


@dataclass(frozen=True)
class FieldError:
    """A schema violation located at one key of a document."""

    location: Tuple[Union[str, int], ...]
    message: str

    @property
    def key(self) -> str:
        return ".".join(str(part) for part in self.location)

    def __str__(self) -> str:
        return f"{self.key}: {self.message}" if self.location else self.message


def _collect(validator: Draft202012Validator, data: Any) -> List[FieldError]:
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    return [FieldError(tuple(error.absolute_path), error.message) for error in errors]


def config_field_errors(data: Any) -> List[FieldError]:
    return _collect(_config_validator, data)


def theme_field_errors(data: Any) -> List[FieldError]:
    return _collect(_theme_validator, data)


__all__ = ["FieldError", "config_field_errors", "theme_field_errors"]
