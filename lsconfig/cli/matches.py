from __future__ import annotations

import argparse
from typing import Any, List, Optional, Sequence


class ArgMatches:
    """Read-only queries over parsed invocation arguments.

    Option names use the long flag spelling (``"almost-all"``); they map to
    the namespace attribute with dashes replaced by underscores.
    """

    def __init__(self, namespace: Optional[argparse.Namespace] = None) -> None:
        self._namespace = namespace if namespace is not None else argparse.Namespace()

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "ArgMatches":
        from .parser import parse_arguments

        return cls(parse_arguments(list(argv)))

    @property
    def namespace(self) -> argparse.Namespace:
        return self._namespace

    def _get(self, name: str) -> Any:
        return getattr(self._namespace, name.replace("-", "_"), None)

    def is_present(self, name: str) -> bool:
        value = self._get(name)
        if value is None or value is False:
            return False
        if isinstance(value, (list, tuple)) and not value:
            return False
        return True

    def value_of(self, name: str) -> Optional[Any]:
        return self._get(name)

    def values_of(self, name: str) -> Optional[List[Any]]:
        """Flattened values of a repeatable option, ``None`` when not given."""
        value = self._get(name)
        if not value:
            return None
        flat: List[Any] = []
        for item in value:
            if isinstance(item, (list, tuple)):
                flat.extend(item)
            else:
                flat.append(item)
        return flat


__all__ = ["ArgMatches"]
