"""Classic mode expansion.

Classic mode pins a handful of options to their ``ls``-compatible values by
rewriting the document layer before the per-option merge runs. Arguments
are left alone, so an explicit flag still overrides classic mode.
"""

from __future__ import annotations

from dataclasses import replace

from ..config.document import ColorSection, ConfigDocument, IconsSection, SortingSection


def apply_classic(document: ConfigDocument) -> ConfigDocument:
    color = document.color or ColorSection()
    icons = document.icons or IconsSection()
    sorting = document.sorting or SortingSection()
    return replace(
        document,
        color=replace(color, when="never"),
        icons=replace(icons, when="never"),
        date="date",
        sorting=replace(sorting, dir_grouping="none"),
    )


__all__ = ["apply_classic"]
