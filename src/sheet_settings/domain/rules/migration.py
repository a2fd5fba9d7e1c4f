"""Migration of deprecated on-disk settings shapes.

Each rule is a pure function taking the raw decoded mapping and returning
a new mapping; the input is never modified. Rules run once, in
``MIGRATION_RULES`` order, before the mapping is parsed into a
:class:`~sheet_settings.domain.models.sheet_settings.SheetSettings`.
Supporting a new deprecation means appending a rule.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

MigrationRule = Callable[[Mapping[str, Any]], dict[str, Any]]

LEGACY_WRAPPER_KEY = "sheet_settings"
LEGACY_BODY_TYPE_KEY = "hit_locations"
LEGACY_TRAIT_MODIFIER_ADJ_KEY = "show_advantage_modifier_adj"


def unwrap_legacy_location(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Old files nested the whole document under ``sheet_settings``.

    When that key holds a document it wins over any top-level content.
    """
    nested = raw.get(LEGACY_WRAPPER_KEY)
    if isinstance(nested, Mapping):
        logger.debug("Using settings stored under legacy key %r", LEGACY_WRAPPER_KEY)
        return dict(nested)
    return {key: value for key, value in raw.items() if key != LEGACY_WRAPPER_KEY}


def adopt_legacy_body_type(raw: Mapping[str, Any]) -> dict[str, Any]:
    """``hit_locations`` was renamed ``body_type``."""
    data = dict(raw)
    legacy = data.pop(LEGACY_BODY_TYPE_KEY, None)
    if data.get("body_type") is None and legacy is not None:
        logger.debug("Adopting body type from legacy key %r", LEGACY_BODY_TYPE_KEY)
        data["body_type"] = legacy
    return data


def merge_legacy_trait_modifier_flag(raw: Mapping[str, Any]) -> dict[str, Any]:
    """``show_advantage_modifier_adj`` was renamed ``show_trait_modifier_adj``.

    The legacy flag can only turn the current one on.
    """
    data = dict(raw)
    legacy = data.pop(LEGACY_TRAIT_MODIFIER_ADJ_KEY, False)
    if legacy is True and data.get("show_trait_modifier_adj") is not True:
        data["show_trait_modifier_adj"] = True
    return data


# unwrap_legacy_location must stay first: the others apply to the unwrapped document.
MIGRATION_RULES: tuple[MigrationRule, ...] = (
    unwrap_legacy_location,
    adopt_legacy_body_type,
    merge_legacy_trait_modifier_flag,
)


def migrate(
    raw: Mapping[str, Any],
    rules: tuple[MigrationRule, ...] = MIGRATION_RULES,
) -> dict[str, Any]:
    """Apply every migration rule to *raw* and return the canonical mapping."""
    data = dict(raw)
    for rule in rules:
        data = rule(data)
    return data
