"""Validity pass for sheet settings.

``ensure_validity`` never fails and never reports what it changed: a
settings document must always be usable after it has been loaded, however
stale or damaged its content was.
"""

from __future__ import annotations

import logging

from sheet_settings.domain.models.attributes import factory_attribute_defs
from sheet_settings.domain.models.block_layout import new_block_layout
from sheet_settings.domain.models.body import factory_body
from sheet_settings.domain.models.page import new_page_settings
from sheet_settings.domain.models.sheet_settings import (
    ENUM_TYPES,
    SKILL_MODIFIER_ADJUSTMENT_FIELDS,
    SKILL_MODIFIER_OVERRIDE_FIELDS,
    SheetSettings,
)

logger = logging.getLogger(__name__)


def ensure_validity(settings: SheetSettings) -> SheetSettings:
    """Repair *settings* in place and return it.

    Steps, in order:

    1. Install factory sub-documents where missing; otherwise let each
       sub-document repair itself.
    2. Replace enumeration values that are no longer members.
    3. Turn on the flat dodge bonus for documents that predate dodge
       customization (see :func:`is_pre_dodge_customization`).
    4. Mirror ``use_passive_defense`` into ``show_pd_column``.
    """
    _ensure_sub_documents(settings)
    _ensure_enums(settings)
    if is_pre_dodge_customization(settings):
        logger.debug("Dodge and skill modifier fields unset; assuming a legacy document")
        settings.include_dodge_flat_bonus = True
    settings.show_pd_column = settings.use_passive_defense
    return settings


def is_pre_dodge_customization(settings: SheetSettings) -> bool:
    """True when every dodge and skill-modifier field is at its zero value.

    Files written before those options existed simply lack the keys, so they
    load as all-zero. A new document whose author deliberately cleared every
    one of them is indistinguishable and is treated the same way. Passive
    defense fields do not take part: they do not affect base dodge.
    """
    if settings.include_dodge_flat_bonus or settings.use_basic_move_for_dodge:
        return False
    if settings.use_skill_modifier_adjustments:
        return False
    return all(
        getattr(settings, name) == 0
        for name in SKILL_MODIFIER_OVERRIDE_FIELDS + SKILL_MODIFIER_ADJUSTMENT_FIELDS
    )


def _ensure_sub_documents(settings: SheetSettings) -> None:
    if settings.page is None:
        logger.debug("Installing factory page settings")
        settings.page = new_page_settings()
    else:
        settings.page.ensure_validity()
    if settings.block_layout is None:
        logger.debug("Installing factory block layout")
        settings.block_layout = new_block_layout()
    else:
        settings.block_layout.ensure_validity()
    if settings.attributes is None:
        logger.debug("Installing factory attribute definitions")
        settings.attributes = factory_attribute_defs()
    else:
        settings.attributes.ensure_validity()
    if settings.body_type is None:
        logger.debug("Installing factory body type")
        settings.body_type = factory_body()
        settings.body_type.update(settings.owner)
    else:
        settings.body_type.ensure_validity()


def _ensure_enums(settings: SheetSettings) -> None:
    for name, enum_type in ENUM_TYPES.items():
        current = getattr(settings, name)
        healed = enum_type.ensure_valid(current)
        if healed is not current:
            logger.debug("Replacing invalid %s value %r with %s", name, current, healed.value)
            setattr(settings, name, healed)
