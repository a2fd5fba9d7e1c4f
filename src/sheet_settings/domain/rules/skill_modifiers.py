"""Skill difficulty modifier resolution.

A document is either in *adjustment* mode (the default), where the
configured value is added to the baseline for the difficulty, or in
*override* mode, where the configured value replaces the baseline. The
mode is global to the document.
"""

from __future__ import annotations

from decimal import Decimal

from sheet_settings.domain.models.enums import DifficultyTier
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.rules.defaults import BASELINE_SKILL_MODIFIERS

_OVERRIDE_FIELDS = {
    DifficultyTier.EASY: "easy_skill_modifier_override",
    DifficultyTier.AVERAGE: "average_skill_modifier_override",
    DifficultyTier.HARD: "hard_skill_modifier_override",
    DifficultyTier.VERY_HARD: "very_hard_skill_modifier_override",
}

_ADJUSTMENT_FIELDS = {
    DifficultyTier.EASY: "easy_skill_modifier_adjustment",
    DifficultyTier.AVERAGE: "average_skill_modifier_adjustment",
    DifficultyTier.HARD: "hard_skill_modifier_adjustment",
    DifficultyTier.VERY_HARD: "very_hard_skill_modifier_adjustment",
}


def baseline_modifier(tier: DifficultyTier) -> Decimal:
    """The unmodified GURPS modifier for *tier*."""
    return BASELINE_SKILL_MODIFIERS[tier]


def uses_overrides(settings: SheetSettings) -> bool:
    """True when configured values replace the baselines (override mode).

    Stored as ``use_skill_modifier_adjustments``; despite the name, ``True``
    selects overrides and ``False`` selects adjustments.
    """
    return settings.use_skill_modifier_adjustments


def effective_modifier(settings: SheetSettings, tier: DifficultyTier) -> Decimal:
    """Return the relative skill level modifier to apply for *tier*."""
    if uses_overrides(settings):
        return getattr(settings, _OVERRIDE_FIELDS[tier])
    return baseline_modifier(tier) + getattr(settings, _ADJUSTMENT_FIELDS[tier])


def effective_modifiers(settings: SheetSettings) -> dict[DifficultyTier, Decimal]:
    """Effective modifier for every tier, in tier order."""
    return {tier: effective_modifier(settings, tier) for tier in DifficultyTier}


def configured_modifiers(settings: SheetSettings) -> dict[DifficultyTier, Decimal]:
    """The stored values of the active mode (overrides or adjustments)."""
    fields = _OVERRIDE_FIELDS if uses_overrides(settings) else _ADJUSTMENT_FIELDS
    return {tier: getattr(settings, fields[tier]) for tier in DifficultyTier}
