"""Factory values for sheet settings — pure domain values.

These are the GURPS 4th Edition defaults used for a new character and for
the global defaults document. They have no dependency on configuration
files or storage.
"""

from __future__ import annotations

from decimal import Decimal

from sheet_settings.domain.models.attributes import factory_attribute_defs
from sheet_settings.domain.models.block_layout import new_block_layout
from sheet_settings.domain.models.body import factory_body
from sheet_settings.domain.models.enums import (
    DamageProgression,
    DifficultyTier,
    DisplayOption,
    LengthUnit,
    WeightUnit,
)
from sheet_settings.domain.models.page import new_page_settings
from sheet_settings.domain.models.sheet_settings import SheetSettings

# Relative skill level for one point in a skill, per difficulty (B170).
BASELINE_SKILL_MODIFIERS: dict[DifficultyTier, Decimal] = {
    DifficultyTier.EASY: Decimal(0),
    DifficultyTier.AVERAGE: Decimal(-1),
    DifficultyTier.HARD: Decimal(-2),
    DifficultyTier.VERY_HARD: Decimal(-3),
}

DEFAULT_DAMAGE_PROGRESSION = DamageProgression.BASIC_SET
DEFAULT_LENGTH_UNITS = LengthUnit.FEET_AND_INCHES
DEFAULT_WEIGHT_UNITS = WeightUnit.POUND


def factory_sheet_settings() -> SheetSettings:
    """Return a new document holding the factory defaults."""
    return SheetSettings(
        page=new_page_settings(),
        block_layout=new_block_layout(),
        attributes=factory_attribute_defs(),
        body_type=factory_body(),
        damage_progression=DEFAULT_DAMAGE_PROGRESSION,
        default_length_units=DEFAULT_LENGTH_UNITS,
        default_weight_units=DEFAULT_WEIGHT_UNITS,
        user_description_display=DisplayOption.TOOLTIP,
        modifiers_display=DisplayOption.INLINE,
        notes_display=DisplayOption.INLINE,
        skill_level_adj_display=DisplayOption.TOOLTIP,
        show_spell_adj=True,
        # Basic Speed based dodge with the flat +3, no passive defense.
        use_basic_move_for_dodge=False,
        include_dodge_flat_bonus=True,
        include_pd_armor=False,
        include_pd_shields=False,
        use_passive_defense=False,
    )
