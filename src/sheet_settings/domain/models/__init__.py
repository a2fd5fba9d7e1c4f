"""Domain models — public API.

Provides convenient imports for the settings document and its parts.
"""

from sheet_settings.domain.models.attributes import AttributeDef, AttributeDefs
from sheet_settings.domain.models.block_layout import BlockLayout
from sheet_settings.domain.models.body import Body, HitLocation
from sheet_settings.domain.models.entity import Entity, GlobalSettings
from sheet_settings.domain.models.enums import (
    DamageProgression,
    DifficultyTier,
    DisplayOption,
    LengthUnit,
    PageOrientation,
    WeightUnit,
)
from sheet_settings.domain.models.page import PageSettings
from sheet_settings.domain.models.sheet_settings import SheetSettings

__all__ = [
    # Document
    "SheetSettings",
    "Entity",
    "GlobalSettings",
    # Sub-documents
    "AttributeDef",
    "AttributeDefs",
    "BlockLayout",
    "Body",
    "HitLocation",
    "PageSettings",
    # Enums
    "DamageProgression",
    "DifficultyTier",
    "DisplayOption",
    "LengthUnit",
    "PageOrientation",
    "WeightUnit",
]
