"""Rules-customization settings engine for character sheets.

Loads settings documents of any historical shape, repairs them, and
resolves the skill difficulty modifiers they configure.
"""

from sheet_settings.domain.errors import (
    SheetSettingsError,
    StorageReadError,
    StorageWriteError,
)
from sheet_settings.domain.models.enums import DifficultyTier
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.rules.defaults import factory_sheet_settings
from sheet_settings.domain.rules.skill_modifiers import effective_modifier
from sheet_settings.domain.rules.validity import ensure_validity

__version__ = "0.1.0"

__all__ = [
    "DifficultyTier",
    "SheetSettings",
    "SheetSettingsError",
    "StorageReadError",
    "StorageWriteError",
    "effective_modifier",
    "ensure_validity",
    "factory_sheet_settings",
]
