"""Settings providers — the global document and per-entity documents.

Callers depend on :class:`SettingsProviderPort` only; whether the active
document is the global one or belongs to an entity is hidden behind it.
"""

from __future__ import annotations

from sheet_settings.domain.models.entity import Entity, GlobalSettings
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.ports.settings_provider import SettingsProviderPort
from sheet_settings.domain.rules.defaults import factory_sheet_settings


class GlobalSettingsProvider(SettingsProviderPort):
    """Provides the global defaults document."""

    def __init__(self, global_settings: GlobalSettings) -> None:
        self._global = global_settings

    @property
    def entity(self) -> Entity | None:
        return None

    def get(self) -> SheetSettings:
        return self._global.sheet

    def set(self, settings: SheetSettings) -> None:
        settings.set_owning_entity(None)
        self._global.sheet = settings


class EntitySettingsProvider(SettingsProviderPort):
    """Provides the document owned by one entity."""

    def __init__(self, entity: Entity, global_settings: GlobalSettings) -> None:
        self._entity = entity
        self._global = global_settings

    @property
    def entity(self) -> Entity | None:
        return self._entity

    def get(self) -> SheetSettings:
        if self._entity.sheet_settings is None:
            attach_defaults(self._entity, self._global)
        return self._entity.sheet_settings  # type: ignore[return-value]

    def set(self, settings: SheetSettings) -> None:
        self._entity.attach_settings(settings)


def sheet_settings_for(entity: Entity | None, global_settings: GlobalSettings) -> SheetSettings:
    """Settings of *entity*, or the global defaults when *entity* is ``None``."""
    if entity is None:
        return global_settings.sheet
    return EntitySettingsProvider(entity, global_settings).get()


def provider_for(entity: Entity | None, global_settings: GlobalSettings) -> SettingsProviderPort:
    """The provider matching *entity* (global when ``None``)."""
    if entity is None:
        return GlobalSettingsProvider(global_settings)
    return EntitySettingsProvider(entity, global_settings)


def attach_defaults(entity: Entity, global_settings: GlobalSettings) -> SheetSettings:
    """Give *entity* its own copy of the global defaults."""
    settings = global_settings.sheet.clone(entity)
    entity.attach_settings(settings)
    return settings


def new_global_settings() -> GlobalSettings:
    """A global holder initialised with factory defaults."""
    return GlobalSettings(sheet=factory_sheet_settings())
