"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from sheet_settings.application.notifier import ChangeNotifier
from sheet_settings.application.providers import attach_defaults, provider_for
from sheet_settings.application.use_cases.edit_sheet_settings import EditSheetSettingsUseCase
from sheet_settings.domain.models.entity import Entity, GlobalSettings
from sheet_settings.domain.ports.file_provider import FileProviderPort
from sheet_settings.domain.ports.settings_store import SettingsStorePort

from sheet_settings.infrastructure.config.global_settings_manager import GlobalSettingsManager
from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore
from sheet_settings.infrastructure.persistence.local_file_provider import LocalFileProvider


class Container:
    """Simple dependency injection container.

    Wires the infrastructure implementations to domain ports, owns the
    global defaults document and provides pre-configured use cases.

    Usage::

        container = Container()
        character = container.new_entity("Dai Blackthorn")
        uc = container.edit_settings(character)
        uc.set_field("use_half_stat_defaults", True)
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._files = LocalFileProvider()
        self._store = JsonSettingsStore(self._files)
        self._global_manager = GlobalSettingsManager(config_dir, self._store)
        self._global = GlobalSettings(sheet=self._global_manager.load())
        self._notifier = ChangeNotifier()

    # -- Port accessors ------------------------------------------------------

    @property
    def files(self) -> FileProviderPort:
        return self._files

    @property
    def store(self) -> SettingsStorePort:
        return self._store

    @property
    def global_manager(self) -> GlobalSettingsManager:
        return self._global_manager

    @property
    def global_settings(self) -> GlobalSettings:
        return self._global

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    # -- Factories -----------------------------------------------------------

    def new_entity(self, name: str = "") -> Entity:
        """Create an entity holding its own copy of the global defaults."""
        entity = Entity(name=name)
        attach_defaults(entity, self._global)
        return entity

    def edit_settings(self, entity: Entity | None = None) -> EditSheetSettingsUseCase:
        """Create a use case editing *entity*'s settings (global when ``None``)."""
        return EditSheetSettingsUseCase(
            provider=provider_for(entity, self._global),
            store=self._store,
            notifier=self._notifier,
            global_settings=self._global,
        )

    def save_global_settings(self) -> None:
        """Persist the global defaults to the user config directory."""
        self._global_manager.save(self._global.sheet)
