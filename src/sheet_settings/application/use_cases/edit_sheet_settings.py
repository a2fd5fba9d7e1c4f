"""Use Case: Edit Sheet Settings.

Load, save, reset and field-by-field mutation of one settings document
(global or entity-owned). Every change is followed by a notification.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sheet_settings.application.notifier import ChangeNotifier
from sheet_settings.domain.errors import UnknownSettingError
from sheet_settings.domain.models.block_layout import BlockLayout
from sheet_settings.domain.models.entity import GlobalSettings
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.ports.settings_provider import SettingsProviderPort
from sheet_settings.domain.ports.settings_store import SettingsStorePort
from sheet_settings.domain.rules.defaults import factory_sheet_settings

logger = logging.getLogger(__name__)

# Kept in sync with use_passive_defense; never edited on its own.
_DERIVED_FIELDS = frozenset({"show_pd_column"})


class EditSheetSettingsUseCase:
    """Editing workflow for the document behind a settings provider."""

    def __init__(
        self,
        provider: SettingsProviderPort,
        store: SettingsStorePort,
        notifier: ChangeNotifier,
        global_settings: GlobalSettings,
    ) -> None:
        self._provider = provider
        self._store = store
        self._notifier = notifier
        self._global = global_settings

    @property
    def settings(self) -> SheetSettings:
        """The document being edited."""
        return self._provider.get()

    # -- Mutation ------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> None:
        """Assign one field and notify.

        A string assigned to ``block_layout`` is parsed as layout text.
        Changing the block layout is a structural change.

        Raises:
            UnknownSettingError: If *name* is not an editable field.
            pydantic.ValidationError: If *value* has the wrong type.
        """
        if name not in SheetSettings.model_fields or name in _DERIVED_FIELDS:
            raise UnknownSettingError(f"Unknown or read-only setting: {name}")
        settings = self._provider.get()
        if name == "block_layout" and isinstance(value, str):
            value = BlockLayout.from_string(value)
        setattr(settings, name, value)
        settings.show_pd_column = settings.use_passive_defense
        logger.debug("Set %s on %s settings", name, self._scope())
        self._notifier.notify(self._provider.entity, structural=name == "block_layout")

    # -- Persistence ---------------------------------------------------------

    def load(self, path: Path) -> SheetSettings:
        """Replace the document with the one stored at *path*."""
        settings = self._store.load(path)
        self._provider.set(settings)
        self._notifier.notify(self._provider.entity, structural=True)
        return settings

    def save(self, path: Path) -> None:
        """Write the current document to *path*."""
        self._store.save(self._provider.get(), path)

    def reset(self) -> SheetSettings:
        """Entity documents revert to the global defaults; the global one to factory."""
        entity = self._provider.entity
        if entity is not None:
            settings = self._global.sheet.clone(entity)
        else:
            settings = factory_sheet_settings()
        self._provider.set(settings)
        logger.info("Reset %s settings", self._scope())
        self._notifier.notify(entity, structural=True)
        return settings

    def _scope(self) -> str:
        entity = self._provider.entity
        return "global" if entity is None else f"entity {entity.id}"
