"""Global settings manager — the defaults document in the user config dir.

Persists the global sheet settings to
``~/.config/sheet_settings/sheet_settings.json`` (Linux) or the equivalent
platform directory via ``platformdirs``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

from sheet_settings.domain.errors import StorageReadError, StorageWriteError
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.ports.settings_store import SettingsStorePort
from sheet_settings.domain.rules.defaults import factory_sheet_settings
from sheet_settings.infrastructure.persistence.json_settings_store import JsonSettingsStore

logger = logging.getLogger(__name__)

APP_NAME = "sheet_settings"
SETTINGS_FILENAME = "sheet_settings.json"


class GlobalSettingsManager:
    """Load/save the global defaults document.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    store : SettingsStorePort | None
        Store used for reading and writing. Defaults to JSON on local disk.
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        store: SettingsStorePort | None = None,
    ) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_path = self._config_dir / SETTINGS_FILENAME
        self._store = store or JsonSettingsStore()

    # -- Public API ----------------------------------------------------------

    def load(self) -> SheetSettings:
        """Load the global defaults, falling back to factory settings."""
        if not self._settings_path.exists():
            return factory_sheet_settings()
        try:
            return self._store.load(self._settings_path)
        except StorageReadError as exc:
            logger.warning("Ignoring unreadable global settings: %s", exc)
            return factory_sheet_settings()

    def save(self, settings: SheetSettings) -> None:
        """Persist the global defaults."""
        self._store.save(settings, self._settings_path)

    def reset_to_defaults(self) -> SheetSettings:
        """Delete the persisted file and return factory defaults.

        Raises:
            StorageWriteError: If the file exists but cannot be removed.
        """
        try:
            self._settings_path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageWriteError(self._settings_path, "Unable to remove settings") from exc
        logger.info("Removed global settings file %s", self._settings_path)
        return factory_sheet_settings()

    @property
    def settings_path(self) -> Path:
        """Absolute path to the global settings JSON file."""
        return self._settings_path
