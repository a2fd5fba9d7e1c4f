"""JSON settings store — implements SettingsStorePort.

Load runs ``decode → migrate → parse → ensure_validity``; save writes the
sparse canonical document. Only storage failures are raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from sheet_settings.domain.errors import StorageReadError, StorageWriteError
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.ports.file_provider import FileProviderPort
from sheet_settings.domain.ports.settings_store import SettingsStorePort
from sheet_settings.infrastructure.persistence.local_file_provider import LocalFileProvider

logger = logging.getLogger(__name__)


class JsonSettingsStore(SettingsStorePort):
    """Persist sheet settings as JSON through a :class:`FileProviderPort`.

    Parameters
    ----------
    files : FileProviderPort | None
        Where bytes come from and go to. Defaults to the local disk.
    """

    def __init__(self, files: FileProviderPort | None = None) -> None:
        self._files = files or LocalFileProvider()

    def load(self, path: Path) -> SheetSettings:
        """Load settings from *path*, repairing whatever content it holds."""
        try:
            raw_bytes = self._files.read_bytes(path)
        except OSError as exc:
            raise StorageReadError(path, "Unable to read settings") from exc

        try:
            data = json.loads(raw_bytes.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise StorageReadError(path, "Settings file is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StorageReadError(path, "Settings file does not hold a JSON object")

        try:
            settings = SheetSettings.from_dict(data)
        except ValidationError as exc:
            raise StorageReadError(path, "Settings file has an unexpected structure") from exc
        logger.info("Loaded sheet settings from %s", path)
        return settings

    def save(self, settings: SheetSettings, path: Path) -> None:
        """Write the sparse canonical JSON form of *settings* to *path*."""
        text = json.dumps(settings.to_dict(), indent=2, ensure_ascii=False)
        try:
            self._files.write_bytes(path, text.encode("utf-8"))
        except OSError as exc:
            raise StorageWriteError(path, "Unable to write settings") from exc
        logger.info("Saved sheet settings to %s", path)
