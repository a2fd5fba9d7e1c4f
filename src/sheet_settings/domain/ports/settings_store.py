"""Port: Settings store — load/save sheet settings documents."""

from abc import ABC, abstractmethod
from pathlib import Path

from sheet_settings.domain.models.sheet_settings import SheetSettings


class SettingsStorePort(ABC):
    """Contract for persisting and retrieving sheet settings.

    ``load`` always returns a valid document: content problems are repaired,
    only storage problems are raised.
    """

    @abstractmethod
    def load(self, path: Path) -> SheetSettings:
        """Load, migrate and repair the settings stored at *path*.

        Raises:
            StorageReadError: If *path* cannot be read or parsed.
        """
        ...

    @abstractmethod
    def save(self, settings: SheetSettings, path: Path) -> None:
        """Write the canonical form of *settings* to *path*.

        Raises:
            StorageWriteError: If *path* cannot be written.
        """
        ...
