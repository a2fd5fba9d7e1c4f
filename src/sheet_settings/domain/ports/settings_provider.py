"""Port: Settings provider — where the active document lives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from sheet_settings.domain.models.sheet_settings import SheetSettings

if TYPE_CHECKING:
    from sheet_settings.domain.models.entity import Entity


class SettingsProviderPort(ABC):
    """Gives access to one settings document without revealing its owner kind."""

    @property
    @abstractmethod
    def entity(self) -> Entity | None:
        """The owning entity, or ``None`` for the global defaults."""

    @abstractmethod
    def get(self) -> SheetSettings:
        """Return the current document."""

    @abstractmethod
    def set(self, settings: SheetSettings) -> None:
        """Replace the current document."""
