"""Owning context for a settings document."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from sheet_settings.domain.models.sheet_settings import SheetSettings


@dataclass(eq=False)
class Entity:
    """A character (or other sheet) that owns its own settings.

    Compared by identity: two entities are never interchangeable even when
    their names match.
    """

    name: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    sheet_settings: SheetSettings | None = None

    def attach_settings(self, settings: SheetSettings) -> None:
        """Make *settings* this entity's document and bind it back."""
        self.sheet_settings = settings
        settings.set_owning_entity(self)


@dataclass
class GlobalSettings:
    """Holder for the defaults used when no entity is involved."""

    sheet: SheetSettings
