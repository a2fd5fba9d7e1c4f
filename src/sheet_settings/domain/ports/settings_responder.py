"""Port: Settings responder — observers of sheet settings changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheet_settings.domain.models.entity import Entity


@runtime_checkable
class SheetSettingsResponder(Protocol):
    """Anything that must react when sheet settings change."""

    def sheet_settings_updated(self, entity: Entity | None, block_layout: bool) -> None:
        """Called after settings changed.

        *entity* is ``None`` when the global defaults changed. *block_layout*
        is ``True`` when the block layout changed, which requires a full
        rebuild instead of a refresh.
        """
        ...
