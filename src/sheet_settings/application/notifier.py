"""Change notifier — synchronous fan-out of settings changes."""

from __future__ import annotations

import logging

from sheet_settings.domain.models.entity import Entity
from sheet_settings.domain.ports.settings_responder import SheetSettingsResponder

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """Keeps the registered responders and tells each one about changes.

    Delivery is synchronous and completes before :meth:`notify` returns.
    Order between responders is not guaranteed.
    """

    def __init__(self) -> None:
        self._responders: list[SheetSettingsResponder] = []

    def register(self, responder: SheetSettingsResponder) -> None:
        if responder not in self._responders:
            self._responders.append(responder)

    def unregister(self, responder: SheetSettingsResponder) -> None:
        if responder in self._responders:
            self._responders.remove(responder)

    def notify(self, entity: Entity | None, structural: bool = False) -> None:
        """Tell every responder that the settings of *entity* changed.

        *entity* is ``None`` for the global defaults. *structural* asks for a
        full rebuild rather than an incremental refresh.
        """
        logger.debug(
            "Notifying %d responder(s), entity=%s structural=%s",
            len(self._responders),
            entity.id if entity is not None else None,
            structural,
        )
        for responder in list(self._responders):
            responder.sheet_settings_updated(entity, structural)

    def __len__(self) -> int:
        return len(self._responders)
