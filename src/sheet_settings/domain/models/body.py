"""Body type (hit location table) carried by the settings document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, PrivateAttr


class HitLocation(BaseModel):
    """One row of a hit location table."""

    id: str
    choice_name: str = ""
    table_name: str = ""
    slots: int = 0
    hit_penalty: int = 0
    dr_bonus: int = 0
    description: str = ""


class Body(BaseModel):
    """A named hit location table rolled with ``roll``."""

    name: str = ""
    roll: str = "3d"
    locations: list[HitLocation] = Field(default_factory=list)

    _owner: Any = PrivateAttr(default=None)

    @property
    def owner(self) -> Any:
        """The entity this body belongs to, or ``None`` for the defaults."""
        return self._owner

    def update(self, owner: Any) -> None:
        """Bind this body to *owner*."""
        self._owner = owner

    def ensure_validity(self) -> None:
        """Drop locations without an id; slots are never negative."""
        self.locations = [loc for loc in self.locations if loc.id.strip()]
        for loc in self.locations:
            if loc.slots < 0:
                loc.slots = 0
        if not self.roll.strip():
            self.roll = "3d"

    def clone(self, owner: Any = None) -> Body:
        """Deep copy of this body, bound to *owner*."""
        other = Body(
            name=self.name,
            roll=self.roll,
            locations=[loc.model_copy() for loc in self.locations],
        )
        other.update(owner)
        return other


_HUMANOID = (
    ("eye", "Eyes", "Eye", 0, -9, 0),
    ("skull", "Skull", "Skull", 2, -7, 2),
    ("face", "Face", "Face", 1, -5, 0),
    ("leg", "Right Leg", "Right Leg", 2, -2, 0),
    ("arm", "Right Arm", "Right Arm", 1, -2, 0),
    ("torso", "Torso", "Torso", 2, 0, 0),
    ("groin", "Groin", "Groin", 1, -3, 0),
    ("arm", "Left Arm", "Left Arm", 1, -2, 0),
    ("leg", "Left Leg", "Left Leg", 2, -2, 0),
    ("hand", "Hand", "Hand", 1, -4, 0),
    ("foot", "Foot", "Foot", 1, -4, 0),
    ("neck", "Neck", "Neck", 2, -5, 0),
    ("vitals", "Vitals", "Vitals", 0, -3, 0),
)


def factory_body() -> Body:
    """The standard humanoid hit location table."""
    return Body(
        name="Humanoid",
        roll="3d",
        locations=[
            HitLocation(
                id=loc_id,
                choice_name=choice,
                table_name=table,
                slots=slots,
                hit_penalty=penalty,
                dr_bonus=dr_bonus,
            )
            for loc_id, choice, table, slots, penalty, dr_bonus in _HUMANOID
        ],
    )
