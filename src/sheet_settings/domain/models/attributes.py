"""Attribute definitions carried by the settings document.

The settings engine treats the definitions as an opaque, owned collection:
it only needs a factory set, a validity pass and a deep copy.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, RootModel

from sheet_settings.domain.models.fxp import FixedPoint


class AttributeDef(BaseModel):
    """A single attribute definition (ST, DX, Basic Speed, ...)."""

    id: str
    type: str = "integer"
    name: str = ""
    full_name: str = ""
    attribute_base: str = ""
    cost_per_point: FixedPoint = Decimal(0)


class AttributeDefs(RootModel[list[AttributeDef]]):
    """Ordered collection of attribute definitions, persisted as a list."""

    root: list[AttributeDef]

    def __iter__(self):  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, attr_id: str) -> AttributeDef | None:
        for one in self.root:
            if one.id == attr_id:
                return one
        return None

    def ensure_validity(self) -> None:
        """Drop definitions with a blank or repeated id."""
        seen: set[str] = set()
        kept: list[AttributeDef] = []
        for one in self.root:
            key = one.id.strip().lower()
            if key and key not in seen:
                seen.add(key)
                kept.append(one)
        self.root = kept

    def clone(self) -> AttributeDefs:
        return self.model_copy(deep=True)


_FACTORY = (
    ("st", "integer", "ST", "Strength", "10", 10),
    ("dx", "integer", "DX", "Dexterity", "10", 20),
    ("iq", "integer", "IQ", "Intelligence", "10", 20),
    ("ht", "integer", "HT", "Health", "10", 10),
    ("will", "integer", "Will", "", "$iq", 5),
    ("fright_check", "integer", "Fright Check", "", "$will", 2),
    ("per", "integer", "Per", "Perception", "$iq", 5),
    ("vision", "integer", "Vision", "", "$per", 2),
    ("hearing", "integer", "Hearing", "", "$per", 2),
    ("taste_smell", "integer", "Taste & Smell", "", "$per", 2),
    ("touch", "integer", "Touch", "", "$per", 2),
    ("basic_speed", "decimal", "Basic Speed", "", "($dx+$ht)/4", 20),
    ("basic_move", "integer", "Basic Move", "", "floor($basic_speed)", 5),
    ("fp", "pool", "FP", "Fatigue Points", "$ht", 3),
    ("hp", "pool", "HP", "Hit Points", "$st", 2),
)


def factory_attribute_defs() -> AttributeDefs:
    """The standard attribute set."""
    return AttributeDefs(
        [
            AttributeDef(
                id=attr_id,
                type=kind,
                name=name,
                full_name=full_name,
                attribute_base=base,
                cost_per_point=cost,
            )
            for attr_id, kind, name, full_name, base, cost in _FACTORY
        ]
    )
