"""Block layout — the order in which sheet sections are arranged.

Each line lists one or more block keys that share a row. Unknown keys and
duplicates are dropped by :meth:`BlockLayout.ensure_validity`, and any
block missing from the layout is appended on a line of its own.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_serializer, model_validator

REACTIONS_KEY = "reactions"
CONDITIONAL_MODIFIERS_KEY = "conditional_modifiers"
MELEE_KEY = "melee"
RANGED_KEY = "ranged"
TRAITS_KEY = "traits"
SKILLS_KEY = "skills"
SPELLS_KEY = "spells"
EQUIPMENT_KEY = "equipment"
OTHER_EQUIPMENT_KEY = "other_equipment"
NOTES_KEY = "notes"

ALL_BLOCK_KEYS = (
    REACTIONS_KEY,
    CONDITIONAL_MODIFIERS_KEY,
    MELEE_KEY,
    RANGED_KEY,
    TRAITS_KEY,
    SKILLS_KEY,
    SPELLS_KEY,
    EQUIPMENT_KEY,
    OTHER_EQUIPMENT_KEY,
    NOTES_KEY,
)

DEFAULT_LAYOUT = (
    f"{REACTIONS_KEY} {CONDITIONAL_MODIFIERS_KEY}",
    MELEE_KEY,
    RANGED_KEY,
    f"{TRAITS_KEY} {SKILLS_KEY}",
    SPELLS_KEY,
    EQUIPMENT_KEY,
    OTHER_EQUIPMENT_KEY,
    NOTES_KEY,
)


class BlockLayout(BaseModel):
    """Ordered rows of sheet blocks. Persisted as a plain list of strings."""

    layout: list[str] = Field(default_factory=lambda: list(DEFAULT_LAYOUT))

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_list(cls, data: object) -> object:
        if isinstance(data, (list, tuple)):
            return {"layout": list(data)}
        return data

    @model_serializer(mode="plain")
    def _as_plain_list(self) -> list[str]:
        return list(self.layout)

    @classmethod
    def from_string(cls, text: str) -> BlockLayout:
        """Build a layout from newline-separated text, then normalize it."""
        layout = cls(layout=text.splitlines())
        layout.ensure_validity()
        return layout

    def ensure_validity(self) -> None:
        seen: set[str] = set()
        lines: list[str] = []
        for line in self.layout:
            keys = []
            for key in line.lower().split():
                if key in ALL_BLOCK_KEYS and key not in seen:
                    seen.add(key)
                    keys.append(key)
            if keys:
                lines.append(" ".join(keys))
        lines.extend(key for key in ALL_BLOCK_KEYS if key not in seen)
        self.layout = lines

    def clone(self) -> BlockLayout:
        return BlockLayout(layout=list(self.layout))

    def __str__(self) -> str:
        return "\n".join(self.layout)


def new_block_layout() -> BlockLayout:
    """Factory block layout."""
    return BlockLayout()
