"""Page geometry settings.

Only the parts the settings engine relies on are modelled here: a paper
size name, an orientation and four margins, each kept as a
``"<amount> <unit>"`` string.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

from sheet_settings.domain.models.enums import PageOrientation

PAPER_SIZES = ("Letter", "Legal", "Tabloid", "A0", "A1", "A2", "A3", "A4", "A5", "A6")

DEFAULT_PAPER_SIZE = "Letter"
DEFAULT_MARGIN = "0.25 in"

_LENGTH_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(in|cm|mm|pt)\s*$", re.IGNORECASE)


def _normalize_length(text: str) -> str | None:
    match = _LENGTH_RE.match(text)
    if match is None:
        return None
    return f"{match.group(1)} {match.group(2).lower()}"


class PageSettings(BaseModel):
    """Paper size, orientation and margins for the printed sheet."""

    size: str = DEFAULT_PAPER_SIZE
    orientation: PageOrientation = PageOrientation.PORTRAIT
    top_margin: str = DEFAULT_MARGIN
    left_margin: str = DEFAULT_MARGIN
    bottom_margin: str = DEFAULT_MARGIN
    right_margin: str = DEFAULT_MARGIN

    @field_validator("orientation", mode="before")
    @classmethod
    def _heal_orientation(cls, value: object) -> object:
        return PageOrientation.ensure_valid(value)

    def ensure_validity(self) -> None:
        """Replace an unknown paper size or unparseable margin with defaults."""
        for known in PAPER_SIZES:
            if known.lower() == self.size.strip().lower():
                self.size = known
                break
        else:
            self.size = DEFAULT_PAPER_SIZE
        self.orientation = PageOrientation.ensure_valid(self.orientation)
        for name in ("top_margin", "left_margin", "bottom_margin", "right_margin"):
            setattr(self, name, _normalize_length(getattr(self, name)) or DEFAULT_MARGIN)

    def clone(self) -> PageSettings:
        return self.model_copy()


def new_page_settings() -> PageSettings:
    """Factory page settings: Letter, portrait, quarter-inch margins."""
    return PageSettings()


__all__ = ["PAPER_SIZES", "PageSettings", "new_page_settings"]
