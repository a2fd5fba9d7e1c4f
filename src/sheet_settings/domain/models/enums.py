"""Enumerations used by the sheet settings document.

Every enumeration is closed and self-repairing: ``ensure_valid`` maps any
value that is not a current member to the first member of the enumeration.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class SelfHealingEnum(str, Enum):
    """String enum whose unknown values fall back to the first member."""

    @classmethod
    def ensure_valid(cls, value: Any) -> Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return next(iter(cls))


class DamageProgression(SelfHealingEnum):
    """Method used to derive thrust/swing damage from ST."""

    BASIC_SET = "basic_set"
    KNOWING_YOUR_OWN_STRENGTH = "knowing_your_own_strength"
    NO_SCHOOL_GROGNARD_DAMAGE = "no_school_grognard_damage"
    THRUST_EQUALS_SWING_MINUS_2 = "thrust_equals_swing_minus_2"
    SWING_EQUALS_THRUST_PLUS_2 = "swing_equals_thrust_plus_2"
    PHOENIX_FLAME_D3 = "phoenix_flame_d3"
    TBONE_1 = "tbone_1"
    TBONE_1_CLEAN = "tbone_1_clean"
    TBONE_2 = "tbone_2"
    TBONE_2_CLEAN = "tbone_2_clean"


class LengthUnit(SelfHealingEnum):
    """Units of length."""

    FEET_AND_INCHES = "ft_in"
    INCH = "in"
    FEET = "ft"
    YARD = "yd"
    MILE = "mi"
    CENTIMETER = "cm"
    KILOMETER = "km"
    METER = "m"


class WeightUnit(SelfHealingEnum):
    """Units of weight."""

    POUND = "lb"
    POUND_ALT = "#"
    OUNCE = "oz"
    TON = "tn"
    LONG_TON = "lt"
    METRIC_TON = "t"
    KILOGRAM = "kg"
    GRAM = "g"


class DisplayOption(SelfHealingEnum):
    """Where a piece of secondary information is shown on the sheet."""

    NOT_SHOWN = "not_shown"
    INLINE = "inline"
    TOOLTIP = "tooltip"
    INLINE_AND_TOOLTIP = "inline_and_tooltip"


class PageOrientation(SelfHealingEnum):
    """Paper orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class DifficultyTier(str, Enum):
    """Skill difficulty classifications that carry a baseline modifier."""

    EASY = "e"
    AVERAGE = "a"
    HARD = "h"
    VERY_HARD = "vh"

    @classmethod
    def from_code(cls, code: str) -> DifficultyTier:
        """Parse a difficulty code such as ``"A"`` or ``"VH"``.

        Wildcard skills (``"W"``) use the Very Hard modifiers.

        Raises:
            ValueError: If *code* is not a known difficulty.
        """
        key = code.strip().lower()
        if key == "w":
            return cls.VERY_HARD
        return cls(key)
