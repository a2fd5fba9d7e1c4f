"""Sheet settings document.

``SheetSettings`` holds every rules-customization option of a character
sheet. Field defaults are the *zero* values (``False``, ``0``, the first
enum member, no sub-document) because that is what a missing key means in
a persisted file. Factory values live in
:func:`sheet_settings.domain.rules.defaults.factory_sheet_settings`.

Serialization is sparse: booleans that are ``False``, numbers that are
zero and absent sub-documents are left out. Enumerations are always
written.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
)

from sheet_settings.domain.models.attributes import AttributeDefs
from sheet_settings.domain.models.block_layout import BlockLayout
from sheet_settings.domain.models.body import Body
from sheet_settings.domain.models.enums import (
    DamageProgression,
    DisplayOption,
    LengthUnit,
    SelfHealingEnum,
    WeightUnit,
)
from sheet_settings.domain.models.fxp import FixedPoint
from sheet_settings.domain.models.page import PageSettings

ENUM_TYPES: dict[str, type[SelfHealingEnum]] = {
    "damage_progression": DamageProgression,
    "default_length_units": LengthUnit,
    "default_weight_units": WeightUnit,
    "user_description_display": DisplayOption,
    "modifiers_display": DisplayOption,
    "notes_display": DisplayOption,
    "skill_level_adj_display": DisplayOption,
}

ENUM_FIELDS = tuple(ENUM_TYPES)

SUB_DOCUMENT_FIELDS = ("page", "block_layout", "attributes", "body_type")

SKILL_MODIFIER_OVERRIDE_FIELDS = (
    "easy_skill_modifier_override",
    "average_skill_modifier_override",
    "hard_skill_modifier_override",
    "very_hard_skill_modifier_override",
)

SKILL_MODIFIER_ADJUSTMENT_FIELDS = (
    "easy_skill_modifier_adjustment",
    "average_skill_modifier_adjustment",
    "hard_skill_modifier_adjustment",
    "very_hard_skill_modifier_adjustment",
)

DODGE_OVERRIDE_FIELD = "dodge_override"

FIXED_POINT_FIELDS = (
    *SKILL_MODIFIER_OVERRIDE_FIELDS,
    *SKILL_MODIFIER_ADJUSTMENT_FIELDS,
    DODGE_OVERRIDE_FIELD,
)

BOOLEAN_FIELDS = (
    "use_multiplicative_modifiers",
    "use_modifying_dice_plus_adds",
    "use_half_stat_defaults",
    "show_trait_modifier_adj",
    "show_equipment_modifier_adj",
    "show_all_weapons",
    "show_spell_adj",
    "hide_source_mismatch",
    "hide_tl_column",
    "hide_lc_column",
    "hide_page_ref_column",
    "use_title_in_footer",
    "exclude_unspent_points_from_total",
    "show_lifting_st_damage",
    "show_iq_based_damage",
    "use_skill_modifier_adjustments",
    "use_basic_move_for_dodge",
    "include_dodge_flat_bonus",
    "include_pd_armor",
    "include_pd_shields",
    "use_passive_defense",
    "show_pd_column",
)


class SheetSettings(BaseModel):
    """Rules-customization settings for one sheet, or the global defaults."""

    model_config = ConfigDict(validate_assignment=True)

    # -- Owned sub-documents -------------------------------------------------

    page: PageSettings | None = None
    block_layout: BlockLayout | None = None
    attributes: AttributeDefs | None = None
    body_type: Body | None = None

    # -- Enumerated choices --------------------------------------------------

    damage_progression: DamageProgression = DamageProgression.BASIC_SET
    default_length_units: LengthUnit = LengthUnit.FEET_AND_INCHES
    default_weight_units: WeightUnit = WeightUnit.POUND
    user_description_display: DisplayOption = DisplayOption.NOT_SHOWN
    modifiers_display: DisplayOption = DisplayOption.NOT_SHOWN
    notes_display: DisplayOption = DisplayOption.NOT_SHOWN
    skill_level_adj_display: DisplayOption = DisplayOption.NOT_SHOWN

    # -- Display toggles -----------------------------------------------------

    use_multiplicative_modifiers: bool = False
    use_modifying_dice_plus_adds: bool = False
    use_half_stat_defaults: bool = False
    show_trait_modifier_adj: bool = False
    show_equipment_modifier_adj: bool = False
    show_all_weapons: bool = False
    show_spell_adj: bool = False
    hide_source_mismatch: bool = False
    hide_tl_column: bool = False
    hide_lc_column: bool = False
    hide_page_ref_column: bool = False
    use_title_in_footer: bool = False
    exclude_unspent_points_from_total: bool = False
    show_lifting_st_damage: bool = False
    show_iq_based_damage: bool = False

    # -- Skill difficulty modifiers ------------------------------------------

    # True selects override mode; False (the default) selects adjustment mode.
    use_skill_modifier_adjustments: bool = False
    easy_skill_modifier_override: FixedPoint = Decimal(0)
    average_skill_modifier_override: FixedPoint = Decimal(0)
    hard_skill_modifier_override: FixedPoint = Decimal(0)
    very_hard_skill_modifier_override: FixedPoint = Decimal(0)
    easy_skill_modifier_adjustment: FixedPoint = Decimal(0)
    average_skill_modifier_adjustment: FixedPoint = Decimal(0)
    hard_skill_modifier_adjustment: FixedPoint = Decimal(0)
    very_hard_skill_modifier_adjustment: FixedPoint = Decimal(0)

    # -- Dodge and passive defense -------------------------------------------

    use_basic_move_for_dodge: bool = False
    include_dodge_flat_bonus: bool = False
    include_pd_armor: bool = False
    include_pd_shields: bool = False
    use_passive_defense: bool = False
    # Deprecated mirror of use_passive_defense, still written for older readers.
    show_pd_column: bool = False
    dodge_override: FixedPoint = Decimal(0)

    _owner: Any = PrivateAttr(default=None)

    @field_validator(*ENUM_FIELDS, mode="before")
    @classmethod
    def _heal_enum(cls, value: Any, info: ValidationInfo) -> Any:
        return ENUM_TYPES[info.field_name].ensure_valid(value)

    # A null scalar reads as its zero value.
    @field_validator(*BOOLEAN_FIELDS, *FIXED_POINT_FIELDS, mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @model_serializer(mode="wrap")
    def _omit_zero_values(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key in ENUM_FIELDS or value not in (None, False, 0)
        }

    # -- Ownership -----------------------------------------------------------

    @property
    def owner(self) -> Any:
        """The owning entity, or ``None`` for the global defaults."""
        return self._owner

    def set_owning_entity(self, entity: Any) -> None:
        """Bind these settings (and the body type) to *entity*."""
        self._owner = entity
        if self.body_type is not None:
            self.body_type.update(entity)

    # -- Lifecycle -----------------------------------------------------------

    def ensure_validity(self) -> SheetSettings:
        """Repair this document in place. See :mod:`~sheet_settings.domain.rules.validity`."""
        from sheet_settings.domain.rules.validity import ensure_validity

        return ensure_validity(self)

    def clone(self, entity: Any = None) -> SheetSettings:
        """Copy with every owned sub-document deep-copied.

        The copy is not bound to *entity*; callers do that with
        :meth:`set_owning_entity`. *entity* is only passed on to the body type.
        """
        other = self.model_copy()
        other._owner = None
        other.page = self.page.clone() if self.page is not None else None
        other.block_layout = self.block_layout.clone() if self.block_layout is not None else None
        other.attributes = self.attributes.clone() if self.attributes is not None else None
        other.body_type = self.body_type.clone(entity) if self.body_type is not None else None
        return other

    # -- Serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return the sparse, JSON-safe representation."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SheetSettings:
        """Migrate, parse and repair a raw settings mapping.

        Raises:
            pydantic.ValidationError: If a field holds a value of the wrong type.
        """
        from sheet_settings.domain.rules.migration import migrate

        settings = cls.model_validate(migrate(data))
        settings.ensure_validity()
        return settings

