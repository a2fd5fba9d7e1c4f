"""Tests for the settings document models.

Covers:
- Self-healing enumerations and difficulty codes
- Fixed-point values
- Sub-documents (page, block layout, attributes, body)
- Sparse serialization of SheetSettings
- Clone isolation and ownership
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from sheet_settings.domain.models.attributes import AttributeDefs, factory_attribute_defs
from sheet_settings.domain.models.block_layout import ALL_BLOCK_KEYS, BlockLayout
from sheet_settings.domain.models.body import Body, HitLocation, factory_body
from sheet_settings.domain.models.entity import Entity
from sheet_settings.domain.models.enums import (
    DamageProgression,
    DifficultyTier,
    DisplayOption,
    PageOrientation,
    WeightUnit,
)
from sheet_settings.domain.models.fxp import to_fixed, to_json_number
from sheet_settings.domain.models.page import PageSettings
from sheet_settings.domain.models.sheet_settings import SheetSettings
from sheet_settings.domain.rules.defaults import factory_sheet_settings


# ── Enumerations ──────────────────────────────────────────────────────────


class TestEnums:
    def test_member_is_kept(self) -> None:
        assert DisplayOption.ensure_valid(DisplayOption.TOOLTIP) is DisplayOption.TOOLTIP

    def test_value_string_is_parsed(self) -> None:
        assert DamageProgression.ensure_valid("tbone_2") is DamageProgression.TBONE_2

    def test_parsing_ignores_case_and_whitespace(self) -> None:
        assert DisplayOption.ensure_valid("  Inline ") is DisplayOption.INLINE

    def test_unknown_value_falls_back_to_first_member(self) -> None:
        assert DamageProgression.ensure_valid("gurps_5e") is DamageProgression.BASIC_SET
        assert WeightUnit.ensure_valid(42) is WeightUnit.POUND
        assert PageOrientation.ensure_valid(None) is PageOrientation.PORTRAIT

    @pytest.mark.parametrize(
        ("code", "tier"),
        [
            ("E", DifficultyTier.EASY),
            ("a", DifficultyTier.AVERAGE),
            ("H", DifficultyTier.HARD),
            ("VH", DifficultyTier.VERY_HARD),
            ("W", DifficultyTier.VERY_HARD),
        ],
    )
    def test_difficulty_from_code(self, code: str, tier: DifficultyTier) -> None:
        assert DifficultyTier.from_code(code) is tier

    def test_unknown_difficulty_code(self) -> None:
        with pytest.raises(ValueError):
            DifficultyTier.from_code("X")


# ── Fixed point ───────────────────────────────────────────────────────────


class TestFixedPoint:
    def test_truncates_to_four_places(self) -> None:
        assert to_fixed(1.23456) == Decimal("1.2345")
        assert to_fixed("-0.99999") == Decimal("-0.9999")

    def test_rejects_booleans_and_text(self) -> None:
        with pytest.raises(ValueError):
            to_fixed(True)
        with pytest.raises(ValueError):
            to_fixed("lots")

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValueError):
            to_fixed("NaN")

    def test_rejects_values_too_large_for_four_places(self) -> None:
        with pytest.raises(ValueError):
            to_fixed(1e30)

    def test_json_number(self) -> None:
        assert to_json_number(Decimal("3.0000")) == 3
        assert isinstance(to_json_number(Decimal("3.0000")), int)
        assert to_json_number(Decimal("-1.5")) == -1.5


# ── Sub-documents ─────────────────────────────────────────────────────────


class TestPageSettings:
    def test_defaults(self) -> None:
        page = PageSettings()
        assert page.size == "Letter"
        assert page.orientation == PageOrientation.PORTRAIT
        assert page.top_margin == "0.25 in"

    def test_ensure_validity_repairs_size_and_margins(self) -> None:
        page = PageSettings(size="a4", top_margin="1CM", left_margin="wide")
        page.ensure_validity()
        assert page.size == "A4"
        assert page.top_margin == "1 cm"
        assert page.left_margin == "0.25 in"

    def test_unknown_size_becomes_letter(self) -> None:
        page = PageSettings(size="Napkin")
        page.ensure_validity()
        assert page.size == "Letter"

    def test_unknown_orientation_is_healed_on_parse(self) -> None:
        page = PageSettings.model_validate({"orientation": "diagonal"})
        assert page.orientation == PageOrientation.PORTRAIT


class TestBlockLayout:
    def test_default_contains_every_block(self) -> None:
        keys = " ".join(BlockLayout().layout).split()
        assert sorted(keys) == sorted(ALL_BLOCK_KEYS)

    def test_from_string_drops_unknown_and_duplicates(self) -> None:
        layout = BlockLayout.from_string("melee bogus\nMELEE ranged\n\nnotes")
        assert layout.layout[:2] == ["melee", "ranged"]
        assert layout.layout[2] == "notes"
        assert "bogus" not in str(layout)

    def test_missing_blocks_are_appended(self) -> None:
        layout = BlockLayout.from_string("skills")
        assert layout.layout[0] == "skills"
        assert len(layout.layout) == len(ALL_BLOCK_KEYS)

    def test_serializes_as_plain_list(self) -> None:
        layout = BlockLayout(layout=["melee", "ranged"])
        assert layout.model_dump() == ["melee", "ranged"]
        assert BlockLayout.model_validate(["notes"]).layout == ["notes"]


class TestAttributeDefs:
    def test_factory_set(self) -> None:
        attrs = factory_attribute_defs()
        assert attrs.get("st") is not None
        assert attrs.get("basic_speed").type == "decimal"
        assert attrs.get("nope") is None

    def test_ensure_validity_drops_blank_and_repeated_ids(self) -> None:
        attrs = AttributeDefs.model_validate(
            [{"id": "st"}, {"id": ""}, {"id": "ST"}, {"id": "dx"}]
        )
        attrs.ensure_validity()
        assert [a.id for a in attrs] == ["st", "dx"]


class TestBody:
    def test_factory_body_slots_cover_three_to_eighteen(self) -> None:
        body = factory_body()
        assert sum(loc.slots for loc in body.locations) == 16

    def test_ensure_validity(self) -> None:
        body = Body(
            roll=" ",
            locations=[HitLocation(id="torso", slots=-2), HitLocation(id=" ")],
        )
        body.ensure_validity()
        assert body.roll == "3d"
        assert [loc.id for loc in body.locations] == ["torso"]
        assert body.locations[0].slots == 0

    def test_clone_binds_owner(self) -> None:
        entity = Entity(name="Dai")
        clone = factory_body().clone(entity)
        assert clone.owner is entity


# ── SheetSettings ─────────────────────────────────────────────────────────


class TestSheetSettingsModel:
    def test_zero_defaults(self) -> None:
        settings = SheetSettings()
        assert settings.page is None
        assert settings.include_dodge_flat_bonus is False
        assert settings.notes_display == DisplayOption.NOT_SHOWN
        assert settings.dodge_override == 0

    def test_factory_values(self) -> None:
        settings = factory_sheet_settings()
        assert settings.damage_progression == DamageProgression.BASIC_SET
        assert settings.user_description_display == DisplayOption.TOOLTIP
        assert settings.modifiers_display == DisplayOption.INLINE
        assert settings.notes_display == DisplayOption.INLINE
        assert settings.skill_level_adj_display == DisplayOption.TOOLTIP
        assert settings.show_spell_adj is True
        assert settings.include_dodge_flat_bonus is True
        assert settings.use_passive_defense is False
        assert settings.body_type is not None

    def test_invalid_enum_assignment_is_healed(self) -> None:
        settings = SheetSettings()
        settings.modifiers_display = "sideways"  # type: ignore[assignment]
        assert settings.modifiers_display == DisplayOption.NOT_SHOWN

    def test_wrong_type_assignment_is_rejected(self) -> None:
        settings = SheetSettings()
        with pytest.raises(ValidationError):
            settings.hide_tl_column = "perhaps"  # type: ignore[assignment]

    def test_numbers_are_fixed_point(self) -> None:
        settings = SheetSettings(average_skill_modifier_adjustment="1.5")
        assert settings.average_skill_modifier_adjustment == Decimal("1.5")

    def test_out_of_range_number_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            SheetSettings(dodge_override=1e30)

    def test_null_scalars_read_as_zero(self) -> None:
        settings = SheetSettings.model_validate(
            {"show_spell_adj": None, "hard_skill_modifier_adjustment": None}
        )
        assert settings.show_spell_adj is False
        assert settings.hard_skill_modifier_adjustment == 0


class TestSparseSerialization:
    def test_false_and_zero_are_omitted(self) -> None:
        data = factory_sheet_settings().to_dict()
        assert "hide_tl_column" not in data
        assert "use_passive_defense" not in data
        assert "dodge_override" not in data
        assert "easy_skill_modifier_override" not in data

    def test_enums_are_always_written(self) -> None:
        data = SheetSettings().to_dict()
        assert data["damage_progression"] == "basic_set"
        assert data["notes_display"] == "not_shown"
        assert "page" not in data

    def test_true_and_non_zero_are_written(self) -> None:
        settings = factory_sheet_settings()
        settings.hard_skill_modifier_override = Decimal("-2.5")
        settings.dodge_override = Decimal(9)
        data = settings.to_dict()
        assert data["show_spell_adj"] is True
        assert data["include_dodge_flat_bonus"] is True
        assert data["hard_skill_modifier_override"] == -2.5
        assert data["dodge_override"] == 9
        assert isinstance(data["block_layout"], list)
        assert isinstance(data["attributes"], list)


class TestClone:
    def test_clone_is_equal(self) -> None:
        original = factory_sheet_settings()
        assert original.clone() == original

    def test_clone_isolates_sub_documents(self) -> None:
        original = factory_sheet_settings()
        clone = original.clone()

        clone.page.size = "A4"
        clone.block_layout.layout.append("melee")
        clone.attributes.root[0].name = "Might"
        clone.body_type.locations[0].hit_penalty = 0
        clone.hide_tl_column = True

        assert original.page.size == "Letter"
        assert original.block_layout.layout.count("melee") == 1
        assert original.attributes.root[0].name == "ST"
        assert original.body_type.locations[0].hit_penalty == -9
        assert original.hide_tl_column is False

    def test_clone_is_not_bound_to_owner(self) -> None:
        entity = Entity(name="Dai")
        original = factory_sheet_settings()
        original.set_owning_entity(entity)
        clone = original.clone(entity)
        assert clone.owner is None
        assert clone.body_type.owner is entity

    def test_set_owning_entity_binds_body(self) -> None:
        entity = Entity()
        settings = factory_sheet_settings()
        entity.attach_settings(settings)
        assert settings.owner is entity
        assert settings.body_type.owner is entity
        assert entity.sheet_settings is settings
