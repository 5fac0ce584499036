"""
Tests for recipe-common unit conversion.
"""

import pytest
from recipe_common.conversion import (
    convert_unit,
    render_amount,
    select_table,
    auto_unit,
    oz_is_resolved,
)
from recipe_common.models import ConversionOptions, UnitFamily
from recipe_common.exceptions import (
    AmbiguousUnitError,
    IncompatibleUnitsError,
    UnitConversionError,
)


class TestVolumeConversion:
    """Tests for the default volume table."""

    def test_explicit_target(self):
        result = convert_unit(1, "c", ConversionOptions(to="tbsp"))
        assert result.amount == 16
        assert result.unit == "tbsp"

    def test_target_spelling_is_normalised(self):
        result = convert_unit(3, "tsp", ConversionOptions(to="Tablespoons"))
        assert result.amount == 1
        assert result.unit == "tbsp"

    def test_auto_small_amount_to_tsp(self):
        # 1/3 tbsp = 1 tsp
        result = convert_unit(1 / 3, "tbsp")
        assert result.unit == "tsp"
        assert abs(result.amount - 1.0) < 1e-9

    def test_auto_tbsp(self):
        result = convert_unit(1, "tbsp")
        assert result.unit == "tbsp"
        assert result.amount == 1

    def test_auto_cups(self):
        result = convert_unit(48, "tsp")
        assert result.unit == "c"
        assert result.amount == 1

    def test_auto_quarts(self):
        result = convert_unit(12, "cups")
        assert result.unit == "qt"
        assert result.amount == 3

    def test_auto_half_cup_stays_cups(self):
        result = convert_unit(8, "tbsp")
        assert result.unit == "c"
        assert result.amount == 0.5

    @pytest.mark.parametrize("unit", ["tsp", "tbsp", "c", "pt", "qt", "gal"])
    def test_identity(self, unit):
        result = convert_unit(2.5, unit, ConversionOptions(to=unit))
        assert result.amount == 2.5
        assert result.unit == unit
        assert result.warnings == []

    def test_string_form(self):
        result = convert_unit(1.5, "c", ConversionOptions(format="auto"))
        assert result.amount == "1 1/2"
        assert result.string == "1 1/2 c"


class TestOunces:
    """Tests for oz, which can be a weight or a volume."""

    def test_ambiguous_oz_is_unchanged(self):
        result = convert_unit(3, "oz", ConversionOptions())
        assert result.amount == 3
        assert result.unit == "oz"
        assert result.warnings
        assert "ambiguous" in result.warnings[0]
        assert not result.converted

    def test_ambiguous_oz_without_options(self):
        result = convert_unit(3, "ounces")
        assert result.unit == "oz"
        assert result.warnings

    def test_ambiguous_oz_strict(self):
        with pytest.raises(AmbiguousUnitError):
            convert_unit(3, "oz", ConversionOptions(strict=True))

    def test_ambiguous_is_conversion_error(self):
        with pytest.raises(UnitConversionError):
            convert_unit(3, "oz", ConversionOptions(strict=True))

    def test_weight_to_lb(self):
        result = convert_unit(32, "oz", ConversionOptions(type="weight"))
        assert result.unit == "lb"
        assert result.amount == 2

    def test_weight_stays_oz(self):
        result = convert_unit(8, "oz", ConversionOptions(type="weight"))
        assert result.unit == "oz"
        assert result.amount == 8

    def test_lb_to_oz(self):
        result = convert_unit(0.5, "lb", ConversionOptions(to="oz"))
        assert result.amount == 8
        assert result.unit == "oz"

    def test_fluid_oz_as_volume(self):
        result = convert_unit(16, "fl oz", ConversionOptions(type="volume"))
        assert result.unit == "c"
        assert result.amount == 2

    def test_liquor_keeps_small_amounts_in_oz(self):
        result = convert_unit(3, "oz", ConversionOptions(flags=["liquor"]))
        assert result.unit == "oz"
        assert result.amount == 3

    def test_liquor_converts_tbsp_to_oz(self):
        result = convert_unit(2, "tbsp", ConversionOptions(flags=["liquor"]))
        assert result.unit == "oz"
        assert result.amount == 1

    def test_resolution(self):
        assert not oz_is_resolved(ConversionOptions())
        assert oz_is_resolved(ConversionOptions(type="weight"))
        assert oz_is_resolved(ConversionOptions(flags=["dark rum liquor"]))


class TestFlour:
    """Tests for flour by weight."""

    def test_oz_to_cups(self):
        result = convert_unit(9, "oz", ConversionOptions(flags=["flour"], to="c"))
        assert result.amount == 2
        assert result.unit == "c"

    def test_cups_to_oz(self):
        result = convert_unit(2, "c", ConversionOptions(flags=["flour"], to="oz"))
        assert result.amount == 9

    def test_rye_flour_is_lighter(self):
        result = convert_unit(
            2, "cups", ConversionOptions(flags=["flour", "rye"], to="oz")
        )
        assert result.amount == 7

    def test_flour_in_oz_without_target_is_weight(self):
        result = convert_unit(20, "oz", ConversionOptions(flags=["flour"]))
        assert result.unit == "lb"
        assert result.amount == 1.25

    def test_flour_in_cups_stays_volume(self):
        family, _ = select_table("c", ConversionOptions(flags=["flour"]))
        assert family == UnitFamily.VOLUME


class TestButter:
    """Tests for butter conversions."""

    def test_tbsp_to_sticks(self):
        result = convert_unit(16, "tbsp", ConversionOptions(flags=["butter"]))
        assert result.unit == "stick"
        assert result.amount == 2

    def test_small_amount_in_tbsp(self):
        result = convert_unit(0.25, "c", ConversionOptions(flags=["butter"]))
        assert result.unit == "tbsp"
        assert result.amount == 4

    def test_oz_to_sticks(self):
        result = convert_unit(4, "oz", ConversionOptions(flags=["unsalted butter"]))
        assert result.unit == "stick"
        assert result.amount == 1

    def test_stick_implies_butter(self):
        result = convert_unit(1, "stick", ConversionOptions(to="tbsp"))
        assert result.amount == 8


class TestIncompatibleUnits:
    """Tests for units that cannot be converted."""

    def test_unknown_unit_passes_through(self):
        result = convert_unit(2, "potatoes")
        assert result.amount == 2
        assert result.unit == "potatoes"
        assert result.string == "2 potatoes"
        assert result.warnings

    def test_target_outside_table(self):
        result = convert_unit(1, "tsp", ConversionOptions(to="lb"))
        assert result.amount == 1
        assert result.unit == "tsp"
        assert "incompatible" in result.warnings[0]

    def test_strict_raises(self):
        with pytest.raises(IncompatibleUnitsError):
            convert_unit(1, "tsp", ConversionOptions(to="lb", strict=True))


class TestTableSelection:
    """Tests for choosing a conversion table."""

    def test_default_volume(self):
        family, table = select_table("c", ConversionOptions())
        assert family == UnitFamily.VOLUME
        assert table["c"] == 1

    def test_weight_type(self):
        family, _ = select_table("oz", ConversionOptions(type="weight"))
        assert family == UnitFamily.WEIGHT

    def test_lb_is_weight(self):
        family, _ = select_table("lb", ConversionOptions(flags=["butter"]))
        assert family == UnitFamily.WEIGHT

    def test_flour_between_oz_and_cups(self):
        family, table = select_table("oz", ConversionOptions(flags=["flour"], to="c"))
        assert family == UnitFamily.FLOUR
        assert table["oz"] == 4.5

    def test_butter(self):
        family, _ = select_table("tbsp", ConversionOptions(flags=["butter"]))
        assert family == UnitFamily.BUTTER


class TestAutoUnit:
    """Tests for the automatic unit thresholds."""

    @pytest.mark.parametrize("cups,expected", [
        (8, "qt"),
        (1 / 32, "tsp"),
        (1 / 16, "tbsp"),
        (0.2, "tbsp"),
        (0.25, "c"),
        (7.9, "c"),
    ])
    def test_volume(self, cups, expected):
        assert auto_unit(cups, UnitFamily.VOLUME, ConversionOptions()) == expected

    def test_weight(self):
        assert auto_unit(16, UnitFamily.WEIGHT, ConversionOptions()) == "lb"
        assert auto_unit(15, UnitFamily.WEIGHT, ConversionOptions()) == "oz"


class TestRenderAmount:
    """Tests for output formats."""

    def test_decimal_leaves_number(self):
        assert render_amount(0.3, "decimal") == 0.3
        assert render_amount(0.3) == 0.3

    def test_auto_exact(self):
        assert render_amount(0.5, "auto") == "1/2"

    def test_auto_inexact(self):
        assert render_amount(0.3, "auto") == "0.3"

    def test_fraction_forces_nearest(self):
        assert render_amount(0.3, "fraction") == "1/3"
