"""
Tests for rescaling whole recipes.
"""

import pytest
from recipe_common.scaling import rescale, rescale_amount
from recipe_common.parsing import parse
from recipe_common.models import ConversionOptions
from recipe_common.exceptions import ScalingError, AmbiguousUnitError


class TestRescaleRanges:
    """Tests for multiplying ranges."""

    def test_whole_number(self):
        assert rescale("1-2 c", 2) == "2-4 c"

    def test_fraction(self):
        assert rescale("2-4c", 1 / 2) == "1-2 c"
        assert rescale("1-2c", 1 / 2) == "1/2-1 c"
        assert rescale("1.5-3c", 1 / 3) == "0.5-1 c"

    def test_decimal(self):
        assert rescale("2-4c", 0.5) == "1-2 c"
        assert rescale("1 to 2 cups", 0.5) == "1/2 to 1 c"
        assert rescale("1 - 2 c", 1.5) == "1 1/2 - 3 c"

    def test_sides_in_different_units(self):
        assert rescale("1 - 3 tbsp", 1 / 3) == "1 tsp - 1 tbsp"

    def test_ordering_is_preserved(self):
        for multiplier in (0.25, 1 / 3, 0.5, 2, 3.5):
            parsed = parse("1-2 c")[0]
            scaled = parse(rescale_amount(parsed, multiplier, ConversionOptions(to="c")))
            low, high = scaled[0].bounds
            assert low <= high


class TestRescaleAmounts:
    """Tests for multiplying single amounts."""

    def test_double(self):
        assert rescale("1 1/2 c flour", 2) == "3 c flour"

    def test_half_to_smaller_unit(self):
        assert rescale("1 tbsp sugar", 1 / 3) == "1 tsp sugar"

    def test_unicode_glyph(self):
        assert rescale("1½ c milk", 2) == "3 c milk"

    def test_decimal_stays_decimal(self):
        assert rescale("1.5 c water", 1 / 3) == "0.5 c water"

    def test_unknown_unit_is_scaled(self):
        assert rescale("2 potatoes", 2) == "4 potatoes"

    def test_ambiguous_oz_is_scaled_not_converted(self):
        assert rescale("3 oz cheese", 2) == "6 oz cheese"

    def test_inexact_amount_falls_back_to_decimal(self):
        assert rescale("1 c rice", 0.3) == "0.3 c rice"

    def test_forced_fraction(self):
        options = ConversionOptions(format="fraction")
        assert rescale("1 c rice", 0.3, options) == "1/3 c rice"

    def test_flags(self):
        options = ConversionOptions(flags=["butter"])
        assert rescale("8 tbsp butter", 2) == "1 c butter"
        assert rescale("8 tbsp butter", 2, options) == "2 stick butter"

    def test_target_unit(self):
        options = ConversionOptions(to="tbsp")
        assert rescale("1/4 c oil", 1, options) == "4 tbsp oil"


class TestRescaleText:
    """Tests for rescaling blocks of text."""

    def test_no_amounts_is_identity(self):
        text = "salt and pepper to taste"
        assert rescale(text, 2) == text

    def test_duplicate_spans_each_rescaled(self):
        assert rescale("1 c sugar, 1 c milk", 2) == "2 c sugar, 2 c milk"

    def test_replacement_contains_later_span(self):
        # "2 c" produced by the first replacement must not be replaced again
        assert rescale("1 c flour, 2 c milk", 2) == "2 c flour, 4 c milk"

    def test_multiple_lines(self):
        text = "2 cups flour\n1 tsp salt\n2/3 cup sugar"
        assert rescale(text, 2) == "4 c flour\n2 tsp salt\n1 1/3 c sugar"

    def test_surrounding_text_kept(self):
        assert rescale("1 onion (about 2 c diced)", 2) == "2 onion (about 4 c diced)"

    def test_unconvertible_match_does_not_stop_the_rest(self):
        assert rescale("3 oz cheese and 1 c milk", 2) == "6 oz cheese and 2 c milk"

    def test_unreadable_amount_kept_as_written(self):
        assert rescale("3/0 c sugar, 1 c milk", 2) == "3/0 c sugar, 2 c milk"

    def test_range_without_unit_left_alone(self):
        assert rescale("serves 1 to 2", 2) == "serves 1 to 2"

    def test_fluid_ounce_spellings_agree(self):
        assert rescale("2 fl ounces rum", 2) == "4 oz rum"
        assert rescale("2 fl oz rum", 2) == "4 oz rum"

    def test_tiny_result_is_not_zero(self):
        assert rescale("1 tsp", 0.001) == "0.001 tsp"


class TestMultiplier:
    """Tests for invalid multipliers."""

    @pytest.mark.parametrize("multiplier", [0, -1, float("inf"), float("nan")])
    def test_invalid(self, multiplier):
        with pytest.raises(ScalingError):
            rescale("1 c", multiplier)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            rescale("no amounts here", 0)

    def test_strict_mode_raises(self):
        with pytest.raises(AmbiguousUnitError):
            rescale("3 oz cheese", 2, ConversionOptions(strict=True))
