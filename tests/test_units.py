"""Unit tests for quantity parsing and metric conversion."""

import pytest

from recipecorpus.normalize.units import (
    MetricQuantity,
    convert_to_metric,
    normalize_unit_name,
    parse_quantity,
)

# =============================================================================
# Parsing Tests
# =============================================================================


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_integer(self):
        """Test parsing simple integers."""
        assert parse_quantity("2") == 2.0
        assert parse_quantity("10") == 10.0

    def test_parse_decimal(self):
        """Test parsing decimal numbers."""
        assert parse_quantity("1.5") == 1.5

    def test_parse_fraction(self):
        """Test parsing simple fractions."""
        assert parse_quantity("1/2") == 0.5
        assert parse_quantity("3/4") == 0.75

    def test_parse_mixed_fraction(self):
        """Test parsing mixed fractions like '1 1/2'."""
        assert parse_quantity("1 1/2") == 1.5
        assert parse_quantity("2 1/4") == 2.25

    def test_parse_range(self):
        """Test that ranges return their midpoint."""
        assert parse_quantity("1-2") == 1.5
        assert parse_quantity("2-3") == 2.5

    def test_parse_unparseable(self):
        """Test that text without a number yields zero."""
        assert parse_quantity("") == 0.0
        assert parse_quantity("to taste") == 0.0

    def test_zero_denominator(self):
        """Test that a zero denominator does not raise."""
        assert parse_quantity("1/0") == 0.0


class TestNormalizeUnitName:
    """Tests for normalize_unit_name function."""

    @pytest.mark.parametrize(
        "unit,expected",
        [
            ("cups", "cup"),
            ("Tablespoons", "tbsp"),
            ("teaspoon", "tsp"),
            ("ounce", "oz"),
            ("pounds", "lb"),
            ("cloves", "clove"),
            ("pieces", "pcs"),
        ],
    )
    def test_aliases(self, unit, expected):
        """Test spelling variants map to abbreviations."""
        assert normalize_unit_name(unit) == expected

    def test_unknown_unit_lower_cased(self):
        """Test that unknown units pass through lower-cased."""
        assert normalize_unit_name("Handful") == "handful"


# =============================================================================
# Conversion Tests
# =============================================================================


class TestConvertToMetric:
    """Tests for convert_to_metric function."""

    def test_volume_with_density(self):
        """Test that flour by the cup is converted to grams."""
        assert convert_to_metric(2, "cup", "all-purpose flour") == MetricQuantity(240, "g")

    def test_density_rounds_half_up(self):
        """Test that density results are rounded to whole grams."""
        # 1 tsp = 5 ml; 5 / 240 * 200 = 4.17
        assert convert_to_metric(1, "tsp", "sugar") == MetricQuantity(4, "g")

    def test_density_uses_canonical_name(self):
        """Test that density lookup goes through the name normalizer."""
        assert convert_to_metric(1, "cup", "whole milk") == MetricQuantity(245, "g")

    def test_volume_without_density(self):
        """Test liquids without a density stay in milliliters."""
        assert convert_to_metric(1, "cup", "water") == MetricQuantity(240, "ml")
        assert convert_to_metric(1, "tbsp") == MetricQuantity(15, "ml")

    def test_weight(self):
        """Test weight units convert to grams."""
        assert convert_to_metric(1, "lb") == MetricQuantity(454, "g")
        assert convert_to_metric(2, "kg") == MetricQuantity(2000, "g")

    def test_unnormalized_unit(self):
        """Test that long unit spellings are accepted."""
        assert convert_to_metric(14, "ounce") == MetricQuantity(392, "g")
        assert convert_to_metric(2, "tablespoons") == MetricQuantity(30, "ml")

    def test_metric_units_idempotent(self):
        """Test that grams and milliliters come back unchanged."""
        assert convert_to_metric(37.5, "g") == MetricQuantity(37.5, "g")
        assert convert_to_metric(12.25, "ml") == MetricQuantity(12.25, "ml")

    def test_reconverting_result_is_stable(self):
        """Test that converting a converted quantity again changes nothing."""
        first = convert_to_metric(3, "oz")
        second = convert_to_metric(first.value, first.unit)

        assert second == first

    def test_count_units(self):
        """Test count units become pieces."""
        assert convert_to_metric(3, "clove", "garlic") == MetricQuantity(3, "pcs")
        assert convert_to_metric(2, "large") == MetricQuantity(2, "pcs")
        assert convert_to_metric(4, "pcs") == MetricQuantity(4, "pcs")

    def test_pinch(self):
        """Test the rough pinch conversion."""
        assert convert_to_metric(2, "pinch") == MetricQuantity(1.0, "g")

    def test_unknown_unit(self):
        """Test that unknown units yield None."""
        assert convert_to_metric(1, "handful") is None
        assert convert_to_metric(1, "") is None
