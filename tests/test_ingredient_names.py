"""Unit tests for the canonical ingredient vocabulary."""

import pytest

from recipecorpus.normalize.ingredients import (
    INGREDIENT_CATEGORIES,
    NORMALIZATION_RULES,
    default_unit_for,
    detect_category,
    estimate_shelf_life,
    ingredient_profile,
    is_shelf_stable,
    normalize_ingredient_name,
    strip_qualifiers,
)

# =============================================================================
# Name Normalization Tests
# =============================================================================


class TestNormalizeIngredientName:
    """Tests for normalize_ingredient_name function."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Garlic Cloves", "garlic"),
            ("cloves of garlic", "garlic"),
            ("flour", "all-purpose flour"),
            ("all purpose flour", "all-purpose flour"),
            ("onion", "yellow onion"),
            ("red onions", "red onion"),
            ("kosher salt", "salt"),
            ("salt and pepper", "salt"),
            ("pepper", "black pepper"),
            ("extra-virgin olive oil", "olive oil"),
            ("boneless skinless chicken breasts", "chicken breast"),
            ("lean ground beef", "ground beef"),
            ("confectioners sugar", "powdered sugar"),
            ("corn starch", "cornstarch"),
            ("garbanzo beans", "canned chickpeas"),
        ],
    )
    def test_rules(self, name, expected):
        """Test spellings that map to a canonical name."""
        assert normalize_ingredient_name(name) == expected

    def test_trailing_preparation_stripped(self):
        """Test that a trailing preparation word is removed before matching."""
        assert normalize_ingredient_name("parsley, chopped") == "fresh parsley"
        assert normalize_ingredient_name("cheddar cheese shredded") == "cheddar cheese"
        assert normalize_ingredient_name("brown sugar, firmly packed") == "brown sugar"

    def test_trailing_optionality_stripped(self):
        """Test that optionality markers are removed."""
        assert normalize_ingredient_name("salt, to taste") == "salt"
        assert normalize_ingredient_name("cilantro for garnish") == "fresh cilantro"

    def test_stacked_qualifiers_stripped(self):
        """Test that several trailing qualifiers are all removed."""
        assert normalize_ingredient_name("parsley chopped fresh") == "fresh parsley"
        assert strip_qualifiers("cheese, grated, to taste") == "cheese"

    @pytest.mark.parametrize(
        "name",
        [
            "parsley chopped fresh",
            "cheddar cheese shredded",
            "salt, to taste",
            "brown sugar, firmly packed",
        ],
    )
    def test_idempotent(self, name):
        """Test that a canonical name normalizes to itself."""
        canonical = normalize_ingredient_name(name)
        assert normalize_ingredient_name(canonical) == canonical

    def test_word_boundary_respected(self):
        """Test that a preparation word inside another word is left alone."""
        assert strip_qualifiers("straw") == "straw"

    def test_unknown_name_returned_stripped(self):
        """Test that names without a rule come back lower-cased and trimmed."""
        assert normalize_ingredient_name("  Dragon Fruit ") == "dragon fruit"

    def test_empty(self):
        """Test empty input."""
        assert normalize_ingredient_name("") == ""

    def test_first_match_wins(self):
        """Test that rule order decides overlapping spellings."""
        # "sugar" is listed before "brown sugar" but fullmatch keeps them apart
        assert normalize_ingredient_name("sugar") == "sugar"
        assert normalize_ingredient_name("brown sugar") == "brown sugar"

    def test_pure(self):
        """Test that results do not depend on call order."""
        names = ["onion", "garlic cloves", "flour", "dragon fruit"]
        forward = [normalize_ingredient_name(n) for n in names]
        backward = [normalize_ingredient_name(n) for n in reversed(names)]

        assert forward == list(reversed(backward))

    def test_rules_are_immutable(self):
        """Test that the rule table is a tuple."""
        assert isinstance(NORMALIZATION_RULES, tuple)


# =============================================================================
# Classification Tests
# =============================================================================


class TestDetectCategory:
    """Tests for detect_category function."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("chicken breast", "protein"),
            ("milk", "dairy"),
            ("garlic", "produce"),
            ("black pepper", "spice"),
            ("salt", "spice"),
            ("all-purpose flour", "grains"),
            ("sugar", "baking"),
            ("olive oil", "condiment"),
            ("canned black beans", "canned"),
            ("dragon fruit", "other"),
        ],
    )
    def test_categories(self, name, expected):
        """Test category detection for canonical names."""
        assert detect_category(name) == expected

    def test_always_known_category(self):
        """Test that every result is one of the declared categories."""
        for name in ["beef chuck", "honey", "frozen peas", "beer", "xyz"]:
            assert detect_category(name) in INGREDIENT_CATEGORIES


class TestShelfLife:
    """Tests for is_shelf_stable and estimate_shelf_life."""

    def test_shelf_stable(self):
        """Test pantry and perishable ingredients."""
        assert is_shelf_stable("flour") is True
        assert is_shelf_stable("soy sauce") is True
        assert is_shelf_stable("milk") is False
        assert is_shelf_stable("chicken breast") is False

    def test_estimate_shelf_life(self):
        """Test shelf-life estimates by category."""
        assert estimate_shelf_life("chicken breast") == 3
        assert estimate_shelf_life("bacon") == 14
        assert estimate_shelf_life("milk") == 7
        assert estimate_shelf_life("butter") == 30
        assert estimate_shelf_life("garlic") == 30
        assert estimate_shelf_life("sugar") is None


class TestIngredientProfile:
    """Tests for default_unit_for and ingredient_profile."""

    def test_default_units(self):
        """Test weight, count and volume defaults."""
        assert default_unit_for("flour") == "g"
        assert default_unit_for("eggs") == "pcs"
        assert default_unit_for("soy sauce") == "ml"
        assert default_unit_for("dragon fruit") == "g"

    def test_profile(self):
        """Test the full profile for a spelling variant."""
        profile = ingredient_profile("flour")

        assert profile.name == "all-purpose flour"
        assert profile.category == "grains"
        assert profile.default_unit == "g"
        assert profile.grams_per_cup == 120
        assert profile.shelf_stable is True
        assert profile.perishable_days is None
