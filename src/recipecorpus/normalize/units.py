"""Unit normalization and conversion utilities."""

import math
import re
from dataclasses import dataclass

from recipecorpus.normalize.ingredients import INGREDIENT_DENSITIES, normalize_ingredient_name

# =============================================================================
# Unit Tables
# =============================================================================

# Spelling variants -> canonical unit abbreviation
UNIT_ALIASES: dict[str, str] = {
    "cup": "cup",
    "cups": "cup",
    "c": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "fl oz": "fl oz",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "gram": "g",
    "grams": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "ml": "ml",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "l": "l",
    "clove": "clove",
    "cloves": "clove",
    "stalk": "stalk",
    "stalks": "stalk",
    "head": "head",
    "heads": "head",
    "bunch": "bunch",
    "bunches": "bunch",
    "piece": "pcs",
    "pieces": "pcs",
    "pc": "pcs",
    "pcs": "pcs",
    "slice": "slice",
    "slices": "slice",
    "can": "can",
    "cans": "can",
    "bottle": "bottle",
    "bottles": "bottle",
    "package": "package",
    "packages": "package",
    "bag": "bag",
    "bags": "bag",
    "box": "box",
    "boxes": "box",
    "jar": "jar",
    "jars": "jar",
    "sprig": "sprig",
    "sprigs": "sprig",
    "leaf": "leaf",
    "leaves": "leaf",
    "large": "large",
    "medium": "medium",
    "small": "small",
    "whole": "whole",
    "pinch": "pinch",
    "dash": "dash",
}

CUP_ML = 240.0


@dataclass(frozen=True)
class UnitConversion:
    """How many metric units one of a given unit is worth."""

    to_metric: float
    metric_unit: str  # "g" or "ml"


# Direct conversions, keyed by canonical abbreviation
UNIT_CONVERSIONS: dict[str, UnitConversion] = {
    # Volume to ml
    "cup": UnitConversion(CUP_ML, "ml"),
    "tbsp": UnitConversion(15.0, "ml"),
    "tsp": UnitConversion(5.0, "ml"),
    "l": UnitConversion(1000.0, "ml"),
    "ml": UnitConversion(1.0, "ml"),
    "fl oz": UnitConversion(30.0, "ml"),
    # Weight to g
    "lb": UnitConversion(454.0, "g"),
    "oz": UnitConversion(28.0, "g"),
    "kg": UnitConversion(1000.0, "g"),
    "g": UnitConversion(1.0, "g"),
    # Rough, vary by ingredient
    "pinch": UnitConversion(0.5, "g"),
    "dash": UnitConversion(0.5, "ml"),
}

# Count-based units map 1:1 to pieces
COUNT_UNITS: frozenset[str] = frozenset(
    {
        "pcs",
        "whole",
        "large",
        "medium",
        "small",
        "clove",
        "head",
        "bunch",
        "stalk",
        "sprig",
        "leaf",
        "slice",
        "can",
        "bottle",
        "package",
        "jar",
        "bag",
        "box",
    }
)


@dataclass(frozen=True)
class MetricQuantity:
    """A quantity expressed in grams, milliliters or pieces."""

    value: float
    unit: str


# =============================================================================
# Parsing Functions
# =============================================================================

_MIXED_NUMBER = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION = re.compile(r"^(\d+)/(\d+)$")
_LEADING_NUMBER = re.compile(r"^\d+(?:\.\d+)?")


def parse_quantity(quantity_str: str) -> float:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2"
    - "1.5"
    - "1/2"
    - "1 1/2" (one and a half)
    - "1-2" (range, returns the midpoint)

    Unparseable text yields 0.0.
    """
    quantity_str = (quantity_str or "").strip()
    if not quantity_str:
        return 0.0

    if "-" in quantity_str and "/" not in quantity_str:
        low, _, high = quantity_str.partition("-")
        return (parse_quantity(low) + parse_quantity(high)) / 2

    mixed_match = _MIXED_NUMBER.match(quantity_str)
    if mixed_match:
        whole, num, denom = (int(g) for g in mixed_match.groups())
        return whole + (num / denom if denom else 0.0)

    frac_match = _FRACTION.match(quantity_str)
    if frac_match:
        num, denom = (int(g) for g in frac_match.groups())
        return num / denom if denom else 0.0

    num_match = _LEADING_NUMBER.match(quantity_str)
    if num_match:
        return float(num_match.group(0))

    return 0.0


def normalize_unit_name(unit: str) -> str:
    """Map a unit spelling to its canonical abbreviation (``tablespoons`` -> ``tbsp``)."""
    lower = " ".join(unit.lower().split())
    return UNIT_ALIASES.get(lower, lower)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


# =============================================================================
# Conversion
# =============================================================================


def convert_to_metric(
    quantity: float,
    from_unit: str,
    ingredient_name: str | None = None,
) -> MetricQuantity | None:
    """
    Convert a quantity to grams, milliliters or pieces.

    Volumes of ingredients with a known density are converted to grams via
    their grams-per-cup value. Count units keep the quantity and become
    ``pcs``.

    Args:
        quantity: Amount in ``from_unit``.
        from_unit: Any spelling known to ``normalize_unit_name``.
        ingredient_name: Optional ingredient, enables density conversion.

    Returns:
        MetricQuantity, or None if the unit is not recognized.
    """
    if not from_unit:
        return None

    unit = normalize_unit_name(from_unit)

    conversion = UNIT_CONVERSIONS.get(unit)
    if conversion is not None:
        if conversion.metric_unit == "ml" and ingredient_name:
            density = INGREDIENT_DENSITIES.get(normalize_ingredient_name(ingredient_name))
            if density:
                cups = quantity * conversion.to_metric / CUP_ML
                return MetricQuantity(value=_round_half_up(cups * density), unit="g")

        if conversion.to_metric == 1.0:
            return MetricQuantity(value=quantity, unit=conversion.metric_unit)

        return MetricQuantity(
            value=_round_half_up(quantity * conversion.to_metric),
            unit=conversion.metric_unit,
        )

    if unit in COUNT_UNITS:
        return MetricQuantity(value=quantity, unit="pcs")

    return None
