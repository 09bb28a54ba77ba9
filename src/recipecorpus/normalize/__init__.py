"""Normalize ingredient text into canonical names, units and metric quantities."""

from recipecorpus.normalize.ingredients import (
    IngredientProfile,
    detect_category,
    estimate_shelf_life,
    ingredient_profile,
    is_shelf_stable,
    normalize_ingredient_name,
)
from recipecorpus.normalize.parser import parse_ingredient_string
from recipecorpus.normalize.units import (
    MetricQuantity,
    convert_to_metric,
    normalize_unit_name,
    parse_quantity,
)

__all__ = [
    "IngredientProfile",
    "MetricQuantity",
    "convert_to_metric",
    "detect_category",
    "estimate_shelf_life",
    "ingredient_profile",
    "is_shelf_stable",
    "normalize_ingredient_name",
    "normalize_unit_name",
    "parse_ingredient_string",
    "parse_quantity",
]
