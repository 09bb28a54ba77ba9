"""Split free-text ingredient lines into quantity, unit, name and preparation."""

import re

from recipecorpus.normalize.ingredients import normalize_ingredient_name
from recipecorpus.normalize.units import normalize_unit_name, parse_quantity
from recipecorpus.schemas import ParsedIngredient

_NUMBER = r"\d+(?:\.\d+)?"

# "1", "1.5", "1/2", "1 1/2", "1-2"
QUANTITY_PATTERN = re.compile(rf"^({_NUMBER}(?:\s*[-/]\s*{_NUMBER})?(?:\s+\d+/\d+)?)\s*")

# "(14 ounce) ", "(1-2 pound) "
PARENTHETICAL_PATTERN = re.compile(rf"^\(({_NUMBER}(?:\s*[-/]\s*{_NUMBER})?)\s*(\w+)\)\s*")

CONTAINER_PATTERN = re.compile(r"^(cans?|bottles?|packages?|bags?|box(?:es)?|jars?)\s+", re.I)

UNIT_PATTERN = re.compile(
    r"^(cups?|tablespoons?|tbsps?|teaspoons?|tsps?|ounces?|oz|pounds?|lbs?|grams?|g|"
    r"kilograms?|kg|milliliters?|ml|liters?|l|cloves?|stalks?|heads?|bunch(?:es)?|"
    r"pieces?|pcs?|slices?|large|medium|small|whole|pinch|dash|sprigs?|leaves|leaf|"
    r"cans?|bottles?|packages?|bags?|box(?:es)?|jars?)\s+",
    re.I,
)


def parse_ingredient_string(raw: str) -> ParsedIngredient:
    """
    Parse one ingredient line.

    Examples:
        "4 cups water" -> quantity=4, unit="cup", name="water"
        "1 (14 ounce) can diced tomatoes, drained"
            -> quantity=14, unit="ounce", name="diced tomatoes", preparation="drained"
        "2 (8 ounce) bottles clam juice" -> quantity=16, unit="ounce", name="clam juice"

    Never raises; text that cannot be split ends up as the name.
    """
    original = (raw or "").strip()
    text = original

    if len(text) < 2:
        return ParsedIngredient(name=text, raw=original)

    preparation: str | None = None
    comma_idx = text.find(",")
    if comma_idx > 0:
        preparation = text[comma_idx + 1 :].strip() or None
        text = text[:comma_idx].strip()

    quantity: float | None = None
    qty_match = QUANTITY_PATTERN.match(text)
    if qty_match:
        quantity = parse_quantity(qty_match.group(1))
        text = text[qty_match.end() :]

    unit: str | None = None
    paren_match = PARENTHETICAL_PATTERN.match(text)

    if paren_match:
        paren_qty = parse_quantity(paren_match.group(1))
        unit = paren_match.group(2).lower()
        text = text[paren_match.end() :]

        container_match = CONTAINER_PATTERN.match(text)
        if container_match:
            # "2 (8 ounce) bottles" is 16 ounces in total
            if quantity and paren_qty:
                quantity = quantity * paren_qty
            elif paren_qty:
                quantity = paren_qty
            text = text[container_match.end() :]
    else:
        unit_match = UNIT_PATTERN.match(text)
        if unit_match:
            unit = normalize_unit_name(unit_match.group(1))
            text = text[unit_match.end() :]

    raw_name = text.strip().lower()
    name = normalize_ingredient_name(raw_name) or raw_name

    return ParsedIngredient(
        quantity=quantity,
        unit=unit,
        name=name,
        preparation=preparation,
        raw=original,
    )
