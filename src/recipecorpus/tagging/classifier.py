"""Derive cuisine, dietary, category and time signals from recipe tags."""

import re
from collections.abc import Iterable

CUISINE_KEYWORDS: tuple[str, ...] = (
    "italian",
    "mexican",
    "chinese",
    "japanese",
    "korean",
    "thai",
    "vietnamese",
    "indian",
    "greek",
    "french",
    "spanish",
    "mediterranean",
    "middle-eastern",
    "moroccan",
    "caribbean",
    "brazilian",
    "peruvian",
    "german",
    "british",
    "irish",
    "american",
    "southern",
    "cajun",
    "tex-mex",
    "asian",
    "european",
    "african",
    "hawaiian",
    "australian",
    "scandinavian",
    "polish",
    "russian",
)

DIETARY_KEYWORDS: tuple[str, ...] = (
    "vegetarian",
    "vegan",
    "gluten-free",
    "dairy-free",
    "low-carb",
    "low-fat",
    "low-sodium",
    "low-calorie",
    "keto",
    "paleo",
    "whole30",
    "diabetic",
    "heart-healthy",
    "high-protein",
    "high-fiber",
    "kosher",
    "halal",
)

# Ordered by priority; the first group with a hit decides the category
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("breakfast", ("breakfast", "brunch")),
    ("lunch", ("lunch",)),
    ("dinner", ("dinner", "main-dish")),
    ("dessert", ("dessert", "sweet")),
    ("appetizer", ("appetizer", "snack")),
    ("side", ("side",)),
    ("soup", ("soup", "stew")),
    ("salad", ("salad",)),
    ("beverage", ("beverage", "drink")),
)

RECIPE_CATEGORIES: tuple[str, ...] = tuple(category for category, _ in CATEGORY_KEYWORDS)

LONG_COOK_KEYWORDS: tuple[str, ...] = ("4-hours", "crock-pot", "slow-cooker")
LONG_COOK_MINUTES = 240

_MINUTES_OR_LESS = re.compile(r"^(\d+)-minutes-or-less$")


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in keywords)


def extract_cuisines(tags: list[str]) -> list[str]:
    """Tags naming a cuisine, in tag order (``north-american`` counts)."""
    return [tag for tag in tags if _contains_any(tag, CUISINE_KEYWORDS)]


def extract_dietary_flags(tags: list[str]) -> list[str]:
    """Tags naming a dietary restriction, in tag order."""
    return [tag for tag in tags if _contains_any(tag, DIETARY_KEYWORDS)]


def extract_category(tags: list[str], search_terms: list[str] | None = None) -> str | None:
    """
    Pick a single meal category from tags and search terms.

    Categories are tried in priority order (breakfast first, beverage last);
    None if no keyword appears in any term.
    """
    all_terms = [term.lower() for term in [*tags, *(search_terms or [])]]

    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in term for term in all_terms for keyword in keywords):
            return category

    return None


def extract_time_from_tags(tags: list[str]) -> int | None:
    """
    Estimate total minutes from tags like ``30-minutes-or-less``.

    Slow-cooker style tags without an explicit time estimate four hours.
    """
    for tag in tags:
        match = _MINUTES_OR_LESS.match(tag.strip().lower())
        if match:
            return int(match.group(1))

    if any(_contains_any(tag, LONG_COOK_KEYWORDS) for tag in tags):
        return LONG_COOK_MINUTES

    return None


_COMPONENT_TAGS = frozenset(
    {
        "side-dishes",
        "side",
        "side dish",
        "sauces",
        "marinades",
        "dressings",
        "condiments",
        "spreads",
    }
)

_COMPONENT_NAME_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.I)
    for pattern in (
        r"^(mashed|roasted|baked|steamed|grilled)\s+"
        r"(potatoes?|carrots?|broccoli|asparagus|vegetables?)$",
        r"^(garlic|butter|herb)\s+(rice|bread|noodles)$",
        r"^coleslaw$",
        r"^(french|sweet potato)\s+fries$",
        r"^cornbread$",
        r"^(dinner|bread)\s+rolls?$",
    )
)


def is_component_recipe(tags: list[str], name: str) -> bool:
    """Whether a recipe is a side or a component (sauce, dressing) rather than a meal."""
    tag_set = {tag.lower() for tag in tags}
    if tag_set & _COMPONENT_TAGS:
        return True

    lower = name.strip().lower()
    return any(pattern.match(lower) for pattern in _COMPONENT_NAME_PATTERNS)
