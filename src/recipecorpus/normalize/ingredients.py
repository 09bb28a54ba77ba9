"""Canonical ingredient vocabulary.

Maps the thousands of spellings found in recipe text to a small set of
canonical names, and derives category, default unit and shelf-life data for
each canonical name. All tables here are built once at import time and never
mutated, so every function is pure.
"""

import re
from dataclasses import dataclass

# =============================================================================
# Name Normalization
# =============================================================================

_TRAILING_PREPARATION = re.compile(
    r",?\s*\b(?:firmly packed|loosely packed|lightly packed|packed|fresh|dried|ground|"
    r"chopped|diced|minced|sliced|shredded|grated|crushed|whole|raw|cooked|frozen|canned)"
    r"\s*$"
)
_TRAILING_OPTIONALITY = re.compile(
    r",?\s*\b(?:to taste|for garnish|optional|as needed|divided|or more|or less)\s*$"
)


def _rules(*pairs: tuple[str, str]) -> tuple[tuple[re.Pattern[str], str], ...]:
    return tuple((re.compile(pattern), canonical) for pattern, canonical in pairs)


# Ordered (pattern, canonical) pairs. Matched with fullmatch; first match wins.
NORMALIZATION_RULES: tuple[tuple[re.Pattern[str], str], ...] = _rules(
    # Eggs
    (r"eggs?", "eggs"),
    (r"egg yolks?", "egg yolks"),
    (r"egg whites?", "egg whites"),
    (r"(?:large|medium|small) eggs?", "eggs"),
    # Garlic
    (r"garlic cloves?", "garlic"),
    (r"cloves? (?:of )?garlic", "garlic"),
    (r"fresh garlic", "garlic"),
    (r"garlic", "garlic"),
    # Onions
    (r"yellow onions?", "yellow onion"),
    (r"white onions?", "white onion"),
    (r"red onions?", "red onion"),
    (r"sweet onions?", "sweet onion"),
    (r"onions?", "yellow onion"),
    # Flour
    (r"all[- ]purpose flour", "all-purpose flour"),
    (r"plain flour", "all-purpose flour"),
    (r"flour", "all-purpose flour"),
    (r"bread flour", "bread flour"),
    (r"cake flour", "cake flour"),
    (r"whole wheat flour", "whole wheat flour"),
    (r"self[- ]rising flour", "self-rising flour"),
    # Sugar
    (r"granulated sugar", "sugar"),
    (r"white sugar", "sugar"),
    (r"caster sugar", "sugar"),
    (r"sugar", "sugar"),
    (r"brown sugar", "brown sugar"),
    (r"light brown sugar", "brown sugar"),
    (r"dark brown sugar", "dark brown sugar"),
    (r"powdered sugar", "powdered sugar"),
    (r"confectioner'?s'? sugar", "powdered sugar"),
    (r"icing sugar", "powdered sugar"),
    # Salt & pepper
    (r"kosher salt", "salt"),
    (r"sea salt", "salt"),
    (r"table salt", "salt"),
    (r"salt", "salt"),
    (r"salt (?:and|&) pepper", "salt"),
    (r"black pepper", "black pepper"),
    (r"ground black pepper", "black pepper"),
    (r"freshly ground black pepper", "black pepper"),
    (r"pepper", "black pepper"),
    (r"white pepper", "white pepper"),
    # Butter
    (r"unsalted butter", "butter"),
    (r"salted butter", "butter"),
    (r"butter", "butter"),
    (r"margarine", "margarine"),
    # Milk & cream
    (r"whole milk", "milk"),
    (r"2% milk", "milk"),
    (r"skim milk", "skim milk"),
    (r"low[- ]fat milk", "low-fat milk"),
    (r"milk", "milk"),
    (r"heavy cream", "heavy cream"),
    (r"whipping cream", "heavy cream"),
    (r"heavy whipping cream", "heavy cream"),
    (r"light cream", "light cream"),
    (r"half[- ]and[- ]half", "half-and-half"),
    (r"sour cream", "sour cream"),
    # Oils
    (r"extra[- ]virgin olive oil", "olive oil"),
    (r"olive oil", "olive oil"),
    (r"vegetable oil", "vegetable oil"),
    (r"canola oil", "canola oil"),
    (r"coconut oil", "coconut oil"),
    (r"sesame oil", "sesame oil"),
    # Chicken
    (r"boneless,? skinless chicken breasts?", "chicken breast"),
    (r"chicken breasts?", "chicken breast"),
    (r"boneless,? skinless chicken thighs?", "chicken thighs"),
    (r"chicken thighs?", "chicken thighs"),
    (r"chicken drumsticks?", "chicken drumsticks"),
    (r"chicken wings?", "chicken wings"),
    (r"whole chicken", "whole chicken"),
    # Beef
    (r"ground beef", "ground beef"),
    (r"lean ground beef", "ground beef"),
    (r"beef stew meat", "beef stew meat"),
    (r"beef chuck", "beef chuck"),
    (r"sirloin steak", "sirloin steak"),
    (r"ribeye steak", "ribeye steak"),
    (r"flank steak", "flank steak"),
    # Canned tomatoes
    (r"(?:canned )?diced tomatoes", "diced tomatoes"),
    (r"(?:canned )?crushed tomatoes", "crushed tomatoes"),
    (r"tomato sauce", "tomato sauce"),
    (r"tomato paste", "tomato paste"),
    # Canned beans
    (r"canned black beans", "canned black beans"),
    (r"black beans", "canned black beans"),
    (r"canned kidney beans", "canned kidney beans"),
    (r"kidney beans", "canned kidney beans"),
    (r"canned chickpeas", "canned chickpeas"),
    (r"chickpeas", "canned chickpeas"),
    (r"garbanzo beans", "canned chickpeas"),
    (r"canned white beans", "canned white beans"),
    (r"cannellini beans", "canned white beans"),
    # Fresh herbs
    (r"fresh parsley", "fresh parsley"),
    (r"parsley", "fresh parsley"),
    (r"flat[- ]leaf parsley", "fresh parsley"),
    (r"italian parsley", "fresh parsley"),
    (r"fresh cilantro", "fresh cilantro"),
    (r"cilantro", "fresh cilantro"),
    (r"coriander leaves?", "fresh cilantro"),
    (r"fresh basil", "fresh basil"),
    (r"basil leaves?", "fresh basil"),
    (r"fresh thyme", "fresh thyme"),
    (r"thyme", "fresh thyme"),
    (r"fresh rosemary", "fresh rosemary"),
    (r"rosemary", "fresh rosemary"),
    (r"fresh dill", "fresh dill"),
    (r"dill", "fresh dill"),
    (r"fresh mint", "fresh mint"),
    (r"mint leaves?", "fresh mint"),
    # Dried spices
    (r"ground cumin", "cumin"),
    (r"cumin", "cumin"),
    (r"ground cinnamon", "cinnamon"),
    (r"cinnamon", "cinnamon"),
    (r"ground paprika", "paprika"),
    (r"paprika", "paprika"),
    (r"smoked paprika", "smoked paprika"),
    (r"ground cayenne pepper", "cayenne pepper"),
    (r"cayenne pepper", "cayenne pepper"),
    (r"cayenne", "cayenne pepper"),
    (r"dried oregano", "oregano"),
    (r"oregano", "oregano"),
    (r"dried basil", "dried basil"),
    (r"dried thyme", "dried thyme"),
    # Vinegars & sauces
    (r"balsamic vinegar", "balsamic vinegar"),
    (r"white wine vinegar", "white wine vinegar"),
    (r"red wine vinegar", "red wine vinegar"),
    (r"apple cider vinegar", "apple cider vinegar"),
    (r"rice vinegar", "rice vinegar"),
    (r"soy sauce", "soy sauce"),
    (r"low[- ]sodium soy sauce", "soy sauce"),
    (r"worcestershire sauce", "worcestershire sauce"),
    # Vanilla
    (r"vanilla extract", "vanilla extract"),
    (r"pure vanilla extract", "vanilla extract"),
    (r"vanilla", "vanilla extract"),
    # Cheese
    (r"shredded cheddar cheese", "cheddar cheese"),
    (r"cheddar cheese", "cheddar cheese"),
    (r"shredded mozzarella cheese", "mozzarella cheese"),
    (r"mozzarella cheese", "mozzarella cheese"),
    (r"parmesan cheese", "parmesan cheese"),
    (r"parmigiano[- ]reggiano", "parmesan cheese"),
    (r"grated parmesan", "parmesan cheese"),
    (r"cream cheese", "cream cheese"),
    (r"feta cheese", "feta cheese"),
    (r"goat cheese", "goat cheese"),
    # Rice & grains
    (r"long[- ]grain rice", "long-grain rice"),
    (r"white rice", "long-grain rice"),
    (r"rice", "long-grain rice"),
    (r"jasmine rice", "jasmine rice"),
    (r"basmati rice", "basmati rice"),
    (r"brown rice", "brown rice"),
    (r"quinoa", "quinoa"),
    # Pasta
    (r"spaghetti", "spaghetti"),
    (r"penne", "penne"),
    (r"fusilli", "fusilli"),
    (r"rigatoni", "rigatoni"),
    (r"fettuccine", "fettuccine"),
    (r"linguine", "linguine"),
    (r"elbow macaroni", "elbow macaroni"),
    (r"macaroni", "elbow macaroni"),
    # Bread
    (r"bread crumbs", "bread crumbs"),
    (r"panko bread crumbs", "panko bread crumbs"),
    (r"panko", "panko bread crumbs"),
    # Nuts
    (r"almonds", "almonds"),
    (r"sliced almonds", "almonds"),
    (r"walnuts", "walnuts"),
    (r"pecans", "pecans"),
    (r"cashews", "cashews"),
    (r"peanuts", "peanuts"),
    (r"pine nuts", "pine nuts"),
    # Baking
    (r"baking powder", "baking powder"),
    (r"baking soda", "baking soda"),
    (r"active dry yeast", "active dry yeast"),
    (r"instant yeast", "instant yeast"),
    (r"yeast", "active dry yeast"),
    (r"corn ?starch", "cornstarch"),
)


def strip_qualifiers(name: str) -> str:
    """Drop trailing preparation words and optionality markers until none remain."""
    stripped = name.lower().strip()
    previous = None
    while stripped != previous:
        previous = stripped
        stripped = _TRAILING_PREPARATION.sub("", stripped)
        stripped = _TRAILING_OPTIONALITY.sub("", stripped).strip()
    return stripped


def normalize_ingredient_name(name: str) -> str:
    """
    Normalize an ingredient name to its canonical form.

    Examples:
        "Garlic Cloves" -> "garlic"
        "flour" -> "all-purpose flour"
        "salt, to taste" -> "salt"
        "dragon fruit" -> "dragon fruit" (no rule, returned as-is)
    """
    if not name:
        return ""

    normalized = strip_qualifiers(name)

    for pattern, canonical in NORMALIZATION_RULES:
        if pattern.fullmatch(normalized):
            return canonical

    return normalized


# =============================================================================
# Density Table
# =============================================================================

# Grams per US cup, keyed by canonical name
INGREDIENT_DENSITIES: dict[str, float] = {
    # Flour
    "all-purpose flour": 120,
    "bread flour": 127,
    "cake flour": 114,
    "whole wheat flour": 128,
    # Sugar
    "sugar": 200,
    "brown sugar": 220,
    "powdered sugar": 120,
    # Dairy
    "butter": 227,
    "milk": 245,
    "heavy cream": 240,
    "sour cream": 230,
    # Oils
    "olive oil": 216,
    "vegetable oil": 218,
    # Rice & grains
    "long-grain rice": 185,
    "basmati rice": 190,
    "brown rice": 195,
    "quinoa": 170,
    # Oats
    "oats": 80,
    "rolled oats": 80,
    # Nuts, chopped
    "almonds": 95,
    "walnuts": 100,
    "pecans": 100,
    # Cheese, shredded
    "cheddar cheese": 115,
    "mozzarella cheese": 115,
    "parmesan cheese": 100,
    # Honey & syrups
    "honey": 340,
    "maple syrup": 315,
}


# =============================================================================
# Category Detection
# =============================================================================

INGREDIENT_CATEGORIES = (
    "protein",
    "produce",
    "dairy",
    "grains",
    "canned",
    "condiment",
    "spice",
    "baking",
    "frozen",
    "beverage",
    "other",
)

# Ordered; the first pattern found anywhere in the canonical name decides
CATEGORY_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), category)
    for pattern, category in (
        (r"^(?:salt|black pepper|white pepper|pepper|cayenne pepper)$", "spice"),
        (
            r"chicken|beef|pork|lamb|fish|salmon|tuna|shrimp|prawn|turkey|duck|bacon|sausage|"
            r"ham|steak|ground|meatball|tofu|tempeh|seitan",
            "protein",
        ),
        (r"milk|cream|cheese|butter|yogurt|sour cream|eggs?|half-and-half|buttermilk", "dairy"),
        (
            r"onion|garlic|tomato|potato|carrot|celery|pepper|broccoli|spinach|lettuce|cabbage|"
            r"zucchini|squash|cucumber|mushroom|asparagus|corn|peas|eggplant|cauliflower|kale|"
            r"chard|apple|banana|orange|lemon|lime|berry|grape|mango|pineapple|peach|pear|cherry|"
            r"melon|avocado|ginger|jalape(?:n|ñ)o|bell pepper|green onion|scallion",
            "produce",
        ),
        (
            r"^fresh\s|parsley|cilantro|basil|thyme|rosemary|dill|mint|chives|oregano(?!.*dried)",
            "produce",
        ),
        (r"^canned|tomato sauce|tomato paste|broth|stock|coconut milk", "canned"),
        (
            r"flour|rice|pasta|noodle|bread|oat|cereal|quinoa|couscous|barley|spaghetti|penne|"
            r"fusilli|macaroni|fettuccine|linguine",
            "grains",
        ),
        (
            r"sugar|baking powder|baking soda|yeast|vanilla|cocoa|chocolate chip|cornstarch|"
            r"cream of tartar",
            "baking",
        ),
        (
            r"cumin|paprika|cinnamon|oregano|cayenne|chili powder|curry|turmeric|nutmeg|allspice|"
            r"cloves|cardamom|coriander|dried|ground|powder",
            "spice",
        ),
        (
            r"sauce|ketchup|mustard|mayo|mayonnaise|vinegar|oil|dressing|syrup|honey|soy sauce|"
            r"worcestershire|hot sauce|sriracha|salsa|pesto",
            "condiment",
        ),
        (r"frozen", "frozen"),
        (r"juice|wine|beer|coffee|tea(?!spoon)", "beverage"),
    )
)


def detect_category(name: str) -> str:
    """Classify an ingredient into one of ``INGREDIENT_CATEGORIES``."""
    canonical = normalize_ingredient_name(name)
    for pattern, category in CATEGORY_RULES:
        if pattern.search(canonical):
            return category
    return "other"


def is_shelf_stable(name: str) -> bool:
    """Whether the ingredient keeps at room temperature."""
    category = detect_category(name)

    if category in ("protein", "dairy", "produce"):
        return False
    if category in ("canned", "grains", "baking", "spice", "condiment"):
        return True

    return not re.search(r"fresh|raw", normalize_ingredient_name(name))


def estimate_shelf_life(name: str) -> int | None:
    """Estimated days until expiry, or None for shelf-stable ingredients."""
    category = detect_category(name)
    canonical = normalize_ingredient_name(name)

    if category == "protein":
        if re.search(r"bacon|sausage", canonical):
            return 14
        return 3

    if category == "dairy":
        if "butter" in canonical:
            return 30
        if "cheese" in canonical:
            return 21
        if "milk" in canonical:
            return 7
        if "eggs" in canonical:
            return 21
        return 7

    if category == "produce":
        if re.search(r"potato|onion|garlic", canonical):
            return 30
        if re.search(r"apple|orange|lemon|lime", canonical):
            return 14
        if re.search(r"lettuce|spinach|herbs", canonical):
            return 5
        return 7

    return None


# =============================================================================
# Canonical Profile
# =============================================================================

_LIQUID_PATTERN = re.compile(
    r"\b(?:oil|milk|cream|juice|vinegar|water|broth|stock|wine|beer|sauce|syrup|extract)\b"
)
_COUNTABLE_PATTERN = re.compile(
    r"^(?:eggs|egg yolks|egg whites|garlic|yellow onion|white onion|red onion|sweet onion|"
    r"lemons?|limes?|oranges?|apples?|bananas?|avocados?|tomato(?:es)?|potato(?:es)?|"
    r"carrots?|bell peppers?|whole chicken)$"
)


@dataclass(frozen=True)
class IngredientProfile:
    """Derived metadata for a canonical ingredient name."""

    name: str
    category: str
    default_unit: str  # "g", "ml" or "pcs"
    grams_per_cup: float | None
    shelf_stable: bool
    perishable_days: int | None


def default_unit_for(name: str) -> str:
    """Preferred storage unit: weight when a density is known, else by kind."""
    canonical = normalize_ingredient_name(name)
    if canonical in INGREDIENT_DENSITIES:
        return "g"
    if _COUNTABLE_PATTERN.match(canonical):
        return "pcs"
    if _LIQUID_PATTERN.search(canonical):
        return "ml"
    return "g"


def ingredient_profile(name: str) -> IngredientProfile:
    """Build the canonical profile for an ingredient name."""
    canonical = normalize_ingredient_name(name)
    return IngredientProfile(
        name=canonical,
        category=detect_category(canonical),
        default_unit=default_unit_for(canonical),
        grams_per_cup=INGREDIENT_DENSITIES.get(canonical),
        shelf_stable=is_shelf_stable(canonical),
        perishable_days=estimate_shelf_life(canonical),
    )
