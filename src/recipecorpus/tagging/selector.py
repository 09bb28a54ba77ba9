"""Pick a small set of non-redundant display tags for a recipe."""

from recipecorpus.config import get_settings

METHOD_TAGS: tuple[str, ...] = (
    "quick",
    "easy",
    "one-pot",
    "sheet-pan",
    "grilling",
    "stir-fry",
    "slow-cooker",
    "pressure-cooker",
    "weeknight",
    "comfort-food",
)

DISH_TAGS: tuple[str, ...] = (
    "soup",
    "stew",
    "salad",
    "pasta",
    "sandwich",
    "burger",
    "taco",
    "curry",
    "stir-fry",
    "casserole",
    "bowl",
)

# Structural Food.com tags that say nothing about the dish
META_TAGS: tuple[str, ...] = (
    "time-to-make",
    "course",
    "main-ingredient",
    "preparation",
    "occasion",
    "cuisine",
    "dietary",
    "taste-mood",
    "equipment",
    "number-of-servings",
    "main-dish",
    "minutes-or-less",
)

MAX_TAGS = 4


class TagSelection:
    """Accumulates accepted tags, rejecting redundant candidates."""

    def __init__(self, max_tags: int = MAX_TAGS):
        self.max_tags = max_tags
        self.tags: list[str] = []
        self._lower: list[str] = []

    @property
    def full(self) -> bool:
        return len(self.tags) >= self.max_tags

    def is_redundant(self, tag: str) -> bool:
        """Whether ``tag`` repeats, implies or is implied by an accepted tag."""
        lower = tag.lower()
        accepted = self._lower

        if lower in accepted:
            return True

        # "veggie-burgers" and "vegetarian" say the same thing
        if "veggie" in lower and "vegetarian" in accepted:
            return True
        if lower == "vegetarian" and any("veggie" in t for t in accepted):
            return True

        # Vegan implies vegetarian
        if "vegan" in lower and "vegetarian" in accepted:
            return True
        if lower == "vegetarian" and any("vegan" in t for t in accepted):
            return True

        # low-fat, low-carb, ... only one of them
        if lower.startswith("low-") and any(t.startswith("low-") for t in accepted):
            return True

        return any(lower in t or t in lower for t in accepted)

    def add(self, tag: str) -> bool:
        """Accept ``tag`` unless full or redundant. Returns True if accepted."""
        if self.full or not tag or self.is_redundant(tag):
            return False
        self.tags.append(tag)
        self._lower.append(tag.lower())
        return True


def select_relevant_tags(
    tags: list[str],
    cuisines: list[str],
    dietary_flags: list[str],
    max_tags: int | None = None,
) -> list[str]:
    """
    Select at most ``max_tags`` display tags.

    Priority: first cuisine, first dietary flag, cooking method tags, dish
    type tags, then any other tag that is not a structural meta tag.
    """
    if max_tags is None:
        max_tags = min(get_settings().max_display_tags, MAX_TAGS)

    selection = TagSelection(max_tags=max_tags)

    if cuisines:
        selection.add(cuisines[0])

    if dietary_flags:
        selection.add(dietary_flags[0])

    for keywords, exclude in ((METHOD_TAGS, False), (DISH_TAGS, False), (META_TAGS, True)):
        for tag in tags:
            if selection.full:
                return selection.tags
            matches = any(keyword in tag.lower() for keyword in keywords)
            if matches != exclude:
                selection.add(tag)

    return selection.tags
