"""Recipe import pipeline: CSV rows -> typed, filtered recipe corpus."""

import json
import re
import time
import uuid
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from recipecorpus.config import Settings, get_settings
from recipecorpus.ingest.csv_reader import CSV_COLUMNS, read_logical_records, split_csv_record
from recipecorpus.ingest.exceptions import RowDecodeError
from recipecorpus.ingest.literals import (
    decode_unicode_escapes,
    parse_python_list,
    parse_python_set,
)
from recipecorpus.logging_config import LoggingContext, get_logger
from recipecorpus.normalize.ingredients import detect_category, ingredient_profile
from recipecorpus.normalize.parser import parse_ingredient_string
from recipecorpus.normalize.units import convert_to_metric
from recipecorpus.schemas import ImportedRecipe, ParsedIngredient
from recipecorpus.tagging.classifier import (
    extract_category,
    extract_cuisines,
    extract_dietary_flags,
    extract_time_from_tags,
    is_component_recipe,
)
from recipecorpus.tagging.selector import select_relevant_tags

logger = get_logger(__name__)

RecipeFilter = Callable[[ImportedRecipe], bool]
ProgressCallback = Callable[[int, ImportedRecipe], None]

_SERVING_SIZE_GRAMS = re.compile(r"\((\d+)\s*g\)")
_LEADING_INT = re.compile(r"^\s*(\d+)")
_COMPONENT_NAME = re.compile(r"^(.*\s)?(sauce|dressing|marinade|glaze|rub|seasoning)(\s.*)?$")

PREP_TIME_SHARE = 0.3
COOK_TIME_SHARE = 0.7


# =============================================================================
# Row Decoding
# =============================================================================


def parse_serving_size(text: str | None) -> int | None:
    """Grams per serving from a cell like ``1 (155 g)``."""
    if not text or text == "NA":
        return None
    match = _SERVING_SIZE_GRAMS.search(text)
    return int(match.group(1)) if match else None


def _parse_int(text: str, default: int) -> int:
    match = _LEADING_INT.match(text or "")
    if not match:
        return default
    return int(match.group(1)) or default


def _parse_ingredient(raw: str) -> ParsedIngredient:
    return parse_ingredient_string(decode_unicode_escapes(raw))


def build_recipe(
    fields: Sequence[str],
    row_index: int = 0,
    settings: Settings | None = None,
) -> ImportedRecipe:
    """
    Decode one CSV record into an ImportedRecipe.

    Args:
        fields: Positional fields in ``CSV_COLUMNS`` order.
        row_index: Data row number, used in error messages.
        settings: Settings providing defaults; cached settings if None.

    Raises:
        RowDecodeError: If the row has neither an id nor a name.
    """
    settings = settings or get_settings()
    width = len(CSV_COLUMNS)
    fields = list(fields) + [""] * max(0, width - len(fields))
    (
        source_id,
        name,
        description,
        _ingredient_names,
        ingredients_raw,
        serving_size,
        servings,
        steps,
        tags,
        search_terms,
    ) = fields[:width]

    if not source_id.strip() and not name.strip():
        raise RowDecodeError(row_index, "row has neither id nor name")

    all_tags = parse_python_list(tags)
    terms = parse_python_set(search_terms)

    cuisines = extract_cuisines(all_tags)
    dietary_flags = extract_dietary_flags(all_tags)
    total_time = extract_time_from_tags(all_tags)
    recipe_name = decode_unicode_escapes(name.strip())

    return ImportedRecipe(
        source_id=_parse_int(source_id, 0),
        name=recipe_name,
        description=decode_unicode_escapes(description.strip()),
        servings=_parse_int(servings, settings.default_servings),
        serving_size_grams=parse_serving_size(serving_size),
        prep_time_minutes=round(total_time * PREP_TIME_SHARE) if total_time else None,
        cook_time_minutes=round(total_time * COOK_TIME_SHARE) if total_time else None,
        total_time_minutes=total_time,
        ingredients=[_parse_ingredient(raw) for raw in parse_python_list(ingredients_raw)],
        steps=[decode_unicode_escapes(step) for step in parse_python_list(steps)],
        tags=select_relevant_tags(all_tags, cuisines, dietary_flags),
        search_terms=terms,
        category=extract_category(all_tags, terms),
        cuisines=cuisines,
        dietary_flags=dietary_flags,
        is_component=is_component_recipe(all_tags, recipe_name),
    )


# =============================================================================
# Acceptance Filters
# =============================================================================


def is_bare_component_name(name: str) -> bool:
    """``Teriyaki Sauce`` is a component; ``Chicken With Teriyaki Sauce`` is a meal."""
    lower = name.lower()
    return bool(_COMPONENT_NAME.match(lower)) and "with" not in lower


def default_recipe_filter(recipe: ImportedRecipe, settings: Settings | None = None) -> bool:
    """Accept complete home-cooking meals; reject sides, components and outliers."""
    settings = settings or get_settings()

    if recipe.category == "side":
        return False
    if not settings.min_servings <= recipe.servings <= settings.max_servings:
        return False
    if len(recipe.ingredients) < settings.min_ingredients:
        return False
    if len(recipe.steps) < settings.min_steps:
        return False
    if is_bare_component_name(recipe.name):
        return False
    return True


def build_recipe_filter(
    category: str | None = None,
    settings: Settings | None = None,
    exclude_components: bool = False,
) -> RecipeFilter:
    """
    Default filter, optionally restricted to one derived category.

    With ``exclude_components`` recipes that look like sides or components
    are rejected as well: flagged at decode time from the full source tag
    list, or detected from the display tags and name (e.g. "Garlic Bread").
    """
    settings = settings or get_settings()
    wanted = category.lower() if category else None

    def recipe_filter(recipe: ImportedRecipe) -> bool:
        if wanted and recipe.category != wanted:
            return False
        if exclude_components and (
            recipe.is_component or is_component_recipe(recipe.tags, recipe.name)
        ):
            return False
        return default_recipe_filter(recipe, settings)

    return recipe_filter


# =============================================================================
# Import Run
# =============================================================================


@dataclass
class IngredientStats:
    """Corpus-wide usage of one canonical ingredient."""

    count: int = 0
    units: set[str] = field(default_factory=set)
    categories: set[str] = field(default_factory=set)
    metric_units: set[str] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "units": sorted(self.units),
            "categories": sorted(self.categories),
            "metricUnits": sorted(self.metric_units),
        }


@dataclass
class ImportResult:
    """Result of an import run."""

    recipes: list[ImportedRecipe]
    ingredient_stats: dict[str, IngredientStats]
    rows_seen: int = 0
    rows_skipped: int = 0
    elapsed_seconds: float = 0.0

    @property
    def recipe_count(self) -> int:
        return len(self.recipes)

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredient_stats)

    def top_ingredients(self, n: int = 20) -> list[tuple[str, IngredientStats]]:
        """Most frequent ingredients, ties broken by name."""
        ranked = sorted(self.ingredient_stats.items(), key=lambda item: (-item[1].count, item[0]))
        return ranked[:n]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "recipe_count": self.recipe_count,
            "ingredient_count": self.ingredient_count,
            "rows_seen": self.rows_seen,
            "rows_skipped": self.rows_skipped,
            "elapsed_seconds": round(self.elapsed_seconds, 2),
        }


class RecipeImporter:
    """
    Lazily import recipes from a CSV file.

    ``run()`` yields accepted recipes one at a time while maintaining the
    ingredient statistics, so a caller that stops consuming stops the import
    and closes the input file.
    """

    def __init__(
        self,
        path: str | Path,
        recipe_filter: RecipeFilter | None = None,
        on_progress: ProgressCallback | None = None,
        progress_interval: int | None = None,
        limit: int | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.path = Path(path)
        self.recipe_filter = recipe_filter
        self.on_progress = on_progress
        self.progress_interval = progress_interval or self.settings.progress_interval
        self.limit = limit
        self.run_id = uuid.uuid4().hex

        self.stats: dict[str, IngredientStats] = {}
        self.recipe_count = 0
        self.rows_seen = 0
        self.rows_skipped = 0

    def _record_ingredients(self, recipe: ImportedRecipe) -> None:
        for ingredient in recipe.ingredients:
            if not ingredient.name:
                continue
            stats = self.stats.get(ingredient.name)
            if stats is None:
                stats = self.stats[ingredient.name] = IngredientStats()
                stats.categories.add(detect_category(ingredient.name))
            stats.count += 1
            if ingredient.unit:
                stats.units.add(ingredient.unit)
                metric = convert_to_metric(
                    ingredient.quantity or 1.0, ingredient.unit, ingredient.name
                )
                if metric is not None:
                    stats.metric_units.add(metric.unit)

    def _decode(self, record: str, row_index: int) -> ImportedRecipe | None:
        with LoggingContext(run_id=self.run_id, source_file=str(self.path), row_index=row_index):
            try:
                fields = split_csv_record(record, self.settings.max_record_chars)
                return build_recipe(fields, row_index=row_index, settings=self.settings)
            except Exception as e:
                self.rows_skipped += 1
                logger.warning(f"Skipping row {row_index}: {e}", exc_info=True)
                return None

    def run(self) -> Iterator[ImportedRecipe]:
        """Yield accepted recipes in file order."""
        with LoggingContext(run_id=self.run_id, source_file=str(self.path)):
            logger.info(f"Starting recipe import from {self.path}")

        records = read_logical_records(self.path, self.settings.max_record_chars)
        for row_index, record in enumerate(records, start=1):
            self.rows_seen = row_index

            recipe = self._decode(record, row_index)
            if recipe is None:
                continue

            if self.recipe_filter is not None and not self.recipe_filter(recipe):
                continue

            self._record_ingredients(recipe)
            self.recipe_count += 1

            if self.recipe_count % self.progress_interval == 0:
                with LoggingContext(run_id=self.run_id):
                    logger.info(
                        f"Processed {self.recipe_count} recipes, "
                        f"{len(self.stats)} unique ingredients"
                    )
                if self.on_progress is not None:
                    self.on_progress(self.recipe_count, recipe)

            yield recipe

            if self.limit and self.recipe_count >= self.limit:
                break


def import_recipes(
    path: str | Path,
    limit: int | None = None,
    recipe_filter: RecipeFilter | None = None,
    on_progress: ProgressCallback | None = None,
    progress_interval: int | None = None,
    settings: Settings | None = None,
) -> ImportResult:
    """
    Import every accepted recipe from a CSV file.

    Args:
        path: Recipe CSV in the Food.com column layout.
        limit: Stop after this many accepted recipes.
        recipe_filter: Predicate deciding which recipes are kept.
        on_progress: Called as ``(count, recipe)`` every ``progress_interval`` recipes.
        progress_interval: Accepted recipes between progress callbacks.
        settings: Optional settings override.

    Returns:
        ImportResult with the recipes and ingredient statistics.

    Raises:
        InputFileError: If the input file cannot be opened.
    """
    start = time.monotonic()
    importer = RecipeImporter(
        path,
        recipe_filter=recipe_filter,
        on_progress=on_progress,
        progress_interval=progress_interval,
        limit=limit,
        settings=settings,
    )
    recipes = list(importer.run())

    result = ImportResult(
        recipes=recipes,
        ingredient_stats=importer.stats,
        rows_seen=importer.rows_seen,
        rows_skipped=importer.rows_skipped,
        elapsed_seconds=time.monotonic() - start,
    )

    with LoggingContext(run_id=importer.run_id):
        logger.info(
            f"Import complete: {result.recipe_count} recipes, "
            f"{result.ingredient_count} unique ingredients, "
            f"{result.rows_skipped} rows skipped"
        )

    return result


# =============================================================================
# JSON Export
# =============================================================================

_RECIPE_LIST = TypeAdapter(list[ImportedRecipe])


def export_to_json(recipes: Sequence[ImportedRecipe], output_path: str | Path) -> Path:
    """Write recipes as a pretty-printed JSON array with camelCase keys."""
    output_path = Path(output_path)
    data = [recipe.to_json_dict() for recipe in recipes]
    output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Exported {len(recipes)} recipes to {output_path}")
    return output_path


def load_from_json(path: str | Path) -> list[ImportedRecipe]:
    """Read a corpus written by ``export_to_json``."""
    return _RECIPE_LIST.validate_json(Path(path).read_bytes())


def export_ingredient_stats(
    ingredient_stats: dict[str, IngredientStats],
    output_path: str | Path,
) -> Path:
    """
    Write the ingredient vocabulary observed in a run, most frequent first.

    Each entry carries the usage statistics plus the canonical profile
    (category, default unit, density, shelf life) for the name.
    """
    output_path = Path(output_path)
    ranked = sorted(ingredient_stats.items(), key=lambda item: (-item[1].count, item[0]))

    data = []
    for name, stats in ranked:
        profile = ingredient_profile(name)
        data.append(
            {
                "name": name,
                **stats.to_dict(),
                "category": profile.category,
                "defaultUnit": profile.default_unit,
                "gramsPerCup": profile.grams_per_cup,
                "shelfStable": profile.shelf_stable,
                "perishableDays": profile.perishable_days,
            }
        )

    output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Exported {len(data)} ingredients to {output_path}")
    return output_path
