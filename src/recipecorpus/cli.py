"""Command-line entry point for building the recipe corpus.

Run with: uv run recipe-import recipes_w_search_terms.csv --limit 1000 -o recipes.json
"""

import argparse
import sys

from recipecorpus.config import get_settings
from recipecorpus.ingest.exceptions import InputFileError
from recipecorpus.ingest.importer import (
    build_recipe_filter,
    export_ingredient_stats,
    export_to_json,
    import_recipes,
)
from recipecorpus.logging_config import configure_logging, get_logger
from recipecorpus.schemas import ImportedRecipe

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="recipe-import",
        description="Import the Food.com recipe CSV into a canonical JSON corpus",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=settings.recipes_csv_path,
        help=f"Recipe CSV path (default: {settings.recipes_csv_path})",
    )
    parser.add_argument(
        "positional_limit",
        nargs="?",
        type=int,
        metavar="limit",
        help="Same as --limit",
    )
    parser.add_argument("--limit", "-l", type=int, help="Maximum number of recipes to import")
    parser.add_argument("--category", "-c", type=str, help="Only keep recipes of this category")
    parser.add_argument(
        "--exclude-components",
        action="store_true",
        help="Also drop sides and components detected by tag or name",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=settings.output_path,
        help="Write the accepted recipes to this JSON file",
    )
    parser.add_argument(
        "--ingredients-output",
        type=str,
        help="Write ingredient statistics and canonical profiles to this JSON file",
    )
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(log_level=args.log_level, settings=settings)

    limit = args.limit if args.limit is not None else args.positional_limit

    logger.info(f"Importing recipes from: {args.input}")
    if limit:
        logger.info(f"Limit: {limit} recipes")
    if args.category:
        logger.info(f"Category filter: {args.category}")
    if args.output:
        logger.info(f"Output: {args.output}")

    def report_progress(count: int, _recipe: ImportedRecipe) -> None:
        logger.info(f"Progress: {count} recipes...")

    try:
        result = import_recipes(
            args.input,
            limit=limit,
            recipe_filter=build_recipe_filter(
                args.category, settings, exclude_components=args.exclude_components
            ),
            on_progress=report_progress,
            progress_interval=settings.cli_progress_interval,
            settings=settings,
        )
    except InputFileError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Recipes: {result.recipe_count}")
    logger.info(f"Unique ingredients: {result.ingredient_count}")
    logger.info(f"Completed in {result.elapsed_seconds:.2f}s")

    top = result.top_ingredients(settings.top_ingredients_report)
    if top:
        logger.info(f"Top {len(top)} ingredients:")
        for rank, (name, stats) in enumerate(top, start=1):
            units = ", ".join(sorted(stats.units)) or "none"
            logger.info(f"  {rank}. {name} ({stats.count} recipes, units: {units})")

    try:
        if args.output and result.recipes:
            export_to_json(result.recipes, args.output)
        if args.ingredients_output and result.ingredient_stats:
            export_ingredient_stats(result.ingredient_stats, args.ingredients_output)
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
