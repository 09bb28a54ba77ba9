"""Recipe CSV ingestion: record reading, literal decoding and the import run."""

from recipecorpus.ingest.csv_reader import CSV_COLUMNS, iter_csv_records, read_csv_records
from recipecorpus.ingest.exceptions import (
    InputFileError,
    MalformedRecordError,
    RecipeImportError,
    RowDecodeError,
)
from recipecorpus.ingest.importer import (
    ImportResult,
    IngredientStats,
    RecipeImporter,
    build_recipe,
    build_recipe_filter,
    default_recipe_filter,
    export_ingredient_stats,
    export_to_json,
    import_recipes,
    load_from_json,
)
from recipecorpus.ingest.literals import (
    decode_unicode_escapes,
    parse_python_list,
    parse_python_set,
)

__all__ = [
    "CSV_COLUMNS",
    "ImportResult",
    "IngredientStats",
    "InputFileError",
    "MalformedRecordError",
    "RecipeImportError",
    "RecipeImporter",
    "RowDecodeError",
    "build_recipe",
    "build_recipe_filter",
    "decode_unicode_escapes",
    "default_recipe_filter",
    "export_ingredient_stats",
    "export_to_json",
    "import_recipes",
    "iter_csv_records",
    "load_from_json",
    "parse_python_list",
    "parse_python_set",
    "read_csv_records",
]
