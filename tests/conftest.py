"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from recipecorpus.config import Settings
from recipecorpus.schemas import ImportedRecipe, ParsedIngredient

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests over generated input files")
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# CSV Fixtures
# =============================================================================

CSV_HEADER = (
    "id,name,description,ingredients,ingredients_raw_str,serving_size,servings,steps,tags,"
    "search_terms"
)

# 101 and 102 pass the default filter; 103 is a side, 104 a bare sauce,
# row 5 is unusable and 106 is too short to be a recipe.
SAMPLE_CSV_LINES = [
    CSV_HEADER,
    "101,spaghetti with meat sauce,a weeknight classic,"
    "\"['spaghetti', 'ground beef', 'diced tomatoes']\","
    "\"['1 lb spaghetti', '1 lb lean ground beef', "
    "'1 (14 ounce) can diced tomatoes, drained', '2 garlic cloves, minced']\","
    "1 (310 g),4,"
    "\"['boil pasta', 'brown the beef', 'combine and serve']\","
    "\"['60-minutes-or-less', 'time-to-make', 'main-dish', 'italian', 'pasta', 'easy', "
    "'dinner-party']\","
    "\"{'dinner', 'italian', 'pasta'}\"",
    '102,veggie chili,"hearty and warm',
    'freezes well",'
    "\"['black beans', 'flour']\","
    "\"['2 cups all-purpose flour', '1 (15 ounce) can black beans', '1 1/2 cups water', "
    "'salt, to taste']\","
    "1 (250 g),6,"
    "\"['chop', 'simmer']\","
    "\"['vegetarian', 'veggie-burgers', 'american', 'crock-pot']\","
    "\"{'vegetarian', 'dinner'}\"",
    "103,garlic bread,crispy,"
    "\"['bread', 'butter', 'garlic']\","
    "\"['1 loaf bread', '1/2 cup butter, softened', '3 cloves garlic']\","
    "NA,4,"
    "\"['slice', 'bake']\","
    "\"['side-dishes', 'easy']\","
    "{'side'}",
    "104,teriyaki sauce,sweet and salty,"
    "\"['soy sauce', 'sugar', 'ginger']\","
    "\"['1/2 cup soy sauce', '1/4 cup sugar', '1 tsp ginger']\","
    "NA,4,"
    "\"['mix', 'simmer']\","
    "\"['asian', 'sauces']\","
    "{'sauce'}",
    ",,,,,,,,,",
    "106,quick snack",
]


@pytest.fixture
def sample_csv_lines() -> list[str]:
    """Physical lines of the sample CSV, header first."""
    return list(SAMPLE_CSV_LINES)


@pytest.fixture
def sample_csv_text(sample_csv_lines: list[str]) -> str:
    """Recipe CSV text in the Food.com column layout."""
    return "\n".join(sample_csv_lines) + "\n"


@pytest.fixture
def recipes_csv(tmp_path: Path, sample_csv_text: str) -> Path:
    """Sample recipe CSV written to a temporary file."""
    path = tmp_path / "recipes.csv"
    path.write_text(sample_csv_text, encoding="utf-8")
    return path


@pytest.fixture
def settings() -> Settings:
    """Settings with the stock defaults, independent of the environment."""
    return Settings(_env_file=None)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def make_recipe():
    """Factory for recipes that pass the default filter unless overridden."""

    def _make(**overrides) -> ImportedRecipe:
        data = {
            "source_id": 1,
            "name": "chicken curry",
            "description": "",
            "servings": 4,
            "ingredients": [
                ParsedIngredient(name="chicken breast", raw="1 lb chicken breast"),
                ParsedIngredient(name="yellow onion", raw="1 onion"),
                ParsedIngredient(name="garlic", raw="2 cloves garlic"),
            ],
            "steps": ["brown the chicken", "simmer with spices"],
            "category": "dinner",
        }
        data.update(overrides)
        return ImportedRecipe(**data)

    return _make
