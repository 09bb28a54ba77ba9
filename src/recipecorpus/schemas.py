"""Pydantic schemas for imported recipe data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CorpusModel(BaseModel):
    """Base for exported records: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ParsedIngredient(CorpusModel):
    """One free-text ingredient line split into its parts."""

    quantity: float | None = None
    unit: str | None = None
    name: str = ""
    preparation: str | None = None
    raw: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def lower_name(cls, v: Any) -> str:
        """Names are aggregation keys, so always lower-case and trimmed."""
        if not v:
            return ""
        return str(v).strip().lower()


class ImportedRecipe(CorpusModel):
    """A recipe decoded from one CSV row."""

    source_id: int = 0
    name: str = ""
    description: str = ""
    servings: int = Field(default=4)
    serving_size_grams: int | None = None
    prep_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    total_time_minutes: int | None = None
    ingredients: list[ParsedIngredient] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list, max_length=4)
    search_terms: list[str] = Field(default_factory=list)
    category: str | None = None
    cuisines: list[str] = Field(default_factory=list)
    dietary_flags: list[str] = Field(default_factory=list)
    is_component: bool = False

    @field_validator("search_terms", mode="before")
    @classmethod
    def unique_search_terms(cls, v: Any) -> list[str]:
        """Search terms come from a set literal; keep first-seen order."""
        if not v:
            return []
        return list(dict.fromkeys(str(term) for term in v))

    @property
    def ingredient_names(self) -> list[str]:
        """Canonical ingredient names in recipe order."""
        return [ing.name for ing in self.ingredients if ing.name]

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used by the exported corpus."""
        return self.model_dump(mode="json", by_alias=True)
