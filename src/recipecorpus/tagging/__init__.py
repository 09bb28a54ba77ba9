"""Tag classification and display-tag selection."""

from recipecorpus.tagging.classifier import (
    extract_category,
    extract_cuisines,
    extract_dietary_flags,
    extract_time_from_tags,
    is_component_recipe,
)
from recipecorpus.tagging.selector import select_relevant_tags

__all__ = [
    "extract_category",
    "extract_cuisines",
    "extract_dietary_flags",
    "extract_time_from_tags",
    "is_component_recipe",
    "select_relevant_tags",
]
