from .fileformat import (
    FIELD_DELIMITER,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    SECTION_RECIPE,
    ReadState,
    advance,
    format_recipes,
    parse_lines,
    serialize_recipes,
    sort_recipes,
)
from .models import Ingredient, Recipe

__all__ = [
    "FIELD_DELIMITER",
    "SECTION_INGREDIENTS",
    "SECTION_INSTRUCTIONS",
    "SECTION_RECIPE",
    "Ingredient",
    "ReadState",
    "Recipe",
    "advance",
    "format_recipes",
    "parse_lines",
    "serialize_recipes",
    "sort_recipes",
]
