from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .domain import Recipe

INGREDIENTS_HEADING = "--- Ingredienser ---"
INSTRUCTIONS_HEADING = "--- Instruktioner ---"


def render_header(title: str) -> list[str]:
    rule = "=" * max(len(title) + 4, 20)
    return [rule, f"  {title}", rule]


def render_recipe(recipe: Recipe) -> list[str]:
    lines = render_header(recipe.name)
    lines.append("")
    lines.append(INGREDIENTS_HEADING)
    lines.append("")
    lines.extend(str(ingredient) for ingredient in recipe.ingredients)
    lines.append("")
    lines.append(INSTRUCTIONS_HEADING)
    lines.append("")
    lines.extend(recipe.instructions)
    return lines


def render_listing(recipes: Iterable[Recipe]) -> list[str]:
    return [f"{index}: {recipe.name}" for index, recipe in enumerate(recipes)]


def recipe_to_dict(recipe: Recipe) -> dict[str, Any]:
    return {
        "name": recipe.name,
        "ingredients": [
            {"amount": ing.amount, "measure": ing.measure, "name": ing.name} for ing in recipe.ingredients
        ],
        "instructions": list(recipe.instructions),
    }
