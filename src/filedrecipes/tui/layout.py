from __future__ import annotations

from ..domain import Recipe
from ..views import render_recipe

DEFAULT_HEADER_ICON = "🍳"
EMPTY_DETAIL = "No recipe selected."


def normalize_header_icon(icon: object) -> str:
    if icon is None:
        return DEFAULT_HEADER_ICON
    text = str(icon).strip()
    return text or DEFAULT_HEADER_ICON


def recipe_label(index: int, recipe: Recipe) -> str:
    count = len(recipe.ingredients)
    noun = "ingredient" if count == 1 else "ingredients"
    return f"{index + 1:>3}. {recipe.name} ({count} {noun})"


def detail_text(recipe: Recipe | None) -> str:
    if recipe is None:
        return EMPTY_DETAIL
    return "\n".join(render_recipe(recipe))


def status_text(count: int, modified: bool, message: str = "") -> str:
    parts = [f"{count} recipe" + ("" if count == 1 else "s")]
    if modified:
        parts.append("unsaved changes")
    if message:
        parts.append(message)
    return " | ".join(parts)


def clamp_index(index: int, count: int) -> int | None:
    if count <= 0:
        return None
    return max(0, min(index, count - 1))
