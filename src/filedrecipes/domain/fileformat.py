from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import FormatViolationError
from .models import Ingredient, Recipe


SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"
FIELD_DELIMITER = ";"
BYTE_ORDER_MARK = "\ufeff"


class ReadState(Enum):
    INDEFINITE = "indefinite"
    NEW = "new"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


MARKERS = {
    SECTION_RECIPE: ReadState.NEW,
    SECTION_INGREDIENTS: ReadState.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadState.INSTRUCTION,
}


@dataclass(frozen=True)
class StartRecipe:
    name: str


@dataclass(frozen=True)
class AddIngredient:
    ingredient: Ingredient


@dataclass(frozen=True)
class AddInstruction:
    text: str


Effect = Union[StartRecipe, AddIngredient, AddInstruction]


@dataclass(frozen=True)
class Step:
    state: ReadState
    effect: Effect | None = None


def advance(state: ReadState, line: str) -> Step:
    """Interpret one line of a recipe file given the current read state.

    Marker lines only switch state. Data lines produce an effect for the
    caller to apply; the state is left as it was.
    """
    marker = MARKERS.get(line)
    if marker is not None:
        return Step(state=marker)

    if state is ReadState.NEW:
        if not line:
            raise FormatViolationError("recipe name must not be empty")
        return Step(state=state, effect=StartRecipe(name=line))
    if state is ReadState.INGREDIENT:
        return Step(state=state, effect=AddIngredient(ingredient=parse_ingredient(line)))
    if state is ReadState.INSTRUCTION:
        return Step(state=state, effect=AddInstruction(text=line))
    raise FormatViolationError(f"unexpected line outside any section: {line!r}")


def parse_ingredient(line: str) -> Ingredient:
    values = line.split(FIELD_DELIMITER)
    if len(values) != 3:
        raise FormatViolationError(
            f"ingredient needs 3 fields separated by {FIELD_DELIMITER!r}, got {len(values)}: {line!r}"
        )
    amount, measure, name = values
    return Ingredient(amount=amount, measure=measure, name=name)


def parse_lines(lines: Iterable[str]) -> list[Recipe]:
    recipes: list[Recipe] = []
    state = ReadState.INDEFINITE
    current: Recipe | None = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line_no == 1:
            line = line.removeprefix(BYTE_ORDER_MARK)
        try:
            step = advance(state, line)
        except FormatViolationError as exc:
            raise FormatViolationError(f"line {line_no}: {exc}") from exc
        state = step.state
        effect = step.effect

        if isinstance(effect, StartRecipe):
            current = Recipe(name=effect.name)
            recipes.append(current)
        elif effect is not None:
            if current is None:
                raise FormatViolationError(f"line {line_no}: section content before any recipe name")
            if isinstance(effect, AddIngredient):
                current.add_ingredient(effect.ingredient)
            else:
                current.add_instruction(effect.text)

    return recipes


def sort_recipes(recipes: Iterable[Recipe]) -> list[Recipe]:
    return sorted(recipes, key=lambda recipe: recipe.name)


def serialize_recipes(recipes: Iterable[Recipe]) -> Iterator[str]:
    for recipe in recipes:
        yield SECTION_RECIPE
        yield recipe.name
        yield SECTION_INGREDIENTS
        for ingredient in recipe.ingredients:
            yield FIELD_DELIMITER.join((ingredient.amount, ingredient.measure, ingredient.name))
        yield SECTION_INSTRUCTIONS
        yield from recipe.instructions


def format_recipes(recipes: Iterable[Recipe]) -> str:
    return "".join(f"{line}\n" for line in serialize_recipes(recipes))
