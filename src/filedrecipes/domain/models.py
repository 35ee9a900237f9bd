from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
import uuid


@dataclass
class Ingredient:
    amount: str = ""
    measure: str = ""
    name: str = ""

    def copy(self) -> Ingredient:
        return Ingredient(amount=self.amount, measure=self.measure, name=self.name)

    def __str__(self) -> str:
        return " ".join(part for part in (self.amount, self.measure, self.name) if part)


@total_ordering
@dataclass(eq=False)
class Recipe:
    """A named recipe with ordered ingredients and instructions.

    Equality, hashing and ordering only look at ``name``. ``recipe_id`` is an
    opaque token shared between a recipe and the copies made from it.
    """

    name: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    recipe_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Recipe name must be a non-empty string")

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def copy(self) -> Recipe:
        return Recipe(
            name=self.name,
            ingredients=[ingredient.copy() for ingredient in self.ingredients],
            instructions=list(self.instructions),
            recipe_id=self.recipe_id,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)
