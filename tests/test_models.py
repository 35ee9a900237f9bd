from __future__ import annotations

import pytest

from filedrecipes.domain import Ingredient, Recipe


def _pancakes() -> Recipe:
    recipe = Recipe(name="Pannkakor")
    recipe.add_ingredient(Ingredient(amount="3", measure="dl", name="vetemjöl"))
    recipe.add_ingredient(Ingredient(amount="6", measure="dl", name="mjölk"))
    recipe.add_instruction("Vispa.")
    return recipe


def test_ingredient_str_skips_empty_fields() -> None:
    assert str(Ingredient(amount="3", measure="dl", name="mjöl")) == "3 dl mjöl"
    assert str(Ingredient(amount="", measure="", name="salt")) == "salt"
    assert str(Ingredient()) == ""


def test_recipe_requires_name() -> None:
    with pytest.raises(ValueError):
        Recipe(name="")


def test_recipe_equality_and_hash_use_name_only() -> None:
    a = _pancakes()
    b = Recipe(name="Pannkakor")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Recipe(name="Äppelpaj")
    assert a != "Pannkakor"


def test_recipe_ordering_by_name() -> None:
    recipes = [Recipe(name="Pannkakor"), Recipe(name="Kanelbullar"), Recipe(name="Äppelpaj")]
    assert [r.name for r in sorted(recipes)] == ["Kanelbullar", "Pannkakor", "Äppelpaj"]
    assert Recipe(name="A") < Recipe(name="B")
    assert Recipe(name="B") >= Recipe(name="A")


def test_copy_is_independent() -> None:
    original = _pancakes()
    duplicate = original.copy()

    duplicate.ingredients[0].amount = "99"
    duplicate.add_ingredient(Ingredient(name="ägg"))
    duplicate.add_instruction("Stek.")

    assert original.ingredients[0].amount == "3"
    assert len(original.ingredients) == 2
    assert original.instructions == ["Vispa."]
    assert duplicate.recipe_id == original.recipe_id


def test_each_recipe_gets_its_own_id() -> None:
    assert Recipe(name="A").recipe_id != Recipe(name="A").recipe_id
