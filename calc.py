"""Pure calculation utilities for recipe cost logic."""

from dataclasses import replace
from typing import Iterable

from models import DirectEntry, Ingredient, Recipe, as_number


def ingredient_cost(ingredient: Ingredient) -> float:
    """Compute what one ingredient contributes to the batch cost.

    Direct entries return the entered cost. Detailed entries scale the
    purchase price by the share of the purchase quantity used; with no
    purchase quantity yet the cost is 0. Units are labels only, nothing is
    converted between the purchase and used units. A result that overflows
    a float is 0.
    """
    entry = ingredient.entry
    if isinstance(entry, DirectEntry):
        return as_number(entry.direct_cost)
    purchase_qty = as_number(entry.purchase_quantity)
    if not purchase_qty:
        return 0.0
    return as_number(as_number(entry.purchase_price) / purchase_qty * as_number(entry.used_quantity))


def total_cost(ingredients: Iterable[Ingredient]) -> float:
    total = 0.0
    for it in ingredients:
        total += as_number(it.cost)
    return as_number(total)


def cost_per_unit(total: float, total_units: float) -> float:
    units = as_number(total_units)
    if units <= 0:
        return 0.0
    return as_number(as_number(total) / units)


def update_recipe_calculations(recipe: Recipe) -> Recipe:
    """Return a copy of ``recipe`` with every derived cost field recomputed."""
    ingredients = tuple(replace(i, cost=ingredient_cost(i)) for i in recipe.ingredients)
    total = total_cost(ingredients)
    return replace(
        recipe,
        ingredients=ingredients,
        total_cost=total,
        cost_per_unit=cost_per_unit(total, recipe.total_units),
    )
