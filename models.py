"""Recipe and ingredient records used by the calculator."""

import math
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple, Union

UNIT_OPTIONS = ["kg", "g", "L", "ml", "piece", "cup", "tbsp", "tsp", "oz", "lb"]

DETAILED = "detailed"
DIRECT = "direct"


def new_id() -> str:
    return uuid.uuid4().hex


def as_number(value: Any) -> float:
    """Coerce user input to a finite float, falling back to 0.0 for anything unusable."""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


@dataclass(frozen=True)
class DetailedEntry:
    purchase_price: float = 0.0
    purchase_quantity: float = 0.0
    purchase_unit: str = "g"
    used_quantity: float = 0.0
    used_unit: str = "g"


@dataclass(frozen=True)
class DirectEntry:
    direct_cost: float = 0.0


Entry = Union[DetailedEntry, DirectEntry]


@dataclass(frozen=True)
class Ingredient:
    id: str = field(default_factory=new_id)
    name: str = ""
    entry: Entry = field(default_factory=DetailedEntry)
    cost: float = 0.0

    @property
    def entry_mode(self) -> str:
        return DIRECT if isinstance(self.entry, DirectEntry) else DETAILED


@dataclass(frozen=True)
class Recipe:
    id: str = field(default_factory=new_id)
    name: str = ""
    total_units: float = 0.0
    ingredients: Tuple[Ingredient, ...] = ()
    total_cost: float = 0.0
    cost_per_unit: float = 0.0
    show_results: bool = False


def new_recipe() -> Recipe:
    return Recipe()


def new_ingredient() -> Ingredient:
    return Ingredient()


# Edits ------------------------------------------------------------------------

def with_entry_mode(ingredient: Ingredient, mode: str) -> Ingredient:
    """Switch an ingredient to ``mode``; a fresh payload replaces the old one."""
    if mode == ingredient.entry_mode:
        return ingredient
    entry = DirectEntry() if mode == DIRECT else DetailedEntry()
    return replace(ingredient, entry=entry)


def with_purchase_unit(entry: DetailedEntry, unit: str) -> DetailedEntry:
    """Change the purchase unit; the used unit follows when it matched the old one."""
    if unit == entry.purchase_unit:
        return entry
    used_unit = unit if entry.used_unit == entry.purchase_unit else entry.used_unit
    return replace(entry, purchase_unit=unit, used_unit=used_unit)


def add_ingredient(recipe: Recipe, ingredient: Ingredient | None = None) -> Recipe:
    ingredient = ingredient or new_ingredient()
    return replace(recipe, ingredients=recipe.ingredients + (ingredient,))


def remove_ingredient(recipe: Recipe, ingredient_id: str) -> Recipe:
    kept = tuple(i for i in recipe.ingredients if i.id != ingredient_id)
    return replace(recipe, ingredients=kept)


def replace_ingredient(recipe: Recipe, ingredient: Ingredient) -> Recipe:
    updated = tuple(ingredient if i.id == ingredient.id else i for i in recipe.ingredients)
    return replace(recipe, ingredients=updated)


def is_blank(recipe: Recipe) -> bool:
    return not recipe.name and not recipe.ingredients and recipe.total_units <= 0


def can_generate_report(recipe: Recipe) -> bool:
    return bool(recipe.name) and bool(recipe.ingredients) and recipe.total_units > 0


# Codec ------------------------------------------------------------------------
# Key names match the documents written by earlier versions of the tool.

def ingredient_to_dict(ingredient: Ingredient) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": ingredient.id,
        "name": ingredient.name,
        "entryMode": ingredient.entry_mode,
    }
    entry = ingredient.entry
    if isinstance(entry, DirectEntry):
        data["directCost"] = entry.direct_cost
    else:
        data.update({
            "purchaseUnit": entry.purchase_unit,
            "purchasePrice": entry.purchase_price,
            "purchaseQuantity": entry.purchase_quantity,
            "usedQuantity": entry.used_quantity,
            "usedUnit": entry.used_unit,
        })
    data["cost"] = ingredient.cost
    return data


def ingredient_from_dict(data: Dict[str, Any]) -> Ingredient:
    if data.get("entryMode") == DIRECT:
        entry: Entry = DirectEntry(direct_cost=as_number(data.get("directCost")))
    else:
        entry = DetailedEntry(
            purchase_price=as_number(data.get("purchasePrice")),
            purchase_quantity=as_number(data.get("purchaseQuantity")),
            purchase_unit=str(data.get("purchaseUnit") or "g"),
            used_quantity=as_number(data.get("usedQuantity")),
            used_unit=str(data.get("usedUnit") or "g"),
        )
    return Ingredient(
        id=str(data.get("id") or new_id()),
        name=str(data.get("name") or ""),
        entry=entry,
        cost=as_number(data.get("cost")),
    )


def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "ingredients": [ingredient_to_dict(i) for i in recipe.ingredients],
        "totalUnits": recipe.total_units,
        "totalCost": recipe.total_cost,
        "costPerUnit": recipe.cost_per_unit,
        "showResults": recipe.show_results,
    }


def recipe_from_dict(data: Dict[str, Any]) -> Recipe:
    items = data.get("ingredients")
    if not isinstance(items, list):
        items = []
    return Recipe(
        id=str(data.get("id") or new_id()),
        name=str(data.get("name") or ""),
        total_units=as_number(data.get("totalUnits")),
        ingredients=tuple(ingredient_from_dict(d) for d in items if isinstance(d, dict)),
        total_cost=as_number(data.get("totalCost")),
        cost_per_unit=as_number(data.get("costPerUnit")),
        show_results=bool(data.get("showResults", False)),
    )
