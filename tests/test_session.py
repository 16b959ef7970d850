import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from models import DetailedEntry, DirectEntry, Ingredient, Recipe
from session import CalculatorSession
from storage import JsonStore, RecipeStorage


@pytest.fixture
def storage(tmp_path):
    return RecipeStorage(JsonStore(tmp_path))


def cookies():
    return Recipe(name="Cookies", total_units=20, ingredients=(
        Ingredient(name="Flour", entry=DetailedEntry(purchase_price=100, purchase_quantity=1000,
                                                     used_quantity=250)),
        Ingredient(name="Chips", entry=DirectEntry(direct_cost=15)),
    ))


def test_start_without_stored_recipe(storage):
    session = CalculatorSession.start(storage)
    assert session.recipe.name == ""
    assert session.recipe.ingredients == ()


def test_apply_recomputes_and_saves(storage):
    session = CalculatorSession.start(storage)
    out = session.apply(cookies())
    assert out.total_cost == pytest.approx(40.0)
    assert out.cost_per_unit == pytest.approx(2.0)
    assert storage.load() == out


def test_blank_recipe_is_not_saved(storage):
    session = CalculatorSession.start(storage)
    session.apply(Recipe())
    assert storage.load() is None


def test_start_resumes_stored_recipe(storage):
    CalculatorSession(storage).apply(cookies())
    resumed = CalculatorSession.start(storage)
    assert resumed.recipe.name == "Cookies"
    assert resumed.recipe.total_cost == pytest.approx(40.0)


def test_generate_report_requires_complete_recipe(storage):
    session = CalculatorSession.start(storage)
    session.apply(replace(cookies(), total_units=0))
    assert session.generate_report().show_results is False

    session.apply(cookies())
    assert session.generate_report().show_results is True
    assert storage.load().show_results is True


def test_reset_clears_storage(storage):
    session = CalculatorSession.start(storage)
    old = session.apply(cookies())
    fresh = session.reset()
    assert fresh.name == "" and fresh.id != old.id
    assert session.recipe is fresh
    assert storage.load() is None
