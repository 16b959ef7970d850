import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from models import DirectEntry, Ingredient, Recipe
from storage import RECIPE_STORAGE_KEY, JsonStore, RecipeStorage


def test_json_store_roundtrip_and_delete(tmp_path):
    store = JsonStore(tmp_path / "data")
    assert store.get("k") is None
    store.set("k", {"a": 1})
    assert (tmp_path / "data" / "k.json").exists()
    assert store.get("k") == {"a": 1}
    store.delete("k")
    store.delete("k")
    assert store.get("k") is None


def test_recipe_saved_under_fixed_key(tmp_path):
    storage = RecipeStorage(JsonStore(tmp_path))
    recipe = Recipe(name="Brownies", total_units=16,
                    ingredients=(Ingredient(name="Cocoa", entry=DirectEntry(direct_cost=40)),))
    storage.save(recipe)

    raw = json.loads((tmp_path / f"{RECIPE_STORAGE_KEY}.json").read_text(encoding="utf-8"))
    assert raw["name"] == "Brownies"
    assert storage.load() == recipe


def test_load_missing_and_clear(tmp_path):
    storage = RecipeStorage(JsonStore(tmp_path))
    assert storage.load() is None
    storage.save(Recipe(name="x"))
    storage.clear()
    assert storage.load() is None


def test_corrupt_document_loads_as_absent(tmp_path, caplog):
    (tmp_path / f"{RECIPE_STORAGE_KEY}.json").write_text("{not json", encoding="utf-8")
    storage = RecipeStorage(JsonStore(tmp_path))
    with caplog.at_level(logging.WARNING):
        assert storage.load() is None
    assert "unreadable" in caplog.text


def test_non_object_document_loads_as_absent(tmp_path):
    (tmp_path / f"{RECIPE_STORAGE_KEY}.json").write_text("[1, 2]", encoding="utf-8")
    assert RecipeStorage(JsonStore(tmp_path)).load() is None


def test_invalid_utf8_document_loads_as_absent(tmp_path, caplog):
    (tmp_path / f"{RECIPE_STORAGE_KEY}.json").write_bytes(b'{"name": "\xff\xfe"}')
    with caplog.at_level(logging.WARNING):
        assert RecipeStorage(JsonStore(tmp_path)).load() is None
    assert "unreadable" in caplog.text


def test_document_with_bad_ingredients_field_loads(tmp_path):
    (tmp_path / f"{RECIPE_STORAGE_KEY}.json").write_text('{"name": "Buns", "ingredients": 5}',
                                                        encoding="utf-8")
    recipe = RecipeStorage(JsonStore(tmp_path)).load()
    assert recipe.name == "Buns" and recipe.ingredients == ()
