"""JSON file persistence for the current recipe."""

import json
import logging
from pathlib import Path
from typing import Any

from models import Recipe, recipe_from_dict, recipe_to_dict

logger = logging.getLogger(__name__)

RECIPE_STORAGE_KEY = "bakingCalculator_currentRecipe"


class JsonStore:
    """String-keyed store keeping one ``<key>.json`` document per key."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def set(self, key: str, value: Any) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self._path(key), "w", encoding="utf-8") as f:
            json.dump(value, f, ensure_ascii=False, indent=2)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class RecipeStorage:
    def __init__(self, store: JsonStore, key: str = RECIPE_STORAGE_KEY):
        self.store = store
        self.key = key

    def save(self, recipe: Recipe) -> None:
        self.store.set(self.key, recipe_to_dict(recipe))
        logger.debug("Saved recipe %s under %r", recipe.id, self.key)

    def load(self) -> Recipe | None:
        try:
            data = self.store.get(self.key)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable recipe stored under %r: %s", self.key, e)
            return None
        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring recipe stored under %r: expected an object", self.key)
            return None
        recipe = recipe_from_dict(data)
        logger.debug("Loaded recipe %s from %r", recipe.id, self.key)
        return recipe

    def clear(self) -> None:
        self.store.delete(self.key)
        logger.debug("Cleared %r", self.key)
