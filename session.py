"""The current-recipe state object shared by the UI."""

import logging
from dataclasses import replace

from calc import update_recipe_calculations
from models import Recipe, can_generate_report, is_blank, new_recipe, recipe_to_dict
from storage import RecipeStorage

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Owns the one working recipe and mirrors every change into storage."""

    def __init__(self, storage: RecipeStorage, recipe: Recipe | None = None):
        self.storage = storage
        self.recipe = update_recipe_calculations(recipe or new_recipe())
        self._saved = None

    @classmethod
    def start(cls, storage: RecipeStorage) -> "CalculatorSession":
        stored = storage.load()
        session = cls(storage, stored)
        if stored is not None:
            session._saved = recipe_to_dict(session.recipe)
            logger.info("Resumed recipe %r with %d ingredient(s)",
                        session.recipe.name, len(session.recipe.ingredients))
        return session

    def apply(self, recipe: Recipe) -> Recipe:
        """Recompute ``recipe``, make it current and persist it."""
        self.recipe = update_recipe_calculations(recipe)
        if not is_blank(self.recipe):
            data = recipe_to_dict(self.recipe)
            if data != self._saved:
                self.storage.save(self.recipe)
                self._saved = data
        return self.recipe

    def generate_report(self) -> Recipe:
        if can_generate_report(self.recipe):
            return self.apply(replace(self.recipe, show_results=True))
        return self.recipe

    def reset(self) -> Recipe:
        self.storage.clear()
        self._saved = None
        self.recipe = new_recipe()
        logger.info("Started a new calculation")
        return self.recipe
