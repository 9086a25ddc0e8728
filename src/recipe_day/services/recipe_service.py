"""
Recipe Service - validated mutation, search and selection of recipes.

Field ranges (preparation time, difficulty, servings, rating) and text
lengths are checked before anything is persisted; violations come back as
field errors on the SaveResult. Deleting a recipe is never blocked and
removes its favorites with it.
"""

from typing import List, Optional

from recipe_day.models import Recipe
from recipe_day.repositories import RecipeRepository
from recipe_day.utils.constants import ERROR_NOT_FOUND, QUICK_RECIPE_MAX_MINUTES
from recipe_day.utils.validators import validate_recipe

from .dto import SaveResult
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class RecipeService:
    """
    Service for recipe operations.

    Args:
        recipes: Storage collaborator for recipes
    """

    def __init__(self, recipes: RecipeRepository):
        self._recipes = recipes

    def list(self) -> List[Recipe]:
        """All recipes ordered by title ascending."""
        return self._recipes.find_all()

    def get(self, recipe_id: int) -> Optional[Recipe]:
        """Recipe by id, or None if absent."""
        return self._recipes.find_by_id(recipe_id)

    def save(self, recipe: Recipe) -> SaveResult[Recipe]:
        """
        Validate and persist a recipe.

        Returns:
            SaveResult with the persisted recipe, or with the rejected input
            and its field errors (nothing persisted). An id with no stored
            recipe is rejected on the id field.
        """
        errors = validate_recipe(recipe)
        if errors:
            log_operation(
                logger,
                operation="save_recipe",
                outcome="validation_failed",
                recipe_id=recipe.id,
                fields=sorted(errors),
            )
            return SaveResult(recipe, errors)

        is_new = recipe.id is None
        saved = self._recipes.save(recipe)
        if saved is None:
            log_operation(
                logger, operation="update_recipe", outcome="not_found", recipe_id=recipe.id
            )
            return SaveResult(recipe, {"id": ERROR_NOT_FOUND})

        log_operation(
            logger,
            operation="create_recipe" if is_new else "update_recipe",
            outcome="success",
            recipe_id=saved.id,
            category_id=saved.category_id,
        )
        return SaveResult(saved)

    def delete(self, recipe_id: int) -> bool:
        """
        Delete a recipe and, by cascade, all of its favorites.

        Returns:
            True if the recipe existed, False otherwise
        """
        deleted = self._recipes.delete_by_id(recipe_id)
        log_operation(
            logger,
            operation="delete_recipe",
            outcome="success" if deleted else "not_found",
            recipe_id=recipe_id,
        )
        return deleted

    def by_category(self, category_id: int) -> List[Recipe]:
        """Recipes in a category, title ascending."""
        return self._recipes.find_by_category(category_id)

    def search(self, term: str) -> List[Recipe]:
        """
        Recipes whose title contains term (case-insensitive), title ascending.

        The term is matched literally; an empty term matches every title,
        so callers decide how to treat blank input.
        """
        return self._recipes.search_by_title(term)

    def quick(self, max_minutes: int = QUICK_RECIPE_MAX_MINUTES) -> List[Recipe]:
        """Recipes ready within max_minutes, quickest first, ties by title."""
        return self._recipes.find_by_max_preparation_time(max_minutes)

    def by_difficulty(self, difficulty: int) -> List[Recipe]:
        """Recipes with exactly this difficulty, title ascending."""
        return self._recipes.find_by_difficulty(difficulty)

    def random_recipe(self) -> Optional[Recipe]:
        """One recipe chosen uniformly at random, or None if there are none."""
        recipe = self._recipes.find_random()
        logger.debug(f"Random recipe selected: {recipe!r}")
        return recipe
