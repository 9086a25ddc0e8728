"""
Favorite Service - per-user recipe bookmarks.

Business rule: a user favorites a recipe at most once, with user names
compared case-insensitively. The rule is checked when a favorite is
created; edits of an existing favorite skip it, since the favorite being
edited is itself the match. A unique functional index on
(recipe_id, lower(user_name)) closes the race between check and insert.
"""

from typing import List, Optional

from recipe_day.models import Favorite
from recipe_day.repositories import FavoriteRepository
from recipe_day.utils.constants import ERROR_DUPLICATE_FAVORITE, ERROR_NOT_FOUND
from recipe_day.utils.validators import validate_favorite

from .dto import SaveResult
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class FavoriteService:
    """
    Service for favorite operations.

    Args:
        favorites: Storage collaborator for favorites
    """

    def __init__(self, favorites: FavoriteRepository):
        self._favorites = favorites

    def list(self) -> List[Favorite]:
        """All favorites, most recently added first."""
        return self._favorites.find_all()

    def get(self, favorite_id: int) -> Optional[Favorite]:
        """Favorite by id, or None if absent."""
        return self._favorites.find_by_id(favorite_id)

    def by_user(self, name: str) -> List[Favorite]:
        """Favorites whose user name contains name (case-insensitive), newest first."""
        return self._favorites.find_by_user(name)

    def by_recipe(self, recipe_id: int) -> List[Favorite]:
        """Favorites of one recipe, newest first."""
        return self._favorites.find_by_recipe(recipe_id)

    def is_favorite(self, recipe_id: int, user_name: str) -> bool:
        """
        True iff the user already favorited the recipe.

        User names are compared case-insensitively (Unicode casefold).
        """
        wanted = user_name.casefold()
        return any(
            favorite.user_name.casefold() == wanted
            for favorite in self._favorites.find_by_recipe(recipe_id)
        )

    def save(self, favorite: Favorite) -> SaveResult[Favorite]:
        """
        Validate and persist a favorite.

        A new favorite (no id) is rejected on the user_name field when the
        same user already favorited the same recipe.

        Returns:
            SaveResult with the persisted favorite, or with the rejected
            input and its field errors (nothing persisted)
        """
        errors = validate_favorite(favorite)
        is_new = favorite.id is None

        if not errors and is_new:
            recipe_id = favorite.recipe.id if favorite.recipe is not None else favorite.recipe_id
            if recipe_id is not None and self.is_favorite(recipe_id, favorite.user_name):
                errors["user_name"] = ERROR_DUPLICATE_FAVORITE
                log_operation(
                    logger,
                    operation="create_favorite",
                    outcome="duplicate",
                    recipe_id=recipe_id,
                    user_name=favorite.user_name,
                )
                return self._reject(favorite, errors)

        if errors:
            log_operation(
                logger,
                operation="save_favorite",
                outcome="validation_failed",
                favorite_id=favorite.id,
                fields=sorted(errors),
            )
            return self._reject(favorite, errors)

        saved = self._favorites.save(favorite)
        if saved is None:
            log_operation(
                logger, operation="update_favorite", outcome="not_found", favorite_id=favorite.id
            )
            return self._reject(favorite, {"id": ERROR_NOT_FOUND}, unlink=True)

        log_operation(
            logger,
            operation="create_favorite" if is_new else "update_favorite",
            outcome="success",
            favorite_id=saved.id,
            recipe_id=saved.recipe_id,
        )
        return SaveResult(saved)

    def _reject(self, favorite: Favorite, errors, unlink: bool = False) -> SaveResult[Favorite]:
        # Unstored input stays out of the recipe's in-memory favorites;
        # recipe_id still names the chosen recipe
        if (unlink or favorite.id is None) and favorite.recipe is not None:
            recipe = favorite.recipe
            recipe.remove_favorite(favorite)
            favorite.recipe_id = recipe.id
        return SaveResult(favorite, errors)

    def delete(self, favorite_id: int) -> bool:
        """
        Remove a favorite, unlinking it from its recipe first.

        Returns:
            True if the favorite existed, False otherwise
        """
        deleted = self._favorites.delete_by_id(favorite_id)
        log_operation(
            logger,
            operation="delete_favorite",
            outcome="success" if deleted else "not_found",
            favorite_id=favorite_id,
        )
        return deleted
