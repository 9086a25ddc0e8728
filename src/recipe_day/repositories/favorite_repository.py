"""Favorite repository. Lookups return favorites most recent first."""

from typing import List, Optional

from sqlalchemy.orm import Session

from recipe_day.models import Favorite, Recipe

from .base import Repository


class FavoriteRepository(Repository[Favorite]):
    """Storage access for favorites."""

    model = Favorite
    default_order = (Favorite.added_date.desc(), Favorite.id.desc())

    def _apply_links(self, persistent: Favorite, entity: Favorite, sess: Session) -> None:
        if entity.recipe is not None and entity.recipe.id is not None:
            persistent.link_recipe(sess.get(Recipe, entity.recipe.id))

    def _before_delete(self, entity: Favorite) -> None:
        # Unlink so the recipe's in-session favorites no longer list it
        if entity.recipe is not None:
            entity.recipe.remove_favorite(entity)

    def find_by_user(self, user_name: str, session: Optional[Session] = None) -> List[Favorite]:
        """Favorites whose user_name contains the given text, case-insensitive."""

        def _impl(sess: Session) -> List[Favorite]:
            return (
                sess.query(Favorite)
                .filter(Favorite.user_name.icontains(user_name, autoescape=True))
                .order_by(*self.default_order)
                .all()
            )

        return self._run("find_by_user", _impl, session)

    def find_by_recipe(self, recipe_id: int, session: Optional[Session] = None) -> List[Favorite]:
        """Favorites of one recipe."""

        def _impl(sess: Session) -> List[Favorite]:
            return (
                sess.query(Favorite)
                .filter(Favorite.recipe_id == recipe_id)
                .order_by(*self.default_order)
                .all()
            )

        return self._run("find_by_recipe", _impl, session)
