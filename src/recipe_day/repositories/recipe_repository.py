"""
Recipe repository.

Lookups return recipes ordered by title unless stated otherwise.
Random selection is done by the database where the dialect has a random
function, falling back to a count plus random offset.
"""

import logging
import random
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from recipe_day.models import Category, Recipe

from .base import Repository

logger = logging.getLogger(__name__)

# Dialect name -> SQL function producing a random sort key
_RANDOM_FUNCTIONS = {
    "sqlite": func.random,
    "postgresql": func.random,
    "mysql": func.rand,
    "mariadb": func.rand,
    "mssql": func.newid,
}


class RecipeRepository(Repository[Recipe]):
    """Storage access for recipes."""

    model = Recipe
    default_order = (Recipe.title,)

    def _apply_links(self, persistent: Recipe, entity: Recipe, sess: Session) -> None:
        if entity.category is not None and entity.category.id is not None:
            persistent.category = sess.get(Category, entity.category.id)

    def find_by_category(self, category_id: int, session: Optional[Session] = None) -> List[Recipe]:
        """Recipes in a category, title ascending."""

        def _impl(sess: Session) -> List[Recipe]:
            return (
                sess.query(Recipe)
                .filter(Recipe.category_id == category_id)
                .order_by(Recipe.title)
                .all()
            )

        return self._run("find_by_category", _impl, session)

    def search_by_title(self, term: str, session: Optional[Session] = None) -> List[Recipe]:
        """
        Recipes whose title contains term, case-insensitive, title ascending.

        The term is matched literally: LIKE wildcards in it are escaped.
        """

        def _impl(sess: Session) -> List[Recipe]:
            return (
                sess.query(Recipe)
                .filter(Recipe.title.icontains(term, autoescape=True))
                .order_by(Recipe.title)
                .all()
            )

        return self._run("search_by_title", _impl, session)

    def find_by_max_preparation_time(
        self, max_minutes: int, session: Optional[Session] = None
    ) -> List[Recipe]:
        """Recipes with preparation_time <= max_minutes, quickest first, then by title."""

        def _impl(sess: Session) -> List[Recipe]:
            return (
                sess.query(Recipe)
                .filter(Recipe.preparation_time <= max_minutes)
                .order_by(Recipe.preparation_time, Recipe.title)
                .all()
            )

        return self._run("find_by_max_preparation_time", _impl, session)

    def find_by_difficulty(self, difficulty: int, session: Optional[Session] = None) -> List[Recipe]:
        """Recipes with exactly this difficulty, title ascending."""

        def _impl(sess: Session) -> List[Recipe]:
            return (
                sess.query(Recipe)
                .filter(Recipe.difficulty == difficulty)
                .order_by(Recipe.title)
                .all()
            )

        return self._run("find_by_difficulty", _impl, session)

    def find_random(self, session: Optional[Session] = None) -> Optional[Recipe]:
        """
        Pick one recipe uniformly at random.

        Returns:
            A Recipe, or None when there are no recipes
        """

        def _impl(sess: Session) -> Optional[Recipe]:
            dialect = sess.get_bind().dialect.name
            random_function = _RANDOM_FUNCTIONS.get(dialect)
            if random_function is not None:
                return sess.query(Recipe).order_by(random_function()).limit(1).first()

            logger.debug(f"No random function for dialect '{dialect}', using offset selection")
            total = sess.query(Recipe).count()
            if total == 0:
                return None
            offset = random.randrange(total)
            return sess.query(Recipe).order_by(Recipe.id).offset(offset).limit(1).first()

        return self._run("find_random", _impl, session)
