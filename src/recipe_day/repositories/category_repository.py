"""Category repository."""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from recipe_day.models import Category, restricting_dependents

from .base import Repository


class CategoryRepository(Repository[Category]):
    """Storage access for categories, ordered by title."""

    model = Category
    default_order = (Category.title,)

    def exists_by_title(self, title: str, session: Optional[Session] = None) -> bool:
        """True if a category has exactly this title (case-sensitive)."""
        return self.exists_by(session=session, title=title)

    def restricting_dependents(
        self, category_id: int, session: Optional[Session] = None
    ) -> Dict[str, int]:
        """
        Count rows that forbid deleting this category.

        Returns:
            Mapping of child table to count, e.g. {"recipes": 2}; empty if none
        """

        def _impl(sess: Session) -> Dict[str, int]:
            return restricting_dependents(sess, Category.__tablename__, category_id)

        return self._run("restricting_dependents", _impl, session)
