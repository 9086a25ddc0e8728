"""
Category Service - catalog operations for recipe categories.

Title uniqueness is the caller's pre-check: call ``validate`` (or
``exists``) before ``save``. A unique index on categories.title backs it
up at the storage boundary.

Deletion is guarded: a category still used by recipes is never deleted
(categories 1--* recipes is a RESTRICT relationship). The lookup, the
dependent count and the delete run in one transaction.
"""

from typing import Dict, List, Optional

from recipe_day.models import Category
from recipe_day.repositories import CategoryRepository
from recipe_day.utils.constants import ERROR_DUPLICATE_CATEGORY, ERROR_NOT_FOUND
from recipe_day.utils.validators import validate_category

from .dto import DeleteOutcome
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class CategoryService:
    """
    Service for category operations.

    Args:
        categories: Storage collaborator for categories
    """

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def list(self) -> List[Category]:
        """All categories ordered by title ascending."""
        return self._categories.find_all()

    def get(self, category_id: int) -> Optional[Category]:
        """Category by id, or None if absent."""
        return self._categories.find_by_id(category_id)

    def exists(self, title: str) -> bool:
        """True iff a stored category has exactly this title."""
        return self._categories.exists_by_title(title)

    def validate(self, category: Category) -> Dict[str, str]:
        """
        Check a category the way a create/update form does before saving.

        Field constraints come from validate_category. The title must also
        be unique: on create any existing match is rejected, on update only
        a changed title that already exists is rejected, and an id with no
        stored category is rejected on the id field.

        Returns:
            Mapping of field name to error message (empty when valid)
        """
        errors = validate_category(category)
        if "title" in errors:
            return errors

        if category.id is None:
            if self.exists(category.title):
                errors["title"] = ERROR_DUPLICATE_CATEGORY
        else:
            stored = self.get(category.id)
            if stored is None:
                errors["id"] = ERROR_NOT_FOUND
            elif stored.title != category.title and self.exists(category.title):
                errors["title"] = ERROR_DUPLICATE_CATEGORY

        if errors:
            log_operation(
                logger,
                operation="validate_category",
                outcome="validation_failed",
                category_id=category.id,
                fields=sorted(errors),
            )
        return errors

    def save(self, category: Category) -> Optional[Category]:
        """
        Persist a category and return it with its id assigned.

        No uniqueness check happens here; see validate(). Returns None,
        writing nothing, when category.id names no stored category.
        """
        is_new = category.id is None
        saved = self._categories.save(category)
        if saved is None:
            log_operation(
                logger,
                operation="update_category",
                outcome="not_found",
                category_id=category.id,
            )
            return None

        log_operation(
            logger,
            operation="create_category" if is_new else "update_category",
            outcome="success",
            category_id=saved.id,
        )
        return saved

    def delete(self, category_id: int) -> DeleteOutcome:
        """
        Delete a category unless recipes still reference it.

        Returns:
            DeleteOutcome.NOT_FOUND if absent, DeleteOutcome.IN_USE if any
            recipe references it (nothing deleted), else DeleteOutcome.DELETED
        """
        with self._categories.transaction() as session:
            category = self._categories.find_by_id(category_id, session=session)
            if category is None:
                log_operation(
                    logger,
                    operation="delete_category",
                    outcome=DeleteOutcome.NOT_FOUND.value,
                    category_id=category_id,
                )
                return DeleteOutcome.NOT_FOUND

            dependents = self._categories.restricting_dependents(category_id, session=session)
            if dependents:
                log_operation(
                    logger,
                    operation="delete_category",
                    outcome=DeleteOutcome.IN_USE.value,
                    category_id=category_id,
                    dependents=dependents,
                )
                return DeleteOutcome.IN_USE

            self._categories.delete_by_id(category_id, session=session)

        log_operation(
            logger,
            operation="delete_category",
            outcome=DeleteOutcome.DELETED.value,
            category_id=category_id,
        )
        return DeleteOutcome.DELETED
