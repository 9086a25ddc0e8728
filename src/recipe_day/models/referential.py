"""
Referential-action policy for catalog relationships.

Each parent/child relationship is declared once here. Models derive their
foreign key ``ondelete`` clause and ORM cascade from these declarations,
and the service layer uses ``restricting_dependents`` to refuse deletes
that a RESTRICT relationship forbids.

Relationships:
    categories 1--* recipes    RESTRICT (a category in use cannot be deleted)
    recipes    1--* favorites  CASCADE  (deleting a recipe removes its favorites)
"""

from dataclasses import dataclass
from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .base import Base
from .enums import ReferentialAction


@dataclass(frozen=True)
class RelationshipPolicy:
    """
    Declared delete behaviour between a parent table and a child table.

    Attributes:
        parent: Parent table name
        child: Child table name
        foreign_key: Column on the child table referencing ``parent.id``
        action: ReferentialAction applied when the parent is deleted
    """

    parent: str
    child: str
    foreign_key: str
    action: ReferentialAction

    @property
    def ondelete(self) -> str:
        """SQL ``ON DELETE`` clause for the child's foreign key."""
        return self.action.value.upper()

    @property
    def orm_cascade(self) -> str:
        """ORM cascade string for the parent's collection of children."""
        if self.action is ReferentialAction.CASCADE:
            return "all, delete-orphan"
        return "save-update, merge"

    @property
    def target(self) -> str:
        """ForeignKey target column (``parent.id``)."""
        return f"{self.parent}.id"


RECIPE_CATEGORY = RelationshipPolicy(
    parent="categories",
    child="recipes",
    foreign_key="category_id",
    action=ReferentialAction.RESTRICT,
)

FAVORITE_RECIPE = RelationshipPolicy(
    parent="recipes",
    child="favorites",
    foreign_key="recipe_id",
    action=ReferentialAction.CASCADE,
)

RELATIONSHIP_POLICIES: List[RelationshipPolicy] = [RECIPE_CATEGORY, FAVORITE_RECIPE]


def policies_for_parent(parent: str) -> List[RelationshipPolicy]:
    """Return every declared policy whose parent is the given table."""
    return [policy for policy in RELATIONSHIP_POLICIES if policy.parent == parent]


def count_dependents(session: Session, policy: RelationshipPolicy, parent_id: int) -> int:
    """
    Count child rows referencing a parent row under a policy.

    Args:
        session: Database session
        policy: Relationship to inspect
        parent_id: ID of the parent row

    Returns:
        Number of child rows whose foreign key equals parent_id
    """
    child_table = Base.metadata.tables[policy.child]
    column = child_table.c[policy.foreign_key]
    stmt = select(func.count()).select_from(child_table).where(column == parent_id)
    return session.execute(stmt).scalar_one()


def restricting_dependents(session: Session, parent: str, parent_id: int) -> Dict[str, int]:
    """
    Find dependents that block deleting a parent row.

    Only RESTRICT relationships are considered; CASCADE dependents are
    removed along with the parent and never block.

    Args:
        session: Database session
        parent: Parent table name
        parent_id: ID of the parent row

    Returns:
        Mapping of child table name to count, for non-zero counts only
    """
    blocking = {}
    for policy in policies_for_parent(parent):
        if policy.action is not ReferentialAction.RESTRICT:
            continue
        count = count_dependents(session, policy, parent_id)
        if count > 0:
            blocking[policy.child] = count
    return blocking
