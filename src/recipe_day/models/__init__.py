"""
Database models package.

This package contains the SQLAlchemy ORM models for the recipe catalog
and the referential-action policy that ties them together.
"""

from .base import Base, BaseModel
from .category import Category
from .enums import ReferentialAction
from .favorite import Favorite
from .recipe import Recipe
from .referential import (
    FAVORITE_RECIPE,
    RECIPE_CATEGORY,
    RELATIONSHIP_POLICIES,
    RelationshipPolicy,
    restricting_dependents,
)

__all__ = [
    "Base",
    "BaseModel",
    "Category",
    "Recipe",
    "Favorite",
    "ReferentialAction",
    "RelationshipPolicy",
    "RELATIONSHIP_POLICIES",
    "RECIPE_CATEGORY",
    "FAVORITE_RECIPE",
    "restricting_dependents",
]
