"""
Repositories - the storage collaborators used by the service layer.

Each repository wraps one model behind find/save/delete operations plus
the filtered and sorted lookups its service needs. Services receive
repositories through their constructors.
"""

from .base import Repository
from .category_repository import CategoryRepository
from .favorite_repository import FavoriteRepository
from .recipe_repository import RecipeRepository

__all__ = [
    "Repository",
    "CategoryRepository",
    "RecipeRepository",
    "FavoriteRepository",
]
