"""Wiring of repositories into the three catalog services."""

from dataclasses import dataclass
from typing import Optional

from recipe_day.repositories import CategoryRepository, FavoriteRepository, RecipeRepository

from .category_service import CategoryService
from .database import SessionScope
from .favorite_service import FavoriteService
from .recipe_service import RecipeService


@dataclass
class CatalogServices:
    """The service objects a caller (CLI, UI) works with."""

    categories: CategoryService
    recipes: RecipeService
    favorites: FavoriteService


def build_services(scope: Optional[SessionScope] = None) -> CatalogServices:
    """
    Create the catalog services over one storage scope.

    Args:
        scope: Session scope shared by all repositories. If None, the global
               services.database.session_scope is used.

    Returns:
        CatalogServices bundle
    """
    return CatalogServices(
        categories=CategoryService(CategoryRepository(scope)),
        recipes=RecipeService(RecipeRepository(scope)),
        favorites=FavoriteService(FavoriteRepository(scope)),
    )
