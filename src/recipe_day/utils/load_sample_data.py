"""
Utility to load sample catalog data for development and testing.

The JSON file has three lists:
    categories: [{"title", "description", "icon"}]
    recipes:    [{"title", "category", ...recipe fields}]  (category by title)
    favorites:  [{"recipe", "user_name", "comment"}]       (recipe by title)

Categories whose title already exists are reused rather than duplicated.
Any record rejected by validation aborts the load with ValidationError.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, Optional, Union

from recipe_day.models import Category, Favorite, Recipe
from recipe_day.services.catalog import CatalogServices, build_services
from recipe_day.services.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_DATA = Path(__file__).resolve().parents[3] / "test_data" / "sample_data.json"


def load_sample_data(
    json_file_path: Union[str, Path, None] = None,
    services: Optional[CatalogServices] = None,
) -> Dict[str, int]:
    """
    Load sample data from a JSON file through the catalog services.

    Args:
        json_file_path: Path to the JSON file (defaults to test_data/sample_data.json)
        services: Services to load through (defaults to build_services())

    Returns:
        Dictionary with counts of created entities

    Raises:
        ValidationError: If a record fails validation
        KeyError: If a recipe or favorite references an unknown title
    """
    path = Path(json_file_path) if json_file_path else DEFAULT_SAMPLE_DATA
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if services is None:
        services = build_services()

    counts = {"categories": 0, "recipes": 0, "favorites": 0}
    category_map = {}  # title -> Category
    recipe_map = {}  # title -> Recipe

    for existing in services.categories.list():
        category_map[existing.title] = existing

    # 1. Categories
    for cat_data in data.get("categories", []):
        if cat_data["title"] in category_map:
            continue
        category = Category(
            title=cat_data["title"],
            description=cat_data.get("description"),
            icon=cat_data.get("icon"),
        )
        errors = services.categories.validate(category)
        if errors:
            raise ValidationError(errors)
        category_map[category.title] = services.categories.save(category)
        counts["categories"] += 1

    # 2. Recipes (category by title)
    for recipe_data in data.get("recipes", []):
        rating = recipe_data.get("rating")
        recipe = Recipe(
            title=recipe_data["title"],
            description=recipe_data.get("description"),
            category=category_map[recipe_data["category"]],
            preparation_time=recipe_data["preparation_time"],
            difficulty=recipe_data["difficulty"],
            rating=Decimal(str(rating)) if rating is not None else None,
            ingredients=recipe_data["ingredients"],
            instructions=recipe_data["instructions"],
            servings=recipe_data["servings"],
        )
        recipe_map[recipe.title] = services.recipes.save(recipe).unwrap()
        counts["recipes"] += 1

    # 3. Favorites (recipe by title)
    for fav_data in data.get("favorites", []):
        favorite = Favorite(
            recipe=recipe_map[fav_data["recipe"]],
            user_name=fav_data["user_name"],
            comment=fav_data.get("comment"),
        )
        services.favorites.save(favorite).unwrap()
        counts["favorites"] += 1

    logger.info(f"Loaded sample data from {path}: {counts}")
    return counts
